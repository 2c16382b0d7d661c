"""
Integration tests against the live Duolingo API.

Skipped unless DUOLINGO_TEST_USERNAME and DUOLINGO_TEST_PASSWORD are set. The
account should be learning at least one language.
"""

from __future__ import annotations

import os
from collections.abc import AsyncIterator

import pytest

from duolingo_client.client import DuolingoClient

USERNAME = os.getenv("DUOLINGO_TEST_USERNAME")
PASSWORD = os.getenv("DUOLINGO_TEST_PASSWORD")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (USERNAME and PASSWORD),
        reason="DUOLINGO_TEST_USERNAME and DUOLINGO_TEST_PASSWORD not set",
    ),
]


@pytest.fixture
async def live_client() -> AsyncIterator[DuolingoClient]:
    async with DuolingoClient() as client:
        assert USERNAME and PASSWORD
        await client.login(USERNAME, PASSWORD)
        yield client


@pytest.mark.asyncio
async def test_user_language_and_skill(live_client: DuolingoClient) -> None:
    """Walk from the user to its active language and first skill."""
    assert USERNAME
    user = await live_client.get_user(USERNAME)
    assert user.username.lower() == USERNAME.lower()
    assert user.active_language

    language = await live_client.get_language(user.active_language, USERNAME)
    assert language.skills

    skill = await live_client.get_skill(language.skills[0].id)
    assert skill.language == language.id


@pytest.mark.asyncio
async def test_translate(live_client: DuolingoClient) -> None:
    result = await live_client.translate("en", "es", ["dog", "cat"])

    assert len(result) == 2
