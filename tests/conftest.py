"""
Pytest configuration and shared fixtures for the Duolingo client tests.

Clients are built on a real httpx.AsyncClient so respx can intercept the
requests they send.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from duolingo_client.client import DuolingoClient
from duolingo_client.config import settings

USERNAME = "learner"
PASSWORD = "hunter2"
USER_ID = 123456
TOKEN = "header.payload.signature"


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def duolingo_client(http_client: httpx.AsyncClient) -> DuolingoClient:
    """Logged-out client sharing the test httpx client."""
    return DuolingoClient(http_client)


@pytest.fixture
def login_url() -> str:
    return f"{settings.BASE_URL}/login"


@pytest.fixture
def profile_url() -> str:
    return f"{settings.BASE_URL}/users/{USERNAME}"


@pytest.fixture
def login_response() -> httpx.Response:
    """Accepted login: user id in the body, token in the jwt header."""
    return httpx.Response(
        200,
        json={"response": "OK", "username": USERNAME, "user_id": str(USER_ID)},
        headers={"jwt": TOKEN},
    )


@pytest.fixture
def make_profile() -> Callable[..., dict[str, Any]]:
    """Build a /users/{username} body, overriding top-level fields as needed."""

    def _make(**overrides: Any) -> dict[str, Any]:
        profile: dict[str, Any] = {
            "id": USER_ID,
            "username": USERNAME,
            "fullname": "Lea Learner",
            "site_streak": 12,
            "streak_extended_today": True,
            "inventory": {"streak_freeze": "2026-10-01 12:00:00.000000"},
            "learning_language": "es",
            "languages": [
                {
                    "language": "fr",
                    "language_string": "French",
                    "learning": True,
                    "level": 4,
                    "points": 300,
                },
                {
                    "language": "de",
                    "language_string": "German",
                    "learning": False,
                    "level": 9,
                    "points": 5000,
                },
                {
                    "language": "es",
                    "language_string": "Spanish",
                    "learning": True,
                    "level": 10,
                    "points": 1200,
                },
            ],
            "language_data": {
                "es": {
                    "language": "es",
                    "language_string": "Spanish",
                    "level": 10,
                    "skills": [
                        {"id": "skill-basics-1", "title": "Basics 1", "learned": True},
                        {"id": "skill-phrases", "title": "Phrases", "learned": False},
                        {"id": "skill-food", "title": "Food", "learned": False},
                    ],
                }
            },
        }
        profile.update(overrides)
        return profile

    return _make
