"""Unit tests for the schema -> domain mapping functions."""

from __future__ import annotations

from duolingo_client.mappers import map_language, map_skill, map_translations, map_user
from duolingo_client.schemas import (
    ProfileLanguageData,
    SkillResponse,
    UserProfileResponse,
)


def test_map_user_filters_and_sorts_languages() -> None:
    profile = UserProfileResponse.model_validate(
        {
            "id": 7,
            "username": "kenji",
            "languages": [
                {"language": "ko", "language_string": "Korean", "learning": True, "points": 10},
                {"language": "fr", "language_string": "French", "learning": False, "points": 99},
                {"language": "es", "language_string": "Spanish", "learning": True, "points": 40},
            ],
        }
    )

    user = map_user(profile)

    assert [language.id for language in user.languages] == ["es", "ko"]
    assert all(language.id != "fr" for language in user.languages)
    assert user.display_name == "kenji"
    assert user.active_language is None


def test_map_user_ignores_unknown_fields() -> None:
    profile = UserProfileResponse.model_validate(
        {"id": 7, "username": "kenji", "fullname": "Kenji S", "calendar": [1, 2, 3]}
    )

    assert map_user(profile).display_name == "Kenji S"


def test_map_language_keeps_only_id_and_title() -> None:
    data = ProfileLanguageData.model_validate(
        {
            "language": "ko",
            "language_string": "Korean",
            "skills": [
                {"id": "s2", "title": "Hangul 2", "strength": 0.5},
                {"id": "s1", "title": "Hangul 1", "strength": 1.0},
            ],
        }
    )

    language = map_language(data)

    assert language.id == "ko"
    assert language.name == "Korean"
    assert [skill.model_dump() for skill in language.skills] == [
        {"id": "s2", "title": "Hangul 2"},
        {"id": "s1", "title": "Hangul 1"},
    ]


def test_map_skill_skips_lessons_without_words() -> None:
    skill = SkillResponse.model_validate(
        {
            "id": "s1",
            "language": "ko",
            "title": "Hangul 1",
            "path": [
                {"words": ["a", "b"]},
                {"words": None},
                {},
                {"words": ["b", "a"]},
            ],
        }
    )

    assert map_skill(skill).words == ["a", "b", "b", "a"]


def test_map_translations_alignment() -> None:
    hints = {"one": ["uno"], "two": ["dos", "par"], "nothing": None}

    assert map_translations(["two", "missing", "one", "two", "nothing"], hints) == [
        ["dos", "par"],
        None,
        ["uno"],
        ["dos", "par"],
        None,
    ]
