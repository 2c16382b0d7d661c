"""Pure mapping functions from raw API schemas to domain models."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from duolingo_client.models import (
    Language,
    LanguageSkill,
    Skill,
    Translations,
    User,
    UserLanguage,
    UserStreak,
)
from duolingo_client.schemas import ProfileLanguageData, SkillResponse, UserProfileResponse


def map_user(profile: UserProfileResponse) -> User:
    """Reshape a user profile.

    Only languages flagged as being learned are kept, ordered by points
    descending. ``sorted`` is stable, so ties keep the API order.
    """
    languages = sorted(
        (
            UserLanguage(
                id=it.language,
                name=it.language_string,
                level=it.level,
                points=it.points,
            )
            for it in profile.languages
            if it.learning
        ),
        key=lambda language: language.points,
        reverse=True,
    )

    return User(
        id=profile.id,
        username=profile.username,
        # fullname may be absent or empty
        display_name=profile.fullname or profile.username,
        streak=UserStreak(
            length=profile.site_streak,
            extended=profile.streak_extended_today,
            freeze=bool(profile.inventory.streak_freeze),
        ),
        languages=languages,
        active_language=profile.learning_language,
    )


def map_language(data: ProfileLanguageData) -> Language:
    return Language(
        id=data.language,
        name=data.language_string,
        skills=[LanguageSkill(id=it.id, title=it.title) for it in data.skills],
    )


def map_skill(skill: SkillResponse) -> Skill:
    """Reshape a skill, flattening the words of its lessons in order.

    Some lessons come back without a words list; they contribute nothing.
    """
    words: list[str] = []
    for lesson in skill.path:
        if lesson.words:
            words.extend(lesson.words)

    return Skill(id=skill.id, language=skill.language, title=skill.title, words=words)


def map_translations(
    words: Sequence[str], hints: Mapping[str, list[str] | None]
) -> Translations:
    """Align dictionary hints with the requested words.

    Each word is looked up on its own, so repeated words repeat their hints
    as separate lists. Words the API did not answer for map to None.
    """
    translations: Translations = []
    for word in words:
        candidates = hints.get(word)
        translations.append(list(candidates) if candidates is not None else None)
    return translations
