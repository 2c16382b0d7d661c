"""Domain models returned by DuolingoClient.

These are read-only view models reshaped from the raw API schemas in
``duolingo_client.schemas``; they carry only what callers need.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _DomainModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class UserStreak(_DomainModel):
    length: int = Field(description="Streak length in days")
    extended: bool = Field(description="Whether the streak was extended today")
    freeze: bool = Field(description="Whether a streak freeze is equipped")


class UserLanguage(_DomainModel):
    """A language the user is currently learning."""

    id: str
    name: str
    level: int
    points: int


class User(_DomainModel):
    id: int
    username: str
    display_name: str
    streak: UserStreak
    languages: list[UserLanguage] = Field(
        default_factory=list, description="Learned languages, most points first"
    )
    active_language: str | None = None


class LanguageSkill(_DomainModel):
    id: str
    title: str = Field(description="Language-scoped display name")


class Language(_DomainModel):
    id: str
    name: str
    skills: list[LanguageSkill] = Field(default_factory=list)


class Skill(_DomainModel):
    id: str
    language: str
    title: str
    words: list[str] = Field(default_factory=list)


# One entry per requested word; None when the API has no hints for the word.
Translations = list[list[str] | None]
