"""Raw response schemas for the Duolingo endpoints.

Used for deserialization only; the fields mirror the API's own names. Unknown
fields are ignored since the undocumented responses carry far more data than
the client reads.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# --- GET /users/{username} ---


class ProfileLanguage(_ApiModel):
    """Entry of the profile ``languages`` list."""

    language: str
    language_string: str
    learning: bool = False
    level: int = 0
    points: int = 0


class ProfileInventory(_ApiModel):
    # Timestamp string when equipped; only its truthiness matters
    streak_freeze: Any = None


class ProfileSkill(_ApiModel):
    id: str
    title: str


class ProfileLanguageData(_ApiModel):
    """Per-language blob under ``language_data``, keyed by language id."""

    language: str
    language_string: str
    skills: list[ProfileSkill] = Field(default_factory=list)


class UserProfileResponse(_ApiModel):
    id: int
    username: str
    fullname: str | None = None
    site_streak: int = 0
    streak_extended_today: bool = False
    inventory: ProfileInventory = Field(default_factory=ProfileInventory)
    languages: list[ProfileLanguage] = Field(default_factory=list)
    learning_language: str | None = None
    language_data: dict[str, ProfileLanguageData | None] = Field(default_factory=dict)


# --- GET /api/1/skills/show ---


class SkillLesson(_ApiModel):
    """Entry of the skill ``path``. Some lessons carry no ``words``."""

    words: list[str] | None = None


class SkillResponse(_ApiModel):
    id: str
    language: str
    title: str
    path: list[SkillLesson] = Field(default_factory=list)


# --- POST /login ---


class LoginResponse(_ApiModel):
    user_id: int | None = None
    failure: str | None = None
    message: str | None = None
