"""
Unofficial asynchronous client for the Duolingo web API.

Logs in, fetches users, languages and skills, and looks up dictionary hints
for words.
"""

from .client import DuolingoClient
from .config import DuolingoClientSettings
from .error_enums import ErrorCode
from .errors import DuolingoClientError, ErrorDetail, classify_error
from .logging_utils import configure_logging
from .models import Language, LanguageSkill, Skill, Translations, User, UserLanguage, UserStreak
from .session import Session

__all__ = [
    "DuolingoClient",
    "DuolingoClientSettings",
    "DuolingoClientError",
    "ErrorCode",
    "ErrorDetail",
    "classify_error",
    "configure_logging",
    "Session",
    "User",
    "UserStreak",
    "UserLanguage",
    "Language",
    "LanguageSkill",
    "Skill",
    "Translations",
]
