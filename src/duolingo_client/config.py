"""Configuration for the Duolingo client.

Uses Pydantic settings for environment-based configuration. Every value has a
default, so the client works without any environment set up.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Runtime environments, used to pick the log renderer."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class DuolingoClientSettings(BaseSettings):
    """Configuration settings for DuolingoClient."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DUOLINGO_CLIENT_",
        case_sensitive=False,
        extra="ignore",
    )

    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment",
    )
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # API hosts
    BASE_URL: str = Field(
        default="https://www.duolingo.com",
        description="Host serving login, user profiles and skills",
    )
    DICTIONARY_URL: str = Field(
        default="http://d2.duolingo.com",
        description="Host serving dictionary hints",
    )

    # HTTP client configuration
    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="HTTP client request timeout in seconds",
    )
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="HTTP client connection timeout in seconds",
    )
    USER_AGENT: str = Field(
        default="duolingo-client/2.1.0",
        description="User-Agent header sent with every request",
    )


# Global settings instance
settings = DuolingoClientSettings()
