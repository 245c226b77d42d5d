import logging
import os

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load .env for local dev; in production real env vars are used
load_dotenv(override=False)


def _bool(name: str, default: bool) -> bool:
    """
    Helper to parse boolean environment variables.
    Accepts: 1, true, yes, on (case-insensitive).
    """
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


class Config(BaseSettings):
    """
    Application configuration loaded from environment variables.
    Uses pydantic for validation and parsing.

    Nothing here influences plan or diet numbers; those come from the rule
    tables in ``fitplan.planner`` and ``fitplan.nutrition``.
    """

    OPENAI_API_KEY: str | None = Field(None, description="OpenAI API key")
    OPENAI_BASE_URL: str = Field("https://api.openai.com/v1", description="OpenAI API base URL")
    COACH_MODEL: str = Field("gpt-4o-mini", description="Model used for coaching messages")
    COACH_TIMEOUT: float = Field(10.0, description="Seconds before the coach call is abandoned")
    COACH_MAX_TOKENS: int = Field(200, description="Token limit for coaching messages")
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    CORS_ORIGINS: str = Field(
        "http://localhost:3000", description="Comma separated list of allowed origins"
    )

    # Feature flags
    FF_COACH_MESSAGE: bool = Field(
        default_factory=lambda: _bool("FF_COACH_MESSAGE", True),
        description="Coaching message feature flag",
    )

    @field_validator("COACH_TIMEOUT")
    @classmethod
    def timeout_positive(cls, v):
        if v <= 0:
            raise ValueError("COACH_TIMEOUT must be positive")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def known_log_level(cls, v):
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


SETTINGS = Config()  # pyright: ignore[reportCallIssue]
