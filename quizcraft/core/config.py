from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field, ValidationError, field_validator
from typing import List

from quizcraft.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env file."""

    # ── Google Gemini ─────────────────────────────────────────────────────────
    GOOGLE_API_KEY: str = Field(
        ...,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "API_KEY"),
        description="Gemini API key (required)",
    )
    GEMINI_MODEL: str = "gemini-2.5-flash"

    @field_validator("GOOGLE_API_KEY")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("GOOGLE_API_KEY must not be empty")
        return v.strip()

    # ── Limits ────────────────────────────────────────────────────────────────
    MAX_FILE_SIZE_MB: int = 20
    MAX_PDF_PAGES: int = 200
    AI_TIMEOUT_SECONDS: int = 120

    # Reject quizzes whose MCQ answers are not among their options, etc.
    STRICT_QUIZ_VALIDATION: bool = True

    # ── Core ──────────────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    PORT: int = 3001
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, failing fast without an API key."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        if fields & {"GOOGLE_API_KEY", "API_KEY"}:
            raise ConfigurationError(
                "GOOGLE_API_KEY is not set in environment variables."
            ) from e
        raise ConfigurationError(f"Invalid configuration: {e}") from e
