"""
Configuration module for the Mixology backend.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


DEFAULT_FALLBACK_IMAGE_URL = (
    "https://unsplash.com/photos/a-glass-of-beer-with-a-cherry-on-top-of-it-6nHFWG-d7qQ"
)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""

    # OpenAI (recipe text + DALL-E strategies)
    # Per-request headers take precedence over these defaults.
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o")

    # Google Gemini API (image strategy)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_IMAGE_MODEL: str = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image")

    # Image pipeline
    IMAGE_STRATEGY_ORDER: List[str] = [
        name.strip()
        for name in os.getenv(
            "IMAGE_STRATEGY_ORDER",
            "Gemini,GPT4o-DALLE-Hybrid,DALL-E-3",
        ).split(",")
        if name.strip()
    ]
    IMAGE_CONCURRENCY_LIMIT: int = int(os.getenv("IMAGE_CONCURRENCY_LIMIT", "5"))
    IMAGE_TIMEOUT_SECONDS: float = float(os.getenv("IMAGE_TIMEOUT_SECONDS", "20"))
    FALLBACK_IMAGE_URL: str = os.getenv("FALLBACK_IMAGE_URL", DEFAULT_FALLBACK_IMAGE_URL)

    # Older clients read the winning strategy from the characteristics list
    IMAGE_METHOD_AS_CHARACTERISTIC: bool = _env_bool("IMAGE_METHOD_AS_CHARACTERISTIC")

    # Raw provider response dumps
    DEBUG_LOGS_ENABLED: bool = _env_bool("DEBUG_LOGS_ENABLED")
    DEBUG_LOG_DIR: str = os.getenv("DEBUG_LOG_DIR", "debug_logs")

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """
        Validate that the image pipeline settings are usable.

        Raises:
            ValueError: If any setting is out of range.
        """
        problems = []

        if cls.IMAGE_CONCURRENCY_LIMIT < 1:
            problems.append("IMAGE_CONCURRENCY_LIMIT must be at least 1")

        if cls.IMAGE_TIMEOUT_SECONDS <= 0:
            problems.append("IMAGE_TIMEOUT_SECONDS must be greater than 0")

        if not cls.FALLBACK_IMAGE_URL:
            problems.append("FALLBACK_IMAGE_URL must not be empty")

        if problems:
            raise ValueError(
                f"Invalid configuration: {'; '.join(problems)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   The app may not work correctly until you configure your .env file.")
        else:
            raise
