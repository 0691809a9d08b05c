"""
Configuration module for the Companion Chat Relay application.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv

from utils.exceptions import ConfigurationError

load_dotenv()


def _env_int(name: str, default: int) -> int | None:
    """Read an integer environment variable, None if it is not a valid integer."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return None


class Config:
    """Application configuration class."""

    # API Keys
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")

    # Completion parameters (fixed)
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    MAX_TOKENS: int = 150
    TEMPERATURE: float = 0.7

    # Application Settings
    APP_TITLE: str = "Companion Chat Relay"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    CHAT_HISTORY_LIMIT: int | None = _env_int("CHAT_HISTORY_LIMIT", 12)

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int | None = _env_int("PORT", 8000)
    # Set by the hosting platform, which provides its own listener
    VERCEL: bool = bool(os.getenv("VERCEL"))

    # Timeouts (in seconds)
    OPENAI_TIMEOUT: int | None = _env_int("OPENAI_TIMEOUT", 30)

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration before the app starts serving.

        Raises:
            ConfigurationError: If the API key is missing or a numeric setting is malformed
        """
        if not cls.OPENAI_API_KEY:
            raise ConfigurationError(
                "OPENAI_API_KEY is not set. Add it to your .env file or the hosting platform's environment variables."
            )

        for name in ("CHAT_HISTORY_LIMIT", "PORT", "OPENAI_TIMEOUT"):
            if getattr(cls, name) is None:
                raise ConfigurationError(f"{name} must be an integer, got {os.getenv(name)!r}")

        if cls.OPENAI_TIMEOUT <= 0:
            raise ConfigurationError(f"OPENAI_TIMEOUT must be positive, got {cls.OPENAI_TIMEOUT}")
