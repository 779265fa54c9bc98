"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from text_editor.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_log_level_env(
            "TEXT_EDITOR_LOG_LEVEL", "INFO"
        )
        self.listing_max_depth: int = self._get_int_env(
            "TEXT_EDITOR_LISTING_MAX_DEPTH", 2, minimum=1
        )
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_int_env("PORT", 8000, minimum=1)
        self.reload: bool = self._get_env("RELOAD", "0") in {"1", "true", "True"}

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_log_level_env(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if logging does not know it."""
        level = self._get_env(key, default).strip().upper()
        # getLevelName maps registered names to their numeric level
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(
                f"Environment variable {key} must be a logging level name, "
                f"got {level!r}"
            )
        return level

    def _get_int_env(self, key: str, default: int, minimum: int = 0) -> int:
        """Get an integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got {raw!r}"
            )
        if value < minimum:
            raise ConfigurationError(
                f"Environment variable {key} must be >= {minimum}, got {value}"
            )
        return value


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
