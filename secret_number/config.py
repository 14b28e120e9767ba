"""
Process configuration read from environment variables.

    SECRET_NUMBER_ENV                 development | production
    SECRET_NUMBER_MIN                 lowest secret (default 1)
    SECRET_NUMBER_MAX                 highest secret (default 10)
    SECRET_NUMBER_MAX_ATTEMPTS        attempt cap, empty for unlimited
    SECRET_NUMBER_DEBOUNCE_SECONDS    quiet window before auto-submit
    ALLOWED_ORIGINS                   comma separated CORS origins
    LOG_LEVEL                         root log level
"""

from __future__ import annotations
import logging
import os

from .engine_core.state import GameConfig


SECRET_NUMBER_ENV = os.getenv("SECRET_NUMBER_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBOUNCE_SECONDS = float(os.getenv("SECRET_NUMBER_DEBOUNCE_SECONDS", "0.8"))


def _int_from_env(key: str, default: int | None) -> int | None:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return int(value)


def default_game_config() -> GameConfig:
    """Build the default GameConfig from the environment."""
    return GameConfig(
        min_number=_int_from_env("SECRET_NUMBER_MIN", 1),
        max_number=_int_from_env("SECRET_NUMBER_MAX", 10),
        max_attempts=_int_from_env("SECRET_NUMBER_MAX_ATTEMPTS", None),
    )


def configure_logging(level: str | None = None):
    """Configure root logging for the CLI and the API server."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
