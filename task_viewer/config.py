"""Configuration loading from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASK_VIEWER_"
LOG_FORMAT = "%(asctime)s [TASK-VIEWER] %(levelname)s %(message)s"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    default_format: str = "block-text"
    max_input_bytes: int = 10 * 1024 * 1024
    log_level: str = "INFO"
    show_details: bool = False


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning("Invalid %s%s=%r, using %d", ENV_PREFIX, name, raw, default)
        return default
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    logger.warning("Invalid %s%s=%r, using %s", ENV_PREFIX, name, raw, default)
    return default


def _env_level(name: str, default: str) -> str:
    raw = os.environ.get(ENV_PREFIX + name, default).strip().upper()
    if raw not in _LOG_LEVELS:
        logger.warning("Invalid %s%s=%r, using %s", ENV_PREFIX, name, raw, default)
        return default
    return raw


def load_config() -> Config:
    """Build Config from environment variables with sensible defaults."""
    return Config(
        default_format=os.environ.get(ENV_PREFIX + "DEFAULT_FORMAT", "block-text"),
        max_input_bytes=_env_int("MAX_INPUT_BYTES", 10 * 1024 * 1024),
        log_level=_env_level("LOG_LEVEL", "INFO"),
        show_details=_env_bool("SHOW_DETAILS", False),
    )


def setup_logging(config: Config) -> None:
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
