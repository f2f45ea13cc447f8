"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional


OVERRIDE_PATH_VAR: Final[str] = "NATIVEID_PATH"
LOG_LEVEL_VAR: Final[str] = "NATIVEID_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


@dataclass(frozen=True)
class ReaderConfig:
    """Settings for a single identifier lookup."""

    override_path: Optional[str] = None


class ConfigError(RuntimeError):
    """Raised when a configuration value is invalid."""


def load_config(environ: Optional[Mapping[str, str]] = None) -> ReaderConfig:
    """Build a :class:`ReaderConfig` from the environment.

    Values are read fresh on each call; nothing is cached. A non-empty
    override path is used exactly as given, surrounding spaces included.
    """

    env = os.environ if environ is None else environ
    override = env.get(OVERRIDE_PATH_VAR)
    return ReaderConfig(override_path=os.path.expanduser(override) if override else None)


def load_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the command line log level name, validated."""
    env = os.environ if environ is None else environ
    level = (env.get(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Invalid {LOG_LEVEL_VAR}: {level!r}")
    return level


__all__ = [
    "ConfigError",
    "LOG_LEVEL_VAR",
    "OVERRIDE_PATH_VAR",
    "ReaderConfig",
    "load_config",
    "load_log_level",
]
