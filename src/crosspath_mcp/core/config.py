"""
Configuration for crosspath.

The preferred separator is read once from the environment when the host
binding is imported and stays fixed for the process lifetime. Callers that
need a different style pass `sep=` per call instead.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .errors import ConfigError

__all__ = ["PathConfig", "VALID_SEPARATORS", "create_config_from_env"]


VALID_SEPARATORS = ("/", "\\")


@dataclass(frozen=True)
class PathConfig:
    """
    sep: preferred separator used when rendering (`/` or `\\`)
    log_level: logging level name for the server entry point
    """
    sep: str = os.sep
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.sep not in VALID_SEPARATORS:
            raise ConfigError(f"sep must be one of {VALID_SEPARATORS!r}, got {self.sep!r}")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Unknown log level: {self.log_level}")


def create_config_from_env() -> PathConfig:
    """
    Load configuration from environment variables.

    Environment Variables:
        - CROSSPATH_SEP (default: os.sep)
        - CROSSPATH_LOG_LEVEL (default: WARNING)

    Raises:
        ConfigError: If a value is invalid
    """
    return PathConfig(
        sep=os.getenv("CROSSPATH_SEP") or os.sep,
        log_level=os.getenv("CROSSPATH_LOG_LEVEL") or "WARNING",
    )
