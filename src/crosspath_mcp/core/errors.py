from __future__ import annotations


class CrossPathError(Exception):
    """Base error for the project."""


class InvalidArgumentError(CrossPathError, ValueError):
    pass


class ConfigError(CrossPathError):
    pass
