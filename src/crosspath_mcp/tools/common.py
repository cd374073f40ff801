from __future__ import annotations

import os

from ..core.config import VALID_SEPARATORS, create_config_from_env
from ..core.errors import InvalidArgumentError


DEFAULT_CFG = create_config_from_env()


def preferred_sep(sep: str | None = None) -> str:
    if sep is None:
        return DEFAULT_CFG.sep
    if sep not in VALID_SEPARATORS:
        raise InvalidArgumentError(f"sep must be one of {VALID_SEPARATORS!r}, got {sep!r}")
    return sep


def current_directory(cwd: str | None = None) -> str:
    """
    Snapshot of the working directory for one resolve/relative call.
    """
    return os.getcwd() if cwd is None else cwd


def check_arg(ok: bool, msg: str) -> None:
    if not ok:
        raise InvalidArgumentError(msg)
