from __future__ import annotations

from ..core.config import VALID_SEPARATORS
from ..tools.common import DEFAULT_CFG


def platform_info() -> dict:
    """
    Separator conventions this process renders with and accepts on input.
    """
    return {
        "sep": DEFAULT_CFG.sep,
        "accepted_separators": list(VALID_SEPARATORS),
    }
