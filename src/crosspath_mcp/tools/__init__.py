from .binding import (
    basename,
    describe,
    dirname,
    extname,
    is_absolute,
    join,
    normalize,
    relative,
    resolve,
    sep,
)

__all__ = [
    "normalize",
    "resolve",
    "join",
    "dirname",
    "basename",
    "extname",
    "is_absolute",
    "relative",
    "describe",
    "sep",
]
