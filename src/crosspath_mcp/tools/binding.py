"""
Host binding for the path operations.

Accepts dynamically typed, variable-arity calls, validates them, and hands
already-extracted strings to the core. Mirrors the `path` module surface:

    normalize(p), resolve(*ps), join(*ps), dirname(p), basename(p[, ext]),
    extname(p), is_absolute(p), relative(from, to), sep
"""
from __future__ import annotations

import logging
from typing import Any

from ..core import operations as ops
from .common import DEFAULT_CFG, check_arg, current_directory, preferred_sep

logger = logging.getLogger(__name__)

sep: str = DEFAULT_CFG.sep


def _is_str(v: Any) -> bool:
    return isinstance(v, str)


def normalize(*args: Any, sep: str | None = None) -> str:
    check_arg(
        len(args) == 1 and _is_str(args[0]),
        "path.normalize requires 1 string parameter of file path.",
    )
    out = ops.normalize(args[0], sep=preferred_sep(sep))
    logger.debug("normalize(%r) -> %r", args[0], out)
    return out


def resolve(*args: Any, cwd: str | None = None, sep: str | None = None) -> str:
    check_arg(len(args) > 0, "path.resolve requires at least one string parameters.")
    for a in args:
        check_arg(_is_str(a), "path.resolve doesn't accept non-string argument.")

    base = current_directory(cwd)
    out = ops.resolve(*args, cwd=base, sep=preferred_sep(sep))
    logger.debug("resolve(%r, cwd=%r) -> %r", args, base, out)
    return out


def join(*args: Any, sep: str | None = None) -> str:
    check_arg(
        len(args) > 0 and _is_str(args[0]),
        "path.join requires at least one string parameters.",
    )
    for a in args[1:]:
        check_arg(_is_str(a), "path.join doesn't accept non-string argument.")

    out = ops.join(*args, sep=preferred_sep(sep))
    logger.debug("join(%r) -> %r", args, out)
    return out


def dirname(*args: Any, sep: str | None = None) -> str:
    check_arg(
        len(args) == 1 and _is_str(args[0]),
        "path.dirname requires 1 string parameter of file path.",
    )
    return ops.dirname(args[0], sep=preferred_sep(sep))


def basename(*args: Any) -> str:
    check_arg(
        len(args) in (1, 2),
        "path.basename takes 1 required argument of file path and 1 optional argument of extension",
    )
    check_arg(_is_str(args[0]), "path.basename requires a string parameter of file path.")

    ext = None
    if len(args) == 2:
        check_arg(_is_str(args[1]), "path.basename requires a string as 2nd parameter of extension.")
        ext = args[1]
    return ops.basename(args[0], ext)


def extname(*args: Any) -> str:
    check_arg(
        len(args) == 1 and _is_str(args[0]),
        "path.extname requires 1 string parameter of file path.",
    )
    return ops.extname(args[0])


def is_absolute(*args: Any) -> bool:
    check_arg(
        len(args) == 1 and _is_str(args[0]),
        "path.isAbsolute requires 1 string parameter of file path.",
    )
    return ops.is_absolute(args[0])


def relative(*args: Any, cwd: str | None = None, sep: str | None = None) -> str:
    check_arg(
        len(args) == 2 and _is_str(args[0]) and _is_str(args[1]),
        "path.relative requires 2 arguments of string type.",
    )
    base = current_directory(cwd)
    out = ops.relative(args[0], args[1], cwd=base, sep=preferred_sep(sep))
    logger.debug("relative(%r, %r, cwd=%r) -> %r", args[0], args[1], base, out)
    return out


def describe(*args: Any, sep: str | None = None) -> dict[str, Any]:
    check_arg(
        len(args) == 1 and _is_str(args[0]),
        "path.describe requires 1 string parameter of file path.",
    )
    return ops.describe(args[0], sep=preferred_sep(sep))
