from __future__ import annotations

import re
from typing import Iterable

from .models import DriveRelative, DriveRoot, PathModel, PosixRoot, Root, UncRoot


SEPARATORS = "/\\"

_SPLIT_RE = re.compile(r"[\\/]+")


def _is_sep(ch: str) -> bool:
    return ch in SEPARATORS


def split_segments(text: str) -> tuple[str, ...]:
    """
    Split on every separator of either style. Empty pieces from repeated
    separators are dropped.
    """
    return tuple(s for s in _SPLIT_RE.split(text) if s)


def _parse_unc(raw: str) -> tuple[UncRoot, str] | None:
    """
    Matches `\\\\server\\share...` (any mix of separators).
    Returns (root, rest) or None when raw is not a UNC path.
    """
    if len(raw) < 3 or not (_is_sep(raw[0]) and _is_sep(raw[1])) or _is_sep(raw[2]):
        return None

    parts = _SPLIT_RE.split(raw[2:], maxsplit=2)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None

    rest = parts[2] if len(parts) == 3 else ""
    return UncRoot(server=parts[0], share=parts[1]), rest


def _has_drive(raw: str) -> bool:
    return len(raw) >= 2 and raw[1] == ":" and raw[0].isascii() and raw[0].isalpha()


def parse(raw: str) -> PathModel:
    """
    Parse a path string of either convention into a PathModel.

    Root detection order:
      UNC (`\\\\server\\share`, `//server/share`)
      drive with separator (`C:\\`)
      drive without separator (`C:foo`)
      leading separator (`/`)
      none
    """
    trailing = bool(raw) and _is_sep(raw[-1])

    root: Root
    unc = _parse_unc(raw)
    if unc is not None:
        root, rest = unc
    elif _has_drive(raw):
        if len(raw) > 2 and _is_sep(raw[2]):
            root, rest = DriveRoot(raw[0]), raw[3:]
        else:
            root, rest = DriveRelative(raw[0]), raw[2:]
    elif raw and _is_sep(raw[0]):
        root, rest = PosixRoot(), raw[1:]
    else:
        root, rest = None, raw

    return PathModel(root=root, segments=split_segments(rest), trailing_separator=trailing)


def render_root(root: Root, sep: str) -> str:
    if root is None:
        return ""
    if isinstance(root, PosixRoot):
        return sep
    if isinstance(root, DriveRoot):
        return f"{root.letter}:{sep}"
    if isinstance(root, DriveRelative):
        return f"{root.letter}:"
    return f"{sep}{sep}{root.server}{sep}{root.share}{sep}"


def render(path: PathModel, sep: str) -> str:
    """
    Render a PathModel using a single separator style.
    A root-less, segment-less path renders as `.`. A root-less path whose
    first segment looks like a drive (`c:`) is prefixed with `.` so it is
    not read back as a drive-relative path.
    """
    if not path.segments:
        if path.root is None:
            return "."
        return render_root(path.root, sep)

    prefix = render_root(path.root, sep)
    if path.root is None and _has_drive(path.segments[0]):
        prefix = "." + sep

    out = prefix + sep.join(path.segments)
    if path.trailing_separator:
        out += sep
    return out


def render_segments(segments: Iterable[str], sep: str) -> str:
    return render(PathModel(segments=tuple(segments)), sep)
