from __future__ import annotations

from typing import Iterable

from .models import PathModel, Root


CURRENT = "."
PARENT = ".."


def resolve_segments(segments: Iterable[str], root: Root) -> tuple[str, ...]:
    """
    Eliminate `.` and `..` segments.

    Rooted (absolute) paths drop a `..` that has nothing left to cancel,
    so `/../../etc` becomes `/etc`. Relative paths, including drive-relative
    ones, keep such `..` tokens as a leading run.
    """
    absolute = PathModel(root=root).is_absolute
    out: list[str] = []
    for seg in segments:
        if seg == CURRENT:
            continue
        if seg == PARENT:
            if out and out[-1] != PARENT:
                out.pop()
            elif not absolute:
                out.append(PARENT)
            continue
        out.append(seg)
    return tuple(out)


def resolve_model(path: PathModel, *, keep_trailing: bool = True) -> PathModel:
    segments = resolve_segments(path.segments, path.root)
    return PathModel(
        root=path.root,
        segments=segments,
        trailing_separator=keep_trailing and path.trailing_separator,
    )
