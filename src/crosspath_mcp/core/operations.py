from __future__ import annotations

import os
from typing import Any, Iterable

from .errors import InvalidArgumentError
from .models import DriveRelative, DriveRoot, PathModel, root_key
from .parsers import parse, render, render_segments
from .resolution import PARENT, resolve_model


def normalize(path: str, *, sep: str = os.sep) -> str:
    """
    Remove `.` and `..` and redundant separators, render with `sep`.
        normalize('c:/foo\\bar/.././baz/.', sep='\\') -> 'c:\\foo\\baz'
    """
    return render(resolve_model(parse(path)), sep)


def join(first: str, *rest: str, sep: str = os.sep) -> str:
    """
    Append every later path's segments to the first one. Only the first
    path's root is kept.
        join('/foo', 'bar', 'baz/asdf', 'quux', '..', sep='/') -> '/foo/bar/baz/asdf'
    """
    base = parse(first)
    segments = list(base.segments)
    trailing = base.trailing_separator
    for raw in rest:
        p = parse(raw)
        segments.extend(p.segments)
        if raw:
            trailing = p.trailing_separator

    joined = PathModel(root=base.root, segments=tuple(segments), trailing_separator=trailing)
    return render(resolve_model(joined), sep)


def _absolutize(paths: Iterable[str], cwd: str) -> PathModel:
    """
    Fold `paths` onto the `cwd` snapshot. A rooted path replaces what has
    been accumulated. Per-drive working directories are not tracked, so a
    drive-relative path (`d:x`) continues the current path when it names
    the same drive and otherwise starts at that drive's root (`d:\\x`).
    """
    acc = parse(cwd)
    if not acc.is_absolute:
        raise InvalidArgumentError(f"Current directory must be absolute: {cwd}")

    root, segments = acc.root, list(acc.segments)
    for raw in paths:
        p = parse(raw)
        if p.root is None:
            segments.extend(p.segments)
        elif isinstance(p.root, DriveRelative):
            if isinstance(root, DriveRoot) and root.letter.casefold() == p.root.letter.casefold():
                segments.extend(p.segments)
            else:
                root, segments = DriveRoot(p.root.letter), list(p.segments)
        else:
            root, segments = p.root, list(p.segments)

    return resolve_model(PathModel(root=root, segments=tuple(segments)), keep_trailing=False)


def resolve(*paths: str, cwd: str, sep: str = os.sep) -> str:
    """
    Resolve a sequence of paths, right-most root wins, to one absolute path.
        resolve('c:\\foo/bar', 'd:/tmp/file/', cwd=..., sep='\\') -> 'd:\\tmp\\file'
    """
    return render(_absolutize(paths, cwd), sep)


def dirname(path: str, *, sep: str = os.sep) -> str:
    p = parse(path)
    return render(PathModel(root=p.root, segments=p.segments[:-1]), sep)


def basename(path: str, ext: str | None = None) -> str:
    """
    Last segment of the path. When `ext` occurs anywhere in it, the name is
    cut at the first occurrence (not only at the end). An empty `ext` occurs
    at position 0 and leaves an empty name:
        basename('a/quux.html', '.html') -> 'quux'
        basename('a/x.js.map.js', '.js') -> 'x'
    """
    p = parse(path)
    name = p.segments[-1] if p.segments else ""
    if ext is not None:
        pos = name.find(ext)
        if pos != -1:
            name = name[:pos]
    return name


def extname(path: str) -> str:
    p = parse(path)
    name = p.segments[-1] if p.segments else ""
    if name in (".", PARENT):
        return ""
    pos = name.rfind(".")
    if pos <= 0:
        return ""
    return name[pos:]


def is_absolute(path: str) -> bool:
    return parse(path).is_absolute


def relative(from_path: str, to_path: str, *, cwd: str, sep: str = os.sep) -> str:
    """
    Relative path from `from_path` to `to_path`, both absolutized against
    `cwd` first. Paths on different roots have no relative form; the
    absolute `to_path` is returned instead.
        relative('c:/foo\\bar', 'c:/foo/abc.txt', ...) -> '..\\abc.txt'
        relative('c:\\foo', 'd:\\bar', ...) -> 'd:\\bar'
    """
    src = _absolutize([from_path], cwd)
    dst = _absolutize([to_path], cwd)
    if root_key(src.root) != root_key(dst.root):
        return render(dst, sep)

    common = 0
    for a, b in zip(src.segments, dst.segments):
        if a != b:
            break
        common += 1

    ups = [PARENT] * (len(src.segments) - common)
    return render_segments([*ups, *dst.segments[common:]], sep)


def describe(path: str, *, sep: str = os.sep) -> dict[str, Any]:
    out = parse(path).to_dict()
    out["normalized"] = normalize(path, sep=sep)
    return out
