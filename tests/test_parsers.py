from __future__ import annotations

import pytest

from crosspath_mcp.core.models import DriveRelative, DriveRoot, PathModel, PosixRoot, UncRoot
from crosspath_mcp.core.parsers import parse, render, split_segments


def test_parse_mixed_separators_with_drive():
    p = parse("c:/foo\\bar/.././baz/.")

    assert p.root == DriveRoot("c")
    assert p.segments == ("foo", "bar", "..", ".", "baz", ".")
    assert p.trailing_separator is False


@pytest.mark.parametrize(
    "raw, root, segments",
    [
        ("\\\\server\\share\\dir\\file.txt", UncRoot("server", "share"), ("dir", "file.txt")),
        ("//server/share", UncRoot("server", "share"), ()),
        ("//foo", PosixRoot(), ("foo",)),
        ("C:foo\\bar", DriveRelative("C"), ("foo", "bar")),
        ("c:", DriveRelative("c"), ()),
        ("d:\\", DriveRoot("d"), ()),
        ("/usr//local/", PosixRoot(), ("usr", "local")),
        ("///", PosixRoot(), ()),
        ("", None, ()),
        ("a\\\\b//c", None, ("a", "b", "c")),
        ("1:/x", None, ("1:", "x")),
    ],
)
def test_parse_detects_root_and_segments(raw, root, segments):
    p = parse(raw)
    assert p.root == root
    assert p.segments == segments


def test_parse_records_trailing_separator():
    assert parse("qux/").trailing_separator is True
    assert parse("qux\\").trailing_separator is True
    assert parse("qux").trailing_separator is False
    assert parse("").trailing_separator is False


def test_split_segments_drops_empty_pieces():
    assert split_segments("a//b\\\\c/") == ("a", "b", "c")
    assert split_segments("") == ()


def test_render_empty_relative_is_dot():
    assert render(PathModel(), "/") == "."
    assert render(PathModel(trailing_separator=True), "\\") == "."


@pytest.mark.parametrize(
    "model, sep, expected",
    [
        (PathModel(DriveRoot("c"), ("foo", "baz")), "\\", "c:\\foo\\baz"),
        (PathModel(DriveRoot("c"), ("foo", "baz")), "/", "c:/foo/baz"),
        (PathModel(DriveRoot("c")), "\\", "c:\\"),
        (PathModel(DriveRelative("c")), "\\", "c:"),
        (PathModel(DriveRelative("c"), ("..", "x")), "\\", "c:..\\x"),
        (PathModel(UncRoot("srv", "share"), ("a",)), "\\", "\\\\srv\\share\\a"),
        (PathModel(UncRoot("srv", "share")), "\\", "\\\\srv\\share\\"),
        (PathModel(PosixRoot(), ("usr", "bin")), "/", "/usr/bin"),
        (PathModel(PosixRoot()), "/", "/"),
        (PathModel(PosixRoot(), (), True), "/", "/"),
        (PathModel(None, ("a",), True), "/", "a/"),
    ],
)
def test_render(model, sep, expected):
    assert render(model, sep) == expected


def test_render_uses_one_separator_style():
    out = render(parse("//srv/share\\a/b\\c"), "\\")
    assert "/" not in out
    assert "\\\\\\" not in out
