from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union


RootKind = Literal["none", "posix", "drive", "drive_relative", "unc"]


@dataclass(frozen=True)
class PosixRoot:
    pass


@dataclass(frozen=True)
class DriveRoot:
    letter: str


@dataclass(frozen=True)
class DriveRelative:
    letter: str


@dataclass(frozen=True)
class UncRoot:
    server: str
    share: str


Root = Union[PosixRoot, DriveRoot, DriveRelative, UncRoot, None]

_ABSOLUTE_ROOTS = (PosixRoot, DriveRoot, UncRoot)


def root_kind(root: Root) -> RootKind:
    if root is None:
        return "none"
    if isinstance(root, PosixRoot):
        return "posix"
    if isinstance(root, DriveRoot):
        return "drive"
    if isinstance(root, DriveRelative):
        return "drive_relative"
    return "unc"


def root_key(root: Root) -> tuple[str, ...]:
    """
    Comparison key for roots. Drive letters and UNC names are
    case-insensitive on the platforms that have them.
    """
    kind = root_kind(root)
    if isinstance(root, (DriveRoot, DriveRelative)):
        return (kind, root.letter.casefold())
    if isinstance(root, UncRoot):
        return (kind, root.server.casefold(), root.share.casefold())
    return (kind,)


@dataclass(frozen=True)
class PathModel:
    root: Root = None
    segments: tuple[str, ...] = field(default_factory=tuple)
    trailing_separator: bool = False

    @property
    def is_absolute(self) -> bool:
        return isinstance(self.root, _ABSOLUTE_ROOTS)

    def to_dict(self) -> dict[str, Any]:
        root = self.root
        return {
            "root_kind": root_kind(root),
            "drive": root.letter if isinstance(root, (DriveRoot, DriveRelative)) else None,
            "server": root.server if isinstance(root, UncRoot) else None,
            "share": root.share if isinstance(root, UncRoot) else None,
            "segments": list(self.segments),
            "trailing_separator": self.trailing_separator,
            "is_absolute": self.is_absolute,
        }
