"""Scheme and root parsing.

A path is read once into a :class:`PathAnchor`: optional URI scheme, a
:class:`Relative`, :class:`PosixRoot` or :class:`DriveRoot` root, and the
remaining text. Roots always render with forward slashes.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._assert import require_string
from ._utils import is_alphabetic

SCHEME_SEPARATOR = "://"
FILE_SCHEME = "file" + SCHEME_SEPARATOR
SEPARATORS = ("/", "\\")


@dataclass(frozen=True)
class Relative:
    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class PosixRoot:
    def __str__(self) -> str:
        return "/"


@dataclass(frozen=True)
class DriveRoot:
    letter: str

    def __str__(self) -> str:
        return f"{self.letter}:/"


Root = Relative | PosixRoot | DriveRoot

RELATIVE = Relative()
POSIX_ROOT = PosixRoot()


@dataclass(frozen=True)
class PathAnchor:
    scheme: str
    root: Root
    rest: str

    @property
    def prefix(self) -> str:
        """Scheme and root as they appear at the front of a canonical path."""
        return self.scheme + str(self.root)

    @property
    def is_absolute(self) -> bool:
        return not isinstance(self.root, Relative)


def split_scheme(path: str) -> tuple[str, str]:
    """Split ``path`` after the first ``"://"``.

    Returns ``("", path)`` when there is no scheme.
    """
    require_string(path)
    pos = path.find(SCHEME_SEPARATOR)
    if pos == -1:
        return "", path
    end = pos + len(SCHEME_SEPARATOR)
    return path[:end], path[end:]


def _parse_root(text: str) -> tuple[Root, str]:
    if text[:1] in SEPARATORS:
        return POSIX_ROOT, text[1:]
    if len(text) > 1 and is_alphabetic(text[0]) and text[1] == ":":
        # Bare "C:" gets an implicit separator.
        if len(text) == 2:
            return DriveRoot(text[0]), ""
        if text[2] in SEPARATORS:
            return DriveRoot(text[0]), text[3:]
    return RELATIVE, text


def parse_anchor(path: str) -> PathAnchor:
    """Parse ``path`` into scheme, root and remainder.

    >>> parse_anchor("file://C:\\\\docs")
    PathAnchor(scheme='file://', root=DriveRoot(letter='C'), rest='docs')
    """
    scheme, rest = split_scheme(path)
    root, rest = _parse_root(rest)
    return PathAnchor(scheme, root, rest)
