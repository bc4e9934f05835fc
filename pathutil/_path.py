from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from itertools import dropwhile

from ._anchor import FILE_SCHEME, SCHEME_SEPARATOR, SEPARATORS, parse_anchor, split_scheme
from ._assert import as_string_list, require_string, require_strings
from ._exceptions import (
    EmptyPathError,
    MissingBaseError,
    NotAbsoluteError,
    RootMismatchError,
    SegmentIndexError,
)
from ._utils import basename, is_alphabetic, trim_left, trim_right

logger = logging.getLogger(__name__)

# common_path compares the pieces between any of these delimiters.
_COMMON_PATH_DELIMITERS = re.compile(r"[/\\.]")
# "file:///" and "file://C:/" are kept whole by common_path.
_SCHEME_ROOT_ONLY = re.compile(r"(.*):///|(.*)://\w:/", re.ASCII)


# ---------------------------------------------------------------------------
#  Normalization
# ---------------------------------------------------------------------------


def normalize(path: str) -> str:
    """Convert every back-slash to a forward slash.

    >>> normalize("C:\\\\user\\\\docs\\\\Letter.txt")
    'C:/user/docs/Letter.txt'
    """
    require_string(path)
    return path.replace("\\", "/")


def split(path: str) -> tuple[str, str]:
    """Split ``path`` into its root (scheme included) and the rest.

    >>> split("C:/node")
    ('C:/', 'node')
    """
    require_string(path)
    if path == "":
        return "", ""
    anchor = parse_anchor(path)
    return anchor.prefix, anchor.rest


def canonicalize(path: str) -> str:
    """Remove empty and ``.`` segments and collapse ``..`` where possible.

    A ``..`` that cannot pop a previous segment is kept for relative paths
    and dropped for anchored ones (root or scheme present).

    >>> canonicalize("\\\\node\\\\site\\\\..\\\\css\\\\style.css")
    '/node/css/style.css'
    """
    require_string(path)
    if path == "":
        return ""

    anchor = parse_anchor(normalize(path))
    prefix = anchor.prefix
    parts: list[str] = []
    for part in anchor.rest.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not prefix:
                parts.append(part)
            continue
        parts.append(part)
    return prefix + "/".join(parts)


def join(paths: Sequence[str]) -> str:
    """Join ``paths`` with single separators and canonicalize the result.

    Empty elements are skipped. A leading ``/`` on a later element does not
    reset the path to the root; it is stripped, except directly after an
    element carrying a scheme (``["file://", "/a"]`` gives ``"file:///a"``).

    >>> join(["/path/to/test/", "/subdir"])
    '/path/to/test/subdir'
    """
    require_strings(paths)
    joined: str | None = None
    was_scheme = False
    for path in paths:
        if path == "":
            continue
        if joined is None:
            joined = path
            was_scheme = SCHEME_SEPARATOR in path
            continue
        if joined[-1] not in SEPARATORS:
            joined += "/"
        joined += path if was_scheme else trim_left(path, "/")
        was_scheme = False

    if joined is None:
        return ""
    return canonicalize(joined)


# ---------------------------------------------------------------------------
#  Components
# ---------------------------------------------------------------------------


def get_root(path: str) -> str:
    """Return the scheme and root of ``path``, or ``""`` if it is relative.

    >>> get_root("C:\\\\css\\\\style.css")
    'C:/'
    """
    require_string(path)
    if path == "":
        return ""
    anchor = parse_anchor(path)
    return anchor.prefix if anchor.is_absolute else ""


def get_directory(path: str) -> str:
    """Return the directory part of the canonical form of ``path``.

    >>> get_directory("/node/site/style.css")
    '/node/site'
    """
    require_string(path)
    if path == "":
        return ""

    scheme, rest = split_scheme(canonicalize(path))
    pos = rest.rfind("/")
    if pos == -1:
        return ""
    if pos == 0:
        return scheme + "/"
    if pos == 2 and is_alphabetic(rest[0]) and rest[1] == ":":
        return scheme + rest[:3]
    return scheme + rest[:pos]


def get_filename(path: str) -> str:
    require_string(path)
    if path == "":
        return ""
    return basename(path)


def get_extension(path: str) -> str:
    """Return the text after the last ``.`` of ``path``, or ``""``."""
    require_string(path)
    pos = path.rfind(".")
    return path[pos + 1:] if pos != -1 else ""


def has_extension(path: str, extensions: str | Sequence[str] | None = None) -> bool:
    """Return True if ``path`` has an extension.

    When ``extensions`` is given (a string or a sequence of strings), the
    actual extension must equal one of them. Leading dots in the filter are
    ignored and the comparison is case-sensitive.
    """
    require_string(path)
    wanted = as_string_list(extensions)
    if path == "":
        return False

    actual = get_extension(path)
    if not wanted:
        return actual != ""
    return actual in (trim_left(ext, ".") for ext in wanted)


def replace_extension(path: str, extension: str) -> str:
    """Replace the extension of ``path`` with ``extension``.

    Paths ending in ``/`` are directories and returned unchanged.

    >>> replace_extension("/node/site/style.css", ".sass")
    '/node/site/style.sass'
    """
    require_string(path)
    require_string(extension)
    if path == "":
        return ""

    actual = get_extension(path)
    extension = trim_left(extension, ".")
    if path.endswith("/"):
        return path
    if actual == "":
        return path + ("" if path.endswith(".") else ".") + extension
    return path[: -len(actual)] + extension


# ---------------------------------------------------------------------------
#  Segments
# ---------------------------------------------------------------------------


def segments(path: str) -> list[str]:
    """Return the ``/``-separated pieces of the canonical, scheme-less path.

    An absolute path starts with an empty segment standing for its root:
    ``segments("/node/site") == ["", "node", "site"]``.
    """
    require_string(path)
    _, rest = split_scheme(path)
    return canonicalize(rest).split("/")


def get_segment(path: str, idx: int) -> str:
    require_string(path)
    if path == "":
        raise EmptyPathError()

    parts = segments(path)
    if idx < 0 or idx >= len(parts):
        raise SegmentIndexError(idx, len(parts))
    return parts[idx]


def get_segment_count(path: str) -> int:
    """Return the number of segments, or 0 when every segment is empty."""
    require_string(path)
    if path == "":
        raise EmptyPathError()

    parts = segments(path)
    if all(part == "" for part in parts):
        return 0
    return len(parts)


def iter_segments(path: str, visitor: Callable[[str], object]) -> None:
    """Call ``visitor`` once for each of ``segments(path)``, in order."""
    for part in segments(path):
        visitor(part)


# ---------------------------------------------------------------------------
#  Predicates
# ---------------------------------------------------------------------------


def is_absolute(path: str) -> bool:
    """Return True if ``path`` (after any scheme) starts with a root.

    >>> is_absolute("C:/css/style.css")
    True
    """
    require_string(path)
    if path == "":
        return False
    return parse_anchor(path).is_absolute


def is_relative(path: str) -> bool:
    return not is_absolute(path)


def is_local(path: str) -> bool:
    """Return True if ``path`` is non-empty and carries no scheme."""
    require_string(path)
    return path != "" and SCHEME_SEPARATOR not in path


def is_base_path(base_path: str, of_path: str) -> bool:
    """Return True if ``base_path`` is a textual prefix directory of ``of_path``.

    >>> is_base_path("/base/path", "/base/path/sub")
    True
    """
    require_string(base_path)
    require_string(of_path)
    base = trim_right(canonicalize(base_path), "/") + "/"
    return (canonicalize(of_path) + "/").startswith(base)


# ---------------------------------------------------------------------------
#  Common prefixes
# ---------------------------------------------------------------------------


def common_prefix(paths: Sequence[str]) -> str:
    """Return the longest string prefix shared by every element of ``paths``.

    Only the lexicographic extremes need comparing. The comparison is
    character based, not segment based:

    >>> common_prefix(["foo", "foobar"])
    'foo'
    """
    require_strings(paths)
    if not paths:
        return ""

    first, last = min(paths), max(paths)
    for i, (a, b) in enumerate(zip(first, last)):
        if a != b:
            return first[:i]
    return first


def common_path(paths: Sequence[str]) -> str:
    """Return the longest common base path of ``paths``.

    All paths are assumed to share one scheme; when they do not, the scheme
    of the last path wins.

    >>> common_path(["/base/path/sub", "/base/path"])
    '/base/path'
    """
    require_strings(paths)
    if not paths:
        return ""

    scheme = ""
    pieces: list[list[str]] = []
    for path in paths:
        path_scheme, rest = split_scheme(path)
        if pieces and path_scheme != scheme:
            logger.debug(
                "common_path: scheme %r replaces %r for %r", path_scheme, scheme, path
            )
        scheme = path_scheme
        pieces.append(_COMMON_PATH_DELIMITERS.split(rest))

    first, others = pieces[0], pieces[1:]
    common = ""
    for j, piece in enumerate(first):
        if any(j >= len(other) or other[j] != piece for other in others):
            break
        common += piece + "/"
    return _finish_common_path(common, scheme)


def _finish_common_path(common: str, scheme: str) -> str:
    if _SCHEME_ROOT_ONLY.fullmatch(scheme + common):
        return scheme + common
    if common == "" or (len(common) == 3 and common[1] == ":"):
        return common
    if common == "/":
        return scheme + "/"
    return scheme + common[:-1]


# ---------------------------------------------------------------------------
#  Relative / absolute conversion
# ---------------------------------------------------------------------------


def to_absolute(path: str, base_path: str) -> str:
    """Resolve ``path`` against the absolute ``base_path``.

    Already absolute paths are only canonicalized.

    >>> to_absolute("css/../style.css", "/node/site")
    '/node/site/style.css'

    :raises NotAbsoluteError: If ``base_path`` is relative.
    """
    require_string(path)
    require_string(base_path)
    if not is_absolute(base_path):
        logger.debug("to_absolute: base path %r is relative", base_path)
        raise NotAbsoluteError(base_path)

    if is_absolute(path):
        return canonicalize(path)

    scheme, base_rest = split_scheme(base_path)
    return scheme + canonicalize(trim_right(base_rest, "/\\") + "/" + path)


def to_relative(path: str, base_path: str) -> str:
    """Express ``path`` relative to ``base_path``.

    A relative ``path`` given with an absolute ``base_path`` is taken to be
    relative to it already and returned canonicalized. Once a segment of
    the base differs from ``path``, every remaining base segment costs one
    ``../``, even if later segments are equal again.

    >>> to_relative("/node/site/../css/style.css", "/node/site")
    '../css/style.css'

    :raises MissingBaseError: If ``path`` is absolute and ``base_path`` is not.
    :raises RootMismatchError: If both paths have different roots.
    """
    require_string(path)
    require_string(base_path)

    root, rest = split(canonicalize(path))
    base_root, base_rest = split(canonicalize(base_path))

    if root == "" and base_root != "":
        if base_rest == "":
            # Nothing lies above the root.
            rest = "/".join(dropwhile(lambda part: part == "..", rest.split("/")))
        return _keep_relative(rest)

    if root != "" and base_root == "":
        logger.debug("to_relative: %r is absolute, base %r is not", path, base_path)
        raise MissingBaseError(path, base_path)

    if base_root != "" and root != base_root:
        logger.debug("to_relative: roots %r and %r differ", root, base_root)
        raise RootMismatchError(root, base_root)

    if base_rest == "":
        return _keep_relative(rest)

    parts: list[str | None] = list(rest.split("/"))
    dot_dot_prefix = ""
    matching = True
    for i, base_part in enumerate(base_rest.split("/")):
        if matching and i < len(parts) and parts[i] == base_part:
            parts[i] = None
            continue
        matching = False
        dot_dot_prefix += "../"

    remaining = "/".join(part for part in parts if part is not None)
    return _keep_relative(trim_right(dot_dot_prefix + remaining, "/"))


def _keep_relative(relative: str) -> str:
    # A leading "C:" segment would otherwise read as a drive root.
    if parse_anchor(relative).is_absolute:
        return "./" + relative
    return relative


# ---------------------------------------------------------------------------
#  URIs
# ---------------------------------------------------------------------------


def to_uri(path: str) -> str:
    """Return the ``file://`` URI for ``path``; schemed paths pass through.

    >>> to_uri("/node/site")
    'file:///node/site'
    """
    require_string(path)
    path = canonicalize(path)
    if path == "" or SCHEME_SEPARATOR in path:
        return path

    is_drive = len(path) > 1 and is_alphabetic(path[0]) and path[1] == ":"
    if not path.startswith("/") and not is_drive:
        path = "/" + path
    return FILE_SCHEME + path


def from_uri(uri: str) -> str:
    """Return the canonical path of ``uri`` with its scheme removed.

    >>> from_uri("file:///node/site")
    '/node/site'
    """
    require_string(uri)
    _, path = split_scheme(canonicalize(uri))
    return path


# ---------------------------------------------------------------------------
#  Directory endings
# ---------------------------------------------------------------------------


def ensure_directory_ending(path: str) -> str:
    """Return the normalized ``path`` with exactly one trailing ``/`` added if missing."""
    require_string(path)
    if path == "":
        return "/"
    path = normalize(path)
    return path if path.endswith("/") else path + "/"


def remove_directory_ending(path: str) -> str:
    require_string(path)
    path = normalize(path)
    return path[:-1] if path.endswith("/") else path


def has_directory_ending(path: str) -> bool:
    require_string(path)
    return normalize(path).endswith("/")
