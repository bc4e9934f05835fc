import logging

from ._anchor import DriveRoot, PathAnchor, PosixRoot, Relative, Root, parse_anchor, split_scheme
from ._exceptions import (
    EmptyPathError,
    InvalidArgumentError,
    MissingBaseError,
    NotAbsoluteError,
    PathUtilError,
    RootMismatchError,
    SegmentIndexError,
)
from ._path import (
    canonicalize,
    common_path,
    common_prefix,
    ensure_directory_ending,
    from_uri,
    get_directory,
    get_extension,
    get_filename,
    get_root,
    get_segment,
    get_segment_count,
    has_directory_ending,
    has_extension,
    is_absolute,
    is_base_path,
    is_local,
    is_relative,
    iter_segments,
    join,
    normalize,
    remove_directory_ending,
    replace_extension,
    segments,
    split,
    to_absolute,
    to_relative,
    to_uri,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "canonicalize",
    "common_path",
    "common_prefix",
    "ensure_directory_ending",
    "from_uri",
    "get_directory",
    "get_extension",
    "get_filename",
    "get_root",
    "get_segment",
    "get_segment_count",
    "has_directory_ending",
    "has_extension",
    "is_absolute",
    "is_base_path",
    "is_local",
    "is_relative",
    "iter_segments",
    "join",
    "normalize",
    "remove_directory_ending",
    "replace_extension",
    "segments",
    "split",
    "split_scheme",
    "parse_anchor",
    "to_absolute",
    "to_relative",
    "to_uri",
    "PathAnchor",
    "Root",
    "Relative",
    "PosixRoot",
    "DriveRoot",
    "PathUtilError",
    "InvalidArgumentError",
    "EmptyPathError",
    "SegmentIndexError",
    "NotAbsoluteError",
    "RootMismatchError",
    "MissingBaseError",
]
__version__ = "0.3.0"
