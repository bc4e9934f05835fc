class PathUtilError(Exception):
    """Base class for every error raised by pathutil."""


class InvalidArgumentError(PathUtilError, TypeError):
    """Raised when an argument is not a string (or a list of strings). Subclass of TypeError."""
    def __init__(self, value: object, expected: str = "a string") -> None:
        self.value = value
        super().__init__(f"The input is not {expected}: got {type(value).__name__}.")


class EmptyPathError(PathUtilError, ValueError):
    """Raised when segment access is requested on an empty path. Subclass of ValueError."""
    def __init__(self) -> None:
        super().__init__("Empty path")


class SegmentIndexError(PathUtilError, IndexError):
    """Raised when a segment index is outside ``[0, count)``. Subclass of IndexError."""
    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(
            f"Index out of bounds: segment {index} requested, "
            f"path has {count} segments."
        )


class NotAbsoluteError(PathUtilError, ValueError):
    """Raised when a base path that must be absolute is relative. Subclass of ValueError."""
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"The given base path is not an absolute path: {path!r}.")


class RootMismatchError(PathUtilError, ValueError):
    """Raised when two paths belong to different roots. Subclass of ValueError."""
    def __init__(self, root: str, base_root: str) -> None:
        self.root = root
        self.base_root = base_root
        super().__init__(
            f"The paths cannot be made relative because they belong to "
            f"different roots: {root!r} and {base_root!r}."
        )


class MissingBaseError(PathUtilError, ValueError):
    """Raised when an absolute path is relativized against a relative base. Subclass of ValueError."""
    def __init__(self, path: str, base_path: str) -> None:
        self.path = path
        self.base_path = base_path
        super().__init__(
            f"You should provide an absolute base path: {base_path!r} "
            f"is relative but {path!r} is absolute."
        )
