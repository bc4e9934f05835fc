from collections.abc import Sequence
from typing import Any

from ._exceptions import InvalidArgumentError


def require_string(value: Any) -> None:
    if type(value) is not str:
        raise InvalidArgumentError(value)


def require_strings(values: Any) -> None:
    """Check that ``values`` is a list or tuple of ``str``."""
    if not isinstance(values, (list, tuple)):
        raise InvalidArgumentError(values, expected="a list of strings")
    for value in values:
        require_string(value)


def as_string_list(values: str | Sequence[str] | None) -> list[str]:
    """Coerce a single string, a sequence of strings or None into a list."""
    if values is None:
        return []
    if type(values) is str:
        return [values]
    require_strings(values)
    return list(values)
