"""Low-level string helpers shared by the path engine."""

def is_alphabetic(text: str) -> bool:
    """Return True if ``text`` is non-empty and made only of ASCII letters."""
    return text != "" and text.isascii() and text.isalpha()


def basename(path: str, suffix: str | None = None) -> str:
    """Return the final component of ``path``.

    One trailing ``/`` or ``\\`` is ignored, then everything up to and
    including the last separator is dropped. When ``suffix`` is given and
    the remainder ends with it, the suffix is removed too.

    >>> basename("/node/site/style.css", ".css")
    'style'
    """
    name = path
    if name[-1:] in ("/", "\\"):
        name = name[:-1]
    pos = max(name.rfind("/"), name.rfind("\\"))
    if pos != -1:
        name = name[pos + 1:]
    if suffix and name.endswith(suffix):
        name = name[: -len(suffix)]
    return name


def trim_left(text: str, chars: str | None = None) -> str:
    """Strip the longest run of ``chars`` (whitespace if None) from the start."""
    return text.lstrip(chars) if chars else text.lstrip()


def trim_right(text: str, chars: str | None = None) -> str:
    """Strip the longest run of ``chars`` (whitespace if None) from the end."""
    return text.rstrip(chars) if chars else text.rstrip()
