"""Text joining helpers shared by the composer and the function library."""

import string
from collections.abc import Iterable

SEPARATOR = ", "
SPACE_SEPARATOR = " "

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def join_fragments(
    fragments: Iterable[str | None], separator: str = SEPARATOR
) -> str:
    """Join fragments, dropping None and empty ones.

    Examples:
        >>> join_fragments(["in list", None, "", "5 items"])
        'in list, 5 items'
        >>> join_fragments([])
        ''
    """
    return separator.join(f for f in fragments if f)


def is_empty(text: str | None) -> bool:
    return text is None or len(text) == 0


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only; other characters keep their case.

    Examples:
        >>> ascii_lower("ÄPFEL Apple")
        'Äpfel apple'
    """
    return text.translate(_ASCII_LOWER)
