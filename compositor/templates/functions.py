"""Text functions callable from phrase templates.

The template engine looks functions up by name in the table built by
TextFunctionLibrary.table(). All functions work on already-resolved text;
the few that need collaborators (speech cleanup, window titles, the
say-capital preference) are bound methods of the library.
"""

import logging
from collections.abc import Callable
from typing import Any

from compositor.core.interfaces import (
    ProgressRounding,
    SpeechNormalizer,
    Strings,
    WindowInfoProvider,
)
from compositor.state.preferences import VerbosityPreferences
from compositor.utilities.rounding import round_for_progress_percent, round_half_up
from compositor.utilities.text import (
    SEPARATOR,
    SPACE_SEPARATOR,
    ascii_lower,
    is_empty,
    join_fragments,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PURE FUNCTIONS
# =============================================================================


def join(*fragments: str | None) -> str:
    """Join non-empty fragments with ", "."""
    return join_fragments(fragments)


def _conditional_join(first: str | None, second: str | None, separator: str) -> str:
    return f"{first}{separator}{second}"


def conditional_append(conditional_text: str | None, append_text: str | None) -> str:
    """Append append_text only when conditional_text is present."""
    if is_empty(conditional_text):
        return ""
    if is_empty(append_text):
        return conditional_text
    return _conditional_join(conditional_text, append_text, SEPARATOR)


def conditional_prepend(prepend_text: str | None, conditional_text: str | None) -> str:
    """Prepend prepend_text only when conditional_text is present."""
    if is_empty(conditional_text):
        return ""
    if is_empty(prepend_text):
        return conditional_text
    return _conditional_join(prepend_text, conditional_text, SEPARATOR)


def conditional_prepend_with_space(
    prepend_text: str | None, conditional_text: str | None
) -> str:
    """conditional_prepend with a single space as separator."""
    if is_empty(conditional_text):
        return ""
    if is_empty(prepend_text):
        return conditional_text
    return _conditional_join(prepend_text, conditional_text, SPACE_SEPARATOR)


def dedup_join(value1: str | None, value2: str | None, value3: str | None) -> str:
    """Join three fragments, skipping ASCII case-insensitive duplicates.

    The first occurrence wins and keeps its casing.

    Examples:
        >>> dedup_join("Apple", "apple", "Banana")
        'Apple, Banana'
    """
    seen: set[str] = set()
    unique: list[str] = []
    for value in (value1, value2, value3):
        if is_empty(value):
            continue
        key = ascii_lower(value)
        if key in seen:
            continue
        seen.add(key)
        unique.append(value)
    return join_fragments(unique)


def round_nearest(value: float) -> int:
    return round_half_up(value)


def round_for_progress_int(value: float) -> int:
    """Truncate toward zero. Deliberately not rounding."""
    return int(value)


def text_equals(text1: str | None, text2: str | None) -> bool:
    """Ordinal equality where None and "" are equal."""
    return (text1 or "") == (text2 or "")


# =============================================================================
# LIBRARY
# =============================================================================


class TextFunctionLibrary:
    """Functions exposed to the template engine, keyed by template name.

    Usage:
        library = TextFunctionLibrary(strings, preferences, normalizer=normalizer)
        functions = library.table()
        functions["dedupJoin"]("Apple", "apple", "Banana")
    """

    def __init__(
        self,
        strings: Strings,
        preferences: VerbosityPreferences,
        *,
        normalizer: SpeechNormalizer | None = None,
        windows: WindowInfoProvider | None = None,
        progress_rounding: ProgressRounding = round_for_progress_percent,
    ):
        self._strings = strings
        self._preferences = preferences
        self._normalizer = normalizer
        self._windows = windows
        self._progress_rounding = progress_rounding

    def table(self) -> dict[str, Callable[..., Any]]:
        """Name -> function table registered with the template engine."""
        return {
            "cleanUp": self.clean_up,
            "collapseRepeatedCharactersAndCleanUp": self.collapse_repeated_and_clean_up,
            "conditionalAppend": conditional_append,
            "conditionalPrepend": conditional_prepend,
            "conditionalPrependWithSpaceSeparator": conditional_prepend_with_space,
            "dedupJoin": dedup_join,
            "equals": text_equals,
            "getWindowTitle": self.get_window_title,
            "join": join,
            "prependCapital": self.prepend_capital,
            "round": round_nearest,
            "roundForProgressInt": round_for_progress_int,
            "roundForProgressPercent": self.round_for_progress_percent,
            "spelling": self.spelling,
        }

    def clean_up(self, text: str | None) -> str | None:
        if self._normalizer is None or text is None:
            return text
        return self._normalizer.clean_up(text)

    def collapse_repeated_and_clean_up(self, text: str | None) -> str | None:
        if self._normalizer is None or text is None:
            return text
        return self._normalizer.collapse_repeated_and_clean_up(text)

    def spelling(self, word: str | None) -> str:
        """Spell word letter by letter.

        Single characters are already announced letter-wise, so there is
        nothing to spell for them.
        """
        if word is None or len(word) <= 1:
            return ""
        return "".join(self.clean_up(character) or "" for character in word)

    def prepend_capital(self, text: str | None) -> str | None:
        """Say "capital A" for a single upper-case letter when say-capital is on."""
        if is_empty(text) or not self._preferences.say_capital:
            return text
        if len(text) == 1 and text.isupper():
            return self._strings.get("template_capital_letter", text)
        return text

    def round_for_progress_percent(self, value: float) -> int:
        return self._progress_rounding(value)

    def get_window_title(self, window_id: int) -> str:
        if self._windows is None:
            return ""
        try:
            title = self._windows.title(window_id)
        except Exception as e:
            logger.warning(f"Failed to get title for window {window_id}: {e}")
            return ""
        return title if title is not None else ""
