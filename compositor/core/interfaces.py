"""Collaborator interfaces.

Everything the variable layer consumes but does not own is declared here as a
Protocol. Hosts (and tests) pass implementations in at session construction.
"""

from collections.abc import Callable
from typing import Any, Protocol

from compositor.core.types import AccessibilityEvent, CollectionState, InputMode


class CollectionStateProvider(Protocol):
    """Computes the collection snapshot for a newly focused node."""

    def snapshot(self, focused_node: Any, event: AccessibilityEvent) -> CollectionState:
        ...


class NodeIntrospection(Protocol):
    """Per-node UI introspection."""

    def nearest_scrollable_ancestor(self, node: Any) -> Any | None:
        ...

    def is_scrollable(self, node: Any) -> bool:
        ...

    def window_id(self, node: Any) -> int:
        ...


class Strings(Protocol):
    """Localized string lookup and pluralization."""

    def get(self, key: str, *args: Any) -> str:
        ...

    def get_quantity(self, key: str, count: int, *args: Any) -> str:
        ...


class KeyComboProvider(Protocol):
    """Keyboard shortcut configuration.

    code_for returns None when no combination is assigned to the action.
    """

    def code_for(self, action_key: str) -> int | None:
        ...

    def text_for(self, code: int) -> str | None:
        ...


class GestureShortcutProvider(Protocol):
    def menu_shortcut_text(self) -> str:
        ...

    def seek_bar_shortcut_text(self) -> str | None:
        ...


class WindowInfoProvider(Protocol):
    def title(self, window_id: int) -> str | None:
        ...

    def is_split_screen(self, display_id: int) -> bool:
        ...


class SpeechNormalizer(Protocol):
    """Locale-aware symbol expansion and repeated-character collapsing."""

    def clean_up(self, text: str) -> str:
        ...

    def collapse_repeated_and_clean_up(self, text: str) -> str | None:
        ...


class InputModeProvider(Protocol):
    def input_mode(self) -> InputMode:
        ...

    def is_keyboard_active(self) -> bool:
        ...


class SecureSettings(Protocol):
    """System-level secure settings (pre per-service preference platforms)."""

    def should_speak_passwords(self) -> bool:
        ...


class ParseTree(Protocol):
    """Registration surface of the template engine."""

    def add_enum(self, enum_id: int, values: dict[int, str]) -> None:
        ...

    def add_boolean_variable(self, name: str, var_id: int) -> None:
        ...

    def add_integer_variable(self, name: str, var_id: int) -> None:
        ...

    def add_number_variable(self, name: str, var_id: int) -> None:
        ...

    def add_string_variable(self, name: str, var_id: int) -> None:
        ...

    def add_enum_variable(self, name: str, var_id: int, enum_id: int) -> None:
        ...

    def add_function(self, name: str, function: Callable[..., Any]) -> None:
        ...


# Progress-specific rounding policy used by roundForProgressPercent
ProgressRounding = Callable[[float], int]
