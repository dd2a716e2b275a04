"""Core data types for the compositor variable layer.

All data structures are dataclasses with attribute access. Nodes coming from
the platform are opaque: only the collaborators in core.interfaces look inside
them.

Counts, levels and indices are optional. Providers that still report the
legacy -1 "unknown" sentinel are normalized to None on construction.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import Any

INVALID_DISPLAY = -1
INVALID_WINDOW_ID = -1


class EventType(IntEnum):
    """Accessibility event types delivered by the host."""

    VIEW_CLICKED = 0x00000001
    VIEW_FOCUSED = 0x00000008
    WINDOW_STATE_CHANGED = 0x00000020
    VIEW_SCROLLED = 0x00001000
    VIEW_TEXT_SELECTION_CHANGED = 0x00002000
    VIEW_ACCESSIBILITY_FOCUSED = 0x00008000
    WINDOWS_CHANGED = 0x00400000


class EventKind(IntEnum):
    """One-shot flags raised by event processors to suppress duplicate feedback."""

    SKIP_FOCUS_PROCESSING_AFTER_GRANULARITY_MOVE = 1
    SKIP_FOCUS_PROCESSING_AFTER_CURSOR_CONTROL = 3
    # System moved the cursor after an edit field was focused; the cursor is about to be reset
    SKIP_SELECTION_CHANGED_AFTER_FOCUSED = 9
    # Text selection was snapped automatically
    SKIP_SELECTION_CHANGED_AFTER_CURSOR_RESET = 10
    # Refocusing after an IME closed
    SKIP_FOCUS_PROCESSING_AFTER_IME_CLOSED = 13
    # Next accessibility focus comes from syncing a11y focus with input focus
    SYNCED_ACCESSIBILITY_FOCUS = 14


class Role(IntEnum):
    """Node roles relevant to announcements."""

    NONE = 0
    BUTTON = 1
    CHECK_BOX = 2
    DROP_DOWN_LIST = 3
    EDIT_TEXT = 4
    GRID = 5
    IMAGE = 6
    IMAGE_BUTTON = 7
    LIST = 8
    RADIO_BUTTON = 9
    SEEK_CONTROL = 10
    SWITCH = 11
    TAB_BAR = 12
    TOGGLE_BUTTON = 13
    VIEW_GROUP = 14
    WEB_VIEW = 15
    PAGER = 16
    PROGRESS_BAR = 17
    TEXT_ENTRY_KEY = 18
    SCROLL_VIEW = 19
    HORIZONTAL_SCROLL_VIEW = 20


class Transition(IntEnum):
    """Collection boundary crossing produced by the collection provider."""

    NONE = 0
    ENTER = 1
    EXIT = 2


class Alignment(IntEnum):
    UNSPECIFIED = -1
    VERTICAL = 0
    HORIZONTAL = 1


class RowColumnTransition(IntFlag):
    NONE = 0
    ROW = 1
    COLUMN = 2


class HeadingType(IntEnum):
    NONE = 0
    ROW = 1
    COLUMN = 2
    INDETERMINATE = 3


class InputMode(IntEnum):
    UNKNOWN = -1
    TOUCH = 0
    KEYBOARD = 1
    TV_REMOTE = 2
    NON_ALPHABETIC_KEYBOARD = 3


class DescriptionOrder(IntEnum):
    """Order of role/name/state/position in node descriptions."""

    ROLE_NAME_STATE_POSITION = 0
    STATE_NAME_ROLE_POSITION = 1
    NAME_ROLE_STATE_POSITION = 2


class MagnificationMode(IntEnum):
    FULLSCREEN = 1
    WINDOW = 2


class MagnificationStateKind(IntEnum):
    OFF = 0
    ON = 1
    SCALE_CHANGED = 2


class KeyAction(str, Enum):
    """Actions a key combination can be assigned to."""

    PERFORM_CLICK = "perform_click"
    PERFORM_LONG_CLICK = "perform_long_click"
    CONTEXT_MENU = "other_talkback_context_menu"


def _known(value: int | None) -> int | None:
    """Map the legacy -1 sentinel (any negative value) to None."""
    if value is None or value < 0:
        return None
    return value


@dataclass(frozen=True)
class AccessibilityEvent:
    """A single event from the platform accessibility event source."""

    event_type: EventType
    source: Any = None  # Opaque node, inspected only through NodeIntrospection
    display_id: int = INVALID_DISPLAY


@dataclass(frozen=True)
class TableItemState:
    """Position of a focused item inside a grid or table."""

    row_index: int | None = None
    column_index: int | None = None
    row_name: str = ""
    column_name: str = ""
    heading_type: HeadingType = HeadingType.NONE

    def __post_init__(self):
        object.__setattr__(self, "row_index", _known(self.row_index))
        object.__setattr__(self, "column_index", _known(self.column_index))


@dataclass(frozen=True)
class ListItemState:
    """Position of a focused item inside a list."""

    index: int | None = None
    is_heading: bool = False

    def __post_init__(self):
        object.__setattr__(self, "index", _known(self.index))


@dataclass(frozen=True)
class PagerItemState:
    """Position of a focused page inside a pager."""

    row_index: int | None = None
    column_index: int | None = None
    is_heading: bool = False

    def __post_init__(self):
        object.__setattr__(self, "row_index", _known(self.row_index))
        object.__setattr__(self, "column_index", _known(self.column_index))


@dataclass(frozen=True)
class CollectionState:
    """Snapshot of the collection the accessibility focus is in.

    Produced by a CollectionStateProvider for every accessibility-focus event
    and superseded by the next one.
    """

    transition: Transition = Transition.NONE
    role: Role = Role.NONE
    name: str | None = None
    role_description: str | None = None
    level: int | None = None
    row_count: int | None = None
    column_count: int | None = None
    alignment: Alignment = Alignment.UNSPECIFIED
    row_column_transition: RowColumnTransition = RowColumnTransition.NONE
    item_state: TableItemState | ListItemState | PagerItemState | None = None
    exists: bool = False

    def __post_init__(self):
        object.__setattr__(self, "level", _known(self.level))
        object.__setattr__(self, "row_count", _known(self.row_count))
        object.__setattr__(self, "column_count", _known(self.column_count))

    @property
    def table_item(self) -> TableItemState | None:
        return self.item_state if isinstance(self.item_state, TableItemState) else None

    @property
    def list_item(self) -> ListItemState | None:
        return self.item_state if isinstance(self.item_state, ListItemState) else None

    @property
    def pager_item(self) -> PagerItemState | None:
        return self.item_state if isinstance(self.item_state, PagerItemState) else None

    def has_any_count(self) -> bool:
        return self.row_count is not None or self.column_count is not None

    def has_both_counts(self) -> bool:
        return self.row_count is not None and self.column_count is not None

    def is_vertical(self) -> bool:
        return self.alignment == Alignment.VERTICAL

    def is_horizontal(self) -> bool:
        return self.alignment == Alignment.HORIZONTAL


EMPTY_COLLECTION = CollectionState()


@dataclass(frozen=True)
class MagnificationSnapshot:
    """Last magnification change reported by the magnification processor."""

    mode: MagnificationMode | None = None
    scale: float = -1.0
    state: MagnificationStateKind = MagnificationStateKind.OFF

    @property
    def scale_percent(self) -> int:
        return int(self.scale * 100)


@dataclass(frozen=True)
class NavigationSnapshot:
    """Read-only view of NavigationState."""

    last_window_id: int = INVALID_WINDOW_ID
    current_window_id: int = INVALID_WINDOW_ID
    current_display_id: int = INVALID_DISPLAY
    is_current_focus_scrollable: bool = False
    is_last_focus_scrollable: bool = False
    magnification: MagnificationSnapshot = field(default_factory=MagnificationSnapshot)
    selection_mode_active: bool = False
    last_text_edit_is_password: bool = False
    is_interpret_as_entry_key: bool = False


@dataclass(frozen=True)
class PlatformCapabilities:
    """Platform features that change how variables are computed."""

    # Speak-passwords is a per-service preference rather than a secure setting
    speak_passwords_service_pref: bool = True
    is_watch: bool = False
