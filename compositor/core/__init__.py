"""Core types and interfaces."""

from compositor.core.interfaces import (
    CollectionStateProvider,
    GestureShortcutProvider,
    InputModeProvider,
    KeyComboProvider,
    NodeIntrospection,
    ParseTree,
    ProgressRounding,
    SecureSettings,
    SpeechNormalizer,
    Strings,
    WindowInfoProvider,
)
from compositor.core.types import (
    EMPTY_COLLECTION,
    INVALID_DISPLAY,
    INVALID_WINDOW_ID,
    AccessibilityEvent,
    Alignment,
    CollectionState,
    DescriptionOrder,
    EventKind,
    EventType,
    HeadingType,
    InputMode,
    KeyAction,
    ListItemState,
    MagnificationMode,
    MagnificationSnapshot,
    MagnificationStateKind,
    NavigationSnapshot,
    PagerItemState,
    PlatformCapabilities,
    Role,
    RowColumnTransition,
    TableItemState,
    Transition,
)

__all__ = [
    # Types
    "AccessibilityEvent",
    "Alignment",
    "CollectionState",
    "DescriptionOrder",
    "EMPTY_COLLECTION",
    "EventKind",
    "EventType",
    "HeadingType",
    "INVALID_DISPLAY",
    "INVALID_WINDOW_ID",
    "InputMode",
    "KeyAction",
    "ListItemState",
    "MagnificationMode",
    "MagnificationSnapshot",
    "MagnificationStateKind",
    "NavigationSnapshot",
    "PagerItemState",
    "PlatformCapabilities",
    "Role",
    "RowColumnTransition",
    "TableItemState",
    "Transition",
    # Interfaces
    "CollectionStateProvider",
    "GestureShortcutProvider",
    "InputModeProvider",
    "KeyComboProvider",
    "NodeIntrospection",
    "ParseTree",
    "ProgressRounding",
    "SecureSettings",
    "SpeechNormalizer",
    "Strings",
    "WindowInfoProvider",
]
