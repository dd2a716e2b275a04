"""Variable and enum ids.

This is the fixed, versioned id table template sources reference. Ids are
grouped by category in blocks of 100; verbosity ids start at 10001. Ids are
never reused: retire a member instead of renumbering.
"""

from enum import IntEnum


class EnumId(IntEnum):
    """Enum tables declared with the template engine."""

    ROLE = 1
    VERBOSITY_DESCRIPTION_ORDER = 2
    COLLECTION_HEADING_TYPE = 6000
    INPUT_MODE = 6002


class VariableId(IntEnum):
    # Global
    GLOBAL_SYNCED_ACCESSIBILITY_FOCUS_LATCH = 6000
    GLOBAL_IS_KEYBOARD_ACTIVE = 6001
    GLOBAL_IS_SELECTION_MODE_ACTIVE = 6002
    GLOBAL_INPUT_MODE = 6003
    GLOBAL_USE_SINGLE_TAP = 6004
    GLOBAL_SPEECH_RATE = 6005
    GLOBAL_USE_AUDIO_FOCUS = 6007
    GLOBAL_LAST_TEXT_EDIT_IS_PASSWORD = 6008
    GLOBAL_SPEAK_PASS_SERVICE_POLICY = 6009
    GLOBAL_SPEAK_PASS_FIELD_CONTENT = 6010
    GLOBAL_ENABLE_USAGE_HINT = 6011
    GLOBAL_SEEKBAR_HINT = 6012
    GLOBAL_INTERPRET_AS_ENTRY_KEY = 6013

    # Collection
    COLLECTION_NAME = 6100
    COLLECTION_ROLE = 6101
    COLLECTION_TRANSITION = 6102
    COLLECTION_EXISTS = 6103
    COLLECTION_IS_ROW_TRANSITION = 6104
    COLLECTION_IS_COLUMN_TRANSITION = 6105
    COLLECTION_TABLE_ITEM_HEADING_TYPE = 6106
    COLLECTION_TABLE_ITEM_ROW_NAME = 6107
    COLLECTION_TABLE_ITEM_ROW_INDEX = 6108
    COLLECTION_TABLE_ITEM_COLUMN_NAME = 6109
    COLLECTION_TABLE_ITEM_COLUMN_INDEX = 6110
    COLLECTION_LIST_ITEM_IS_HEADING = 6111
    COLLECTION_PAGER_ITEM_ROW_INDEX = 6112
    COLLECTION_PAGER_ITEM_COLUMN_INDEX = 6113
    COLLECTION_PAGER_ITEM_IS_HEADING = 6114
    COLLECTION_LIST_ITEM_POSITION_DESCRIPTION = 6115

    # Windows
    WINDOWS_LAST_WINDOW_ID = 6200
    WINDOWS_IS_SPLIT_SCREEN_MODE = 6201

    # Focus
    FOCUS_IS_CURRENT_FOCUS_IN_SCROLLABLE_NODE = 6300
    FOCUS_IS_LAST_FOCUS_IN_SCROLLABLE_NODE = 6301

    # Key combos
    KEY_COMBO_HAS_KEY_FOR_CLICK = 6400
    KEY_COMBO_STRING_FOR_CLICK = 6401
    KEY_COMBO_HAS_KEY_FOR_LONG_CLICK = 6402
    KEY_COMBO_STRING_FOR_LONG_CLICK = 6403

    # Magnification
    MAGNIFICATION_STATE_CHANGED = 6500

    # Gestures
    GESTURE_STRING_FOR_NODE_ACTIONS = 6600

    # Verbosity
    VERBOSITY_SPEAK_ROLES = 10001
    VERBOSITY_SPEAK_COLLECTION_INFO = 10002
    VERBOSITY_DESCRIPTION_ORDER = 10003
    VERBOSITY_SPEAK_ELEMENT_IDS = 10004
    VERBOSITY_SPEAK_SYSTEM_WINDOW_TITLES = 10005
