"""Enum tables declared with the template engine.

Templates compare enum variables by these names, e.g.
`global.inputMode == keyboard`.
"""

from compositor.core.types import DescriptionOrder, HeadingType, InputMode, Role
from compositor.templates.variables.ids import EnumId
from compositor.templates.variables.registry import get_registry

COLLECTION_HEADING_TYPE = {
    HeadingType.NONE: "none",
    HeadingType.ROW: "row",
    HeadingType.COLUMN: "column",
    HeadingType.INDETERMINATE: "indeterminate",
}

INPUT_MODE = {
    InputMode.UNKNOWN: "unknown",
    InputMode.TOUCH: "touch",
    InputMode.KEYBOARD: "keyboard",
    InputMode.TV_REMOTE: "tv_remote",
    InputMode.NON_ALPHABETIC_KEYBOARD: "non_alphabetic_keyboard",
}

ROLE = {role: role.name.lower() for role in Role}

DESCRIPTION_ORDER = {
    DescriptionOrder.ROLE_NAME_STATE_POSITION: "RoleNameStatePosition",
    DescriptionOrder.STATE_NAME_ROLE_POSITION: "StateNameRolePosition",
    DescriptionOrder.NAME_ROLE_STATE_POSITION: "NameRoleStatePosition",
}


def _int_keys(table: dict) -> dict[int, str]:
    return {int(key): value for key, value in table.items()}


_registry = get_registry()
_registry.register_enum(EnumId.ROLE, _int_keys(ROLE))
_registry.register_enum(EnumId.VERBOSITY_DESCRIPTION_ORDER, _int_keys(DESCRIPTION_ORDER))
_registry.register_enum(EnumId.COLLECTION_HEADING_TYPE, _int_keys(COLLECTION_HEADING_TYPE))
_registry.register_enum(EnumId.INPUT_MODE, _int_keys(INPUT_MODE))
