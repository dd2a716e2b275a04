"""Gesture shortcut variables."""

from compositor.core.types import InputMode, KeyAction
from compositor.templates.context import ResolverContext
from compositor.templates.variables.ids import VariableId
from compositor.templates.variables.key_combo import key_combo_text
from compositor.templates.variables.registry import (
    Category,
    VariableType,
    register_variable,
)


@register_variable(
    name="gesture.nodeMenuShortcut",
    var_id=VariableId.GESTURE_STRING_FOR_NODE_ACTIONS,
    category=Category.GESTURE,
    var_type=VariableType.STRING,
    description="How to open the actions menu for the focused node",
)
def extract_node_menu_shortcut(ctx: ResolverContext) -> str:
    """Keyboard users hear their context-menu key combination if one is set."""
    if ctx.input_mode() == InputMode.KEYBOARD:
        key_combo = key_combo_text(ctx, KeyAction.CONTEXT_MENU)
        if key_combo:
            return key_combo
    if ctx.gestures is None:
        return ""
    return ctx.gestures.menu_shortcut_text() or ""
