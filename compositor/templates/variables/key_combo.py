"""Keyboard shortcut variables.

Without a KeyComboProvider no action has a key assigned.
"""

from compositor.core.types import KeyAction
from compositor.templates.context import ResolverContext
from compositor.templates.variables.ids import VariableId
from compositor.templates.variables.registry import (
    Category,
    VariableType,
    register_variable,
)


def key_combo_code(ctx: ResolverContext, action: KeyAction) -> int | None:
    """Assigned key combination code for action, None if unassigned."""
    if ctx.key_combos is None:
        return None
    return ctx.key_combos.code_for(action.value)


def key_combo_text(ctx: ResolverContext, action: KeyAction) -> str:
    """Spoken form of the key combination assigned to action."""
    code = key_combo_code(ctx, action)
    if code is None:
        return ""
    return ctx.key_combos.text_for(code) or ""


@register_variable(
    name="keyCombo.hasKeyForClick",
    var_id=VariableId.KEY_COMBO_HAS_KEY_FOR_CLICK,
    category=Category.KEY_COMBO,
    var_type=VariableType.BOOLEAN,
)
def extract_has_key_for_click(ctx: ResolverContext) -> bool:
    return key_combo_code(ctx, KeyAction.PERFORM_CLICK) is not None


@register_variable(
    name="keyCombo.stringRepresentationForClick",
    var_id=VariableId.KEY_COMBO_STRING_FOR_CLICK,
    category=Category.KEY_COMBO,
    var_type=VariableType.STRING,
    description="Key combination that clicks (e.g., 'Alt+Enter')",
)
def extract_string_for_click(ctx: ResolverContext) -> str:
    return key_combo_text(ctx, KeyAction.PERFORM_CLICK)


@register_variable(
    name="keyCombo.hasKeyForLongClick",
    var_id=VariableId.KEY_COMBO_HAS_KEY_FOR_LONG_CLICK,
    category=Category.KEY_COMBO,
    var_type=VariableType.BOOLEAN,
)
def extract_has_key_for_long_click(ctx: ResolverContext) -> bool:
    return key_combo_code(ctx, KeyAction.PERFORM_LONG_CLICK) is not None


@register_variable(
    name="keyCombo.stringRepresentationForLongClick",
    var_id=VariableId.KEY_COMBO_STRING_FOR_LONG_CLICK,
    category=Category.KEY_COMBO,
    var_type=VariableType.STRING,
)
def extract_string_for_long_click(ctx: ResolverContext) -> str:
    return key_combo_text(ctx, KeyAction.PERFORM_LONG_CLICK)
