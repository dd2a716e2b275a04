"""Magnification variables."""

from compositor.core.types import MagnificationMode, MagnificationStateKind
from compositor.templates.context import ResolverContext
from compositor.templates.variables.ids import VariableId
from compositor.templates.variables.registry import (
    Category,
    VariableType,
    register_variable,
)

# String keys by (state, mode); mode None means the platform did not report one
_MAGNIFICATION_TEMPLATES = {
    (MagnificationStateKind.ON, None): "template_magnification_on",
    (MagnificationStateKind.ON, MagnificationMode.FULLSCREEN): "template_fullscreen_magnification_on",
    (MagnificationStateKind.ON, MagnificationMode.WINDOW): "template_partial_magnification_on",
    (MagnificationStateKind.SCALE_CHANGED, None): "template_magnification_scale_changed",
    (MagnificationStateKind.SCALE_CHANGED, MagnificationMode.FULLSCREEN): (
        "template_fullscreen_magnification_scale_changed"
    ),
    (MagnificationStateKind.SCALE_CHANGED, MagnificationMode.WINDOW): (
        "template_partial_magnification_scale_changed"
    ),
}


@register_variable(
    name="magnification.stateChanged",
    var_id=VariableId.MAGNIFICATION_STATE_CHANGED,
    category=Category.MAGNIFICATION,
    var_type=VariableType.STRING,
    description="Magnification change (e.g., 'Full screen magnification on, 200 percent')",
)
def extract_magnification_state_changed(ctx: ResolverContext) -> str:
    magnification = ctx.navigation.magnification
    if magnification.state == MagnificationStateKind.OFF:
        return ctx.strings.get("magnification_off")

    key = _MAGNIFICATION_TEMPLATES.get((magnification.state, magnification.mode))
    if key is None:
        return ""
    return ctx.strings.get(key, magnification.scale_percent)
