"""Window and focus-history variables."""

from compositor.templates.context import ResolverContext
from compositor.templates.variables.ids import VariableId
from compositor.templates.variables.registry import (
    Category,
    VariableType,
    register_variable,
)


@register_variable(
    name="windows.lastWindowId",
    var_id=VariableId.WINDOWS_LAST_WINDOW_ID,
    category=Category.WINDOWS,
    var_type=VariableType.INTEGER,
    description="Window id of the previous accessibility focus (-1 if none)",
)
def extract_last_window_id(ctx: ResolverContext) -> int:
    return ctx.navigation.last_window_id


@register_variable(
    name="windows.isSplitScreenMode",
    var_id=VariableId.WINDOWS_IS_SPLIT_SCREEN_MODE,
    category=Category.WINDOWS,
    var_type=VariableType.BOOLEAN,
    description="The display of the current focus is in split-screen mode",
)
def extract_is_split_screen_mode(ctx: ResolverContext) -> bool:
    if ctx.windows is None:
        return False
    return ctx.windows.is_split_screen(ctx.navigation.current_display_id)


@register_variable(
    name="focus.isCurrentFocusInScrollableNode",
    var_id=VariableId.FOCUS_IS_CURRENT_FOCUS_IN_SCROLLABLE_NODE,
    category=Category.FOCUS,
    var_type=VariableType.BOOLEAN,
)
def extract_is_current_focus_in_scrollable(ctx: ResolverContext) -> bool:
    return ctx.navigation.is_current_focus_scrollable


@register_variable(
    name="focus.isLastFocusInScrollableNode",
    var_id=VariableId.FOCUS_IS_LAST_FOCUS_IN_SCROLLABLE_NODE,
    category=Category.FOCUS,
    var_type=VariableType.BOOLEAN,
)
def extract_is_last_focus_in_scrollable(ctx: ResolverContext) -> bool:
    return ctx.navigation.is_last_focus_scrollable
