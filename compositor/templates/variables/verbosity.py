"""Verbosity preference variables."""

from compositor.templates.context import ResolverContext
from compositor.templates.variables.ids import EnumId, VariableId
from compositor.templates.variables.registry import (
    Category,
    VariableType,
    register_variable,
)


@register_variable(
    name="verbosity.speakRole",
    var_id=VariableId.VERBOSITY_SPEAK_ROLES,
    category=Category.VERBOSITY,
    var_type=VariableType.BOOLEAN,
)
def extract_speak_roles(ctx: ResolverContext) -> bool:
    return ctx.preferences.speak_roles


@register_variable(
    name="verbosity.speakCollectionInfo",
    var_id=VariableId.VERBOSITY_SPEAK_COLLECTION_INFO,
    category=Category.VERBOSITY,
    var_type=VariableType.BOOLEAN,
)
def extract_speak_collection_info(ctx: ResolverContext) -> bool:
    return ctx.preferences.speak_collection_info


@register_variable(
    name="verbosity.descriptionOrder",
    var_id=VariableId.VERBOSITY_DESCRIPTION_ORDER,
    category=Category.VERBOSITY,
    var_type=VariableType.ENUM,
    enum_id=EnumId.VERBOSITY_DESCRIPTION_ORDER,
)
def extract_description_order(ctx: ResolverContext) -> int:
    return int(ctx.preferences.description_order)


@register_variable(
    name="verbosity.speakElementIds",
    var_id=VariableId.VERBOSITY_SPEAK_ELEMENT_IDS,
    category=Category.VERBOSITY,
    var_type=VariableType.BOOLEAN,
)
def extract_speak_element_ids(ctx: ResolverContext) -> bool:
    return ctx.preferences.speak_element_ids


@register_variable(
    name="verbosity.speakSystemWindowTitles",
    var_id=VariableId.VERBOSITY_SPEAK_SYSTEM_WINDOW_TITLES,
    category=Category.VERBOSITY,
    var_type=VariableType.BOOLEAN,
)
def extract_speak_system_window_titles(ctx: ResolverContext) -> bool:
    return ctx.preferences.speak_system_window_titles
