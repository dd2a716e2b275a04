"""Collection variables: the list/grid/pager the focus is in.

Index variables surface -1 when the index is unknown, which is what phrase
templates compare against.
"""

from compositor.core.types import RowColumnTransition
from compositor.templates.context import ResolverContext
from compositor.templates.variables.ids import EnumId, VariableId
from compositor.templates.variables.registry import (
    Category,
    VariableType,
    register_variable,
)

UNKNOWN_INDEX = -1


def _index(value: int | None) -> int:
    return UNKNOWN_INDEX if value is None else value


@register_variable(
    name="collection.name",
    var_id=VariableId.COLLECTION_NAME,
    category=Category.COLLECTION,
    var_type=VariableType.STRING,
)
def extract_collection_name(ctx: ResolverContext) -> str:
    return ctx.collection.name or ""


@register_variable(
    name="collection.role",
    var_id=VariableId.COLLECTION_ROLE,
    category=Category.COLLECTION,
    var_type=VariableType.ENUM,
    enum_id=EnumId.ROLE,
)
def extract_collection_role(ctx: ResolverContext) -> int:
    return int(ctx.collection.role)


@register_variable(
    name="collection.transition",
    var_id=VariableId.COLLECTION_TRANSITION,
    category=Category.COLLECTION,
    var_type=VariableType.STRING,
    description="Phrase for entering or leaving a collection (e.g., 'in list Fruits, 5 items')",
)
def extract_collection_transition(ctx: ResolverContext) -> str:
    return ctx.composer.compose_transition(ctx.collection)


@register_variable(
    name="collection.exists",
    var_id=VariableId.COLLECTION_EXISTS,
    category=Category.COLLECTION,
    var_type=VariableType.BOOLEAN,
)
def extract_collection_exists(ctx: ResolverContext) -> bool:
    return ctx.collection.exists


@register_variable(
    name="collection.isRowTransition",
    var_id=VariableId.COLLECTION_IS_ROW_TRANSITION,
    category=Category.COLLECTION,
    var_type=VariableType.BOOLEAN,
)
def extract_is_row_transition(ctx: ResolverContext) -> bool:
    return bool(ctx.collection.row_column_transition & RowColumnTransition.ROW)


@register_variable(
    name="collection.isColumnTransition",
    var_id=VariableId.COLLECTION_IS_COLUMN_TRANSITION,
    category=Category.COLLECTION,
    var_type=VariableType.BOOLEAN,
)
def extract_is_column_transition(ctx: ResolverContext) -> bool:
    return bool(ctx.collection.row_column_transition & RowColumnTransition.COLUMN)


# =============================================================================
# TABLE ITEMS
# =============================================================================


@register_variable(
    name="collection.tableItem.headingType",
    var_id=VariableId.COLLECTION_TABLE_ITEM_HEADING_TYPE,
    category=Category.COLLECTION,
    var_type=VariableType.ENUM,
    enum_id=EnumId.COLLECTION_HEADING_TYPE,
)
def extract_table_item_heading_type(ctx: ResolverContext) -> int:
    table_item = ctx.collection.table_item
    return int(table_item.heading_type) if table_item else 0


@register_variable(
    name="collection.tableItem.rowName",
    var_id=VariableId.COLLECTION_TABLE_ITEM_ROW_NAME,
    category=Category.COLLECTION,
    var_type=VariableType.STRING,
)
def extract_table_item_row_name(ctx: ResolverContext) -> str:
    table_item = ctx.collection.table_item
    return table_item.row_name if table_item else ""


@register_variable(
    name="collection.tableItem.rowIndex",
    var_id=VariableId.COLLECTION_TABLE_ITEM_ROW_INDEX,
    category=Category.COLLECTION,
    var_type=VariableType.INTEGER,
)
def extract_table_item_row_index(ctx: ResolverContext) -> int:
    table_item = ctx.collection.table_item
    return _index(table_item.row_index if table_item else None)


@register_variable(
    name="collection.tableItem.columnName",
    var_id=VariableId.COLLECTION_TABLE_ITEM_COLUMN_NAME,
    category=Category.COLLECTION,
    var_type=VariableType.STRING,
)
def extract_table_item_column_name(ctx: ResolverContext) -> str:
    table_item = ctx.collection.table_item
    return table_item.column_name if table_item else ""


@register_variable(
    name="collection.tableItem.columnIndex",
    var_id=VariableId.COLLECTION_TABLE_ITEM_COLUMN_INDEX,
    category=Category.COLLECTION,
    var_type=VariableType.INTEGER,
)
def extract_table_item_column_index(ctx: ResolverContext) -> int:
    table_item = ctx.collection.table_item
    return _index(table_item.column_index if table_item else None)


# =============================================================================
# LIST AND PAGER ITEMS
# =============================================================================


@register_variable(
    name="collection.listItem.isHeading",
    var_id=VariableId.COLLECTION_LIST_ITEM_IS_HEADING,
    category=Category.COLLECTION,
    var_type=VariableType.BOOLEAN,
)
def extract_list_item_is_heading(ctx: ResolverContext) -> bool:
    list_item = ctx.collection.list_item
    return list_item is not None and list_item.is_heading


@register_variable(
    name="collection.listItem.positionDescription",
    var_id=VariableId.COLLECTION_LIST_ITEM_POSITION_DESCRIPTION,
    category=Category.COLLECTION,
    var_type=VariableType.STRING,
    description="Position of the focused list item (e.g., 'item 3 of 10')",
)
def extract_list_item_position_description(ctx: ResolverContext) -> str:
    return ctx.composer.list_item_position(ctx.collection)


@register_variable(
    name="collection.pagerItem.rowIndex",
    var_id=VariableId.COLLECTION_PAGER_ITEM_ROW_INDEX,
    category=Category.COLLECTION,
    var_type=VariableType.INTEGER,
)
def extract_pager_item_row_index(ctx: ResolverContext) -> int:
    pager_item = ctx.collection.pager_item
    return _index(pager_item.row_index if pager_item else None)


@register_variable(
    name="collection.pagerItem.columnIndex",
    var_id=VariableId.COLLECTION_PAGER_ITEM_COLUMN_INDEX,
    category=Category.COLLECTION,
    var_type=VariableType.INTEGER,
)
def extract_pager_item_column_index(ctx: ResolverContext) -> int:
    pager_item = ctx.collection.pager_item
    return _index(pager_item.column_index if pager_item else None)


@register_variable(
    name="collection.pagerItem.isHeading",
    var_id=VariableId.COLLECTION_PAGER_ITEM_IS_HEADING,
    category=Category.COLLECTION,
    var_type=VariableType.BOOLEAN,
)
def extract_pager_item_is_heading(ctx: ResolverContext) -> bool:
    pager_item = ctx.collection.pager_item
    return pager_item is not None and pager_item.is_heading
