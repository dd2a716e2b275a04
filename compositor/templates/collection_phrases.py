"""Collection navigation phrases.

Builds the fragment spoken when accessibility focus crosses into or out of a
list, grid or pager, e.g. "in list Fruits, level 2, 5 items" or
"out of vertical pager Photos".

Every count is checked for presence before it is formatted, so a phrase never
mentions an unknown count.
"""

import logging

from compositor.core.interfaces import Strings
from compositor.core.types import CollectionState, Role, Transition
from compositor.utilities.text import join_fragments

logger = logging.getLogger(__name__)


class CollectionPhraseComposer:
    """Composes collection transition and list position fragments.

    Stateless apart from the Strings collaborator; every method takes the
    collection snapshot to describe.

    Usage:
        composer = CollectionPhraseComposer(strings)
        composer.compose_transition(state)     # "in list Fruits, 5 items"
        composer.list_item_position(state)     # "item 3 of 5"
    """

    def __init__(self, strings: Strings):
        self._strings = strings

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def compose_transition(self, state: CollectionState) -> str:
        """Fragment announcing a collection boundary crossing."""
        if state.transition == Transition.ENTER:
            if state.role_description is None:
                return self._enter(state)
            logger.debug(f"Collection role description is {state.role_description}")
            return self._enter_with_role_description(state)

        if state.transition == Transition.EXIT:
            if state.role_description is None:
                return self._exit(state)
            logger.debug(f"Collection role description is {state.role_description}")
            return self._role_description_exit(state)

        return ""

    def _enter(self, state: CollectionState) -> str:
        if state.role == Role.LIST:
            return join_fragments([
                self._name(state, "in_list", "in_list_with_name"),
                self._level(state),
                self._list_item_count(state),
            ])

        if state.role == Role.GRID:
            return join_fragments([
                self._name(state, "in_grid", "in_grid_with_name"),
                self._level(state),
                self._grid_item_count(state),
            ])

        if state.role == Role.PAGER:
            # Pagers without collection metadata (legacy pagers with two or
            # more children) are still announced as pagers, by name only
            if not state.has_any_count():
                return self._name(state, "in_pager", "in_pager_with_name")
            if (
                state.has_both_counts()
                and state.row_count > 1
                and state.column_count > 1
            ):
                return self._grid_pager_enter(state)
            if state.is_vertical():
                return self._vertical_pager_enter(state)
            # UNSPECIFIED alignment lands here too
            return self._horizontal_pager_enter(state)

        return ""

    def _enter_with_role_description(self, state: CollectionState) -> str:
        item_count = ""
        if state.role == Role.LIST:
            item_count = self._list_item_count(state)
        elif state.role == Role.GRID:
            item_count = self._grid_item_count(state)
        elif state.role == Role.PAGER:
            if state.has_both_counts():
                item_count = self._grid_pager_enter(state)
            elif state.has_any_count():
                if state.is_vertical():
                    item_count = self._vertical_pager_enter(state)
                else:
                    item_count = self._horizontal_pager_enter(state)
            else:
                item_count = self._role_description_enter(state)

        return join_fragments([
            self._role_description_enter(state),
            self._level(state),
            item_count,
        ])

    def _exit(self, state: CollectionState) -> str:
        if state.role == Role.LIST:
            return self._name(state, "out_of_list", "out_of_list_with_name")

        if state.role == Role.GRID:
            return self._name(state, "out_of_grid", "out_of_grid_with_name")

        if state.role == Role.PAGER:
            if state.has_both_counts():
                return self._name(
                    state, "out_of_grid_pager", "out_of_grid_pager_with_name"
                )
            if state.has_any_count():
                if state.is_vertical():
                    return self._name(
                        state, "out_of_vertical_pager", "out_of_vertical_pager_with_name"
                    )
                return self._name(
                    state, "out_of_horizontal_pager", "out_of_horizontal_pager_with_name"
                )
            return self._name(state, "out_of_pager", "out_of_pager_with_name")

        return ""

    # =========================================================================
    # PAGERS
    # =========================================================================

    def _grid_pager_enter(self, state: CollectionState) -> str:
        position = None
        table_item = state.table_item
        if (
            state.has_both_counts()
            and table_item is not None
            and table_item.row_index is not None
            and table_item.column_index is not None
        ):
            position = join_fragments([
                self._strings.get("row_index_template", table_item.row_index + 1),
                self._strings.get("column_index_template", table_item.column_index + 1),
            ])

        return join_fragments([
            self._name(state, "in_grid_pager", "in_grid_pager_with_name"),
            self._level(state),
            position,
            self._quantity("template_list_row_count", state.row_count),
            self._quantity("template_list_column_count", state.column_count),
        ])

    def _vertical_pager_enter(self, state: CollectionState) -> str:
        table_item = state.table_item
        row_index = table_item.row_index if table_item else None
        position = None
        if row_index is not None and state.row_count is not None:
            position = self._strings.get(
                "template_viewpager_index_count", row_index + 1, state.row_count
            )
        return join_fragments([
            self._name(state, "in_vertical_pager", "in_vertical_pager_with_name"),
            self._level(state),
            position,
        ])

    def _horizontal_pager_enter(self, state: CollectionState) -> str:
        table_item = state.table_item
        column_index = table_item.column_index if table_item else None
        position = None
        if column_index is not None and state.column_count is not None:
            position = self._strings.get(
                "template_viewpager_index_count", column_index + 1, state.column_count
            )
        return join_fragments([
            self._name(state, "in_horizontal_pager", "in_horizontal_pager_with_name"),
            self._level(state),
            position,
        ])

    # =========================================================================
    # FRAGMENTS
    # =========================================================================

    def _name(self, state: CollectionState, key: str, key_with_name: str) -> str:
        if state.name is None:
            return self._strings.get(key)
        return self._strings.get(key_with_name, state.name)

    def _role_description_enter(self, state: CollectionState) -> str:
        if not state.role_description:
            return ""
        if state.name is not None:
            return self._strings.get(
                "in_collection_role_description_with_name",
                state.role_description,
                state.name,
            )
        return self._strings.get("in_collection_role_description", state.role_description)

    def _role_description_exit(self, state: CollectionState) -> str:
        if not state.role_description:
            return ""
        if state.name is not None:
            return self._strings.get(
                "out_of_role_description_with_name",
                state.role_description,
                state.name,
            )
        return self._strings.get("out_of_role_description", state.role_description)

    def _level(self, state: CollectionState) -> str:
        """Level phrase, 1-based. Empty when the level is unknown."""
        if state.level is not None and state.level >= 0:
            return self._strings.get("template_collection_level", state.level + 1)
        return ""

    def _list_item_count(self, state: CollectionState) -> str:
        """Item count along the list's alignment axis."""
        if state.is_vertical() and state.row_count is not None:
            return self._quantity("template_list_total_count", state.row_count)
        if state.is_horizontal() and state.column_count is not None:
            return self._quantity("template_list_total_count", state.column_count)
        return ""

    def _grid_item_count(self, state: CollectionState) -> str:
        if not state.has_both_counts():
            return ""
        return join_fragments([
            self._quantity("template_list_row_count", state.row_count),
            self._quantity("template_list_column_count", state.column_count),
        ])

    def _quantity(self, key: str, count: int | None) -> str:
        if count is None:
            return ""
        return self._strings.get_quantity(key, count, count)

    # =========================================================================
    # LIST ITEMS
    # =========================================================================

    def list_item_position(self, state: CollectionState) -> str:
        """Position phrase ("item i of N") for the focused list item.

        A list has either its row count or its column count above one, never
        both (that would be a grid), so the order of the two checks does not
        matter for well-formed lists.
        """
        list_item = state.list_item
        index = list_item.index if list_item else None
        if index is None:
            return ""

        row_count = state.row_count
        column_count = state.column_count
        if column_count is not None and column_count > 1 and row_count is not None:
            return self._strings.get("list_index_template", index + 1, column_count)
        if row_count is not None and row_count > 1 and column_count is not None:
            return self._strings.get("list_index_template", index + 1, row_count)
        return ""
