"""Default English string resources.

ResourceStrings implements the Strings interface over a key -> template
table. Templates use str.format positional fields ("in list {0}").
Quantity strings pick the "one" or "other" form by count, which covers
English; hosts with real localization pass their own Strings.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)

# =============================================================================
# PLAIN STRINGS
# =============================================================================

DEFAULT_STRINGS: dict[str, str] = {
    # Collection enter
    "in_list": "in list",
    "in_list_with_name": "in list {0}",
    "in_grid": "in grid",
    "in_grid_with_name": "in grid {0}",
    "in_pager": "in pager",
    "in_pager_with_name": "in pager {0}",
    "in_grid_pager": "in grid pager",
    "in_grid_pager_with_name": "in grid pager {0}",
    "in_vertical_pager": "in vertical pager",
    "in_vertical_pager_with_name": "in vertical pager {0}",
    "in_horizontal_pager": "in horizontal pager",
    "in_horizontal_pager_with_name": "in horizontal pager {0}",
    "in_collection_role_description": "in {0}",
    "in_collection_role_description_with_name": "in {0} {1}",
    # Collection exit
    "out_of_list": "out of list",
    "out_of_list_with_name": "out of list {0}",
    "out_of_grid": "out of grid",
    "out_of_grid_with_name": "out of grid {0}",
    "out_of_pager": "out of pager",
    "out_of_pager_with_name": "out of pager {0}",
    "out_of_grid_pager": "out of grid pager",
    "out_of_grid_pager_with_name": "out of grid pager {0}",
    "out_of_vertical_pager": "out of vertical pager",
    "out_of_vertical_pager_with_name": "out of vertical pager {0}",
    "out_of_horizontal_pager": "out of horizontal pager",
    "out_of_horizontal_pager_with_name": "out of horizontal pager {0}",
    "out_of_role_description": "out of {0}",
    "out_of_role_description_with_name": "out of {0} {1}",
    # Collection position
    "template_collection_level": "level {0}",
    "row_index_template": "row {0}",
    "column_index_template": "column {0}",
    "template_viewpager_index_count": "page {0} of {1}",
    "list_index_template": "item {0} of {1}",
    # Hints
    "template_hint_seek_control": "Swipe up or down to adjust",
    "template_capital_letter": "capital {0}",
    # Magnification
    "template_magnification_on": "Magnification on, {0} percent",
    "template_fullscreen_magnification_on": "Full screen magnification on, {0} percent",
    "template_partial_magnification_on": "Partial magnification on, {0} percent",
    "magnification_off": "Magnification off",
    "template_magnification_scale_changed": "Magnification {0} percent",
    "template_fullscreen_magnification_scale_changed": "Full screen magnification {0} percent",
    "template_partial_magnification_scale_changed": "Partial magnification {0} percent",
}

# =============================================================================
# QUANTITY STRINGS
# =============================================================================

DEFAULT_QUANTITY_STRINGS: dict[str, dict[str, str]] = {
    "template_list_total_count": {"one": "{0} item", "other": "{0} items"},
    "template_list_row_count": {"one": "{0} row", "other": "{0} rows"},
    "template_list_column_count": {"one": "{0} column", "other": "{0} columns"},
}


class ResourceStrings:
    """Strings backed by in-memory template tables.

    Usage:
        strings = ResourceStrings(overrides={"in_list": "inside list"})
        strings.get("in_list_with_name", "Fruits")  # "in list Fruits"
        strings.get_quantity("template_list_total_count", 5, 5)  # "5 items"
    """

    def __init__(
        self,
        overrides: dict[str, str] | None = None,
        quantity_overrides: dict[str, dict[str, str]] | None = None,
    ):
        self._strings = {**DEFAULT_STRINGS, **(overrides or {})}
        self._quantities = {**DEFAULT_QUANTITY_STRINGS, **(quantity_overrides or {})}

    def get(self, key: str, *args: Any) -> str:
        template = self._strings.get(key)
        if template is None:
            logger.warning(f"Missing string resource '{key}'")
            return ""
        return template.format(*args)

    def get_quantity(self, key: str, count: int, *args: Any) -> str:
        forms = self._quantities.get(key)
        if forms is None:
            logger.warning(f"Missing quantity resource '{key}'")
            return ""
        form = "one" if count == 1 else "other"
        template = forms.get(form)
        if template is None:
            logger.warning(f"Quantity resource '{key}' has no '{form}' form")
            template = forms.get("other")
        if template is None:
            return ""
        return template.format(*args)

