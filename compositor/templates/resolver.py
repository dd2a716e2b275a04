"""Variable resolver.

The typed entry point the template engine calls for every variable leaf.
Unknown ids, ids asked for through the wrong typed getter, and failures in
external collaborators all resolve to the type's zero value: a malformed or
version-skewed template degrades to a shorter announcement, it never raises.
"""

import logging
from typing import Any

from compositor.templates.context import ResolverContext
from compositor.templates.functions import TextFunctionLibrary
from compositor.templates.variables import (
    VariableDefinition,
    VariableRegistry,
    VariableType,
    get_registry,
)

logger = logging.getLogger(__name__)


class VariableResolver:
    """Resolves template variables against the session state.

    Usage:
        resolver = VariableResolver(context)
        resolver.get_string(VariableId.COLLECTION_TRANSITION)
        resolver.get_boolean(12345)  # unknown id -> False
    """

    def __init__(
        self,
        context: ResolverContext,
        registry: VariableRegistry | None = None,
    ):
        self._context = context
        self._registry = registry or get_registry()

    @property
    def context(self) -> ResolverContext:
        return self._context

    # =========================================================================
    # TYPED GETTERS
    # =========================================================================

    def get_boolean(self, variable_id: int) -> bool:
        return bool(self._resolve(variable_id, VariableType.BOOLEAN))

    def get_integer(self, variable_id: int) -> int:
        return int(self._resolve(variable_id, VariableType.INTEGER))

    def get_number(self, variable_id: int) -> float:
        return float(self._resolve(variable_id, VariableType.NUMBER))

    def get_string(self, variable_id: int) -> str:
        value = self._resolve(variable_id, VariableType.STRING)
        return value if value is not None else ""

    def get_enum(self, variable_id: int) -> int:
        return int(self._resolve(variable_id, VariableType.ENUM))

    # No object-graph or array variables are exposed

    def get_reference(self, variable_id: int) -> None:
        return None

    def get_array_length(self, variable_id: int) -> int:
        return 0

    def get_array_string_element(self, variable_id: int, index: int) -> str:
        return ""

    def get_array_child_element(self, variable_id: int, index: int) -> None:
        return None

    # =========================================================================
    # NAME LOOKUP
    # =========================================================================

    def get_by_name(self, name: str) -> Any:
        """Resolve a variable by its template name.

        Unknown names resolve to an empty string.
        """
        definition = self._registry.get_by_name(name)
        if definition is None:
            logger.debug(f"Unknown variable name '{name}'")
            return ""
        return self._extract(definition)

    def declare(self, parse_tree, functions: TextFunctionLibrary | None = None) -> None:
        """Declare variables (and optionally functions) with the template engine."""
        self._registry.declare(parse_tree)
        if functions is not None:
            for name, function in functions.table().items():
                parse_tree.add_function(name, function)

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _resolve(self, variable_id: int, var_type: VariableType) -> Any:
        definition = self._registry.get(variable_id)
        if definition is None:
            logger.debug(f"Unknown {var_type.value} variable id {variable_id}")
            return var_type.zero_value
        if definition.var_type != var_type:
            logger.debug(
                f"Variable '{definition.name}' is {definition.var_type.value}, "
                f"not {var_type.value}"
            )
            return var_type.zero_value
        return self._extract(definition)

    def _extract(self, definition: VariableDefinition) -> Any:
        try:
            return definition.extractor(self._context)
        except Exception as e:
            logger.warning(f"Failed to resolve variable '{definition.name}': {e}")
            return definition.var_type.zero_value
