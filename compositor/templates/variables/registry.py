"""Variable registry.

Each variable is declared once with @register_variable, which records its
template name, id, category, value type and extractor. The resolver looks
definitions up by id; the template engine learns the names through
VariableRegistry.declare().
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from compositor.templates.variables.ids import EnumId, VariableId

if TYPE_CHECKING:
    from compositor.core.interfaces import ParseTree
    from compositor.templates.context import ResolverContext

logger = logging.getLogger(__name__)

Extractor = Callable[["ResolverContext"], Any]


class Category(str, Enum):
    """Variable namespace partitions (the prefix of every template name)."""

    GLOBAL = "global"
    COLLECTION = "collection"
    WINDOWS = "windows"
    FOCUS = "focus"
    KEY_COMBO = "keyCombo"
    MAGNIFICATION = "magnification"
    GESTURE = "gesture"
    VERBOSITY = "verbosity"


class VariableType(Enum):
    """Value types a variable resolves to."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ENUM = "enum"

    @property
    def zero_value(self) -> Any:
        """Value returned for ids this type does not know."""
        return _ZERO_VALUES[self]


_ZERO_VALUES = {
    VariableType.BOOLEAN: False,
    VariableType.INTEGER: 0,
    VariableType.NUMBER: 0.0,
    VariableType.STRING: "",
    VariableType.ENUM: 0,
}


@dataclass(frozen=True)
class VariableDefinition:
    """A declared template variable."""

    name: str
    var_id: VariableId
    category: Category
    var_type: VariableType
    extractor: Extractor
    description: str = ""
    enum_id: EnumId | None = None


class VariableRegistry:
    """Id and name index of declared variables.

    Usage:
        registry = get_registry()
        definition = registry.get(VariableId.COLLECTION_TRANSITION)
        definition.extractor(context)
    """

    def __init__(self):
        self._by_id: dict[int, VariableDefinition] = {}
        self._by_name: dict[str, VariableDefinition] = {}
        self._enums: dict[EnumId, dict[int, str]] = {}

    def register(self, definition: VariableDefinition) -> None:
        """Add a definition. Ids and names are declared exactly once."""
        if definition.var_id in self._by_id:
            raise ValueError(f"Variable id {int(definition.var_id)} already registered")
        if definition.name in self._by_name:
            raise ValueError(f"Variable '{definition.name}' already registered")
        if not definition.name.startswith(f"{definition.category.value}."):
            raise ValueError(
                f"Variable '{definition.name}' is not in category '{definition.category.value}'"
            )
        if (definition.var_type == VariableType.ENUM) != (definition.enum_id is not None):
            raise ValueError(f"Variable '{definition.name}' enum_id does not match its type")

        self._by_id[definition.var_id] = definition
        self._by_name[definition.name] = definition

    def register_enum(self, enum_id: EnumId, values: dict[int, str]) -> None:
        if enum_id in self._enums:
            raise ValueError(f"Enum {enum_id!r} already registered")
        self._enums[enum_id] = dict(values)

    def get(self, var_id: int) -> VariableDefinition | None:
        return self._by_id.get(var_id)

    def get_by_name(self, name: str) -> VariableDefinition | None:
        return self._by_name.get(name)

    def all_variables(self) -> list[VariableDefinition]:
        return sorted(self._by_id.values(), key=lambda d: d.var_id)

    def by_category(self, category: Category) -> list[VariableDefinition]:
        return [d for d in self.all_variables() if d.category == category]

    def enums(self) -> dict[EnumId, dict[int, str]]:
        return dict(self._enums)

    def declare(self, parse_tree: "ParseTree") -> None:
        """Declare enum tables and variables with the template engine."""
        for enum_id, values in sorted(self._enums.items()):
            parse_tree.add_enum(int(enum_id), values)

        for definition in self.all_variables():
            var_id = int(definition.var_id)
            if definition.var_type == VariableType.BOOLEAN:
                parse_tree.add_boolean_variable(definition.name, var_id)
            elif definition.var_type == VariableType.INTEGER:
                parse_tree.add_integer_variable(definition.name, var_id)
            elif definition.var_type == VariableType.NUMBER:
                parse_tree.add_number_variable(definition.name, var_id)
            elif definition.var_type == VariableType.STRING:
                parse_tree.add_string_variable(definition.name, var_id)
            elif definition.var_type == VariableType.ENUM:
                parse_tree.add_enum_variable(definition.name, var_id, int(definition.enum_id))

        logger.debug(
            f"Declared {len(self._enums)} enums and {len(self._by_id)} variables"
        )


# Global registry of static declarations
_registry = VariableRegistry()


def get_registry() -> VariableRegistry:
    return _registry


def register_variable(
    name: str,
    var_id: VariableId,
    category: Category,
    var_type: VariableType,
    description: str = "",
    enum_id: EnumId | None = None,
) -> Callable[[Extractor], Extractor]:
    """Decorator registering an extractor as a template variable."""

    def decorator(func: Extractor) -> Extractor:
        _registry.register(
            VariableDefinition(
                name=name,
                var_id=var_id,
                category=category,
                var_type=var_type,
                extractor=func,
                description=description,
                enum_id=enum_id,
            )
        )
        return func

    return decorator
