"""Template variables module.

Importing this module registers all template variables via decorators.
Each variable file defines extractors decorated with @register_variable.
"""

from compositor.templates.variables import (  # noqa: F401 - side effect imports
    collection,
    enums,
    gesture,
    global_vars,
    key_combo,
    magnification,
    verbosity,
    windows,
)
from compositor.templates.variables.ids import EnumId, VariableId
from compositor.templates.variables.registry import (
    Category,
    VariableDefinition,
    VariableRegistry,
    VariableType,
    get_registry,
    register_variable,
)

__all__ = [
    "Category",
    "EnumId",
    "VariableDefinition",
    "VariableId",
    "VariableRegistry",
    "VariableType",
    "get_registry",
    "register_variable",
]
