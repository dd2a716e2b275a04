"""Template variable layer.

Resolves the variables and functions phrase templates reference, e.g.
    "collection.transition" -> "in list Fruits, level 2, 5 items"
    dedupJoin("Apple", "apple", "Banana") -> "Apple, Banana"
"""

from compositor.templates.collection_phrases import CollectionPhraseComposer
from compositor.templates.context import ResolverContext
from compositor.templates.functions import TextFunctionLibrary
from compositor.templates.resolver import VariableResolver
from compositor.templates.variables import (
    Category,
    EnumId,
    VariableDefinition,
    VariableId,
    VariableRegistry,
    VariableType,
    get_registry,
)

__all__ = [
    # Composition
    "CollectionPhraseComposer",
    "TextFunctionLibrary",
    # Resolution
    "ResolverContext",
    "VariableResolver",
    # Registry
    "Category",
    "EnumId",
    "VariableDefinition",
    "VariableId",
    "VariableRegistry",
    "VariableType",
    "get_registry",
]
