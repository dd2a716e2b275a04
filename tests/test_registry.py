"""Tests for the variable registry."""

import pytest

from compositor.templates import (
    Category,
    EnumId,
    VariableDefinition,
    VariableId,
    VariableRegistry,
    VariableType,
    get_registry,
)


def definition(name="collection.name", var_id=VariableId.COLLECTION_NAME, **kwargs):
    values = {
        "category": Category.COLLECTION,
        "var_type": VariableType.STRING,
        "extractor": lambda ctx: "",
    }
    values.update(kwargs)
    return VariableDefinition(name=name, var_id=var_id, **values)


class TestGlobalRegistry:
    """Test the declarations made at import time."""

    def test_every_id_registered_once(self):
        """Each id in the table has exactly one definition."""
        registry = get_registry()
        registered = [d.var_id for d in registry.all_variables()]

        assert sorted(registered) == sorted(VariableId)
        assert len(registered) == len(set(registered))

    def test_names_are_unique(self):
        names = [d.name for d in get_registry().all_variables()]
        assert len(names) == len(set(names))

    def test_names_carry_category_prefix(self):
        for d in get_registry().all_variables():
            assert d.name.startswith(f"{d.category.value}.")

    def test_enum_variables_reference_declared_enums(self):
        registry = get_registry()
        enums = registry.enums()
        for d in registry.all_variables():
            if d.var_type == VariableType.ENUM:
                assert d.enum_id in enums

    def test_all_enums_declared(self):
        assert set(get_registry().enums()) == set(EnumId)

    def test_by_category(self):
        names = [d.name for d in get_registry().by_category(Category.KEY_COMBO)]
        assert names == [
            "keyCombo.hasKeyForClick",
            "keyCombo.stringRepresentationForClick",
            "keyCombo.hasKeyForLongClick",
            "keyCombo.stringRepresentationForLongClick",
        ]


class TestRegisterValidation:
    """Test that malformed declarations are rejected."""

    def test_duplicate_id(self):
        registry = VariableRegistry()
        registry.register(definition())

        with pytest.raises(ValueError, match="already registered"):
            registry.register(definition(name="collection.other"))

    def test_duplicate_name(self):
        registry = VariableRegistry()
        registry.register(definition())

        with pytest.raises(ValueError, match="already registered"):
            registry.register(definition(var_id=VariableId.COLLECTION_ROLE))

    def test_wrong_category_prefix(self):
        registry = VariableRegistry()

        with pytest.raises(ValueError, match="not in category"):
            registry.register(definition(name="windows.name"))

    def test_enum_without_enum_id(self):
        registry = VariableRegistry()

        with pytest.raises(ValueError, match="enum_id"):
            registry.register(definition(var_type=VariableType.ENUM))

    def test_enum_id_on_non_enum(self):
        registry = VariableRegistry()

        with pytest.raises(ValueError, match="enum_id"):
            registry.register(definition(enum_id=EnumId.ROLE))

    def test_duplicate_enum(self):
        registry = VariableRegistry()
        registry.register_enum(EnumId.ROLE, {0: "none"})

        with pytest.raises(ValueError, match="already registered"):
            registry.register_enum(EnumId.ROLE, {0: "none"})

    def test_lookup_by_plain_int(self):
        registry = VariableRegistry()
        registry.register(definition())

        assert registry.get(6100).name == "collection.name"
        assert registry.get_by_name("collection.name").var_id == VariableId.COLLECTION_NAME
        assert registry.get(1) is None
