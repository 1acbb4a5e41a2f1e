"""
Mapping rule and utility tests.

Covers the OntoUML type classification tables and the shared string and
combination helpers used by the readers and the transformer.
"""

import pytest

from ontogen.core.mapping_rules import (
    is_aspect_type,
    is_association_mapped,
    is_identity_provider,
    is_valid_role_owner,
    is_valid_superclass_for,
)
from ontogen.shared.models.ontouml import EntityType, RelationType
from ontogen.shared.utilities import get_all_combinations, string_to_bool, string_to_optional_bool


@pytest.mark.unit
class TestSuperclassRules:
    """Tests for is_valid_superclass_for."""

    @pytest.mark.parametrize("entity_type,super_type", [
        (EntityType.SUB_KIND, EntityType.KIND),
        (EntityType.SUB_KIND, EntityType.SUB_KIND),
        (EntityType.ROLE, EntityType.ROLE),
        (EntityType.PHASE, EntityType.PHASE),
    ])
    def test_valid_pairs(self, entity_type, super_type):
        assert is_valid_superclass_for(entity_type, super_type)

    @pytest.mark.parametrize("entity_type,super_type", [
        (EntityType.ROLE, EntityType.KIND),
        (EntityType.PHASE, EntityType.KIND),
        (EntityType.KIND, EntityType.KIND),
        (EntityType.SUB_KIND, EntityType.CATEGORY),
        (EntityType.RELATOR, EntityType.RELATOR),
    ])
    def test_invalid_pairs(self, entity_type, super_type):
        assert not is_valid_superclass_for(entity_type, super_type)


@pytest.mark.unit
class TestTypeClassification:
    """Tests for the entity and relation type tables."""

    def test_aspect_types(self):
        aspects = {t for t in EntityType if is_aspect_type(t)}
        assert aspects == {
            EntityType.PERCEIVABLE_QUALITY,
            EntityType.NON_PERCEIVABLE_QUALITY,
            EntityType.NOMINAL_QUALITY,
            EntityType.MODE,
        }

    def test_identity_providers(self):
        providers = {t for t in EntityType if is_identity_provider(t)}
        assert providers == {EntityType.KIND, EntityType.SUB_KIND, EntityType.COLLECTIVE, EntityType.QUANTITY}

    def test_role_owners_exclude_mixins_and_categories(self):
        assert is_valid_role_owner(EntityType.KIND)
        assert is_valid_role_owner(EntityType.RELATOR)
        assert is_valid_role_owner(EntityType.MODE)
        assert not is_valid_role_owner(EntityType.CATEGORY)
        assert not is_valid_role_owner(EntityType.MIXIN)
        assert not is_valid_role_owner(EntityType.ROLE_MIXIN)

    def test_association_mapped_relations(self):
        mapped = {t for t in RelationType if is_association_mapped(t)}
        assert mapped == {
            RelationType.MATERIAL,
            RelationType.MEDIATION,
            RelationType.ASSOCIATION,
            RelationType.CHARACTERIZATION,
            RelationType.COMPONENT_OF,
        }


@pytest.mark.unit
class TestStringConversion:
    """Tests for the boolean string helpers."""

    @pytest.mark.parametrize("value,expected", [
        ("true", True),
        ("TRUE", True),
        (" True ", True),
        ("false", False),
        ("yes", False),
        ("", False),
        (None, False),
    ])
    def test_string_to_bool(self, value, expected):
        assert string_to_bool(value) is expected

    def test_string_to_optional_bool(self):
        assert string_to_optional_bool(None) is None
        assert string_to_optional_bool("") is None
        assert string_to_optional_bool("True") is True
        assert string_to_optional_bool("no") is False


@pytest.mark.unit
class TestCombinations:
    """Tests for get_all_combinations."""

    def test_all_sizes(self):
        result = get_all_combinations(["a", "b", "c"])
        assert result == [["a"], ["b"], ["c"], ["a", "b"], ["a", "c"], ["b", "c"], ["a", "b", "c"]]

    def test_min_length(self):
        result = get_all_combinations(["a", "b", "c"], 2)
        assert result == [["a", "b"], ["a", "c"], ["b", "c"], ["a", "b", "c"]]

    def test_full_set_always_last(self):
        """The full sequence is returned even when shorter than min_length."""
        assert get_all_combinations(["a"], 2) == [["a"]]
        assert get_all_combinations(["a", "b"], 2) == [["a", "b"]]

    def test_count_of_overlap_combinations(self):
        items = list(range(4))
        assert len(get_all_combinations(items, 2)) == 2 ** 4 - 4 - 1
