"""
OntoUML mapping rules.

Pure lookup-table predicates classifying OntoUML entity and relation types.
The transformer passes depend on the exact boundaries of these tables.

Usage:
    from ontogen.core.mapping_rules import is_aspect_type, is_valid_superclass_for

    if is_valid_superclass_for(EntityType.SUB_KIND, EntityType.KIND):
        ...
"""

from typing import Dict, FrozenSet

from ontogen.shared.models.ontouml import EntityType, RelationType


# =============================================================================
# Lookup Tables
# =============================================================================

# Valid superclass types for the given entity type. Types absent from the
# table accept no superclass at all.
VALID_SUPERCLASS_TYPES: Dict[EntityType, FrozenSet[EntityType]] = {
    EntityType.SUB_KIND: frozenset({EntityType.KIND, EntityType.SUB_KIND}),
    EntityType.ROLE: frozenset({EntityType.ROLE}),
    EntityType.PHASE: frozenset({EntityType.PHASE}),
}

# Relation types mapped to plain associations.
ASSOCIATION_MAPPED_RELATION_TYPES: FrozenSet[RelationType] = frozenset({
    RelationType.MATERIAL,
    RelationType.MEDIATION,
    RelationType.ASSOCIATION,
    RelationType.CHARACTERIZATION,
    RelationType.COMPONENT_OF,
})

# Entity types providing identity (directly or indirectly).
IDENTITY_PROVIDERS: FrozenSet[EntityType] = frozenset({
    EntityType.KIND,
    EntityType.SUB_KIND,
    EntityType.COLLECTIVE,
    EntityType.QUANTITY,
})

# Entity types that are aspects (existentially dependent on a bearer).
ASPECT_TYPES: FrozenSet[EntityType] = frozenset({
    EntityType.PERCEIVABLE_QUALITY,
    EntityType.NON_PERCEIVABLE_QUALITY,
    EntityType.NOMINAL_QUALITY,
    EntityType.MODE,
})

# Entity types that can own a role.
VALID_ROLE_OWNERS: FrozenSet[EntityType] = frozenset({
    EntityType.KIND,
    EntityType.SUB_KIND,
    EntityType.ROLE,
    EntityType.PHASE,
    EntityType.COLLECTIVE,
    EntityType.QUANTITY,
    EntityType.RELATOR,
    EntityType.PERCEIVABLE_QUALITY,
    EntityType.NON_PERCEIVABLE_QUALITY,
    EntityType.NOMINAL_QUALITY,
    EntityType.MODE,
})


# =============================================================================
# Predicates
# =============================================================================

def is_valid_role_owner(entity_type: EntityType) -> bool:
    """Determine whether the provided type can own a role."""
    return entity_type in VALID_ROLE_OWNERS


def is_aspect_type(entity_type: EntityType) -> bool:
    """Determine whether the provided type is an aspect type."""
    return entity_type in ASPECT_TYPES


def is_identity_provider(entity_type: EntityType) -> bool:
    """Determine whether the provided type is an identity provider."""
    return entity_type in IDENTITY_PROVIDERS


def is_association_mapped(relation_type: RelationType) -> bool:
    """Determine whether the provided relation type is mapped to an association."""
    return relation_type in ASSOCIATION_MAPPED_RELATION_TYPES


def is_valid_superclass_for(entity_type: EntityType, super_class_type: EntityType) -> bool:
    """
    Determine whether ``super_class_type`` is a valid superclass type for ``entity_type``.

    Args:
        entity_type: Type of the specializing entity.
        super_class_type: Type of the candidate superclass.

    Returns:
        True only for the pairings listed in VALID_SUPERCLASS_TYPES.
    """
    return super_class_type in VALID_SUPERCLASS_TYPES.get(entity_type, frozenset())
