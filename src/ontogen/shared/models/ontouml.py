"""
OntoUML Domain Model.

This module defines the data structures for representing a parsed OntoUML
model. They are the format-agnostic intermediate representation between
source readers (e.g. RefOntoUML XMI) and the Object Model transformer.

Models:
- EntityType: closed set of OntoUML class stereotypes
- RelationType: closed set of OntoUML relation stereotypes
- OntoUmlAttribute: attribute of an entity
- OntoUmlGeneralization: generalization to a predecessor entity
- OntoUmlEntity: OntoUML class
- OntoUmlRelationEnd: end of a relation
- OntoUmlRelation: relation between two entities
- OntoUmlGeneralizationSet: generalization set with disjointness/completeness
- OntoUmlModel: the whole model, keyed by element names
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional


class EntityType(Enum):
    """Type (stereotype) of an OntoUML entity."""
    KIND = "Kind"
    SUB_KIND = "SubKind"
    CATEGORY = "Category"
    ROLE = "Role"
    PHASE = "Phase"
    RELATOR = "Relator"
    COLLECTIVE = "Collective"
    QUANTITY = "Quantity"
    MODE = "Mode"
    ROLE_MIXIN = "RoleMixin"
    MIXIN = "Mixin"
    PERCEIVABLE_QUALITY = "PerceivableQuality"
    NON_PERCEIVABLE_QUALITY = "NonPerceivableQuality"
    NOMINAL_QUALITY = "NominalQuality"


class RelationType(Enum):
    """Type (stereotype) of an OntoUML relation."""
    MEDIATION = "Mediation"
    GENERALIZATION_SET = "GeneralizationSet"
    SUB_QUANTITY_OF = "SubQuantityOf"
    MEMBER_OF = "MemberOf"
    SUB_COLLECTION_OF = "SubCollectionOf"
    MATERIAL = "Material"
    ASSOCIATION = "Association"
    STRUCTURATION = "Structuration"
    CHARACTERIZATION = "Characterization"
    COMPONENT_OF = "ComponentOf"
    DERIVATION = "Derivation"


@dataclass
class OntoUmlAttribute:
    """
    Attribute of an OntoUML entity.

    Attributes:
        name: Attribute name.
        type: Name of the attribute type (primitive or entity).
        min_items: Minimal count of items.
        max_items: Maximal count of items (-1 for unlimited).
    """
    name: str
    type: str
    min_items: int = 0
    max_items: int = 1


@dataclass
class OntoUmlGeneralization:
    """Generalization of an entity to its predecessor."""
    predecessor: str
    generalization_set: Optional[str] = None


@dataclass
class OntoUmlEntity:
    """
    OntoUML class.

    Attributes:
        name: Unique entity name.
        type: Entity stereotype.
        attributes: Entity attributes in declaration order.
        generalizations: Generalizations in declaration order.
    """
    name: str
    type: EntityType
    attributes: List[OntoUmlAttribute] = field(default_factory=list)
    generalizations: List[OntoUmlGeneralization] = field(default_factory=list)

    @property
    def predecessor_names(self) -> List[str]:
        """Names of all generalization predecessors in declaration order."""
        return [gen.predecessor for gen in self.generalizations]


@dataclass
class OntoUmlRelationEnd:
    """
    End of an OntoUML relation.

    Attributes:
        name: Name of the end field.
        type: Name of the entity this end refers to.
        min_items: Minimal count of items.
        max_items: Maximal count of items (-1 for unlimited).
    """
    name: Optional[str]
    type: str
    min_items: Optional[int] = None
    max_items: Optional[int] = None


@dataclass
class OntoUmlRelation:
    """
    Relation between two OntoUML entities.

    Attributes:
        name: Unique relation name.
        type: Relation stereotype.
        source_end: Source (whole) end.
        target_end: Target (part) end.
        is_shareable: Part can be shared among multiple wholes.
        is_immutable_part: Part end is immutable.
        is_immutable_whole: Whole end is immutable.
        is_essential: Part must be set during the whole lifetime of the whole.
        is_inseparable: Part cannot exist without the whole.
        allow_duplicates: Multiple links between the same instances are allowed.
        derived_from: Name of the relator this relation is derived from.
    """
    name: str
    type: RelationType
    source_end: OntoUmlRelationEnd
    target_end: OntoUmlRelationEnd
    is_shareable: bool = False
    is_immutable_part: bool = False
    is_immutable_whole: bool = False
    is_essential: bool = False
    is_inseparable: bool = False
    allow_duplicates: bool = False
    derived_from: Optional[str] = None

    def other_end_type(self, entity_name: str) -> str:
        """Return the entity name at the end opposite to ``entity_name``."""
        if self.source_end.type != entity_name:
            return self.source_end.type
        return self.target_end.type

    def touches(self, entity_name: str) -> bool:
        """Check if either end of the relation refers to ``entity_name``."""
        return entity_name in (self.source_end.type, self.target_end.type)


@dataclass
class OntoUmlGeneralizationSet:
    """
    OntoUML generalization set.

    Attributes:
        name: Unique generalization set name.
        children_names: Names of the specializing entities.
        is_complete: No entities other than the children can specialize the parent.
        is_disjoint: The children are mutually disjoint.
    """
    name: str
    children_names: List[str] = field(default_factory=list)
    is_complete: bool = False
    is_disjoint: bool = False


@dataclass
class OntoUmlModel:
    """
    OntoUML Domain Model.

    Elements are stored in insertion-ordered dictionaries keyed by their
    names, which are the only cross-reference key in the model.
    """
    entities: Dict[str, OntoUmlEntity] = field(default_factory=dict)
    generalization_sets: Dict[str, OntoUmlGeneralizationSet] = field(default_factory=dict)
    relations: Dict[str, OntoUmlRelation] = field(default_factory=dict)

    def add_entity(self, entity: OntoUmlEntity) -> None:
        self.entities[entity.name] = entity

    def add_relation(self, relation: OntoUmlRelation) -> None:
        self.relations[relation.name] = relation

    def add_generalization_set(self, generalization_set: OntoUmlGeneralizationSet) -> None:
        self.generalization_sets[generalization_set.name] = generalization_set

    def entities_of_type(self, *types: EntityType) -> Iterator[OntoUmlEntity]:
        """Iterate over entities having any of the given types."""
        return (entity for entity in self.entities.values() if entity.type in types)

    def relations_of_type(self, *types: RelationType) -> Iterator[OntoUmlRelation]:
        """Iterate over relations having any of the given types."""
        return (relation for relation in self.relations.values() if relation.type in types)

    @property
    def entity_count(self) -> int:
        return len(self.entities)

    @property
    def relation_count(self) -> int:
        return len(self.relations)
