"""
OntoUML to Object Model Transformer.

This module maps an OntoUML Domain Model to the target-neutral Object Model.

Transformation passes (fixed order):
1. Basic mapping of entities to classes (attributes, superclass, union classes)
2. Existential dependency resolution of aspects (qualities and modes)
3. Expansion of overlapping generalization sets into union classes
4. Extraction of phase partitions into marker interfaces
5. Role ownership relations
6. Association-style relations
7. Grouped subQuantityOf / subCollectionOf / memberOf relations

Usage:
    from ontogen.core.transformer import OntoUmlToObjectModelTransformer

    transformer = OntoUmlToObjectModelTransformer()
    object_model = transformer.transform(domain_model)

    for clazz in object_model.classes:
        print(clazz.name, clazz.super_class)
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Tuple

from ontogen.constants import TransformConfig
from ontogen.shared.models.object_model import (
    AttributeInfo,
    ClassInfo,
    ObjectModel,
    RelationEndInfo,
    RelationInfo,
    TypeInfo,
)
from ontogen.shared.models.ontouml import (
    EntityType,
    OntoUmlAttribute,
    OntoUmlEntity,
    OntoUmlModel,
    OntoUmlRelation,
    OntoUmlRelationEnd,
    RelationType,
)
from ontogen.shared.utilities import get_all_combinations

from .exceptions import InvalidAspectsError, RoleWithoutOwnerError
from .mapping_rules import (
    is_aspect_type,
    is_association_mapped,
    is_identity_provider,
    is_valid_role_owner,
    is_valid_superclass_for,
)
from .validators import DomainModelValidator

logger = logging.getLogger(__name__)


# Grouped relation types with their interface and field name suffixes.
GROUPED_RELATIONS: Tuple[Tuple[RelationType, str, str], ...] = (
    (RelationType.SUB_QUANTITY_OF, "SubQuantity", "SubQuantities"),
    (RelationType.SUB_COLLECTION_OF, "SubCollection", "SubCollections"),
    (RelationType.MEMBER_OF, "Member", "Members"),
)


@dataclass
class TransformContext:
    """
    State of a single transformation run.

    Attributes:
        model: The Domain Model being transformed (read-only).
        classes: Produced classes in creation order.
        relations: Produced relations in creation order.
        class_lookup: Registered classes by name.
    """
    model: OntoUmlModel
    classes: List[ClassInfo] = field(default_factory=list)
    relations: List[RelationInfo] = field(default_factory=list)
    class_lookup: Dict[str, ClassInfo] = field(default_factory=dict)

    def add_class(self, clazz: ClassInfo, register: bool = True) -> None:
        """Append a class to the result, registering it in the lookup unless told otherwise."""
        self.classes.append(clazz)
        if register:
            self.class_lookup[clazz.name] = clazz

    def add_relation(self, relation: RelationInfo) -> None:
        self.relations.append(relation)

    def entity(self, name: str) -> OntoUmlEntity:
        return self.model.entities[name]

    def to_object_model(self) -> ObjectModel:
        return ObjectModel(classes=self.classes, relations=self.relations)


@dataclass
class _PendingAspect:
    """Aspect class awaiting existential dependency resolution."""
    clazz: ClassInfo
    candidates: List[Tuple[ClassInfo, bool]]  # (candidate class, candidate is aspect)


class OntoUmlToObjectModelTransformer:
    """
    Transform an OntoUML Domain Model into an Object Model.

    The transformer is stateless between runs; every call to ``transform``
    works on a fresh TransformContext.

    Example:
        >>> transformer = OntoUmlToObjectModelTransformer()
        >>> result = transformer.transform(model)
        >>> print(f"Produced {len(result.classes)} classes")
    """

    def __init__(self, validate_references: bool = True):
        """
        Initialize the transformer.

        Args:
            validate_references: Fail fast on dangling entity references
                before the passes run.
        """
        self.validate_references = validate_references
        self._validator = DomainModelValidator()

    def transform(self, model: OntoUmlModel) -> ObjectModel:
        """
        Map the Domain Model to an Object Model.

        Args:
            model: The Domain Model to transform.

        Returns:
            The finalized Object Model.

        Raises:
            UnresolvedReferenceError: If the model references unknown entities.
            InvalidAspectsError: If aspect dependencies cannot be resolved.
            RoleWithoutOwnerError: If a Role has no valid owner.
        """
        if self.validate_references:
            self._validator.validate_or_raise(model)

        logger.info(
            f"Transforming domain model: {model.entity_count} entities, "
            f"{model.relation_count} relations, {len(model.generalization_sets)} generalization sets"
        )
        context = TransformContext(model=model)

        self._basic_mapping(context)
        self._process_existential_dependencies(context)
        self._process_overlapping_generalizations(context)
        self._process_phase_partitions(context)
        self._process_roles(context)
        self._process_association_mapped_relations(context)
        self._process_special_relations(context)

        logger.info(
            f"Transformation complete: {len(context.classes)} classes, "
            f"{len(context.relations)} relations"
        )
        return context.to_object_model()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _map_attribute(attribute: OntoUmlAttribute) -> AttributeInfo:
        return AttributeInfo(
            name=attribute.name,
            type_info=TypeInfo(name=attribute.type, is_reference=False),
            min_items=attribute.min_items,
            max_items=attribute.max_items,
        )

    @staticmethod
    def _map_end(end: OntoUmlRelationEnd) -> RelationEndInfo:
        return RelationEndInfo(
            name=end.name,
            class_name=end.type,
            min_items=end.min_items,
            max_items=end.max_items,
        )

    @staticmethod
    def _get_super_class(entity: OntoUmlEntity, context: TransformContext) -> Optional[str]:
        """Return the first predecessor that is a valid superclass of the entity."""
        for name in entity.predecessor_names:
            candidate = context.entity(name)
            if is_valid_superclass_for(entity.type, candidate.type):
                return candidate.name
        return None

    # -------------------------------------------------------------------------
    # Passes
    # -------------------------------------------------------------------------

    def _basic_mapping(self, context: TransformContext) -> None:
        """Create one class per entity."""
        for entity in context.model.entities.values():
            super_class = self._get_super_class(entity, context)
            union_classes = [
                name for name in entity.predecessor_names
                if name != super_class and not is_identity_provider(context.entity(name).type)
            ]
            context.add_class(ClassInfo(
                name=entity.name,
                attributes=[self._map_attribute(attr) for attr in entity.attributes],
                super_class=super_class,
                union_classes=union_classes,
                implementing=[],
            ))
        logger.debug(f"Basic mapping produced {len(context.classes)} classes")

    def _process_existential_dependencies(self, context: TransformContext) -> None:
        """
        Resolve ``existentially_dependent_on`` for aspect classes.

        A pending aspect is resolved by a non-aspect characterization partner,
        or by an aspect partner whose own dependency is already resolved.
        Unresolved aspects are re-queued; the number of attempts is bounded
        by the square of the initial queue length.
        """
        model = context.model
        characterizations = list(model.relations_of_type(RelationType.CHARACTERIZATION))

        queue: Deque[_PendingAspect] = deque()
        for entity in model.entities.values():
            if not is_aspect_type(entity.type):
                continue
            candidates = []
            for relation in characterizations:
                if relation.touches(entity.name):
                    other = relation.other_end_type(entity.name)
                    candidates.append((context.class_lookup[other], is_aspect_type(context.entity(other).type)))
            queue.append(_PendingAspect(context.class_lookup[entity.name], candidates))

        resolved = 0
        limit = len(queue) * len(queue)
        while queue and limit:
            pending = queue.popleft()
            dependency = self._find_dependency(pending)
            if dependency is not None:
                pending.clazz.existentially_dependent_on = dependency
                resolved += 1
            else:
                queue.append(pending)
            limit -= 1

        if queue:
            unresolved = [pending.clazz.name for pending in queue]
            logger.error(f"Unresolvable aspect dependencies: {', '.join(unresolved)}")
            raise InvalidAspectsError(unresolved)

        logger.debug(f"Resolved existential dependencies of {resolved} aspects")

    @staticmethod
    def _find_dependency(pending: _PendingAspect) -> Optional[str]:
        for clazz, is_aspect in pending.candidates:
            if not is_aspect:
                return clazz.name
        for clazz, _ in pending.candidates:
            if clazz.existentially_dependent_on:
                return clazz.name
        return None

    def _process_overlapping_generalizations(self, context: TransformContext) -> None:
        """Create union classes for all combinations of overlapping set children."""
        created = 0
        for gen_set in context.model.generalization_sets.values():
            if gen_set.is_disjoint or len(gen_set.children_names) <= 1:
                continue
            members = [context.entity(name) for name in gen_set.children_names]
            for combo in get_all_combinations(members, TransformConfig.MIN_COMBINATION_SIZE):
                context.add_class(ClassInfo(
                    name="".join(member.name for member in combo),
                    attributes=[],
                    super_class=self._get_super_class(combo[0], context),
                    union_classes=[member.name for member in combo],
                    implementing=[],
                ), register=False)
                created += 1
        logger.debug(f"Created {created} overlapping generalization classes")

    def _process_phase_partitions(self, context: TransformContext) -> None:
        """Replace disjoint and complete phase partitions by marker interfaces."""
        for gen_set in context.model.generalization_sets.values():
            if not (gen_set.is_disjoint and gen_set.is_complete) or not gen_set.children_names:
                continue
            phases = [context.entity(name) for name in gen_set.children_names]
            if any(phase.type != EntityType.PHASE for phase in phases):
                continue

            owner_name = next(
                (gen.predecessor for gen in phases[0].generalizations
                 if gen.generalization_set == gen_set.name),
                None,
            )
            if owner_name is None:
                logger.warning(f"Phase partition '{gen_set.name}' has no owner, skipping")
                continue
            owner = context.class_lookup[owner_name]

            context.add_class(ClassInfo(name=gen_set.name, is_interface=True))
            for phase in phases:
                context.class_lookup[phase.name].add_implementing(gen_set.name)

            context.add_relation(RelationInfo(
                name=gen_set.name,
                source_end=RelationEndInfo(name=owner.name, class_name=owner.name, min_items=1, max_items=1),
                target_end=RelationEndInfo(name=gen_set.name, class_name=gen_set.name, min_items=1, max_items=1),
                is_inseparable=True,
                is_part_initialized_with_whole=True,
            ))
            logger.debug(f"Extracted phase partition '{gen_set.name}' owned by '{owner.name}'")

    def _process_roles(self, context: TransformContext) -> None:
        """Link every role to its owner."""
        for role in context.model.entities_of_type(EntityType.ROLE):
            owner_name = next(
                (name for name in role.predecessor_names
                 if is_valid_role_owner(context.entity(name).type)),
                None,
            )
            if owner_name is None:
                raise RoleWithoutOwnerError(role.name)
            owner = context.class_lookup[owner_name]

            context.add_relation(RelationInfo(
                name=f"{role.name}{TransformConfig.ROLE_RELATION_SUFFIX}",
                source_end=RelationEndInfo(name=owner.name, class_name=owner.name, min_items=1, max_items=1),
                target_end=RelationEndInfo(
                    name=f"{role.name}{TransformConfig.ROLE_FIELD_SUFFIX}",
                    class_name=role.name,
                    min_items=0,
                    max_items=TransformConfig.UNBOUNDED,
                ),
                is_inseparable=True,
                allow_duplicates=True,
            ))
            logger.debug(f"Role '{role.name}' owned by '{owner.name}'")

    def _process_association_mapped_relations(self, context: TransformContext) -> None:
        """Copy association-like relations."""
        count = 0
        for relation in context.model.relations.values():
            if not is_association_mapped(relation.type):
                continue
            context.add_relation(RelationInfo(
                name=relation.name,
                source_end=self._map_end(relation.source_end),
                target_end=self._map_end(relation.target_end),
                is_shareable=relation.is_shareable,
                is_immutable_part=relation.is_immutable_part,
                is_immutable_whole=relation.is_immutable_whole,
                is_essential=relation.is_essential,
                is_inseparable=relation.is_inseparable,
                allow_duplicates=relation.allow_duplicates,
                derived_from=relation.derived_from,
            ))
            count += 1
        logger.debug(f"Mapped {count} association-style relations")

    def _process_special_relations(self, context: TransformContext) -> None:
        for relation_type, interface_suffix, field_suffix in GROUPED_RELATIONS:
            self._map_grouped_relation(context, relation_type, interface_suffix, field_suffix)

    def _map_grouped_relation(
        self,
        context: TransformContext,
        relation_type: RelationType,
        interface_suffix: str,
        field_suffix: str,
    ) -> None:
        """
        Map relations of one grouped type.

        Relations are grouped by their source entity. A group with several
        distinct target types is redirected to a synthesized marker interface
        implemented by every target.
        """
        groups: Dict[str, List[OntoUmlRelation]] = {}
        for relation in context.model.relations_of_type(relation_type):
            groups.setdefault(relation.source_end.type, []).append(relation)

        for owner_name, relations in groups.items():
            target_types = list(dict.fromkeys(rel.target_end.type for rel in relations))
            target_name = target_types[0]

            if len(target_types) > 1:
                target_name = f"{owner_name}{interface_suffix}"
                context.add_class(ClassInfo(name=target_name, is_interface=True), register=False)
                for type_name in target_types:
                    context.class_lookup[type_name].add_implementing(target_name)
                logger.debug(f"Synthesized interface '{target_name}' for {len(target_types)} target types")

            owner = context.class_lookup[owner_name]
            context.add_relation(RelationInfo(
                name=f"{owner_name}{field_suffix}",
                source_end=RelationEndInfo(
                    name=owner.name,
                    class_name=owner.name,
                    min_items=0,
                    max_items=TransformConfig.UNBOUNDED,
                ),
                target_end=RelationEndInfo(
                    name=target_name,
                    class_name=target_name,
                    min_items=0,
                    max_items=TransformConfig.UNBOUNDED,
                ),
            ))
