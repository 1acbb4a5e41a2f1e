"""
C# Language Mapper.

This module maps a finalized Object Model to the C# view model rendered by
the C# templates.

Mapping process:
1. Map every class (properties, methods, type resolution)
2. Materialize every plain relation into a pair of relation views
3. Materialize derived relations through their relator
4. Finalize classes: inherit constructor parameters from superclasses and
   union classes, resolve interface and base class lists

Usage:
    from ontogen.formats.csharp import CSharpMapper

    mapper = CSharpMapper()
    view_model = mapper.model_to_view_model(object_model, options)

    for clazz in view_model.classes:
        print(clazz.name, clazz.interface_extends)
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, NamedTuple, Optional, Set, Tuple

from ontogen.constants import CSharpConfig
from ontogen.core.exceptions import SemanticError, UnresolvedReferenceError
from ontogen.core.type_mapping import TypeMappingLoader
from ontogen.shared.models.object_model import (
    AttributeInfo,
    ClassInfo,
    MethodInfo,
    ObjectModel,
    RelationEndInfo,
    RelationInfo,
    TypeInfo,
    TypeMapping,
)
from ontogen.shared.models.options import GeneratorOptions

from .csharp_view_model import (
    ClassViewModel,
    CtorRelation,
    CtorViewModel,
    DerivedRelationViewModel,
    MethodViewModel,
    ModelViewModel,
    ParameterViewModel,
    PropertyViewModel,
    RelationKind,
    RelationViewModel,
    TypeInfoViewModel,
)

logger = logging.getLogger(__name__)


_BOOL = TypeInfoViewModel(name="bool")

# Interface every generated class implements.
BASE_INTERFACE = ClassViewModel(
    name=CSharpConfig.BASE_INTERFACE_NAME,
    is_interface=True,
    methods=(
        MethodViewModel(
            name="IsValid",
            parameters=(ParameterViewModel(name="deep", type_info=_BOOL, is_collection=False),),
            type_info=_BOOL,
        ),
        MethodViewModel(name="Invalidate"),
    ),
)


def is_value_type(name: str) -> bool:
    """Determine if a type name is a C# value type."""
    return name in CSharpConfig.VALUE_TYPES


def _is_many(max_items: Optional[int]) -> bool:
    return max_items is not None and (max_items > 1 or max_items < 0)


def _is_exactly_one(end: RelationEndInfo) -> bool:
    return end.min_items == 1 and end.max_items == 1


def _bounded(max_items: Optional[int]) -> Optional[int]:
    return max_items if max_items is not None and max_items > 0 else None


def _item_name(end: RelationEndInfo) -> str:
    return end.name or end.class_name


# =============================================================================
# Relation materialization
# =============================================================================

class RelationPair(NamedTuple):
    """Views of one relation from its canonical source and target classes."""
    source: RelationViewModel
    target: RelationViewModel
    switched: bool


def materialize_relation(relation: RelationInfo, dependencies: Mapping[str, Optional[str]]) -> RelationPair:
    """
    Produce the source and target views of a relation.

    A 1:N relation authored with the "many" end as source is swapped so the
    singular end becomes the source.

    Args:
        relation: The relation to materialize.
        dependencies: ``existentially_dependent_on`` of every class by name.

    Returns:
        The pair of relation views and whether the ends were swapped.
    """
    source_end, target_end = relation.source_end, relation.target_end
    switched = False
    if source_end.is_many and target_end.max_items == 1:
        source_end, target_end = target_end, source_end
        switched = True

    if source_end.max_items == 1:
        kind = RelationKind.ONE_TO_ONE if target_end.max_items == 1 else RelationKind.ONE_TO_MANY
    else:
        kind = RelationKind.MANY_TO_MANY

    source_name, target_name = source_end.class_name, target_end.class_name
    source_dependency = dependencies.get(source_name)
    target_dependency = dependencies.get(target_name)
    is_source_aspect = bool(source_dependency)
    is_target_aspect = bool(target_dependency)
    is_essential = bool(relation.is_essential)
    is_inseparable = bool(relation.is_inseparable)
    allow_duplicates = bool(relation.allow_duplicates)
    # the aspect side of an aspect-to-bearer relation is fixed
    source_locked = is_source_aspect and not is_target_aspect

    source_view = RelationViewModel(
        name=relation.name,
        type=kind,
        is_source=True,
        source_class_name=source_name,
        target_class_name=target_name,
        other_class_name=target_name,
        other_item_name=_item_name(target_end),
        item_name=_item_name(source_end),
        has_set=not is_essential and not source_locked,
        has_unset=not is_essential and not _is_exactly_one(target_end) and not source_locked,
        min_items=target_end.min_items,
        max_items=_bounded(target_end.max_items),
        has_constraints=(target_end.max_items or 0) > 1 or (target_end.min_items or 0) > 0,
        allow_duplicates=allow_duplicates,
        should_render_field=True,
        should_invalidate_on_remove=target_dependency == source_name or is_inseparable,
    )
    target_view = RelationViewModel(
        name=relation.name,
        type=kind,
        is_source=False,
        source_class_name=source_name,
        target_class_name=target_name,
        other_class_name=source_name,
        other_item_name=_item_name(source_end),
        item_name=_item_name(target_end),
        has_set=not (is_essential or is_inseparable) and not is_target_aspect,
        has_unset=not (is_essential or is_inseparable) and not _is_exactly_one(source_end) and not is_target_aspect,
        min_items=source_end.min_items,
        max_items=_bounded(source_end.max_items),
        has_constraints=(source_end.max_items or 0) > 1 or (source_end.min_items or 0) > 0,
        allow_duplicates=allow_duplicates,
        # a reflexive relation keeps its field on the source side
        should_render_field=source_name != target_name,
        should_invalidate_on_remove=source_dependency == target_name,
    )
    return RelationPair(source_view, target_view, switched)


def materialize_derived_relation(
    relation: RelationInfo,
    relation_to_source: RelationViewModel,
    relation_to_target: RelationViewModel,
) -> Tuple[DerivedRelationViewModel, DerivedRelationViewModel]:
    """
    Produce the derived relation views of both participants.

    Args:
        relation: The derived relation.
        relation_to_source: The relator's view of its relation to the source class.
        relation_to_target: The relator's view of its relation to the target class.

    Returns:
        Views for the source class and the target class.
    """
    def derive(
        to_this: RelationViewModel,
        to_other: RelationViewModel,
        other_end: RelationEndInfo,
    ) -> DerivedRelationViewModel:
        is_many_relators = to_this.is_many_to_many or (to_this.is_one_to_many and not to_this.is_source)
        is_many_others = to_other.is_many_to_many or (to_other.is_one_to_many and to_other.is_source)
        return DerivedRelationViewModel(
            name=relation.name,
            relator_name=relation.derived_from or "",
            other_class_name=other_end.class_name,
            other_item_name=_item_name(other_end),
            relator_item_name=to_this.item_name,
            relator_other_item_name=to_other.other_item_name,
            is_many_relators=is_many_relators,
            is_many_others=is_many_others,
            is_many_results=is_many_relators or is_many_others,
        )

    return (
        derive(relation_to_source, relation_to_target, relation.target_end),
        derive(relation_to_target, relation_to_source, relation.source_end),
    )


# =============================================================================
# Mapping run
# =============================================================================

@dataclass
class _ClassBuilder:
    """Mutable state of one class during a mapping run."""
    info: ClassInfo
    props: List[PropertyViewModel] = field(default_factory=list)
    methods: List[MethodViewModel] = field(default_factory=list)
    relations: List[RelationViewModel] = field(default_factory=list)
    derived_relations: List[DerivedRelationViewModel] = field(default_factory=list)
    ctor_parameters: List[ParameterViewModel] = field(default_factory=list)
    ctor_relations: List[CtorRelation] = field(default_factory=list)


class _MappingRun:
    """Lookup caches and class builders of a single mapping run."""

    def __init__(self, model: ObjectModel, type_mapping: TypeMapping):
        self.model = model
        self.type_mapping = type_mapping
        self.class_infos: Dict[str, ClassInfo] = {clazz.name: clazz for clazz in model.classes}
        self.builders: Dict[str, _ClassBuilder] = {}
        self.dependencies: Dict[str, Optional[str]] = {}
        self.finalized: Dict[str, ClassViewModel] = {}
        self.in_progress: Set[str] = set()

    # -------------------------------------------------------------------------
    # Types and members
    # -------------------------------------------------------------------------

    def map_type_info(self, type_info: Optional[TypeInfo], nullable_candidate: bool = False) -> Optional[TypeInfoViewModel]:
        if type_info is None:
            return None
        if type_info.is_reference:
            referenced = self.class_infos.get(type_info.name)
            if referenced is None:
                raise UnresolvedReferenceError(
                    f"Invalid reference type name: {type_info.name}",
                    reference=type_info.name,
                )
            return TypeInfoViewModel(
                name=referenced.name,
                is_reference=True,
                is_interface=bool(referenced.is_interface),
            )
        name = self.type_mapping.get(type_info.name, type_info.name)
        return TypeInfoViewModel(
            name=name,
            should_make_nullable=nullable_candidate and is_value_type(name),
        )

    def map_attribute(self, attribute: AttributeInfo) -> PropertyViewModel:
        min_items = attribute.min_items or 0
        max_items = attribute.max_items
        is_collection = min_items > 1 or _is_many(max_items)
        try:
            type_info = self.map_type_info(attribute.type_info, nullable_candidate=not is_collection and min_items == 0)
        except UnresolvedReferenceError as e:
            e.element = attribute.name
            raise
        return PropertyViewModel(
            name=attribute.name,
            type_info=type_info,
            is_collection=is_collection,
            min_items=min_items,
            max_items=_bounded(max_items),
            has_constraints=(max_items is not None and max_items > 1) or min_items > 1,
        )

    def map_method(self, method: MethodInfo) -> MethodViewModel:
        return MethodViewModel(
            name=method.name,
            parameters=tuple(
                ParameterViewModel(
                    name=parameter.name,
                    type_info=self.map_type_info(parameter.type_info),
                    is_collection=parameter.is_collection,
                )
                for parameter in method.parameters or []
            ),
            type_info=self.map_type_info(method.type_info),
        )

    # -------------------------------------------------------------------------
    # Run
    # -------------------------------------------------------------------------

    def execute(self) -> List[ClassViewModel]:
        for clazz in self.model.classes:
            if clazz.name in self.builders:
                logger.warning(f"Duplicate class '{clazz.name}' ignored")
                continue
            self.builders[clazz.name] = _ClassBuilder(
                info=clazz,
                props=[self.map_attribute(attr) for attr in clazz.attributes or []],
                methods=[self.map_method(method) for method in clazz.methods or []],
            )
        self.dependencies = {name: b.info.existentially_dependent_on for name, b in self.builders.items()}

        plain = [rel for rel in self.model.relations if not rel.derived_from]
        derived = [rel for rel in self.model.relations if rel.derived_from]
        for relation in plain:
            self.map_relation(relation)
        for relation in derived:
            self.map_derived_relation(relation)
        logger.debug(f"Materialized {len(plain)} relations and {len(derived)} derived relations")

        return [BASE_INTERFACE] + [self.finalize(name) for name in self.builders]

    def builder(self, class_name: str, relation: RelationInfo) -> _ClassBuilder:
        builder = self.builders.get(class_name)
        if builder is None:
            raise UnresolvedReferenceError(
                f"Relation '{relation.name}' references unknown class '{class_name}'",
                element=relation.name,
                reference=class_name,
            )
        return builder

    def map_relation(self, relation: RelationInfo) -> None:
        whole = self.builder(relation.source_end.class_name, relation)
        part = self.builder(relation.target_end.class_name, relation)

        pair = materialize_relation(relation, self.dependencies)
        self.builders[pair.source.source_class_name].relations.append(pair.source)
        self.builders[pair.target.target_class_name].relations.append(pair.target)

        if relation.is_essential or relation.is_part_initialized_with_whole:
            parameter_name = _item_name(relation.target_end)
            whole.ctor_parameters.append(ParameterViewModel(
                name=parameter_name,
                type_info=self.map_type_info(TypeInfo(name=part.info.name, is_reference=True)),
                is_collection=relation.target_end.is_many,
            ))
            whole.ctor_relations.append(CtorRelation(
                parameter_name=parameter_name,
                relation=pair.source if pair.switched else pair.target,
                is_collection=relation.target_end.is_many,
            ))

    def map_derived_relation(self, relation: RelationInfo) -> None:
        relator = self.builders.get(relation.derived_from or "")
        if relator is None:
            raise UnresolvedReferenceError(
                f"Derived relation '{relation.name}' references unknown relator '{relation.derived_from}'",
                element=relation.name,
                reference=relation.derived_from,
            )
        source = self.builder(relation.source_end.class_name, relation)
        target = self.builder(relation.target_end.class_name, relation)

        def relation_from_relator(class_name: str) -> RelationViewModel:
            found = next(
                (rel for rel in relator.relations
                 if rel.source_class_name == class_name or rel.target_class_name == class_name),
                None,
            )
            if found is None:
                raise UnresolvedReferenceError(
                    f"Relator '{relator.info.name}' of derived relation '{relation.name}' "
                    f"has no relation to '{class_name}'",
                    element=relation.name,
                    reference=class_name,
                )
            return found

        source_view, target_view = materialize_derived_relation(
            relation,
            relation_from_relator(relation.source_end.class_name),
            relation_from_relator(relation.target_end.class_name),
        )
        source.derived_relations.append(source_view)
        target.derived_relations.append(target_view)

    # -------------------------------------------------------------------------
    # Finalization
    # -------------------------------------------------------------------------

    def resolve_class(self, name: str, owner: str, role: str) -> ClassViewModel:
        if name not in self.builders:
            raise UnresolvedReferenceError(
                f"Class '{owner}' references unknown {role} '{name}'",
                element=owner,
                reference=name,
            )
        return self.finalize(name)

    def finalize(self, name: str) -> ClassViewModel:
        """Build the immutable view model of a class, its dependencies first."""
        if name in self.finalized:
            return self.finalized[name]
        if name in self.in_progress:
            raise SemanticError(f"Cyclic class hierarchy involving '{name}'", element=name)
        self.in_progress.add(name)

        builder = self.builders[name]
        info = builder.info
        super_class = self.resolve_class(info.super_class, name, "superclass") if info.super_class else None
        union_classes = tuple(self.resolve_class(n, name, "union class") for n in info.union_classes or [])
        implementing = tuple(self.resolve_class(n, name, "interface") for n in info.implementing or [])

        parameters = list(builder.ctor_parameters)
        parent_parameter_names: List[str] = []

        def union_parameter(parameter: ParameterViewModel) -> None:
            if all(existing.name != parameter.name for existing in parameters):
                parameters.append(parameter)

        if super_class is not None:
            for parameter in super_class.ctor.parameters:
                parent_parameter_names.append(parameter.name)
                union_parameter(parameter)
        for union_class in union_classes:
            for parameter in union_class.ctor.parameters:
                union_parameter(parameter)

        interface_extends = [CSharpConfig.BASE_INTERFACE_NAME]
        if super_class is not None and not union_classes:
            interface_extends.append(super_class.name)
        interface_extends.extend(union_class.name for union_class in union_classes)
        interface_extends.extend(interface.name for interface in implementing)

        class_extends = [super_class.name] if super_class is not None else []
        class_extends.append(name)

        view = ClassViewModel(
            name=name,
            is_interface=bool(info.is_interface),
            is_overlapping=bool(union_classes),
            existentially_dependent_on=info.existentially_dependent_on or None,
            props=tuple(builder.props),
            methods=tuple(builder.methods),
            ctor=CtorViewModel(
                parameters=tuple(parameters),
                relations=tuple(builder.ctor_relations),
                parent_parameter_names=tuple(parent_parameter_names),
            ),
            super_class=super_class,
            union_classes=union_classes,
            implementing=implementing,
            interface_extends=tuple(dict.fromkeys(interface_extends)),
            class_extends=tuple(dict.fromkeys(class_extends)),
            relations=tuple(builder.relations),
            derived_relations=tuple(builder.derived_relations),
        )
        self.in_progress.discard(name)
        self.finalized[name] = view
        return view


class CSharpMapper:
    """
    Map an Object Model to the C# view model.

    Example:
        >>> mapper = CSharpMapper()
        >>> view_model = mapper.model_to_view_model(model, GeneratorOptions(output="out"))
        >>> view_model.classes[0].name
        'CanValidate'
    """

    def __init__(self, type_mapping_loader: Optional[TypeMappingLoader] = None):
        """
        Initialize the mapper.

        Args:
            type_mapping_loader: Loader of the primitive type mapping file.
        """
        self._type_mapping_loader = type_mapping_loader or TypeMappingLoader()

    def model_to_view_model(
        self,
        model: ObjectModel,
        options: Optional[GeneratorOptions] = None,
        type_mapping: Optional[TypeMapping] = None,
    ) -> ModelViewModel:
        """
        Map the model.

        Args:
            model: The finalized Object Model.
            options: Generator options (type mapping path, namespace configuration).
            type_mapping: Primitive type mapping overriding the one in ``options``.

        Returns:
            The C# view model; the base interface is the first class.

        Raises:
            UnresolvedReferenceError: If a class, relation end, reference type or
                relator cannot be resolved.
            TypeMappingError: If the type mapping file is invalid.
        """
        if type_mapping is None:
            type_mapping = self._type_mapping_loader.read_type_mappings(options.type_mapping if options else None)

        classes = _MappingRun(model, type_mapping).execute()
        namespace = options.get_config(CSharpConfig.NAMESPACE_CONFIG_KEY) if options else None

        logger.info(f"Mapped {len(classes)} C# classes")
        return ModelViewModel(classes=classes, namespace=namespace or None)
