"""
C# View Model.

Immutable records produced by the C# language mapper and consumed by the
Jinja2 templates of the C# renderer.

Models:
- TypeInfoViewModel: resolved type of a property, parameter or method
- ParameterViewModel / PropertyViewModel / MethodViewModel: class members
- RelationKind: OneToOne / OneToMany / ManyToMany
- RelationViewModel: one participant's view of a relation
- CtorRelation / CtorViewModel: constructor obligations
- DerivedRelationViewModel: accessor computed through a relator
- ClassViewModel: a class (and its interface)
- ModelViewModel: all classes plus the namespace
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class TypeInfoViewModel:
    """
    Type information.

    Attributes:
        name: Name of the type (after primitive type mapping).
        is_reference: The type is a class of the model.
        is_interface: The referenced class is an interface.
        should_make_nullable: The type is a value type that should be rendered nullable.
    """
    name: str
    is_reference: bool = False
    is_interface: bool = False
    should_make_nullable: bool = False


@dataclass(frozen=True)
class ParameterViewModel:
    """Method or constructor parameter."""
    name: str
    type_info: Optional[TypeInfoViewModel] = None
    is_collection: bool = False


@dataclass(frozen=True)
class PropertyViewModel:
    """
    Property description.

    Attributes:
        name: Property name.
        type_info: Property type.
        is_collection: The property holds several items.
        min_items: Minimal count of items.
        max_items: Maximal count of items, None when unlimited.
        has_constraints: The property has an item count constraint.
    """
    name: str
    type_info: Optional[TypeInfoViewModel] = None
    is_collection: bool = False
    min_items: int = 0
    max_items: Optional[int] = None
    has_constraints: bool = False


@dataclass(frozen=True)
class MethodViewModel:
    """Method description; ``type_info`` None means void."""
    name: str
    parameters: Tuple[ParameterViewModel, ...] = ()
    type_info: Optional[TypeInfoViewModel] = None


class RelationKind(IntEnum):
    """Cardinality class of a relation."""
    ONE_TO_ONE = 1
    ONE_TO_MANY = 2
    MANY_TO_MANY = 3


@dataclass(frozen=True)
class RelationViewModel:
    """
    Relation as seen from one of its participating classes.

    Attributes:
        name: Relation name.
        type: Cardinality class.
        is_source: The owning class is at the (canonical) source end.
        source_class_name: Class at the source end.
        target_class_name: Class at the target end.
        other_class_name: Class at the opposite end.
        other_item_name: Field name of the opposite end.
        item_name: Field name of the owning class' end.
        has_set: The owning class can set or add related items.
        has_unset: The owning class can unset or remove related items.
        min_items: Minimal count of items at the opposite end.
        max_items: Maximal count of items at the opposite end, None when unlimited.
        has_constraints: The opposite end has an item count constraint.
        allow_duplicates: Multiple links between the same instances are allowed.
        should_render_field: The owning class renders the backing field.
        should_invalidate_on_remove: Removed items must be invalidated.
    """
    name: str
    type: RelationKind
    is_source: bool
    source_class_name: str
    target_class_name: str
    other_class_name: str
    other_item_name: str
    item_name: str
    has_set: bool
    has_unset: bool
    min_items: Optional[int]
    max_items: Optional[int]
    has_constraints: bool
    allow_duplicates: bool
    should_render_field: bool
    should_invalidate_on_remove: bool

    @property
    def is_one_to_one(self) -> bool:
        return self.type == RelationKind.ONE_TO_ONE

    @property
    def is_one_to_many(self) -> bool:
        return self.type == RelationKind.ONE_TO_MANY

    @property
    def is_many_to_many(self) -> bool:
        return self.type == RelationKind.MANY_TO_MANY

    @property
    def is_other_many(self) -> bool:
        """The owning class may be related to several items of the other class."""
        if self.is_source:
            return not self.is_one_to_one
        return self.is_many_to_many


@dataclass(frozen=True)
class CtorRelation:
    """Relation covered by a constructor parameter."""
    parameter_name: str
    relation: RelationViewModel
    is_collection: bool = False


@dataclass(frozen=True)
class CtorViewModel:
    """
    Constructor description.

    Attributes:
        parameters: All constructor parameters, own and inherited.
        relations: Relations initialized by own parameters.
        parent_parameter_names: Parameters passed on to the base constructor.
    """
    parameters: Tuple[ParameterViewModel, ...] = ()
    relations: Tuple[CtorRelation, ...] = ()
    parent_parameter_names: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DerivedRelationViewModel:
    """
    Relation derived from a relator, as seen from one participant.

    Attributes:
        name: Derived relation name.
        relator_name: Name of the relator class.
        other_class_name: Class at the opposite end.
        other_item_name: Field name of the opposite end.
        relator_item_name: Field name of the relators on the owning class.
        relator_other_item_name: Field name of the opposite class on the relator.
        is_many_relators: The owning class may have several relators.
        is_many_others: A relator may have several opposite items.
        is_many_results: The accessor returns a collection.
    """
    name: str
    relator_name: str
    other_class_name: str
    other_item_name: str
    relator_item_name: str
    relator_other_item_name: str
    is_many_relators: bool
    is_many_others: bool
    is_many_results: bool


@dataclass(frozen=True)
class ClassViewModel:
    """
    Class description.

    Attributes:
        name: Class name.
        is_interface: Only the interface is rendered.
        is_overlapping: The class combines other subclasses of its parent.
        existentially_dependent_on: Class this class is existentially dependent on.
        props: Public properties.
        methods: Public methods.
        ctor: Constructor information.
        super_class: Superclass view model.
        union_classes: Atomic classes this class combines.
        implementing: Interfaces this class implements.
        interface_extends: Names of the interfaces the class' interface extends.
        class_extends: Names of the base class and own interface of the class.
        relations: Relations the class participates in.
        derived_relations: Derived relations of the class.
    """
    name: str
    is_interface: bool = False
    is_overlapping: bool = False
    existentially_dependent_on: Optional[str] = None
    props: Tuple[PropertyViewModel, ...] = ()
    methods: Tuple[MethodViewModel, ...] = ()
    ctor: CtorViewModel = field(default_factory=CtorViewModel)
    super_class: Optional["ClassViewModel"] = None
    union_classes: Tuple["ClassViewModel", ...] = ()
    implementing: Tuple["ClassViewModel", ...] = ()
    interface_extends: Tuple[str, ...] = ()
    class_extends: Tuple[str, ...] = ()
    relations: Tuple[RelationViewModel, ...] = ()
    derived_relations: Tuple[DerivedRelationViewModel, ...] = ()


@dataclass
class ModelViewModel:
    """All classes of the model and the target namespace."""
    classes: List[ClassViewModel] = field(default_factory=list)
    namespace: Optional[str] = None

    def find_class(self, name: str) -> Optional[ClassViewModel]:
        return next((clazz for clazz in self.classes if clazz.name == name), None)
