"""
Onto Object Model.

Target-neutral class/relation representation produced by the OntoUML
transformer (or read directly from its JSON serialization) and consumed by
the language mappers.

Every model class offers ``to_dict()`` producing the camelCase JSON layout
of the Object Model file and ``from_dict()`` reading it back. Optional keys
whose value is ``None`` are omitted from the serialized form.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _put(result: Dict[str, Any], key: str, value: Any) -> None:
    """Store ``value`` under ``key`` unless it is None."""
    if value is not None:
        result[key] = value


@dataclass
class TypeInfo:
    """Type information; ``is_reference`` marks a reference to a model class."""
    name: str
    is_reference: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "isReference": self.is_reference}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TypeInfo":
        return cls(name=data["name"], is_reference=bool(data.get("isReference", False)))


def _type_info_from(data: Dict[str, Any]) -> Optional[TypeInfo]:
    raw = data.get("typeInfo")
    return TypeInfo.from_dict(raw) if raw is not None else None


@dataclass
class ParameterInfo:
    """Method parameter description."""
    name: str
    type_info: Optional[TypeInfo] = None
    is_collection: bool = False

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name}
        if self.type_info is not None:
            result["typeInfo"] = self.type_info.to_dict()
        result["isCollection"] = self.is_collection
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParameterInfo":
        return cls(
            name=data["name"],
            type_info=_type_info_from(data),
            is_collection=bool(data.get("isCollection", False)),
        )


@dataclass
class AttributeInfo:
    """
    Attribute description.

    Attributes:
        name: Attribute name.
        type_info: Attribute type.
        min_items: Minimal count of items.
        max_items: Maximal count of items (-1 for unlimited).
    """
    name: str
    type_info: Optional[TypeInfo] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name}
        if self.type_info is not None:
            result["typeInfo"] = self.type_info.to_dict()
        _put(result, "minItems", self.min_items)
        _put(result, "maxItems", self.max_items)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttributeInfo":
        return cls(
            name=data["name"],
            type_info=_type_info_from(data),
            min_items=data.get("minItems"),
            max_items=data.get("maxItems"),
        )


@dataclass
class MethodInfo:
    """Method description; a missing ``type_info`` means a void method."""
    name: str
    parameters: Optional[List[ParameterInfo]] = None
    type_info: Optional[TypeInfo] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name}
        if self.parameters is not None:
            result["parameters"] = [p.to_dict() for p in self.parameters]
        if self.type_info is not None:
            result["typeInfo"] = self.type_info.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MethodInfo":
        parameters = data.get("parameters")
        return cls(
            name=data["name"],
            parameters=[ParameterInfo.from_dict(p) for p in parameters] if parameters is not None else None,
            type_info=_type_info_from(data),
        )


@dataclass
class ClassInfo:
    """
    Class description.

    Attributes:
        name: Unique class name.
        attributes: Public attributes of the class.
        methods: Public methods of the class.
        super_class: Name of the superclass.
        union_classes: Names of the atomic classes this class combines.
        implementing: Names of the interfaces this class implements.
        is_abstract: The class cannot be directly instantiated.
        is_interface: The class is an interface without method bodies.
        existentially_dependent_on: Name of the class this class depends on.
    """
    name: str
    attributes: Optional[List[AttributeInfo]] = None
    methods: Optional[List[MethodInfo]] = None
    super_class: Optional[str] = None
    union_classes: Optional[List[str]] = None
    implementing: Optional[List[str]] = None
    is_abstract: Optional[bool] = None
    is_interface: Optional[bool] = None
    existentially_dependent_on: Optional[str] = None

    def add_implementing(self, interface_name: str) -> None:
        """Append an implemented interface name."""
        if self.implementing is None:
            self.implementing = []
        self.implementing.append(interface_name)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name}
        if self.attributes is not None:
            result["attributes"] = [a.to_dict() for a in self.attributes]
        if self.methods is not None:
            result["methods"] = [m.to_dict() for m in self.methods]
        _put(result, "superClass", self.super_class)
        if self.union_classes is not None:
            result["unionClasses"] = list(self.union_classes)
        if self.implementing is not None:
            result["implementing"] = list(self.implementing)
        _put(result, "isAbstract", self.is_abstract)
        _put(result, "isInterface", self.is_interface)
        _put(result, "existentiallyDependentOn", self.existentially_dependent_on)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClassInfo":
        attributes = data.get("attributes")
        methods = data.get("methods")
        union_classes = data.get("unionClasses")
        implementing = data.get("implementing")
        return cls(
            name=data["name"],
            attributes=[AttributeInfo.from_dict(a) for a in attributes] if attributes is not None else None,
            methods=[MethodInfo.from_dict(m) for m in methods] if methods is not None else None,
            super_class=data.get("superClass"),
            union_classes=list(union_classes) if union_classes is not None else None,
            implementing=list(implementing) if implementing is not None else None,
            is_abstract=data.get("isAbstract"),
            is_interface=data.get("isInterface"),
            existentially_dependent_on=data.get("existentiallyDependentOn"),
        )


@dataclass
class RelationEndInfo:
    """
    Relation end description.

    Attributes:
        name: Name of the end field.
        class_name: Name of the class this end refers to.
        min_items: Minimal count of items.
        max_items: Maximal count of items (-1 for unlimited).
    """
    name: Optional[str]
    class_name: str
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    @property
    def is_many(self) -> bool:
        """True when the end allows more than one item."""
        return self.max_items is not None and (self.max_items > 1 or self.max_items < 0)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        _put(result, "name", self.name)
        result["className"] = self.class_name
        _put(result, "minItems", self.min_items)
        _put(result, "maxItems", self.max_items)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RelationEndInfo":
        return cls(
            name=data.get("name"),
            class_name=data["className"],
            min_items=data.get("minItems"),
            max_items=data.get("maxItems"),
        )


# Relation flag attributes paired with their serialized keys.
RELATION_FLAGS = (
    ("is_shareable", "isShareable"),
    ("is_immutable_part", "isImmutablePart"),
    ("is_immutable_whole", "isImmutableWhole"),
    ("is_essential", "isEssential"),
    ("is_inseparable", "isInseparable"),
    ("allow_duplicates", "allowDuplicates"),
)


@dataclass
class RelationInfo:
    """
    Relation description.

    Flags mirror the OntoUML relation flags; ``is_part_initialized_with_whole``
    marks parts that must be supplied when the whole is constructed.
    """
    name: str
    source_end: RelationEndInfo
    target_end: RelationEndInfo
    is_shareable: Optional[bool] = None
    is_immutable_part: Optional[bool] = None
    is_immutable_whole: Optional[bool] = None
    is_essential: Optional[bool] = None
    is_inseparable: Optional[bool] = None
    allow_duplicates: Optional[bool] = None
    derived_from: Optional[str] = None
    is_part_initialized_with_whole: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "name": self.name,
            "sourceEnd": self.source_end.to_dict(),
            "targetEnd": self.target_end.to_dict(),
        }
        for attr, key in RELATION_FLAGS:
            _put(result, key, getattr(self, attr))
        _put(result, "derivedFrom", self.derived_from)
        _put(result, "isPartInitializedWithWhole", self.is_part_initialized_with_whole)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RelationInfo":
        flags = {attr: data.get(key) for attr, key in RELATION_FLAGS}
        return cls(
            name=data["name"],
            source_end=RelationEndInfo.from_dict(data["sourceEnd"]),
            target_end=RelationEndInfo.from_dict(data["targetEnd"]),
            derived_from=data.get("derivedFrom"),
            is_part_initialized_with_whole=data.get("isPartInitializedWithWhole"),
            **flags,
        )


@dataclass
class ObjectModel:
    """Ontological Object Model: all classes and class-to-class relations."""
    classes: List[ClassInfo] = field(default_factory=list)
    relations: List[RelationInfo] = field(default_factory=list)

    def find_class(self, name: str) -> Optional[ClassInfo]:
        """Return the first class with the given name, if any."""
        return next((clazz for clazz in self.classes if clazz.name == name), None)

    def find_relation(self, name: str) -> Optional[RelationInfo]:
        """Return the first relation with the given name, if any."""
        return next((rel for rel in self.relations if rel.name == name), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "classes": [c.to_dict() for c in self.classes],
            "relations": [r.to_dict() for r in self.relations],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ObjectModel":
        return cls(
            classes=[ClassInfo.from_dict(c) for c in data.get("classes", [])],
            relations=[RelationInfo.from_dict(r) for r in data.get("relations", [])],
        )


# Dictionary of mappings from domain primitive type names to platform specific ones.
TypeMapping = Dict[str, str]
