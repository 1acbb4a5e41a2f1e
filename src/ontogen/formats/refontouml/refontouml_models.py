"""
RefOntoUML XMI Data Models.

Raw records read from a RefOntoUML XMI document before they are mapped to
the OntoUML Domain Model. Attribute names are stored by their local name
(``xmi:id`` becomes ``id``, ``xsi:type`` becomes ``type``), except the
element type which is kept as ``xsi_type``.

Models:
- XmiValue: upper/lower multiplicity value
- XmiGeneralization: ``generalization`` child of a classifier
- XmiProperty: ``ownedAttribute`` or ``ownedEnd``
- XmiPackagedElement: any ``packagedElement``
- XmiDocument: all packaged elements indexed by id
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class XmiValue:
    """Multiplicity bound (``upperValue`` / ``lowerValue``)."""
    value: Optional[str] = None


@dataclass
class XmiGeneralization:
    """Generalization to the ``general`` element, optionally in a set."""
    xmi_id: str
    general: str
    generalization_set: Optional[str] = None


@dataclass
class XmiProperty:
    """
    Attribute or association end.

    Attributes:
        xmi_id: Element id.
        name: Property name.
        type: Id of the referenced element.
        is_unique: Raw ``isUnique`` value.
        upper_value: Upper multiplicity bound.
        lower_value: Lower multiplicity bound.
    """
    xmi_id: Optional[str]
    name: Optional[str]
    type: Optional[str]
    is_unique: Optional[str] = None
    upper_value: Optional[XmiValue] = None
    lower_value: Optional[XmiValue] = None


@dataclass
class XmiPackagedElement:
    """
    A ``packagedElement`` of any RefOntoUML type.

    Attributes:
        xmi_id: Element id.
        xsi_type: Element type, e.g. ``RefOntoUML:Kind``.
        name: Element name.
        attributes: All XML attributes by local name.
        generalizations: Generalization children.
        owned_attributes: Attribute children.
        owned_ends: Association end children.
    """
    xmi_id: str
    xsi_type: str
    name: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    generalizations: List[XmiGeneralization] = field(default_factory=list)
    owned_attributes: List[XmiProperty] = field(default_factory=list)
    owned_ends: List[XmiProperty] = field(default_factory=list)

    def get(self, key: str) -> Optional[str]:
        """Return a raw XML attribute value by local name."""
        return self.attributes.get(key)


@dataclass
class XmiDocument:
    """Packaged elements of a RefOntoUML document in document order."""
    elements: List[XmiPackagedElement] = field(default_factory=list)
    by_id: Dict[str, XmiPackagedElement] = field(default_factory=dict)
    generalization_owners: Dict[str, XmiPackagedElement] = field(default_factory=dict)

    def add(self, element: XmiPackagedElement) -> None:
        self.elements.append(element)
        # first definition wins
        self.by_id.setdefault(element.xmi_id, element)
        for gen in element.generalizations:
            self.generalization_owners[gen.xmi_id] = element
