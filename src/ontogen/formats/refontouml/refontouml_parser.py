"""
RefOntoUML Parser.

This module reads RefOntoUML XMI documents (as exported by OLED) into the
OntoUML Domain Model.

Parsing process:
1. Parse the XML with defusedxml and check the ``RefOntoUML:Model`` root
2. Collect all packaged elements (descending into packages) indexed by ``xmi:id``
3. Map classifiers to entities, generalization sets and relations
4. Resolve derivations to the ``derived_from`` relator of the derived relation

Usage:
    from ontogen.formats.refontouml import RefOntoUmlParser

    parser = RefOntoUmlParser()
    model = parser.parse_file("model.refontouml")

    for entity in model.entities.values():
        print(entity.name, entity.type.value)
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from ontogen.constants import RefOntoUmlConfig
from ontogen.core.exceptions import ModelParseError
from ontogen.shared.models.ontouml import (
    EntityType,
    OntoUmlAttribute,
    OntoUmlEntity,
    OntoUmlGeneralization,
    OntoUmlGeneralizationSet,
    OntoUmlModel,
    OntoUmlRelation,
    OntoUmlRelationEnd,
    RelationType,
)
from ontogen.shared.utilities import string_to_bool, string_to_optional_bool

from .refontouml_models import (
    XmiDocument,
    XmiGeneralization,
    XmiPackagedElement,
    XmiProperty,
    XmiValue,
)

logger = logging.getLogger(__name__)


# Mapping of xsi:type values to entity types.
ENTITY_TYPES: Dict[str, EntityType] = {
    "RefOntoUML:Kind": EntityType.KIND,
    "RefOntoUML:SubKind": EntityType.SUB_KIND,
    "RefOntoUML:Category": EntityType.CATEGORY,
    "RefOntoUML:Role": EntityType.ROLE,
    "RefOntoUML:Phase": EntityType.PHASE,
    "RefOntoUML:Relator": EntityType.RELATOR,
    "RefOntoUML:Collective": EntityType.COLLECTIVE,
    "RefOntoUML:Quantity": EntityType.QUANTITY,
    "RefOntoUML:Mode": EntityType.MODE,
    "RefOntoUML:RoleMixin": EntityType.ROLE_MIXIN,
    "RefOntoUML:Mixin": EntityType.MIXIN,
    "RefOntoUML:PerceivableQuality": EntityType.PERCEIVABLE_QUALITY,
    "RefOntoUML:NonPerceivableQuality": EntityType.NON_PERCEIVABLE_QUALITY,
    "RefOntoUML:NominalQuality": EntityType.NOMINAL_QUALITY,
}

# Mapping of xsi:type values to relation types.
RELATION_TYPES: Dict[str, RelationType] = {
    "RefOntoUML:Mediation": RelationType.MEDIATION,
    "RefOntoUML:GeneralizationSet": RelationType.GENERALIZATION_SET,
    "RefOntoUML:subQuantityOf": RelationType.SUB_QUANTITY_OF,
    "RefOntoUML:memberOf": RelationType.MEMBER_OF,
    "RefOntoUML:subCollectionOf": RelationType.SUB_COLLECTION_OF,
    "RefOntoUML:MaterialAssociation": RelationType.MATERIAL,
    "RefOntoUML:Association": RelationType.ASSOCIATION,
    "RefOntoUML:Structuration": RelationType.STRUCTURATION,
    "RefOntoUML:Characterization": RelationType.CHARACTERIZATION,
    "RefOntoUML:componentOf": RelationType.COMPONENT_OF,
    "RefOntoUML:Derivation": RelationType.DERIVATION,
}


def _local_name(name: str) -> str:
    """Strip the ``{namespace}`` part of a qualified XML name."""
    return name.rsplit("}", 1)[-1]


def _namespace(name: str) -> str:
    return name[1:].split("}", 1)[0] if name.startswith("{") else ""


class RefOntoUmlParser:
    """
    Parse RefOntoUML XMI documents into OntoUmlModel instances.

    Example:
        >>> parser = RefOntoUmlParser()
        >>> model = parser.parse(xmi_content)
        >>> print(f"Parsed {model.entity_count} entities")
    """

    returns_object_model = False

    def __init__(self) -> None:
        self._document = XmiDocument()
        self._file_path: Optional[str] = None

    def parse_file(self, file_path: str) -> OntoUmlModel:
        """
        Parse a RefOntoUML file.

        Args:
            file_path: Path to the file to parse.

        Returns:
            The parsed Domain Model.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ModelParseError: If the content is not a valid RefOntoUML model.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"RefOntoUML file not found: {file_path}")

        # The XML declaration decides the encoding
        return self.parse(path.read_bytes(), str(path))

    def parse(self, content: Union[str, bytes], file_path: Optional[str] = None) -> OntoUmlModel:
        """
        Parse RefOntoUML XMI content.

        Args:
            content: XMI document text or raw bytes.
            file_path: Optional path for error messages.

        Returns:
            The parsed Domain Model.

        Raises:
            ModelParseError: If the content cannot be parsed.
        """
        self._file_path = file_path
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise ModelParseError(f"Invalid XML: {e}", file_path=file_path, details=str(e)) from e
        except DefusedXmlException as e:
            raise ModelParseError(f"Forbidden XML construct: {e}", file_path=file_path) from e

        self._check_root(root)

        self._document = XmiDocument()
        self._collect_elements(root)
        logger.debug(f"Collected {len(self._document.elements)} packaged elements")

        model = OntoUmlModel()
        for element in self._document.elements:
            entity_type = ENTITY_TYPES.get(element.xsi_type)
            if entity_type is not None:
                model.add_entity(self._map_entity(element, entity_type))
                continue
            relation_type = RELATION_TYPES.get(element.xsi_type)
            if relation_type is None:
                continue
            if relation_type == RelationType.GENERALIZATION_SET:
                model.add_generalization_set(self._map_generalization_set(element))
            else:
                model.add_relation(self._map_relation(element, relation_type))

        logger.info(
            f"Parsed RefOntoUML model: {model.entity_count} entities, "
            f"{len(model.generalization_sets)} generalization sets, {model.relation_count} relations"
        )
        return model

    # -------------------------------------------------------------------------
    # XML reading
    # -------------------------------------------------------------------------

    def _check_root(self, root: Element) -> None:
        local = _local_name(root.tag)
        namespace = _namespace(root.tag)
        if local != RefOntoUmlConfig.ROOT_ELEMENT or RefOntoUmlConfig.NAMESPACE_MARKER not in namespace.lower():
            raise ModelParseError(
                "Invalid model structure: root element must be RefOntoUML:Model",
                file_path=self._file_path,
                details=f"found '{root.tag}'",
            )

    def _collect_elements(self, parent: Element) -> None:
        for child in self._children(parent, "packagedElement"):
            element = self._read_packaged_element(child)
            if element.xsi_type == RefOntoUmlConfig.PACKAGE_TYPE:
                self._collect_elements(child)
                continue
            self._document.add(element)

    @staticmethod
    def _children(parent: Element, local_name: str) -> Iterable[Element]:
        return (child for child in parent if _local_name(child.tag) == local_name)

    @staticmethod
    def _attributes(node: Element) -> Dict[str, str]:
        """Return the attributes by local name; unqualified attributes win over qualified ones."""
        qualified = {_local_name(key): value for key, value in node.attrib.items() if key.startswith("{")}
        plain = {key: value for key, value in node.attrib.items() if not key.startswith("{")}
        return {**qualified, **plain}

    @staticmethod
    def _qualified(node: Element, local_name: str) -> Optional[str]:
        """Return the value of a namespace qualified attribute (xmi:id, xsi:type)."""
        return next(
            (value for key, value in node.attrib.items()
             if key.startswith("{") and _local_name(key) == local_name),
            None,
        )

    def _read_packaged_element(self, node: Element) -> XmiPackagedElement:
        attrs = self._attributes(node)
        xmi_id = self._qualified(node, "id")
        xsi_type = self._qualified(node, "type")
        if not xmi_id or not xsi_type:
            raise ModelParseError(
                "Packaged element without xmi:id or xsi:type",
                file_path=self._file_path,
                element=attrs.get("name"),
            )
        return XmiPackagedElement(
            xmi_id=xmi_id,
            xsi_type=xsi_type,
            name=attrs.get("name"),
            attributes=attrs,
            generalizations=[
                XmiGeneralization(
                    xmi_id=gen_attrs.get("id", ""),
                    general=gen_attrs.get("general", ""),
                    generalization_set=gen_attrs.get("generalizationSet"),
                )
                for gen_attrs in (self._attributes(gen) for gen in self._children(node, "generalization"))
            ],
            owned_attributes=[self._read_property(p) for p in self._children(node, "ownedAttribute")],
            owned_ends=[self._read_property(p) for p in self._children(node, "ownedEnd")],
        )

    def _read_property(self, node: Element) -> XmiProperty:
        attrs = self._attributes(node)
        upper = next(iter(self._children(node, "upperValue")), None)
        lower = next(iter(self._children(node, "lowerValue")), None)
        return XmiProperty(
            xmi_id=self._qualified(node, "id"),
            name=attrs.get("name"),
            type=node.get("type"),
            is_unique=attrs.get("isUnique"),
            upper_value=XmiValue(upper.get("value")) if upper is not None else None,
            lower_value=XmiValue(lower.get("value")) if lower is not None else None,
        )

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    def _resolve(self, xmi_id: Optional[str], context: str) -> XmiPackagedElement:
        """Return the packaged element with the given id."""
        element = self._document.by_id.get(xmi_id) if xmi_id else None
        if element is None:
            raise ModelParseError(
                f"Unresolved reference '{xmi_id}' in {context}",
                file_path=self._file_path,
                element=context,
            )
        return element

    def _resolve_name(self, xmi_id: Optional[str], context: str) -> str:
        return self._resolve(xmi_id, context).name or ""

    def _parse_bound(self, value: Optional[XmiValue], default: int, context: str) -> int:
        raw = value.value if value is not None else None
        if raw is None or raw == "":
            return default
        if raw == RefOntoUmlConfig.UNLIMITED_VALUE:
            return -1
        try:
            return int(raw)
        except ValueError as e:
            raise ModelParseError(
                f"Invalid multiplicity value '{raw}' in {context}",
                file_path=self._file_path,
                element=context,
            ) from e

    def _map_attribute(self, owner: XmiPackagedElement, prop: XmiProperty) -> OntoUmlAttribute:
        context = f"attribute '{prop.name}' of '{owner.name}'"
        return OntoUmlAttribute(
            name=prop.name or "",
            type=self._resolve_name(prop.type, context),
            min_items=self._parse_bound(prop.lower_value, RefOntoUmlConfig.DEFAULT_LOWER_VALUE, context),
            max_items=self._parse_bound(prop.upper_value, RefOntoUmlConfig.DEFAULT_UPPER_VALUE, context),
        )

    def _map_entity(self, element: XmiPackagedElement, entity_type: EntityType) -> OntoUmlEntity:
        context = f"entity '{element.name}'"
        return OntoUmlEntity(
            name=element.name or "",
            type=entity_type,
            attributes=[self._map_attribute(element, prop) for prop in element.owned_attributes],
            generalizations=[
                OntoUmlGeneralization(
                    predecessor=self._resolve_name(gen.general, context),
                    generalization_set=(
                        self._resolve_name(gen.generalization_set, context)
                        if gen.generalization_set else None
                    ),
                )
                for gen in element.generalizations
            ],
        )

    def _map_generalization_set(self, element: XmiPackagedElement) -> OntoUmlGeneralizationSet:
        children = []
        for gen_id in (element.get("generalization") or "").split():
            owner = self._document.generalization_owners.get(gen_id)
            if owner is None:
                raise ModelParseError(
                    f"Unresolved generalization '{gen_id}' in generalization set '{element.name}'",
                    file_path=self._file_path,
                    element=element.name,
                )
            children.append(owner.name or "")
        return OntoUmlGeneralizationSet(
            name=element.name or "",
            children_names=children,
            is_complete=string_to_bool(element.get("isCovering")),
            is_disjoint=string_to_bool(element.get("isDisjoint")),
        )

    def _map_end(self, relation: XmiPackagedElement, prop: XmiProperty) -> OntoUmlRelationEnd:
        context = f"relation '{relation.name}'"
        return OntoUmlRelationEnd(
            name=prop.name,
            type=self._resolve_name(prop.type, context),
            min_items=self._parse_bound(prop.lower_value, RefOntoUmlConfig.DEFAULT_LOWER_VALUE, context),
            max_items=self._parse_bound(prop.upper_value, RefOntoUmlConfig.DEFAULT_UPPER_VALUE, context),
        )

    def _find_derived_from(self, element: XmiPackagedElement) -> Optional[str]:
        """Return the name of the relator a relation is derived from."""
        for candidate in self._document.elements:
            if (candidate.xsi_type == "RefOntoUML:Derivation"
                    and len(candidate.owned_ends) >= 2
                    and candidate.owned_ends[0].type == element.xmi_id):
                return self._resolve_name(candidate.owned_ends[1].type, f"derivation '{candidate.name}'")
        return None

    def _map_relation(self, element: XmiPackagedElement, relation_type: RelationType) -> OntoUmlRelation:
        if len(element.owned_ends) < 2:
            raise ModelParseError(
                f"Relation '{element.name}' must have two owned ends",
                file_path=self._file_path,
                element=element.name,
            )
        source, target = element.owned_ends[0], element.owned_ends[1]
        return OntoUmlRelation(
            name=element.name or "",
            type=relation_type,
            source_end=self._map_end(element, source),
            target_end=self._map_end(element, target),
            is_essential=string_to_bool(element.get("isEssential")),
            is_immutable_part=string_to_bool(element.get("isImmutablePart")),
            is_immutable_whole=string_to_bool(element.get("isImmutableWhole")),
            is_inseparable=string_to_bool(element.get("isInseparable")),
            is_shareable=string_to_bool(element.get("isShareable")),
            allow_duplicates=(
                string_to_optional_bool(source.is_unique) is False
                or string_to_optional_bool(target.is_unique) is False
            ),
            derived_from=self._find_derived_from(element),
        )
