"""
RefOntoUML Import Module

This module reads RefOntoUML XMI files, as exported by the OLED editor,
into the OntoUML Domain Model.

Key Components:
- refontouml_models: raw XMI element records
- refontouml_parser: XMI parsing and mapping to the Domain Model

Usage:
    from ontogen.formats.refontouml import RefOntoUmlParser

    parser = RefOntoUmlParser()
    model = parser.parse_file("model.refontouml")
"""

from .refontouml_models import (
    XmiDocument,
    XmiGeneralization,
    XmiPackagedElement,
    XmiProperty,
    XmiValue,
)

from .refontouml_parser import (
    RefOntoUmlParser,
    ENTITY_TYPES,
    RELATION_TYPES,
)

__all__ = [
    # Models
    "XmiDocument",
    "XmiGeneralization",
    "XmiPackagedElement",
    "XmiProperty",
    "XmiValue",
    # Parser
    "RefOntoUmlParser",
    "ENTITY_TYPES",
    "RELATION_TYPES",
]
