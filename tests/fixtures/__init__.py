"""
Centralized test fixtures for the OntoUML code generator test suite.

This package provides reusable fixtures for testing, including:
- RefOntoUML XMI sample content
- Object Model JSON sample content

Usage:
    from fixtures import (
        SIMPLE_REFONTOUML,
        DERIVATION_REFONTOUML,
        SIMPLE_OBJECT_MODEL,
    )

Or use the pytest fixtures in conftest.py which import from here.
"""

from .refontouml_fixtures import (
    refontouml_document,

    # Valid models
    SIMPLE_REFONTOUML,
    DERIVATION_REFONTOUML,
    PHASE_PARTITION_REFONTOUML,

    # Invalid content
    NOT_REFONTOUML,
    MALFORMED_XML,
    UNRESOLVED_REFERENCE_REFONTOUML,
    BILLION_LAUGHS,
)

from .object_model_fixtures import (
    SIMPLE_OBJECT_MODEL,
    RELATOR_OBJECT_MODEL,
    INHERITED_CTOR_OBJECT_MODEL,
    INVALID_OBJECT_MODEL,
    TYPE_MAPPING,
)

__all__ = [
    # RefOntoUML
    'refontouml_document',
    'SIMPLE_REFONTOUML',
    'DERIVATION_REFONTOUML',
    'PHASE_PARTITION_REFONTOUML',
    'NOT_REFONTOUML',
    'MALFORMED_XML',
    'UNRESOLVED_REFERENCE_REFONTOUML',
    'BILLION_LAUGHS',

    # Object Model
    'SIMPLE_OBJECT_MODEL',
    'RELATOR_OBJECT_MODEL',
    'INHERITED_CTOR_OBJECT_MODEL',
    'INVALID_OBJECT_MODEL',
    'TYPE_MAPPING',
]
