"""
Core transformation engine.

This module contains the OntoUML mapping rules, the Domain Model to Object
Model transformer, validators, type mapping loading, the run pipeline and
the exception hierarchy.
"""

from .exceptions import (
    OntoGenError,
    ModelParseError,
    TypeMappingError,
    UnresolvedReferenceError,
    SemanticError,
    InvalidAspectsError,
    RoleWithoutOwnerError,
)
from .transformer import OntoUmlToObjectModelTransformer, TransformContext
from .type_mapping import TypeMappingLoader
from .validators import DomainModelValidator, ObjectModelValidator, ValidationResult

__all__ = [
    "OntoGenError",
    "ModelParseError",
    "TypeMappingError",
    "UnresolvedReferenceError",
    "SemanticError",
    "InvalidAspectsError",
    "RoleWithoutOwnerError",
    "OntoUmlToObjectModelTransformer",
    "TransformContext",
    "TypeMappingLoader",
    "DomainModelValidator",
    "ObjectModelValidator",
    "ValidationResult",
]
