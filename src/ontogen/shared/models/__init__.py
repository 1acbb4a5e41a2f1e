"""
Shared data models for the OntoUML code generator.

This module contains the data classes of the OntoUML Domain Model, the
target-neutral Object Model and the generator options.

Usage:
    from ontogen.shared.models import OntoUmlModel, ObjectModel, GeneratorOptions
"""

from .ontouml import (
    EntityType,
    RelationType,
    OntoUmlAttribute,
    OntoUmlGeneralization,
    OntoUmlEntity,
    OntoUmlRelationEnd,
    OntoUmlRelation,
    OntoUmlGeneralizationSet,
    OntoUmlModel,
)
from .object_model import (
    TypeInfo,
    ParameterInfo,
    AttributeInfo,
    MethodInfo,
    ClassInfo,
    RelationEndInfo,
    RelationInfo,
    ObjectModel,
    TypeMapping,
)
from .options import GeneratorOptions, parse_config_pairs
from .output import WriteOperation

__all__ = [
    # Domain model
    "EntityType",
    "RelationType",
    "OntoUmlAttribute",
    "OntoUmlGeneralization",
    "OntoUmlEntity",
    "OntoUmlRelationEnd",
    "OntoUmlRelation",
    "OntoUmlGeneralizationSet",
    "OntoUmlModel",
    # Object model
    "TypeInfo",
    "ParameterInfo",
    "AttributeInfo",
    "MethodInfo",
    "ClassInfo",
    "RelationEndInfo",
    "RelationInfo",
    "ObjectModel",
    "TypeMapping",
    # Options
    "GeneratorOptions",
    "parse_config_pairs",
    # Output
    "WriteOperation",
]
