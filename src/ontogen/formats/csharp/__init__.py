"""
C# output form.

This package maps the Object Model to a C# view model and renders it with
Jinja2 templates into model classes with interfaces, association
accessors and semantic validity checks.

Usage:
    from ontogen.formats.csharp import CSharpMapper, CSharpModelRenderer

    view_model = CSharpMapper().model_to_view_model(object_model, options)
    CSharpModelRenderer().generate_code(view_model, options)
"""

from .csharp_view_model import (
    TypeInfoViewModel,
    ParameterViewModel,
    PropertyViewModel,
    MethodViewModel,
    RelationKind,
    RelationViewModel,
    CtorRelation,
    CtorViewModel,
    DerivedRelationViewModel,
    ClassViewModel,
    ModelViewModel,
)
from .csharp_mapper import (
    BASE_INTERFACE,
    CSharpMapper,
    RelationPair,
    materialize_relation,
    materialize_derived_relation,
)
from .csharp_renderer import (
    CSharpModelRenderer,
    create_environment,
    lower_camel,
    upper_camel,
)

__all__ = [
    # View model
    "TypeInfoViewModel",
    "ParameterViewModel",
    "PropertyViewModel",
    "MethodViewModel",
    "RelationKind",
    "RelationViewModel",
    "CtorRelation",
    "CtorViewModel",
    "DerivedRelationViewModel",
    "ClassViewModel",
    "ModelViewModel",
    # Mapper
    "BASE_INTERFACE",
    "CSharpMapper",
    "RelationPair",
    "materialize_relation",
    "materialize_derived_relation",
    # Renderer
    "CSharpModelRenderer",
    "create_environment",
    "lower_camel",
    "upper_camel",
]
