"""
Form registry for the OntoUML code generator.

This module provides the registry that maps input form codes to front
ends and output form codes to language mapper and renderer pairs.

Usage:
    from ontogen.plugins import get_form_registry

    registry = get_form_registry()
    print(registry.list_input_forms())   # ['onto-object-model', 'refontouml']
    print(registry.list_output_forms())  # ['csharp-model', 'onto-object-model']
"""

from .protocols import (
    # Type variables
    ViewModelT,
    ViewModelT_co,
    ViewModelT_contra,
    # Protocols
    FrontEndProtocol,
    LanguageMapperProtocol,
    LanguageRendererProtocol,
    # Type checking utilities
    is_front_end,
    is_language_mapper,
    is_language_renderer,
)
from .registry import (
    InputForm,
    OutputForm,
    FormRegistry,
    get_form_registry,
)

__all__ = [
    # Type variables
    "ViewModelT",
    "ViewModelT_co",
    "ViewModelT_contra",
    # Protocols
    "FrontEndProtocol",
    "LanguageMapperProtocol",
    "LanguageRendererProtocol",
    # Type checking utilities
    "is_front_end",
    "is_language_mapper",
    "is_language_renderer",
    # Registry
    "InputForm",
    "OutputForm",
    "FormRegistry",
    "get_form_registry",
]
