"""
Object Model JSON Module

Reads and writes the JSON serialization of the Object Model.

Key Components:
- parser: JSON reader with structural validation
- mapper: identity language mapper
- renderer: formatted JSON writer

Usage:
    from ontogen.formats.object_model_json import ObjectModelJsonParser, JsonRenderer

    model = ObjectModelJsonParser().parse_file("model.json")
"""

from .parser import ObjectModelJsonParser
from .mapper import JsonMapper
from .renderer import JsonRenderer, format_object_model

__all__ = [
    "ObjectModelJsonParser",
    "JsonMapper",
    "JsonRenderer",
    "format_object_model",
]
