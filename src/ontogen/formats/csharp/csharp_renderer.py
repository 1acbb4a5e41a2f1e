"""
C# Model Renderer.

This module renders the C# view model through Jinja2 templates into C#
source code, either as a single file or as one file per class.

Naming filters available in the templates:
- class_name, method_name, property_name, namespace_name: UpperCamelCase
- parameter_name, field_name: lowerCamelCase
- plural_class_name: UpperCamelCase with a trailing "s"
- min_items_constant_name, max_items_constant_name: SCREAMING_SNAKE_CASE constants
- count_field_name, to_validate_field_name, association_field_name: field names

Usage:
    from ontogen.formats.csharp import CSharpModelRenderer

    renderer = CSharpModelRenderer()
    operations = renderer.generate_code(view_model, options)
"""

import logging
import os
import re
from typing import List, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined
from tqdm import tqdm

from ontogen.constants import CSharpConfig
from ontogen.shared.models.options import GeneratorOptions
from ontogen.shared.models.output import WriteOperation

from .csharp_view_model import (
    ClassViewModel,
    ModelViewModel,
    ParameterViewModel,
    PropertyViewModel,
    TypeInfoViewModel,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Naming
# =============================================================================

_WORD_PATTERN = re.compile(r"[A-Z]{2,}(?=[A-Z][a-z]+[0-9]*|\b)|[A-Z]?[a-z]+[0-9]*|[A-Z]|[0-9]+")
_BLANK_LINE_PATTERN = re.compile(r"^[ \t]*\n", re.MULTILINE)


def split_words(value: str) -> List[str]:
    """Split an identifier into words ("XMLHttpRequest2" -> ["XML", "Http", "Request2"])."""
    return _WORD_PATTERN.findall(value or "")


def upper_camel(value: str) -> str:
    return "".join(word.capitalize() for word in split_words(value))


def lower_camel(value: str) -> str:
    words = split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def screaming_snake(value: str) -> str:
    return "_".join(word.upper() for word in split_words(value))


def plural_class_name(value: str) -> str:
    name = upper_camel(value)
    return name if name.endswith("s") else name + "s"


def min_items_constant_name(value: str) -> str:
    return screaming_snake(f"{value}MinItems")


def max_items_constant_name(value: str) -> str:
    return screaming_snake(f"{value}MaxItems")


def count_field_name(value: str) -> str:
    return lower_camel(f"{value}Count")


def to_validate_field_name(value: str) -> str:
    return lower_camel(f"{value}ToValidate")


def association_field_name(value: str) -> str:
    return lower_camel(value) + "Association"


def namespace_name(value: str) -> str:
    return ".".join(upper_camel(part) for part in value.split("."))


def interface_name(value: str) -> str:
    return CSharpConfig.INTERFACE_FILE_PREFIX + upper_camel(value)


# -----------------------------------------------------------------------------
# Types
# -----------------------------------------------------------------------------

def type_name(type_info: Optional[TypeInfoViewModel]) -> str:
    """Render a type; None renders as ``void``, model classes as their interface."""
    if type_info is None:
        return "void"
    if type_info.is_reference:
        return interface_name(type_info.name)
    if type_info.should_make_nullable:
        return f"{type_info.name}?"
    return type_info.name


def member_type(member: PropertyViewModel) -> str:
    """Render the type of a property (``IList<T>`` for collections)."""
    if member.is_collection:
        return f"IList<{type_name(member.type_info)}>"
    return type_name(member.type_info)


def parameter_type(parameter: ParameterViewModel) -> str:
    """Render the type of a parameter (``IEnumerable<T>`` for collections)."""
    if parameter.is_collection:
        return f"IEnumerable<{type_name(parameter.type_info)}>"
    return type_name(parameter.type_info)


def extends_clause(names) -> str:
    """Render ``" : A, B"`` for a list of base types, or an empty string."""
    names = list(names)
    if not names:
        return ""
    return " : " + ", ".join(names)


def parameter_list(parameters) -> str:
    """Render a parameter declaration list."""
    return ", ".join(f"{parameter_type(parameter)} {lower_camel(parameter.name)}" for parameter in parameters)


def base_call(parameter_names) -> str:
    """Render the base constructor call, or an empty string."""
    names = [lower_camel(name) for name in parameter_names]
    if not names:
        return ""
    return f" : base({', '.join(names)})"


def class_extends_names(clazz: ClassViewModel) -> List[str]:
    """Base class names of a class; the last entry is the class' own interface."""
    names = list(clazz.class_extends)
    return [upper_camel(name) for name in names[:-1]] + [interface_name(name) for name in names[-1:]]


FILTERS = {
    "class_name": upper_camel,
    "method_name": upper_camel,
    "property_name": upper_camel,
    "namespace_name": namespace_name,
    "parameter_name": lower_camel,
    "field_name": lower_camel,
    "plural_class_name": plural_class_name,
    "min_items_constant_name": min_items_constant_name,
    "max_items_constant_name": max_items_constant_name,
    "count_field_name": count_field_name,
    "to_validate_field_name": to_validate_field_name,
    "association_field_name": association_field_name,
    "interface_name": interface_name,
    "type_name": type_name,
    "member_type": member_type,
    "parameter_type": parameter_type,
    "extends_clause": extends_clause,
    "parameter_list": parameter_list,
    "base_call": base_call,
    "class_extends_names": class_extends_names,
}


def create_environment() -> Environment:
    """Create the Jinja2 environment with the C# templates and naming filters."""
    environment = Environment(
        loader=PackageLoader("ontogen", "formats/csharp/templates"),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
        undefined=StrictUndefined,
    )
    environment.filters.update(FILTERS)
    return environment


def collapse_blank_lines(content: str) -> str:
    """
    Remove every whitespace-only line left behind by template tags.

    Blank lines between classes are added afterwards by the file layout.
    """
    return _BLANK_LINE_PATTERN.sub("", content)


def file_name(clazz: ClassViewModel) -> str:
    """Return the file name of a class in multi-file output."""
    prefix = CSharpConfig.INTERFACE_FILE_PREFIX if clazz.is_interface else ""
    return f"{prefix}{upper_camel(clazz.name)}{CSharpConfig.FILE_EXTENSION}"


# =============================================================================
# Renderer
# =============================================================================

class CSharpModelRenderer:
    """
    Render the C# view model to source files.

    Example:
        >>> renderer = CSharpModelRenderer()
        >>> operations = renderer.generate_code(view_model, GeneratorOptions(output="out"))
        >>> [os.path.basename(op.path) for op in operations]
        ['ICanValidate.cs', 'TestClass.cs']
    """

    def __init__(self, environment: Optional[Environment] = None):
        self._environment = environment or create_environment()
        self._class_template = self._environment.get_template(CSharpConfig.CLASS_TEMPLATE)
        self._file_template = self._environment.get_template(CSharpConfig.FILE_TEMPLATE)

    def render_class(self, clazz: ClassViewModel) -> str:
        """Render the interface (and implementation) of one class, without the file frame."""
        content = self._class_template.render(clazz=clazz)
        return collapse_blank_lines(content).strip()

    def render_file(self, content: str, namespace: Optional[str]) -> str:
        """Wrap rendered classes into a file with usings and the namespace block."""
        return self._file_template.render(
            usings=CSharpConfig.USINGS,
            namespace=namespace or CSharpConfig.DEFAULT_NAMESPACE,
            content=content,
        )

    def render_single_file(self, view_model: ModelViewModel) -> str:
        """Render all classes into the text of one file."""
        content = ""
        for clazz in view_model.classes:
            content = content + "\n    " + self.render_class(clazz) + "\n"
        return self.render_file(content.strip(), view_model.namespace)

    def generate_code(self, view_model: ModelViewModel, options: GeneratorOptions) -> List[WriteOperation]:
        """
        Render and write the C# code.

        With ``options.single_file`` all classes go to ``options.output``
        (``Model.cs`` when unset); otherwise ``options.output`` is a directory
        receiving one file per class.

        Returns:
            The executed write operations.

        Raises:
            ValueError: If no options are provided.
        """
        if options is None:
            raise ValueError("C# rendering requires generator options")

        if options.single_file:
            operations = [WriteOperation(
                path=options.output or CSharpConfig.DEFAULT_SINGLE_FILE_NAME,
                content=self.render_single_file(view_model),
            )]
        else:
            output_dir = options.output or "."
            os.makedirs(output_dir, exist_ok=True)
            operations = [
                WriteOperation(
                    path=os.path.join(output_dir, file_name(clazz)),
                    content=self.render_file(self.render_class(clazz), view_model.namespace),
                )
                for clazz in view_model.classes
            ]

        for operation in tqdm(
            operations,
            desc="Writing C# files",
            unit="file",
            disable=len(operations) < CSharpConfig.PROGRESS_THRESHOLD,
        ):
            operation.execute()
            logger.debug(f"Wrote {operation.path}")

        logger.info(f"Generated {len(operations)} C# file(s) for {len(view_model.classes)} classes")
        return operations
