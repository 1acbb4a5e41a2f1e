"""
Built-in input and output forms.

Input forms:
- refontouml: RefOntoUML XMI (OLED export)
- onto-object-model: Object Model JSON

Output forms:
- csharp-model: C# model classes
- onto-object-model: Object Model JSON
"""

from ontogen.constants import FormCodes
from ontogen.formats.csharp import CSharpMapper, CSharpModelRenderer
from ontogen.formats.object_model_json import JsonMapper, JsonRenderer, ObjectModelJsonParser
from ontogen.formats.refontouml import RefOntoUmlParser

from ..registry import FormRegistry, InputForm, OutputForm

BUILTIN_INPUT_FORMS = (
    InputForm(FormCodes.REFONTOUML, "RefOntoUML XMI", RefOntoUmlParser),
    InputForm(FormCodes.ONTO_OBJECT_MODEL, "Object Model JSON", ObjectModelJsonParser),
)

BUILTIN_OUTPUT_FORMS = (
    OutputForm(FormCodes.CSHARP_MODEL, "C# model classes", CSharpMapper, CSharpModelRenderer),
    OutputForm(FormCodes.ONTO_OBJECT_MODEL, "Object Model JSON", JsonMapper, JsonRenderer),
)


def register_builtin_forms(registry: FormRegistry) -> None:
    """Register the built-in forms into ``registry``."""
    for input_form in BUILTIN_INPUT_FORMS:
        registry.register_input_form(input_form)
    for output_form in BUILTIN_OUTPUT_FORMS:
        registry.register_output_form(output_form)


__all__ = ["BUILTIN_INPUT_FORMS", "BUILTIN_OUTPUT_FORMS", "register_builtin_forms"]
