"""
Form registry tests.

Tests for registering, looking up and listing input and output forms, and
for the protocol checks of the built-in front ends, mappers and renderers.
"""

import pytest

from ontogen.formats.csharp import CSharpMapper, CSharpModelRenderer
from ontogen.formats.object_model_json import JsonRenderer, ObjectModelJsonParser
from ontogen.formats.refontouml import RefOntoUmlParser
from ontogen.plugins import (
    FormRegistry,
    InputForm,
    OutputForm,
    get_form_registry,
    is_front_end,
    is_language_mapper,
    is_language_renderer,
)


class StubFrontEnd:
    returns_object_model = True

    def parse_file(self, file_path):
        return None


@pytest.mark.unit
class TestFormRegistry:
    """Tests for FormRegistry."""

    def test_register_and_get(self):
        registry = FormRegistry()
        registry.register_input_form(InputForm("stub", "Stub", StubFrontEnd))

        form = registry.get_input_form("stub")

        assert form.display_name == "Stub"
        assert isinstance(form.create_front_end(), StubFrontEnd)

    def test_codes_are_case_insensitive(self):
        registry = FormRegistry()
        registry.register_input_form(InputForm("Stub", "Stub", StubFrontEnd))

        assert registry.get_input_form("STUB") is not None
        assert registry.get_input_form("stub") is not None

    def test_unknown_code(self):
        registry = FormRegistry()

        assert registry.get_input_form("missing") is None
        assert registry.get_output_form(None) is None

    def test_replace_registration(self, caplog):
        registry = FormRegistry()
        registry.register_input_form(InputForm("stub", "First", StubFrontEnd))
        registry.register_input_form(InputForm("stub", "Second", StubFrontEnd))

        assert registry.get_input_form("stub").display_name == "Second"
        assert "Replacing input form 'stub'" in caplog.text

    def test_output_form_factories(self):
        registry = FormRegistry()
        registry.register_output_form(OutputForm("cs", "C#", CSharpMapper, CSharpModelRenderer))

        form = registry.get_output_form("cs")

        assert isinstance(form.create_mapper(), CSharpMapper)
        assert isinstance(form.create_renderer(), CSharpModelRenderer)


@pytest.mark.unit
class TestBuiltinForms:
    """Tests for the shared registry with the built-in forms."""

    def test_builtin_forms_listed(self):
        registry = get_form_registry()

        assert registry.list_input_forms() == ["onto-object-model", "refontouml"]
        assert registry.list_output_forms() == ["csharp-model", "onto-object-model"]

    def test_shared_instance(self):
        assert get_form_registry() is get_form_registry()

    def test_reset_instance(self):
        first = get_form_registry()
        FormRegistry.reset_instance()

        assert get_form_registry() is not first

    def test_builtin_front_ends(self):
        registry = get_form_registry()

        refontouml = registry.get_input_form("refontouml").create_front_end()
        object_model = registry.get_input_form("onto-object-model").create_front_end()

        assert isinstance(refontouml, RefOntoUmlParser)
        assert refontouml.returns_object_model is False
        assert isinstance(object_model, ObjectModelJsonParser)
        assert object_model.returns_object_model is True

    def test_builtin_json_output(self):
        form = get_form_registry().get_output_form("onto-object-model")

        assert isinstance(form.create_renderer(), JsonRenderer)


@pytest.mark.unit
class TestProtocols:
    """Tests for the protocol checks."""

    def test_front_ends(self):
        assert is_front_end(RefOntoUmlParser())
        assert is_front_end(ObjectModelJsonParser())
        assert is_front_end(StubFrontEnd())
        assert not is_front_end(object())

    def test_mappers_and_renderers(self):
        assert is_language_mapper(CSharpMapper())
        assert is_language_renderer(CSharpModelRenderer())
        assert is_language_renderer(JsonRenderer())
        assert not is_language_mapper(JsonRenderer())
