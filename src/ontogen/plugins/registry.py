"""
Input and output form registry.

Input forms select the front end reading the input file; output forms
select the language mapper and renderer producing the output.

Usage:
    from ontogen.plugins import get_form_registry

    registry = get_form_registry()
    input_form = registry.get_input_form("refontouml")
    front_end = input_form.create_front_end()

    output_form = registry.get_output_form("csharp-model")
    mapper, renderer = output_form.create_mapper(), output_form.create_renderer()
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .protocols import FrontEndProtocol, LanguageMapperProtocol, LanguageRendererProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputForm:
    """
    Registered input form.

    Attributes:
        code: Form code selected on the command line.
        display_name: Human-readable name.
        front_end_factory: Creates the front end reading this form.
    """
    code: str
    display_name: str
    front_end_factory: Callable[[], FrontEndProtocol]

    def create_front_end(self) -> FrontEndProtocol:
        return self.front_end_factory()


@dataclass(frozen=True)
class OutputForm:
    """
    Registered output form: a language mapper and the renderer for its view model.

    Attributes:
        code: Form code selected on the command line.
        display_name: Human-readable name.
        mapper_factory: Creates the language mapper.
        renderer_factory: Creates the renderer.
    """
    code: str
    display_name: str
    mapper_factory: Callable[[], LanguageMapperProtocol]
    renderer_factory: Callable[[], LanguageRendererProtocol]

    def create_mapper(self) -> LanguageMapperProtocol:
        return self.mapper_factory()

    def create_renderer(self) -> LanguageRendererProtocol:
        return self.renderer_factory()


class FormRegistry:
    """
    Registry of input and output forms.

    Form codes are case insensitive. Registering a code twice replaces the
    earlier registration.

    Example:
        >>> registry = FormRegistry()
        >>> registry.register_input_form(InputForm("xmi", "XMI", MyFrontEnd))
        >>> registry.get_input_form("XMI").display_name
        'XMI'
    """

    _instance: Optional["FormRegistry"] = None

    def __init__(self):
        self._input_forms: Dict[str, InputForm] = {}
        self._output_forms: Dict[str, OutputForm] = {}

    @classmethod
    def get_instance(cls) -> "FormRegistry":
        """Get the shared registry with the built-in forms registered."""
        if cls._instance is None:
            from .builtin import register_builtin_forms

            cls._instance = cls()
            register_builtin_forms(cls._instance)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared registry (used by tests)."""
        cls._instance = None

    def register_input_form(self, form: InputForm) -> None:
        key = form.code.lower()
        if key in self._input_forms:
            logger.warning(f"Replacing input form '{form.code}'")
        self._input_forms[key] = form
        logger.debug(f"Registered input form: {form.code}")

    def register_output_form(self, form: OutputForm) -> None:
        key = form.code.lower()
        if key in self._output_forms:
            logger.warning(f"Replacing output form '{form.code}'")
        self._output_forms[key] = form
        logger.debug(f"Registered output form: {form.code}")

    def get_input_form(self, code: Optional[str]) -> Optional[InputForm]:
        """Return the input form with the given code, or None."""
        return self._input_forms.get((code or "").lower())

    def get_output_form(self, code: Optional[str]) -> Optional[OutputForm]:
        """Return the output form with the given code, or None."""
        return self._output_forms.get((code or "").lower())

    def list_input_forms(self) -> List[str]:
        return sorted(form.code for form in self._input_forms.values())

    def list_output_forms(self) -> List[str]:
        return sorted(form.code for form in self._output_forms.values())


def get_form_registry() -> FormRegistry:
    """Get the shared form registry."""
    return FormRegistry.get_instance()
