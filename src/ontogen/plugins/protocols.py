"""
Protocol Definitions for Generator Components.

This module defines the protocols (interfaces) that input and output form
components must implement. Using protocols allows for duck typing while
still providing type hints and documentation.

Protocols:
    FrontEndProtocol: Read an input file into a Domain Model or Object Model
    LanguageMapperProtocol: Map an Object Model to a language view model
    LanguageRendererProtocol: Render a view model to output files
"""

from typing import Any, List, Optional, Protocol, TypeVar, Union, runtime_checkable

from ontogen.shared.models.object_model import ObjectModel
from ontogen.shared.models.ontouml import OntoUmlModel
from ontogen.shared.models.options import GeneratorOptions
from ontogen.shared.models.output import WriteOperation

# Type variables for generic protocols
ViewModelT = TypeVar('ViewModelT')  # Language specific view model type
ViewModelT_co = TypeVar('ViewModelT_co', covariant=True)
ViewModelT_contra = TypeVar('ViewModelT_contra', contravariant=True)


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
]


@runtime_checkable
class FrontEndProtocol(Protocol):
    """
    Protocol for reading an input form.

    A front end either produces an OntoUML Domain Model, which is then
    transformed into an Object Model, or directly an Object Model. The
    ``returns_object_model`` flag tells the pipeline which one to expect.

    Example implementation:
        class MyFrontEnd:
            returns_object_model = False

            def parse_file(self, file_path: str) -> OntoUmlModel:
                with open(file_path, 'r', encoding='utf-8') as f:
                    return self.parse(f.read(), file_path)
    """

    returns_object_model: bool

    def parse_file(self, file_path: str) -> Union[OntoUmlModel, ObjectModel]:
        """
        Parse a file.

        Args:
            file_path: Path to the file to parse.

        Returns:
            The Domain Model, or the Object Model when ``returns_object_model``.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ModelParseError: If content cannot be parsed.
        """
        ...


@runtime_checkable
class LanguageMapperProtocol(Protocol[ViewModelT_co]):
    """
    Protocol for mapping an Object Model to a language view model.

    Example implementation:
        class MyMapper(LanguageMapperProtocol[MyViewModel]):
            def model_to_view_model(self, model, options=None) -> MyViewModel:
                return MyViewModel(classes=[c.name for c in model.classes])
    """

    def model_to_view_model(self, model: ObjectModel, options: Optional[GeneratorOptions] = None) -> ViewModelT_co:
        """
        Map the model.

        Args:
            model: The finalized Object Model.
            options: Generator options.

        Returns:
            Language specific view model.
        """
        ...


@runtime_checkable
class LanguageRendererProtocol(Protocol[ViewModelT_contra]):
    """
    Protocol for rendering a view model to files.

    Renderers receive the view model produced by the mapper registered
    together with them for the same output form.
    """

    def generate_code(self, view_model: ViewModelT_contra, options: GeneratorOptions) -> List[WriteOperation]:
        """
        Render and write the view model.

        Args:
            view_model: View model produced by the matching mapper.
            options: Generator options (output path, single file mode).

        Returns:
            The executed write operations.
        """
        ...


# =============================================================================
# Type Checking Utilities
# =============================================================================

def is_front_end(obj: Any) -> bool:
    """Check if object implements FrontEndProtocol."""
    return isinstance(obj, FrontEndProtocol)


def is_language_mapper(obj: Any) -> bool:
    """Check if object implements LanguageMapperProtocol."""
    return isinstance(obj, LanguageMapperProtocol)


def is_language_renderer(obj: Any) -> bool:
    """Check if object implements LanguageRendererProtocol."""
    return isinstance(obj, LanguageRendererProtocol)
