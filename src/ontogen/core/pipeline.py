"""
Generation pipeline.

This module orchestrates one generator run:

    1. Front end: read the input file (Domain Model or Object Model)
    2. Transformer: Domain Model -> Object Model (skipped when the front end
       already produces an Object Model)
    3. Language mapper: Object Model -> view model
    4. Renderer: view model -> output files

Every stage runs to completion before the next one starts; any error aborts
the run and propagates to the caller.

Usage:
    from ontogen.core.pipeline import GenerationPipeline
    from ontogen.shared.models import GeneratorOptions

    options = GeneratorOptions(input="model.refontouml", output="out")
    result = GenerationPipeline().run(options)
    print(result.stats.get_summary())
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

from ontogen.plugins.registry import FormRegistry, InputForm, OutputForm, get_form_registry
from ontogen.shared.models.object_model import ObjectModel
from ontogen.shared.models.options import GeneratorOptions
from ontogen.shared.models.output import WriteOperation

from .transformer import OntoUmlToObjectModelTransformer

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    """State of a generation run."""
    IDLE = "idle"
    READING = "reading"
    TRANSFORMING = "transforming"
    MAPPING = "mapping"
    RENDERING = "rendering"
    COMPLETED = "completed"
    FAILED = "failed"


class UnknownFormError(ValueError):
    """Raised when an input or output form code is not registered."""

    def __init__(self, kind: str, code: Optional[str], available: List[str]):
        self.kind = kind
        self.code = code
        self.available = available
        super().__init__(
            f"Unknown {kind} form '{code}'. Available: {', '.join(available) or 'none'}"
        )


@dataclass
class PipelineStats:
    """
    Statistics collected during a run.

    Attributes:
        classes: Number of Object Model classes
        relations: Number of Object Model relations
        files_written: Number of files written
        duration_seconds: Total execution time
        state: Current pipeline state
    """
    classes: int = 0
    relations: int = 0
    files_written: int = 0
    duration_seconds: float = 0.0
    state: PipelineState = PipelineState.IDLE

    def get_summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            "Generation Statistics:",
            f"  State: {self.state.value}",
            f"  Classes: {self.classes}",
            f"  Relations: {self.relations}",
            f"  Files written: {self.files_written}",
        ]
        if self.duration_seconds > 0:
            lines.append(f"  Duration: {self.duration_seconds:.2f}s")
        return "\n".join(lines)


@dataclass
class GenerationResult:
    """Outcome of a successful run."""
    object_model: ObjectModel
    view_model: Any
    operations: List[WriteOperation] = field(default_factory=list)
    stats: PipelineStats = field(default_factory=PipelineStats)


class GenerationPipeline:
    """
    Run front end, transformer, mapper and renderer for one model.

    Example:
        >>> pipeline = GenerationPipeline()
        >>> result = pipeline.run(GeneratorOptions(input="m.xmi", output="out"))
        >>> result.stats.state
        <PipelineState.COMPLETED: 'completed'>
    """

    def __init__(
        self,
        registry: Optional[FormRegistry] = None,
        transformer: Optional[OntoUmlToObjectModelTransformer] = None,
    ):
        self._registry = registry or get_form_registry()
        self._transformer = transformer or OntoUmlToObjectModelTransformer()

    def resolve_forms(self, options: GeneratorOptions) -> Tuple[InputForm, OutputForm]:
        """
        Look up the input and output forms selected by ``options``.

        Raises:
            UnknownFormError: If a form code is not registered.
        """
        input_form = self._registry.get_input_form(options.input_form)
        if input_form is None:
            raise UnknownFormError("input", options.input_form, self._registry.list_input_forms())
        output_form = self._registry.get_output_form(options.output_form)
        if output_form is None:
            raise UnknownFormError("output", options.output_form, self._registry.list_output_forms())
        return input_form, output_form

    def run(self, options: GeneratorOptions) -> GenerationResult:
        """
        Execute a complete run.

        Args:
            options: Generator options; ``input`` must name an existing file.

        Returns:
            The Object Model, the view model and the executed writes.

        Raises:
            UnknownFormError: If a form code is not registered.
            FileNotFoundError: If the input file does not exist.
            OntoGenError: If reading, transforming or mapping fails.
        """
        input_form, output_form = self.resolve_forms(options)
        stats = PipelineStats()
        start_time = time.time()

        try:
            stats.state = PipelineState.READING
            front_end = input_form.create_front_end()
            logger.info(f"Reading {options.input} as {input_form.code}")
            parsed = front_end.parse_file(options.input)

            if front_end.returns_object_model:
                object_model = parsed
            else:
                stats.state = PipelineState.TRANSFORMING
                logger.info("Transforming domain model to object model")
                object_model = self._transformer.transform(parsed)
            stats.classes = len(object_model.classes)
            stats.relations = len(object_model.relations)

            stats.state = PipelineState.MAPPING
            logger.info(f"Mapping object model to {output_form.code}")
            view_model = output_form.create_mapper().model_to_view_model(object_model, options)

            stats.state = PipelineState.RENDERING
            logger.info(f"Rendering {output_form.code} to {options.output}")
            operations = output_form.create_renderer().generate_code(view_model, options)
            stats.files_written = len(operations)
        except Exception:
            stats.state = PipelineState.FAILED
            raise
        finally:
            stats.duration_seconds = time.time() - start_time

        stats.state = PipelineState.COMPLETED
        logger.info(f"Generation completed in {stats.duration_seconds:.2f}s")
        return GenerationResult(
            object_model=object_model,
            view_model=view_model,
            operations=operations,
            stats=stats,
        )
