"""
Object Model JSON Renderer.

Writes the Object Model as 2-space indented JSON to ``options.output``.
"""

import json
import logging
from typing import List

from ontogen.constants import JsonConfig
from ontogen.shared.models.object_model import ObjectModel
from ontogen.shared.models.options import GeneratorOptions
from ontogen.shared.models.output import WriteOperation

logger = logging.getLogger(__name__)


def format_object_model(model: ObjectModel) -> str:
    """Return the JSON text of the Object Model."""
    return json.dumps(model.to_dict(), indent=JsonConfig.INDENT)


class JsonRenderer:
    """
    Render the Object Model to a formatted JSON file.

    Example:
        >>> renderer = JsonRenderer()
        >>> operations = renderer.generate_code(model, GeneratorOptions(output="model.json"))
    """

    def generate_code(self, model: ObjectModel, options: GeneratorOptions) -> List[WriteOperation]:
        """
        Write the model to ``options.output``.

        Returns:
            The executed write operations.

        Raises:
            ValueError: If no output path is configured.
        """
        if options is None or not options.output:
            raise ValueError("JSON rendering requires an output file")

        formatted = format_object_model(model)
        if options.verbose:
            logger.info(f"Generated object model:\n{formatted}")

        operation = WriteOperation(path=options.output, content=formatted)
        operation.execute()
        logger.info(f"Object model written to {operation.path}")
        return [operation]
