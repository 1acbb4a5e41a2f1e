"""
Object Model JSON Parser.

Reads an Object Model serialized as JSON (the output of the
``onto-object-model`` form) so it can be mapped to a target language without
running the OntoUML transformation.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ontogen.constants import JsonConfig
from ontogen.core.exceptions import ModelParseError
from ontogen.core.validators import ObjectModelValidator
from ontogen.shared.models.object_model import ObjectModel

logger = logging.getLogger(__name__)


class ObjectModelJsonParser:
    """
    Parse Object Model JSON documents.

    Example:
        >>> parser = ObjectModelJsonParser()
        >>> model = parser.parse_file("model.json")
        >>> print(f"Loaded {len(model.classes)} classes")
    """

    returns_object_model = True

    def __init__(self) -> None:
        self._validator = ObjectModelValidator()

    def parse_file(self, file_path: str) -> ObjectModel:
        """
        Parse an Object Model JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ModelParseError: If the content is not a valid Object Model.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Object model file not found: {file_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise ModelParseError(
                "Invalid JSON: content is not UTF-8",
                file_path=str(path),
                details=str(e),
            ) from e

        return self.parse(content, str(path))

    def parse(self, content: str, file_path: Optional[str] = None) -> ObjectModel:
        """
        Parse Object Model JSON content.

        A leading byte order mark is ignored.

        Raises:
            ModelParseError: If the content is not valid JSON or fails
                structural validation.
        """
        if content.startswith(JsonConfig.BOM):
            content = content[len(JsonConfig.BOM):]

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ModelParseError(
                f"Invalid JSON: {e}",
                file_path=file_path,
                details=str(e),
            ) from e

        result = self._validator.validate_data(data)
        if not result.is_valid:
            for issue in result.errors:
                logger.debug(f"Object model issue: {issue}")
            raise ModelParseError(
                f"Invalid ObjectModel file: {result.errors[0]}",
                file_path=file_path,
                details=result.get_summary(),
            )

        model = ObjectModel.from_dict(data)
        logger.info(f"Loaded object model: {len(model.classes)} classes, {len(model.relations)} relations")
        return model
