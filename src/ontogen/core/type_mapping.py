"""
Primitive type mapping loader.

A type mapping file is a flat JSON object mapping domain primitive type names
to target language type names, e.g.::

    {"number": "int", "string": "string"}

When no file is given, an empty mapping is used.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from ontogen.constants import JsonConfig
from ontogen.shared.models.object_model import TypeMapping

from .exceptions import TypeMappingError

logger = logging.getLogger(__name__)


class TypeMappingLoader:
    """
    Read and validate primitive type mapping files.

    Example:
        >>> mapping = TypeMappingLoader().read_type_mappings("types.json")
        >>> mapping.get("number")
        'int'
    """

    def read_type_mappings(self, file_path: Optional[Union[str, Path]]) -> TypeMapping:
        """
        Read the primitive type mappings if a file is provided.

        Args:
            file_path: Path to the mapping file, or None.

        Returns:
            Parsed type mapping, or an empty mapping if no file is specified.

        Raises:
            TypeMappingError: If the file cannot be read, is not valid JSON, or
                is not a flat object of strings.
        """
        if not file_path:
            return {}

        path = Path(file_path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise TypeMappingError(
                f"Cannot read type mapping file: {e}",
                file_path=str(path),
            ) from e
        except UnicodeDecodeError as e:
            raise TypeMappingError(
                "Invalid type mapping file: content is not UTF-8",
                file_path=str(path),
                details=str(e),
            ) from e

        mapping = self.parse(content, str(path))
        logger.info(f"Loaded {len(mapping)} primitive type mappings from {path}")
        return mapping

    def parse(self, content: str, file_path: Optional[str] = None) -> TypeMapping:
        """Parse and validate type mapping content."""
        if content.startswith(JsonConfig.BOM):
            content = content[len(JsonConfig.BOM):]
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise TypeMappingError(
                f"Invalid type mapping file: {e.msg}",
                file_path=file_path,
                details=f"line {e.lineno}, column {e.colno}",
            ) from e

        self._validate(data, file_path)
        return dict(data)

    @staticmethod
    def _validate(data: Any, file_path: Optional[str]) -> None:
        if not isinstance(data, dict):
            raise TypeMappingError(
                f"Invalid type mapping file: expected an object, got {type(data).__name__}",
                file_path=file_path,
            )
        for key, value in data.items():
            if not isinstance(value, str):
                raise TypeMappingError(
                    f"Invalid type mapping file: value of '{key}' must be a string",
                    file_path=file_path,
                    element=key,
                )
