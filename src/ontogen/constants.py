"""
Centralized configuration constants for the OntoUML code generator.

This module provides a single source of truth for all configuration constants,
default values and form codes used throughout the application.
"""

from enum import IntEnum
from typing import Final

# ============================================================================
# Exit Codes
# ============================================================================

class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Following Unix conventions:
    - 0: Success
    - 1: Usage error (missing arguments, unknown forms)
    - 2: Processing error (parsing, transformation, rendering)
    """
    SUCCESS = 0
    USAGE_ERROR = 1
    PROCESSING_ERROR = 2


# ============================================================================
# Input / Output Forms
# ============================================================================

class FormCodes:
    """Codes selecting the input and output forms."""

    REFONTOUML: Final[str] = "refontouml"
    """RefOntoUML XMI as exported by OLED."""

    ONTO_OBJECT_MODEL: Final[str] = "onto-object-model"
    """JSON serialization of the Object Model."""

    CSHARP_MODEL: Final[str] = "csharp-model"
    """C# model classes with semantic checks."""

    DEFAULT_INPUT_FORM: Final[str] = REFONTOUML
    DEFAULT_OUTPUT_FORM: Final[str] = CSHARP_MODEL


# ============================================================================
# RefOntoUML Input
# ============================================================================

class RefOntoUmlConfig:
    """RefOntoUML XMI reading constants."""

    ROOT_ELEMENT: Final[str] = "Model"
    """Local name of the document root."""

    NAMESPACE_MARKER: Final[str] = "refontouml"
    """Substring of the RefOntoUML namespace URI (case insensitive)."""

    PACKAGE_TYPE: Final[str] = "RefOntoUML:Package"

    UNLIMITED_VALUE: Final[str] = "*"
    DEFAULT_UPPER_VALUE: Final[int] = 1
    DEFAULT_LOWER_VALUE: Final[int] = 0


# ============================================================================
# Transformation
# ============================================================================

class TransformConfig:
    """Naming constants used by the transformer passes."""

    ROLE_RELATION_SUFFIX: Final[str] = "Roles"
    ROLE_FIELD_SUFFIX: Final[str] = "Role"

    UNBOUNDED: Final[int] = -1
    """Marker for unlimited maximal item count."""

    MIN_COMBINATION_SIZE: Final[int] = 2
    """Smallest overlap combination produced for non-disjoint generalization sets."""


# ============================================================================
# C# Output
# ============================================================================

class CSharpConfig:
    """C# language mapping and rendering constants."""

    BASE_INTERFACE_NAME: Final[str] = "CanValidate"
    """Interface every generated class implements."""

    VALUE_TYPES: Final[tuple] = (
        "bool", "byte", "char", "decimal", "double", "float", "int",
        "long", "sbyte", "short", "uint", "ulong", "ushort",
    )
    """C# value types (candidates for Nullable<T>)."""

    DEFAULT_SINGLE_FILE_NAME: Final[str] = "Model.cs"
    INTERFACE_FILE_PREFIX: Final[str] = "I"
    FILE_EXTENSION: Final[str] = ".cs"

    CLASS_TEMPLATE: Final[str] = "csharp_class.cs.j2"
    FILE_TEMPLATE: Final[str] = "csharp_file.cs.j2"

    NAMESPACE_CONFIG_KEY: Final[str] = "namespace"
    DEFAULT_NAMESPACE: Final[str] = "OntoModel"
    """Namespace used when none is configured."""

    USINGS: Final[tuple] = (
        "Ccmi.OntoUml.Utilities.AssociationClasses",
        "Ccmi.OntoUml.Utilities.Collections",
        "System",
        "System.Collections.Generic",
        "System.Linq",
    )
    """Namespaces imported by every generated file."""

    PROGRESS_THRESHOLD: Final[int] = 10
    """Show a progress bar when writing at least this many files."""


# ============================================================================
# JSON Output
# ============================================================================

class JsonConfig:
    """JSON serialization constants."""

    INDENT: Final[int] = 2
    BOM: Final[str] = "\ufeff"


# ============================================================================
# Logging Configuration
# ============================================================================

class LoggingConfig:
    """Logging configuration constants."""

    DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
    """Default logging level."""

    VERBOSE_LOG_LEVEL: Final[str] = "INFO"
    """Logging level used with --verbose."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log message format."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Date format for log messages."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """Timestamp format for structured (JSON) log records."""
