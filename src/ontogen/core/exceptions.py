"""
Exception hierarchy for the OntoUML code generator.

All errors are terminal for a run: they propagate to the outermost caller,
which reports them and exits with a failure status.

Hierarchy:
    OntoGenError
    ├── ModelParseError            malformed or schema-invalid input
    │   └── TypeMappingError       invalid primitive type mapping file
    ├── UnresolvedReferenceError   reference to an unknown entity or class
    └── SemanticError              domain rule violation
        ├── InvalidAspectsError    ungrounded or circular aspect dependencies
        └── RoleWithoutOwnerError  role without a valid owner generalization
"""

from typing import List, Optional


class OntoGenError(Exception):
    """Base exception for all generator errors."""

    def __init__(self, message: str, element: Optional[str] = None):
        self.element = element
        super().__init__(message)


class ModelParseError(OntoGenError):
    """Exception raised when an input file cannot be parsed or is structurally invalid."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        details: Optional[str] = None,
        element: Optional[str] = None,
    ):
        self.file_path = file_path
        self.details = details
        super().__init__(message, element=element)


class TypeMappingError(ModelParseError):
    """Exception raised when the primitive type mapping file is invalid."""


class UnresolvedReferenceError(OntoGenError):
    """Exception raised when a name does not resolve to an entity or class in the model."""

    def __init__(self, message: str, element: Optional[str] = None, reference: Optional[str] = None):
        self.reference = reference
        super().__init__(message, element=element)


class SemanticError(OntoGenError):
    """Exception raised when the model violates an OntoUML mapping rule."""


class InvalidAspectsError(SemanticError):
    """Exception raised when aspect existential dependencies cannot be resolved."""

    def __init__(self, unresolved: List[str]):
        self.unresolved = list(unresolved)
        super().__init__(
            f"Invalid aspects in model: cannot resolve existential dependency of "
            f"{', '.join(self.unresolved)}",
            element=self.unresolved[0] if self.unresolved else None,
        )


class RoleWithoutOwnerError(SemanticError):
    """Exception raised when a role has no generalization to a valid role owner."""

    def __init__(self, role_name: str):
        super().__init__(f"Role has no owner: {role_name}", element=role_name)
