"""
Model validators.

This module provides validation of the models flowing through the pipeline:

- DomainModelValidator: checks that every name referenced in an OntoUML
  Domain Model (generalization predecessors, generalization set children,
  relation ends, derivation relators) resolves to an entity.
- ObjectModelValidator: checks the structure of a deserialized Object Model
  JSON document before it is converted to dataclasses.

Usage:
    from ontogen.core.validators import DomainModelValidator

    result = DomainModelValidator().validate(model)
    if not result.is_valid:
        for issue in result.errors:
            print(f"Error: {issue.message}")
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ontogen.shared.models.ontouml import OntoUmlModel, RelationType

from .exceptions import UnresolvedReferenceError

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Severity of a validation issue."""
    ERROR = "error"


class IssueCategory(str, Enum):
    """Category of a validation issue."""
    UNRESOLVED_REFERENCE = "unresolved_reference"
    INVALID_STRUCTURE = "invalid_structure"
    MISSING_REQUIRED = "missing_required"
    INVALID_TYPE = "invalid_type"


@dataclass
class ValidationIssue:
    """
    A single validation issue.

    Attributes:
        severity: Issue severity.
        category: Issue category.
        message: Human-readable description.
        location: Path to the offending element (e.g. "classes[2].name").
        element: Name of the offending model element, if known.
    """
    severity: Severity
    category: IssueCategory
    message: str
    location: Optional[str] = None
    element: Optional[str] = None

    def __str__(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


@dataclass
class ValidationResult:
    """Collected validation issues for one model."""
    source: Optional[str] = None
    issues: List[ValidationIssue] = field(default_factory=list)

    def add_issue(
        self,
        severity: Severity,
        category: IssueCategory,
        message: str,
        location: Optional[str] = None,
        element: Optional[str] = None,
    ) -> None:
        self.issues.append(ValidationIssue(severity, category, message, location, element))

    def add_error(self, category: IssueCategory, message: str, **kwargs: Any) -> None:
        self.add_issue(Severity.ERROR, category, message, **kwargs)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == Severity.ERROR]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def get_summary(self) -> str:
        """Return a one-issue-per-line summary."""
        if not self.issues:
            return "No issues found"
        return "\n".join(f"[{issue.severity.value}] {issue}" for issue in self.issues)


# =============================================================================
# Domain Model Validation
# =============================================================================

class DomainModelValidator:
    """
    Validate cross references of an OntoUML Domain Model.

    Attribute types are not checked since they may name primitive types.

    Example:
        >>> result = DomainModelValidator().validate(model)
        >>> result.is_valid
        True
    """

    def validate(self, model: OntoUmlModel) -> ValidationResult:
        result = ValidationResult(source="OntoUmlModel")

        for entity in model.entities.values():
            for gen in entity.generalizations:
                self._check_entity(model, result, gen.predecessor, entity.name,
                                   f"entity '{entity.name}' generalization")
                if gen.generalization_set and gen.generalization_set not in model.generalization_sets:
                    result.add_error(
                        IssueCategory.UNRESOLVED_REFERENCE,
                        f"Unknown generalization set '{gen.generalization_set}'",
                        location=f"entity '{entity.name}' generalization",
                        element=entity.name,
                    )

        for gen_set in model.generalization_sets.values():
            for child in gen_set.children_names:
                self._check_entity(model, result, child, gen_set.name,
                                   f"generalization set '{gen_set.name}'")

        for relation in model.relations.values():
            location = f"relation '{relation.name}'"
            if relation.type == RelationType.DERIVATION:
                # A derivation links the derived relation to its relator
                if relation.source_end.type not in model.relations:
                    result.add_error(
                        IssueCategory.UNRESOLVED_REFERENCE,
                        f"Unknown relation '{relation.source_end.type}'",
                        location=f"{location} source end",
                        element=relation.name,
                    )
                self._check_entity(model, result, relation.target_end.type, relation.name, f"{location} target end")
                continue
            self._check_entity(model, result, relation.source_end.type, relation.name, f"{location} source end")
            self._check_entity(model, result, relation.target_end.type, relation.name, f"{location} target end")
            if relation.derived_from:
                self._check_entity(model, result, relation.derived_from, relation.name, f"{location} derivation")

        logger.debug(f"Domain model validation finished with {len(result.errors)} error(s)")
        return result

    def validate_or_raise(self, model: OntoUmlModel) -> None:
        """
        Validate the model and raise on the first unresolved reference.

        Raises:
            UnresolvedReferenceError: If any reference does not resolve.
        """
        result = self.validate(model)
        if not result.is_valid:
            first = result.errors[0]
            raise UnresolvedReferenceError(
                f"Invalid model: {first}",
                element=first.element,
            )

    @staticmethod
    def _check_entity(
        model: OntoUmlModel,
        result: ValidationResult,
        name: str,
        owner: str,
        location: str,
    ) -> None:
        if name not in model.entities:
            result.add_error(
                IssueCategory.UNRESOLVED_REFERENCE,
                f"Unknown entity '{name}'",
                location=location,
                element=owner,
            )


# =============================================================================
# Object Model Structure Validation
# =============================================================================

_CLASS_BOOL_KEYS = ("isAbstract", "isInterface")
_RELATION_BOOL_KEYS = (
    "isShareable", "isImmutablePart", "isImmutableWhole", "isEssential",
    "isInseparable", "allowDuplicates", "isPartInitializedWithWhole",
)


class ObjectModelValidator:
    """
    Validate the structure of an Object Model JSON document.

    Checks required keys and value types of classes, attributes, methods and
    relations. Name resolution is left to the language mappers.
    """

    def validate_data(self, data: Any) -> ValidationResult:
        result = ValidationResult(source="ObjectModel")

        if not isinstance(data, dict):
            result.add_error(IssueCategory.INVALID_STRUCTURE,
                             f"Object model must be a JSON object, got {type(data).__name__}")
            return result

        for key in ("classes", "relations"):
            if key not in data:
                result.add_error(IssueCategory.MISSING_REQUIRED, f"Missing required key '{key}'")
            elif not isinstance(data[key], list):
                result.add_error(IssueCategory.INVALID_TYPE, f"'{key}' must be an array", location=key)

        for index, clazz in enumerate(self._items(data, "classes")):
            self._validate_class(clazz, f"classes[{index}]", result)
        for index, relation in enumerate(self._items(data, "relations")):
            self._validate_relation(relation, f"relations[{index}]", result)

        return result

    @staticmethod
    def _items(data: Dict[str, Any], key: str) -> List[Any]:
        value = data.get(key)
        return value if isinstance(value, list) else []

    def _validate_class(self, clazz: Any, location: str, result: ValidationResult) -> None:
        if not self._require_object(clazz, location, result):
            return
        self._require_string(clazz, "name", location, result)
        for key in ("superClass", "existentiallyDependentOn"):
            self._optional_string(clazz, key, location, result)
        for key in _CLASS_BOOL_KEYS:
            self._optional_bool(clazz, key, location, result)
        for key in ("unionClasses", "implementing"):
            value = clazz.get(key)
            if value is not None and (not isinstance(value, list) or not all(isinstance(v, str) for v in value)):
                result.add_error(IssueCategory.INVALID_TYPE, f"'{key}' must be an array of strings",
                                 location=f"{location}.{key}")
        for index, attribute in enumerate(self._optional_list(clazz, "attributes", location, result)):
            attr_location = f"{location}.attributes[{index}]"
            if self._require_object(attribute, attr_location, result):
                self._require_string(attribute, "name", attr_location, result)
                self._validate_type_info(attribute, attr_location, result)
                self._optional_int(attribute, "minItems", attr_location, result)
                self._optional_int(attribute, "maxItems", attr_location, result)
        for index, method in enumerate(self._optional_list(clazz, "methods", location, result)):
            method_location = f"{location}.methods[{index}]"
            if self._require_object(method, method_location, result):
                self._require_string(method, "name", method_location, result)
                self._validate_type_info(method, method_location, result)
                for p_index, parameter in enumerate(self._optional_list(method, "parameters", method_location, result)):
                    p_location = f"{method_location}.parameters[{p_index}]"
                    if self._require_object(parameter, p_location, result):
                        self._require_string(parameter, "name", p_location, result)
                        self._validate_type_info(parameter, p_location, result)
                        self._optional_bool(parameter, "isCollection", p_location, result)

    def _validate_relation(self, relation: Any, location: str, result: ValidationResult) -> None:
        if not self._require_object(relation, location, result):
            return
        self._require_string(relation, "name", location, result)
        self._optional_string(relation, "derivedFrom", location, result)
        for key in _RELATION_BOOL_KEYS:
            self._optional_bool(relation, key, location, result)
        for key in ("sourceEnd", "targetEnd"):
            end_location = f"{location}.{key}"
            if key not in relation:
                result.add_error(IssueCategory.MISSING_REQUIRED, f"Missing required key '{key}'", location=location)
                continue
            end = relation[key]
            if self._require_object(end, end_location, result):
                self._require_string(end, "className", end_location, result)
                self._optional_string(end, "name", end_location, result)
                self._optional_int(end, "minItems", end_location, result)
                self._optional_int(end, "maxItems", end_location, result)

    def _validate_type_info(self, owner: Dict[str, Any], location: str, result: ValidationResult) -> None:
        type_info = owner.get("typeInfo")
        if type_info is None:
            return
        type_location = f"{location}.typeInfo"
        if self._require_object(type_info, type_location, result):
            self._require_string(type_info, "name", type_location, result)
            self._optional_bool(type_info, "isReference", type_location, result)

    # -------------------------------------------------------------------------
    # Primitive checks
    # -------------------------------------------------------------------------

    @staticmethod
    def _require_object(value: Any, location: str, result: ValidationResult) -> bool:
        if not isinstance(value, dict):
            result.add_error(IssueCategory.INVALID_TYPE, "Expected a JSON object", location=location)
            return False
        return True

    @staticmethod
    def _require_string(owner: Dict[str, Any], key: str, location: str, result: ValidationResult) -> None:
        if key not in owner:
            result.add_error(IssueCategory.MISSING_REQUIRED, f"Missing required key '{key}'", location=location)
        elif not isinstance(owner[key], str) or not owner[key]:
            result.add_error(IssueCategory.INVALID_TYPE, f"'{key}' must be a non-empty string",
                             location=f"{location}.{key}")

    @staticmethod
    def _optional_string(owner: Dict[str, Any], key: str, location: str, result: ValidationResult) -> None:
        value = owner.get(key)
        if value is not None and not isinstance(value, str):
            result.add_error(IssueCategory.INVALID_TYPE, f"'{key}' must be a string", location=f"{location}.{key}")

    @staticmethod
    def _optional_bool(owner: Dict[str, Any], key: str, location: str, result: ValidationResult) -> None:
        value = owner.get(key)
        if value is not None and not isinstance(value, bool):
            result.add_error(IssueCategory.INVALID_TYPE, f"'{key}' must be a boolean", location=f"{location}.{key}")

    @staticmethod
    def _optional_int(owner: Dict[str, Any], key: str, location: str, result: ValidationResult) -> None:
        value = owner.get(key)
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            result.add_error(IssueCategory.INVALID_TYPE, f"'{key}' must be an integer", location=f"{location}.{key}")

    @staticmethod
    def _optional_list(owner: Dict[str, Any], key: str, location: str, result: ValidationResult) -> List[Any]:
        value = owner.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            result.add_error(IssueCategory.INVALID_TYPE, f"'{key}' must be an array", location=f"{location}.{key}")
            return []
        return value
