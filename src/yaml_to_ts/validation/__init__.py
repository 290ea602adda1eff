"""Validation module for declaration files."""

from yaml_to_ts.validation.errors import (
    ErrorCodes,
    ValidationIssue,
    ValidationLocation,
    ValidationResult,
    ValidationSeverity,
)
from yaml_to_ts.validation.validator import (
    TypeSchemaValidator,
    ValidationError,
)

__all__ = [
    "ErrorCodes",
    "TypeSchemaValidator",
    "ValidationError",
    "ValidationIssue",
    "ValidationLocation",
    "ValidationResult",
    "ValidationSeverity",
]
