"""Main validator combining all validation rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yaml_to_ts.validation.base import CompositeValidator
from yaml_to_ts.validation.build_validator import BuildValidator
from yaml_to_ts.validation.consistency_validators import (
    AttributeConflictValidator,
    DuplicateDeclarationValidator,
    DuplicateFieldNameValidator,
    DuplicateTypeNameValidator,
    SingleVariantEnumValidator,
    UnusedGenericValidator,
)
from yaml_to_ts.validation.errors import ValidationResult, ValidationSeverity
from yaml_to_ts.validation.reference_validators import (
    IndexKeyValidator,
    TypeReferenceValidator,
)

if TYPE_CHECKING:
    from yaml_to_ts.models.root import TypeSchema


class TypeSchemaValidator:
    """Main validator for declaration files.

    Combines reference validators (for cross-reference checks) and
    consistency validators (for semantic checks). When both pass, a
    trial build reports anything only the builder can detect.
    """

    def __init__(self, strict: bool = False, build: bool = True) -> None:
        """Initialize validator.

        Args:
        ----
            strict: If True, treat warnings as errors.
            build: If True, run a trial build once static checks pass.

        """
        self.strict = strict
        self._validator = CompositeValidator(
            [
                # Reference validators
                TypeReferenceValidator(),
                IndexKeyValidator(),
                # Consistency validators
                DuplicateDeclarationValidator(),
                DuplicateTypeNameValidator(),
                DuplicateFieldNameValidator(),
                AttributeConflictValidator(),
                UnusedGenericValidator(),
                SingleVariantEnumValidator(),
            ]
        )
        self._build = BuildValidator() if build else None

    def validate(self, schema: TypeSchema) -> ValidationResult:
        """Validate a declaration file.

        Args:
        ----
            schema: The document to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        self._validator.validate(schema, result)
        if self._build is not None and result.is_valid:
            self._build.validate(schema, result)
        return result

    def validate_and_raise(self, schema: TypeSchema) -> None:
        """Validate and raise exception if invalid.

        Args:
        ----
            schema: The document to validate.

        Raises:
        ------
            ValidationError: If validation fails.

        """
        result = self.validate(schema)

        if not result.is_valid:
            raise ValidationError(result)

        if self.strict and result.warnings:
            raise ValidationError(result)


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result.

        Args:
        ----
            result: The validation result containing issues.

        """
        self.result = result
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        parts = []
        if error_count:
            parts.append(f"{error_count} error(s)")
        if warning_count:
            parts.append(f"{warning_count} warning(s)")

        message = f"Validation failed: {', '.join(parts)}"
        super().__init__(message)

    def format_issues(self) -> str:
        """Format all issues as a string.

        Returns
        -------
            Formatted string with all issues.

        """
        lines = []

        for issue in self.result.errors:
            lines.append(f"ERROR: {issue}")

        for issue in self.result.warnings:
            lines.append(f"WARNING: {issue}")

        return "\n".join(lines)

    @property
    def errors_only(self) -> list[str]:
        """Get only error messages."""
        return [
            str(issue) for issue in self.result.issues if issue.severity == ValidationSeverity.ERROR
        ]
