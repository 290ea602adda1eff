"""Validation issue types and error codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from yaml_to_ts.errors import TypeGenError


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ValidationLocation:
    """Location in the declaration file where an issue was found."""

    path: str
    """Dotted path to the issue (e.g., 'types.User.fields.user_id.type')."""

    line: int | None = None
    """Line number in the source file (if available)."""

    column: int | None = None
    """Column number in the source file (if available)."""

    def __str__(self) -> str:
        """Format location as string."""
        if self.line is not None:
            if self.column is not None:
                return f"{self.path} (line {self.line}, col {self.column})"
            return f"{self.path} (line {self.line})"
        return self.path


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue."""

    code: str
    """Unique error code (e.g., 'E001', 'W001')."""

    message: str
    """Human-readable error message."""

    severity: ValidationSeverity
    """Severity level."""

    location: ValidationLocation | None = None
    """Location in the declaration file."""

    suggestion: str | None = None
    """Suggested fix."""

    context: dict[str, Any] = field(default_factory=dict)
    """Additional context for debugging."""

    def __str__(self) -> str:
        """Format issue as string."""
        parts = [f"[{self.code}]", self.severity.value.upper(), self.message]
        if self.location:
            parts.append(f"at {self.location}")
        if self.suggestion:
            parts.append(f"(hint: {self.suggestion})")
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validation containing all issues."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def is_valid(self) -> bool:
        """Check if there are no errors (warnings are OK)."""
        return len(self.errors) == 0

    def add(self, issue: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def add_error(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add an error issue."""
        self.add(
            ValidationIssue(
                code=code,
                message=message,
                severity=ValidationSeverity.ERROR,
                location=ValidationLocation(path=path),
                suggestion=suggestion,
                context=context,
            )
        )

    def add_warning(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add a warning issue."""
        self.add(
            ValidationIssue(
                code=code,
                message=message,
                severity=ValidationSeverity.WARNING,
                location=ValidationLocation(path=path),
                suggestion=suggestion,
                context=context,
            )
        )

    def add_type_error(self, code: str, error: TypeGenError, path: str) -> None:
        """Add an error issue for a failed build step.

        Args:
        ----
            code: Error code to report.
            error: The build error; its location and attribute become context.
            path: Location of the declaration in the file.

        """
        self.add_error(
            code=code,
            message=error.message,
            path=path,
            type_name=error.type_name,
            field=error.field,
            attribute=error.attribute,
        )

    def by_code(self, code: str) -> list[ValidationIssue]:
        """Get issues with the given code."""
        return [i for i in self.issues if i.code == code]

    def merge(self, other: ValidationResult) -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)


class ErrorCodes:
    """Standard validation error codes."""

    # E0xx - Reference errors
    E001_UNDEFINED_TYPE = "E001"
    E002_UNDEFINED_INDEX_KEY = "E002"

    # E1xx - Duplicate errors
    E100_DUPLICATE_DECLARATION = "E100"
    E101_DUPLICATE_TYPE_NAME = "E101"
    E102_DUPLICATE_FIELD_NAME = "E102"

    # E3xx - Attribute errors
    E300_INVALID_RENAME_RULE = "E300"
    E301_CONFLICTING_ATTRIBUTES = "E301"
    E302_INVALID_PATTERN = "E302"

    # E4xx - Build errors
    E400_UNSUPPORTED_TYPE = "E400"

    # W0xx - Warnings
    W001_UNUSED_GENERIC = "W001"
    W002_SINGLE_VARIANT_ENUM = "W002"
