"""Tests for error formatter."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console
from yaml_to_ts.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree, locate_line
from yaml_to_ts.validation.errors import (
    ValidationIssue,
    ValidationLocation,
    ValidationResult,
    ValidationSeverity,
)

SOURCE = """\
schema: yaml-to-ts/v1
types:
  - name: User
    fields:
      - name: id
        type: u64
      - name: email
        type: string
  - name: Event
    variants:
      - name: Created
        fields:
          - name: id
            type: u64
"""


@pytest.fixture
def string_console() -> Console:
    """Create a console that writes to a string."""
    return Console(file=StringIO(), width=200)


def output_of(console: Console) -> str:
    """Return everything written to a string console."""
    return console.file.getvalue()  # type: ignore[attr-defined]


class TestLocateLine:
    """Tests for mapping issue paths to source lines."""

    def test_declaration(self) -> None:
        """A declaration path lands on its name line."""
        assert locate_line(SOURCE, "types.User") == 3

    def test_field(self) -> None:
        """A field path lands on the field's name line."""
        assert locate_line(SOURCE, "types.User.fields.email") == 7

    def test_trailing_attribute(self) -> None:
        """An attribute segment keeps the last name found."""
        assert locate_line(SOURCE, "types.User.fields.id.type") == 5

    def test_follows_declaration_order(self) -> None:
        """A field name shared by two declarations resolves inside the right one."""
        assert locate_line(SOURCE, "types.Event.variants.Created.fields.id") == 13

    def test_unknown_declaration(self) -> None:
        """An unknown declaration has no line."""
        assert locate_line(SOURCE, "types.Missing.fields.id") is None

    def test_quoted_names(self) -> None:
        """Quoted names are matched too."""
        source = 'types:\n  - name: "User"\n'
        assert locate_line(source, "types.User") == 2


class TestErrorFormatter:
    """Tests for ErrorFormatter."""

    def test_format_empty_result(self, string_console: Console) -> None:
        """Should show success for empty result."""
        ErrorFormatter(string_console).format_validation_result(ValidationResult())

        assert "Validation passed" in output_of(string_console)

    def test_format_with_errors(self, string_console: Console) -> None:
        """Should show errors with code, location and suggestion."""
        result = ValidationResult()
        result.add_error(
            "E001",
            "'Missing' is not defined",
            "types.User.fields.id.type",
            suggestion="Define 'Missing' in the 'types' section",
        )

        ErrorFormatter(string_console, show_context=False).format_validation_result(
            result, Path("types.yaml")
        )

        output = output_of(string_console)
        assert "Validation Failed" in output
        assert "File: types.yaml" in output
        assert "ERROR" in output
        assert "[E001]" in output
        assert "'Missing' is not defined" in output
        assert "at types.User.fields.id.type" in output
        assert "Define 'Missing' in the 'types' section" in output
        assert "1 error(s)" in output

    def test_format_with_warnings_only(self, string_console: Console) -> None:
        """Warnings alone are reported under their own title."""
        result = ValidationResult()
        result.add_warning("W001", "Generic parameter 'T' is never used", "types.Box")

        ErrorFormatter(string_console, show_context=False).format_validation_result(result)

        output = output_of(string_console)
        assert "Validation Warnings" in output
        assert "WARNING" in output
        assert "1 warning(s)" in output
        assert "error(s)" not in output

    def test_format_counts_both(self, string_console: Console) -> None:
        """Errors and warnings are counted together."""
        result = ValidationResult()
        result.add_error("E100", "duplicate", "types.User")
        result.add_error("E100", "duplicate", "types.User")
        result.add_warning("W002", "single variant", "types.Event")

        ErrorFormatter(string_console, show_context=False).format_validation_result(result)

        assert "2 error(s), 1 warning(s)" in output_of(string_console)

    def test_format_with_context(self, string_console: Console) -> None:
        """Source context around the issue is shown when enabled."""
        result = ValidationResult()
        result.add_error("E001", "bad type", "types.User.fields.email.type")

        ErrorFormatter(string_console, show_context=True).format_validation_result(
            result, source_content=SOURCE
        )

        output = output_of(string_console)
        assert "name: email" in output
        assert "type: string" in output

    def test_context_skipped_for_unknown_path(self, string_console: Console) -> None:
        """No context is printed when the path cannot be located."""
        result = ValidationResult()
        result.add_error("E001", "bad type", "types.Missing")

        ErrorFormatter(string_console, show_context=True).format_validation_result(
            result, source_content=SOURCE
        )

        assert "schema: yaml-to-ts/v1" not in output_of(string_console)

    def test_explicit_line_is_used(self, string_console: Console) -> None:
        """A location carrying a line number wins over path lookup."""
        result = ValidationResult()
        result.add(
            ValidationIssue(
                code="E001",
                message="bad",
                severity=ValidationSeverity.ERROR,
                location=ValidationLocation(path="types.Missing", line=1),
            )
        )

        ErrorFormatter(string_console, max_context_lines=0).format_validation_result(
            result, source_content=SOURCE
        )

        output = output_of(string_console)
        assert "schema: yaml-to-ts/v1" in output
        assert "types:" not in output.replace("at types.Missing", "")


class TestErrorTree:
    """Tests for ErrorTree."""

    def test_groups_by_declared_type(self, string_console: Console) -> None:
        """Issues are grouped under the declaration they belong to."""
        result = ValidationResult()
        result.add_error("E001", "first", "types.User.fields.id.type")
        result.add_error("E102", "second", "types.User.fields.name")
        result.add_warning("W002", "third", "types.Event.variants")

        ErrorTree(string_console).print_result(result)

        output = output_of(string_console)
        assert "Validation Issues" in output
        assert "User (2 issues)" in output
        assert "Event (1 issues)" in output
        assert "E001 first" in output
        assert "W002 third" in output
        assert output.index("Event") < output.index("User")

    def test_issue_without_location(self, string_console: Console) -> None:
        """Issues without a location are grouped as general."""
        result = ValidationResult()
        result.add(
            ValidationIssue(code="E400", message="boom", severity=ValidationSeverity.ERROR)
        )

        ErrorTree(string_console).print_result(result)

        assert "general (1 issues)" in output_of(string_console)


class TestErrorTable:
    """Tests for ErrorTable."""

    def test_rows(self, string_console: Console) -> None:
        """Every issue becomes a row with its type and location."""
        result = ValidationResult()
        result.add_error("E001", "undefined type", "types.User.fields.id.type")
        result.add_warning("W001", "unused generic", "types.Box.generics.T")

        ErrorTable(string_console).print_result(result)

        output = output_of(string_console)
        assert "Validation Issues" in output
        assert "E001" in output
        assert "ERROR" in output
        assert "W001" in output
        assert "WARNING" in output
        assert "types.User.fields.id.type" in output
        assert "undefined type" in output
        assert "Box" in output
