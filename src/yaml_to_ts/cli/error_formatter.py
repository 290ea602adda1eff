"""Error message formatting with Rich."""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

if TYPE_CHECKING:
    from yaml_to_ts.validation.errors import (
        ValidationIssue,
        ValidationLocation,
        ValidationResult,
    )

# Path segments that name a collection rather than a declaration
_COLLECTIONS = frozenset({"types", "fields", "variants", "items", "generics"})


def locate_line(source: str, path: str) -> int | None:
    """Find the 1-based source line of a dotted issue path.

    Follows the ``name:`` entries of the path (declaration, variant,
    field) through the file, so ``types.User.fields.id.type`` lands on
    the ``name: id`` line that follows ``name: User``.

    Args:
    ----
        source: YAML source text.
        path: Dotted issue path.

    Returns:
    -------
        Line number, or None if the declaration cannot be found.

    """
    names = [
        part for part in path.split(".") if part not in _COLLECTIONS and not part.isdigit()
    ]
    lines = source.splitlines()
    found: int | None = None
    start = 0
    for name in names:
        pattern = re.compile(rf"""^\s*(-\s*)?name:\s*['"]?{re.escape(name)}['"]?\s*(#.*)?$""")
        for index in range(start, len(lines)):
            if pattern.match(lines[index]):
                found = index + 1
                start = index + 1
                break
        else:
            break
    return found


class ErrorFormatter:
    """Formats validation errors for terminal display."""

    def __init__(
        self,
        console: Console | None = None,
        show_context: bool = True,
        max_context_lines: int = 3,
    ) -> None:
        """Initialize formatter.

        Args:
        ----
            console: Rich Console for output.
            show_context: Whether to show source context.
            max_context_lines: Max lines of context to show.

        """
        self.console = console or Console(stderr=True)
        self.show_context = show_context
        self.max_context_lines = max_context_lines

    def format_validation_result(
        self,
        result: ValidationResult,
        source_path: Path | None = None,
        source_content: str | None = None,
    ) -> None:
        """Format and print validation result.

        Args:
        ----
            result: The validation result to format.
            source_path: Path to source file (for display).
            source_content: Source content for context snippets.

        """
        if result.is_valid and not result.warnings:
            self._print_success("Validation passed")
            return

        error_count = len(result.errors)
        warning_count = len(result.warnings)

        self.console.print(self._build_summary(error_count, warning_count, source_path))
        self.console.print()

        for issue in result.errors:
            self._print_issue(issue, source_content, "red")
        for issue in result.warnings:
            self._print_issue(issue, source_content, "yellow")

        self.console.print()
        if error_count > 0:
            self.console.print(f"[red bold]✗ {error_count} error(s)[/red bold]", end="")
        if warning_count > 0:
            if error_count > 0:
                self.console.print(", ", end="")
            self.console.print(f"[yellow]{warning_count} warning(s)[/yellow]", end="")
        self.console.print()

    def _build_summary(
        self,
        errors: int,
        warnings: int,
        source_path: Path | None,
    ) -> Panel:
        title = "Validation Failed" if errors > 0 else "Validation Warnings"
        style = "red" if errors > 0 else "yellow"

        content = Text()
        if source_path:
            content.append(f"File: {source_path}\n", style="dim")
        if errors > 0:
            content.append(f"Errors: {errors}", style="red bold")
        if warnings > 0:
            if errors > 0:
                content.append("  ")
            content.append(f"Warnings: {warnings}", style="yellow")

        return Panel(content, title=title, border_style=style)

    def _print_issue(
        self,
        issue: ValidationIssue,
        source_content: str | None,
        color: str,
    ) -> None:
        severity = issue.severity.value.upper()
        self.console.print(
            f"[{color} bold]{severity}[/{color} bold] "
            f"[{color}]\\[{issue.code}][/{color}] "
            f"{issue.message}"
        )

        if issue.location:
            self.console.print(f"  [dim]at {issue.location}[/dim]")

        if self.show_context and source_content and issue.location:
            context = self._get_source_context(source_content, issue.location)
            if context:
                self.console.print(context)

        if issue.suggestion:
            self.console.print(f"  [green]💡 {issue.suggestion}[/green]")

        self.console.print()

    def _get_source_context(
        self,
        source: str,
        location: ValidationLocation,
    ) -> Syntax | None:
        """Get source context around the error location."""
        line = location.line or locate_line(source, location.path)
        if line is None:
            return None

        lines = source.splitlines()
        start = max(0, line - 1 - self.max_context_lines)
        end = min(len(lines), line + self.max_context_lines)

        return Syntax(
            "\n".join(lines[start:end]),
            "yaml",
            line_numbers=True,
            start_line=start + 1,
            highlight_lines={line},
            theme="monokai",
        )

    def _print_success(self, message: str) -> None:
        self.console.print(f"[green]✓ {message}[/green]")


class ErrorTree:
    """Display errors as a tree grouped by declared type."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error tree formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as tree."""
        tree = Tree("[bold]Validation Issues[/bold]")

        by_type: dict[str, list[ValidationIssue]] = {}
        for issue in result.issues:
            by_type.setdefault(_declared_type(issue), []).append(issue)

        for name, issues in sorted(by_type.items()):
            node = tree.add(f"[cyan]{name}[/cyan] ({len(issues)} issues)")
            for issue in issues:
                color = "red" if issue.severity.value == "error" else "yellow"
                node.add(f"[{color}]{issue.code}[/{color}] {issue.message}")

        self.console.print(tree)


class ErrorTable:
    """Display errors as a table."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error table formatter.

        Args:
        ----
            console: Rich Console for output.

        """
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as table."""
        table = Table(title="Validation Issues")

        table.add_column("Code", style="cyan", width=6)
        table.add_column("Severity", width=8)
        table.add_column("Type")
        table.add_column("Location", style="dim")
        table.add_column("Message")

        for issue in result.issues:
            severity_style = "red" if issue.severity.value == "error" else "yellow"
            severity = f"[{severity_style}]{issue.severity.value.upper()}[/{severity_style}]"
            location = str(issue.location) if issue.location else "-"
            table.add_row(issue.code, severity, _declared_type(issue), location, issue.message)

        self.console.print(table)


def _declared_type(issue: ValidationIssue) -> str:
    """Declared type an issue belongs to, from its ``types.<Name>`` path."""
    if issue.location is None:
        return "general"
    parts = issue.location.path.split(".")
    if len(parts) > 1 and parts[0] == "types":
        return parts[1]
    return parts[0]
