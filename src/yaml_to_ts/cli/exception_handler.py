"""CLI exception handling."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.panel import Panel

from yaml_to_ts.errors import TypeGenError
from yaml_to_ts.models.loader import LoaderError
from yaml_to_ts.validation.validator import ValidationError

T = TypeVar("T")

console = Console(stderr=True)


def handle_exceptions(
    verbose: bool = False,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Handle exceptions in CLI commands with formatted output.

    Args:
    ----
        verbose: Whether to show full tracebacks.

    Returns:
    -------
        Decorator function.

    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> T:
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except ValidationError as e:
                _handle_validation_error(e)
                raise typer.Exit(1) from None
            except PydanticValidationError as e:
                _handle_pydantic_error(e, verbose)
                raise typer.Exit(1) from None
            except LoaderError as e:
                _handle_loader_error(e)
                raise typer.Exit(1) from None
            except TypeGenError as e:
                _handle_build_error(e, verbose)
                raise typer.Exit(1) from None
            except PermissionError as e:
                _handle_permission_error(e)
                raise typer.Exit(1) from None
            except Exception as e:
                _handle_generic_error(e, verbose)
                raise typer.Exit(1) from None

        return wrapper

    return decorator


def _handle_validation_error(error: ValidationError) -> None:
    from yaml_to_ts.cli.error_formatter import ErrorFormatter

    ErrorFormatter(console).format_validation_result(error.result)


def _handle_pydantic_error(error: PydanticValidationError, verbose: bool) -> None:
    from yaml_to_ts.cli.pydantic_errors import (
        format_pydantic_location,
        get_suggestion_for_error,
        translate_pydantic_error,
    )

    console.print("[red bold]Schema Validation Failed[/red bold]")
    console.print()

    for err in error.errors():
        console.print(f"[red]✗[/red] {format_pydantic_location(err['loc'])}")
        console.print(f"  {translate_pydantic_error(err)}")
        console.print(f"  [dim]({err['type']})[/dim]")

        suggestion = get_suggestion_for_error(err)
        if suggestion:
            console.print(f"  [green]💡 {suggestion}[/green]")

        console.print()

    if verbose:
        console.print("[dim]Full error:[/dim]")
        console.print(str(error))


def _handle_loader_error(error: LoaderError) -> None:
    console.print(
        Panel(
            f"[red]{error}[/red]\n\nCheck the file path and its YAML syntax.",
            title="Load Error",
            border_style="red",
        )
    )


def _handle_build_error(error: TypeGenError, verbose: bool) -> None:
    """Print a build error with the location it carries."""
    body = f"[red]{error.message}[/red]"
    if error.location:
        body += f"\n\n[dim]at {error.location}[/dim]"
    if error.attribute:
        body += f"\n[dim]attribute: {error.attribute}[/dim]"
    console.print(Panel(body, title=type(error).__name__, border_style="red"))

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc())


def _handle_permission_error(error: PermissionError) -> None:
    filename = error.filename or "unknown"
    console.print(
        Panel(
            f"[red]Permission denied: {filename}[/red]\n\nCheck file permissions and try again.",
            title="Error",
            border_style="red",
        )
    )


def _handle_generic_error(error: Exception, verbose: bool) -> None:
    console.print(
        Panel(
            f"[red]An unexpected error occurred:[/red]\n{error}",
            title="Error",
            border_style="red",
        )
    )

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc())
    else:
        console.print("\n[dim]Use --verbose for full traceback[/dim]")
