"""Command-line interface for the yaml-to-ts generator."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from yaml_to_ts import __version__
from yaml_to_ts.cli.exception_handler import handle_exceptions
from yaml_to_ts.log import setup_logging
from yaml_to_ts.models import (
    ExportStyle,
    LoaderError,
    TypeSchema,
    load_type_schema,
    validate_type_schema,
)

if TYPE_CHECKING:
    from yaml_to_ts.converters.ts_writer import TypeScriptWriter
    from yaml_to_ts.ir.registry import TypeRegistry

# Create Typer app
app = typer.Typer(
    name="yaml-to-ts",
    help="Generate TypeScript declarations from YAML type declarations.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"yaml-to-ts version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            "-l",
            help="Logging level (DEBUG, INFO, WARNING, ERROR). "
            "Defaults to $YAML_TO_TS_LOG_LEVEL, then WARNING.",
        ),
    ] = None,
) -> None:
    """Generate TypeScript declarations from YAML/JSON type declarations.

    Declared records and tagged variants (with generics, namespaces and
    serialization attributes) are validated, registered in dependency
    order and rendered as TypeScript type aliases.
    """
    try:
        setup_logging(log_level)
    except ValueError as e:
        error_console.print(f"\n✗ {e}\n")
        raise typer.Exit(code=1) from None


def _print_schema_errors(input_file: Path, errors: list[str]) -> None:
    """Print load/schema errors as a table."""
    error_console.print(f"\n[bold red]✗ Validation failed for {input_file.name}[/bold red]\n")

    table = Table(title="Validation Errors", show_header=True)
    table.add_column("#", style="dim", width=4)
    table.add_column("Location", style="cyan")
    table.add_column("Error", style="red")

    for i, error in enumerate(errors, 1):
        loc, msg = error.split(": ", 1) if ": " in error else ("", error)
        table.add_row(str(i), loc, msg)

    console.print(table)


@app.command()
def validate(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Input YAML/JSON file to validate.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only output errors, no success messages.",
        ),
    ] = False,
    show_summary: Annotated[
        bool,
        typer.Option(
            "--summary",
            "-s",
            help="Show summary of declared types.",
        ),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format for validation results: text, table, tree.",
        ),
    ] = "text",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Show verbose output including source context.",
        ),
    ] = False,
) -> None:
    """Validate a YAML/JSON declaration file.

    Checks the file against the yaml-to-ts/v1 schema, then runs the
    semantic checks (references, duplicates, attribute conflicts) and a
    trial build.

    Examples
    --------
        yaml-to-ts validate types.yaml
        yaml-to-ts validate types.yaml --summary
        yaml-to-ts validate types.yaml --format table

    """
    from yaml_to_ts.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
    from yaml_to_ts.validation.validator import TypeSchemaValidator

    if output_format not in ("text", "table", "tree"):
        error_console.print(
            f"\n✗ Invalid format: {output_format}\nSupported: text, table, tree\n"
        )
        raise typer.Exit(code=1)

    errors = validate_type_schema(input_file)
    if errors:
        _print_schema_errors(input_file, errors)
        raise typer.Exit(code=1)

    try:
        schema = load_type_schema(input_file)
    except LoaderError as e:
        error_console.print(f"\n✗ Failed to load {input_file.name}")
        error_console.print(str(e), markup=False)
        raise typer.Exit(code=1) from None

    result = TypeSchemaValidator().validate(schema)

    if not result.is_valid or result.warnings:
        source_content = input_file.read_text(encoding="utf-8") if verbose else None

        if output_format == "table":
            ErrorTable(error_console).print_result(result)
        elif output_format == "tree":
            ErrorTree(error_console).print_result(result)
        else:
            ErrorFormatter(error_console, show_context=verbose).format_validation_result(
                result, input_file, source_content
            )

        if not result.is_valid:
            raise typer.Exit(code=1)

    if not quiet:
        if result.warnings:
            console.print(
                f"\n[bold yellow]⚠ {input_file.name} is valid with warnings[/bold yellow]\n"
            )
        else:
            console.print(f"\n[bold green]✓ {input_file.name} is valid[/bold green]\n")

        if show_summary:
            _print_summary(schema)


def _print_summary(schema: TypeSchema) -> None:
    """Print a summary of the declaration file."""
    table = Table(title="Document Summary", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Schema", schema.schema_version)
    if schema.meta is not None:
        if schema.meta.author:
            table.add_row("Author", schema.meta.author)
        if schema.meta.version:
            table.add_row("Version", schema.meta.version)
        if schema.meta.description:
            description = schema.meta.description
            if len(description) > 60:
                description = description[:60] + "..."
            table.add_row("Description", description)

    table.add_row("", "")
    table.add_row("Types", str(len(schema.types)))
    counts: dict[str, int] = {}
    for declaration in schema.types:
        counts[declaration.kind.value] = counts.get(declaration.kind.value, 0) + 1
    for kind, count in sorted(counts.items()):
        table.add_row(f"  {kind}", str(count))

    generic = sum(1 for declaration in schema.types if declaration.generics)
    if generic:
        table.add_row("Generic types", str(generic))
    modules = {declaration.module for declaration in schema.types if declaration.module}
    if modules:
        table.add_row("Modules", ", ".join(sorted(modules)))

    table.add_row("", "")
    table.add_row("Export style", schema.output.export_style.value)
    table.add_row("Output", schema.output.multi_file or schema.output.path or "-")

    console.print(table)


def _resolve_output(input_file: Path, configured: str | None) -> Path | None:
    """Resolve a configured output path relative to the declaration file."""
    if not configured:
        return None
    path = Path(configured)
    return path if path.is_absolute() else input_file.parent / path


@app.command()
def generate(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Input YAML/JSON declaration file.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file. Defaults to output.path, then the input name with .ts.",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    export_style: Annotated[
        ExportStyle | None,
        typer.Option(
            "--export-style",
            "-e",
            help="Override output.export_style.",
        ),
    ] = None,
    header: Annotated[
        str | None,
        typer.Option(
            "--header",
            help="Override the file header comment ('' for none).",
        ),
    ] = None,
    multi_file: Annotated[
        Path | None,
        typer.Option(
            "--multi-file",
            "-m",
            help="Write one file per module below this directory.",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite output file if it exists.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Print the generated code instead of writing it.",
        ),
    ] = False,
    if_changed: Annotated[
        bool,
        typer.Option(
            "--if-changed",
            help="Only write files whose content changed.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show detailed generation progress.",
        ),
    ] = False,
) -> None:
    """Generate TypeScript declarations from a declaration file.

    Validates the input, registers every declared type and writes the
    rendered declarations in dependency order.

    Examples
    --------
        yaml-to-ts generate types.yaml
        yaml-to-ts generate types.yaml -o src/types.ts --force
        yaml-to-ts generate types.yaml --multi-file src/generated
        yaml-to-ts generate types.yaml --dry-run --export-style grouped

    """
    from rich.progress import Progress, SpinnerColumn, TextColumn

    from yaml_to_ts.cli.error_formatter import ErrorFormatter
    from yaml_to_ts.converters import TypeScriptWriter
    from yaml_to_ts.errors import TypeGenError
    from yaml_to_ts.transform.transformer import SchemaToIRTransformer
    from yaml_to_ts.validation.validator import TypeSchemaValidator

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=not verbose,
        ) as progress:
            # Step 1: Validate
            task = progress.add_task("Validating...", total=None)
            errors = validate_type_schema(input_file)
            if errors:
                progress.stop()
                _print_schema_errors(input_file, errors)
                raise typer.Exit(code=1)
            schema = load_type_schema(input_file)
            result = TypeSchemaValidator(build=False).validate(schema)
            if not result.is_valid:
                progress.stop()
                ErrorFormatter(error_console, show_context=False).format_validation_result(
                    result, input_file
                )
                raise typer.Exit(code=1)
            progress.update(task, description="[green]✓ Validated[/green]")

            # Step 2: Register
            task = progress.add_task("Registering types...", total=None)
            registry = SchemaToIRTransformer().transform(schema)
            progress.update(task, description="[green]✓ Registered[/green]")

            if verbose:
                console.print(f"  [dim]Declarations: {len(schema.types)}[/dim]")
                console.print(f"  [dim]Registered types: {len(registry)}[/dim]")

            # Step 3: Render and write
            update: dict[str, object] = {}
            if export_style is not None:
                update["export_style"] = export_style
            if header is not None:
                update["header"] = header
            config = schema.output.model_copy(update=update)
            writer = TypeScriptWriter(config)

            out_dir = multi_file or _resolve_output(input_file, config.multi_file)
            if out_dir is not None:
                _write_modules(writer, registry, out_dir, dry_run, if_changed)
                return

            target = (
                output
                or _resolve_output(input_file, config.path)
                or input_file.with_suffix(config.extension)
            )

            if dry_run:
                content = writer.generate(registry)
                progress.stop()
                console.print(content, markup=False, highlight=False, soft_wrap=True, end="")
                return

            if if_changed:
                written = writer.write_if_changed(registry, target)
                state = "Wrote" if written else "Unchanged"
                console.print(f"\n[bold green]✓ {state} {target}[/bold green]\n")
                return

            if target.exists() and not force:
                progress.stop()
                error_console.print(
                    f"\n✗ Output file already exists: {target}\nUse --force to overwrite."
                )
                raise typer.Exit(code=1)

            task = progress.add_task(f"Writing {target.name}...", total=None)
            writer.write(registry, target)
            progress.update(task, description="[green]✓ Written[/green]")
            console.print(
                f"\n[bold green]✓ Wrote {len(registry)} type(s) to {target}[/bold green]\n"
            )

    except (LoaderError, TypeGenError) as e:
        error_console.print(f"\n✗ Generation failed: {e}\n", markup=False)
        if verbose:
            import traceback

            error_console.print(traceback.format_exc())
        raise typer.Exit(code=1) from None


def _write_modules(
    writer: TypeScriptWriter,
    registry: TypeRegistry,
    out_dir: Path,
    dry_run: bool,
    if_changed: bool,
) -> None:
    """Write (or list) one file per module."""
    if dry_run:
        for path, content in writer.generate_multi_file(registry, out_dir).items():
            console.print(f"\n[bold]{path}[/bold]")
            console.print(content, markup=False, highlight=False, soft_wrap=True, end="")
        return

    total = len(writer.types_by_module(registry))
    if if_changed:
        count = writer.write_multi_file_if_changed(registry, out_dir)
    else:
        count = writer.write_multi_file(registry, out_dir)
    console.print(
        f"\n[bold green]✓ Wrote {count} of {total} file(s) to {out_dir}[/bold green]\n"
    )


@app.command()
def info(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Input YAML/JSON declaration file to inspect.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
) -> None:
    """Display the declared types and their dependency graph.

    Examples
    --------
        yaml-to-ts info types.yaml

    """
    _info(input_file)


@handle_exceptions()
def _info(input_file: Path) -> None:
    from yaml_to_ts.transform.transformer import SchemaToIRTransformer

    schema = load_type_schema(input_file)
    registry = SchemaToIRTransformer().transform(schema)

    console.print(
        Panel.fit(
            f"[bold]Type Declarations[/bold]\nFile: {input_file}",
            title="File Info",
        )
    )
    _print_summary(schema)
    _print_graph(registry)


def _print_graph(registry: TypeRegistry) -> None:
    """Print every registered type with its dependencies, in emission order."""
    table = Table(title="Dependency Graph")
    table.add_column("#", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Module")
    table.add_column("Depends on")

    for index, (name, dependencies) in enumerate(registry.graph(), 1):
        entry = registry.get(name)
        module = entry.module if entry is not None and entry.module else "-"
        table.add_row(
            str(index),
            name,
            module,
            ", ".join(sorted(dependencies)) or "-",
        )

    console.print(table)


if __name__ == "__main__":
    app()
