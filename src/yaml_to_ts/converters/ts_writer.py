"""Write TypeScript declaration files from a populated registry.

Usage:
    writer = TypeScriptWriter(OutputConfig(path="generated/types.ts"))
    writer.write(registry)

Or one file per module:
    writer.write_multi_file(registry, Path("generated"))
"""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path

from yaml_to_ts.ir.registry import TypeRegistry
from yaml_to_ts.models.output import ExportStyle, OutputConfig

logger = logging.getLogger(__name__)

PRETTIFY_TYPE = "type Prettify<T> = { [K in keyof T]: T[K] } & {};"
PRETTIFY_TYPE_EXPORTED = f"export {PRETTIFY_TYPE}"

# Module key for types without a module, written to types.ts
DEFAULT_MODULE = "default"


class TypeScriptWriter:
    """Render a registry into TypeScript source files.

    Attributes
    ----------
        config: Output configuration (export style, header, utilities).

    """

    def __init__(self, config: OutputConfig | None = None) -> None:
        """Initialize the writer.

        Args:
        ----
            config: Output configuration. Defaults to ``OutputConfig()``.

        """
        self.config = config or OutputConfig()

    # ------------------------------------------------------------------
    # Single file
    # ------------------------------------------------------------------

    def generate(self, registry: TypeRegistry) -> str:
        """Generate the content of a single file holding every entry.

        Raises
        ------
            UnresolvedReferenceError: If an extends or indexed-access
                target is not registered.

        """
        return (
            self._header()
            + self._utilities()
            + self._body(registry, registry.sorted_types())
        )

    def write(self, registry: TypeRegistry, path: Path | None = None) -> Path:
        """Write the generated file, creating parent directories.

        Args:
        ----
            registry: Populated registry.
            path: Output file; defaults to ``config.path``.

        Returns:
        -------
            The path written.

        Raises:
        ------
            ValueError: If no output path is given or configured.

        """
        output_path = self._output_path(path)
        content = self.generate(registry)
        self._write_file(output_path, content)
        return output_path

    def write_if_changed(self, registry: TypeRegistry, path: Path | None = None) -> bool:
        """Write the generated file only if its content differs.

        Returns
        -------
            True if the file was written, False if it was up to date.

        """
        output_path = self._output_path(path)
        return self._write_if_changed(output_path, self.generate(registry))

    # ------------------------------------------------------------------
    # Multiple files
    # ------------------------------------------------------------------

    def types_by_module(self, registry: TypeRegistry) -> dict[str, list[str]]:
        """Group qualified names by module, in first-registration order.

        Types without a module are grouped under ``"default"``.
        """
        result: dict[str, list[str]] = {}
        for entry in registry:
            result.setdefault(entry.module or DEFAULT_MODULE, []).append(entry.qualified_name)
        return result

    def module_to_path(self, module: str) -> Path:
        """Convert a dotted module key to a relative file path.

        Examples
        --------
            ``models.user`` -> ``models/user.ts``; ``default`` -> ``types.ts``

        """
        if module == DEFAULT_MODULE:
            return Path("types" + self.config.extension)
        parts = [p for p in module.split(".") if p]
        return Path(*parts[:-1], parts[-1] + self.config.extension)

    def generate_for_module(self, registry: TypeRegistry, module: str, names: list[str]) -> str:
        """Generate the file content for one module.

        Types referenced from other modules are brought in with
        ``import type`` statements.

        Args:
        ----
            registry: Populated registry.
            module: Module key.
            names: Qualified names belonging to the module.

        Returns:
        -------
            File content.

        """
        members = set(names)
        ordered = [name for name in registry.sorted_types() if name in members]

        return (
            self._header(module)
            + self._imports(registry, module, ordered)
            + self._utilities()
            + self._body(registry, ordered)
        )

    def generate_multi_file(self, registry: TypeRegistry, output_dir: Path) -> dict[Path, str]:
        """Render every module file without writing anything.

        Returns
        -------
            Content per output path, in module order.

        Raises
        ------
            UnresolvedReferenceError: If an extends or indexed-access
                target is not registered.

        """
        return {
            output_dir / self.module_to_path(module): self.generate_for_module(
                registry, module, names
            )
            for module, names in self.types_by_module(registry).items()
        }

    def write_multi_file(self, registry: TypeRegistry, output_dir: Path) -> int:
        """Write one file per module below ``output_dir``.

        All files are rendered first, so a render failure writes nothing.

        Returns
        -------
            Number of files written.

        """
        files = self.generate_multi_file(registry, output_dir)
        for path, content in files.items():
            self._write_file(path, content)
        return len(files)

    def write_multi_file_if_changed(self, registry: TypeRegistry, output_dir: Path) -> int:
        """Write per-module files whose content changed.

        Returns
        -------
            Number of files actually written.

        """
        files = self.generate_multi_file(registry, output_dir)
        return sum(self._write_if_changed(path, content) for path, content in files.items())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _header(self, module: str | None = None) -> str:
        lines = [
            line if line.startswith("//") else f"// {line}"
            for line in self.config.header.splitlines()
            if line.strip()
        ]
        if module is not None:
            lines.append(f"// Module: {module}")
        if not lines:
            return ""
        return "\n".join(lines) + "\n\n"

    def _utilities(self) -> str:
        if not self.config.include_utilities:
            return ""
        if self.config.export_style == ExportStyle.NONE:
            return PRETTIFY_TYPE + "\n\n"
        return PRETTIFY_TYPE_EXPORTED + "\n\n"

    def _body(self, registry: TypeRegistry, names: list[str]) -> str:
        style = self.config.export_style
        if style == ExportStyle.GROUPED:
            body = registry.render_entries(names, export=False)
            exported = _top_level_names(registry, names)
            if exported:
                body += f"\nexport {{ {', '.join(exported)} }};\n"
            return body
        return registry.render_entries(names, export=style == ExportStyle.NAMED)

    def _imports(self, registry: TypeRegistry, module: str, names: list[str]) -> str:
        members = set(names)
        needed: dict[str, list[str]] = {}
        for name in names:
            entry = registry.get(name)
            if entry is None:
                continue
            for dep in sorted(entry.dependencies):
                target = registry.get(dep)
                if dep in members or target is None:
                    continue
                symbol = target.namespace[0] if target.namespace else target.name
                symbols = needed.setdefault(target.module or DEFAULT_MODULE, [])
                if symbol not in symbols:
                    symbols.append(symbol)

        if not needed:
            return ""
        lines = []
        for other, symbols in sorted(needed.items()):
            path = self._import_path(module, other)
            joined = ", ".join(sorted(symbols))
            lines.append(f'import type {{ {joined} }} from "{path}";')
        return "\n".join(lines) + "\n\n"

    def _import_path(self, from_module: str, to_module: str) -> str:
        source = self.module_to_path(from_module).as_posix()
        target = self.module_to_path(to_module).as_posix()
        target = target.removesuffix(self.config.extension)
        relative = posixpath.relpath(target, posixpath.dirname(source) or ".")
        if not relative.startswith("."):
            relative = f"./{relative}"
        if self.config.esm_extensions:
            relative += ".js"
        return relative

    def _output_path(self, path: Path | None) -> Path:
        if path is not None:
            return path
        if self.config.path:
            return Path(self.config.path)
        raise ValueError("No output path configured")

    def _write_file(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s", path)

    def _write_if_changed(self, path: Path, content: str) -> bool:
        if path.exists() and path.read_text(encoding="utf-8") == content:
            logger.debug("Unchanged %s", path)
            return False
        self._write_file(path, content)
        return True


def _top_level_names(registry: TypeRegistry, names: list[str]) -> list[str]:
    """Names visible at file level: namespaced entries export their root."""
    result: list[str] = []
    for name in names:
        entry = registry.get(name)
        if entry is None:
            continue
        symbol = entry.namespace[0] if entry.namespace else entry.name
        if symbol not in result:
            result.append(symbol)
    return result


def convert_yaml_to_ts(yaml_path: Path, output_path: Path | None = None) -> Path:
    """High-level function to convert a declaration file to TypeScript.

    This is a convenience function that handles the full pipeline:
    1. Load and validate the declaration file
    2. Register every declared type
    3. Write the TypeScript file

    Args:
    ----
        yaml_path: Input YAML/JSON declaration file.
        output_path: Output file; defaults to the file's ``output.path``,
            then to the input path with a ``.ts`` suffix.

    Returns:
    -------
        The path written.

    Raises:
    ------
        LoaderError: If the file cannot be loaded.
        pydantic.ValidationError: If the file content is invalid.
        TypeGenError: If a declaration cannot be built.

    """
    from yaml_to_ts.models.loader import load_type_schema
    from yaml_to_ts.transform.transformer import SchemaToIRTransformer

    schema = load_type_schema(yaml_path)
    registry = SchemaToIRTransformer().transform(schema)

    writer = TypeScriptWriter(schema.output)
    if output_path is None and not schema.output.path:
        output_path = yaml_path.with_suffix(schema.output.extension)
    return writer.write(registry, output_path)
