"""Converters for writing a populated registry as TypeScript files.

This package provides the final stage of the pipeline: rendering the
registry into one ``.ts`` (or ``.d.ts``) file, or one file per module.

Primary Classes:
    TypeScriptWriter: Main class for writing TypeScript files

Example:
-------
    >>> from yaml_to_ts.converters import TypeScriptWriter
    >>> from yaml_to_ts.transform import SchemaToIRTransformer
    >>>
    >>> # Assuming schema is a loaded TypeSchema
    >>> registry = SchemaToIRTransformer().transform(schema)
    >>>
    >>> writer = TypeScriptWriter(schema.output)
    >>> writer.write(registry, Path("types.ts"))
    >>>
    >>> # One file per module, only touching changed files
    >>> writer.write_multi_file_if_changed(registry, Path("generated"))

Export Styles:
    - "none": Plain declarations
    - "named": ``export type X = ...`` (default)
    - "grouped": Plain declarations followed by ``export { X, Y };``
"""

from yaml_to_ts.converters.ts_writer import (
    PRETTIFY_TYPE,
    PRETTIFY_TYPE_EXPORTED,
    TypeScriptWriter,
    convert_yaml_to_ts,
)

__all__ = [
    "PRETTIFY_TYPE",
    "PRETTIFY_TYPE_EXPORTED",
    "TypeScriptWriter",
    "convert_yaml_to_ts",
]
