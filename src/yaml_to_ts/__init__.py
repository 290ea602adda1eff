"""yaml-to-ts: Generator of TypeScript declarations from YAML type declarations.

This package provides tools for:
- Loading and validating YAML/JSON declaration files
- Registering declared records and tagged variants in a type registry
- Rendering the registry as TypeScript type aliases in dependency order

Quick Start:
    >>> from yaml_to_ts.models import load_type_schema
    >>> from yaml_to_ts.transform import SchemaToIRTransformer
    >>> from yaml_to_ts.converters import TypeScriptWriter
    >>>
    >>> schema = load_type_schema(Path("api.yaml"))
    >>> registry = SchemaToIRTransformer().transform(schema)
    >>> TypeScriptWriter(schema.output).write(registry, Path("api.ts"))

Modules:
    models: Pydantic models for the declaration file
    ir: Type IR and the type registry
    transform: Attribute resolution and declaration to IR building
    render: IR to TypeScript text
    converters: Registry to TypeScript files
    validation: Semantic validation beyond schema
    cli: Command-line interface
"""

__version__ = "0.1.0"
