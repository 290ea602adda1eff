"""Pydantic models for yaml-to-ts declaration files.

These models are used for:

- Parsing and validating YAML/JSON declaration files
- Type-safe access to declared types and their attributes
- Constructing declarations programmatically

Primary Entry Points:
    load_type_schema(path): Load and validate a YAML/JSON file
    validate_type_schema(path): Validate and return list of errors
    TypeSchema: Root model for the entire document

Example:
-------
    >>> from yaml_to_ts.models import load_type_schema
    >>> schema = load_type_schema(Path("api.yaml"))
    >>> print(schema.type_names)

Model Hierarchy:
    TypeSchema (root)
    ├── Meta - document metadata (optional)
    ├── OutputConfig - output file settings (optional)
    └── TypeDeclaration[] - declared types (ContainerConfig)
        ├── FieldDeclaration[] - struct fields (FieldConfig)
        ├── items - tuple item types
        └── VariantDeclaration[] - enum variants
"""

from yaml_to_ts.models.attributes import (
    ContainerConfig,
    FieldConfig,
    GenericParamDeclaration,
    Representation,
)
from yaml_to_ts.models.common import Identifier, Namespace, parse_namespace
from yaml_to_ts.models.declarations import (
    FieldDeclaration,
    TypeDeclaration,
    TypeKind,
    VariantDeclaration,
)
from yaml_to_ts.models.loader import (
    LoaderError,
    load_type_schema,
    load_yaml_file,
    validate_type_schema,
)
from yaml_to_ts.models.meta import Meta
from yaml_to_ts.models.output import DEFAULT_HEADER, ExportStyle, OutputConfig
from yaml_to_ts.models.root import TypeSchema

__all__ = [
    # Common types
    "Identifier",
    "Namespace",
    "parse_namespace",
    # Attributes
    "ContainerConfig",
    "FieldConfig",
    "GenericParamDeclaration",
    "Representation",
    # Declarations
    "FieldDeclaration",
    "TypeDeclaration",
    "TypeKind",
    "VariantDeclaration",
    # Document
    "Meta",
    "OutputConfig",
    "ExportStyle",
    "DEFAULT_HEADER",
    "TypeSchema",
    # Loader utilities
    "LoaderError",
    "load_type_schema",
    "load_yaml_file",
    "validate_type_schema",
]
