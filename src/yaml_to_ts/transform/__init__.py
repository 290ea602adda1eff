"""Declaration to IR (Intermediate Representation) transformation module.

This module turns validated Pydantic declarations (from YAML/JSON) into
IR entries in a :class:`~yaml_to_ts.ir.TypeRegistry`.

The transformation process:
    1. Parse host type expressions and map primitives and containers
    2. Resolve container and field attributes (renames, flatten, inline,
       patterns, indexed access, extends, generics)
    3. Resolve enum variants under their tagging strategy
    4. Register each declared type, and transitively its dependencies

Primary Classes:
    SchemaToIRTransformer: Document-level driver
    DeclaredType: Capability implemented by every declared type
    SchemaType: DeclaredType backed by a TypeDeclaration

Example:
-------
    >>> from yaml_to_ts.models import load_type_schema
    >>> from yaml_to_ts.transform import SchemaToIRTransformer
    >>>
    >>> schema = load_type_schema(Path("api.yaml"))
    >>> registry = SchemaToIRTransformer().transform(schema)
    >>> print(registry.render())
"""

from yaml_to_ts.transform.builder import DeclaredType, SchemaType
from yaml_to_ts.transform.case import RenameRule, convert_case, split_words
from yaml_to_ts.transform.enum_repr import (
    DEFAULT_STRATEGY,
    ResolvedVariant,
    TaggingStrategy,
    VariantShape,
    resolve_enum,
)
from yaml_to_ts.transform.transformer import SchemaToIRTransformer
from yaml_to_ts.transform.type_mapper import (
    CONTAINER_ARITY,
    PRIMITIVE_TYPES,
    map_host_type,
    map_type_expression,
    result_type,
)
from yaml_to_ts.transform.type_parser import HostType, parse_type_expression

__all__ = [
    "SchemaToIRTransformer",
    "DeclaredType",
    "SchemaType",
    "RenameRule",
    "convert_case",
    "split_words",
    "DEFAULT_STRATEGY",
    "ResolvedVariant",
    "TaggingStrategy",
    "VariantShape",
    "resolve_enum",
    "CONTAINER_ARITY",
    "PRIMITIVE_TYPES",
    "map_host_type",
    "map_type_expression",
    "result_type",
    "HostType",
    "parse_type_expression",
]
