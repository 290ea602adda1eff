"""Intermediate Representation (IR) of TypeScript type declarations.

The IR sits between the pydantic declaration models and the rendered
TypeScript text:

1. Models host types independently of concrete syntax
2. Uses frozen dataclasses, so equal builds compare and hash equal
3. References other named types by name instead of embedding them,
   which keeps self- and mutually-recursive graphs finite
"""

from yaml_to_ts.ir.registry import NamedEntry, TypeRegistry
from yaml_to_ts.ir.types import (
    BIGINT,
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    UNKNOWN,
    VOID,
    Array,
    Field,
    GenericParam,
    IndexedAccess,
    Intersection,
    Literal,
    Map,
    Primitive,
    PrimitiveKind,
    Raw,
    Record,
    Reference,
    TemplateLiteral,
    Tuple,
    TypeDef,
    Union,
    nullable,
    references,
    substitute,
)

__all__ = [
    # Types
    "TypeDef",
    "Primitive",
    "PrimitiveKind",
    "Reference",
    "Field",
    "Record",
    "Array",
    "Tuple",
    "Map",
    "Literal",
    "Union",
    "Intersection",
    "TemplateLiteral",
    "IndexedAccess",
    "Raw",
    "GenericParam",
    # Constants
    "STRING",
    "NUMBER",
    "BIGINT",
    "BOOLEAN",
    "NULL",
    "VOID",
    "UNKNOWN",
    # Helpers
    "nullable",
    "references",
    "substitute",
    # Registry
    "NamedEntry",
    "TypeRegistry",
]
