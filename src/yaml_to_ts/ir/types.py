"""IR models for TypeScript type definitions.

The IR describes declared types independently of TypeScript syntax. All
nodes are frozen dataclasses compared structurally, so two builds of the
same declared type produce equal (and equally hashed) IR.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum


class PrimitiveKind(Enum):
    """Leaf types of the IR.

    Values are the TypeScript keywords they render as.
    """

    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    NULL = "null"
    VOID = "void"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Primitive:
    """A primitive TypeScript type."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class Reference:
    """A reference to a named type.

    Attributes
    ----------
        name: Rendered name of the referenced type.
        args: Generic arguments applied to the referenced type.
        namespace: Namespace path segments of the referenced type.
        param: True when this is a use of a generic parameter of the
            enclosing declaration. Parameter uses render bare and are
            never dependencies.

    """

    name: str
    args: tuple[TypeDef, ...] = ()
    namespace: tuple[str, ...] = ()
    param: bool = False

    @property
    def qualified_name(self) -> str:
        """Registry key of the referenced type."""
        return ".".join((*self.namespace, self.name))


@dataclass(frozen=True)
class Field:
    """A named member of a record.

    Attributes
    ----------
        name: Rendered field name.
        type: Field type.
        optional: Whether the field may be absent (``name?: T``).
        inline: Whether the type was inlined instead of referenced.

    """

    name: str
    type: TypeDef
    optional: bool = False
    inline: bool = False


@dataclass(frozen=True)
class Record:
    """An object type with ordered fields."""

    fields: tuple[Field, ...] = ()

    @property
    def field_names(self) -> tuple[str, ...]:
        """Names of all fields, in order."""
        return tuple(f.name for f in self.fields)


@dataclass(frozen=True)
class Array:
    """A homogeneous sequence (``T[]``)."""

    element: TypeDef


@dataclass(frozen=True)
class Tuple:
    """A fixed arity sequence (``[A, B]``)."""

    elements: tuple[TypeDef, ...]


@dataclass(frozen=True)
class Map:
    """An associative map (``Record<K, V>``)."""

    key: TypeDef
    value: TypeDef


@dataclass(frozen=True)
class Literal:
    """A literal type, used for tag discriminants and unit variants.

    ``kind`` is derived from the value so that ``Literal(True)`` and
    ``Literal(1)`` stay distinct.
    """

    value: str | int | float | bool
    kind: str = field(init=False)

    def __post_init__(self) -> None:
        """Record the Python type of the value."""
        object.__setattr__(self, "kind", type(self.value).__name__)


@dataclass(frozen=True)
class Union:
    """A union of variants, in declaration order."""

    variants: tuple[TypeDef, ...]


@dataclass(frozen=True)
class Intersection:
    """An intersection of members, in declaration order."""

    members: tuple[TypeDef, ...]


@dataclass(frozen=True)
class TemplateLiteral:
    """A template literal type (`` `user-${number}` ``).

    ``parts`` are the literal string segments surrounding the
    interpolated ``types``; there is always one more part than types.
    """

    parts: tuple[str, ...]
    types: tuple[TypeDef, ...]

    def __post_init__(self) -> None:
        """Check the parts/types arity."""
        if len(self.parts) != len(self.types) + 1:
            raise ValueError(
                f"TemplateLiteral needs {len(self.types) + 1} parts "
                f"for {len(self.types)} types, got {len(self.parts)}"
            )


@dataclass(frozen=True)
class IndexedAccess:
    """A member type looked up by key (``Base["key"]``)."""

    base: Reference
    key: Literal


@dataclass(frozen=True)
class Raw:
    """A verbatim TypeScript type supplied by a type override."""

    text: str


@dataclass(frozen=True)
class GenericParam:
    """A generic parameter in a declaration head (``T extends C = D``)."""

    name: str
    constraint: TypeDef | None = None
    default: TypeDef | None = None


TypeDef = (
    Primitive
    | Reference
    | Record
    | Array
    | Tuple
    | Map
    | Literal
    | Union
    | Intersection
    | TemplateLiteral
    | IndexedAccess
    | Raw
)

STRING = Primitive(PrimitiveKind.STRING)
NUMBER = Primitive(PrimitiveKind.NUMBER)
BIGINT = Primitive(PrimitiveKind.BIGINT)
BOOLEAN = Primitive(PrimitiveKind.BOOLEAN)
NULL = Primitive(PrimitiveKind.NULL)
VOID = Primitive(PrimitiveKind.VOID)
UNKNOWN = Primitive(PrimitiveKind.UNKNOWN)


def children(td: TypeDef) -> tuple[TypeDef, ...]:
    """Return the direct child nodes of a TypeDef."""
    if isinstance(td, Reference):
        return td.args
    if isinstance(td, Record):
        return tuple(f.type for f in td.fields)
    if isinstance(td, Array):
        return (td.element,)
    if isinstance(td, Tuple):
        return td.elements
    if isinstance(td, Map):
        return (td.key, td.value)
    if isinstance(td, Union):
        return td.variants
    if isinstance(td, Intersection):
        return td.members
    if isinstance(td, TemplateLiteral):
        return td.types
    if isinstance(td, IndexedAccess):
        return (td.base, td.key)
    return ()


def walk(td: TypeDef) -> Iterator[TypeDef]:
    """Yield every node of a TypeDef tree, depth first."""
    stack = [td]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(children(node)))


def references(td: TypeDef) -> list[Reference]:
    """Collect the named-type references of a TypeDef.

    This is one level of the dependency graph: references are leaves,
    so other named types are never entered. Generic parameter uses are
    skipped.

    Args:
    ----
        td: The TypeDef to scan.

    Returns:
    -------
        References in encounter order (duplicates included).

    """
    return [node for node in walk(td) if isinstance(node, Reference) and not node.param]


def substitute(td: TypeDef, mapping: Mapping[str, TypeDef]) -> TypeDef:
    """Replace generic parameter uses with concrete types.

    Args:
    ----
        td: The TypeDef containing parameter references.
        mapping: Parameter name to replacement type.

    Returns:
    -------
        A new TypeDef; ``td`` itself is unchanged.

    """
    if not mapping:
        return td
    if isinstance(td, Reference):
        if td.param and td.name in mapping:
            return mapping[td.name]
        return Reference(
            td.name,
            tuple(substitute(a, mapping) for a in td.args),
            td.namespace,
            td.param,
        )
    if isinstance(td, Record):
        return Record(
            tuple(
                Field(f.name, substitute(f.type, mapping), f.optional, f.inline)
                for f in td.fields
            )
        )
    if isinstance(td, Array):
        return Array(substitute(td.element, mapping))
    if isinstance(td, Tuple):
        return Tuple(tuple(substitute(e, mapping) for e in td.elements))
    if isinstance(td, Map):
        return Map(substitute(td.key, mapping), substitute(td.value, mapping))
    if isinstance(td, Union):
        return Union(tuple(substitute(v, mapping) for v in td.variants))
    if isinstance(td, Intersection):
        return Intersection(tuple(substitute(m, mapping) for m in td.members))
    if isinstance(td, TemplateLiteral):
        return TemplateLiteral(td.parts, tuple(substitute(t, mapping) for t in td.types))
    return td


def nullable(td: TypeDef) -> Union:
    """Return ``td | null``."""
    return Union((td, NULL))
