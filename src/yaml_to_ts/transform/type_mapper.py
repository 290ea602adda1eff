"""Map host type expressions to IR type definitions."""

from __future__ import annotations

from collections.abc import Callable

from yaml_to_ts.errors import UnsupportedTypeError
from yaml_to_ts.ir.types import (
    BIGINT,
    BOOLEAN,
    NUMBER,
    STRING,
    UNKNOWN,
    VOID,
    Array,
    Field,
    Literal,
    Map,
    Primitive,
    Record,
    Tuple,
    TypeDef,
    Union,
    nullable,
)
from yaml_to_ts.transform.type_parser import HostType, parse_type_expression

# Resolves a non-builtin name (declared type or generic parameter) with its
# already mapped arguments. Returns None for unknown names.
NameResolver = Callable[[str, tuple[TypeDef, ...]], "TypeDef | None"]

# Scalar host types and the IR primitive they map to
PRIMITIVE_TYPES: dict[str, Primitive] = {
    "string": STRING,
    "str": STRING,
    "char": STRING,
    "i8": NUMBER,
    "i16": NUMBER,
    "i32": NUMBER,
    "i64": NUMBER,
    "isize": NUMBER,
    "u8": NUMBER,
    "u16": NUMBER,
    "u32": NUMBER,
    "u64": NUMBER,
    "usize": NUMBER,
    "f32": NUMBER,
    "f64": NUMBER,
    "i128": BIGINT,
    "u128": BIGINT,
    "bool": BOOLEAN,
    "unit": VOID,
    "unknown": UNKNOWN,
    "any": UNKNOWN,
}

# Built-in containers and their number of type arguments (None: variadic)
CONTAINER_ARITY: dict[str, int | None] = {
    "optional": 1,
    "list": 1,
    "set": 1,
    "map": 2,
    "result": 2,
    "tuple": None,
}


def result_type(ok: TypeDef, error: TypeDef) -> Union:
    """Two-arm success/failure union.

    Renders as ``{ ok: true; value: T } | { ok: false; error: E }``.
    """
    return Union(
        (
            Record((Field("ok", Literal(True)), Field("value", ok))),
            Record((Field("ok", Literal(False)), Field("error", error))),
        )
    )


def _map_container(name: str, args: tuple[TypeDef, ...]) -> TypeDef:
    if name == "optional":
        return nullable(args[0])
    if name in ("list", "set"):
        return Array(args[0])
    if name == "map":
        return Map(args[0], args[1])
    if name == "result":
        return result_type(args[0], args[1])
    return Tuple(args)


def map_host_type(
    host: HostType,
    resolve: NameResolver | None = None,
    *,
    type_name: str | None = None,
    field: str | None = None,
) -> TypeDef:
    """Map a parsed host type to IR.

    Args:
    ----
        host: Parsed host type expression.
        resolve: Callback for names that are neither primitives nor
            built-in containers.
        type_name: Declared type being built, for error context.
        field: Field being built, for error context.

    Returns:
    -------
        The IR type definition.

    Raises:
    ------
        UnsupportedTypeError: For unknown names, or containers used with
            the wrong number of arguments.

    """

    def fail(message: str) -> UnsupportedTypeError:
        return UnsupportedTypeError(message, type_name=type_name, field=field)

    if host.name in PRIMITIVE_TYPES and not host.args:
        return PRIMITIVE_TYPES[host.name]

    if host.name in CONTAINER_ARITY:
        arity = CONTAINER_ARITY[host.name]
        if arity is not None and len(host.args) != arity:
            raise fail(
                f"'{host}': {host.name} takes {arity} type argument(s), got {len(host.args)}"
            )
        if arity is None and not host.args:
            raise fail(f"'{host}': {host.name} needs at least one type argument")
        args = tuple(
            map_host_type(a, resolve, type_name=type_name, field=field) for a in host.args
        )
        return _map_container(host.name, args)

    args = tuple(map_host_type(a, resolve, type_name=type_name, field=field) for a in host.args)
    resolved = resolve(host.name, args) if resolve is not None else None
    if resolved is None:
        if host.name in PRIMITIVE_TYPES:
            raise fail(f"'{host}': {host.name} does not take type arguments")
        raise fail(f"Unsupported type '{host}'")
    return resolved


def map_type_expression(
    text: str,
    resolve: NameResolver | None = None,
    *,
    type_name: str | None = None,
    field: str | None = None,
) -> TypeDef:
    """Parse and map a host type expression in one step."""
    try:
        host = parse_type_expression(text)
    except UnsupportedTypeError as e:
        raise UnsupportedTypeError(e.message, type_name=type_name, field=field) from e
    return map_host_type(host, resolve, type_name=type_name, field=field)
