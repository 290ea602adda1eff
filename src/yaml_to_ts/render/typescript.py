"""Render IR type definitions as TypeScript syntax.

Rendering is a pure function of the IR: no registry lookups happen
here, so the same entry always renders to the same text.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING

from yaml_to_ts.ir.types import (
    Array,
    GenericParam,
    IndexedAccess,
    Intersection,
    Literal,
    Map,
    Primitive,
    Raw,
    Record,
    Reference,
    TemplateLiteral,
    Tuple,
    TypeDef,
    Union,
)

if TYPE_CHECKING:
    from yaml_to_ts.ir.registry import NamedEntry

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

NAMESPACE_INDENT = "  "


def render_type(td: TypeDef) -> str:
    """Render a TypeDef as a TypeScript type expression.

    Args:
    ----
        td: The TypeDef to render.

    Returns:
    -------
        TypeScript source text for the type.

    """
    if isinstance(td, Primitive):
        return td.kind.value
    if isinstance(td, Reference):
        return _render_reference(td)
    if isinstance(td, Record):
        return _render_record(td)
    if isinstance(td, Array):
        element = render_type(td.element)
        if isinstance(td.element, Union | Intersection):
            element = f"({element})"
        return f"{element}[]"
    if isinstance(td, Tuple):
        return "[" + ", ".join(render_type(e) for e in td.elements) + "]"
    if isinstance(td, Map):
        return f"Record<{render_type(td.key)}, {render_type(td.value)}>"
    if isinstance(td, Literal):
        return render_literal(td)
    if isinstance(td, Union):
        return " | ".join(render_type(v) for v in td.variants)
    if isinstance(td, Intersection):
        return " & ".join(
            f"({render_type(m)})" if isinstance(m, Union) else render_type(m)
            for m in td.members
        )
    if isinstance(td, TemplateLiteral):
        return _render_template(td)
    if isinstance(td, IndexedAccess):
        return f"{_render_reference(td.base)}[{render_literal(td.key)}]"
    if isinstance(td, Raw):
        return td.text
    raise TypeError(f"Cannot render {type(td).__name__}")


def render_literal(literal: Literal) -> str:
    """Render a literal value (``"Ping"``, ``42``, ``true``)."""
    if isinstance(literal.value, bool):
        return "true" if literal.value else "false"
    if isinstance(literal.value, str):
        return json.dumps(literal.value, ensure_ascii=False)
    return repr(literal.value)


def render_property_name(name: str) -> str:
    """Quote a property name unless it is a plain identifier."""
    if _IDENTIFIER.match(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def render_generics(params: tuple[GenericParam, ...]) -> str:
    """Render a declaration-head parameter list (``<T extends C = D>``)."""
    if not params:
        return ""
    rendered = []
    for param in params:
        text = param.name
        if param.constraint is not None:
            text += f" extends {render_type(param.constraint)}"
        if param.default is not None:
            text += f" = {render_type(param.default)}"
        rendered.append(text)
    return "<" + ", ".join(rendered) + ">"


def render_declaration(entry: NamedEntry, export: bool = False) -> str:
    """Render a named entry as a type alias declaration.

    Namespaced entries are wrapped in one ``namespace`` block per path
    segment; everything inside a namespace is exported so it can be
    reached as ``Ns.Name``.

    Args:
    ----
        entry: The registry entry to render.
        export: Whether to prefix the top-level declaration with ``export``.

    Returns:
    -------
        TypeScript source text, without a trailing newline.

    """
    body = render_type(entry.typedef)
    if entry.wrapper:
        body = f"{entry.wrapper}<{body}>"
    declaration = f"type {entry.name}{render_generics(entry.generics)} = {body};"

    if not entry.namespace:
        return f"export {declaration}" if export else declaration

    lines = []
    for depth, segment in enumerate(entry.namespace):
        prefix = "export " if export or depth > 0 else ""
        lines.append(f"{NAMESPACE_INDENT * depth}{prefix}namespace {segment} {{")
    lines.append(f"{NAMESPACE_INDENT * len(entry.namespace)}export {declaration}")
    for depth in reversed(range(len(entry.namespace))):
        lines.append(f"{NAMESPACE_INDENT * depth}}}")
    return "\n".join(lines)


def _render_reference(ref: Reference) -> str:
    name = ref.name if ref.param else ref.qualified_name
    if ref.args:
        name += "<" + ", ".join(render_type(a) for a in ref.args) + ">"
    return name


def _render_record(record: Record) -> str:
    if not record.fields:
        return "{}"
    members = []
    for f in record.fields:
        marker = "?" if f.optional else ""
        members.append(f"{render_property_name(f.name)}{marker}: {render_type(f.type)}")
    return "{ " + "; ".join(members) + " }"


def _escape_template_part(part: str) -> str:
    return part.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def _render_template(td: TemplateLiteral) -> str:
    pieces = [_escape_template_part(td.parts[0])]
    for type_, part in zip(td.types, td.parts[1:]):
        pieces.append("${" + render_type(type_) + "}")
        pieces.append(_escape_template_part(part))
    return "`" + "".join(pieces) + "`"
