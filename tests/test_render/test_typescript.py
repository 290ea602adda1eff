"""Tests for the TypeScript renderer."""

import pytest
from yaml_to_ts.ir.registry import NamedEntry
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
    Raw,
    Record,
    Reference,
    TemplateLiteral,
    Tuple,
    Union,
)
from yaml_to_ts.render.typescript import (
    render_declaration,
    render_generics,
    render_literal,
    render_property_name,
    render_type,
)


class TestRenderType:
    """Tests for render_type per IR node."""

    @pytest.mark.parametrize(
        ("td", "expected"),
        [
            (STRING, "string"),
            (NUMBER, "number"),
            (BIGINT, "bigint"),
            (BOOLEAN, "boolean"),
            (NULL, "null"),
            (VOID, "void"),
            (UNKNOWN, "unknown"),
        ],
    )
    def test_primitives(self, td: object, expected: str) -> None:
        """Primitives render as their keyword."""
        assert render_type(td) == expected

    def test_array(self) -> None:
        """Arrays use the postfix form."""
        assert render_type(Array(NUMBER)) == "number[]"

    def test_array_of_union_is_parenthesized(self) -> None:
        """Union elements need parentheses."""
        assert render_type(Array(Union((STRING, NULL)))) == "(string | null)[]"

    def test_nested_array(self) -> None:
        """Arrays of arrays chain suffixes."""
        assert render_type(Array(Array(STRING))) == "string[][]"

    def test_tuple(self) -> None:
        """Tuples render as bracketed lists."""
        assert render_type(Tuple((NUMBER, STRING))) == "[number, string]"

    def test_map(self) -> None:
        """Maps render as Record<K, V>."""
        assert render_type(Map(STRING, NUMBER)) == "Record<string, number>"

    def test_union(self) -> None:
        """Unions keep variant order."""
        assert render_type(Union((Literal("a"), Literal("b")))) == '"a" | "b"'

    def test_intersection_parenthesizes_unions(self) -> None:
        """Union members of an intersection need parentheses."""
        td = Intersection(
            (
                Reference("Base"),
                Union((Record((Field("a", STRING),)), Record((Field("b", NUMBER),)))),
            )
        )
        assert render_type(td) == "Base & ({ a: string } | { b: number })"

    def test_record(self) -> None:
        """Records render inline with ; separators."""
        td = Record((Field("id", NUMBER), Field("name", STRING, optional=True)))
        assert render_type(td) == "{ id: number; name?: string }"

    def test_empty_record(self) -> None:
        """An empty record renders as {}."""
        assert render_type(Record()) == "{}"

    def test_record_quotes_non_identifier_names(self) -> None:
        """Property names that are not identifiers are quoted."""
        td = Record((Field("user-id", NUMBER),))
        assert render_type(td) == '{ "user-id": number }'

    def test_reference_with_namespace_and_args(self) -> None:
        """References render qualified with their arguments."""
        td = Reference("Page", (Reference("User", (), ("api",)),), ("api", "v1"))
        assert render_type(td) == "api.v1.Page<api.User>"

    def test_parameter_reference_is_bare(self) -> None:
        """Generic parameter uses render by name only."""
        assert render_type(Reference("T", param=True)) == "T"

    def test_template_literal(self) -> None:
        """Template literals interpolate their types."""
        td = TemplateLiteral(("user-", "-", ""), (NUMBER, STRING))
        assert render_type(td) == "`user-${number}-${string}`"

    def test_template_literal_escapes_parts(self) -> None:
        """Backticks and placeholders in parts are escaped."""
        td = TemplateLiteral(("a`b${c",), ())
        assert render_type(td) == "`a\\`b\\${c`"

    def test_indexed_access(self) -> None:
        """Indexed access renders Base["key"]."""
        td = IndexedAccess(Reference("User"), Literal("id"))
        assert render_type(td) == 'User["id"]'

    def test_raw(self) -> None:
        """Raw text renders verbatim."""
        assert render_type(Raw("Date | string")) == "Date | string"

    def test_unknown_node(self) -> None:
        """Unknown objects are rejected."""
        with pytest.raises(TypeError, match="Cannot render"):
            render_type(object())


class TestRenderHelpers:
    """Tests for literal, property name and generics helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("Ping", '"Ping"'), (True, "true"), (False, "false"), (42, "42"), ('a"b', '"a\\"b"')],
    )
    def test_render_literal(self, value: object, expected: str) -> None:
        """Literals render as TypeScript literal types."""
        assert render_literal(Literal(value)) == expected

    def test_render_property_name(self) -> None:
        """Identifiers stay bare, others are quoted."""
        assert render_property_name("userId") == "userId"
        assert render_property_name("$ref") == "$ref"
        assert render_property_name("user id") == '"user id"'

    def test_render_generics(self) -> None:
        """Parameters render with constraint and default."""
        params = (GenericParam("T", Reference("Base"), STRING), GenericParam("U"))
        assert render_generics(params) == "<T extends Base = string, U>"

    def test_render_no_generics(self) -> None:
        """No parameters render as nothing."""
        assert render_generics(()) == ""


class TestRenderDeclaration:
    """Tests for render_declaration."""

    def test_plain(self) -> None:
        """A plain entry renders as a type alias."""
        entry = NamedEntry("User", Record((Field("id", NUMBER),)))
        assert render_declaration(entry) == "type User = { id: number };"

    def test_exported(self) -> None:
        """export=True prefixes the alias."""
        entry = NamedEntry("User", Record((Field("id", NUMBER),)))
        assert render_declaration(entry, export=True) == "export type User = { id: number };"

    def test_generic(self) -> None:
        """Generic parameters appear in the head."""
        entry = NamedEntry(
            "Page",
            Record((Field("items", Array(Reference("T", param=True))),)),
            generics=(GenericParam("T"),),
        )
        assert render_declaration(entry) == "type Page<T> = { items: T[] };"

    def test_wrapper(self) -> None:
        """A wrapper utility wraps the body."""
        entry = NamedEntry("User", Record((Field("id", NUMBER),)), wrapper="Prettify")
        assert render_declaration(entry) == "type User = Prettify<{ id: number }>;"

    def test_namespaced(self) -> None:
        """Namespaced entries are wrapped in nested namespace blocks."""
        entry = NamedEntry("User", Record((Field("id", NUMBER),)), namespace=("api", "v1"))
        assert render_declaration(entry) == (
            "namespace api {\n"
            "  export namespace v1 {\n"
            "    export type User = { id: number };\n"
            "  }\n"
            "}"
        )

    def test_namespaced_exported(self) -> None:
        """export=True exports the outermost namespace."""
        entry = NamedEntry("Id", NUMBER, namespace=("api",))
        assert render_declaration(entry, export=True) == (
            "export namespace api {\n  export type Id = number;\n}"
        )
