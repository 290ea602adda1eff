"""Build IR type definitions for declared types.

:class:`DeclaredType` is the capability every declared type implements:
it reports its own top-level IR and contributes itself to a caller-owned
:class:`~yaml_to_ts.ir.registry.TypeRegistry`. :class:`SchemaType`
implements it for declarations read from a declaration file.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping, Sequence

from yaml_to_ts.errors import (
    ConfigurationConflictError,
    TypeGenError,
    UnsupportedTypeError,
)
from yaml_to_ts.ir.registry import NamedEntry, TypeRegistry
from yaml_to_ts.ir.types import (
    NULL,
    Field,
    GenericParam,
    IndexedAccess,
    Intersection,
    Literal,
    Raw,
    Record,
    Reference,
    Tuple,
    TypeDef,
    substitute,
)
from yaml_to_ts.models.declarations import (
    FieldDeclaration,
    TypeDeclaration,
    TypeKind,
    VariantDeclaration,
)
from yaml_to_ts.transform.attributes import (
    check_container,
    check_field,
    rename_rule,
    resolve_name,
    resolve_tagging,
)
from yaml_to_ts.transform.case import RenameRule
from yaml_to_ts.transform.enum_repr import ResolvedVariant, VariantShape, resolve_enum
from yaml_to_ts.transform.pattern import build_template, split_pattern
from yaml_to_ts.transform.type_mapper import NameResolver, map_host_type, map_type_expression
from yaml_to_ts.transform.type_parser import parse_type_expression

logger = logging.getLogger(__name__)


class DeclaredType(ABC):
    """A type that can contribute its declaration to a registry.

    Subclasses provide :attr:`name` and :meth:`definition`; everything
    else has defaults suitable for a plain, non-generic type.

    Usage:
        class Point(DeclaredType):
            name = "Point"

            def definition(self, registry=None):
                return Record((Field("x", NUMBER), Field("y", NUMBER)))

        Point().register(registry)
    """

    name: str
    namespace: tuple[str, ...] = ()
    generics: tuple[GenericParam, ...] = ()
    module: str | None = None
    wrapper: str | None = None

    # Set while definition() runs for an inline or flatten expansion
    _expanding = False

    @property
    def qualified_name(self) -> str:
        """Registry key of this type."""
        return ".".join((*self.namespace, self.name))

    @property
    def origin(self) -> Hashable:
        """Identity used to tell re-registration from a name collision."""
        return type(self)

    @abstractmethod
    def definition(self, registry: TypeRegistry | None = None) -> TypeDef:
        """Return the type's own top-level IR without registering it.

        Args:
        ----
            registry: When given, types referenced by the definition are
                registered on it.

        """

    def reference(self, args: Sequence[TypeDef] = ()) -> Reference:
        """Return a reference to this type with generic arguments applied."""
        self._check_arity(len(args))
        return Reference(self.name, tuple(args), self.namespace)

    def entry(self, registry: TypeRegistry | None = None) -> NamedEntry:
        """Build the registry entry for this type."""
        return NamedEntry(
            name=self.name,
            typedef=self.definition(registry),
            namespace=self.namespace,
            generics=self.generics,
            module=self.module,
            wrapper=self.wrapper,
            origin=self.origin,
        )

    def register(self, registry: TypeRegistry) -> Reference:
        """Register this type (and, transitively, its dependencies).

        Returns
        -------
            A reference to the registered type.

        """
        registry.register(self.qualified_name, lambda: self.entry(registry), origin=self.origin)
        return Reference(self.name, (), self.namespace)

    def expand(
        self,
        registry: TypeRegistry | None = None,
        args: Sequence[TypeDef] = (),
    ) -> TypeDef:
        """Return the definition with generic arguments substituted.

        Used to embed this type into another one (inline and flatten).

        Raises
        ------
            UnsupportedTypeError: If the type is already being expanded or
                embedded into itself.

        """
        if self._expanding:
            raise UnsupportedTypeError(
                f"'{self.qualified_name}' cannot be embedded into itself",
                type_name=self.qualified_name,
                attribute="inline",
            )
        self._check_arity(len(args))
        self._expanding = True
        try:
            td = self.definition(registry)
        finally:
            self._expanding = False

        mapping: dict[str, TypeDef] = {}
        for i, param in enumerate(self.generics):
            if i < len(args):
                mapping[param.name] = args[i]
            elif param.default is not None:
                mapping[param.name] = param.default
        return substitute(td, mapping)

    def arity(self) -> tuple[int, int]:
        """Return the minimum and maximum number of generic arguments."""
        required = sum(1 for p in self.generics if p.default is None)
        return required, len(self.generics)

    def _check_arity(self, count: int) -> None:
        required, total = self.arity()
        if not required <= count <= total:
            expected = str(total) if required == total else f"{required} to {total}"
            raise UnsupportedTypeError(
                f"'{self.qualified_name}' takes {expected} type argument(s), got {count}"
            )


class SchemaType(DeclaredType):
    """A declared type described by a :class:`TypeDeclaration`.

    Attributes
    ----------
        declaration: The validated declaration.
        scope: Declared types visible to this one, by declared name. It is
            shared by all types of one document.

    """

    def __init__(
        self,
        declaration: TypeDeclaration,
        scope: Mapping[str, DeclaredType] | None = None,
    ) -> None:
        """Initialize SchemaType.

        Args:
        ----
            declaration: The declaration to build.
            scope: Other declared types, by declared name.

        """
        self.declaration = declaration
        self.scope: Mapping[str, DeclaredType] = scope if scope is not None else {}
        self.name = declaration.rendered_name
        self.namespace = tuple(declaration.namespace)
        self.module = declaration.module
        self.wrapper = declaration.wrapper
        self._param_names = {p.name for p in declaration.generics}
        self._generics: tuple[GenericParam, ...] | None = None

    @property
    def origin(self) -> Hashable:
        """Identity of the underlying declaration."""
        return (type(self), id(self.declaration))

    def arity(self) -> tuple[int, int]:
        """Return the minimum and maximum number of generic arguments."""
        params = self.declaration.generics
        return sum(1 for p in params if p.default is None), len(params)

    @property
    def generics(self) -> tuple[GenericParam, ...]:
        """Generic parameters with constraints and defaults mapped to IR."""
        if self._generics is None:
            self._generics = tuple(
                GenericParam(
                    p.name,
                    self._map(p.extends, None, p.name) if p.extends else None,
                    self._map(p.default, None, p.name) if p.default else None,
                )
                for p in self.declaration.generics
            )
        return self._generics

    def entry(self, registry: TypeRegistry | None = None) -> NamedEntry:
        """Build the registry entry, registering generic bounds first."""
        if registry is not None:
            for p in self.declaration.generics:
                for expression in (p.extends, p.default):
                    if expression:
                        self._map(expression, registry, p.name)
        return super().entry(registry)

    # ------------------------------------------------------------------
    # Definition
    # ------------------------------------------------------------------

    def definition(self, registry: TypeRegistry | None = None) -> TypeDef:
        """Build this declaration's top-level IR.

        Raises
        ------
            TypeGenError: Any of its subclasses, with the declared type,
                field and attribute that caused it.

        """
        decl = self.declaration
        check_container(decl)

        if decl.kind == TypeKind.UNIT:
            return NULL
        if decl.kind == TypeKind.TUPLE:
            items = [self._map(item, registry, f"{i}") for i, item in enumerate(decl.items or [])]
            return items[0] if len(items) == 1 else Tuple(tuple(items))
        if decl.kind == TypeKind.ENUM:
            return self._build_enum(decl.variants or [], registry)

        rule = rename_rule(decl.rename_all, decl.name)
        record = self._build_record(decl.fields or [], rule, registry)
        if decl.transparent:
            return record.fields[0].type
        if decl.extends:
            return Intersection((self._resolve_extends(decl.extends, registry), record))
        return record

    def _build_record(
        self,
        fields: Sequence[FieldDeclaration],
        rule: RenameRule | None,
        registry: TypeRegistry | None,
        variant: str | None = None,
    ) -> Record:
        built: list[Field] = []
        for f in fields:
            field_path = f"{variant}.{f.name}" if variant else f.name
            check_field(f, self.declaration.name, field_path)
            if f.skip:
                continue
            if f.flatten:
                built.extend(self._flatten(f, registry, field_path))
                continue
            built.append(
                Field(
                    name=resolve_name(f.name, f.rename, rule),
                    type=self._field_type(f, registry, field_path),
                    optional=f.default,
                    inline=f.inline,
                )
            )

        seen: set[str] = set()
        for f in built:
            if f.name in seen:
                raise ConfigurationConflictError(
                    f"Duplicate field name '{f.name}'",
                    type_name=self.declaration.name,
                    field=variant,
                    attribute="rename",
                )
            seen.add(f.name)
        return Record(tuple(built))

    def _field_type(
        self,
        f: FieldDeclaration,
        registry: TypeRegistry | None,
        field_path: str,
    ) -> TypeDef:
        if f.ts_type:
            return Raw(f.ts_type)
        if f.pattern is not None:
            return self._build_pattern(f.pattern, registry, field_path)
        if f.index:
            return self._build_index(f.index, f.key or "", registry, field_path)
        if f.inline:
            return self._embed(f.type or "", registry, field_path, "inline")
        return self._map(f.type or "", registry, field_path)

    def _flatten(
        self,
        f: FieldDeclaration,
        registry: TypeRegistry | None,
        field_path: str,
    ) -> tuple[Field, ...]:
        embedded = self._embed(f.type or "", registry, field_path, "flatten")
        if not isinstance(embedded, Record):
            raise UnsupportedTypeError(
                f"Only record types can be flattened, '{f.type}' is not a record",
                type_name=self.declaration.name,
                field=field_path,
                attribute="flatten",
            )
        return embedded.fields

    def _embed(
        self,
        expression: str,
        registry: TypeRegistry | None,
        field_path: str,
        attribute: str,
    ) -> TypeDef:
        """Expand a declared type in place (inline and flatten)."""
        name = self.declaration.name
        try:
            host = parse_type_expression(expression)
        except UnsupportedTypeError as e:
            raise UnsupportedTypeError(e.message, name, field_path, attribute) from e

        target = self.scope.get(host.name)
        if target is None or host.name in self._param_names:
            raise UnsupportedTypeError(
                f"'{expression}' is not a declared type",
                type_name=name,
                field=field_path,
                attribute=attribute,
            )
        resolver = self._resolver(registry)
        args = [map_host_type(a, resolver, type_name=name, field=field_path) for a in host.args]

        try:
            return target.expand(registry, args)
        except UnsupportedTypeError as e:
            if e.type_name is None:
                raise UnsupportedTypeError(e.message, name, field_path, attribute) from e
            if e.attribute == "inline" and e.field is None and e.type_name == target.qualified_name:
                raise UnsupportedTypeError(
                    f"Recursive {attribute} of '{target.qualified_name}'",
                    type_name=name,
                    field=field_path,
                    attribute=attribute,
                ) from e
            raise

    def _build_pattern(
        self,
        pattern: str,
        registry: TypeRegistry | None,
        field_path: str,
    ) -> TypeDef:
        try:
            parts, expressions = split_pattern(pattern)
        except ConfigurationConflictError as e:
            raise ConfigurationConflictError(
                e.message,
                type_name=self.declaration.name,
                field=field_path,
                attribute="pattern",
            ) from e
        types = [self._map(expr, registry, field_path) if expr else None for expr in expressions]
        return build_template(parts, types)

    def _build_index(
        self,
        index: str,
        key: str,
        registry: TypeRegistry | None,
        field_path: str,
    ) -> IndexedAccess:
        base = self._lazy_reference(index, registry, field_path, "index")
        return IndexedAccess(base, Literal(key))

    def _resolve_extends(self, expression: str, registry: TypeRegistry | None) -> Reference:
        return self._lazy_reference(expression, registry, None, "extends")

    def _lazy_reference(
        self,
        expression: str,
        registry: TypeRegistry | None,
        field_path: str | None,
        attribute: str,
    ) -> Reference:
        """Reference a declared type, or an undeclared name to be checked at render."""
        resolver = self._resolver(registry)

        def resolve_or_defer(name: str, args: tuple[TypeDef, ...]) -> TypeDef | None:
            return resolver(name, args) or Reference(name, args)

        td = map_type_expression(
            expression, resolve_or_defer, type_name=self.declaration.name, field=field_path
        )
        if not isinstance(td, Reference) or td.param:
            raise UnsupportedTypeError(
                f"'{expression}' is not a named type",
                type_name=self.declaration.name,
                field=field_path,
                attribute=attribute,
            )
        return td

    def _build_enum(
        self,
        variants: Sequence[VariantDeclaration],
        registry: TypeRegistry | None,
    ) -> TypeDef:
        decl = self.declaration
        variant_rule = rename_rule(decl.rename_all, decl.name)
        field_rule = rename_rule(decl.rename_all_fields, decl.name, "rename_all_fields")

        resolved = []
        for v in variants:
            if v.skip:
                continue
            name = resolve_name(v.name, v.rename, variant_rule)
            if v.fields is not None:
                record = self._build_record(v.fields, field_rule, registry, variant=v.name)
                resolved.append(ResolvedVariant(name, VariantShape.STRUCT, fields=record.fields))
            elif v.items:
                items = tuple(
                    self._map(item, registry, f"{v.name}.{i}") for i, item in enumerate(v.items)
                )
                resolved.append(ResolvedVariant(name, VariantShape.TUPLE, items=items))
            else:
                resolved.append(ResolvedVariant(name, VariantShape.UNIT))

        return resolve_enum(resolved, resolve_tagging(decl, decl.name), decl.name)

    # ------------------------------------------------------------------
    # Type expressions
    # ------------------------------------------------------------------

    def _resolver(self, registry: TypeRegistry | None) -> NameResolver:
        def resolve(name: str, args: tuple[TypeDef, ...]) -> TypeDef | None:
            if name in self._param_names:
                if args:
                    raise UnsupportedTypeError(
                        f"Generic parameter '{name}' does not take type arguments"
                    )
                return Reference(name, param=True)
            target = self.scope.get(name)
            if target is None:
                return None
            ref = target.reference(args)
            if registry is not None:
                target.register(registry)
            return ref

        return resolve

    def _map(
        self,
        expression: str,
        registry: TypeRegistry | None,
        field_path: str | None,
    ) -> TypeDef:
        try:
            return map_type_expression(
                expression,
                self._resolver(registry),
                type_name=self.declaration.name,
                field=field_path,
            )
        except TypeGenError as e:
            if e.type_name is not None:
                raise
            raise type(e)(e.message, self.declaration.name, field_path, e.attribute) from e
