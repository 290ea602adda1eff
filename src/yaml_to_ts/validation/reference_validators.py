"""Validators for references between declared types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yaml_to_ts.errors import ConfigurationConflictError, UnsupportedTypeError
from yaml_to_ts.models.declarations import TypeDeclaration, TypeKind
from yaml_to_ts.transform.attributes import rename_rule, resolve_name
from yaml_to_ts.transform.pattern import split_pattern
from yaml_to_ts.transform.type_mapper import CONTAINER_ARITY, PRIMITIVE_TYPES
from yaml_to_ts.transform.type_parser import parse_type_expression
from yaml_to_ts.validation.base import (
    BaseValidator,
    declaration_path,
    host_type_names,
    iter_fields,
    iter_type_expressions,
)
from yaml_to_ts.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from yaml_to_ts.models.root import TypeSchema


class TypeReferenceValidator(BaseValidator):
    """Validates that type expressions only use known types."""

    # Built-in types that are always valid
    BUILTIN_TYPES = frozenset(PRIMITIVE_TYPES) | frozenset(CONTAINER_ARITY)

    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Validate type, item, bound, extends, index and pattern references."""
        declared = set(schema.type_names)

        for declaration in schema.types:
            params = {p.name for p in declaration.generics}
            valid_types = declared | params | self.BUILTIN_TYPES

            for path, expression in self._expressions(declaration):
                self._check_expression(expression, path, valid_types, declared, result)

            for path, f in iter_fields(declaration):
                if f.skip or not (f.flatten or f.inline):
                    continue
                target = (f.type or "").split("<", 1)[0].strip()
                if target not in declared:
                    attribute = "flatten" if f.flatten else "inline"
                    result.add_error(
                        code=ErrorCodes.E001_UNDEFINED_TYPE,
                        message=f"Field '{f.name}' uses '{attribute}' on '{f.type}', "
                        "which is not a declared type",
                        path=f"{path}.type",
                        suggestion=f"Declare '{target}' in the 'types' section",
                    )

    def _expressions(self, declaration: TypeDeclaration):
        yield from iter_type_expressions(declaration)
        base = declaration_path(declaration)
        if declaration.extends:
            yield f"{base}.extends", declaration.extends
        for path, f in iter_fields(declaration):
            if f.skip:
                continue
            if f.index:
                yield f"{path}.index", f.index
            if f.pattern is not None:
                try:
                    _, expressions = split_pattern(f.pattern)
                except ConfigurationConflictError:
                    continue
                for expression in expressions:
                    if expression:
                        yield f"{path}.pattern", expression

    def _check_expression(
        self,
        expression: str,
        path: str,
        valid_types: set[str],
        declared: set[str],
        result: ValidationResult,
    ) -> None:
        try:
            host = parse_type_expression(expression)
        except UnsupportedTypeError as e:
            result.add_error(
                code=ErrorCodes.E001_UNDEFINED_TYPE,
                message=e.message,
                path=path,
                suggestion="Use NAME<ARG, ...>, '()' or '(A, B)'",
            )
            return

        for name in host_type_names(host):
            if name not in valid_types:
                result.add_error(
                    code=ErrorCodes.E001_UNDEFINED_TYPE,
                    message=f"'{expression}' references undefined type '{name}'",
                    path=path,
                    suggestion=f"Define '{name}' in the 'types' section",
                    referenced_type=name,
                    available_types=sorted(declared),
                )


class IndexKeyValidator(BaseValidator):
    """Validates that indexed-access keys name a field of the target struct."""

    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Check every ``index`` + ``key`` pair against the target's fields."""
        for declaration in schema.types:
            for path, f in iter_fields(declaration):
                if f.skip or not f.index or not f.key:
                    continue
                target = schema.get_type(f.index.strip())
                if target is None or target.kind != TypeKind.STRUCT:
                    continue
                keys = self._field_names(target)
                if keys is not None and f.key not in keys:
                    result.add_error(
                        code=ErrorCodes.E002_UNDEFINED_INDEX_KEY,
                        message=f"'{target.name}' has no field '{f.key}'",
                        path=f"{path}.key",
                        suggestion=f"Use one of: {', '.join(sorted(keys))}" if keys else None,
                    )

    @staticmethod
    def _field_names(target: TypeDeclaration) -> set[str] | None:
        """Rendered field names, or None when they cannot be known statically."""
        fields = target.fields or []
        if any(f.flatten and not f.skip for f in fields):
            return None
        try:
            rule = rename_rule(target.rename_all, target.name)
        except ConfigurationConflictError:
            return None
        return {resolve_name(f.name, f.rename, rule) for f in fields if not f.skip}
