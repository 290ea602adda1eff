"""Validators for naming and attribute consistency."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yaml_to_ts.errors import ConfigurationConflictError, UnsupportedTypeError
from yaml_to_ts.models.declarations import TypeKind
from yaml_to_ts.transform.attributes import (
    check_container,
    check_field,
    rename_rule,
    resolve_name,
)
from yaml_to_ts.transform.pattern import split_pattern
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
    from yaml_to_ts.models.declarations import FieldDeclaration, TypeDeclaration
    from yaml_to_ts.models.root import TypeSchema

# Attributes whose conflicts are reported as invalid naming conventions
RENAME_ATTRIBUTES = frozenset({"rename_all", "rename_all_fields"})


class DuplicateDeclarationValidator(BaseValidator):
    """Validates that declared names are unique."""

    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Check for declarations sharing a name."""
        seen: set[str] = set()

        for declaration in schema.types:
            if declaration.name in seen:
                result.add_error(
                    code=ErrorCodes.E100_DUPLICATE_DECLARATION,
                    message=f"Type '{declaration.name}' is declared more than once",
                    path=declaration_path(declaration),
                    suggestion="Rename or remove one of the declarations",
                )
            else:
                seen.add(declaration.name)


class DuplicateTypeNameValidator(BaseValidator):
    """Validates that distinct declarations render under distinct names."""

    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Check rendered (namespaced, renamed) type names for collisions."""
        owners: dict[str, str] = {}

        for declaration in schema.types:
            rendered = ".".join((*declaration.namespace, declaration.rendered_name))
            owner = owners.setdefault(rendered, declaration.name)
            if owner != declaration.name:
                result.add_error(
                    code=ErrorCodes.E101_DUPLICATE_TYPE_NAME,
                    message=(
                        f"Types '{owner}' and '{declaration.name}' both render as '{rendered}'"
                    ),
                    path=f"{declaration_path(declaration)}.rename",
                    suggestion="Use 'rename' or 'namespace' to keep the names apart",
                )


class DuplicateFieldNameValidator(BaseValidator):
    """Validates that fields of one record render under distinct names."""

    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Check rendered field names of structs and struct-like variants."""
        for declaration in schema.types:
            try:
                field_rule = rename_rule(
                    declaration.rename_all_fields
                    if declaration.kind == TypeKind.ENUM
                    else declaration.rename_all,
                    declaration.name,
                )
            except ConfigurationConflictError:
                continue

            base = declaration_path(declaration)
            self._check(declaration.fields or [], field_rule, f"{base}.fields", result)
            for variant in declaration.variants or []:
                if not variant.skip and variant.fields:
                    path = f"{base}.variants.{variant.name}.fields"
                    self._check(variant.fields, field_rule, path, result)

    @staticmethod
    def _check(
        fields: list[FieldDeclaration],
        rule,
        path: str,
        result: ValidationResult,
    ) -> None:
        seen: dict[str, str] = {}
        for f in fields:
            if f.skip or f.flatten:
                continue
            rendered = resolve_name(f.name, f.rename, rule)
            if rendered in seen:
                result.add_error(
                    code=ErrorCodes.E102_DUPLICATE_FIELD_NAME,
                    message=(
                        f"Fields '{seen[rendered]}' and '{f.name}' both render as '{rendered}'"
                    ),
                    path=f"{path}.{f.name}",
                    suggestion="Use 'rename' to give the fields distinct names",
                )
            else:
                seen[rendered] = f.name


class AttributeConflictValidator(BaseValidator):
    """Validates container and field attribute combinations."""

    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Run the attribute checks used by the builder on every declaration."""
        for declaration in schema.types:
            base = declaration_path(declaration)
            try:
                check_container(declaration)
            except ConfigurationConflictError as e:
                code = (
                    ErrorCodes.E300_INVALID_RENAME_RULE
                    if e.attribute in RENAME_ATTRIBUTES
                    else ErrorCodes.E301_CONFLICTING_ATTRIBUTES
                )
                result.add_type_error(code, e, f"{base}.{e.attribute}")

            for path, f in iter_fields(declaration):
                try:
                    check_field(f, declaration.name, f.name)
                except ConfigurationConflictError as e:
                    result.add_type_error(
                        ErrorCodes.E301_CONFLICTING_ATTRIBUTES, e, f"{path}.{e.attribute}"
                    )
                if f.pattern is not None and not f.skip:
                    self._check_pattern(declaration, f, path, result)

    @staticmethod
    def _check_pattern(
        declaration: TypeDeclaration,
        f: FieldDeclaration,
        path: str,
        result: ValidationResult,
    ) -> None:
        try:
            split_pattern(f.pattern or "")
        except ConfigurationConflictError as e:
            result.add_error(
                code=ErrorCodes.E302_INVALID_PATTERN,
                message=e.message,
                path=f"{path}.pattern",
                suggestion="Close every '${' placeholder with '}'",
                type_name=declaration.name,
            )


class UnusedGenericValidator(BaseValidator):
    """Warns about generic parameters that are never used."""

    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Check that each generic parameter appears in some type expression."""
        for declaration in schema.types:
            if not declaration.generics:
                continue
            used = self._used_names(declaration)
            for param in declaration.generics:
                if param.name not in used:
                    result.add_warning(
                        code=ErrorCodes.W001_UNUSED_GENERIC,
                        message=(
                            f"Generic parameter '{param.name}' of '{declaration.name}' "
                            "is never used"
                        ),
                        path=f"{declaration_path(declaration)}.generics.{param.name}",
                        suggestion="Remove the parameter or use it in a field type",
                    )

    @staticmethod
    def _used_names(declaration: TypeDeclaration) -> set[str]:
        expressions = [expression for _, expression in iter_type_expressions(declaration)]
        if declaration.extends:
            expressions.append(declaration.extends)
        for _, f in iter_fields(declaration):
            if f.skip or f.pattern is None:
                continue
            try:
                expressions.extend(e for e in split_pattern(f.pattern)[1] if e)
            except ConfigurationConflictError:
                continue

        used: set[str] = set()
        for expression in expressions:
            try:
                used.update(host_type_names(parse_type_expression(expression)))
            except UnsupportedTypeError:
                continue
        return used


class SingleVariantEnumValidator(BaseValidator):
    """Warns about enums with a single variant."""

    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Check that enums have more than one variant."""
        for declaration in schema.types:
            if declaration.kind != TypeKind.ENUM:
                continue
            kept = [v for v in declaration.variants or [] if not v.skip]
            if len(kept) == 1:
                result.add_warning(
                    code=ErrorCodes.W002_SINGLE_VARIANT_ENUM,
                    message=f"Enum '{declaration.name}' has a single variant",
                    path=f"{declaration_path(declaration)}.variants",
                    suggestion="Consider a struct, or add the missing variants",
                )
