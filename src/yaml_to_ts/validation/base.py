"""Base validator class and declaration traversal helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING

from yaml_to_ts.validation.errors import ValidationResult

if TYPE_CHECKING:
    from yaml_to_ts.models.declarations import FieldDeclaration, TypeDeclaration
    from yaml_to_ts.models.root import TypeSchema
    from yaml_to_ts.transform.type_parser import HostType


class BaseValidator(ABC):
    """Base class for validators."""

    @abstractmethod
    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Validate the document and add issues to result.

        Args:
        ----
            schema: The declaration file to validate.
            result: The result object to add issues to.

        """
        ...


class CompositeValidator(BaseValidator):
    """Combines multiple validators."""

    def __init__(self, validators: list[BaseValidator] | None = None) -> None:
        """Initialize with optional list of validators.

        Args:
        ----
            validators: List of validators to combine.

        """
        self.validators = validators or []

    def add(self, validator: BaseValidator) -> None:
        """Add a validator.

        Args:
        ----
            validator: Validator to add.

        """
        self.validators.append(validator)

    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Run all validators.

        Args:
        ----
            schema: The declaration file to validate.
            result: The result object to add issues to.

        """
        for validator in self.validators:
            validator.validate(schema, result)


def declaration_path(declaration: TypeDeclaration) -> str:
    """Location of a declaration, e.g. ``types.User``."""
    return f"types.{declaration.name}"


def iter_fields(declaration: TypeDeclaration) -> Iterator[tuple[str, FieldDeclaration]]:
    """Yield ``(path, field)`` for struct fields and fields of kept struct-like variants."""
    base = declaration_path(declaration)
    for f in declaration.fields or []:
        yield f"{base}.fields.{f.name}", f
    for variant in declaration.variants or []:
        if variant.skip:
            continue
        for f in variant.fields or []:
            yield f"{base}.variants.{variant.name}.fields.{f.name}", f


def iter_type_expressions(declaration: TypeDeclaration) -> Iterator[tuple[str, str]]:
    """Yield ``(path, expression)`` for every host type expression of a declaration.

    Covers field types, tuple and variant items and generic bounds.
    Skipped fields and variants are ignored; indexed-access targets,
    ``extends`` and patterns are handled by their own validators.
    """
    base = declaration_path(declaration)
    for param in declaration.generics:
        for attribute in ("extends", "default"):
            expression = getattr(param, attribute)
            if expression:
                yield f"{base}.generics.{param.name}.{attribute}", expression
    for path, f in iter_fields(declaration):
        if f.skip or f.ts_type or f.pattern is not None or f.index:
            continue
        if f.type:
            yield f"{path}.type", f.type
    for i, item in enumerate(declaration.items or []):
        yield f"{base}.items.{i}", item
    for variant in declaration.variants or []:
        if variant.skip:
            continue
        for i, item in enumerate(variant.items or []):
            yield f"{base}.variants.{variant.name}.items.{i}", item


def host_type_names(host: HostType) -> Iterator[str]:
    """Yield every type name used in a parsed expression, outermost first."""
    stack = [host]
    while stack:
        node = stack.pop()
        yield node.name
        stack.extend(reversed(node.args))
