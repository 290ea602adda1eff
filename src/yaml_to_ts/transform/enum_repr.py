"""Tagged-variant (enum) representation resolver.

Turns the variants of an enum into a single union, according to the
tagging strategy. For a unit variant `Ping`, a tuple-like variant
`Text(string)` and a struct-like variant `Error { code }`:

- external: `"Ping"`, `{ Text: string }`, `{ Error: { code: number } }`
- internal: `{ tag: "Ping" }`, error, `{ tag: "Error"; code: number }`
- adjacent: `{ tag: "Ping" }`, `{ tag: "Text"; content: string }`,
  `{ tag: "Error"; content: { code: number } }`
- untagged: `"Ping"`, `string`, `{ code: number }`
- default: `{ type: "Ping" }`, `{ type: "Text"; value: string }`,
  `{ type: "Error"; code: number }`

Under the default strategy an enum whose variants are all unit variants
becomes a union of string literals instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from yaml_to_ts.errors import ConfigurationConflictError, UnsupportedTypeError
from yaml_to_ts.ir.types import Field, Literal, Record, Tuple, TypeDef, Union
from yaml_to_ts.models.attributes import Representation

DEFAULT_TAG = "type"
DEFAULT_CONTENT = "value"


class VariantShape(Enum):
    """Payload shape of a variant."""

    UNIT = "unit"
    TUPLE = "tuple"
    STRUCT = "struct"


@dataclass(frozen=True)
class TaggingStrategy:
    """Resolved tagging strategy of an enum.

    ``representation`` is None for the default hybrid strategy.
    """

    representation: Representation | None = None
    tag: str | None = DEFAULT_TAG
    content: str | None = DEFAULT_CONTENT

    @property
    def is_default(self) -> bool:
        """Whether no explicit tagging attribute was given."""
        return self.representation is None


DEFAULT_STRATEGY = TaggingStrategy()


@dataclass(frozen=True)
class ResolvedVariant:
    """A variant with its rendered name and mapped payload."""

    name: str
    shape: VariantShape
    items: tuple[TypeDef, ...] = ()
    fields: tuple[Field, ...] = ()


def _positional(variant: ResolvedVariant) -> TypeDef:
    if len(variant.items) == 1:
        return variant.items[0]
    return Tuple(variant.items)


def _payload(variant: ResolvedVariant) -> TypeDef:
    if variant.shape == VariantShape.TUPLE:
        return _positional(variant)
    return Record(variant.fields)


def _tagged(tag: str, variant: ResolvedVariant, *rest: Field) -> Record:
    return Record((Field(tag, Literal(variant.name)), *rest))


def _merge_tag(tag: str, variant: ResolvedVariant, type_name: str | None) -> Record:
    if tag in {f.name for f in variant.fields}:
        raise ConfigurationConflictError(
            f"Field '{tag}' of variant '{variant.name}' collides with the tag field",
            type_name=type_name,
            field=variant.name,
            attribute="tag",
        )
    return _tagged(tag, variant, *variant.fields)


def resolve_variant(
    variant: ResolvedVariant,
    strategy: TaggingStrategy,
    type_name: str | None = None,
) -> TypeDef:
    """Resolve one variant under a tagging strategy.

    Args:
    ----
        variant: The variant to resolve.
        strategy: Tagging strategy of the enclosing enum.
        type_name: Enum name, for error context.

    Returns:
    -------
        The variant's arm of the union.

    Raises:
    ------
        UnsupportedTypeError: For a tuple-like variant under internal
            tagging.
        ConfigurationConflictError: If a struct field collides with the
            tag field.

    """
    representation = strategy.representation

    if representation == Representation.EXTERNAL:
        if variant.shape == VariantShape.UNIT:
            return Literal(variant.name)
        payload = _payload(variant)
        return Record((Field(variant.name, payload),))

    if representation == Representation.UNTAGGED:
        if variant.shape == VariantShape.UNIT:
            return Literal(variant.name)
        if variant.shape == VariantShape.TUPLE:
            return _positional(variant)
        return Record(variant.fields)

    tag = strategy.tag or DEFAULT_TAG
    if variant.shape == VariantShape.UNIT:
        return _tagged(tag, variant)

    if representation == Representation.ADJACENT:
        content = strategy.content or DEFAULT_CONTENT
        payload = _payload(variant)
        return _tagged(tag, variant, Field(content, payload))

    if variant.shape == VariantShape.STRUCT:
        return _merge_tag(tag, variant, type_name)

    if representation == Representation.INTERNAL:
        raise UnsupportedTypeError(
            f"Tuple-like variant '{variant.name}' cannot be internally tagged; "
            "use named fields or add a 'content' field",
            type_name=type_name,
            field=variant.name,
            attribute="tag",
        )

    # Default strategy: tuple-like payloads go into the content field
    return _tagged(tag, variant, Field(strategy.content or DEFAULT_CONTENT, _positional(variant)))


def resolve_enum(
    variants: Sequence[ResolvedVariant],
    strategy: TaggingStrategy = DEFAULT_STRATEGY,
    type_name: str | None = None,
) -> TypeDef:
    """Combine the variants of an enum into one union.

    Variant order is declaration order. A single variant is returned as
    is rather than wrapped in a one-member union.

    Args:
    ----
        variants: Variants in declaration order (skipped ones removed).
        strategy: Tagging strategy.
        type_name: Enum name, for error context.

    Returns:
    -------
        The enum's type definition.

    Raises:
    ------
        UnsupportedTypeError: If there are no variants.
        ConfigurationConflictError: If two untagged variants have the
            same shape.

    """
    if not variants:
        raise UnsupportedTypeError("Enum has no variants", type_name=type_name)

    if strategy.is_default and all(v.shape == VariantShape.UNIT for v in variants):
        arms: list[TypeDef] = [Literal(v.name) for v in variants]
    else:
        arms = [resolve_variant(v, strategy, type_name) for v in variants]

    if strategy.representation == Representation.UNTAGGED:
        seen: dict[TypeDef, str] = {}
        for variant, arm in zip(variants, arms):
            if arm in seen:
                raise ConfigurationConflictError(
                    f"Untagged variants '{seen[arm]}' and '{variant.name}' "
                    "have the same shape and cannot be told apart",
                    type_name=type_name,
                    field=variant.name,
                    attribute="untagged",
                )
            seen[arm] = variant.name

    if len(arms) == 1:
        return arms[0]
    return Union(tuple(arms))
