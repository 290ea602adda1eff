"""Resolve and cross-check container and field attributes.

The checks here are pure functions of the configuration. They run when
a declaration is built and again from the semantic validators, so a
declaration file reports conflicts before anything is generated.
"""

from __future__ import annotations

from yaml_to_ts.errors import ConfigurationConflictError
from yaml_to_ts.models.attributes import ContainerConfig, FieldConfig, Representation
from yaml_to_ts.models.declarations import TypeDeclaration, TypeKind
from yaml_to_ts.transform.case import RenameRule
from yaml_to_ts.transform.enum_repr import (
    DEFAULT_CONTENT,
    DEFAULT_STRATEGY,
    DEFAULT_TAG,
    TaggingStrategy,
)

# Field attributes that each decide the field's type on their own
EXCLUSIVE_FIELD_ATTRIBUTES = ("flatten", "inline", "pattern", "index", "ts_type")


def _conflict(
    message: str,
    type_name: str | None,
    attribute: str,
    field: str | None = None,
) -> ConfigurationConflictError:
    return ConfigurationConflictError(
        message, type_name=type_name, field=field, attribute=attribute
    )


def rename_rule(
    value: str | None,
    type_name: str | None = None,
    attribute: str = "rename_all",
) -> RenameRule | None:
    """Parse an optional naming convention."""
    if value is None:
        return None
    return RenameRule.parse(value, type_name=type_name, attribute=attribute)


def resolve_name(name: str, rename: str | None, rule: RenameRule | None) -> str:
    """Rendered name of a field or variant; an explicit rename wins."""
    if rename:
        return rename
    if rule is not None:
        return rule.apply(name)
    return name


def resolve_tagging(config: ContainerConfig, type_name: str | None = None) -> TaggingStrategy:
    """Resolve the tagging strategy of an enum.

    Args:
    ----
        config: Container configuration of the enum.
        type_name: Enum name, for error context.

    Returns:
    -------
        The tagging strategy. Without ``tag``, ``content``, ``untagged``
        and ``representation`` this is the default hybrid strategy.

    Raises:
    ------
        ConfigurationConflictError: If the tagging attributes contradict
            each other.

    """
    tag, content, untagged = config.tag, config.content, config.untagged
    representation = config.representation

    if untagged and (tag or content):
        raise _conflict(
            "'untagged' cannot be combined with 'tag' or 'content'", type_name, "untagged"
        )
    if tag and content and tag == content:
        raise _conflict(f"'tag' and 'content' are both '{tag}'", type_name, "content")

    if representation is None:
        if untagged:
            return TaggingStrategy(Representation.UNTAGGED, None, None)
        if content and not tag:
            raise _conflict("'content' requires 'tag'", type_name, "content")
        if tag and content:
            return TaggingStrategy(Representation.ADJACENT, tag, content)
        if tag:
            return TaggingStrategy(Representation.INTERNAL, tag, None)
        return DEFAULT_STRATEGY

    if untagged and representation != Representation.UNTAGGED:
        raise _conflict(
            f"'untagged' contradicts representation '{representation.value}'",
            type_name,
            "representation",
        )
    if representation in (Representation.EXTERNAL, Representation.UNTAGGED):
        if tag or content:
            raise _conflict(
                f"Representation '{representation.value}' takes no 'tag' or 'content'",
                type_name,
                "representation",
            )
        return TaggingStrategy(representation, None, None)
    if representation == Representation.INTERNAL:
        if content:
            raise _conflict(
                "Representation 'internal' takes no 'content'", type_name, "representation"
            )
        return TaggingStrategy(representation, tag or DEFAULT_TAG, None)
    return TaggingStrategy(representation, tag or DEFAULT_TAG, content or DEFAULT_CONTENT)


def check_container(declaration: TypeDeclaration) -> None:
    """Check the container attributes of a declaration for conflicts.

    Raises
    ------
        ConfigurationConflictError: On the first conflict found.

    """
    name = declaration.name
    rename_rule(declaration.rename_all, name)
    rename_rule(declaration.rename_all_fields, name, "rename_all_fields")

    if declaration.kind == TypeKind.ENUM:
        resolve_tagging(declaration, name)
    else:
        for attribute in ("tag", "content", "representation", "rename_all_fields"):
            if getattr(declaration, attribute) is not None:
                raise _conflict(
                    f"'{attribute}' only applies to enums", name, attribute
                )
        if declaration.untagged:
            raise _conflict("'untagged' only applies to enums", name, "untagged")

    if declaration.transparent:
        if declaration.extends:
            raise _conflict("'transparent' cannot be combined with 'extends'", name, "transparent")
        if declaration.kind == TypeKind.STRUCT:
            kept = [f for f in declaration.fields or [] if not f.skip]
            if len(kept) != 1:
                raise _conflict(
                    f"'transparent' needs exactly one non-skipped field, found {len(kept)}",
                    name,
                    "transparent",
                )
            if kept[0].flatten:
                raise _conflict(
                    f"'transparent' cannot wrap flattened field '{kept[0].name}'",
                    name,
                    "transparent",
                )
        elif declaration.kind == TypeKind.TUPLE:
            if len(declaration.items or []) != 1:
                raise _conflict("'transparent' needs exactly one item", name, "transparent")
        else:
            raise _conflict(
                f"'transparent' does not apply to kind '{declaration.kind.value}'",
                name,
                "transparent",
            )

    if declaration.extends and declaration.kind != TypeKind.STRUCT:
        raise _conflict("'extends' only applies to structs", name, "extends")


def check_field(
    config: FieldConfig,
    type_name: str | None = None,
    field: str | None = None,
) -> None:
    """Check the attributes of a single field for conflicts.

    Raises
    ------
        ConfigurationConflictError: On the first conflict found.

    """
    if config.skip:
        return

    given = [a for a in EXCLUSIVE_FIELD_ATTRIBUTES if getattr(config, a)]
    if len(given) > 1:
        raise _conflict(
            f"Attributes {', '.join(repr(a) for a in given)} are mutually exclusive",
            type_name,
            given[1],
            field,
        )
    if config.flatten and config.rename:
        raise _conflict("A flattened field cannot be renamed", type_name, "flatten", field)
    if config.flatten and config.default:
        raise _conflict("A flattened field cannot have a default", type_name, "flatten", field)
    if config.key and not config.index:
        raise _conflict("'key' requires 'index'", type_name, "key", field)
    if config.index and not config.key:
        raise _conflict("'index' requires 'key'", type_name, "index", field)
