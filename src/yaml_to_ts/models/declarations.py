"""Models for declared types: structs, tuples, unit types and enums."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from yaml_to_ts.models.attributes import ContainerConfig, FieldConfig
from yaml_to_ts.models.common import Identifier


class TypeKind(str, Enum):
    """Shape of a declared type."""

    STRUCT = "struct"
    TUPLE = "tuple"
    UNIT = "unit"
    ENUM = "enum"


class FieldDeclaration(FieldConfig):
    """A named field of a struct or struct-like variant.

    Example:
    -------
        ```yaml
        - name: user_id
          type: u64
        - name: profile
          type: Profile
          flatten: true
        ```

    """

    name: Annotated[Identifier, Field(description="Field name in the host type")]
    type: Annotated[
        str | None,
        Field(
            default=None,
            description="Host type expression, e.g. 'list<User>'",
            examples=["u32", "optional<string>", "map<string, User>"],
        ),
    ]
    description: Annotated[
        str | None,
        Field(default=None, description="Human-readable description"),
    ]

    @model_validator(mode="after")
    def validate_type_present(self) -> FieldDeclaration:
        """Require a type unless another attribute determines it."""
        if self.type is None and not (self.ts_type or self.pattern or self.index):
            raise ValueError(
                f"Field '{self.name}' needs a 'type' (or one of 'ts_type', 'pattern', 'index')"
            )
        return self


class VariantDeclaration(BaseModel):
    """A variant of an enum.

    A variant without ``fields`` or ``items`` is a unit variant.

    Example:
    -------
        ```yaml
        variants:
          - name: Ping
          - name: Text
            items: [string]
          - name: Error
            fields:
              - {name: code, type: i32}
              - {name: message, type: string}
        ```

    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[Identifier, Field(description="Variant name")]
    rename: Annotated[
        str | None,
        Field(default=None, description="Rendered variant name"),
    ]
    skip: Annotated[
        bool,
        Field(default=False, description="Omit the variant"),
    ]
    fields: Annotated[
        list[FieldDeclaration] | None,
        Field(default=None, description="Named fields (struct-like variant)"),
    ]
    items: Annotated[
        list[str] | None,
        Field(default=None, description="Positional types (tuple-like variant)"),
    ]
    description: Annotated[
        str | None,
        Field(default=None, description="Human-readable description"),
    ]

    @model_validator(mode="after")
    def validate_single_shape(self) -> VariantDeclaration:
        """A variant has named fields or positional items, not both."""
        if self.fields is not None and self.items is not None:
            raise ValueError(f"Variant '{self.name}' cannot have both 'fields' and 'items'")
        return self


class TypeDeclaration(ContainerConfig):
    """A declared type.

    ``kind`` may be omitted; it is then inferred from the member list
    present (``variants`` -> enum, ``items`` -> tuple, ``fields`` ->
    struct, none -> unit).

    Examples
    --------
        ```yaml
        # Struct with renamed fields
        - name: User
          rename_all: camelCase
          fields:
            - {name: user_id, type: u64}

        # Newtype
        - name: UserId
          kind: tuple
          items: [u64]

        # Adjacently tagged enum
        - name: Event
          tag: kind
          content: data
          variants:
            - name: Started
            - name: Progress
              items: [f32]
        ```

    """

    name: Annotated[Identifier, Field(description="Declared type name")]
    kind: Annotated[
        TypeKind | None,
        Field(default=None, description="Declaration shape (inferred when omitted)"),
    ]
    fields: Annotated[
        list[FieldDeclaration] | None,
        Field(default=None, description="Named fields (struct)"),
    ]
    items: Annotated[
        list[str] | None,
        Field(default=None, description="Positional types (tuple)"),
    ]
    variants: Annotated[
        list[VariantDeclaration] | None,
        Field(default=None, description="Variants (enum)"),
    ]
    description: Annotated[
        str | None,
        Field(default=None, description="Human-readable description"),
    ]

    @model_validator(mode="after")
    def validate_members_match_kind(self) -> TypeDeclaration:
        """Infer a missing kind and check the member lists against it."""
        present = {
            TypeKind.STRUCT: self.fields is not None,
            TypeKind.TUPLE: self.items is not None,
            TypeKind.ENUM: self.variants is not None,
        }
        given = [kind for kind, is_set in present.items() if is_set]

        if self.kind is None:
            if len(given) > 1:
                names = ", ".join(_MEMBER_KEYS[k] for k in given)
                raise ValueError(f"Type '{self.name}' mixes {names}")
            self.kind = given[0] if given else TypeKind.UNIT

        expected = _MEMBER_KEYS.get(self.kind)
        for kind in given:
            if kind != self.kind:
                raise ValueError(
                    f"Type '{self.name}' of kind '{self.kind.value}' "
                    f"cannot have '{_MEMBER_KEYS[kind]}'"
                )
        if expected is not None and not present[self.kind]:
            raise ValueError(f"Type '{self.name}' of kind '{self.kind.value}' needs '{expected}'")
        if self.kind == TypeKind.TUPLE and not self.items:
            raise ValueError(f"Tuple type '{self.name}' needs at least one item")
        return self

    @property
    def rendered_name(self) -> str:
        """Name of the TypeScript declaration."""
        return self.rename or self.name


_MEMBER_KEYS = {
    TypeKind.STRUCT: "fields",
    TypeKind.TUPLE: "items",
    TypeKind.ENUM: "variants",
}
