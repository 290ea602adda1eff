"""Container- and field-level configuration attributes.

These models only describe what was written in the declaration file.
Combinations that contradict each other (e.g. ``untagged`` together with
``tag``) are accepted here and rejected when the declaration is built,
so that programmatically constructed configs get the same checks.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from yaml_to_ts.models.common import Identifier, Namespace


class Representation(str, Enum):
    """Wire representation of a tagged-variant type."""

    EXTERNAL = "external"
    INTERNAL = "internal"
    ADJACENT = "adjacent"
    UNTAGGED = "untagged"


class GenericParamDeclaration(BaseModel):
    """A generic parameter of a declared type.

    Example:
    -------
        ```yaml
        generics:
          - name: T
            extends: Identified
            default: User
        ```

    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[Identifier, Field(description="Parameter name")]
    extends: Annotated[
        str | None,
        Field(default=None, description="Constraint, as a host type expression"),
    ]
    default: Annotated[
        str | None,
        Field(default=None, description="Default argument, as a host type expression"),
    ]


class ContainerConfig(BaseModel):
    """Attributes of a declared type as a whole."""

    model_config = ConfigDict(extra="forbid")

    rename: Annotated[
        str | None,
        Field(default=None, description="Rendered type name (default: declared name)"),
    ]
    rename_all: Annotated[
        str | None,
        Field(
            default=None,
            description="Naming convention for fields (structs) or variants (enums)",
            examples=["camelCase", "snake_case"],
        ),
    ]
    rename_all_fields: Annotated[
        str | None,
        Field(
            default=None,
            description="Naming convention for fields of struct-like enum variants",
        ),
    ]
    tag: Annotated[
        str | None,
        Field(default=None, description="Discriminant field name"),
    ]
    content: Annotated[
        str | None,
        Field(default=None, description="Payload field name (adjacent tagging)"),
    ]
    untagged: Annotated[
        bool,
        Field(default=False, description="Union variants without any discriminant"),
    ]
    representation: Annotated[
        Representation | None,
        Field(default=None, description="Explicit tagging strategy"),
    ]
    transparent: Annotated[
        bool,
        Field(default=False, description="Render as the single field's type"),
    ]
    extends: Annotated[
        str | None,
        Field(
            default=None,
            description="Base type intersected with the own fields",
        ),
    ]
    namespace: Annotated[
        Namespace,
        Field(default=(), description="Namespace path, e.g. 'api.v1'"),
    ]
    module: Annotated[
        str | None,
        Field(
            default=None,
            description="Dotted module key used for multi-file output",
            examples=["models.user"],
        ),
    ]
    wrapper: Annotated[
        Identifier | None,
        Field(default=None, description="Utility type wrapping the body, e.g. Prettify"),
    ]
    generics: Annotated[
        list[GenericParamDeclaration],
        Field(default_factory=list, description="Generic parameters"),
    ]


class FieldConfig(BaseModel):
    """Attributes of a single field."""

    model_config = ConfigDict(extra="forbid")

    rename: Annotated[
        str | None,
        Field(default=None, description="Rendered field name"),
    ]
    skip: Annotated[
        bool,
        Field(default=False, description="Omit the field"),
    ]
    flatten: Annotated[
        bool,
        Field(default=False, description="Splice the fields of a record type in place"),
    ]
    ts_type: Annotated[
        str | None,
        Field(default=None, description="Verbatim TypeScript type overriding the mapping"),
    ]
    default: Annotated[
        bool,
        Field(default=False, description="Field has a default and may be absent"),
    ]
    inline: Annotated[
        bool,
        Field(default=False, description="Embed the referenced type's definition"),
    ]
    pattern: Annotated[
        str | None,
        Field(
            default=None,
            description="Template literal, e.g. 'order-${u32}'",
        ),
    ]
    index: Annotated[
        str | None,
        Field(default=None, description="Type whose member type is referenced"),
    ]
    key: Annotated[
        str | None,
        Field(default=None, description="Member name for indexed access"),
    ]
