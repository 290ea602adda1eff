"""Root model for yaml-to-ts declaration files."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from yaml_to_ts.models.declarations import TypeDeclaration
from yaml_to_ts.models.meta import Meta
from yaml_to_ts.models.output import OutputConfig


class TypeSchema(BaseModel):
    """Root model for yaml-to-ts YAML/JSON declaration files.

    Example:
    -------
        ```yaml
        schema: yaml-to-ts/v1
        meta:
          author: "Platform Team"
        output:
          path: generated/types.ts
        types:
          - name: User
            fields:
              - {name: id, type: u64}
        ```

    """

    model_config = ConfigDict(
        # Allow population by field name AND alias
        populate_by_name=True,
        # Forbid extra fields not defined in the model
        extra="forbid",
        # Validate default values
        validate_default=True,
    )

    # Using alias because "schema" is a reserved name in Pydantic
    schema_version: Annotated[
        Literal["yaml-to-ts/v1"],
        Field(alias="schema", description="Schema version identifier"),
    ]
    meta: Annotated[
        Meta | None,
        Field(default=None, description="Document metadata"),
    ]
    output: Annotated[
        OutputConfig,
        Field(default_factory=OutputConfig, description="Output configuration"),
    ]
    types: Annotated[
        list[TypeDeclaration],
        Field(default_factory=list, description="Declared types, in document order"),
    ]

    def get_type(self, name: str) -> TypeDeclaration | None:
        """Get the first declaration with the given declared name."""
        for declaration in self.types:
            if declaration.name == name:
                return declaration
        return None

    @property
    def type_names(self) -> list[str]:
        """Declared names in document order."""
        return [declaration.name for declaration in self.types]
