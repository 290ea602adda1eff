"""Models for the output section of a declaration file."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HEADER = "// Generated by yaml-to-ts\n// Do not edit manually"


class ExportStyle(str, Enum):
    """How declarations are exported from the generated file."""

    NONE = "none"
    NAMED = "named"
    GROUPED = "grouped"


class OutputConfig(BaseModel):
    """Output file configuration.

    Example:
    -------
        ```yaml
        output:
          path: generated/types.ts
          export_style: named
          include_utilities: true
        ```

    """

    model_config = ConfigDict(extra="forbid")

    path: Annotated[
        str | None,
        Field(default=None, description="Single output file path"),
    ]
    export_style: Annotated[
        ExportStyle,
        Field(default=ExportStyle.NAMED, description="Export style for declarations"),
    ]
    header: Annotated[
        str,
        Field(
            default=DEFAULT_HEADER,
            description="Comment emitted at the top of every file ('' for none)",
        ),
    ]
    declaration_only: Annotated[
        bool,
        Field(default=False, description="Emit .d.ts declaration files"),
    ]
    include_utilities: Annotated[
        bool,
        Field(default=False, description="Emit the Prettify utility type"),
    ]
    esm_extensions: Annotated[
        bool,
        Field(default=False, description="Append .js to relative import paths"),
    ]
    multi_file: Annotated[
        str | None,
        Field(default=None, description="Output directory for one file per module"),
    ]

    @property
    def extension(self) -> str:
        """File suffix for generated files."""
        return ".d.ts" if self.declaration_only else ".ts"
