"""Models for the meta section of a declaration file."""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Semantic version pattern: MAJOR.MINOR.PATCH[-prerelease][+build]
SEMVER_PATTERN = re.compile(r"^\d+\.\d+\.\d+(-[0-9A-Za-z.-]+)?(\+[0-9A-Za-z.-]+)?$")


class Meta(BaseModel):
    """Document metadata section.

    Example:
    -------
        ```yaml
        meta:
          author: "Platform Team"
          version: "1.2.0"
          description: "Public API payloads"
        ```

    """

    model_config = ConfigDict(extra="forbid")

    author: Annotated[
        str | None,
        Field(default=None, description="Document author name or team"),
    ]
    version: Annotated[
        str | None,
        Field(
            default=None,
            description="Document version in semver format",
            examples=["1.0.0", "2.1.0-beta.1"],
        ),
    ]
    description: Annotated[
        str | None,
        Field(default=None, description="Human-readable description of the declarations"),
    ]

    @field_validator("version")
    @classmethod
    def validate_semver(cls, v: str | None) -> str | None:
        """Validate that version follows semantic versioning."""
        if v is not None and not SEMVER_PATTERN.match(v):
            raise ValueError(
                f"Invalid semver format: '{v}'. "
                "Expected format: MAJOR.MINOR.PATCH[-prerelease][+build]"
            )
        return v
