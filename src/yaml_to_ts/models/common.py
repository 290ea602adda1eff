"""Common types and validators for Pydantic models."""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

# Declared type names and generic parameters become TypeScript identifiers
IDENTIFIER_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"
_NAMESPACE_SEGMENT = re.compile(IDENTIFIER_PATTERN)


def parse_namespace(value: Any) -> tuple[str, ...]:
    """Parse a namespace given as a list of segments or a dotted string.

    Args:
    ----
        value: ``["api", "v1"]``, ``"api.v1"``, or None.

    Returns:
    -------
        Tuple of path segments (empty for None or ``""``).

    Raises:
    ------
        ValueError: If a segment is not an identifier.

    Examples:
    --------
        >>> parse_namespace("api.v1")
        ('api', 'v1')
        >>> parse_namespace(["api", "v1"])
        ('api', 'v1')

    """
    if value is None or value == "":
        return ()

    if isinstance(value, str):
        segments = value.split(".")
    elif isinstance(value, list | tuple):
        segments = list(value)
    else:
        raise ValueError(f"Cannot parse {type(value).__name__} as namespace: {value}")

    for segment in segments:
        if not isinstance(segment, str) or not _NAMESPACE_SEGMENT.match(segment):
            raise ValueError(f"Invalid namespace segment: {segment!r}")
    return tuple(segments)


# Identifier such as "User" or "T"
Identifier = Annotated[str, Field(pattern=IDENTIFIER_PATTERN)]

# Namespace path, accepts "api.v1" or ["api", "v1"]
Namespace = Annotated[tuple[str, ...], BeforeValidator(parse_namespace)]
