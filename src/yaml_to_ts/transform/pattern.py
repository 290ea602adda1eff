"""Template-literal patterns for string fields (``order-${u32}``)."""

from __future__ import annotations

from yaml_to_ts.errors import ConfigurationConflictError
from yaml_to_ts.ir.types import STRING, TemplateLiteral, TypeDef

PLACEHOLDER_START = "${"
PLACEHOLDER_END = "}"


def split_pattern(pattern: str) -> tuple[list[str], list[str]]:
    """Split a pattern into literal parts and placeholder expressions.

    ``${}`` yields an empty expression (plain ``string``).

    Args:
    ----
        pattern: Pattern text.

    Returns:
    -------
        ``(parts, expressions)`` with one more part than expressions.

    Raises:
    ------
        ConfigurationConflictError: If a placeholder is not terminated.

    """
    parts: list[str] = []
    expressions: list[str] = []
    rest = pattern
    while True:
        start = rest.find(PLACEHOLDER_START)
        if start < 0:
            parts.append(rest)
            return parts, expressions
        end = rest.find(PLACEHOLDER_END, start + len(PLACEHOLDER_START))
        if end < 0:
            raise ConfigurationConflictError(
                f"Unterminated placeholder in pattern '{pattern}'",
                attribute="pattern",
            )
        parts.append(rest[:start])
        expressions.append(rest[start + len(PLACEHOLDER_START) : end].strip())
        rest = rest[end + len(PLACEHOLDER_END) :]


def build_template(parts: list[str], types: list[TypeDef | None]) -> TemplateLiteral:
    """Assemble a TemplateLiteral; ``None`` types become ``string``."""
    return TemplateLiteral(
        tuple(parts),
        tuple(STRING if t is None else t for t in types),
    )
