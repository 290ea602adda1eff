"""TypeScript rendering of IR type definitions."""

from yaml_to_ts.render.typescript import (
    render_declaration,
    render_generics,
    render_literal,
    render_type,
)

__all__ = [
    "render_declaration",
    "render_generics",
    "render_literal",
    "render_type",
]
