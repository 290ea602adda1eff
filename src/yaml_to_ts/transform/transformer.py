"""Main declaration-file to IR transformer."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from yaml_to_ts.ir.registry import TypeRegistry
from yaml_to_ts.models.root import TypeSchema
from yaml_to_ts.transform.builder import DeclaredType, SchemaType

logger = logging.getLogger(__name__)


class SchemaToIRTransformer:
    """Transform a validated declaration file into a populated registry.

    Every declared type is registered in document order; referenced
    types are registered on first use, so the registry's first-registration
    order follows the document wherever dependencies allow.

    Usage:
        transformer = SchemaToIRTransformer()
        registry = transformer.transform(schema)
        print(registry.render_exported())
    """

    def __init__(self, extra_types: Sequence[DeclaredType] = ()) -> None:
        """Initialize the transformer.

        Args:
        ----
            extra_types: Hand-written declared types that declarations may
                reference by name. They are only registered when used.

        """
        self._extra_types = tuple(extra_types)

    def build_scope(self, schema: TypeSchema) -> dict[str, DeclaredType]:
        """Create the declared types of a document, keyed by declared name.

        The first declaration of a name wins in the scope; duplicates are
        still registered and fail there if they differ.
        """
        scope: dict[str, DeclaredType] = {t.name: t for t in self._extra_types}
        for declaration in schema.types:
            scope.setdefault(declaration.name, SchemaType(declaration, scope))
        return scope

    def transform(self, schema: TypeSchema, registry: TypeRegistry | None = None) -> TypeRegistry:
        """Register every declared type of a document.

        Args:
        ----
            schema: Validated declaration file.
            registry: Registry to populate (a new one when omitted).

        Returns:
        -------
            The populated registry.

        Raises:
        ------
            TypeGenError: If any declaration cannot be built. Registrations
                of the failing declaration are rolled back.

        """
        if registry is None:
            registry = TypeRegistry()

        scope = self.build_scope(schema)
        for declaration in schema.types:
            declared = scope[declaration.name]
            if not isinstance(declared, SchemaType) or declared.declaration is not declaration:
                declared = SchemaType(declaration, scope)
            declared.register(registry)

        logger.info(
            "Registered %d type(s) from %d declaration(s)", len(registry), len(schema.types)
        )
        return registry
