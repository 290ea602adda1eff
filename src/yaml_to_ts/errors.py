"""Build-time error taxonomy.

Every failure of the core is deterministic and carries enough context
(declared type, field, attribute) to locate its source. None of these
errors are recovered from: the offending registration fails before any
text is produced.
"""

from __future__ import annotations


class TypeGenError(Exception):
    """Base class for all type generation errors."""

    def __init__(
        self,
        message: str,
        type_name: str | None = None,
        field: str | None = None,
        attribute: str | None = None,
    ) -> None:
        """Initialize TypeGenError.

        Args:
        ----
            message: Error message describing what went wrong.
            type_name: Declared type being processed, if known.
            field: Field (or variant) being processed, if known.
            attribute: Attribute that triggered the error, if any.

        """
        self.message = message
        self.type_name = type_name
        self.field = field
        self.attribute = attribute
        super().__init__(self._format())

    @property
    def location(self) -> str:
        """Dotted location of the error, e.g. ``User.profile``."""
        return ".".join(part for part in (self.type_name, self.field) if part)

    def _format(self) -> str:
        prefix = self.location
        if self.attribute:
            prefix = f"{prefix} [{self.attribute}]" if prefix else f"[{self.attribute}]"
        return f"{prefix}: {self.message}" if prefix else self.message


class UnsupportedTypeError(TypeGenError):
    """A host type or attribute combination has no defined mapping."""


class ConfigurationConflictError(TypeGenError):
    """Mutually exclusive or invalid attributes were set together."""


class IdentityCollisionError(TypeGenError):
    """Two distinct declared types resolve to the same rendered name."""


class UnresolvedReferenceError(TypeGenError):
    """A referenced type name has no entry in the registry at render time."""
