"""Validator that performs a trial build of the declaration file."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from yaml_to_ts.errors import (
    ConfigurationConflictError,
    IdentityCollisionError,
    TypeGenError,
    UnresolvedReferenceError,
)
from yaml_to_ts.validation.base import BaseValidator
from yaml_to_ts.validation.consistency_validators import RENAME_ATTRIBUTES
from yaml_to_ts.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from yaml_to_ts.models.root import TypeSchema

logger = logging.getLogger(__name__)


def error_code(error: TypeGenError) -> str:
    """Map a build error to the validation code reporting it."""
    if isinstance(error, IdentityCollisionError):
        return ErrorCodes.E101_DUPLICATE_TYPE_NAME
    if isinstance(error, UnresolvedReferenceError):
        return ErrorCodes.E001_UNDEFINED_TYPE
    if isinstance(error, ConfigurationConflictError):
        if error.attribute in RENAME_ATTRIBUTES:
            return ErrorCodes.E300_INVALID_RENAME_RULE
        return ErrorCodes.E301_CONFLICTING_ATTRIBUTES
    return ErrorCodes.E400_UNSUPPORTED_TYPE


class BuildValidator(BaseValidator):
    """Registers and renders every declaration, reporting the first failure.

    Catches what static checks cannot see, such as recursive inlining or
    a flattened type that is not a record.
    """

    def validate(
        self,
        schema: TypeSchema,
        result: ValidationResult,
    ) -> None:
        """Run the transformer and renderer on the document."""
        from yaml_to_ts.transform.transformer import SchemaToIRTransformer

        try:
            registry = SchemaToIRTransformer().transform(schema)
            registry.render()
        except TypeGenError as e:
            logger.debug("Trial build failed: %s", e)
            path = f"types.{e.type_name}" if e.type_name else "types"
            result.add_type_error(error_code(e), e, path)
