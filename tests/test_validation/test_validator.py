"""Tests for the main declaration-file validator."""

from collections.abc import Callable

import pytest
from yaml_to_ts.models.root import TypeSchema
from yaml_to_ts.validation import ErrorCodes, TypeSchemaValidator, ValidationError

from tests.fixtures.sample_yamls import FULL_YAML

MakeSchema = Callable[..., TypeSchema]

RECURSIVE_INLINE = {"name": "Node", "fields": [{"name": "next", "type": "Node", "inline": True}]}
SINGLE_VARIANT = {"name": "E", "variants": [{"name": "A"}]}
UNDEFINED = {"name": "A", "fields": [{"name": "x", "type": "Missing"}]}


class TestTypeSchemaValidator:
    """Tests for TypeSchemaValidator."""

    def test_full_document_is_valid(self) -> None:
        """The full sample has no issues."""
        result = TypeSchemaValidator().validate(TypeSchema.model_validate(FULL_YAML))
        assert result.issues == []

    def test_collects_static_issues(self, make_schema: MakeSchema) -> None:
        """Issues of all static validators are collected."""
        schema = make_schema(UNDEFINED, {"name": "A"}, SINGLE_VARIANT)

        result = TypeSchemaValidator().validate(schema)

        codes = {i.code for i in result.issues}
        assert codes == {
            ErrorCodes.E001_UNDEFINED_TYPE,
            ErrorCodes.E100_DUPLICATE_DECLARATION,
            ErrorCodes.W002_SINGLE_VARIANT_ENUM,
        }

    def test_build_runs_after_static_checks(self, make_schema: MakeSchema) -> None:
        """The trial build reports what static checks cannot see."""
        result = TypeSchemaValidator().validate(make_schema(RECURSIVE_INLINE))
        assert [i.code for i in result.errors] == [ErrorCodes.E400_UNSUPPORTED_TYPE]

    def test_build_skipped_on_static_errors(self, make_schema: MakeSchema) -> None:
        """The trial build does not run when static checks fail."""
        result = TypeSchemaValidator().validate(make_schema(RECURSIVE_INLINE, UNDEFINED))
        assert [i.code for i in result.errors] == [ErrorCodes.E001_UNDEFINED_TYPE]

    def test_build_disabled(self, make_schema: MakeSchema) -> None:
        """build=False skips the trial build."""
        result = TypeSchemaValidator(build=False).validate(make_schema(RECURSIVE_INLINE))
        assert result.is_valid


class TestValidateAndRaise:
    """Tests for validate_and_raise."""

    def test_valid(self, make_schema: MakeSchema) -> None:
        """Valid documents do not raise."""
        TypeSchemaValidator().validate_and_raise(make_schema({"name": "A"}))

    def test_warnings_allowed(self, make_schema: MakeSchema) -> None:
        """Warnings do not raise unless strict."""
        TypeSchemaValidator().validate_and_raise(make_schema(SINGLE_VARIANT))

    def test_strict_warnings(self, make_schema: MakeSchema) -> None:
        """Strict mode raises on warnings."""
        with pytest.raises(ValidationError, match=r"Validation failed: 1 warning\(s\)"):
            TypeSchemaValidator(strict=True).validate_and_raise(make_schema(SINGLE_VARIANT))

    def test_errors(self, make_schema: MakeSchema) -> None:
        """Errors raise with formatted issues."""
        with pytest.raises(ValidationError) as exc_info:
            TypeSchemaValidator().validate_and_raise(make_schema(UNDEFINED, SINGLE_VARIANT))

        error = exc_info.value
        assert str(error) == "Validation failed: 1 error(s), 1 warning(s)"
        assert error.format_issues().splitlines() == [
            "ERROR: [E001] ERROR 'Missing' references undefined type 'Missing' "
            "at types.A.fields.x.type (hint: Define 'Missing' in the 'types' section)",
            "WARNING: [W002] WARNING Enum 'E' has a single variant "
            "at types.E.variants (hint: Consider a struct, or add the missing variants)",
        ]
        assert len(error.errors_only) == 1
