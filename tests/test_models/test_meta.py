"""Tests for Meta section models."""

import pytest
from pydantic import ValidationError
from yaml_to_ts.models.meta import Meta


class TestMeta:
    """Tests for Meta model."""

    def test_empty(self) -> None:
        """All meta fields are optional."""
        meta = Meta()
        assert meta.author is None
        assert meta.version is None
        assert meta.description is None

    def test_full(self) -> None:
        """Should accept every field."""
        meta = Meta(author="Platform Team", version="1.2.0", description="Payloads")
        assert meta.author == "Platform Team"
        assert meta.version == "1.2.0"

    @pytest.mark.parametrize("version", ["1.0.0", "2.1.0-beta.1", "1.0.0+build.5", "10.20.30"])
    def test_valid_versions(self, version: str) -> None:
        """Should accept semantic versions."""
        assert Meta(version=version).version == version

    @pytest.mark.parametrize("version", ["1.0", "v1.0.0", "1.0.0.0", "latest"])
    def test_invalid_versions(self, version: str) -> None:
        """Should reject other version strings."""
        with pytest.raises(ValidationError, match="Invalid semver format"):
            Meta(version=version)

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            Meta.model_validate({"authors": "x"})
