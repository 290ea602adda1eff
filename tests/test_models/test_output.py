"""Tests for the output configuration model."""

import pytest
from pydantic import ValidationError
from yaml_to_ts.models.output import DEFAULT_HEADER, ExportStyle, OutputConfig


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_defaults(self) -> None:
        """Defaults produce named exports in a .ts file."""
        config = OutputConfig()
        assert config.path is None
        assert config.export_style == ExportStyle.NAMED
        assert config.header == DEFAULT_HEADER
        assert config.include_utilities is False
        assert config.multi_file is None
        assert config.extension == ".ts"

    def test_declaration_only_extension(self) -> None:
        """Declaration files use .d.ts."""
        assert OutputConfig(declaration_only=True).extension == ".d.ts"

    @pytest.mark.parametrize("style", ["none", "named", "grouped"])
    def test_export_styles(self, style: str) -> None:
        """All export styles are accepted."""
        assert OutputConfig.model_validate({"export_style": style}).export_style.value == style

    def test_invalid_export_style(self) -> None:
        """Unknown styles are rejected."""
        with pytest.raises(ValidationError):
            OutputConfig.model_validate({"export_style": "default"})

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            OutputConfig.model_validate({"file": "types.ts"})
