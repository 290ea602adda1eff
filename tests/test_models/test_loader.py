"""Tests for YAML/JSON loader utilities."""

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError
from yaml_to_ts.models.loader import (
    LoaderError,
    load_type_schema,
    load_yaml_file,
    validate_type_schema,
)


class TestLoadYamlFile:
    """Tests for load_yaml_file function."""

    def test_load_valid_yaml(self, tmp_path: Path) -> None:
        """Should load valid YAML file."""
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("key: value\nnumber: 42")

        assert load_yaml_file(yaml_file) == {"key": "value", "number": 42}

    def test_load_valid_json(self, tmp_path: Path) -> None:
        """Should load valid JSON file."""
        json_file = tmp_path / "test.json"
        json_file.write_text('{"key": "value", "number": 42}')

        assert load_yaml_file(json_file) == {"key": "value", "number": 42}

    def test_file_not_found(self, tmp_path: Path) -> None:
        """Should raise LoaderError for missing file."""
        with pytest.raises(LoaderError, match="File not found") as exc_info:
            load_yaml_file(tmp_path / "nonexistent.yaml")
        assert exc_info.value.path == tmp_path / "nonexistent.yaml"

    def test_directory(self, tmp_path: Path) -> None:
        """Should raise LoaderError for a directory."""
        directory = tmp_path / "dir.yaml"
        directory.mkdir()

        with pytest.raises(LoaderError, match="Not a file"):
            load_yaml_file(directory)

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        """Should raise LoaderError for unsupported extension."""
        txt_file = tmp_path / "test.txt"
        txt_file.write_text("content")

        with pytest.raises(LoaderError, match="Unsupported file extension"):
            load_yaml_file(txt_file)

    def test_empty_file(self, tmp_path: Path) -> None:
        """Should raise LoaderError for empty file."""
        empty_file = tmp_path / "empty.yaml"
        empty_file.write_text("")

        with pytest.raises(LoaderError, match="Declaration file is empty"):
            load_yaml_file(empty_file)

    def test_invalid_yaml_syntax(self, tmp_path: Path) -> None:
        """Should raise LoaderError for invalid YAML."""
        invalid_file = tmp_path / "invalid.yaml"
        invalid_file.write_text("key: [unclosed bracket")

        with pytest.raises(LoaderError, match="YAML parsing error"):
            load_yaml_file(invalid_file)

    def test_non_dict_root(self, tmp_path: Path) -> None:
        """Should raise LoaderError if root is not a dict."""
        list_file = tmp_path / "list.yaml"
        list_file.write_text("- item1\n- item2")

        with pytest.raises(LoaderError) as exc_info:
            load_yaml_file(list_file)
        assert exc_info.value.message == (
            "Expected a mapping with 'schema' and 'types' at the root, got list"
        )

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Should raise LoaderError for a file that is not UTF-8."""
        binary_file = tmp_path / "binary.yaml"
        binary_file.write_bytes(b"name: \xff\xfe\n")

        with pytest.raises(LoaderError, match="not valid UTF-8") as exc_info:
            load_yaml_file(binary_file)
        assert exc_info.value.path == binary_file


class TestLoadTypeSchema:
    """Tests for load_type_schema function."""

    def test_load_valid(self, tmp_path: Path) -> None:
        """Should load and validate a declaration file."""
        path = tmp_path / "types.yaml"
        path.write_text(
            dedent(
                """\
                schema: yaml-to-ts/v1
                types:
                  - name: User
                    fields:
                      - name: id
                        type: u64
                """
            )
        )

        schema = load_type_schema(path)

        assert schema.type_names == ["User"]

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Should raise pydantic's ValidationError for invalid content."""
        path = tmp_path / "types.yaml"
        path.write_text("schema: yaml-to-ts/v1\ntypes:\n  - name: 1bad\n")

        with pytest.raises(ValidationError):
            load_type_schema(path)


class TestValidateTypeSchema:
    """Tests for validate_type_schema function."""

    def test_valid(self, tmp_path: Path) -> None:
        """A valid file yields no errors."""
        path = tmp_path / "types.yaml"
        path.write_text("schema: yaml-to-ts/v1\ntypes: []\n")

        assert validate_type_schema(path) == []

    def test_loader_error(self, tmp_path: Path) -> None:
        """Loader errors are returned as a single message."""
        errors = validate_type_schema(tmp_path / "missing.yaml")

        assert len(errors) == 1
        assert "File not found" in errors[0]

    def test_validation_errors(self, tmp_path: Path) -> None:
        """Model errors are returned with their location."""
        path = tmp_path / "types.yaml"
        path.write_text("schema: yaml-to-ts/v1\nextra: 1\n")

        errors = validate_type_schema(path)

        assert len(errors) == 1
        assert errors[0].startswith("extra: ")
