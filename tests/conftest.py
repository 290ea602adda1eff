"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml
from yaml_to_ts.ir.registry import TypeRegistry
from yaml_to_ts.models.root import TypeSchema
from yaml_to_ts.transform.transformer import SchemaToIRTransformer

SCHEMA_ID = "yaml-to-ts/v1"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def make_schema() -> Callable[..., TypeSchema]:
    """Return a factory building a TypeSchema from type declaration dicts."""

    def _make(*types: dict[str, Any], **sections: Any) -> TypeSchema:
        return TypeSchema.model_validate({"schema": SCHEMA_ID, "types": list(types), **sections})

    return _make


@pytest.fixture
def build_registry(make_schema: Callable[..., TypeSchema]) -> Callable[..., TypeRegistry]:
    """Return a factory registering type declaration dicts."""

    def _build(*types: dict[str, Any]) -> TypeRegistry:
        return SchemaToIRTransformer().transform(make_schema(*types))

    return _build


@pytest.fixture
def render_types(build_registry: Callable[..., TypeRegistry]) -> Callable[..., str]:
    """Return a factory rendering type declaration dicts."""

    def _render(*types: dict[str, Any]) -> str:
        return build_registry(*types).render()

    return _render


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing a dict as YAML below tmp_path."""

    def _write(data: dict[str, Any], name: str = "types.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
