"""Tests for template-literal patterns."""

import pytest
from yaml_to_ts.errors import ConfigurationConflictError
from yaml_to_ts.ir.types import NUMBER, STRING, TemplateLiteral
from yaml_to_ts.transform.pattern import build_template, split_pattern


class TestSplitPattern:
    """Tests for split_pattern."""

    def test_no_placeholder(self) -> None:
        """A plain pattern is a single part."""
        assert split_pattern("plain") == (["plain"], [])

    def test_single_placeholder(self) -> None:
        """Parts surround the placeholder expression."""
        assert split_pattern("order-${u32}") == (["order-", ""], ["u32"])

    def test_multiple_placeholders(self) -> None:
        """Expressions are stripped of surrounding whitespace."""
        assert split_pattern("a${ b }c${d}") == (["a", "c", ""], ["b", "d"])

    def test_empty_placeholder(self) -> None:
        """'${}' yields an empty expression."""
        assert split_pattern("${}") == (["", ""], [""])

    def test_unterminated(self) -> None:
        """A placeholder without '}' is rejected."""
        with pytest.raises(ConfigurationConflictError, match="Unterminated") as exc_info:
            split_pattern("order-${u32")
        assert exc_info.value.attribute == "pattern"


class TestBuildTemplate:
    """Tests for build_template."""

    def test_none_becomes_string(self) -> None:
        """Placeholders without an expression are strings."""
        assert build_template(["id-", "-", ""], [None, NUMBER]) == TemplateLiteral(
            ("id-", "-", ""), (STRING, NUMBER)
        )

    def test_arity_is_checked(self) -> None:
        """Parts must outnumber types by one."""
        with pytest.raises(ValueError, match="needs 2 parts"):
            build_template(["a"], [NUMBER])
