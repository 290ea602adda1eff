"""Identifier case conversion for ``rename_all``."""

from __future__ import annotations

import re
from enum import Enum

from yaml_to_ts.errors import ConfigurationConflictError

# An acronym run keeps all but its last capital ("HTMLParser" -> "HTML", "Parser").
# Digits stick to the word before them.
_WORD = re.compile(r"[A-Z0-9]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z0-9]+")
_SEPARATORS = re.compile(r"[_\-\s]+")


class RenameRule(str, Enum):
    """Naming conventions accepted by ``rename_all``."""

    CAMEL = "camelCase"
    PASCAL = "PascalCase"
    SNAKE = "snake_case"
    SCREAMING_SNAKE = "SCREAMING_SNAKE_CASE"
    KEBAB = "kebab-case"
    SCREAMING_KEBAB = "SCREAMING-KEBAB-CASE"

    @classmethod
    def parse(
        cls,
        value: str | RenameRule,
        type_name: str | None = None,
        attribute: str = "rename_all",
    ) -> RenameRule:
        """Look up a convention by its name.

        Args:
        ----
            value: Convention name, e.g. ``"camelCase"``.
            type_name: Declared type, for error context.
            attribute: Attribute name, for error context.

        Returns:
        -------
            The matching RenameRule.

        Raises:
        ------
            ConfigurationConflictError: If ``value`` names no convention.

        """
        try:
            return cls(value)
        except ValueError as e:
            choices = ", ".join(rule.value for rule in cls)
            raise ConfigurationConflictError(
                f"Invalid naming convention '{value}'. Expected one of: {choices}",
                type_name=type_name,
                attribute=attribute,
            ) from e

    def apply(self, name: str) -> str:
        """Convert ``name`` to this convention."""
        return convert_case(name, self)


def split_words(name: str) -> list[str]:
    """Split an identifier into words.

    Splits on ``_`` and ``-``, on lower-to-upper transitions and before
    the last capital of an acronym run.

    Examples
    --------
        >>> split_words("user_id")
        ['user', 'id']
        >>> split_words("HTMLParser")
        ['HTML', 'Parser']

    """
    words: list[str] = []
    for chunk in _SEPARATORS.split(name):
        words.extend(_WORD.findall(chunk))
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def convert_case(name: str, rule: RenameRule) -> str:
    """Convert an identifier to a naming convention.

    Args:
    ----
        name: Identifier in any of the supported conventions.
        rule: Target convention.

    Returns:
    -------
        The converted identifier. Names without any word characters are
        returned unchanged.

    """
    words = split_words(name)
    if not words:
        return name

    if rule is RenameRule.CAMEL:
        return words[0].lower() + "".join(_capitalize(w) for w in words[1:])
    if rule is RenameRule.PASCAL:
        return "".join(_capitalize(w) for w in words)
    if rule is RenameRule.SNAKE:
        return "_".join(w.lower() for w in words)
    if rule is RenameRule.SCREAMING_SNAKE:
        return "_".join(w.upper() for w in words)
    if rule is RenameRule.KEBAB:
        return "-".join(w.lower() for w in words)
    return "-".join(w.upper() for w in words)
