"""Parser for host type expressions such as ``map<string, list<u32>>``.

Grammar::

    type  := NAME [ "<" type ("," type)* ">" ]
           | "(" ")"                            unit
           | "(" type ")"                       grouping
           | "(" type ("," type)* [","] ")"     tuple (trailing comma required for one)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from yaml_to_ts.errors import UnsupportedTypeError

_TOKEN = re.compile(r"\s*(?:([A-Za-z_][A-Za-z0-9_]*)|(.))")


@dataclass(frozen=True)
class HostType:
    """A parsed host type expression.

    Attributes
    ----------
        name: Type name (``u32``, ``list``, ``User``). Unit is ``unit`` and
            tuples are ``tuple``.
        args: Type arguments.

    """

    name: str
    args: tuple[HostType, ...] = ()

    def __str__(self) -> str:
        """Render the expression back in canonical form."""
        if not self.args:
            return self.name
        return f"{self.name}<{', '.join(str(a) for a in self.args)}>"


def _tokenize(text: str) -> list[str]:
    tokens = []
    pos = 0
    text = text.rstrip()
    while pos < len(text):
        match = _TOKEN.match(text, pos)
        if match is None:
            break
        tokens.append(match.group(1) or match.group(2))
        pos = match.end()
    return tokens


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens = _tokenize(text)
        self.pos = 0

    def error(self, message: str) -> UnsupportedTypeError:
        return UnsupportedTypeError(f"Invalid type expression '{self.text}': {message}")

    def peek(self) -> str | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def expect(self, token: str) -> None:
        actual = self.peek()
        if actual != token:
            found = f"'{actual}'" if actual is not None else "end of input"
            raise self.error(f"expected '{token}', found {found}")
        self.pos += 1

    def parse(self) -> HostType:
        result = self.parse_type()
        if self.peek() is not None:
            raise self.error(f"unexpected '{self.peek()}'")
        return result

    def parse_type(self) -> HostType:
        token = self.peek()
        if token is None:
            raise self.error("unexpected end of input")
        if token == "(":
            return self.parse_parenthesized()
        if not (token[0].isalpha() or token[0] == "_"):
            raise self.error(f"unexpected '{token}'")
        self.pos += 1
        if self.peek() != "<":
            return HostType(token)
        self.pos += 1
        args = [self.parse_type()]
        while self.peek() == ",":
            self.pos += 1
            args.append(self.parse_type())
        self.expect(">")
        return HostType(token, tuple(args))

    def parse_parenthesized(self) -> HostType:
        self.expect("(")
        if self.peek() == ")":
            self.pos += 1
            return HostType("unit")
        items = [self.parse_type()]
        trailing_comma = False
        while self.peek() == ",":
            self.pos += 1
            if self.peek() == ")":
                trailing_comma = True
                break
            items.append(self.parse_type())
        self.expect(")")
        if len(items) == 1 and not trailing_comma:
            return items[0]
        return HostType("tuple", tuple(items))


def parse_type_expression(text: str) -> HostType:
    """Parse a host type expression.

    Args:
    ----
        text: Expression such as ``optional<User>`` or ``(u8, string)``.

    Returns:
    -------
        Parsed HostType tree.

    Raises:
    ------
        UnsupportedTypeError: If the expression is malformed.

    """
    return _Parser(text).parse()
