"""Token model shared by the lexer and parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class TokenKind(Enum):
    OPEN_PAREN = "OpenParen"
    CLOSE_PAREN = "CloseParen"
    QUOTE = "QuoteTick"
    IDENTIFIER = "Identifier"
    NUMBER = "NumberLiteral"
    STRING = "StringLiteral"
    BOOLEAN = "BooleanLiteral"
    CHARACTER = "CharacterLiteral"


TokenValue = Union[str, float, bool, None]

NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
    "tab": "\t",
    "return": "\r",
}
_CHAR_NAMES = {c: name for name, c in NAMED_CHARS.items()}


@dataclass(frozen=True)
class Token:
    """An immutable lexical unit.

    `pos` is the source offset the token started at. It is informational only
    and does not take part in equality, so tokens compare by kind and value.
    """

    kind: TokenKind
    value: TokenValue = None
    pos: int = field(default=-1, compare=False)

    # --- Constructors ---
    @classmethod
    def open_paren(cls, pos: int = -1) -> Token:
        return cls(TokenKind.OPEN_PAREN, None, pos)

    @classmethod
    def close_paren(cls, pos: int = -1) -> Token:
        return cls(TokenKind.CLOSE_PAREN, None, pos)

    @classmethod
    def quote(cls, pos: int = -1) -> Token:
        return cls(TokenKind.QUOTE, None, pos)

    @classmethod
    def identifier(cls, name: str, pos: int = -1) -> Token:
        return cls(TokenKind.IDENTIFIER, name, pos)

    @classmethod
    def number(cls, n: float, pos: int = -1) -> Token:
        return cls(TokenKind.NUMBER, float(n), pos)

    @classmethod
    def string(cls, s: str, pos: int = -1) -> Token:
        return cls(TokenKind.STRING, s, pos)

    @classmethod
    def boolean(cls, b: bool, pos: int = -1) -> Token:
        return cls(TokenKind.BOOLEAN, bool(b), pos)

    @classmethod
    def character(cls, c: str, pos: int = -1) -> Token:
        return cls(TokenKind.CHARACTER, c, pos)

    def is_identifier(self, name: str | None = None) -> bool:
        if self.kind is not TokenKind.IDENTIFIER:
            return False
        return name is None or self.value == name

    def __str__(self) -> str:
        match self.kind:
            case TokenKind.OPEN_PAREN:
                return "("
            case TokenKind.CLOSE_PAREN:
                return ")"
            case TokenKind.QUOTE:
                return "'"
            case TokenKind.BOOLEAN:
                return "#t" if self.value else "#f"
            case TokenKind.NUMBER:
                n = self.value
                return str(int(n)) if n.is_integer() else repr(n)
            case TokenKind.STRING:
                escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
                return f'"{escaped}"'
            case TokenKind.CHARACTER:
                return f"#\\{_CHAR_NAMES.get(self.value, self.value)}"
        return str(self.value)

    def __repr__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}({self.value!r})"
