"""
  Lexer for steel source text.

- Streaming: `lex` is a generator, tokens are produced on demand.
- Emits `Token` values:

    - ( and )          -> OPEN_PAREN / CLOSE_PAREN
    - '                -> QUOTE
    - #t #f #true #false -> BOOLEAN
    - numbers          -> NUMBER (always float)
    - "..."            -> STRING (escapes resolved)
    - #\\a, #\\space   -> CHARACTER
    - anything else    -> IDENTIFIER
    - ; comments are skipped
"""

from __future__ import annotations

import re
from typing import Iterator

from steel.errors import SteelTokenError
from steel.reader.tokens import NAMED_CHARS, Token


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<char>#\\(?:newline|space|tab|return|.)(?=[\s()'\";]|$))"  # character literals, named or single-char
    r'|(?P<atom>[^\s()\'";]+)'  # fallback: numbers, booleans, identifiers
    , re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#true": True,
    "#f": False,
    "#false": False,
}

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    '"': '"',
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _unescape(body: str, pos: int) -> str:
    def _sub(m: re.Match) -> str:
        ch = m.group(1)
        if ch not in STRING_ESCAPES:
            raise SteelTokenError(f"Unknown string escape \\{ch}", pos)
        return STRING_ESCAPES[ch]

    return _ESCAPE_RE.sub(_sub, body)


def _atom_token(text: str, pos: int) -> Token:
    if text.startswith("#"):
        if text in BOOLEANS:
            return Token.boolean(BOOLEANS[text], pos)
        raise SteelTokenError(f"Unknown literal {text!r}", pos)
    if NUMBER_RE.fullmatch(text):
        return Token.number(float(text), pos)
    return Token.identifier(text, pos)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token values in source order."""
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise SteelTokenError("Unterminated string literal", pos)
            raise SteelTokenError(f"Unexpected char {source[pos]!r}", pos)

        start, pos = pos, m.end()
        kind = m.lastgroup
        text = m.group(kind)

        if kind == "comment":
            continue
        if kind == "lparen":
            yield Token.open_paren(start)
        elif kind == "rparen":
            yield Token.close_paren(start)
        elif kind == "quote":
            yield Token.quote(start)
        elif kind == "string":
            yield Token.string(_unescape(text[1:-1], start), start)
        elif kind == "char":
            val = text[2:]  # strip off "#\"
            yield Token.character(val if len(val) == 1 else NAMED_CHARS[val], start)
        else:
            yield _atom_token(text, start)
