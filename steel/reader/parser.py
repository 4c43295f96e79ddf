"""
  steel Reader: Parser

- Streaming, lazy parsing: a Parser is an iterator of top-level expressions,
  each one read only when asked for.
- Nested lists and quote markers are tracked on an explicit stack of frames
  in progress, so nesting depth is limited by memory rather than by Python's
  recursion limit.
- Identifiers go through an InternTable: the same name always yields the same
  Atom object for the lifetime of the table.
- 'x is expanded to (quote x), sharing the table's `quote` atom.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from steel.errors import SteelUnexpectedEOF, SteelUnexpectedError
from steel.reader.intern import InternTable
from steel.reader.lexer import lex
from steel.reader.tokens import Token, TokenKind
from steel.types.expr import Atom, Expr, ListVal

# Stack marker for a ' still waiting for its operand
_PENDING_QUOTE = None


class Parser:
    def __init__(self, source: str | Iterable[Token], intern: InternTable | None = None):
        self.tokens: Iterator[Token] = iter(lex(source) if isinstance(source, str) else source)
        self.intern: InternTable = intern if intern is not None else InternTable()

    def __iter__(self) -> Parser:
        return self

    def __next__(self) -> Expr:
        # StopIteration from the token stream ends the sequence of expressions
        token = next(self.tokens)
        return self._read(token)

    def _atom(self, token: Token) -> Atom:
        if token.kind is TokenKind.IDENTIFIER:
            return self.intern.intern(token)
        return Atom(token)

    def _read(self, token: Token) -> Expr:
        """Read one complete expression starting at `token`.

        A finished expression is wrapped once per pending quote on top of the
        stack, then appended to the enclosing list or returned.
        """
        stack: list[list[Expr] | None] = []

        while True:
            expr: Expr | None = None
            match token.kind:
                case TokenKind.QUOTE:
                    stack.append(_PENDING_QUOTE)
                case TokenKind.OPEN_PAREN:
                    stack.append([])
                case TokenKind.CLOSE_PAREN:
                    if not stack or stack[-1] is _PENDING_QUOTE:
                        raise SteelUnexpectedError(token)
                    expr = ListVal(tuple(stack.pop()))
                case _:
                    expr = self._atom(token)

            if expr is not None:
                while stack and stack[-1] is _PENDING_QUOTE:
                    stack.pop()
                    expr = ListVal((self.intern.quote_symbol(), expr))
                if not stack:
                    return expr
                stack[-1].append(expr)

            token = next(self.tokens, None)
            if token is None:
                raise SteelUnexpectedEOF()


def parse(source: str, intern: InternTable | None = None) -> Parser:
    """Return a lazy iterator of the top-level expressions in `source`."""
    return Parser(source, intern)


def parse_all(source: str, intern: InternTable | None = None) -> list[Expr]:
    return list(Parser(source, intern))
