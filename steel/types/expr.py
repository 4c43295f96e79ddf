"""AST nodes produced by the reader and consumed by the evaluator.

Nodes are immutable and shared by reference: the interning table hands out
the same `Atom` object for every occurrence of an identifier, and desugaring
in the evaluator reuses subtrees instead of copying them. Equality is
structural, identity (`is`) is what interning guarantees.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from steel.reader.tokens import Token, TokenKind


@dataclass(frozen=True, slots=True)
class Atom:
    token: Token

    @property
    def is_identifier(self) -> bool:
        return self.token.kind is TokenKind.IDENTIFIER

    @property
    def name(self) -> str | None:
        """Identifier text, or None for literal atoms."""
        return self.token.value if self.is_identifier else None

    def __str__(self) -> str:
        return str(self.token)

    def __repr__(self) -> str:
        return f"Atom({self.token!r})"


@dataclass(frozen=True, slots=True)
class ListVal:
    items: tuple[Expr, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.items) + ")"

    def __repr__(self) -> str:
        return f"ListVal({list(self.items)!r})"


Expr = Union[Atom, ListVal]


def identifier(name: str) -> Atom:
    """A fresh, non-interned identifier atom (used when desugaring)."""
    return Atom(Token.identifier(name))


def identifier_name(expr: Expr) -> str | None:
    """Return the identifier text of `expr`, or None if it is not an identifier atom."""
    if isinstance(expr, Atom) and expr.is_identifier:
        return expr.token.value
    return None


# Head of the lambda forms synthesized by define and let
LAMBDA = identifier("lambda")
