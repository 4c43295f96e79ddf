"""Session-scoped interning of identifier atoms."""

from __future__ import annotations

from steel.reader.tokens import Token
from steel.types.expr import Atom

QUOTE = "quote"


class InternTable:
    """Maps identifier text to the single shared `Atom` for that name.

    One table lives as long as an interpreter session; every parser created
    against it reuses the same atoms, so `a` parsed twice is the same object.
    """

    __slots__ = ("atoms",)

    def __init__(self):
        self.atoms: dict[str, Atom] = {}

    def intern(self, token: Token) -> Atom:
        """Return the shared atom for an identifier token, registering it on first sight."""
        atom = self.atoms.get(token.value)
        if atom is None:
            atom = Atom(token)
            self.atoms[token.value] = atom
        return atom

    def intern_name(self, name: str) -> Atom:
        return self.intern(Token.identifier(name))

    def quote_symbol(self) -> Atom:
        """The `quote` atom used when expanding 'x into (quote x)."""
        return self.intern_name(QUOTE)

    def clear(self) -> None:
        self.atoms.clear()

    def __contains__(self, name: str) -> bool:
        return name in self.atoms

    def __len__(self) -> int:
        return len(self.atoms)

    def __repr__(self) -> str:
        return f"<InternTable {len(self.atoms)} atoms>"
