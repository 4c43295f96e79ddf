"""Operand validation shared by the special forms."""

from collections.abc import Sequence

from steel import SExpression
from steel.errors import SteelArityMismatch, SteelTypeMismatch
from steel.types.expr import ListVal, identifier_name


def check_length(what: str, tail: Sequence[SExpression], expected: int) -> None:
    """Raise SteelArityMismatch unless `tail` has exactly `expected` operands."""
    if len(tail) != expected:
        raise SteelArityMismatch(f"{what}: expected {expected} args got {len(tail)}")


def parse_list_of_identifiers(params: SExpression) -> list[str]:
    """Return the names in a parameter list such as (a b c)."""
    if not isinstance(params, ListVal):
        raise SteelTypeMismatch(f"Expected a list of identifiers, got {params}")
    names = []
    for p in params:
        name = identifier_name(p)
        if name is None:
            raise SteelTypeMismatch(f"Lambda must have symbols as arguments, got {p}")
        names.append(name)
    return names
