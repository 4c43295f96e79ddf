"""Runtime value model and the expression <-> value conversions used by quote/eval.

steel values are:

    - booleans      -> bool
    - numbers       -> float
    - strings       -> str
    - void          -> Void
    - native fns    -> any Python callable taking a list of values
    - closures      -> Lambda
    - quoted syntax -> Quoted (identifiers, characters and lists under quote)
"""

from __future__ import annotations

from dataclasses import dataclass

from steel import SExpression, SteelVal
from steel.errors import SteelContractViolation
from steel.reader.tokens import Token, TokenKind
from steel.types.expr import Atom, Expr
from steel.types.lambda_fn import Lambda


@dataclass(frozen=True, slots=True)
class Quoted:
    """An unevaluated expression travelling through the value channel."""

    expr: Expr

    def __str__(self) -> str:
        return str(self.expr)

    def __repr__(self) -> str:
        return f"'{self.expr}"


def expr_to_value(expr: SExpression) -> SteelVal:
    """Convert syntax to a value without evaluating it (quote).

    Literal atoms become plain values; identifiers, characters and lists stay
    syntax and are wrapped in Quoted.
    """
    if isinstance(expr, Atom):
        match expr.token.kind:
            case TokenKind.BOOLEAN | TokenKind.NUMBER | TokenKind.STRING:
                return expr.token.value
    return Quoted(expr)


def value_to_expr(value: SteelVal) -> Expr:
    """Convert a value back into evaluable syntax (eval).

    Raises SteelContractViolation for values that have no syntactic form.
    """
    match value:
        case Quoted(expr=expr):
            return expr
        case bool():
            return Atom(Token.boolean(value))
        case float() | int():
            return Atom(Token.number(value))
        case str():
            return Atom(Token.string(value))
    raise SteelContractViolation(f"Eval not given an expression: {value!r}")


def is_procedure(value: SteelVal) -> bool:
    return isinstance(value, Lambda) or is_native(value)


def is_native(value: SteelVal) -> bool:
    return callable(value) and not isinstance(value, (Lambda, type))


def is_number(value: SteelVal) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
