"""Core evaluator and trampoline for the steel interpreter.

`evaluate` loops over an (expr, env) pair. Special forms in tail position
(if, let, begin) and lambda application return a TailCall; the loop replaces
its state with it and goes round again instead of recursing. Python stack is
only consumed by genuinely nested evaluation: the operator, the operands, the
test of an `if`, the operand of `eval`, and so on.
"""

from __future__ import annotations

from steel import SExpression, SteelVal
from steel.errors import SteelTypeMismatch, SteelUnexpectedToken
from steel.evaluation.apply import apply
from steel.evaluation.special_forms import SPECIAL_FORMS
from steel.reader.tokens import Token, TokenKind
from steel.types.environment import Environment
from steel.types.expr import Atom, ListVal, identifier_name
from steel.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment) -> SteelVal:
    """
    Trampoline evaluator: tail-call aware evaluation.
    """
    while True:
        match expr:
            case Atom(token=token):
                return eval_atom(token, env)

            case ListVal(items=()):
                raise SteelTypeMismatch("Given empty list")

            case ListVal(items=items):
                head = items[0]
                form = SPECIAL_FORMS.get(identifier_name(head))
                if form is not None:
                    result = form(items[1:], env, evaluate)
                else:
                    result = apply(evaluate(head, env), items[1:], env, evaluate)

                if isinstance(result, TailCall):
                    expr, env = result.expr, result.env
                    continue
                return result

            case _:
                raise SteelTypeMismatch(f"Cannot evaluate {expr!r}")


def eval_atom(token: Token, env: Environment) -> SteelVal:
    """Evaluate a single atom: literals are self-evaluating, identifiers are looked up."""
    match token.kind:
        case TokenKind.BOOLEAN | TokenKind.NUMBER | TokenKind.STRING:
            return token.value
        case TokenKind.IDENTIFIER:
            return env.lookup(token.value)
    raise SteelUnexpectedToken(f"Unexpected token: {token!r}")
