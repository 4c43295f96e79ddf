from steel import EvaluatorFn
from steel import SExpression, SteelVal
from steel.errors import SteelTypeMismatch
from steel.evaluation.checks import check_length
from steel.types.environment import Environment
from steel.types.expr import identifier_name
from steel.types.void import Void


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SteelVal:
    check_length("Set", tail, 2)
    target, val_expr = tail
    name = identifier_name(target)
    if name is None:
        raise SteelTypeMismatch(f"set! first argument must be an identifier, got {target}")
    env.set(name, evaluate_fn(val_expr, env))
    return Void
