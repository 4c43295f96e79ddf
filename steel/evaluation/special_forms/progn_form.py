from steel import EvaluatorFn
from steel import SExpression
from steel.errors import SteelArityMismatch
from steel.types.environment import Environment
from steel.types.tail_call import TailCall


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    if not tail:
        raise SteelArityMismatch("Begin: expected at least 1 args got 0")
    # intermediate results are thrown away
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return TailCall(tail[-1], env)
