from steel import EvaluatorFn
from steel import SExpression
from steel.evaluation.checks import check_length
from steel.types.environment import Environment
from steel.types.tail_call import TailCall


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    check_length("If", tail, 3)
    test_expr, then_expr, else_expr = tail

    # Only the boolean #t selects the then-branch; every other value falls through.
    if evaluate_fn(test_expr, env) is True:
        return TailCall(then_expr, env)
    return TailCall(else_expr, env)
