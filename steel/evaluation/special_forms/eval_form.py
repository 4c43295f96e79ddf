from steel import EvaluatorFn
from steel import SExpression, SteelVal
from steel.evaluation.checks import check_length
from steel.types.environment import Environment
from steel.types.values import value_to_expr


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SteelVal:
    """(eval e): evaluate e, turn the result back into syntax, evaluate that here."""
    check_length("Eval", tail, 1)
    expr = value_to_expr(evaluate_fn(tail[0], env))
    # Same environment as the eval form itself, so local bindings are visible.
    return evaluate_fn(expr, env)
