from steel import EvaluatorFn
from steel import SExpression, SteelVal
from steel.evaluation.checks import check_length
from steel.types.environment import Environment
from steel.types.values import expr_to_value


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> SteelVal:
    check_length("Quote", tail, 1)
    return expr_to_value(tail[0])
