from steel import EvaluatorFn
from steel import SExpression, SteelVal
from steel.evaluation.checks import check_length, parse_list_of_identifiers
from steel.types.environment import Environment
from steel.types.lambda_fn import Lambda


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SteelVal:
    """(lambda (params...) body) closes over the current environment."""
    check_length("Lambda", tail, 2)
    params, body = tail
    return Lambda(parse_list_of_identifiers(params), body, env)
