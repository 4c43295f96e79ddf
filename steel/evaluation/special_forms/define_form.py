from steel import EvaluatorFn
from steel import SExpression, SteelVal
from steel.errors import SteelTypeMismatch
from steel.evaluation.checks import check_length
from steel.types.environment import Environment
from steel.types.expr import LAMBDA, ListVal, identifier_name
from steel.types.lambda_fn import Lambda
from steel.types.void import Void


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SteelVal:
    """
    (define name value)
    (define (name params...) body)  ; shorthand for (define name (lambda (params...) body))
    """
    check_length("Define", tail, 2)
    target, body = tail

    name = identifier_name(target)
    if name is None:
        if not isinstance(target, ListVal):
            raise SteelTypeMismatch(f"Define expects an identifier, got: {target}")
        if len(target) == 0:
            raise SteelTypeMismatch("Define expected an identifier, got empty list")
        name = identifier_name(target[0])
        if name is None:
            raise SteelTypeMismatch(f"Define expected identifier, got: {target}")
        body = ListVal((LAMBDA, ListVal(target.items[1:]), body))

    value = evaluate_fn(body, env)
    if isinstance(value, Lambda) and value.name is None:
        value.name = name
    env.define(name, value)
    return Void
