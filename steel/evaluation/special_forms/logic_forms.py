from steel import EvaluatorFn
from steel import SExpression, SteelVal
from steel.types.environment import Environment


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SteelVal:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns #f as soon
    as one evaluates to #f. Non-boolean results do not stop the scan. Returns #t
    otherwise, including for (and).
    """
    for expr in tail:
        if evaluate_fn(expr, env) is False:
            return False
    return True


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SteelVal:
    """Short-circuiting logical OR special form.

    (or a b c ...) returns #t as soon as an operand evaluates to #t, otherwise #f.
    (or) is #f.
    """
    for expr in tail:
        if evaluate_fn(expr, env) is True:
            return True
    return False
