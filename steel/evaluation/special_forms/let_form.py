from steel import EvaluatorFn
from steel import SExpression
from steel.errors import SteelBadSyntax
from steel.evaluation.checks import check_length
from steel.types.environment import Environment
from steel.types.expr import LAMBDA, ListVal
from steel.types.tail_call import TailCall


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """
    (let ((a 10) (b 20)) body) is rewritten to ((lambda (a b) body) 10 20),
    so the new frame comes from ordinary lambda application.
    """
    check_length("Let", tail, 2)
    bindings, body = tail
    if not isinstance(bindings, ListVal):
        raise SteelBadSyntax(f"Let: expected a list of binding pairs, got {bindings}")

    names: list[SExpression] = []
    values: list[SExpression] = []
    for pair in bindings:
        if not isinstance(pair, ListVal) or len(pair) != 2:
            raise SteelBadSyntax(f"Let requires pairs for binding, got {pair}")
        names.append(pair[0])
        values.append(pair[1])

    application = ListVal((ListVal((LAMBDA, ListVal(tuple(names)), body)), *values))
    return TailCall(application, env)
