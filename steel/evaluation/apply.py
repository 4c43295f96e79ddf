"""Application engine for steel.

This module centralizes procedure application for the interpreter:
- Lambda application in tail position hands a TailCall back to the
  trampoline instead of recursing, which is what makes user-level tail
  recursion run in constant Python stack.
- Native functions are called directly with their evaluated arguments and
  never receive the environment.
- `apply_procedure` runs an already-evaluated procedure to completion; it is
  the entry point for callers outside the evaluator loop (the interpreter's
  `call`, and any layer that needs "call this closure, give me a value").
"""

from collections.abc import Sequence

from steel import EvaluatorFn, SExpression, SteelVal
from steel.errors import SteelTypeMismatch
from steel.printer import display
from steel.types.environment import Environment
from steel.types.lambda_fn import Lambda
from steel.types.tail_call import TailCall
from steel.types.values import is_native


def apply(
    head: SteelVal,
    operands: Sequence[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SteelVal | TailCall:
    """Apply an evaluated operator to unevaluated operands.

    - Lambda: evaluate the operands, bind them in a child of the closure's
      environment, and return a TailCall for the body.
    - Native function: evaluate the operands and return the call's result.
    - Anything else raises SteelTypeMismatch before any operand is evaluated.
    """
    match head:
        case Lambda():
            args = [evaluate_fn(x, env) for x in operands]
            return TailCall(head.body, head.extend_env(args))
        case _ if is_native(head):
            args = [evaluate_fn(x, env) for x in operands]
            # pure function doesn't need the env
            return head(args)
    raise SteelTypeMismatch(f"Application not a procedure: {display(head)}")


def apply_procedure(
    fn: SteelVal,
    args: Sequence[SteelVal],
    evaluate_fn: EvaluatorFn,
) -> SteelVal:
    """Apply a procedure value to already-evaluated arguments and return the result."""
    match fn:
        case Lambda():
            return evaluate_fn(fn.body, fn.extend_env(list(args)))
        case _ if is_native(fn):
            return fn(list(args))
    raise SteelTypeMismatch(f"Application not a procedure: {display(fn)}")
