from steel import SExpression
from steel.types.environment import Environment


class TailCall:
    """Loop state handed back to the trampoline: continue with `expr` under `env`."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env

    def __repr__(self):
        return f"TailCall({self.expr})"
