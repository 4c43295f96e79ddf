"""Closure representation for steel."""

from __future__ import annotations

from io import StringIO

from steel import SExpression, SteelVal
from steel.types.environment import Environment


class Lambda:
    """A first-class closure: parameter names, a shared body, and its defining env."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self, params: list[str], body: SExpression, env: Environment, name: str | None = None
    ):
        self.params: list[str] = params
        self.body: SExpression = body
        self.env: Environment = env
        # set by `define` for nicer display only
        self.name: str | None = name

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        if self.name:
            return f"#<lambda {self.name} ({' '.join(self.params)})>"
        return f"#<lambda ({' '.join(self.params)})>"

    def extend_env(self, args: list[SteelVal]) -> Environment:
        """
        Bind the given argument values to this lambda's parameters in a new
        child of the captured environment and return it for evaluating the body.
        """
        new_env = self.env.new_child()
        new_env.define_all(self.params, args)
        return new_env
