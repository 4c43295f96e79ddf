"""Runtime environment for steel.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. A fresh child frame is created for every
procedure call; closures keep their defining frame alive by referencing it.
Frames never reference their children.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from steel import SteelVal
from steel.errors import SteelArityMismatch, SteelTypeMismatch, SteelUnboundIdentifier


class Environment:
    """Hierarchical mapping from names to steel values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, SteelVal] = {}
        self.outer: Environment | None = outer

    def new_child(self) -> Environment:
        """Return an empty frame whose parent is this environment."""
        return Environment(outer=self)

    def define(self, name: str, value: SteelVal) -> None:
        """Bind `name` to `value` in this frame, overwriting any existing binding."""
        if not isinstance(name, str):
            raise SteelTypeMismatch(f"Cannot define {name!r}: expected an identifier")
        self.vars[name] = value

    def define_all(self, names: list[str], values: list[SteelVal]) -> None:
        """Bind parameter names to argument values positionally.

        Raises SteelArityMismatch if the two lists differ in length.
        """
        if len(names) != len(values):
            raise SteelArityMismatch(
                f"Arity mismatch: expected {len(names)} args got {len(values)}"
            )
        for name, value in zip(names, values):
            self.vars[name] = value

    def define_zipped(self, pairs: Iterable[tuple[str, SteelVal]]) -> None:
        """Bulk-define (name, value) pairs in this frame."""
        for name, value in pairs:
            self.define(name, value)

    def update(self, mapping: dict[str, SteelVal]) -> None:
        self.define_zipped(mapping.items())

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: str, value: SteelVal) -> None:
        """Update the nearest existing binding for `name` (set!).

        Raises SteelUnboundIdentifier if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise SteelUnboundIdentifier(f"Cannot set! unbound identifier {name}")
        env.vars[name] = value

    def lookup(self, name: str) -> SteelVal:
        """Look up the value bound to `name`, searching outward to the root."""
        env: Optional[Environment] = self
        while env is not None:
            vars_ = env.vars
            if name in vars_:
                return vars_[name]
            env = env.outer
        raise SteelUnboundIdentifier(f"Unbound identifier: {name}")

    def clear_bindings(self) -> None:
        """Drop every binding in this frame (used when a session is torn down)."""
        self.vars.clear()

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
