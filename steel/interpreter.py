from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Literal

from steel import SExpression, SteelVal
from steel.builtin.env_builtin import register
from steel.config import get_prelude_path
from steel.evaluation.apply import apply_procedure
from steel.evaluation.evaluator import evaluate
from steel.reader.intern import InternTable
from steel.reader.parser import Parser
from steel.types.environment import Environment
from steel.types.void import Void

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating steel code for one session.

    The session owns an InternTable, so identifiers are shared across every
    parse, and a global Environment seeded with the default primitives, so
    definitions persist across calls. `close()` (or leaving a `with` block)
    drops both.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.intern: InternTable = InternTable()
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude(get_prelude_path())
        elif prelude:
            self.eval_prelude(prelude)

    # --- Prelude ---
    def load_prelude(self, path: Path) -> None:
        try:
            code = path.read_text(encoding='utf-8')
        except FileNotFoundError:
            # Be permissive: no prelude found -> proceed
            logger.warning("prelude not found at %s", path)
            return
        logger.debug("loading prelude from %s", path)
        self.eval_prelude(code)

    def eval_prelude(self, code: str) -> None:
        for expr in self.parse(code):
            evaluate(expr, self.env)

    # --- Reading and evaluation ---
    def parse(self, code: str) -> Iterator[SExpression]:
        """Lazily parse `code` against this session's interning table."""
        return Parser(code, self.intern)

    def eval(self, expr: SExpression) -> SteelVal:
        """Evaluate one expression in the global environment."""
        return evaluate(expr, self.env)

    def parse_and_eval(self, code: str) -> list[SteelVal]:
        """Evaluate every top-level form in `code` and return their values.

        The whole text is read before anything runs, so a read failure has no
        effects. An evaluation failure propagates unchanged; forms evaluated
        before it keep their effects.
        """
        exprs = list(self.parse(code))
        results: list[SteelVal] = []
        for expr in exprs:
            logger.debug("eval %s", expr)
            results.append(self.eval(expr))
        return results

    def run(self, code: str) -> SteelVal:
        """Evaluate `code` and return the value of its last form (Void if empty)."""
        results = self.parse_and_eval(code)
        return results[-1] if results else Void

    def call(self, fn: SteelVal, *args: SteelVal) -> SteelVal:
        """Apply a procedure value (closure or native) to evaluated arguments."""
        return apply_procedure(fn, args, evaluate)

    # --- Direct binding access ---
    def clear_bindings(self) -> None:
        self.env.clear_bindings()

    def insert_binding(self, name: str, value: SteelVal) -> None:
        self.env.define(name, value)

    def insert_bindings(self, pairs: Iterable[tuple[str, SteelVal]]) -> None:
        self.env.define_zipped(pairs)

    def lookup_binding(self, name: str) -> SteelVal:
        return self.env.lookup(name)

    # --- Session lifetime ---
    def close(self) -> None:
        """Clear all bindings and interned atoms, breaking closure/env cycles."""
        logger.debug("closing session: %d bindings, %d interned", len(self.env.vars), len(self.intern))
        self.env.clear_bindings()
        self.intern.clear()

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
