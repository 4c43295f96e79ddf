import pytest

from steel.builtin.env_builtin import register
from steel.evaluation.evaluator import evaluate
from steel.interpreter import Interpreter
from steel.reader.parser import parse_all
from steel.types.environment import Environment
from steel.types.void import Void

# Tests either evaluate parsed forms directly against a bare Environment
# (`env` + `run`) or go through a whole session (`interp`). Neither loads the
# prelude, so only the primitives from env_builtin are bound.


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Parse and evaluate every form in a source string against `env`, returning the last value."""
    def _run(source: str):
        result = Void
        for expr in parse_all(source):
            result = evaluate(expr, env)
        return result
    return _run


@pytest.fixture
def interp():
    with Interpreter(prelude=None) as i:
        yield i
