# Core type aliases for steel's data model.
# Code is represented by the reader's Expr nodes (Atom / ListVal) and runtime
# values by plain Python types where one fits (bool, float, str) plus a few
# small classes (Void, Quoted, Lambda). Native functions are plain callables.
#
# Naming guidance:
# - SExpression: Use in reader/parser code and special forms to denote syntax.
# - SteelVal:    Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
SteelVal = Any
# Syntax alias (an Atom or ListVal node)
SExpression = Any

# Native function signature: a pure function of its evaluated arguments
NativeFn = Callable[[list], SteelVal]

# Evaluator function type, passed to special forms for nested evaluation
EvaluatorFn = Callable[..., SteelVal]
