"""Built-in functions for the steel runtime environment.

This module defines the default primitive set: arithmetic, numeric
comparison, a few string helpers and type predicates. Every primitive is a
pure function of its evaluated argument list; none of them sees the caller's
environment.
"""
from __future__ import annotations

from typing import Callable

from steel import NativeFn, SteelVal
from steel.errors import SteelArityMismatch, SteelContractViolation, SteelTypeMismatch
from steel.types.environment import Environment
from steel.types.values import is_number, is_procedure

BUILTINS: dict[str, NativeFn] = {}


def builtin(name: str) -> Callable[[NativeFn], NativeFn]:
    """Register a primitive under its steel name."""
    def decorator(fn: NativeFn) -> NativeFn:
        BUILTINS[name] = fn
        return fn
    return decorator


def _numbers(what: str, args: list[SteelVal]) -> list[float]:
    for a in args:
        if not is_number(a):
            raise SteelTypeMismatch(f"{what} expected numbers, got {a!r}")
    return [float(a) for a in args]


def _expect_args(what: str, args: list[SteelVal], n: int) -> None:
    if len(args) != n:
        raise SteelArityMismatch(f"{what}: expected {n} args got {len(args)}")


# -------------------------------
# Arithmetic
# -------------------------------
@builtin("+")
def add(args: list[SteelVal]) -> float:
    """Return the sum of all arguments; (+) is 0."""
    return sum(_numbers("+", args), 0.0)


@builtin("-")
def sub(args: list[SteelVal]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    nums = _numbers("-", args)
    if not nums:
        raise SteelArityMismatch("-: expected at least 1 args got 0")
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


@builtin("*")
def mul(args: list[SteelVal]) -> float:
    """Return the product of all arguments; (*) is 1."""
    result = 1.0
    for x in _numbers("*", args):
        result *= x
    return result


@builtin("/")
def div(args: list[SteelVal]) -> float:
    """Divide left-to-right; with one arg returns the reciprocal."""
    nums = _numbers("/", args)
    if not nums:
        raise SteelArityMismatch("/: expected at least 1 args got 0")
    if len(nums) == 1:
        nums = [1.0, nums[0]]
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise SteelContractViolation("/: division by zero")
        result /= x
    return result


# -------------------------------
# Comparison
# -------------------------------
def _chain(what: str, op: Callable[[float, float], bool]) -> NativeFn:
    def compare(args: list[SteelVal]) -> bool:
        nums = _numbers(what, args)
        if not nums:
            raise SteelArityMismatch(f"{what}: expected at least 1 args got 0")
        return all(op(a, b) for a, b in zip(nums, nums[1:]))
    compare.__name__ = what
    BUILTINS[what] = compare
    return compare


_chain("=", lambda a, b: a == b)
_chain("<", lambda a, b: a < b)
_chain(">", lambda a, b: a > b)
_chain("<=", lambda a, b: a <= b)
_chain(">=", lambda a, b: a >= b)


@builtin("not")
def not_(args: list[SteelVal]) -> bool:
    """#t only for #f; every other value is true."""
    _expect_args("not", args, 1)
    return args[0] is False


@builtin("equal?")
def equal(args: list[SteelVal]) -> bool:
    """Structural equality of two values."""
    _expect_args("equal?", args, 2)
    a, b = args
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    return a == b


# -------------------------------
# Strings
# -------------------------------
@builtin("string-append")
def string_append(args: list[SteelVal]) -> str:
    for a in args:
        if not isinstance(a, str):
            raise SteelTypeMismatch(f"string-append expected strings, got {a!r}")
    return "".join(args)


@builtin("string-length")
def string_length(args: list[SteelVal]) -> float:
    _expect_args("string-length", args, 1)
    if not isinstance(args[0], str):
        raise SteelTypeMismatch(f"string-length expected a string, got {args[0]!r}")
    return float(len(args[0]))


# -------------------------------
# Predicates
# -------------------------------
@builtin("number?")
def number_p(args: list[SteelVal]) -> bool:
    _expect_args("number?", args, 1)
    return is_number(args[0])


@builtin("string?")
def string_p(args: list[SteelVal]) -> bool:
    _expect_args("string?", args, 1)
    return isinstance(args[0], str)


@builtin("boolean?")
def boolean_p(args: list[SteelVal]) -> bool:
    _expect_args("boolean?", args, 1)
    return isinstance(args[0], bool)


@builtin("procedure?")
def procedure_p(args: list[SteelVal]) -> bool:
    _expect_args("procedure?", args, 1)
    return is_procedure(args[0])


def register(env: Environment) -> None:
    """Install the default primitives into `env`."""
    env.define_zipped(BUILTINS.items())
