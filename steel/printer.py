"""Render steel values the way the REPL shows them."""

from __future__ import annotations

from steel import SteelVal
from steel.types.lambda_fn import Lambda
from steel.types.values import Quoted, is_native
from steel.types.void import VoidType


def format_number(n: float) -> str:
    if n != n or n in (float("inf"), float("-inf")):
        return {"nan": "+nan.0", "inf": "+inf.0", "-inf": "-inf.0"}[repr(n)]
    if float(n).is_integer():
        return str(int(n))
    return repr(float(n))


def display(value: SteelVal) -> str:
    match value:
        case bool():
            return "#t" if value else "#f"
        case float() | int():
            return format_number(value)
        case str():
            escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
            return f'"{escaped}"'
        case VoidType():
            return "#<void>"
        case Lambda():
            return repr(value)
        case Quoted():
            return str(value)
    if is_native(value):
        return f"#<procedure {getattr(value, '__name__', '?')}>"
    return repr(value)
