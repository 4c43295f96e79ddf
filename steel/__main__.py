"""Command-line entry point: run steel files, or a line-oriented REPL on stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from steel.config import get_log_level
from steel.errors import SteelError
from steel.interpreter import Interpreter
from steel.printer import display
from steel.types.void import VoidType

PROMPT = "λ > "
RECURSION_MESSAGE = "maximum recursion depth exceeded"

logger = logging.getLogger(__name__)


def report(err: TextIO, *parts: object) -> None:
    """Write a user-facing `error: ...` line; independent of STEEL_LOGLEVEL."""
    print("error:", ": ".join(str(p) for p in parts), file=err, flush=True)


def run_files(interp: Interpreter, paths: list[Path], out: TextIO, err: TextIO) -> int:
    for path in paths:
        logger.debug("running %s", path)
        try:
            for value in interp.parse_and_eval(path.read_text(encoding="utf-8")):
                if not isinstance(value, VoidType):
                    print(display(value), file=out)
        except (SteelError, OSError) as e:
            report(err, path, e)
            return 1
        except RecursionError:
            report(err, path, RECURSION_MESSAGE)
            return 1
    return 0


def repl(interp: Interpreter, stdin: TextIO, out: TextIO, err: TextIO) -> int:
    interactive = stdin.isatty()
    while True:
        if interactive:
            print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            return 0
        if not line.strip():
            continue
        try:
            for value in interp.parse_and_eval(line):
                if not isinstance(value, VoidType):
                    print(display(value), file=out)
        except SteelError as e:
            report(err, e)
        except RecursionError:
            report(err, RECURSION_MESSAGE)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="steel", description="Evaluate steel programs"
    )
    parser.add_argument("files", nargs="*", type=Path, help="source files to evaluate in order")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the prelude")
    args = parser.parse_args(argv)

    # Configure logging from STEEL_LOGLEVEL environment variable
    logging.basicConfig(level=get_log_level(), format="%(message)s", stream=sys.stderr)

    with Interpreter(prelude=None if args.no_prelude else "auto") as interp:
        if args.files:
            return run_files(interp, args.files, sys.stdout, sys.stderr)
        return repl(interp, sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
