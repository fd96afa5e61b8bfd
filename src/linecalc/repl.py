"""linecalc: read statements line by line, evaluate them and print results."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from .environment import Environment
from .parser import Result, evaluate_statement
from .prelude import default_environment
from .scanner import Scanner

PROMPT = "? "
PRECISION = 6


def format_value(value: float, precision: int = PRECISION) -> str:
    # Same rendering as a default C++ ostream: %g, 6 significant digits.
    return f"{value:.{precision}g}"


def describe(result: Result, precision: int = PRECISION) -> str:
    if result.ok:
        return f"= {format_value(result.value, precision)}"
    return f"{result.error.category}: {result.error}"


def drain_line(scanner: Scanner, env: Environment) -> Iterator[Result]:
    """Evaluate statements until the scanner reaches a newline or the end.

    A failed statement discards the rest of its line. The newline itself
    is left in the lookahead for the caller.
    """
    while True:
        scanner.skip_blanks()
        if scanner.at_end() or scanner.peek() == "\n":
            return
        result = evaluate_statement(scanner, env)
        yield result
        if not result.ok:
            scanner.discard_line()


def evaluate_text(text: str, env: Environment) -> List[Result]:
    scanner = Scanner(text)
    results: List[Result] = []
    while True:
        results.extend(drain_line(scanner, env))
        if scanner.at_end():
            return results
        scanner.advance()


def run(
    instream: TextIO,
    out: TextIO,
    env: Environment,
    prompt: str = PROMPT,
    precision: int = PRECISION,
) -> int:
    """Prompt/evaluate/print until end of input; return the failure count."""
    failures = 0
    while True:
        if prompt:
            out.write(prompt)
            out.flush()
        # A fresh scanner per line: its first read happens after the prompt.
        scanner = Scanner(instream)
        for result in drain_line(scanner, env):
            print(describe(result, precision), file=out)
            if not result.ok:
                failures += 1
        if scanner.at_end():
            if prompt:
                out.write("\n")
            return failures


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Interactive line calculator")
    ap.add_argument(
        "-e",
        "--eval",
        action="append",
        default=None,
        metavar="LINE",
        help="Evaluate LINE and exit (repeatable)",
    )
    ap.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read statements from a file instead of stdin",
    )
    ap.add_argument(
        "--prompt",
        default=PROMPT,
        help=f"Prompt shown before each line (default: {PROMPT!r})",
    )
    ap.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not print a prompt",
    )
    ap.add_argument(
        "--precision",
        type=int,
        default=PRECISION,
        help=f"Significant digits in printed results (default: {PRECISION})",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Print startup steps",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    if args.precision < 1:
        log_error(f"precision must be at least 1, got {args.precision}")
        return 2

    env = default_environment()
    if args.verbose:
        log_step(
            f"environment ready ({len(env.constants)} constants, "
            f"{len(env.functions)} functions)"
        )

    if args.eval:
        failures = 0
        for line in args.eval:
            for result in evaluate_text(line, env):
                print(describe(result, args.precision))
                if not result.ok:
                    failures += 1
        return 1 if failures else 0

    if args.input is not None:
        try:
            stream = args.input.open(encoding="utf-8")
        except FileNotFoundError:
            log_error(f"file not found: {args.input}")
            return 1
        if args.verbose:
            log_step(f"reading {args.input}")
        with stream:
            failures = run(stream, sys.stdout, env, "", args.precision)
        return 1 if failures else 0

    prompt = "" if args.no_prompt else args.prompt
    try:
        run(sys.stdin, sys.stdout, env, prompt, args.precision)
    except KeyboardInterrupt:
        print()
    return 0


def log_step(msg: str) -> None:
    print(f"[linecalc] {msg}...")


def log_error(msg: str) -> None:
    print(f"[linecalc:error] {msg}")


if __name__ == "__main__":
    raise SystemExit(main())
