"""
Command-line entry point for Numerika.

    numerika [-v...] [--json] [--logger {console,logging,null}] CALCULATION

Prints the value on success. On an evaluation error, reports the error
kind and exits with status 1; argparse usage errors exit with 2.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Any, Dict

from .calculation import ExpressionError, evaluate_expression
from .config import EvaluationConfig
from .utils.logging import LOGGER_TYPES, ConsoleTraceLogger

_DESCRIPTION = "Execute a calculation."

_EPILOG = """\
Supported: + - * / with the usual precedence, postfix ! (factorial),
unary + and -. Characters other than digits, '.' and operators are
ignored, so "3 + 2" and "3+2" are the same calculation.
Use "--" before a calculation that starts with "-": numerika -- -2+1
"""


def _json_number(value: float) -> Any:
    """JSON has no inf/nan literals; encode them as strings."""
    if math.isnan(value) or math.isinf(value):
        return repr(value)
    return value


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(name)s - %(levelname)s - %(message)s")


def _cmd_calculate(args: argparse.Namespace) -> int:
    """Evaluate the calculation and print the result or the error."""
    config = EvaluationConfig(verbosity=args.verbose, logger_type=args.logger)
    trace = None
    if args.json and args.logger == "console":
        # stdout carries only the JSON document
        trace = ConsoleTraceLogger(args.verbose, config.thresholds, stream=sys.stderr)
    try:
        result = evaluate_expression(args.calculation, config, trace)
    except ExpressionError as e:
        if args.json:
            report: Dict[str, Any] = {"status": "error", "kind": e.kind.value, "message": str(e)}
            print(json.dumps(report))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({"status": "ok", "result": _json_number(result.value)}))
    else:
        print(repr(result.value))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI parser.

    A single positional CALCULATION; no subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="numerika",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("calculation", metavar="CALCULATION", help="The calculation that should be executed")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Verbose mode (-v, -vv, -vvv, etc.)")
    parser.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    parser.add_argument(
        "--logger",
        choices=LOGGER_TYPES,
        default="console",
        help="Where trace output goes (default: console)",
    )
    parser.set_defaults(func=_cmd_calculate)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
