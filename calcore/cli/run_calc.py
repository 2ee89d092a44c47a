"""Command-line front end for the checked arithmetic evaluator.

Purpose:
  - Resolve operands and the operation alias, evaluate, and print the outcome.
Inputs:
  - CLI args: -a/--a, -b/--b, -o/--op and --debug.
Outputs:
  - "Result: <value>" on stdout with exit code 0, or
    "Error: <STATUS>: <message>" on stderr with exit code 1.
  - Malformed operands or unknown operations are argparse errors (exit code 2).
Example:
  - PYTHONPATH=. python3 -m calcore.cli.run_calc -a 2 -b 3 -o +
  - PYTHONPATH=. python3 -m calcore.cli.run_calc -a 5 --op fact
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import Sequence

from calcore.cli._debug_utils import _dbg
from calcore.core.domain.enums import OperationalStatus, OperationKind, status_message
from calcore.core.domain.limits import INT64_MAX, INT64_MIN, fits_int64
from calcore.core.domain.models import EvaluationContext
from calcore.core.engine.evaluator import evaluate, set_evaluator_debug

EXIT_OK = 0
EXIT_EVALUATION_ERROR = 1

OPERATION_ALIASES: dict[str, OperationKind] = {
    "add": OperationKind.ADD,
    "+": OperationKind.ADD,
    "sub": OperationKind.SUB,
    "-": OperationKind.SUB,
    "mul": OperationKind.MUL,
    "*": OperationKind.MUL,
    "div": OperationKind.DIV,
    "/": OperationKind.DIV,
    "pow": OperationKind.POW,
    "^": OperationKind.POW,
    "fact": OperationKind.FACT,
    "!": OperationKind.FACT,
}

_OPERATION_HELP = "add(+), sub(-), mul(*), div(/), pow(^), fact(!)"

_EPILOG = """\
Examples:
  calcore -a 2 -b 3 -o +
  calcore -a 5 --op fact
"""


def parse_operation(raw: str) -> OperationKind:
    operation = OPERATION_ALIASES.get(raw)
    if operation is None:
        raise argparse.ArgumentTypeError(f"unsupported operation '{raw}' (expected one of: {_OPERATION_HELP})")
    return operation


def parse_int64(raw: str) -> int:
    if not re.fullmatch(r"[+-]?[0-9]+", raw):
        raise argparse.ArgumentTypeError(f"not an integer: '{raw}'")
    try:
        value = int(raw, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: '{raw}'") from None
    if not fits_int64(value):
        raise argparse.ArgumentTypeError(
            f"out of range: '{raw}' (expected {INT64_MIN}..{INT64_MAX})"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calcore",
        description="Checked 64-bit integer calculator.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-a", "--a", dest="first", type=parse_int64, required=True, metavar="A", help="First integer")
    parser.add_argument(
        "-b",
        "--b",
        dest="second",
        type=parse_int64,
        default=None,
        metavar="B",
        help="Second integer (required for binary ops)",
    )
    parser.add_argument(
        "-o",
        "--op",
        dest="operation",
        type=parse_operation,
        required=True,
        metavar="OP",
        help=f"Operation: {_OPERATION_HELP}",
    )
    parser.add_argument("--debug", action="store_true", help="Print evaluation trace lines")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def render_result(context: EvaluationContext) -> str:
    if context.status is not OperationalStatus.ALL_RIGHT or context.result is None:
        return f"Error: {context.status.value}: {status_message(context.status)}"
    return f"Result: {context.result.value}"


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    context = EvaluationContext(operation=args.operation, first=args.first, second=args.second)
    _dbg(args, f"parsed op={context.operation.value} first={context.first} second={context.second}")

    if args.debug:
        set_evaluator_debug(lambda msg: _dbg(args, msg))
    try:
        ok = evaluate(context)
    finally:
        set_evaluator_debug(None)

    if ok:
        print(render_result(context))
        raise SystemExit(EXIT_OK)
    print(render_result(context), file=sys.stderr)
    raise SystemExit(EXIT_EVALUATION_ERROR)


if __name__ == "__main__":
    main()
