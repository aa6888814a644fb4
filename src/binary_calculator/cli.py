"""Command-line interface for the binary calculator."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from binary_calculator.core import DEFAULT_HISTORY_VIEW, BinaryCalculator, CalculatorSnapshot

LOG_LEVEL_ENV = "BINARY_CALCULATOR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

QUIT_COMMANDS = frozenset({"quit", "exit"})


def default_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    return level if level in LOG_LEVELS else "WARNING"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger."""
    logger = logging.getLogger("binary_calculator")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    return logger


def split_token(token: str) -> list[str]:
    """Split a run of binary digits into single keys; other tokens pass through."""
    if len(token) > 1 and set(token) <= {"0", "1"}:
        return list(token)
    return [token]


def feed(calculator: BinaryCalculator, tokens: Iterable[str]) -> CalculatorSnapshot:
    """Press every key in ``tokens`` and return the final state."""
    state = calculator.get_state()
    for token in tokens:
        for key in split_token(token):
            state = calculator.press(key)
    return state


def format_state(state: CalculatorSnapshot) -> str:
    """Render a snapshot as one display line."""
    if state.has_error:
        return f"Error: {state.error_message}"

    line = f"{state.current_input} ({state.decimal_value})"
    if state.operator is not None:
        line = f"{state.previous_value} {state.operator} {line}"
    if state.notice_message:
        line = f"{line}  [{state.notice_message}]"
    return line


def format_history(records: Sequence[str]) -> str:
    if not records:
        return "No history"
    return "\n".join(records)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="binary-calculator",
        description="A two-operand calculator for binary numbers.",
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        help="Keys to press, e.g. '11 + 10 ='. Reads from stdin when omitted.",
    )
    parser.add_argument(
        "--history",
        type=int,
        default=0,
        metavar="N",
        help="Print the last N history records",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=default_log_level(),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def run_interactive(
    calculator: BinaryCalculator, stream: TextIO, history_limit: int
) -> CalculatorSnapshot:
    """Evaluate keys line by line until EOF or 'quit'."""
    state = calculator.get_state()
    for line in stream:
        tokens = line.split()
        if not tokens:
            continue
        if tokens[0] in QUIT_COMMANDS:
            break
        if tokens[0] == "history":
            print(format_history(calculator.get_history(history_limit or DEFAULT_HISTORY_VIEW)))
            continue
        state = feed(calculator, tokens)
        print(format_state(state))
    return state


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    calculator = BinaryCalculator()

    if args.tokens:
        state = feed(calculator, args.tokens)
        print(format_state(state))
    else:
        state = run_interactive(calculator, sys.stdin, args.history)

    if args.history > 0:
        print(format_history(calculator.get_history(args.history)))

    return 1 if state.has_error else 0


if __name__ == "__main__":
    sys.exit(main())
