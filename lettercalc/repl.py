import argparse
import logging
import sys
from typing import Optional, TextIO

from lettercalc.config import LOGGING_CONFIG, REPL_CONFIG
from lettercalc.errors import ParseError
from lettercalc.evaluator import evaluate
from lettercalc.notation import to_infix

logger = logging.getLogger(__name__)


def report(expression: str, out: TextIO, show_error_position: bool = False, explain: bool = False) -> bool:
    """Evaluates one expression and prints the outcome; returns whether it succeeded"""
    try:
        if explain:
            print(f"Infix: {to_infix(expression)}", file=out)
        result = evaluate(expression)
    except ParseError as e:
        logger.debug("%s at %d in %r", e.kind, e.position, e.code)
        print(f"Error: {e}", file=out)
        if show_error_position:
            print(e.highlight(), file=out)
        return False
    print(f"Result: {result}", file=out)
    return True


def run_repl(
    stdin: TextIO,
    stdout: TextIO,
    prompt: str = REPL_CONFIG["prompt"],
    exit_command: str = REPL_CONFIG["exit_command"],
    show_error_position: bool = REPL_CONFIG["show_error_position"],
    explain: bool = REPL_CONFIG["explain"],
) -> None:
    while True:
        stdout.write(prompt)
        stdout.flush()

        try:
            line = stdin.readline()
        except (OSError, UnicodeDecodeError):
            logger.warning("Failed to read input line", exc_info=True)
            print("Error reading line", file=stdout)
            continue

        if not line:  # end of input
            stdout.write("\n")
            break

        expression = line.strip()
        if expression == exit_command:
            break

        report(expression, stdout, show_error_position=show_error_position, explain=explain)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Letter-notation arithmetic evaluator")
    parser.add_argument(
        "-e",
        "--expression",
        action="append",
        default=[],
        help="Evaluate this expression and exit (may be repeated)",
    )
    parser.add_argument("--prompt", type=str, default=REPL_CONFIG["prompt"], help="Interactive prompt")
    parser.add_argument(
        "--show-position",
        action="store_true",
        default=REPL_CONFIG["show_error_position"],
        help="Point at the failing character on errors",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        default=REPL_CONFIG["explain"],
        help="Print the parenthesized infix form before each result",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOGGING_CONFIG["level"],
        format=LOGGING_CONFIG["format"],
    )

    if args.expression:
        results = [
            report(expression.strip(), sys.stdout, show_error_position=args.show_position, explain=args.explain)
            for expression in args.expression
        ]
        return 0 if all(results) else 1

    run_repl(
        sys.stdin,
        sys.stdout,
        prompt=args.prompt,
        exit_command=REPL_CONFIG["exit_command"],
        show_error_position=args.show_position,
        explain=args.explain,
    )
    return 0
