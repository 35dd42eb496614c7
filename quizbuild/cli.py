"""Command line entry point: render the quiz and optionally serve it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from quizbuild import render, serve
from quizbuild.errors import QuizError

__all__ = ["build_parser", "report", "main"]

_VERSION = "0.0.6"
_BOLD_RED = "\x1b[1;31m"
_BOLD = "\x1b[0;1m"
_RESET = "\x1b[0m"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the quiz command."""
    parser = argparse.ArgumentParser(prog="rust-quiz", description="Rust Quiz")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    subcommands = parser.add_subparsers(dest="command", metavar="COMMAND")
    subcommands.add_parser(
        "serve",
        help="Serve website over http at localhost:8000",
        description="Serve website over http at localhost:8000",
    )
    return parser


def report(error: BaseException | None) -> None:
    """Print an error to stderr and exit with status 1; do nothing for None."""
    if error is None:
        return
    stream = sys.stderr
    if stream.isatty():
        stream.write(f"{_BOLD_RED}ERROR{_BOLD}: {error}{_RESET}\n")
    else:
        stream.write(f"ERROR: {error}\n")
    stream.flush()
    raise SystemExit(1)


def _attempt(action: Callable[[], None]) -> BaseException | None:
    try:
        action()
    except (QuizError, OSError, ValueError) as exc:
        return exc
    return None


def main(argv: list[str] | None = None) -> None:
    """Render the questions, then serve the site if asked to."""
    args = build_parser().parse_args(argv)

    report(_attempt(render.main))

    if args.command == "serve":
        print(file=sys.stderr)
        report(_attempt(serve.main))