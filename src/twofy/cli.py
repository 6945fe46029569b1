"""Command line entry point (``2fy`` / ``python -m twofy``)."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional

from . import __version__
from .config import RunConfig
from .errors import TwofyError
from .logger import get_logger, setup_logger
from .pipeline import run
from .render import OutputFormat

logger = get_logger()

PROG = "2fy"

# name → (aliases, help, output format)
COMMANDS = {
    "yaml2txt": (["y2t"], "convert YAML to a text representation", OutputFormat.TEXT),
    "yaml2json": (["y2j"], "convert YAML to JSON", OutputFormat.JSON),
}

_KNOWN = set(COMMANDS) | {a for aliases, _, _ in COMMANDS.values() for a in aliases}

# command options that consume the next token
_VALUE_FLAGS = frozenset({"--input", "--in", "--output", "--out", "--jsonpath", "--jp", "--indent"})


class _ArgumentParser(argparse.ArgumentParser):
    """Reports flag misuse as a one-line ``WRONG:`` message after the usage."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(2, f"WRONG: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, description="convert all the things!")
    parser.add_argument("-d", "--debug", action="store_true", help="run in debug mode")
    parser.add_argument("--version", action="version", version=f"%(prog)s version {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>", required=True)
    for name, (aliases, help_text, output_format) in COMMANDS.items():
        sub = subparsers.add_parser(name, aliases=aliases, help=help_text, description=help_text)
        sub.add_argument("--input", "--in", help="the input file (or stdin otherwise)")
        sub.add_argument("--output", "--out", help="the output file (or stdout otherwise)")
        sub.add_argument(
            "--jsonpath", "--jp",
            default="",
            help="path query selecting what to print, e.g. '{.spec.replicas}'",
        )
        if output_format is OutputFormat.JSON:
            sub.add_argument("--indent", type=int, help="pretty-print with this many spaces")
        sub.set_defaults(output_format=output_format)
    return parser


def _find_command(argv: list[str]) -> str | None:
    """Return the first positional token, skipping the values of option flags."""
    tokens = iter(argv)
    for token in tokens:
        if token in _VALUE_FLAGS:
            next(tokens, None)
        elif token != "--" and not token.startswith("-"):
            return token
    return None


def _parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    return _build_parser().parse_args(list(argv) if argv is not None else None)


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Run 2fy and return the process exit code."""
    argv = list(argv) if argv is not None else sys.argv[1:]

    command = _find_command(argv)
    if command is not None and command not in _KNOWN:
        print(f'There is no "{command}" command.', file=sys.stderr)
        return 1

    config = RunConfig.from_args(_parse_args(argv))
    setup_logger(config.debug)

    try:
        run(config)
    except TwofyError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        logger.debug("exiting with {}", 1)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
