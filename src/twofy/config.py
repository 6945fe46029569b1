"""Run configuration: everything one invocation needs, built once from the CLI."""

from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass
from pathlib import Path

from .render import OutputFormat


@dataclass(frozen=True)
class RunConfig:
    output_format: OutputFormat = OutputFormat.JSON
    input_path: Path | None = None   # None → stdin
    output_path: Path | None = None  # None → stdout
    jsonpath: str = ""
    indent: int | None = None
    debug: bool = False

    @classmethod
    def from_args(cls, args: Namespace) -> "RunConfig":
        """Build a RunConfig from the namespace produced by the CLI parser."""
        return cls(
            output_format=args.output_format,
            input_path=Path(args.input).expanduser() if args.input else None,
            output_path=Path(args.output).expanduser() if args.output else None,
            jsonpath=args.jsonpath or "",
            indent=getattr(args, "indent", None),
            debug=args.debug,
        )
