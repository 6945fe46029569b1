"""Reading the input document and writing the converted output."""

from __future__ import annotations

import contextlib
import os
import sys
import tempfile
from pathlib import Path
from typing import BinaryIO

from .errors import InputError, OutputError
from .logger import get_logger

logger = get_logger()


def _binary(stream) -> BinaryIO:
    return getattr(stream, "buffer", stream)


def read_input(path: Path | None = None, stdin=None) -> bytes:
    """Read the whole input from *path*, or from stdin when no path is given.

    Stdin must be piped or redirected. An interactive terminal is refused
    rather than waited on.
    """
    if path is not None:
        logger.debug("input path: {}", path)
        try:
            return path.read_bytes()
        except OSError as exc:
            logger.debug("cannot read file")
            raise InputError(f"cannot read {path}: {exc.strerror or exc}") from exc

    stdin = sys.stdin if stdin is None else stdin
    if stdin is None or stdin.isatty():
        raise InputError("expected piped stdin or --input")
    logger.debug("no input path, using piped stdin")
    try:
        return _binary(stdin).read()
    except OSError as exc:
        raise InputError(f"cannot read stdin: {exc}") from exc


def _replace_file(path: Path, content: bytes) -> None:
    """Write a sibling temp file, then rename it over *path*.

    The destination is either left untouched or fully replaced.
    """
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)
        os.chmod(tmp, 0o644)
        os.replace(tmp, path)
    except OSError:
        with contextlib.suppress(OSError):
            os.unlink(tmp)
        raise


def write_output(content: bytes, path: Path | None = None, stdout=None) -> None:
    """Write *content* in one go to *path*, or to stdout when no path is given."""
    if path is not None:
        logger.debug("writing to file: {}", path)
        try:
            _replace_file(path, content)
        except OSError as exc:
            logger.debug("error writing to file")
            raise OutputError(f"cannot write {path}: {exc.strerror or exc}") from exc
        return

    logger.debug("no output path, writing to stdout")
    out = _binary(sys.stdout if stdout is None else stdout)
    try:
        count = out.write(content)
        out.flush()
    except OSError as exc:
        raise OutputError(f"cannot write to stdout: {exc}") from exc
    if count is not None and count < len(content):
        logger.debug("wrote only {}/{} bytes", count, len(content))
        raise OutputError(f"short write: wrote {count} of {len(content)} bytes")
