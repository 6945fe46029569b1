"""The conversion pipeline: decode → query → shape → serialize."""

from __future__ import annotations

from .config import RunConfig
from .decoder import decode
from .logger import get_logger
from .query import evaluate, parse_query
from .render import OutputFormat, render
from .shaper import shape
from .streams import read_input, write_output

logger = get_logger()


def convert(
    data: bytes | str,
    jsonpath: str = "",
    output_format: OutputFormat = OutputFormat.JSON,
    indent: int | None = None,
) -> bytes:
    """Convert one YAML document to output bytes.

    The query is parsed before the document is decoded, so a bad expression
    fails even on empty input. An input with no document at all converts to
    zero bytes.
    """
    query = parse_query(jsonpath)

    logger.debug("unmarshalling")
    root = decode(data)
    if root is None:
        return b""

    result = shape(evaluate(root, query))
    if result is None:
        logger.debug("jsonpath {!r} matched nothing", query.text)
    return render(result, output_format, indent=indent)


def run(config: RunConfig, stdin=None, stdout=None) -> None:
    """Execute one full run described by *config*."""
    data = read_input(config.input_path, stdin=stdin)
    content = convert(
        data,
        jsonpath=config.jsonpath,
        output_format=config.output_format,
        indent=config.indent,
    )
    logger.debug("{} output: {} bytes", config.output_format.value, len(content))
    write_output(content, config.output_path, stdout=stdout)
