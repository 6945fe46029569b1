"""2fy: convert YAML to text or JSON, optionally through a path query."""

__version__ = "0.1.0"

from .decoder import decode
from .errors import (
    DecodeError,
    EncodeError,
    InputError,
    OutputError,
    QueryError,
    QueryEvaluationError,
    QuerySyntaxError,
    TwofyError,
)
from .pipeline import convert
from .query import Query, evaluate, parse_query
from .render import OutputFormat, render, to_json, to_text
from .shaper import shape
from .values import Null, Value, VBool, VList, VMap, VNull, VNumber, VText

__all__ = [
    "__version__",
    "convert",
    "decode",
    "evaluate",
    "parse_query",
    "shape",
    "render",
    "to_json",
    "to_text",
    "OutputFormat",
    "Query",
    "Null",
    "Value",
    "VBool",
    "VList",
    "VMap",
    "VNull",
    "VNumber",
    "VText",
    "TwofyError",
    "InputError",
    "DecodeError",
    "QueryError",
    "QuerySyntaxError",
    "QueryEvaluationError",
    "EncodeError",
    "OutputError",
]
