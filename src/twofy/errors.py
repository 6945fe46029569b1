"""Error taxonomy for 2fy."""

from __future__ import annotations


class TwofyError(Exception):
    """Base class for every error a conversion run can raise."""


class InputError(TwofyError):
    """The input could not be opened or read."""


class DecodeError(TwofyError):
    """The input is not a single well-formed YAML document."""


class QueryError(TwofyError):
    """Base class for path-query failures."""

    def __init__(self, query: str, message: str) -> None:
        super().__init__(message)
        self.query = query


class QuerySyntaxError(QueryError):
    """The path-query expression is malformed."""

    def __init__(self, query: str, position: int, reason: str) -> None:
        super().__init__(
            query,
            f"invalid jsonpath {query!r} at position {position}: {reason}",
        )
        self.position = position
        self.reason = reason


class QueryEvaluationError(QueryError):
    """A segment failed while walking the value tree."""

    def __init__(self, query: str, value_dump: str, cause: BaseException) -> None:
        super().__init__(query, f"error executing jsonpath {query!r}: {cause}")
        self.value_dump = value_dump
        self.cause = cause


class EncodeError(TwofyError):
    """The selected value cannot be written in the requested format."""


class OutputError(TwofyError):
    """The output could not be written."""
