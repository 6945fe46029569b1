"""Path queries: parsing a JSONPath-style expression and walking a Value.

The accepted language is the field/array subset of Kubernetes JSONPath::

    {.spec.containers[0].image}
    $.items[*].name
    .matrix[1:3]
    ['key with spaces']

A missing path is never an error. It just contributes no matches.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, NoReturn

from .errors import QueryEvaluationError, QuerySyntaxError
from .logger import get_logger
from .values import Value, VList, VMap

logger = get_logger()

_INT_RE = re.compile(r"^-?\d+$")
_NAME_STOP = frozenset(".[]{}")


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------

class Segment:
    """One step of a query. Subclasses yield the sub-values they select."""

    def select(self, value: Value) -> Iterable[Value]:
        raise NotImplementedError


@dataclass(frozen=True)
class Field(Segment):
    name: str

    def select(self, value: Value) -> Iterable[Value]:
        if isinstance(value, VMap) and self.name in value.entries:
            yield value.entries[self.name]


@dataclass(frozen=True)
class Index(Segment):
    index: int

    def select(self, value: Value) -> Iterable[Value]:
        if not isinstance(value, VList):
            return
        size = len(value.items)
        i = self.index + size if self.index < 0 else self.index
        if 0 <= i < size:
            yield value.items[i]


@dataclass(frozen=True)
class Slice(Segment):
    start: int | None = None
    stop: int | None = None
    step: int | None = None

    def select(self, value: Value) -> Iterable[Value]:
        if isinstance(value, VList):
            yield from value.items[self.start:self.stop:self.step]


@dataclass(frozen=True)
class Wildcard(Segment):
    def select(self, value: Value) -> Iterable[Value]:
        if isinstance(value, VMap):
            yield from value.entries.values()
        elif isinstance(value, VList):
            yield from value.items


@dataclass(frozen=True)
class Query:
    """A parsed path query. No segments means "the whole value"."""

    text: str
    segments: tuple[Segment, ...] = ()


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.src = text.strip()
        self.offset = len(text) - len(text.lstrip())
        self.pos = 0

    def fail(self, reason: str, pos: int | None = None) -> NoReturn:
        at = self.pos if pos is None else pos
        raise QuerySyntaxError(self.text, self.offset + at, reason)

    def peek(self) -> str:
        return self.src[self.pos] if self.pos < len(self.src) else ""

    def skip_spaces(self) -> None:
        while self.peek().isspace():
            self.pos += 1

    def parse(self) -> tuple[Segment, ...]:
        braced = self.peek() == "{"
        if braced:
            self.pos += 1
            self.skip_spaces()

        segments = self._path()

        if braced:
            self.skip_spaces()
            if self.peek() != "}":
                self.fail("missing closing '}'")
            self.pos += 1

        if self.pos < len(self.src):
            self.fail(f"unexpected character {self.peek()!r}")
        return segments

    def _path(self) -> tuple[Segment, ...]:
        ch = self.peek()
        if ch in ("$", "@"):
            self.pos += 1
        elif ch not in (".", "["):
            if ch in ("", "}"):
                return ()
            self.fail("path must start with '$', '@', '.' or '['")

        segments: list[Segment] = []
        while True:
            ch = self.peek()
            if ch == ".":
                self.pos += 1
                nxt = self.peek()
                if nxt == ".":
                    self.fail("recursive descent '..' is not supported")
                if nxt == "*":
                    self.pos += 1
                    segments.append(Wildcard())
                    continue
                name = self._name()
                if name:
                    segments.append(Field(name))
                elif nxt == "[" or (nxt in ("", "}") and not segments):
                    # "." alone is the current value
                    continue
                else:
                    self.fail("expected a field name after '.'")
            elif ch == "[":
                segments.append(self._bracket())
            else:
                return tuple(segments)

    def _name(self) -> str:
        start = self.pos
        while True:
            ch = self.peek()
            if not ch or ch in _NAME_STOP or ch.isspace():
                break
            self.pos += 1
        return self.src[start:self.pos]

    def _bracket(self) -> Segment:
        start = self.pos
        self.pos += 1
        self.skip_spaces()

        ch = self.peek()
        if not ch:
            self.fail("unclosed '['", start)
        if ch in ("'", '"'):
            segment: Segment = Field(self._quoted())
        elif ch == "*":
            self.pos += 1
            segment = Wildcard()
        else:
            close = self.src.find("]", self.pos)
            if close == -1:
                self.fail("unclosed '['", start)
            body = self.src[self.pos:close]
            if not body.strip():
                self.fail("empty selector '[]'", start)
            segment = self._index_or_slice(body)
            self.pos = close

        self.skip_spaces()
        if self.peek() != "]":
            if not self.peek():
                self.fail("unclosed '['", start)
            self.fail(f"expected ']' but found {self.peek()!r}")
        self.pos += 1
        return segment

    def _quoted(self) -> str:
        quote = self.peek()
        start = self.pos
        self.pos += 1
        chars: list[str] = []
        while True:
            ch = self.peek()
            if not ch:
                self.fail("unterminated quoted name", start)
            self.pos += 1
            if ch == "\\":
                escaped = self.peek()
                if not escaped:
                    self.fail("unterminated quoted name", start)
                chars.append(escaped)
                self.pos += 1
            elif ch == quote:
                return "".join(chars)
            else:
                chars.append(ch)

    def _index_or_slice(self, body: str) -> Segment:
        parts = body.split(":")
        if len(parts) > 3:
            self.fail("too many ':' in slice")
        if len(parts) == 1:
            return Index(self._int(parts[0]))

        bounds = [self._int(p) if p.strip() else None for p in parts]
        bounds += [None] * (3 - len(bounds))
        if bounds[2] == 0:
            self.fail("slice step cannot be zero")
        return Slice(*bounds)

    def _int(self, raw: str) -> int:
        text = raw.strip()
        if not _INT_RE.match(text):
            self.fail(f"invalid array index {text!r}")
        return int(text)


def parse_query(text: str) -> Query:
    """Parse *text* into a Query. Raises QuerySyntaxError when malformed."""
    if not text.strip():
        return Query(text)
    segments = _Parser(text).parse()
    logger.debug("jsonpath {!r} parsed into {}", text, segments)
    return Query(text, segments)


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

def evaluate(root: Value, query: str | Query) -> list[Value]:
    """Return every sub-value of *root* selected by *query*, in traversal order."""
    if not isinstance(query, Query):
        query = parse_query(query)

    current: list[Value] = [root]
    for segment in query.segments:
        matched: list[Value] = []
        for value in current:
            try:
                matched.extend(segment.select(value))
            except Exception as exc:
                dump = repr(value)
                logger.debug(
                    "Error executing jsonpath: {}\n\tquery was:\n\t\t{}\n"
                    "\tvalue given to the evaluator was:\n\t\t{}",
                    exc,
                    query.text,
                    dump,
                )
                raise QueryEvaluationError(query.text, dump, exc) from exc
        current = matched

    logger.debug("jsonpath {!r} matched {} value(s)", query.text, len(current))
    return current
