"""Serializers: text rendering and JSON."""

from __future__ import annotations

import json
from enum import Enum

from .errors import EncodeError
from .values import Value, VBool, VList, VMap, VNumber, VText, _Null, to_native


class OutputFormat(Enum):
    TEXT = "text"
    JSON = "json"


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a value on one line, Go ``%v`` style."""
    if isinstance(value, _Null):
        return "<nil>"
    if isinstance(value, VBool):
        return "true" if value.value else "false"
    if isinstance(value, (VNumber, VText)):
        return str(value)
    if isinstance(value, VList):
        return "[" + " ".join(_fmt_inline(v) for v in value.items) + "]"
    if isinstance(value, VMap):
        pairs = (f"{k}:{_fmt_inline(value.entries[k])}" for k in sorted(value.entries))
        return "map[" + " ".join(pairs) + "]"
    raise EncodeError(f"cannot render {value!r} as text")


def to_text(value: Value) -> str:
    """Render *value* on a single line followed by a newline.

    Rules:
        Null   → <nil>
        bools  → true / false
        ints   → decimal digits; integral floats drop the fraction (2.0 → 2)
        text   → the raw string, unquoted
        lists  → [a b c]
        maps   → map[k1:v1 k2:v2], keys sorted
    """
    return _fmt_inline(value) + "\n"


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def to_json(value: Value, indent: int | None = None) -> str:
    """Encode *value* as JSON. Compact unless *indent* is given."""
    separators = (",", ":") if indent is None else (",", ": ")
    try:
        return json.dumps(
            to_native(value),
            ensure_ascii=False,
            allow_nan=False,
            indent=indent,
            separators=separators,
        )
    except ValueError as exc:
        raise EncodeError(f"cannot encode value as JSON: {exc}") from exc


def render(value: Value | None, fmt: OutputFormat, indent: int | None = None) -> bytes:
    """Serialize a shaped result. ``None`` (no matches) renders as zero bytes."""
    if value is None:
        return b""
    if fmt is OutputFormat.JSON:
        return to_json(value, indent=indent).encode("utf-8")
    return to_text(value).encode("utf-8")
