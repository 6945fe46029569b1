"""Value types for 2fy."""

from __future__ import annotations

import datetime
import math
from dataclasses import dataclass, field
from typing import Any, Union

from .errors import DecodeError


class _Null:
    """Singleton for an explicit YAML/JSON null."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False


Null = _Null()
VNull = _Null


@dataclass
class VBool:
    value: bool


@dataclass
class VNumber:
    value: int | float

    def __str__(self) -> str:
        v = self.value
        if isinstance(v, int):
            return str(v)
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "+Inf" if v > 0 else "-Inf"
        if v == int(v) and abs(v) < 1e21:
            return str(int(v))
        return repr(v)


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VList:
    items: list["Value"] = field(default_factory=list)


@dataclass
class VMap:
    entries: dict[str, "Value"] = field(default_factory=dict)


Value = Union[_Null, VBool, VNumber, VText, VList, VMap]


# ---------------------------------------------------------------------------
# Native conversion
# ---------------------------------------------------------------------------

def key_text(key: Any) -> str:
    """Text form of a mapping key, spelled the way JSON would spell it."""
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (int, float)):
        return str(VNumber(key))
    if isinstance(key, (datetime.date, datetime.datetime)):
        return key.isoformat()
    raise DecodeError(f"unsupported mapping key of type {type(key).__name__}: {key!r}")


def from_native(obj: Any) -> Value:
    """Convert a plain Python object (as loaded by PyYAML) into a Value.

    Shared anchors become independent copies. A recursive alias raises
    ``DecodeError``.
    """
    return _from_native(obj, set())


def _from_native(obj: Any, active: set[int]) -> Value:
    if obj is None:
        return Null
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, (int, float)):
        return VNumber(obj)
    if isinstance(obj, str):
        return VText(obj)
    if isinstance(obj, (datetime.date, datetime.datetime)):
        return VText(obj.isoformat())

    if isinstance(obj, (set, frozenset)):
        # a YAML !!set is a mapping whose values are all null
        return VMap({k: Null for k in sorted(key_text(item) for item in obj)})

    if isinstance(obj, (list, tuple, dict)):
        marker = id(obj)
        if marker in active:
            raise DecodeError("recursive alias in document")
        active.add(marker)
        try:
            if isinstance(obj, dict):
                return VMap({key_text(k): _from_native(v, active) for k, v in obj.items()})
            return VList([_from_native(item, active) for item in obj])
        finally:
            active.discard(marker)

    raise DecodeError(f"unsupported value of type {type(obj).__name__}")


def to_native(value: Value) -> Any:
    """Convert a Value back into plain Python objects."""
    if isinstance(value, _Null):
        return None
    if isinstance(value, (VBool, VNumber, VText)):
        return value.value
    if isinstance(value, VList):
        return [to_native(v) for v in value.items]
    if isinstance(value, VMap):
        return {k: to_native(v) for k, v in value.entries.items()}
    raise TypeError(f"not a Value: {value!r}")
