"""Collapse a list of query matches into the single value to print."""

from __future__ import annotations

from .values import Value, VList


def shape(matches: list[Value]) -> Value | None:
    """Zero matches → None, one → the match itself, more → a VList of them.

    An explicit null is still a match: ``[Null]`` shapes to ``Null``, not None.
    """
    if not matches:
        return None
    if len(matches) == 1:
        return matches[0]
    return VList(list(matches))
