"""YAML decoding: raw bytes to a Value tree."""

from __future__ import annotations

import yaml

from .errors import DecodeError
from .logger import get_logger
from .values import Value, from_native

logger = get_logger()


def decode(data: bytes | str) -> Value | None:
    """Parse one YAML document and convert it into a Value.

    Returns ``None`` when the stream holds no document at all (empty input or
    comments only). An explicit ``null`` document returns ``Null``.
    """
    try:
        # the reader decodes and checks the whole input on construction
        loader = yaml.SafeLoader(data)
        try:
            node = loader.get_single_node()
            if node is None:
                logger.debug("input holds no YAML document")
                return None
            native = loader.construct_document(node)
        finally:
            loader.dispose()

        logger.debug("decoded YAML document of type {}", type(native).__name__)
        return from_native(native)
    except yaml.YAMLError as exc:
        raise DecodeError(f"invalid YAML: {exc}") from exc
    except RecursionError as exc:
        raise DecodeError("document nested too deeply") from exc
