"""Encoded size calculation.

This module computes the length of a value's canonical encoding without
actually encoding it.
"""

from __future__ import annotations

from typing import Any

from ..codec.config import DEFAULT_CONFIG, CodecConfig
from ..models import ByteString, Integer, List, Value, to_value


def encoded_size(obj: Any, *, config: CodecConfig | None = None) -> int:
    """Calculate the canonical encoded size in bytes.

    Args:
        obj: A Value, or a plain Python object accepted by to_value()
        config: Codec configuration (defaults to DEFAULT_CONFIG); its
            text_encoding and max_depth apply as they do in encode()

    Returns:
        Number of bytes encode(obj, config=config) would produce

    Raises:
        InvalidTypeError: If obj contains an unsupported type
        InvalidMapKeyError: If a dictionary key is not str or bytes
        DepthLimitError: If nesting exceeds config.max_depth

    Example:
        >>> encoded_size({"cow": "moo"})
        12  # d 3:cow 3:moo e
    """
    config = config or DEFAULT_CONFIG
    value = to_value(obj, max_depth=config.max_depth, text_encoding=config.text_encoding)
    return _size(value)


def _size(value: Value) -> int:
    if isinstance(value, Integer):
        # i<digits>e
        return len(str(value.value)) + 2

    if isinstance(value, ByteString):
        return _string_size(len(value.value))

    if isinstance(value, List):
        return 2 + sum(_size(item) for item in value.items)

    return 2 + sum(
        _string_size(len(key)) + _size(item) for key, item in value.entries.items()
    )


def _string_size(length: int) -> int:
    # <length>:<payload>
    return len(str(length)) + 1 + length
