"""Value construction helpers.

This module provides one typed builder per variant plus to_value(), which
converts plain Python objects (int, bytes, str, list, tuple, dict) into the
value model. These are the only places where host objects are inspected;
everything downstream works on Values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from ..exceptions import DepthLimitError, InvalidMapKeyError, InvalidTypeError
from .base import INT64_MAX, INT64_MIN
from .value import VALUE_TYPES, ByteString, Dictionary, Integer, List, Value

BytesLike = (bytes, bytearray, memoryview)


def integer(value: int) -> Integer:
    """Create an Integer value.

    Args:
        value: Whole number in the signed 64-bit range (bool is rejected)

    Raises:
        InvalidTypeError: If value is not an int or is out of range

    Example:
        >>> integer(-1)
        Integer(value=-1)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTypeError(f"Expected int, got {type(value).__name__}")
    if value < INT64_MIN or value > INT64_MAX:
        raise InvalidTypeError(f"Integer {value} out of signed 64-bit range")
    return Integer(value=value)


def byte_string(value: bytes | bytearray | memoryview | str, encoding: str = "utf-8") -> ByteString:
    """Create a ByteString value.

    Text is encoded with ``encoding``; bytes-like objects are copied as-is.

    Raises:
        InvalidTypeError: If value is neither text nor bytes-like
    """
    if isinstance(value, str):
        return ByteString(value=value.encode(encoding))
    if isinstance(value, BytesLike):
        return ByteString(value=bytes(value))
    raise InvalidTypeError(f"Expected bytes or str, got {type(value).__name__}")


def list_of(*items: Any) -> List:
    """Create a List value from Values or convertible Python objects.

    Example:
        >>> list_of(b"cow", 3).to_python()
        [b'cow', 3]
    """
    return List(items=[to_value(item) for item in items])


def dictionary(mapping: Mapping[Any, Any] | None = None, **kwargs: Any) -> Dictionary:
    """Create a Dictionary value.

    Keys may be bytes or text (text is UTF-8 encoded). Keyword arguments are
    added after ``mapping``; on duplicate keys the last one wins.

    Example:
        >>> dictionary({"b": 1}, a=2).to_python()
        {b'b': 1, b'a': 2}
    """
    merged: dict[Any, Any] = dict(mapping or {})
    merged.update(kwargs)
    return cast(Dictionary, to_value(merged))


def to_value(
    obj: Any,
    *,
    max_depth: int | None = None,
    text_encoding: str = "utf-8",
) -> Value:
    """Convert a plain Python object into a Value.

    Conversion rules:
        - Value instances pass through unchanged
        - int (not bool) becomes Integer
        - bytes, bytearray, memoryview and str become ByteString
        - list and tuple become List
        - any Mapping becomes Dictionary; keys must be str or bytes

    Args:
        obj: Object to convert
        max_depth: Maximum container nesting, or None for no limit
        text_encoding: Encoding used for str values and keys

    Returns:
        Equivalent Value

    Raises:
        InvalidTypeError: If obj (or anything inside it) has an unsupported type
        InvalidMapKeyError: If a mapping key is not str or bytes
        DepthLimitError: If nesting exceeds max_depth
    """
    return _convert(obj, 0, max_depth, text_encoding)


def _convert(obj: Any, depth: int, max_depth: int | None, text_encoding: str) -> Value:
    if isinstance(obj, VALUE_TYPES):
        return obj

    if isinstance(obj, bool):
        raise InvalidTypeError("Cannot encode bool; use an int instead")

    if isinstance(obj, int):
        if obj < INT64_MIN or obj > INT64_MAX:
            raise InvalidTypeError(f"Integer {obj} out of signed 64-bit range")
        return Integer(value=obj)

    if isinstance(obj, str):
        return ByteString(value=obj.encode(text_encoding))

    if isinstance(obj, BytesLike):
        return ByteString(value=bytes(obj))

    if isinstance(obj, (list, tuple)):
        depth = _enter(depth, max_depth)
        return List(items=[_convert(item, depth, max_depth, text_encoding) for item in obj])

    if isinstance(obj, Mapping):
        depth = _enter(depth, max_depth)
        entries: dict[bytes, Value] = {}
        for key, item in obj.items():
            if isinstance(key, str):
                key = key.encode(text_encoding)
            elif isinstance(key, BytesLike):
                key = bytes(key)
            else:
                raise InvalidMapKeyError(
                    f"Dictionary keys must be str or bytes, got {type(key).__name__}"
                )
            entries[key] = _convert(item, depth, max_depth, text_encoding)
        return Dictionary(entries=entries)

    raise InvalidTypeError(f"Cannot encode value of type {type(obj).__name__}")


def _enter(depth: int, max_depth: int | None) -> int:
    depth += 1
    if max_depth is not None and depth > max_depth:
        raise DepthLimitError(max_depth)
    return depth
