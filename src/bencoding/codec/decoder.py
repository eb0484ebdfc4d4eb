"""Recursive-descent bencode decoder.

This module provides the decode() and iter_decode() functions and the
Decoder class that parse bencoded bytes back into Values. Parsing is a single
front-to-back pass over a Cursor with one byte of lookahead.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import Union, cast

from ..exceptions import (
    DepthLimitError,
    InvalidDataError,
    InvalidListError,
    TruncatedStringError,
)
from ..models import INT64_MAX, INT64_MIN, ByteString, Dictionary, Integer, List, Value
from .buffer import Buffer, Cursor
from .config import DEFAULT_CONFIG, CodecConfig

logger = logging.getLogger(__name__)

Source = Union[Cursor, Buffer, bytes, bytearray, memoryview]

# Integer bodies, with and without canonical form enforced
_CANONICAL_INT = re.compile(rb"0|-?[1-9][0-9]*")
_LENIENT_INT = re.compile(rb"-?[0-9]+")

_INT = ord("i")
_LIST = ord("l")
_DICT = ord("d")
_END = ord("e")
_COLON = ord(":")
_ZERO = ord("0")
_NINE = ord("9")


def _is_digit(byte: int) -> bool:
    return _ZERO <= byte <= _NINE


class Decoder:
    """Reads successive bencoded values from a byte source.

    Each decode() call consumes exactly one top-level value. Iterating over
    the decoder drains every remaining value.

    Example:
        >>> decoder = Decoder(b"i3e3:cow")
        >>> decoder.decode()
        Integer(value=3)
        >>> decoder.decode()
        ByteString(value=b'cow')
        >>> decoder.decode() is None
        True
    """

    def __init__(self, source: Source, config: CodecConfig | None = None) -> None:
        """Initialize a decoder.

        Args:
            source: Cursor to read from (shared, its position advances), a
                Buffer (its current contents), or a bytes-like object
            config: Codec configuration (defaults to DEFAULT_CONFIG)

        Raises:
            TypeError: If source is not one of the supported types
        """
        if isinstance(source, Cursor):
            self.cursor = source
        elif isinstance(source, Buffer):
            self.cursor = source.cursor()
        elif isinstance(source, (bytes, bytearray, memoryview)):
            self.cursor = Cursor(source)
        else:
            raise TypeError(f"Cannot decode from {type(source).__name__}; expected bytes")
        self.config = config or DEFAULT_CONFIG

    def decode(self) -> Value | None:
        """Decode the next top-level value.

        Returns:
            The decoded Value, or None when the input is exhausted

        Raises:
            InvalidDataError: If a byte cannot start or continue a value
            InvalidListError: If input ends inside a list
            TruncatedStringError: If a string is shorter than its declared length
            DepthLimitError: If nesting exceeds config.max_depth
        """
        if self.cursor.at_end():
            return None
        return self._decode_value(0)

    def __iter__(self) -> Iterator[Value]:
        while True:
            value = self.decode()
            if value is None:
                return
            yield value

    def _decode_value(self, depth: int) -> Value:
        start = self.cursor.position
        byte = self.cursor.read_byte()

        if byte is None:
            raise InvalidDataError("Unexpected end of input, expected a value", start)

        if _is_digit(byte):
            return self._decode_string(byte, start)

        if byte == _INT:
            return self._decode_integer(start)

        if byte == _LIST:
            return self._decode_list(self._enter(depth, start), start)

        if byte == _DICT:
            return self._decode_dict(self._enter(depth, start), start)

        raise InvalidDataError(f"Unexpected byte {bytes((byte,))!r}", start)

    def _decode_string(self, first: int, start: int) -> ByteString:
        digits = bytearray((first,))
        while True:
            byte = self.cursor.read_byte()
            if byte is None:
                raise TruncatedStringError("Input ended inside string length", start)
            if byte == _COLON:
                break
            if not _is_digit(byte):
                raise InvalidDataError(
                    f"Unexpected byte {bytes((byte,))!r} in string length",
                    self.cursor.position - 1,
                )
            digits.append(byte)

        if self.config.strict and len(digits) > 1 and digits[0] == _ZERO:
            raise InvalidDataError(f"Leading zero in string length {bytes(digits)!r}", start)

        # A length with more digits than the remaining byte count can't be satisfied
        significant = bytes(digits).lstrip(b"0")
        if len(significant) > len(str(self.cursor.remaining)):
            raise TruncatedStringError(
                f"String declares {significant.decode()} bytes but only "
                f"{self.cursor.remaining} available",
                start,
            )

        length = int(significant or b"0")
        payload = self.cursor.read_exact(length)
        if len(payload) < length:
            raise TruncatedStringError(
                f"String declares {length} bytes but only {len(payload)} available", start
            )

        return ByteString(value=payload)

    def _decode_integer(self, start: int) -> Integer:
        body = self.cursor.read_until(_END)
        if body is None:
            raise InvalidDataError("Integer is missing its terminator", start)

        pattern = _CANONICAL_INT if self.config.strict else _LENIENT_INT
        if not pattern.fullmatch(body):
            raise InvalidDataError(f"Malformed integer {body!r}", start)

        # 19 significant digits covers the whole 64-bit range
        significant = body.lstrip(b"-").lstrip(b"0")
        if len(significant) > 19:
            raise InvalidDataError(f"Integer {body[:24]!r}... out of signed 64-bit range", start)

        value = int(significant or b"0")
        if body.startswith(b"-"):
            value = -value
        if value < INT64_MIN or value > INT64_MAX:
            raise InvalidDataError(f"Integer {value} out of signed 64-bit range", start)

        return Integer(value=value)

    def _decode_list(self, depth: int, start: int) -> List:
        items: list[Value] = []
        while True:
            byte = self.cursor.peek_byte()
            if byte is None:
                raise InvalidListError("List is missing its terminator", start)
            if byte == _END:
                self.cursor.read_byte()
                break
            items.append(self._decode_value(depth))

        return List(items=items)

    def _decode_dict(self, depth: int, start: int) -> Dictionary:
        entries: dict[bytes, Value] = {}
        while True:
            byte = self.cursor.peek_byte()
            if byte is None:
                raise InvalidDataError("Dictionary is missing its terminator", start)
            if byte == _END:
                self.cursor.read_byte()
                break
            if not _is_digit(byte):
                raise InvalidDataError("Dictionary key must be a byte string", self.cursor.position)

            key = cast(ByteString, self._decode_value(depth))
            if self.cursor.at_end():
                raise InvalidDataError(f"Dictionary key {key.value!r} has no value", start)

            # Duplicate keys: last one read wins
            entries[key.value] = self._decode_value(depth)

        return Dictionary(entries=entries)

    def _enter(self, depth: int, position: int) -> int:
        depth += 1
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            logger.debug(
                "Decode aborted at byte %d: nesting exceeds max_depth=%d", position, max_depth
            )
            raise DepthLimitError(max_depth, position)
        return depth


def decode(source: Source, *, config: CodecConfig | None = None) -> Value | None:
    """Decode one bencoded value.

    Passing a Cursor lets repeated calls drain successive values; bytes are
    read from the start every time.

    Args:
        source: Cursor, Buffer or bytes-like object to decode
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        The decoded Value, or None if the source holds no more values

    Raises:
        InvalidDataError: If a byte cannot start or continue a value
        InvalidListError: If input ends inside a list
        TruncatedStringError: If a string is shorter than its declared length
        DepthLimitError: If nesting exceeds config.max_depth

    Examples:
        ```python
        from bencoding import decode

        decode(b"i-1e")                    # Integer(value=-1)
        decode(b"l3:cow3:mooe").to_python()  # [b"cow", b"moo"]
        decode(b"")                        # None
        ```
    """
    return Decoder(source, config).decode()


def iter_decode(source: Source, *, config: CodecConfig | None = None) -> Iterator[Value]:
    """Yield every top-level value in source, in order."""
    return iter(Decoder(source, config))
