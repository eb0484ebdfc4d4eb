"""Canonical bencode encoder.

This module provides the encode() function and the Encoder class that
serialize Values (or plain Python objects convertible to Values) into
canonical bencode. Dictionary keys are always emitted in ascending byte order.
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import DepthLimitError, InvalidTypeError
from ..models import ByteString, Dictionary, Integer, List, Value, to_value
from .buffer import Buffer
from .config import DEFAULT_CONFIG, CodecConfig

logger = logging.getLogger(__name__)


class Encoder:
    """Writes canonical bencode into an output sink.

    The sink only ever receives complete values: each value is serialized
    into a scratch buffer first and appended once it is fully encoded.

    Example:
        >>> encoder = Encoder()
        >>> encoder.encode({"b": 1, "a": 2})
        b'd1:ai2e1:bi1ee'
        >>> encoder.encode(3)
        b'i3e'
        >>> str(encoder.sink)
        'd1:ai2e1:bi1eei3e'
    """

    def __init__(self, sink: Buffer | None = None, config: CodecConfig | None = None) -> None:
        self.sink = sink if sink is not None else Buffer()
        self.config = config or DEFAULT_CONFIG

    def encode(self, obj: Any) -> bytes:
        """Encode one value and append it to the sink.

        Args:
            obj: A Value, or a plain Python object accepted by to_value()

        Returns:
            The canonical encoding of obj

        Raises:
            InvalidTypeError: If obj contains an unsupported type
            InvalidMapKeyError: If a dictionary key is not str or bytes
            DepthLimitError: If nesting exceeds config.max_depth
        """
        value = to_value(
            obj, max_depth=self.config.max_depth, text_encoding=self.config.text_encoding
        )

        scratch = Buffer()
        self._write(scratch, value, 0)

        encoded = scratch.to_bytes()
        self.sink.write(encoded)
        logger.debug("Encoded %s value into %d bytes", value.kind, len(encoded))
        return encoded

    def _write(self, out: Buffer, value: Value, depth: int) -> None:
        # Integer
        if isinstance(value, Integer):
            out.write(b"i%de" % value.value)
            return

        # Byte string
        if isinstance(value, ByteString):
            out.write(b"%d:" % len(value.value))
            out.write(value.value)
            return

        # List
        if isinstance(value, List):
            depth = self._enter(depth)
            out.write(b"l")
            for item in value.items:
                self._write(out, item, depth)
            out.write(b"e")
            return

        # Dictionary: keys sorted by raw byte order
        if isinstance(value, Dictionary):
            depth = self._enter(depth)
            out.write(b"d")
            for key in sorted(value.entries):
                out.write(b"%d:" % len(key))
                out.write(key)
                self._write(out, value.entries[key], depth)
            out.write(b"e")
            return

        # Only reachable for containers built with model_construct()
        raise InvalidTypeError(f"Cannot encode value of type {type(value).__name__}")

    def _enter(self, depth: int) -> int:
        depth += 1
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            logger.debug("Encode aborted: nesting exceeds max_depth=%d", max_depth)
            raise DepthLimitError(max_depth)
        return depth


def encode(obj: Any, sink: Buffer | None = None, *, config: CodecConfig | None = None) -> bytes:
    """Encode a value to canonical bencode.

    Args:
        obj: A Value, or a plain Python object (int, bytes, str, list, tuple,
            dict with str/bytes keys)
        sink: Optional Buffer to append the encoding to
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        The canonical encoding of obj

    Raises:
        InvalidTypeError: If obj contains an unsupported type
        InvalidMapKeyError: If a dictionary key is not str or bytes
        DepthLimitError: If nesting exceeds config.max_depth

    Examples:
        ```python
        from bencoding import Buffer, encode

        encode({"b": 1, "a": 2})      # b"d1:ai2e1:bi1ee"
        encode("hello")               # b"5:hello"

        buffer = Buffer()
        buffer.write_encoded("i1e")
        encode([b"cow"], buffer)
        bytes(buffer)                 # b"i1el3:cowe"
        ```
    """
    return Encoder(sink, config).encode(obj)
