"""Canonical form helpers.

The decoder keeps dictionary entries in wire order and does not check that
keys are sorted, so a decodable blob is not necessarily canonical. These
helpers re-encode a blob to find out.
"""

from __future__ import annotations

from ..codec.buffer import Buffer
from ..codec.config import CodecConfig
from ..codec.decoder import Source, iter_decode
from ..codec.encoder import Encoder


def canonicalize(data: Source, *, config: CodecConfig | None = None) -> bytes:
    """Re-encode every top-level value in data in canonical form.

    Raises:
        DecodeError: If data is malformed
        DepthLimitError: If nesting exceeds config.max_depth

    Example:
        >>> canonicalize(b"d1:bi1e1:ai2ee")
        b'd1:ai2e1:bi1ee'
    """
    encoder = Encoder(Buffer(), config)
    for value in iter_decode(data, config=config):
        encoder.encode(value)
    return encoder.sink.to_bytes()


def is_canonical(data: bytes, *, config: CodecConfig | None = None) -> bool:
    """Return True if data is already in canonical form.

    Raises:
        DecodeError: If data is malformed
    """
    return canonicalize(data, config=config) == bytes(data)
