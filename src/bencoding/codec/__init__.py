"""Bencode codec for bencoding.

This module provides encoding and decoding between Values and canonical
bencode bytes, plus the Buffer and Cursor types they operate on.
"""

from __future__ import annotations

from .buffer import Buffer, Cursor
from .config import DEFAULT_CONFIG, CodecConfig
from .decoder import Decoder, decode, iter_decode
from .encoder import Encoder, encode

__all__ = [
    "encode",
    "decode",
    "iter_decode",
    "Encoder",
    "Decoder",
    "Buffer",
    "Cursor",
    "CodecConfig",
    "DEFAULT_CONFIG",
]
