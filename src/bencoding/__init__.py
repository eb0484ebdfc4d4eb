"""bencoding: Canonical Bencode Codec

A Python library for the compact, self-describing bencode serialization
format. Values are integers, byte strings, lists and string-keyed
dictionaries; encoding is canonical (dictionary keys sorted by byte order), so
equal values always produce identical bytes and can be hashed or compared.

Key Features:
- Pydantic-based value model (Integer, ByteString, List, Dictionary)
- Canonical encoder with append-only output buffers
- Recursive-descent decoder with one-byte lookahead and bounded nesting
- Distinct, catchable error for every kind of malformed input

Quick Start:
    >>> from bencoding import decode, encode
    >>>
    >>> data = encode({"files": {"info_hash": {"complete": 3}}})
    >>> data
    b'd5:filesd9:info_hashd8:completei3eeee'
    >>> decode(data).to_python()
    {b'files': {b'info_hash': {b'complete': 3}}}
"""

from __future__ import annotations

import logging

from .codec import (
    DEFAULT_CONFIG,
    Buffer,
    CodecConfig,
    Cursor,
    Decoder,
    Encoder,
    decode,
    encode,
    iter_decode,
)
from .exceptions import (
    BencodingError,
    DecodeError,
    DepthLimitError,
    EncodeError,
    InvalidDataError,
    InvalidListError,
    InvalidMapKeyError,
    InvalidTypeError,
    TruncatedStringError,
)
from .models import (
    ByteString,
    Dictionary,
    Integer,
    List,
    Value,
    byte_string,
    dictionary,
    integer,
    list_of,
    to_value,
)
from .utils import canonicalize, encoded_size, is_canonical

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "encode",
    "decode",
    "iter_decode",
    "Encoder",
    "Decoder",
    "Buffer",
    "Cursor",
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Value model
    "Value",
    "Integer",
    "ByteString",
    "List",
    "Dictionary",
    "integer",
    "byte_string",
    "list_of",
    "dictionary",
    "to_value",
    # Exceptions
    "BencodingError",
    "EncodeError",
    "InvalidTypeError",
    "InvalidMapKeyError",
    "DecodeError",
    "InvalidDataError",
    "InvalidListError",
    "TruncatedStringError",
    "DepthLimitError",
    # Utilities
    "encoded_size",
    "canonicalize",
    "is_canonical",
    # Version
    "__version__",
]
