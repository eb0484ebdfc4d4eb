"""Configuration for the bencode codec.

A CodecConfig is passed to the encoder and decoder. The defaults bound
nesting depth and accept any well-formed decimal numeral.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CodecConfig:
    """Settings shared by Encoder and Decoder.

    Attributes:
        max_depth: Maximum list/dictionary nesting (default 256), or None for
            no limit. A top-level list has depth 1. Without a limit, deeply
            nested input can exhaust the interpreter's recursion limit.

        strict: Reject non-canonical numerals when decoding (default False).
            With strict=True, leading zeros (``i03e``, ``03:abc``) and
            negative zero (``i-0e``) raise InvalidDataError. Otherwise they
            decode to their numeric value.

        text_encoding: Encoding applied to str values and keys before
            encoding (default "utf-8").

    Examples:
        ```python
        from bencoding import CodecConfig, decode

        # Shallow documents only
        config = CodecConfig(max_depth=8)
        value = decode(b"ld3:cowi1eee", config=config)

        # Only accept canonical numerals
        canonical = CodecConfig(strict=True)
        decode(b"i007e", config=canonical)  # raises InvalidDataError
        ```
    """

    max_depth: Optional[int] = 256
    strict: bool = False
    text_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1 or None, got {self.max_depth}")

        try:
            codecs.lookup(self.text_encoding)
        except LookupError as e:
            raise ValueError(f"Unknown text_encoding: {self.text_encoding}") from e


DEFAULT_CONFIG = CodecConfig()
