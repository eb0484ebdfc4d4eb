"""Exception hierarchy for bencoding.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BencodingError for easy catching of any codec error.
Running out of input before a top-level value starts is not an error: decode()
returns None for that case.
"""

from __future__ import annotations


class BencodingError(Exception):
    """Base exception for all bencoding errors."""

    pass


class EncodeError(BencodingError):
    """Raised when a value cannot be encoded.

    Nothing is written to the output sink when encoding fails.
    """

    pass


class InvalidTypeError(EncodeError):
    """Raised when asked to encode something outside the four value kinds.

    Examples:
        - float, bool, None or arbitrary objects
        - integers outside the signed 64-bit range
    """

    pass


class InvalidMapKeyError(EncodeError):
    """Raised when a dictionary to encode has a key that is not a string."""

    pass


class DecodeError(BencodingError):
    """Raised when decoding bencoded data fails.

    Attributes:
        position: Byte offset in the input where the problem was detected,
            or None when unknown.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        if position is not None:
            message = f"{message} (at byte {position})"
        super().__init__(message)
        self.position = position


class InvalidDataError(DecodeError):
    """Raised when a byte cannot begin or continue a value at its position.

    Examples:
        - Unknown type marker (e.g. ``x``, or a lone ``e``)
        - Malformed integer body (``i12xe``, ``ie``, ``i03e``)
        - Truncated or malformed dictionary
    """

    pass


class InvalidListError(DecodeError):
    """Raised when input ends before a list's terminator."""

    pass


class TruncatedStringError(DecodeError):
    """Raised when a byte string declares more bytes than are available."""

    pass


class DepthLimitError(BencodingError):
    """Raised when nesting exceeds the configured maximum depth.

    Applies to both encoding and decoding; see CodecConfig.max_depth.
    """

    def __init__(self, max_depth: int, position: int | None = None) -> None:
        message = f"Nesting exceeds max_depth={max_depth}"
        if position is not None:
            message = f"{message} (at byte {position})"
        super().__init__(message)
        self.max_depth = max_depth
        self.position = position
