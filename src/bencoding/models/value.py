"""The bencode value model.

A Value is exactly one of four variants: Integer, ByteString, List or
Dictionary. Containers hold other Values only, so a decoded or hand-built
tree never mixes in raw Python objects.

Example:
    >>> doc = Dictionary(entries={b"cow": ByteString(value=b"moo")})
    >>> doc.to_python()
    {b'cow': b'moo'}
"""

from __future__ import annotations

from typing import Any, ClassVar, Union

from pydantic import Field

from .base import INT64_MAX, INT64_MIN, BaseValue


class Integer(BaseValue):
    """A signed 64-bit whole number."""

    kind: ClassVar[str] = "integer"

    value: int = Field(ge=INT64_MIN, le=INT64_MAX)

    def to_python(self) -> int:
        return self.value


class ByteString(BaseValue):
    """An opaque byte sequence of explicit length.

    The payload is not required to be valid text.
    """

    kind: ClassVar[str] = "string"

    value: bytes

    def to_python(self) -> bytes:
        return self.value

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the payload as text.

        Raises:
            UnicodeDecodeError: If the payload is not valid in ``encoding``
        """
        return self.value.decode(encoding)


class List(BaseValue):
    """An ordered sequence of values."""

    kind: ClassVar[str] = "list"

    items: list[Value] = Field(default_factory=list)

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


class Dictionary(BaseValue):
    """A mapping from byte-string keys to values.

    Keys are kept in insertion order; the encoder sorts them when writing.
    """

    kind: ClassVar[str] = "dictionary"

    entries: dict[bytes, Value] = Field(default_factory=dict)

    def to_python(self) -> dict[bytes, Any]:
        return {key: value.to_python() for key, value in self.entries.items()}

    def get(self, key: bytes | str, default: Value | None = None) -> Value | None:
        """Look up a key given as bytes or UTF-8 text."""
        if isinstance(key, str):
            key = key.encode("utf-8")
        return self.entries.get(key, default)


Value = Union[Integer, ByteString, List, Dictionary]

VALUE_TYPES = (Integer, ByteString, List, Dictionary)

# Resolve the recursive Value references now that the union exists
List.model_rebuild()
Dictionary.model_rebuild()
