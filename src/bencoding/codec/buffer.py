"""Byte-level output sink and input cursor.

Buffer is the append-only target the encoder writes into. Cursor reads a
byte sequence front to back with one byte of pushback, which is all the
lookahead the bencode grammar needs.
"""

from __future__ import annotations


class Buffer:
    """Append-only byte store for encoded output.

    Example:
        >>> buffer = Buffer()
        >>> buffer.write_encoded("i3e")
        3
        >>> str(buffer)
        'i3e'
    """

    def __init__(self, initial: bytes = b"") -> None:
        """Initialize a buffer, optionally with existing contents."""
        self._data = bytearray(initial)

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Append raw bytes.

        Returns:
            Number of bytes appended
        """
        chunk = memoryview(data).cast("B")
        self._data.extend(chunk)
        return chunk.nbytes

    def write_encoded(self, fragment: bytes | str) -> int:
        """Append an already-encoded fragment verbatim.

        The fragment is not parsed or validated, so pre-encoded sub-documents
        can be spliced in without a decode/encode round trip. Text fragments
        are written as UTF-8.

        Returns:
            Number of bytes appended
        """
        if isinstance(fragment, str):
            fragment = fragment.encode("utf-8")
        return self.write(fragment)

    def to_bytes(self) -> bytes:
        """Return a copy of the accumulated bytes."""
        return bytes(self._data)

    def cursor(self) -> Cursor:
        """Return a Cursor over the current contents."""
        return Cursor(self._data)

    def clear(self) -> None:
        """Discard all accumulated bytes."""
        self._data.clear()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        # latin-1 maps every byte to exactly one character
        return self._data.decode("latin-1")

    def __repr__(self) -> str:
        return f"Buffer({bytes(self._data)!r})"


class Cursor:
    """Sequential reader over a byte sequence.

    Reads return None at end of input instead of raising, so callers can
    tell a clean end of stream from a malformed value.

    Example:
        >>> cursor = Cursor(b"i3e")
        >>> cursor.read_byte() == ord("i")
        True
        >>> cursor.unread_byte()
        >>> cursor.position
        0
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        """Initialize a cursor at the start of ``data`` (which is copied)."""
        self._data = bytes(data)
        self._position = 0
        self._can_unread = False

    @property
    def position(self) -> int:
        """Offset of the next byte to be read."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self._position

    def at_end(self) -> bool:
        """Return True if every byte has been consumed."""
        return self._position >= len(self._data)

    def read_byte(self) -> int | None:
        """Read one byte.

        Returns:
            The byte value (0-255), or None at end of input
        """
        if self._position >= len(self._data):
            self._can_unread = False
            return None

        byte = self._data[self._position]
        self._position += 1
        self._can_unread = True
        return byte

    def unread_byte(self) -> None:
        """Push back the byte returned by the last read_byte().

        Only one byte of pushback is available.

        Raises:
            ValueError: If the previous operation was not a successful read_byte()
        """
        if not self._can_unread:
            raise ValueError("unread_byte() must directly follow a successful read_byte()")
        self._position -= 1
        self._can_unread = False

    def peek_byte(self) -> int | None:
        """Return the next byte without consuming it (None at end of input)."""
        byte = self.read_byte()
        if byte is not None:
            self.unread_byte()
        return byte

    def read_exact(self, count: int) -> bytes:
        """Read up to ``count`` bytes.

        Fewer bytes are returned when input ends first; callers compare the
        length to detect truncation.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        chunk = self._data[self._position : self._position + count]
        self._position += len(chunk)
        self._can_unread = False
        return chunk

    def read_until(self, delimiter: int) -> bytes | None:
        """Read bytes up to and including ``delimiter``.

        Returns:
            The bytes before the delimiter, or None if the delimiter does not
            occur in the remaining input (nothing is consumed in that case)
        """
        index = self._data.find(bytes((delimiter,)), self._position)
        if index == -1:
            return None

        chunk = self._data[self._position : index]
        self._position = index + 1
        self._can_unread = False
        return chunk
