"""Unit tests for decoding."""

from __future__ import annotations

import pytest

from bencoding import (
    Buffer,
    ByteString,
    CodecConfig,
    Cursor,
    DecodeError,
    Decoder,
    DepthLimitError,
    Dictionary,
    Integer,
    InvalidDataError,
    InvalidListError,
    List,
    TruncatedStringError,
    decode,
    iter_decode,
)


class TestDecodeValues:
    """Test decoding each value kind."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"i3e", 3),
            (b"i-1e", -1),
            (b"i0e", 0),
            (b"i9223372036854775807e", (1 << 63) - 1),
            (b"i-9223372036854775808e", -(1 << 63)),
        ],
    )
    def test_integer(self, data: bytes, expected: int) -> None:
        """Test integer bodies."""
        assert decode(data) == Integer(value=expected)

    def test_string(self) -> None:
        """Test a byte string."""
        assert decode(b"3:cow") == ByteString(value=b"cow")

    def test_empty_string(self) -> None:
        """Test a zero-length byte string."""
        assert decode(b"0:") == ByteString(value=b"")

    def test_binary_string(self) -> None:
        """Test payload bytes are taken verbatim, including grammar bytes."""
        assert decode(b"4:e\x00:\xff") == ByteString(value=b"e\x00:\xff")

    def test_list(self) -> None:
        """Test list elements keep their order."""
        value = decode(b"l3:cow11:01234567891e")

        assert isinstance(value, List)
        assert value.to_python() == [b"cow", b"01234567891"]

    def test_empty_list(self) -> None:
        """Test an empty list."""
        assert decode(b"le") == List()

    def test_dictionary(self) -> None:
        """Test a dictionary."""
        value = decode(b"d3:cow3:doge")

        assert isinstance(value, Dictionary)
        assert value.get("cow") == ByteString(value=b"dog")

    def test_empty_dictionary(self) -> None:
        """Test an empty dictionary."""
        assert decode(b"de") == Dictionary()

    def test_nested(self, scrape_encoded: bytes) -> None:
        """Test a nested document."""
        value = decode(scrape_encoded)

        assert value is not None
        assert value.to_python() == {
            b"files": {
                b"info_hash_1": {b"complete": 3, b"downloaded": 4, b"incomplete": 3},
                b"info_hash_2": {b"complete": 0, b"downloaded": 1, b"incomplete": 2},
            }
        }

    def test_dictionary_keeps_wire_order(self) -> None:
        """Test unsorted keys are accepted and kept in wire order."""
        value = decode(b"d1:bi1e1:ai2ee")

        assert isinstance(value, Dictionary)
        assert list(value.entries) == [b"b", b"a"]

    def test_duplicate_keys_last_wins(self) -> None:
        """Test a repeated key keeps the last value read."""
        value = decode(b"d1:ai1e1:ai2ee")

        assert isinstance(value, Dictionary)
        assert value.entries == {b"a": Integer(value=2)}


class TestEndOfStream:
    """Test the no-more-values signal."""

    def test_empty_input(self) -> None:
        """Test empty input is not an error."""
        assert decode(b"") is None

    def test_drain_successive_values(self) -> None:
        """Test repeated decode() calls on one decoder."""
        decoder = Decoder(b"i3e3:cowle")

        assert decoder.decode() == Integer(value=3)
        assert decoder.decode() == ByteString(value=b"cow")
        assert decoder.decode() == List()
        assert decoder.decode() is None
        assert decoder.decode() is None

    def test_shared_cursor(self) -> None:
        """Test decode() advances a caller-owned cursor."""
        cursor = Cursor(b"i1ei2e")

        assert decode(cursor) == Integer(value=1)
        assert cursor.position == 3
        assert decode(cursor) == Integer(value=2)
        assert decode(cursor) is None

    def test_iter_decode(self) -> None:
        """Test iterating over every top-level value."""
        values = list(iter_decode(b"i1e1:ad1:bi2ee"))

        assert [v.to_python() for v in values] == [1, b"a", {b"b": 2}]

    def test_buffer_source(self) -> None:
        """Test decoding what was written to a Buffer."""
        buffer = Buffer()
        buffer.write_encoded("i3e")

        assert decode(buffer) == Integer(value=3)

    def test_unsupported_source(self) -> None:
        """Test text is not accepted as input."""
        with pytest.raises(TypeError, match="expected bytes"):
            decode("i3e")  # type: ignore[arg-type]


class TestMalformedInput:
    """Test decoding error handling."""

    @pytest.mark.parametrize("data", [b"x", b"e", b"-1", b":", b"\x00"])
    def test_invalid_start_byte(self, data: bytes) -> None:
        """Test bytes that cannot start a value."""
        with pytest.raises(InvalidDataError):
            decode(data)

    def test_error_position(self) -> None:
        """Test errors report where the problem was found."""
        with pytest.raises(InvalidDataError, match="at byte 4") as excinfo:
            decode(b"li1ex")

        assert excinfo.value.position == 4

    @pytest.mark.parametrize(
        "data",
        [b"ie", b"i-e", b"i1.5e", b"i12", b"i 1e", b"i+1e", b"i1-e", b"i99999999999999999999e"],
    )
    def test_malformed_integer(self, data: bytes) -> None:
        """Test malformed integer bodies."""
        with pytest.raises(InvalidDataError):
            decode(data)

    @pytest.mark.parametrize("data", [b"i03e", b"i-0e", b"i-01e", b"03:cow"])
    def test_non_canonical_numerals_strict(self, data: bytes) -> None:
        """Test leading zeros and negative zero are rejected when strict is on."""
        with pytest.raises(InvalidDataError):
            decode(data, config=CodecConfig(strict=True))

    def test_non_canonical_numerals_default(self) -> None:
        """Test leading zeros and negative zero decode by default."""
        assert decode(b"i03e") == Integer(value=3)
        assert decode(b"i-0e") == Integer(value=0)
        assert decode(b"i-01e") == Integer(value=-1)
        assert decode(b"03:cow") == ByteString(value=b"cow")
        assert decode(b"00:") == ByteString(value=b"")

    def test_long_zero_padding(self) -> None:
        """Test numerals padded with thousands of zeros decode by default."""
        padding = b"0" * 5000

        assert decode(b"i" + padding + b"7e") == Integer(value=7)
        assert decode(b"i-" + padding + b"7e") == Integer(value=-7)
        assert decode(padding + b"3:cow") == ByteString(value=b"cow")
        assert decode(padding + b":") == ByteString(value=b"")

    def test_truncated_string(self) -> None:
        """Test a declared length longer than the input."""
        with pytest.raises(TruncatedStringError, match="declares 5 bytes"):
            decode(b"5:cow")

    def test_huge_declared_length(self) -> None:
        """Test a length prefix far beyond the input size."""
        with pytest.raises(TruncatedStringError, match="declares"):
            decode(b"9" * 5000 + b":abc")

    def test_huge_integer_body(self) -> None:
        """Test an integer body with thousands of digits."""
        with pytest.raises(InvalidDataError, match="64-bit"):
            decode(b"i" + b"9" * 5000 + b"e")

    def test_truncated_length_prefix(self) -> None:
        """Test input ending inside a length prefix."""
        with pytest.raises(TruncatedStringError):
            decode(b"12")

    def test_bad_length_prefix(self) -> None:
        """Test a non-digit inside a length prefix."""
        with pytest.raises(InvalidDataError):
            decode(b"1x:a")

    def test_unterminated_list(self) -> None:
        """Test input ending before a list's terminator."""
        with pytest.raises(InvalidListError):
            decode(b"l3:cow")

    def test_truncated_element_in_list(self) -> None:
        """Test a truncated string inside a list."""
        with pytest.raises(TruncatedStringError):
            decode(b"l3:co")

    def test_unterminated_dictionary(self) -> None:
        """Test input ending before a dictionary's terminator."""
        with pytest.raises(InvalidDataError, match="terminator"):
            decode(b"d3:cow3:dog")

    def test_dictionary_missing_value(self) -> None:
        """Test a key without a value."""
        with pytest.raises(InvalidDataError, match="no value"):
            decode(b"d3:cow")

    def test_dictionary_lone_terminator_as_value(self) -> None:
        """Test a terminator where a value is expected."""
        with pytest.raises(InvalidDataError):
            decode(b"d3:cowe")

    @pytest.mark.parametrize("data", [b"di1ei2ee", b"dli1ee1:ae", b"dd1:ai1ee1:be"])
    def test_dictionary_non_string_key(self, data: bytes) -> None:
        """Test keys that are not byte strings."""
        with pytest.raises(InvalidDataError, match="key must be a byte string"):
            decode(data)

    def test_errors_share_base_class(self) -> None:
        """Test every decode failure is a DecodeError."""
        for data in (b"x", b"l", b"5:a"):
            with pytest.raises(DecodeError):
                decode(data)

    def test_error_after_good_values(self) -> None:
        """Test earlier values are returned before the bad one fails."""
        decoder = Decoder(b"i1ex")

        assert decoder.decode() == Integer(value=1)
        with pytest.raises(InvalidDataError):
            decoder.decode()


class TestDepthLimit:
    """Test bounded nesting."""

    def test_within_limit(self) -> None:
        """Test nesting up to the limit."""
        config = CodecConfig(max_depth=3)
        assert decode(b"llleee", config=config) == List(items=[List(items=[List()])])

    def test_exceeds_limit(self) -> None:
        """Test nesting beyond the limit."""
        config = CodecConfig(max_depth=3)

        with pytest.raises(DepthLimitError, match="max_depth=3") as excinfo:
            decode(b"lllleeee", config=config)

        assert excinfo.value.position == 3

    def test_dictionaries_count(self) -> None:
        """Test dictionaries count toward the limit."""
        config = CodecConfig(max_depth=1)

        assert decode(b"d1:ai1ee", config=config) is not None
        with pytest.raises(DepthLimitError):
            decode(b"d1:adee", config=config)

    def test_default_limit_rejects_hostile_input(self) -> None:
        """Test deeply nested input fails cleanly instead of overflowing."""
        with pytest.raises(DepthLimitError):
            decode(b"l" * 100_000)
