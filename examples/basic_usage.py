#!/usr/bin/env python3
"""Basic usage example for bencoding.

This example demonstrates:
1. Encoding a tracker scrape response
2. Decoding it back to the value model
3. Splicing a pre-encoded fragment into a document
4. Handling malformed input
"""

from __future__ import annotations

from bencoding import (
    Buffer,
    DecodeError,
    Dictionary,
    decode,
    encode,
    encoded_size,
    iter_decode,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bencoding Basic Usage Example")
    print("=" * 60)
    print()

    # Build a document from plain Python objects
    print("1. Encoding a scrape response...")
    scrape = {
        "files": {
            "info_hash_2": {"complete": 0, "downloaded": 1, "incomplete": 2},
            "info_hash_1": {"complete": 3, "downloaded": 4, "incomplete": 3},
        }
    }
    data = encode(scrape)
    print(f"   Encoded: {data!r}")
    print(f"   Size: {len(data)} bytes (predicted {encoded_size(scrape)})")
    print()

    # Decode back to Values
    print("2. Decoding...")
    value = decode(data)
    assert isinstance(value, Dictionary)
    files = value.get("files")
    assert isinstance(files, Dictionary)
    for info_hash, stats in files.to_python().items():
        print(f"   {info_hash.decode()}: {stats}")
    print()

    # Compose with a pre-encoded fragment
    print("3. Splicing a pre-encoded info dictionary...")
    info = encode({"name": "example", "length": 42})
    buffer = Buffer()
    buffer.write_encoded("d")
    encode("info", buffer)
    buffer.write_encoded(info)
    buffer.write_encoded("e")
    print(f"   Document: {str(buffer)}")
    print()

    # Multiple values and malformed input
    print("4. Draining a stream that ends badly...")
    try:
        for item in iter_decode(b"i1e3:cowl3:dog"):
            print(f"   Decoded: {item!r}")
    except DecodeError as e:
        print(f"   Error: {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
