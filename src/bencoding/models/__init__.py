"""Pydantic value model for bencoding.

This module provides the four value variants, the Value union and the
helpers used to build values from plain Python objects.
"""

from __future__ import annotations

from .base import INT64_MAX, INT64_MIN, BaseValue
from .builders import byte_string, dictionary, integer, list_of, to_value
from .value import ByteString, Dictionary, Integer, List, Value

__all__ = [
    "BaseValue",
    "Integer",
    "ByteString",
    "List",
    "Dictionary",
    "Value",
    "INT64_MIN",
    "INT64_MAX",
    "integer",
    "byte_string",
    "list_of",
    "dictionary",
    "to_value",
]
