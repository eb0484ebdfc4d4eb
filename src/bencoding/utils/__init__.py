"""Utility functions for bencoding.

This module provides size calculation and canonical form checks.
"""

from __future__ import annotations

from .canonical import canonicalize, is_canonical
from .sizing import encoded_size

__all__ = [
    "encoded_size",
    "canonicalize",
    "is_canonical",
]
