"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def scrape_document() -> dict[str, Any]:
    """Tracker scrape response with two torrents, keys deliberately unsorted."""
    return {
        "files": {
            "info_hash_2": {"complete": 0, "downloaded": 1, "incomplete": 2},
            "info_hash_1": {"complete": 3, "downloaded": 4, "incomplete": 3},
        }
    }


@pytest.fixture
def scrape_encoded() -> bytes:
    """Canonical encoding of scrape_document."""
    return (
        b"d5:filesd"
        b"11:info_hash_1d8:completei3e10:downloadedi4e10:incompletei3ee"
        b"11:info_hash_2d8:completei0e10:downloadedi1e10:incompletei2ee"
        b"ee"
    )
