"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import random

import pytest
from nacl.public import PrivateKey


@pytest.fixture
def string_options() -> dict[str, str]:
    """Header to codec map used by the best-fit selector tests."""
    return {
        "01": "Alpha",
        "10": "3B40",
        "11": "UTF8",
        "0001": "Hex",
    }


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def key_pair() -> PrivateKey:
    """Fresh recipient key pair."""
    return PrivateKey.generate()
