"""Shared fixtures for gibbercode tests."""

import pytest

from gibbercode.core.radix import MASK


@pytest.fixture
def sample_pairs():
    """(major, minor) pairs covering zero, small, mixed and near-max values."""
    return [
        (0, 0),
        (0, 1),
        (1, 0),
        (1, 1),
        (16, 4),
        (17, 5),
        (23242151, 123),
        (123, 23242151),
        (2**64, 2**64 - 1),
        (MASK, 0),
        (0, MASK),
        (MASK, MASK),
        (MASK - 1, MASK - 17),
    ]
