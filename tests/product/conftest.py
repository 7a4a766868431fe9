"""Pytest fixtures for product module tests."""

from __future__ import annotations

import random

import pytest


@pytest.fixture
def letters_spec() -> list[list[str]]:
    """Two dimensions of size 2 (4 combinations).

    Returns
    -------
    list[list[str]]
        Dimensions ``[["a", "b"], ["x", "y"]]``.
    """
    return [["a", "b"], ["x", "y"]]


@pytest.fixture
def mixed_spec() -> list[list[object]]:
    """Four dimensions of sizes 4, 3, 3 and 4 (144 combinations).

    Returns
    -------
    list[list[object]]
        Dimensions with mixed element types.
    """
    return [
        ["red", "green", "blue", "black"],
        [1, 2, 3],
        ["small", "medium", "large"],
        ["w1", "w2", "w3", "w4"],
    ]


@pytest.fixture
def huge_spec() -> list[list[int]]:
    """Twenty dimensions of size 10 (10**20 combinations).

    Returns
    -------
    list[list[int]]
        Dimensions whose count exceeds the unsigned 64-bit range.
    """
    return [list(range(10)) for _ in range(20)]


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator.

    Returns
    -------
    random.Random
        Generator seeded with 42.
    """
    return random.Random(42)
