"""Combination counting for cartesian products."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from combspace.errors import CountOverflowError

MAX_COUNT = 2**64 - 1
"""Default largest combination count (the unsigned 64-bit range)."""


def compute_max_size(
    spec: Sequence[Sequence[Any]],
    limit: int = MAX_COUNT,
) -> int:
    """Count total combinations without generating them.

    Multiply the dimension sizes in order, checking the running product
    against ``limit`` after each step.

    Parameters
    ----------
    spec : Sequence[Sequence[Any]]
        Ordered dimensions of the product.
    limit : int
        Largest count allowed. Default: ``MAX_COUNT``.

    Returns
    -------
    int
        Total number of combinations. Zero when ``spec`` has no dimensions
        or any dimension is empty.

    Raises
    ------
    CountOverflowError
        If the product of dimension sizes exceeds ``limit``.

    Examples
    --------
    >>> compute_max_size([[1, 2], ["a", "b"], [True, False]])
    8
    >>> compute_max_size([[1, 2], []])
    0
    >>> compute_max_size([])
    0
    """
    if not spec:
        return 0

    sizes = [len(dimension) for dimension in spec]
    # an empty dimension empties the product, even when the others overflow
    if 0 in sizes:
        return 0

    count = 1
    for size in sizes:
        count *= size
        if count > limit:
            raise CountOverflowError(
                f"Product of dimension sizes {sizes} exceeds the count limit {limit}",
                limit=limit,
            )
    return count
