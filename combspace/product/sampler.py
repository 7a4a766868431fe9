"""Evenly-spread index sampling over a product's index range."""

from __future__ import annotations

import logging
import random

from combspace.errors import SampleTooLargeError
from combspace.product.validation import as_index

logger = logging.getLogger(__name__)

type RandomSource = random.Random | int | None


def ensure_rng(rng: RandomSource = None) -> random.Random:
    """Normalize a random source to a ``random.Random`` instance.

    Parameters
    ----------
    rng : random.Random | int | None
        An existing generator (returned as-is), an integer seed, or None
        for a fresh OS-seeded generator.

    Returns
    -------
    random.Random
        Generator to draw from. The module-level ``random`` state is never
        used.

    Examples
    --------
    >>> ensure_rng(42).random() == ensure_rng(42).random()
    True
    """
    if isinstance(rng, random.Random):
        return rng
    if isinstance(rng, bool):
        raise TypeError("Random seed must be an integer, not bool")
    return random.Random(rng)


def generate_random_indices(
    sample_size: int,
    max_size: int,
    rng: RandomSource = None,
) -> list[int]:
    """Pick distinct indices spread evenly across ``[0, max_size)``.

    The range is split into ``sample_size`` contiguous buckets of width
    ``max_size // sample_size``, the last bucket absorbing the remainder.
    One index is drawn uniformly from each bucket, so the results are
    distinct without any rejection loop.

    Parameters
    ----------
    sample_size : int
        Number of indices to draw.
    max_size : int
        Number of combinations (size of the index range).
    rng : random.Random | int | None
        Generator or seed for the per-bucket offsets. Default: None (fresh
        generator).

    Returns
    -------
    list[int]
        ``sample_size`` distinct indices in ascending order, one per bucket.

    Raises
    ------
    TypeError
        If ``sample_size`` or ``max_size`` is not an integer.
    ValueError
        If ``sample_size`` or ``max_size`` is negative.
    SampleTooLargeError
        If ``sample_size`` exceeds ``max_size``.

    Examples
    --------
    >>> generate_random_indices(4, 4, rng=0)
    [0, 1, 2, 3]
    >>> indices = generate_random_indices(10, 144, rng=42)
    >>> len(indices), len(set(indices))
    (10, 10)
    """
    sample_size = as_index(sample_size, "sample_size")
    max_size = as_index(max_size, "max_size")
    if sample_size < 0:
        raise ValueError(f"sample_size must be non-negative, got {sample_size}")
    if max_size < 0:
        raise ValueError(f"max_size must be non-negative, got {max_size}")
    if sample_size > max_size:
        raise SampleTooLargeError(sample_size, max_size)
    if sample_size == 0:
        return []

    generator = ensure_rng(rng)
    width = max_size // sample_size
    logger.debug(
        f"Sampling {sample_size} of {max_size} indices (bucket width {width})"
    )

    indices: list[int] = []
    for bucket in range(sample_size):
        start = bucket * width
        # last bucket takes the remainder of the range
        stop = max_size if bucket == sample_size - 1 else start + width
        indices.append(start + generator.randrange(stop - start))
    return indices
