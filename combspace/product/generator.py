"""Sample combinations from a cartesian product.

Two paths are offered. :func:`generate_samples` returns the whole sample as a
list. :func:`iter_samples` yields one combination at a time so that callers
writing records to storage never hold more than one combination in memory.
Callers can also call :func:`~combspace.product.sampler.generate_random_indices`
once and :func:`~combspace.product.decoder.entry_at` per index themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from combspace.product.decoder import combination_at
from combspace.product.sampler import RandomSource, generate_random_indices
from combspace.product.size import MAX_COUNT, compute_max_size

logger = logging.getLogger(__name__)


def _sample_indices(
    spec: Sequence[Sequence[object]],
    sample_size: int,
    rng: RandomSource,
    limit: int,
) -> tuple[list[int], list[int]]:
    max_size = compute_max_size(spec, limit)
    indices = generate_random_indices(sample_size, max_size, rng)
    logger.debug(
        f"Selected {len(indices)} indices from {len(spec)} dimensions "
        f"({max_size} combinations)"
    )
    # indices are already in range; one sizes list serves every decode
    return indices, [len(dimension) for dimension in spec]


def generate_samples[T](
    spec: Sequence[Sequence[T]],
    sample_size: int,
    rng: RandomSource = None,
    limit: int = MAX_COUNT,
) -> list[tuple[T, ...]]:
    """Generate an evenly-spread sample of distinct combinations.

    Parameters
    ----------
    spec : Sequence[Sequence[T]]
        Ordered dimensions of the product.
    sample_size : int
        Number of combinations to return.
    rng : random.Random | int | None
        Generator or seed for index selection. Default: None.
    limit : int
        Largest combination count allowed. Default: ``MAX_COUNT``.

    Returns
    -------
    list[tuple[T, ...]]
        Exactly ``sample_size`` distinct combinations, in ascending index
        order.

    Raises
    ------
    CountOverflowError
        If the product size exceeds ``limit``.
    SampleTooLargeError
        If ``sample_size`` exceeds the number of combinations.

    Examples
    --------
    >>> generate_samples([["a", "b"], ["x", "y"]], 4, rng=7)
    [('a', 'x'), ('a', 'y'), ('b', 'x'), ('b', 'y')]
    """
    indices, sizes = _sample_indices(spec, sample_size, rng, limit)
    return [combination_at(spec, sizes, index) for index in indices]


def iter_samples[T](
    spec: Sequence[Sequence[T]],
    sample_size: int,
    rng: RandomSource = None,
    limit: int = MAX_COUNT,
) -> Iterator[tuple[T, ...]]:
    """Stream an evenly-spread sample one combination at a time.

    Indices are selected when the first combination is requested, so any
    error surfaces on the first ``next()`` before anything is yielded.

    Parameters
    ----------
    spec : Sequence[Sequence[T]]
        Ordered dimensions of the product.
    sample_size : int
        Number of combinations to yield.
    rng : random.Random | int | None
        Generator or seed for index selection. Default: None.
    limit : int
        Largest combination count allowed. Default: ``MAX_COUNT``.

    Yields
    ------
    tuple[T, ...]
        Distinct combinations in ascending index order.

    Examples
    --------
    >>> for combination in iter_samples([["a", "b"], ["x", "y"]], 2, rng=1):
    ...     write_record(combination)  # one combination alive at a time
    """
    indices, sizes = _sample_indices(spec, sample_size, rng, limit)
    for index in indices:
        yield combination_at(spec, sizes, index)
