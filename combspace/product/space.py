"""Immutable product-space value object."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import cached_property
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from combspace.config.sampling import SamplingConfig
from combspace.product.decoder import combination_digits, entry_at, index_of
from combspace.product.generator import generate_samples, iter_samples
from combspace.product.sampler import RandomSource, generate_random_indices
from combspace.product.size import compute_max_size

T = TypeVar("T")


class ProductSpace(BaseModel, Generic[T]):
    """Cartesian product of ordered dimensions, addressable by index.

    A thin, frozen wrapper over the free functions in
    :mod:`combspace.product`. The combination count is computed on first
    use and reused afterwards. Sampling methods fall back to the attached
    :class:`~combspace.config.sampling.SamplingConfig` for the sample size
    and the random seed.

    Parameters
    ----------
    dimensions : tuple[tuple[T, ...], ...]
        Ordered dimensions. Lists are accepted and stored as tuples.
    sampling : SamplingConfig
        Count limit, default sample size, and seed.

    Examples
    --------
    >>> space = ProductSpace(dimensions=[["a", "b"], ["x", "y"]])
    >>> space.max_size
    4
    >>> space.entry_at(3)
    ('b', 'y')
    >>> ("a", "x") in space
    True
    >>> seeded = ProductSpace(
    ...     dimensions=[[0, 1, 2, 3]] * 3,
    ...     sampling=SamplingConfig(seed=5, sample_size=3),
    ... )
    >>> seeded.sample() == seeded.sample()
    True
    """

    model_config = ConfigDict(frozen=True)

    dimensions: tuple[tuple[T, ...], ...] = Field(
        description="Ordered dimensions of the product"
    )
    sampling: SamplingConfig = Field(
        default_factory=SamplingConfig,
        description="Count limit, default sample size, and seed",
    )

    @classmethod
    def from_config(
        cls, dimensions: Sequence[Sequence[T]], config: SamplingConfig
    ) -> ProductSpace[T]:
        """Create a product space driven by a sampling config.

        Parameters
        ----------
        dimensions : Sequence[Sequence[T]]
            Ordered dimensions.
        config : SamplingConfig
            Provides the count limit, default sample size, and seed. A
            copy is stored, so later edits to ``config`` have no effect.

        Returns
        -------
        ProductSpace[T]
            New product space.
        """
        return cls(dimensions=dimensions, sampling=config.model_copy())

    @property
    def max_count(self) -> int:
        """Largest combination count allowed, from ``sampling``."""
        return self.sampling.max_count

    @property
    def sizes(self) -> list[int]:
        """Size of each dimension, in order."""
        return [len(dimension) for dimension in self.dimensions]

    @cached_property
    def max_size(self) -> int:
        """Total number of combinations.

        Raises
        ------
        CountOverflowError
            If the count exceeds ``max_count``.
        """
        return compute_max_size(self.dimensions, self.max_count)

    @property
    def is_empty(self) -> bool:
        """Whether the product has no combinations."""
        return self.max_size == 0

    def entry_at(self, index: int) -> tuple[T, ...]:
        """Get the combination at ``index``.

        See :func:`combspace.product.decoder.entry_at`.
        """
        return entry_at(self.dimensions, index, self.max_count)

    def index_of(self, combination: Sequence[T]) -> int:
        """Get the index of ``combination``.

        See :func:`combspace.product.decoder.index_of`.
        """
        return index_of(self.dimensions, combination, self.max_count)

    def _resolve(
        self, sample_size: int | None, rng: RandomSource
    ) -> tuple[int, RandomSource]:
        if sample_size is None:
            sample_size = self.sampling.sample_size
        if rng is None:
            rng = self.sampling.make_rng()
        return sample_size, rng

    def sample_indices(
        self, sample_size: int | None = None, rng: RandomSource = None
    ) -> list[int]:
        """Pick evenly-spread distinct indices.

        Parameters
        ----------
        sample_size : int | None
            Number of indices. Default: ``sampling.sample_size``.
        rng : random.Random | int | None
            Generator or seed. Default: a generator seeded from
            ``sampling.seed``.

        Returns
        -------
        list[int]
            Distinct indices in ascending order.
        """
        sample_size, rng = self._resolve(sample_size, rng)
        return generate_random_indices(sample_size, self.max_size, rng)

    def sample(
        self, sample_size: int | None = None, rng: RandomSource = None
    ) -> list[tuple[T, ...]]:
        """Generate evenly-spread distinct combinations.

        Defaults are taken from ``sampling`` as in :meth:`sample_indices`.
        """
        sample_size, rng = self._resolve(sample_size, rng)
        return generate_samples(self.dimensions, sample_size, rng, self.max_count)

    def iter_sample(
        self, sample_size: int | None = None, rng: RandomSource = None
    ) -> Iterator[tuple[T, ...]]:
        """Stream evenly-spread distinct combinations."""
        sample_size, rng = self._resolve(sample_size, rng)
        return iter_samples(self.dimensions, sample_size, rng, self.max_count)

    def __contains__(self, combination: object) -> bool:
        """Check whether ``combination`` is a member of the product.

        Uses the same rule as :meth:`index_of`: a string is never a
        combination.
        """
        try:
            combination_digits(self.dimensions, combination)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        return True
