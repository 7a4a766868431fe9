"""Sampling configuration models for the combspace package."""

from __future__ import annotations

import random

from pydantic import BaseModel, Field

from combspace.product.size import MAX_COUNT


class SamplingConfig(BaseModel):
    """Configuration for index sampling.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility. None draws a fresh seed per run.
    sample_size : int
        Default number of combinations to sample.
    max_count : int
        Largest combination count allowed before raising an overflow error.

    Examples
    --------
    >>> config = SamplingConfig()
    >>> config.sample_size
    10
    >>> config.max_count == 2**64 - 1
    True
    >>> config = SamplingConfig(seed=3)
    >>> config.make_rng().random() == config.make_rng().random()
    True
    """

    seed: int | None = Field(
        default=None, description="Random seed for reproducibility"
    )
    sample_size: int = Field(
        default=10, description="Default number of combinations to sample", ge=0
    )
    max_count: int = Field(
        default=MAX_COUNT, description="Largest combination count allowed", ge=1
    )

    def make_rng(self) -> random.Random:
        """Create a generator seeded from ``seed``.

        Returns
        -------
        random.Random
            New generator. Each call returns an independent instance.
        """
        return random.Random(self.seed)
