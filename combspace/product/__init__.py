"""Index-addressable cartesian products: counting, decoding, and sampling."""

from __future__ import annotations

from combspace.product.decoder import (
    combination_at,
    combination_digits,
    entry_at,
    index_of,
    mixed_radix_digits,
)
from combspace.product.generator import generate_samples, iter_samples
from combspace.product.sampler import ensure_rng, generate_random_indices
from combspace.product.size import MAX_COUNT, compute_max_size
from combspace.product.space import ProductSpace

__all__ = [
    # Counting
    "MAX_COUNT",
    "compute_max_size",
    # Decoding
    "combination_at",
    "combination_digits",
    "entry_at",
    "index_of",
    "mixed_radix_digits",
    # Sampling
    "ensure_rng",
    "generate_random_indices",
    "generate_samples",
    "iter_samples",
    # Value object
    "ProductSpace",
]
