"""Index-addressable sampling of large cartesian products.

Count, decode, and sample combinations of several ordered dimensions
without ever materializing the full product.
"""

from __future__ import annotations

from combspace.errors import (
    CombspaceError,
    CountOverflowError,
    EmptyDomainError,
    IndexOutOfRangeError,
    SampleTooLargeError,
)
from combspace.product import (
    MAX_COUNT,
    ProductSpace,
    combination_at,
    combination_digits,
    compute_max_size,
    ensure_rng,
    entry_at,
    generate_random_indices,
    generate_samples,
    index_of,
    iter_samples,
    mixed_radix_digits,
)

__version__ = "0.1.0"

__all__ = [
    "MAX_COUNT",
    "ProductSpace",
    "combination_at",
    "combination_digits",
    "compute_max_size",
    "ensure_rng",
    "entry_at",
    "generate_random_indices",
    "generate_samples",
    "index_of",
    "iter_samples",
    "mixed_radix_digits",
    "CombspaceError",
    "CountOverflowError",
    "EmptyDomainError",
    "IndexOutOfRangeError",
    "SampleTooLargeError",
]
