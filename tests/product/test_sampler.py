"""Test evenly-spread index sampling."""

from __future__ import annotations

import random

import pytest

from combspace.errors import SampleTooLargeError
from combspace.product.sampler import ensure_rng, generate_random_indices


def _assert_one_per_bucket(indices: list[int], sample_size: int, max_size: int) -> None:
    width = max_size // sample_size
    for bucket, index in enumerate(indices):
        start = bucket * width
        stop = max_size if bucket == sample_size - 1 else start + width
        assert start <= index < stop


class TestEnsureRng:
    """Tests for ensure_rng."""

    def test_passes_through_generator(self, rng: random.Random) -> None:
        """Test an existing generator is returned unchanged."""
        assert ensure_rng(rng) is rng

    def test_seed_is_reproducible(self) -> None:
        """Test equal seeds give equal streams."""
        assert ensure_rng(7).random() == ensure_rng(7).random()

    def test_none_gives_fresh_generator(self) -> None:
        """Test None creates a new independent generator."""
        assert ensure_rng(None) is not ensure_rng(None)

    def test_bool_seed_rejected(self) -> None:
        """Test bools are not accepted as seeds."""
        with pytest.raises(TypeError):
            ensure_rng(True)


class TestGenerateRandomIndices:
    """Tests for generate_random_indices."""

    def test_returns_requested_count(self, rng: random.Random) -> None:
        """Test exactly sample_size indices are returned."""
        assert len(generate_random_indices(10, 144, rng)) == 10

    def test_distinct_ascending_in_range(self, rng: random.Random) -> None:
        """Test indices are distinct, ascending and within range."""
        indices = generate_random_indices(10, 144, rng)

        assert indices == sorted(set(indices))
        assert all(0 <= index < 144 for index in indices)

    def test_one_index_per_bucket(self, rng: random.Random) -> None:
        """Test each index falls in its own bucket of width 14."""
        indices = generate_random_indices(10, 144, rng)

        _assert_one_per_bucket(indices, 10, 144)

    def test_last_bucket_absorbs_remainder(self) -> None:
        """Test the last bucket spans to the end of the range."""
        # with 3 buckets over 10 indices the last bucket is [6, 10)
        seen = {generate_random_indices(3, 10, seed)[-1] for seed in range(200)}

        assert seen == {6, 7, 8, 9}

    def test_spread_over_many_seeds(self) -> None:
        """Test bucket membership holds across many seeds."""
        for seed in range(50):
            indices = generate_random_indices(7, 1000, seed)
            _assert_one_per_bucket(indices, 7, 1000)

    def test_full_sample_is_every_index(self, rng: random.Random) -> None:
        """Test sample_size == max_size yields every index in order."""
        assert generate_random_indices(12, 12, rng) == list(range(12))

    def test_zero_sample(self, rng: random.Random) -> None:
        """Test an empty sample."""
        assert generate_random_indices(0, 144, rng) == []
        assert generate_random_indices(0, 0, rng) == []

    def test_single_sample_covers_whole_range(self) -> None:
        """Test one sample may land anywhere in the range."""
        seen = {generate_random_indices(1, 5, seed)[0] for seed in range(200)}

        assert seen == {0, 1, 2, 3, 4}

    def test_sample_too_large(self, rng: random.Random) -> None:
        """Test more samples than indices is an error."""
        with pytest.raises(SampleTooLargeError) as exc_info:
            generate_random_indices(5, 4, rng)

        assert exc_info.value.sample_size == 5
        assert exc_info.value.max_size == 4

    def test_sample_too_large_is_value_error(self) -> None:
        """Test SampleTooLargeError is catchable as ValueError."""
        with pytest.raises(ValueError):
            generate_random_indices(1, 0)

    def test_negative_sample_size(self) -> None:
        """Test negative sample sizes are rejected."""
        with pytest.raises(ValueError, match="sample_size"):
            generate_random_indices(-1, 10)

    def test_negative_max_size(self) -> None:
        """Test negative ranges are rejected."""
        with pytest.raises(ValueError, match="max_size"):
            generate_random_indices(0, -1)

    @pytest.mark.parametrize("sample_size", [True, 1.5, "3"])
    def test_non_integer_sample_size_rejected(self, sample_size: object) -> None:
        """Test bools, floats, and strings are not taken as a sample size."""
        with pytest.raises(TypeError, match="sample_size must be an integer"):
            generate_random_indices(sample_size, 5)  # type: ignore[arg-type]

    @pytest.mark.parametrize("max_size", [True, 10.0])
    def test_non_integer_max_size_rejected(self, max_size: object) -> None:
        """Test bools and floats are not taken as a range size."""
        with pytest.raises(TypeError, match="max_size must be an integer"):
            generate_random_indices(1, max_size)  # type: ignore[arg-type]

    def test_reproducible_with_seed(self) -> None:
        """Test equal seeds give equal samples."""
        assert generate_random_indices(10, 10**6, 123) == generate_random_indices(
            10, 10**6, 123
        )

    def test_seed_and_generator_agree(self) -> None:
        """Test an int seed behaves like random.Random(seed)."""
        assert generate_random_indices(10, 10**6, 5) == generate_random_indices(
            10, 10**6, random.Random(5)
        )

    def test_does_not_touch_global_random_state(self) -> None:
        """Test the module-level random state is left alone."""
        random.seed(0)
        state = random.getstate()

        generate_random_indices(10, 1000)
        generate_random_indices(10, 1000, 9)

        assert random.getstate() == state

    def test_range_beyond_64_bits(self, rng: random.Random) -> None:
        """Test sampling a range larger than the unsigned 64-bit range."""
        indices = generate_random_indices(4, 10**20, rng)

        _assert_one_per_bucket(indices, 4, 10**20)
