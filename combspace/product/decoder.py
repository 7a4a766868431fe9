"""Mixed-radix decoding of product indices into combinations.

Index order is odometer order: the last dimension varies fastest. For
dimensions ``[["a", "b"], ["x", "y"]]`` the indices 0..3 decode to
``("a", "x")``, ``("a", "y")``, ``("b", "x")`` and ``("b", "y")``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from combspace.errors import EmptyDomainError, IndexOutOfRangeError
from combspace.product.size import MAX_COUNT, compute_max_size
from combspace.product.validation import as_index


def _radix_digits(index: int, sizes: Sequence[int]) -> list[int]:
    # callers guarantee 0 <= index < prod(sizes) and positive sizes
    digits = [0] * len(sizes)
    remainder = index
    for position in reversed(range(len(sizes))):
        remainder, digits[position] = divmod(remainder, sizes[position])
    assert remainder == 0
    return digits


def combination_at[T](
    spec: Sequence[Sequence[T]],
    sizes: Sequence[int],
    index: int,
) -> tuple[T, ...]:
    """Decode an already-validated index using precomputed sizes.

    Used by loops that decode many indices of one product, so the size and
    range checks of :func:`entry_at` are paid once rather than per index.

    Parameters
    ----------
    spec : Sequence[Sequence[T]]
        Ordered dimensions of the product.
    sizes : Sequence[int]
        ``len()`` of each dimension, all positive.
    index : int
        Index in ``[0, prod(sizes))``.

    Returns
    -------
    tuple[T, ...]
        One element per dimension, in dimension order.
    """
    digits = _radix_digits(index, sizes)
    return tuple(
        dimension[digit] for dimension, digit in zip(spec, digits, strict=True)
    )


def mixed_radix_digits(index: int, sizes: Sequence[int]) -> list[int]:
    """Decompose an index into one digit per dimension.

    Parameters
    ----------
    index : int
        Index in ``[0, prod(sizes))``.
    sizes : Sequence[int]
        Dimension sizes (radices), all positive.

    Returns
    -------
    list[int]
        Digit for each dimension, in the same order as ``sizes``.

    Raises
    ------
    ValueError
        If a size is not positive.
    EmptyDomainError
        If ``sizes`` is empty.
    IndexOutOfRangeError
        If ``index`` is negative or not less than ``prod(sizes)``.
    TypeError
        If ``index`` or a size is not an integer.

    Examples
    --------
    >>> mixed_radix_digits(5, [2, 3])
    [1, 2]
    >>> mixed_radix_digits(0, [4, 3, 3, 4])
    [0, 0, 0, 0]
    """
    index = as_index(index)
    sizes = [as_index(size, "size") for size in sizes]
    if not sizes:
        raise EmptyDomainError(index)
    for position, size in enumerate(sizes):
        if size <= 0:
            raise ValueError(
                f"Radix at position {position} must be positive, got {size}"
            )

    total = math.prod(sizes)
    if not 0 <= index < total:
        raise IndexOutOfRangeError(index, total)
    return _radix_digits(index, sizes)


def entry_at[T](
    spec: Sequence[Sequence[T]],
    index: int,
    limit: int = MAX_COUNT,
) -> tuple[T, ...]:
    """Get the combination at a given index without enumerating the product.

    Parameters
    ----------
    spec : Sequence[Sequence[T]]
        Ordered dimensions of the product.
    index : int
        Zero-based index in ``[0, compute_max_size(spec))``.
    limit : int
        Largest combination count allowed. Default: ``MAX_COUNT``.

    Returns
    -------
    tuple[T, ...]
        One element per dimension, in dimension order.

    Raises
    ------
    CountOverflowError
        If the product size exceeds ``limit``.
    EmptyDomainError
        If the product has no combinations.
    IndexOutOfRangeError
        If ``index`` is negative or not less than the product size.
    TypeError
        If ``index`` is not an integer.

    Examples
    --------
    >>> entry_at([["a", "b"], ["x", "y"]], 1)
    ('a', 'y')
    >>> entry_at([["a", "b"], ["x", "y"]], 2)
    ('b', 'x')
    """
    index = as_index(index)
    max_size = compute_max_size(spec, limit)
    if max_size == 0:
        raise EmptyDomainError(index)
    if not 0 <= index < max_size:
        raise IndexOutOfRangeError(index, max_size)

    return combination_at(spec, [len(dimension) for dimension in spec], index)


def combination_digits[T](
    spec: Sequence[Sequence[T]],
    combination: Sequence[T],
) -> list[int]:
    """Locate each element of a combination within its dimension.

    A combination is a non-string sequence holding one element per
    dimension. A ``str`` is a single value, never a combination of its
    characters. Duplicated elements resolve to their first occurrence.

    Parameters
    ----------
    spec : Sequence[Sequence[T]]
        Ordered dimensions of the product.
    combination : Sequence[T]
        One element per dimension, in dimension order.

    Returns
    -------
    list[int]
        Position of each element within its dimension.

    Raises
    ------
    TypeError
        If ``combination`` is a string or not a sequence.
    ValueError
        If ``combination`` has the wrong length or an element is not in
        its dimension.
    """
    if isinstance(combination, str | bytes) or not isinstance(combination, Sequence):
        raise TypeError(
            "Combination must be a non-string sequence, "
            f"not {type(combination).__name__}"
        )
    if len(combination) != len(spec):
        raise ValueError(
            f"Combination has {len(combination)} elements, "
            f"expected one per dimension ({len(spec)})"
        )

    digits: list[int] = []
    for position, (dimension, element) in enumerate(
        zip(spec, combination, strict=True)
    ):
        try:
            digits.append(dimension.index(element))
        except ValueError:
            raise ValueError(
                f"{element!r} is not an element of dimension {position}"
            ) from None
    return digits


def index_of[T](
    spec: Sequence[Sequence[T]],
    combination: Sequence[T],
    limit: int = MAX_COUNT,
) -> int:
    """Get the index of a combination; the inverse of :func:`entry_at`.

    Parameters
    ----------
    spec : Sequence[Sequence[T]]
        Ordered dimensions of the product.
    combination : Sequence[T]
        One element per dimension, in dimension order. Strings are
        rejected, see :func:`combination_digits`.
    limit : int
        Largest combination count allowed. Default: ``MAX_COUNT``.

    Returns
    -------
    int
        Index of ``combination``.

    Raises
    ------
    CountOverflowError
        If the product size exceeds ``limit``.
    EmptyDomainError
        If the product has no combinations.
    TypeError
        If ``combination`` is a string or not a sequence.
    ValueError
        If ``combination`` has the wrong length or an element is not in
        its dimension.

    Examples
    --------
    >>> index_of([["a", "b"], ["x", "y"]], ("b", "x"))
    2
    """
    if compute_max_size(spec, limit) == 0:
        raise EmptyDomainError(0)

    index = 0
    for dimension, digit in zip(
        spec, combination_digits(spec, combination), strict=True
    ):
        index = index * len(dimension) + digit
    return index
