"""Exceptions raised by combination-space operations.

Every error is a subclass of :class:`CombspaceError` and also of the closest
built-in exception, so callers can catch either the specific kind or the
generic Python category (``OverflowError``, ``IndexError``, ``ValueError``).
"""

from __future__ import annotations


class CombspaceError(Exception):
    """Base exception for combspace errors."""

    pass


class CountOverflowError(CombspaceError, OverflowError):
    """Exception raised when a combination count exceeds the count limit.

    Parameters
    ----------
    message
        Error message describing the overflow.
    limit
        Largest count that was allowed. None if unknown.

    Attributes
    ----------
    limit : int | None
        Largest count that was allowed.

    Examples
    --------
    >>> try:
    ...     raise CountOverflowError("too many combinations", limit=2**64 - 1)
    ... except CountOverflowError as e:
    ...     print(e.limit)
    18446744073709551615
    """

    def __init__(self, message: str, limit: int | None = None) -> None:
        self.limit = limit
        super().__init__(message)


class IndexOutOfRangeError(CombspaceError, IndexError):
    """Exception raised when an index falls outside ``[0, max_size)``.

    Parameters
    ----------
    index
        The offending index.
    max_size
        Number of combinations in the product.

    Attributes
    ----------
    index : int
        The offending index.
    max_size : int
        Number of combinations in the product.
    """

    def __init__(self, index: int, max_size: int) -> None:
        self.index = index
        self.max_size = max_size
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"Index {self.index} out of range for product of size {self.max_size}"


class EmptyDomainError(IndexOutOfRangeError):
    """Exception raised when indexing a product with no combinations.

    The product is empty when there are no dimensions or any dimension has
    no elements. Every index is out of range for an empty product, so this
    is a subclass of :class:`IndexOutOfRangeError`.
    """

    def __init__(self, index: int) -> None:
        super().__init__(index, 0)

    def _format_message(self) -> str:
        return (
            f"Cannot select index {self.index}: product is empty "
            "(no dimensions or an empty dimension)"
        )


class SampleTooLargeError(CombspaceError, ValueError):
    """Exception raised when more distinct samples are requested than exist.

    Parameters
    ----------
    sample_size
        Number of samples requested.
    max_size
        Number of combinations available.

    Attributes
    ----------
    sample_size : int
        Number of samples requested.
    max_size : int
        Number of combinations available.
    """

    def __init__(self, sample_size: int, max_size: int) -> None:
        self.sample_size = sample_size
        self.max_size = max_size
        super().__init__(
            f"Cannot draw {sample_size} distinct samples from "
            f"{max_size} combinations"
        )
