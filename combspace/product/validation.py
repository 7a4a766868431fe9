"""Argument checks shared by the product operations."""

from __future__ import annotations

import operator


def as_index(value: int, name: str = "index") -> int:
    """Coerce ``value`` to a plain int, rejecting bools and non-integers.

    Parameters
    ----------
    value : int
        Value to check. Anything implementing ``__index__`` is accepted.
    name : str
        Argument name used in the error message.

    Returns
    -------
    int
        ``value`` as an int.

    Raises
    ------
    TypeError
        If ``value`` is a bool or does not support ``__index__``.

    Examples
    --------
    >>> as_index(3)
    3
    >>> as_index(1.0, "sample_size")
    Traceback (most recent call last):
    ...
    TypeError: sample_size must be an integer, not float
    """
    if isinstance(value, bool) or not hasattr(type(value), "__index__"):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    return operator.index(value)
