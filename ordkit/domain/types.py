# ordkit/domain/types.py
# Domain types must be pure (no I/O, no external libs)
from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar

T = TypeVar("T")
K = TypeVar("K")
T_contra = TypeVar("T_contra", contravariant=True)

Rank = float  # int for rank tables; custom scorings may return any real


class Comparator(Protocol[T_contra]):
    """Two-argument order function.

    Returns zero (or -0.0) when ``a`` and ``b`` are equal, a negative number
    when ``a`` comes first and a positive number when ``b`` comes first.
    """

    def __call__(self, a: T_contra, b: T_contra, /) -> float: ...


Scoring = Callable[[T], Rank]  # element -> rank; compared by subtraction
Projection = Callable[[T], K]  # element -> key

UNKNOWN_RANK: int = -1  # score of elements missing from a rank table
