# ordkit/domain/services/composition.py
# Pure domain services: no I/O, deterministic, no external libraries.
"""Pure functions that derive new comparators from existing ones.

Functions:
- join: fallback chaining (earlier comparators win, later ones break ties)
- reverse: negated comparator; reversing twice returns the original object
- keyed: compare elements through a projection onto keys
- ranking: compare by a scoring function or by position in a rank order
- describe: human-readable label of any comparator
- as_key: adapter for ``sorted``/``list.sort``

Composed comparators are small frozen callables so they keep a readable
``label`` without renaming functions at runtime.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from ordkit.domain.errors import ValidationError
from ordkit.domain.primitives import always_equal
from ordkit.domain.services.scoring import LOOKUP_TABLE, scoring_from_order
from ordkit.domain.types import Comparator, Projection, Scoring

T = TypeVar("T")
K = TypeVar("K")


def describe(comparator: Any) -> str:
    """Return the debug label of a comparator, ordering or scoring.

    Composed objects carry a ``label``; plain functions fall back to their
    qualified name and anything else to ``repr``.
    """
    label = getattr(comparator, "label", None)
    if isinstance(label, str):
        return label
    name = getattr(comparator, "__qualname__", None) or getattr(comparator, "__name__", None)
    return name if isinstance(name, str) else repr(comparator)


@dataclass(frozen=True)
class JoinedComparator(Generic[T]):
    """Lexicographic fallback over two or more comparators."""

    head: tuple[Comparator[T], ...]
    last: Comparator[T]

    def __call__(self, a: T, b: T) -> float:
        for compare in self.head:
            result = compare(a, b)
            if result != 0:
                return result
        return self.last(a, b)

    @property
    def members(self) -> tuple[Comparator[T], ...]:
        return (*self.head, self.last)

    @property
    def label(self) -> str:
        return f"join({', '.join(describe(c) for c in self.members)})"


@dataclass(frozen=True)
class ReversedComparator(Generic[T]):
    """Negation of ``original``; -0.0 is passed through as produced."""

    original: Comparator[T]

    def __call__(self, a: T, b: T) -> float:
        return -self.original(a, b)

    @property
    def label(self) -> str:
        return f"reversed({describe(self.original)})"


@dataclass(frozen=True)
class KeyedComparator(Generic[T, K]):
    """Compares ``key(a)`` with ``key(b)``. Keys are not cached."""

    key: Projection[T, K]
    comparator: Comparator[K]

    def __call__(self, a: T, b: T) -> float:
        return self.comparator(self.key(a), self.key(b))

    @property
    def label(self) -> str:
        return f"keyed({describe(self.key)}, {describe(self.comparator)})"


@dataclass(frozen=True)
class RankingComparator(Generic[T]):
    """Difference of the two elements' scores."""

    scoring: Scoring[T]

    def __call__(self, a: T, b: T) -> float:
        return self.scoring(a) - self.scoring(b)

    @property
    def label(self) -> str:
        return f"ranking({describe(self.scoring)})"


def join(*comparators: Comparator[T]) -> Comparator[T]:
    """Join comparators so each one breaks the ties left by the previous ones.

    Args:
        comparators: Zero or more comparators over the same element type.

    Returns:
        - no comparators: ``always_equal``
        - one comparator: that very comparator, unchanged
        - otherwise: a comparator returning the first non-zero result,
          or the last comparator's result when all others report equality

    Examples:
        >>> from ordkit.domain.primitives import by_code_unit
        >>> by_len = lambda a, b: len(a) - len(b)
        >>> sorted(["bb", "a", "ab"], key=as_key(join(by_len, by_code_unit)))
        ['a', 'ab', 'bb']

    Note:
        Nested joins are flattened; by associativity the behaviour is the same.
    """
    if not comparators:
        return always_equal
    if len(comparators) == 1:
        return comparators[0]

    flat: list[Comparator[T]] = []
    for c in comparators:
        if isinstance(c, JoinedComparator):
            flat.extend(c.members)
        else:
            flat.append(c)
    return JoinedComparator(head=tuple(flat[:-1]), last=flat[-1])


def reverse(comparator: Comparator[T]) -> Comparator[T]:
    """Return a comparator with the opposite order.

    Reversing a reversed comparator returns the original object, so
    ``reverse(reverse(c)) is c`` for any comparator ``c``.
    """
    if isinstance(comparator, ReversedComparator):
        return comparator.original
    return ReversedComparator(comparator)


def keyed(key: Projection[T, K], comparator: Comparator[K]) -> Comparator[T]:
    """Compare elements by the keys ``key`` projects them to.

    ``key`` runs twice per comparison. When it is expensive, memoize it
    before passing it in (e.g. ``functools.lru_cache`` for hashable elements).

    Raises:
        ValidationError: if ``key`` is not callable.
    """
    if not callable(key):
        raise ValidationError(f"keyed() needs a callable projection, got {key!r}")
    return KeyedComparator(key, comparator)


def ranking(
    scoring: Scoring[T] | Iterable[T], *, lookup: str = LOOKUP_TABLE
) -> Comparator[T]:
    """Build a comparator from a scoring function or a rank order.

    Args:
        scoring: Either a callable ``element -> rank`` or an iterable listing
            elements from lowest to highest rank. An ``Enum`` class counts
            as an order: its members rank in definition order. Elements
            missing from the order score -1 and sort first; NaN matches NaN.
        lookup: Strategy for rank orders, ``"table"`` or ``"scan"``.
            Ignored when ``scoring`` is a scoring function.

    Raises:
        ValidationError: if ``scoring`` is neither callable nor iterable.
        UnknownLookupError: if ``lookup`` is not supported.

    Examples:
        >>> by_size = ranking(["S", "M", "L", "XL"])
        >>> sorted(["XL", "S", "L"], key=as_key(by_size))
        ['S', 'L', 'XL']
    """
    if isinstance(scoring, type) and issubclass(scoring, Enum):
        # Enum classes are callable (value lookup) but rank as their members.
        return RankingComparator(scoring_from_order(scoring, lookup=lookup))
    if callable(scoring):
        return RankingComparator(scoring)
    if isinstance(scoring, Iterable):
        return RankingComparator(scoring_from_order(scoring, lookup=lookup))
    raise ValidationError(
        f"ranking() needs a scoring function or an iterable order, got {type(scoring).__name__}"
    )


def as_key(comparator: Callable[[T, T], float]) -> Callable[[T], Any]:
    """Wrap a comparator for use as ``key=`` in ``sorted`` and ``list.sort``."""
    return functools.cmp_to_key(comparator)
