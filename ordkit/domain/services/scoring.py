# ordkit/domain/services/scoring.py
# Pure domain services: no I/O, deterministic, no external libraries.
"""Scoring functions built from an ordered sequence of elements.

The rank of an element is its zero-based position in the order; elements
absent from the order score ``UNKNOWN_RANK`` (-1) and therefore sort before
every listed element. Lookup uses ``==`` with one exception: NaN matches NaN.

Two lookup strategies give identical scores:
- ``SequenceScoring``: linear scan, works for any element type
- ``TableScoring``: dict lookup, needs hashable elements
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Generic, TypeVar

from ordkit.domain.errors import UnknownLookupError, ValidationError
from ordkit.domain.types import UNKNOWN_RANK

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOOKUP_TABLE = "table"
LOOKUP_SCAN = "scan"
LOOKUPS: tuple[str, ...] = (LOOKUP_TABLE, LOOKUP_SCAN)

_NAN_KEY = object()  # dict key shared by every NaN


def is_nan(value: Any) -> bool:
    """True for float and Decimal NaN (including float subclasses)."""
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


@dataclass(frozen=True)
class SequenceScoring(Generic[T]):
    """Score by linear scan over the order. First occurrence wins."""

    order: tuple[T, ...]

    def __call__(self, data: T) -> int:
        return _scan(self.order, data)

    @property
    def label(self) -> str:
        return f"scan[{len(self.order)}]"


@dataclass(frozen=True)
class TableScoring(Generic[T]):
    """Score by dict lookup. First occurrence wins, as with ``SequenceScoring``."""

    order: tuple[T, ...]
    _table: dict[Any, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        table: dict[Any, int] = {}
        for i, v in enumerate(self.order):
            if not _hashable(v):
                raise ValidationError(f"rank table element at position {i} is unhashable: {v!r}")
            table.setdefault(_table_key(v), i)
        object.__setattr__(self, "_table", table)

    def __call__(self, data: T) -> int:
        if not _hashable(data):
            # Unhashable values can still == a listed one (set vs frozenset).
            return _scan(self.order, data)
        return self._table.get(_table_key(data), UNKNOWN_RANK)

    @property
    def label(self) -> str:
        return f"table[{len(self.order)}]"


def _scan(order: tuple[Any, ...], data: Any) -> int:
    if is_nan(data):
        for i, v in enumerate(order):
            if is_nan(v):
                return i
        return UNKNOWN_RANK
    for i, v in enumerate(order):
        if v == data:
            return i
    return UNKNOWN_RANK


def _table_key(value: Any) -> Any:
    return _NAN_KEY if is_nan(value) else value


def _hashable(value: Any) -> bool:
    # isinstance(Hashable) misses tuples holding unhashable items.
    if not isinstance(value, Hashable):
        return False
    try:
        hash(value)
    except TypeError:
        return False
    return True


def scoring_from_order(
    order: Iterable[T], lookup: str = LOOKUP_TABLE
) -> SequenceScoring[T] | TableScoring[T]:
    """Build a scoring function from the desired rank order.

    Args:
        order: Elements in ascending rank order. Copied, so later changes
            to the caller's container have no effect.
        lookup: ``"table"`` (dict lookup) or ``"scan"`` (linear scan).
            A table is only built when every element is hashable; otherwise
            the scan is used for this order.

    Returns:
        A callable ``element -> rank``.

    Raises:
        UnknownLookupError: if ``lookup`` is not a supported strategy.

    Examples:
        >>> score = scoring_from_order(["low", "mid", "high"])
        >>> score("mid"), score("unknown")
        (1, -1)
    """
    if lookup not in LOOKUPS:
        raise UnknownLookupError(lookup=lookup, supported=LOOKUPS)

    items = tuple(order)
    if lookup == LOOKUP_TABLE and all(_hashable(v) for v in items):
        logger.debug("Rank table built with %d entries", len(items))
        return TableScoring(items)

    if lookup == LOOKUP_TABLE:
        logger.debug("Rank order has unhashable elements; using linear scan (%d)", len(items))
    return SequenceScoring(items)
