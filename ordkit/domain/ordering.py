# ordkit/domain/ordering.py
# Domain models must be pure (no I/O, no external libs)
from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ordkit.domain.errors import ValidationError
from ordkit.domain.services.composition import as_key, describe, join, keyed, reverse
from ordkit.domain.types import Comparator, Projection

T = TypeVar("T")
U = TypeVar("U")


class Ordering(Generic[T]):
    """
    Wrapper around a comparator with chainable derivation methods.

    - compare: the wrapped comparator; public and reassignable. Every method
               and every call reads the current value, never a captured one.

    An ordering is itself a comparator: ``ordering(c)(a, b) == c(a, b)``.

    NOTE: Not thread-safe for writes to ``compare``; share it read-only or
    keep it owned by one thread.
    """

    def __init__(self, compare: Comparator[T]) -> None:
        self.compare = compare
        self._reversal: Ordering[T] | None = None

    def __call__(self, a: T, b: T) -> float:
        return self.compare(a, b)

    def __repr__(self) -> str:
        return f"<Ordering {self.label}>"

    @property
    def label(self) -> str:
        return f"ordering({describe(self.compare)})"

    def reversed(self) -> Ordering[T]:
        """Ordering with the opposite order.

        The result remembers this ordering as its own reversal, so
        ``o.reversed().reversed() is o``.
        """
        if self._reversal is not None:
            return self._reversal
        result = Ordering(reverse(self.compare))
        result._reversal = self
        return result

    def join(self, *others: Comparator[T] | Ordering[T]) -> Ordering[T]:
        """Ordering that falls back to ``others`` (in order) on ties.

        With no arguments this ordering itself is returned.

        Raises:
            ValidationError: if an argument is neither an Ordering nor callable.
        """
        if not others:
            return self
        return Ordering(join(self.compare, *(_to_comparator(o) for o in others)))

    def on(self, key: Projection[U, T]) -> Ordering[U]:
        """Ordering over ``U`` comparing the ``T`` keys ``key`` maps to.

        Examples:
            >>> by_age = ordering(by_number).on(lambda p: p.age)
        """
        return Ordering(keyed(key, self.compare))

    def key(self) -> Callable[[T], Any]:
        """``key=`` adapter for ``sorted``; forwards to the current ``compare``."""
        return as_key(self)


def ordering(compare: Comparator[T]) -> Ordering[T]:
    """Wrap ``compare`` in an :class:`Ordering`."""
    return Ordering(compare)


def _to_comparator(value: Comparator[T] | Ordering[T]) -> Comparator[T]:
    if isinstance(value, Ordering):
        return value.compare
    if callable(value):
        return value
    raise ValidationError(f"expected a comparator or Ordering, got {type(value).__name__}")
