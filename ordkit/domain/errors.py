"""Domain errors (typed) for comparator composition.

Why: One error family for callers, raised only for malformed arguments.
Comparators, projections and scorings supplied by callers are trusted; their
exceptions propagate unchanged.
"""

from dataclasses import dataclass


class DomainError(Exception):
    """Base class for ordkit errors."""


class ValidationError(DomainError):
    """Invalid argument handed to a factory."""


@dataclass(eq=False)
class UnknownLookupError(ValidationError):
    """Rank lookup strategy is not one of the supported names."""

    lookup: str
    supported: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"unknown rank lookup {self.lookup!r}; expected one of {', '.join(self.supported)}"
