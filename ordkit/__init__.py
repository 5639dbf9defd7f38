"""Composable comparators for ordering collections.

Re-exports the public surface from the domain layer.
"""

from ordkit.domain.errors import DomainError, UnknownLookupError, ValidationError
from ordkit.domain.ordering import Ordering, ordering
from ordkit.domain.primitives import (
    always_equal,
    by_boolean,
    by_code_unit,
    by_date,
    by_number,
    by_string,
    by_string_case_insensitive,
)
from ordkit.domain.services.composition import as_key, describe, join, keyed, ranking, reverse
from ordkit.domain.services.scoring import scoring_from_order
from ordkit.domain.types import UNKNOWN_RANK, Comparator, Projection, Scoring

__all__ = [
    "Comparator",
    "Scoring",
    "Projection",
    "UNKNOWN_RANK",
    "join",
    "reverse",
    "keyed",
    "ranking",
    "describe",
    "as_key",
    "scoring_from_order",
    "Ordering",
    "ordering",
    "always_equal",
    "by_number",
    "by_string",
    "by_string_case_insensitive",
    "by_code_unit",
    "by_date",
    "by_boolean",
    "DomainError",
    "ValidationError",
    "UnknownLookupError",
]
