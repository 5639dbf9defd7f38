"""Ready-made comparators for primitive values.

Each one is a thin wrapper around the native ordering of its type and is a
valid input for every factory in ``ordkit.domain.services.composition``.
"""

from __future__ import annotations

import locale
import unicodedata
from datetime import date
from typing import Any


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def always_equal(_a: Any, _b: Any) -> int:
    """Report every pair as equal. Identity element of ``join``."""
    return 0


def by_number(a: float, b: float) -> float:
    """Compare numbers by subtraction."""
    return a - b


def by_string(a: str, b: str) -> int:
    """Compare strings by the collation of the current ``LC_COLLATE`` locale."""
    return locale.strcoll(a, b)


def _base_letters(s: str) -> str:
    decomposed = unicodedata.normalize("NFKD", s.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def by_string_case_insensitive(a: str, b: str) -> int:
    """Compare strings by locale collation of their base letters.

    Case and accents are ignored: ``"Résumé"`` equals ``"resume"``.
    """
    return locale.strcoll(_base_letters(a), _base_letters(b))


def by_code_unit(a: str, b: str) -> int:
    """Compare strings by UTF-16 code units, independent of locale.

    Differs from code point order only for characters above U+FFFF, whose
    surrogates sort before U+E000..U+FFFF.
    """
    return _sign(a.encode("utf-16-be", "surrogatepass"), b.encode("utf-16-be", "surrogatepass"))


def by_date(a: date, b: date) -> int:
    """Compare dates chronologically. An earlier date is smaller.

    Works for ``date`` and ``datetime`` alike; mixing naive and aware
    datetimes raises ``TypeError`` as the native comparison does.
    """
    return _sign(a, b)


def by_boolean(a: bool, b: bool) -> int:
    """Compare booleans by truth. False is smaller than True."""
    return int(a) - int(b)
