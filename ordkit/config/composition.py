import logging
from collections.abc import Iterable
from typing import TypeVar

from ordkit.config.settings import OrdkitSettings
from ordkit.domain.services.composition import ranking
from ordkit.domain.types import Comparator

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_ranking(order: Iterable[T], settings: OrdkitSettings | None = None) -> Comparator[T]:
    """Build a rank-order comparator with the lookup strategy from settings.

    Raises:
        UnknownLookupError: if ``ORDKIT_RANK_LOOKUP`` names no known strategy.
    """
    settings = settings or OrdkitSettings()
    return ranking(order, lookup=settings.rank_lookup)


def configure_logging(settings: OrdkitSettings | None = None) -> None:
    """Configure root logging for command line use.

    Unknown level names fall back to WARNING.
    """
    settings = settings or OrdkitSettings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
