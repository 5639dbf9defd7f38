"""Library settings with environment-driven configuration.

Why: Single place that reads the environment; domain functions receive
     their strategy explicitly.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class OrdkitSettings:
    """Settings loaded from environment variables.

    This is the ONLY place where environment variables are read.
    """

    # ===== Ranking =====
    rank_lookup: str = field(
        default_factory=lambda: os.getenv("ORDKIT_RANK_LOOKUP", "table").strip().lower()
    )
    # Supported: "table" (dict lookup, hashable orders) | "scan" (linear scan)

    # ===== Logging =====
    log_level: str = field(
        default_factory=lambda: os.getenv("ORDKIT_LOG_LEVEL", "WARNING").strip().upper()
    )
    # Any stdlib logging level name; used by the CLI only
