"""TOML configuration loader for the price listing."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .inventory import DEFAULT_HEADING

TODAY_ENV_VAR = "SHELFPRICE_TODAY"


@dataclass
class ListingConfig:
    heading: str = DEFAULT_HEADING
    today: str = ""  # ISO date; empty means date.today()

    def pricing_date(self) -> date:
        """Resolve the date the listing is priced for.

        Raises:
            ValueError: If ``today`` is set but not an ISO date.
        """
        if not self.today:
            return date.today()
        try:
            return date.fromisoformat(self.today)
        except ValueError:
            raise ValueError(
                f"Invalid listing date: {self.today!r} (expected YYYY-MM-DD)"
            ) from None


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class ShelfConfig:
    listing: ListingConfig = field(default_factory=ListingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> ShelfConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The pricing date can be overridden via the SHELFPRICE_TODAY environment
    variable when the file leaves it empty.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    lst = raw.get("listing", {})
    log = raw.get("logging", {})

    # Resolve pricing date: config file → environment variable
    today = lst.get("today", "") or os.environ.get(TODAY_ENV_VAR, "")

    level = str(log.get("level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(
            f"Invalid logging level: {level!r} "
            f"(DEBUG / INFO / WARNING / ERROR / CRITICAL)"
        )

    return ShelfConfig(
        listing=ListingConfig(
            heading=lst.get("heading", DEFAULT_HEADING),
            today=str(today).strip(),
        ),
        logging=LoggingConfig(level=level),
    )
