"""Runtime configuration model for explorer filters.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from core.clock import FixedClock, SystemClock, UtcClock
from core.constants import CATALOG_PATH_ENV, DATE_FORMAT, FROZEN_TODAY_ENV
from core.errors import ExplorerConfigError


@dataclass(frozen=True)
class ExplorerConfig:
    """Validated runtime configuration.

    Attributes:
        catalog_path: Optional YAML catalog of test names and countries.
        frozen_today: Optional fixed UTC date used instead of system time.
    """

    catalog_path: Path | None
    frozen_today: date | None

    @classmethod
    def from_env(cls) -> "ExplorerConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ExplorerConfigError: If environment values are invalid.
        """
        catalog_value = os.getenv(CATALOG_PATH_ENV)
        frozen_value = os.getenv(FROZEN_TODAY_ENV)
        return cls(
            catalog_path=Path(catalog_value).expanduser().resolve() if catalog_value else None,
            frozen_today=parse_frozen_today(frozen_value) if frozen_value else None,
        )

    def build_clock(self) -> UtcClock:
        """Return the clock matching this configuration."""
        if self.frozen_today is not None:
            return FixedClock(self.frozen_today)
        return SystemClock()


def parse_frozen_today(raw_value: str) -> date:
    """Parse a frozen-today override value.

    Args:
        raw_value: Raw string from environment or CLI.

    Returns:
        Parsed date.

    Raises:
        ExplorerConfigError: If value is not a YYYY-MM-DD date.
    """
    try:
        return datetime.strptime(raw_value.strip(), DATE_FORMAT).date()
    except ValueError as error:
        raise ExplorerConfigError(
            f"Invalid {FROZEN_TODAY_ENV} value: "
            f"expected YYYY-MM-DD, got '{raw_value}'. "
            f"Set {FROZEN_TODAY_ENV} to a calendar date or unset it."
        ) from error
