"""UTC day clock used for the date-range fence.

Result ingestion lags behind collection, so the latest selectable day is
tomorrow in UTC. Every date check reads that fence from one clock object
so tests can freeze it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Protocol


class UtcClock(Protocol):
    """Source of the current UTC calendar day."""

    def today(self) -> date:
        """Return the current UTC date."""


class SystemClock:
    """Clock backed by the system time."""

    def today(self) -> date:
        """Return the current UTC date."""
        return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class FixedClock:
    """Clock frozen at one UTC date."""

    frozen_today: date

    def today(self) -> date:
        """Return the frozen date."""
        return self.frozen_today


def tomorrow_utc(clock: UtcClock) -> date:
    """Return the day after the clock's current UTC date."""
    return clock.today() + timedelta(days=1)
