"""Wall-clock access for day-boundary decisions."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current local time."""

    def now(self) -> datetime:
        """Return the current local datetime."""


@dataclass
class SystemClock(Clock):
    """Clock backed by the host time, optionally pinned to a timezone.

    The timezone is resolved on construction, so an unknown name raises
    ``ZoneInfoNotFoundError`` when the clock is built.
    """

    timezone_name: str | None = None
    _tz: ZoneInfo | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.timezone_name:
            self._tz = ZoneInfo(self.timezone_name)

    def now(self) -> datetime:
        """Return the current time in the configured or host timezone."""
        if self._tz is not None:
            return datetime.now(tz=self._tz)
        return datetime.now().astimezone()


def today(clock: Clock) -> date:
    """Return the clock's current calendar date."""
    return clock.now().date()


def time_label(clock: Clock) -> str:
    """Return the clock's current time as HH:MM."""
    return clock.now().strftime("%H:%M")
