"""Domain models for the daily caffeine log."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from caffeine_tracker.domain.drinks import DrinkCategory


@dataclass(frozen=True)
class LogEntry:
    """A single logged drink."""

    id: UUID
    drink: DrinkCategory
    volume_ml: float
    caffeine_mg: int
    logged_at: str


@dataclass(frozen=True)
class DailyLog:
    """Drinks logged on one calendar day, in the order they were logged."""

    date: date
    entries: tuple[LogEntry, ...] = field(default_factory=tuple)

    @property
    def total_mg(self) -> int:
        """Sum of the caffeine of every entry."""
        return sum(entry.caffeine_mg for entry in self.entries)

    def append(self, entry: LogEntry) -> "DailyLog":
        """Return a copy of the log with the entry added at the end."""
        return DailyLog(date=self.date, entries=(*self.entries, entry))
