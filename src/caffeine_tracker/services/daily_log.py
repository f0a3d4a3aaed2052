"""Daily log manager: owns today's entries and the midnight reset."""

import logging
import math
import threading
from dataclasses import dataclass, field
from typing import Protocol
from uuid import uuid4

from caffeine_tracker.domain.drinks import DrinkCategory, parse_category
from caffeine_tracker.domain.logs import DailyLog, LogEntry
from caffeine_tracker.services.caffeine import estimate, scaled_caffeine
from caffeine_tracker.services.clock import Clock, time_label, today
from caffeine_tracker.services.units import parse_volume

_logger = logging.getLogger(__name__)


class DailyLogRepository(Protocol):
    """Persistence interface for the daily log."""

    def load(self) -> DailyLog | None:
        """Return the persisted log, or None when nothing usable is stored."""

    def save(self, log: DailyLog) -> None:
        """Persist the full log."""

    def clear(self) -> None:
        """Remove the persisted log."""


@dataclass
class DailyLogService:
    """Service that records drinks for the current calendar day.

    The log is compared against the clock's date on startup and again before
    every append, so a process left running past midnight starts a fresh day
    instead of adding to yesterday's total.
    """

    repository: DailyLogRepository
    clock: Clock
    _log: DailyLog | None = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def initialize(self) -> DailyLog:
        """Restore today's log from storage or start an empty one."""
        with self._lock:
            self._log = None
            return self._roll_over_if_needed()

    def ensure_current_day(self) -> DailyLog:
        """Reset the log when the calendar day has changed since it was opened."""
        with self._lock:
            return self._roll_over_if_needed()

    def log_drink(
        self, category: DrinkCategory | str, volume_ml: object
    ) -> LogEntry | None:
        """Append a drink to today's log.

        Returns None without recording anything when the category is unknown
        or the volume is not a positive number small enough to estimate.
        """
        drink = parse_category(category)
        volume = parse_volume(volume_ml)
        scaled = scaled_caffeine(drink, volume) if volume is not None else None
        if drink is None or scaled is None or not math.isfinite(scaled):
            _logger.debug(
                "Rejected drink: category=%r volume=%r", category, volume_ml
            )
            return None
        with self._lock:
            log = self._roll_over_if_needed()
            entry = LogEntry(
                id=uuid4(),
                drink=drink,
                volume_ml=volume,
                caffeine_mg=estimate(drink, volume),
                logged_at=time_label(self.clock),
            )
            self._log = log.append(entry)
            self.repository.save(self._log)
            return entry

    def current(self) -> DailyLog:
        """Return the in-memory log, initializing it on first use."""
        log = self._log
        if log is None:
            return self.initialize()
        return log

    def entries(self) -> list[LogEntry]:
        """Return today's entries in logging order."""
        return list(self.current().entries)

    def total_mg(self) -> int:
        """Return the caffeine total of today's entries."""
        return self.current().total_mg

    def _roll_over_if_needed(self) -> DailyLog:
        current_day = today(self.clock)
        log = self._log if self._log is not None else self.repository.load()
        if log is not None and log.date == current_day:
            self._log = log
            return log
        if log is not None:
            _logger.info(
                "Discarding daily log from %s (today is %s)", log.date, current_day
            )
            self.repository.clear()
        self._log = DailyLog(date=current_day)
        return self._log

