"""Application state for the caffeine tracker.

The presentation layer talks only to :class:`TrackerService`: it forwards
user events (log a drink, set a goal, switch units) and reads a
:class:`TrackerSummary` to render.
"""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from caffeine_tracker.domain.drinks import DrinkCategory
from caffeine_tracker.domain.logs import LogEntry
from caffeine_tracker.domain.units import UnitPreference, parse_unit
from caffeine_tracker.services.daily_log import DailyLogService
from caffeine_tracker.services.goals import GoalService
from caffeine_tracker.services.preferences import UnitPreferenceService
from caffeine_tracker.services.units import (
    format_volume,
    parse_volume,
    to_milliliters_from,
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryView:
    """Display-ready log entry."""

    id: UUID
    drink: DrinkCategory
    label: str
    size: str
    caffeine_mg: int
    time: str


@dataclass(frozen=True)
class TrackerSummary:
    """Everything the presentation layer needs to render the day."""

    date: date
    entries: list[EntryView]
    total_mg: int
    goal_mg: int | None
    over_limit: bool
    unit: UnitPreference


@dataclass
class TrackerService:
    """Single entry point coordinating the log, goal and unit preference."""

    daily_log_service: DailyLogService
    goal_service: GoalService
    unit_preference_service: UnitPreferenceService

    def start(self) -> TrackerSummary:
        """Restore state from storage and return the initial summary."""
        self.daily_log_service.initialize()
        self.goal_service.initialize()
        self.unit_preference_service.initialize()
        return self.summary()

    def log_drink(
        self,
        category: DrinkCategory | str,
        volume: object,
        unit: UnitPreference | str | None = None,
    ) -> LogEntry | None:
        """Log a drink entered in the given unit, defaulting to the preference.

        Returns None when the unit is given but not recognized.
        """
        if unit is None:
            resolved_unit = self.unit_preference_service.get()
        else:
            parsed_unit = parse_unit(unit)
            if parsed_unit is None:
                _logger.warning("Rejected drink with unknown unit: %r", unit)
                return None
            resolved_unit = parsed_unit
        amount = parse_volume(volume)
        if amount is None:
            _logger.debug("Rejected drink with invalid volume: %r", volume)
            return None
        return self.daily_log_service.log_drink(
            category, to_milliliters_from(amount, resolved_unit)
        )

    def set_goal(self, raw: object) -> int | None:
        """Set or clear the daily goal."""
        return self.goal_service.set_goal(raw)

    def set_unit_preference(self, unit: UnitPreference | str) -> UnitPreference:
        """Change the display unit without touching stored volumes."""
        return self.unit_preference_service.set(unit)

    def total_mg(self) -> int:
        """Return today's caffeine total."""
        return self.daily_log_service.ensure_current_day().total_mg

    def is_over_limit(self) -> bool:
        """Return True when today's total exceeds the goal."""
        return self.goal_service.is_over_limit(self.total_mg())

    def summary(self) -> TrackerSummary:
        """Return the current day's entries, totals and settings."""
        log = self.daily_log_service.ensure_current_day()
        unit = self.unit_preference_service.get()
        total = log.total_mg
        return TrackerSummary(
            date=log.date,
            entries=[_entry_view(entry, unit) for entry in log.entries],
            total_mg=total,
            goal_mg=self.goal_service.get_goal(),
            over_limit=self.goal_service.is_over_limit(total),
            unit=unit,
        )


def _entry_view(entry: LogEntry, unit: UnitPreference) -> EntryView:
    return EntryView(
        id=entry.id,
        drink=entry.drink,
        label=entry.drink.label,
        size=format_volume(entry.volume_ml, unit),
        caffeine_mg=entry.caffeine_mg,
        time=entry.logged_at,
    )
