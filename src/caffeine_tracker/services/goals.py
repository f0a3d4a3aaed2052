"""Daily caffeine goal tracking."""

import logging
import math
import re
import threading
from dataclasses import dataclass, field
from typing import Protocol

_logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class GoalRepository(Protocol):
    """Persistence interface for the daily goal."""

    def load(self) -> int | None:
        """Return the persisted goal in milligrams, if any."""

    def save(self, goal_mg: int) -> None:
        """Persist the goal."""

    def clear(self) -> None:
        """Remove the persisted goal."""


def parse_goal(raw: object) -> int | None:
    """Normalize user input to a positive milligram goal or None.

    Numbers are truncated toward zero and strings are read up to their first
    non-digit, so "250mg" becomes 250. Zero, negatives and anything
    non-numeric leave the goal unset.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        value = int(raw)
    elif isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if match is None:
            return None
        value = int(match.group(1))
    else:
        return None
    return value if value > 0 else None


def is_over_limit(total_mg: float, goal_mg: int | None) -> bool:
    """Return True when a goal is set and the total is strictly above it."""
    return goal_mg is not None and total_mg > goal_mg


@dataclass
class GoalService:
    """Service that owns the optional daily goal."""

    repository: GoalRepository
    _goal_mg: int | None = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def initialize(self) -> int | None:
        """Load the goal from storage."""
        with self._lock:
            self._goal_mg = parse_goal(self.repository.load())
            return self._goal_mg

    def get_goal(self) -> int | None:
        """Return the goal in milligrams, or None when unset."""
        return self._goal_mg

    def set_goal(self, raw: object) -> int | None:
        """Set the goal from raw input and persist it, clearing on invalid input."""
        goal_mg = parse_goal(raw)
        with self._lock:
            self._goal_mg = goal_mg
            if goal_mg is None:
                _logger.debug("Clearing goal for input %r", raw)
                self.repository.clear()
            else:
                self.repository.save(goal_mg)
        return goal_mg

    def is_over_limit(self, total_mg: float) -> bool:
        """Compare a total against the current goal."""
        return is_over_limit(total_mg, self._goal_mg)
