"""Goal repository over a key/value store."""

import json
import logging
from dataclasses import dataclass

from caffeine_tracker.adapters.key_value_store import (
    GOAL_KEY,
    KeyValueStore,
    safe_get,
    safe_remove,
    safe_set,
)
from caffeine_tracker.services.goals import GoalRepository

_logger = logging.getLogger(__name__)


@dataclass
class StoreGoalRepository(GoalRepository):
    """Stores the goal as a JSON integer; absence means unset."""

    store: KeyValueStore
    key: str = GOAL_KEY

    def load(self) -> int | None:
        """Return the stored goal if it is a positive integer."""
        raw = safe_get(self.store, self.key)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            _logger.warning("Ignoring invalid goal record: %r", raw)
            return None
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            return None
        return value

    def save(self, goal_mg: int) -> None:
        """Write the goal."""
        safe_set(self.store, self.key, json.dumps(goal_mg))

    def clear(self) -> None:
        """Remove the stored goal."""
        safe_remove(self.store, self.key)
