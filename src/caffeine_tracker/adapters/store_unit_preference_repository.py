"""Unit preference repository over a key/value store."""

from dataclasses import dataclass

from caffeine_tracker.adapters.key_value_store import (
    UNIT_KEY,
    KeyValueStore,
    safe_get,
    safe_set,
)
from caffeine_tracker.domain.units import UnitPreference, parse_unit
from caffeine_tracker.services.preferences import UnitPreferenceRepository


@dataclass
class StoreUnitPreferenceRepository(UnitPreferenceRepository):
    """Stores the unit tag as plain text."""

    store: KeyValueStore
    key: str = UNIT_KEY

    def load(self) -> UnitPreference | None:
        """Return the stored unit, ignoring unknown values."""
        return parse_unit(safe_get(self.store, self.key))

    def save(self, unit: UnitPreference) -> None:
        """Write the unit."""
        safe_set(self.store, self.key, unit.value)
