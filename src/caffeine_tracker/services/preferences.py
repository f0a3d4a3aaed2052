"""Unit preference service."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from caffeine_tracker.domain.units import DEFAULT_UNIT, UnitPreference, parse_unit

_logger = logging.getLogger(__name__)


class UnitPreferenceRepository(Protocol):
    """Persistence interface for the preferred volume unit."""

    def load(self) -> UnitPreference | None:
        """Return the stored unit if set."""

    def save(self, unit: UnitPreference) -> None:
        """Persist the unit."""


@dataclass
class UnitPreferenceService:
    """Service for the display and input unit."""

    repository: UnitPreferenceRepository
    _unit: UnitPreference = field(default=DEFAULT_UNIT, init=False, repr=False)

    def initialize(self) -> UnitPreference:
        """Load the stored unit or fall back to milliliters."""
        self._unit = self.repository.load() or DEFAULT_UNIT
        return self._unit

    def get(self) -> UnitPreference:
        """Return the current unit."""
        return self._unit

    def set(self, unit: UnitPreference | str) -> UnitPreference:
        """Change the unit; unknown values keep the current one."""
        parsed = parse_unit(unit)
        if parsed is None:
            _logger.warning("Ignoring unknown unit preference: %r", unit)
            return self._unit
        self._unit = parsed
        self.repository.save(parsed)
        return parsed
