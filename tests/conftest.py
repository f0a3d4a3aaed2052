"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

import pytest

from caffeine_tracker.adapters.key_value_store import (
    InMemoryKeyValueStore,
    KeyValueStore,
    StorageError,
)
from caffeine_tracker.config import Settings
from caffeine_tracker.containers import AppContainer, build_container
from caffeine_tracker.domain.logs import DailyLog
from caffeine_tracker.domain.units import UnitPreference
from caffeine_tracker.services.clock import Clock
from caffeine_tracker.services.daily_log import DailyLogRepository
from caffeine_tracker.services.goals import GoalRepository
from caffeine_tracker.services.preferences import UnitPreferenceRepository


@dataclass
class FakeClock(Clock):
    """Clock frozen at a settable instant."""

    current: datetime = field(default_factory=lambda: datetime(2024, 1, 1, 8, 30))

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current = self.current + timedelta(**kwargs)


@dataclass
class InMemoryDailyLogRepository(DailyLogRepository):
    """In-memory daily log repository for tests."""

    log: DailyLog | None = None
    saves: int = 0
    clears: int = 0

    def load(self) -> DailyLog | None:
        return self.log

    def save(self, log: DailyLog) -> None:
        self.log = log
        self.saves += 1

    def clear(self) -> None:
        self.log = None
        self.clears += 1


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """In-memory goal repository for tests."""

    goal_mg: int | None = None

    def load(self) -> int | None:
        return self.goal_mg

    def save(self, goal_mg: int) -> None:
        self.goal_mg = goal_mg

    def clear(self) -> None:
        self.goal_mg = None


@dataclass
class InMemoryUnitPreferenceRepository(UnitPreferenceRepository):
    """In-memory unit preference repository for tests."""

    unit: UnitPreference | None = None

    def load(self) -> UnitPreference | None:
        return self.unit

    def save(self, unit: UnitPreference) -> None:
        self.unit = unit


@dataclass
class FailingKeyValueStore(KeyValueStore):
    """Store whose every operation fails."""

    def get(self, key: str) -> str | None:
        raise StorageError("unavailable")

    def set(self, key: str, value: str) -> None:
        raise StorageError("unavailable")

    def remove(self, key: str) -> None:
        raise StorageError("unavailable")


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_path=None, timezone="UTC")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def container(
    settings: Settings, clock: FakeClock, store: InMemoryKeyValueStore
) -> AppContainer:
    return build_container(settings, clock=clock, store=store)


def day(value: str) -> date:
    return date.fromisoformat(value)
