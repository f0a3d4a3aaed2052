"""Dependency container wiring for the application."""

from dataclasses import dataclass

from caffeine_tracker.adapters.json_file_store import JsonFileKeyValueStore
from caffeine_tracker.adapters.key_value_store import (
    InMemoryKeyValueStore,
    KeyValueStore,
)
from caffeine_tracker.adapters.store_daily_log_repository import (
    StoreDailyLogRepository,
)
from caffeine_tracker.adapters.store_goal_repository import StoreGoalRepository
from caffeine_tracker.adapters.store_unit_preference_repository import (
    StoreUnitPreferenceRepository,
)
from caffeine_tracker.app_logging import configure_logging
from caffeine_tracker.config import Settings, parse_storage_path
from caffeine_tracker.services.clock import Clock, SystemClock
from caffeine_tracker.services.daily_log import DailyLogService
from caffeine_tracker.services.goals import GoalService
from caffeine_tracker.services.preferences import UnitPreferenceService
from caffeine_tracker.services.tracker import TrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    store: KeyValueStore
    daily_log_service: DailyLogService
    goal_service: GoalService
    unit_preference_service: UnitPreferenceService
    tracker: TrackerService


def build_store(settings: Settings) -> KeyValueStore:
    """Create the key/value store described by the settings."""
    path = parse_storage_path(settings.storage_path)
    if path is None:
        return InMemoryKeyValueStore()
    return JsonFileKeyValueStore.create(path)


def build_container(
    settings: Settings | None = None,
    clock: Clock | None = None,
    store: KeyValueStore | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level.upper())
    resolved_clock = clock or SystemClock(resolved_settings.timezone)
    resolved_store = store if store is not None else build_store(resolved_settings)
    daily_log_service = DailyLogService(
        repository=StoreDailyLogRepository(resolved_store),
        clock=resolved_clock,
    )
    goal_service = GoalService(StoreGoalRepository(resolved_store))
    unit_preference_service = UnitPreferenceService(
        StoreUnitPreferenceRepository(resolved_store)
    )
    tracker = TrackerService(
        daily_log_service=daily_log_service,
        goal_service=goal_service,
        unit_preference_service=unit_preference_service,
    )
    return AppContainer(
        settings=resolved_settings,
        clock=resolved_clock,
        store=resolved_store,
        daily_log_service=daily_log_service,
        goal_service=goal_service,
        unit_preference_service=unit_preference_service,
        tracker=tracker,
    )
