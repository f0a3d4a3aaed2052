"""Tests for key/value store adapters."""

import json
from pathlib import Path
from uuid import uuid4

from caffeine_tracker.adapters.json_file_store import JsonFileKeyValueStore
from caffeine_tracker.adapters.key_value_store import (
    GOAL_KEY,
    LOG_KEY,
    UNIT_KEY,
    InMemoryKeyValueStore,
)
from caffeine_tracker.adapters.store_daily_log_repository import (
    StoreDailyLogRepository,
)
from caffeine_tracker.adapters.store_goal_repository import StoreGoalRepository
from caffeine_tracker.adapters.store_unit_preference_repository import (
    StoreUnitPreferenceRepository,
)
from caffeine_tracker.domain.drinks import DrinkCategory
from caffeine_tracker.domain.logs import DailyLog, LogEntry
from caffeine_tracker.domain.units import UnitPreference
from tests.conftest import FailingKeyValueStore, day


def _log() -> DailyLog:
    return DailyLog(
        date=day("2024-01-01"),
        entries=(
            LogEntry(
                id=uuid4(),
                drink=DrinkCategory.ESPRESSO,
                volume_ml=29.5735,
                caffeine_mg=63,
                logged_at="09:15",
            ),
        ),
    )


def test_daily_log_record_layout() -> None:
    store = InMemoryKeyValueStore()
    repository = StoreDailyLogRepository(store)
    log = _log()

    repository.save(log)

    payload = json.loads(store.values[LOG_KEY])
    assert payload == {
        "date": "2024-01-01",
        "entries": [
            {
                "id": str(log.entries[0].id),
                "drink": "espresso",
                "size": 30,
                "caffeine": 63,
                "time": "09:15",
            }
        ],
    }


def test_daily_log_load_restores_entries() -> None:
    store = InMemoryKeyValueStore()
    repository = StoreDailyLogRepository(store)
    log = _log()
    repository.save(log)

    restored = repository.load()

    assert restored is not None
    assert restored.date == log.date
    assert restored.entries[0].id == log.entries[0].id
    assert restored.entries[0].drink == DrinkCategory.ESPRESSO
    assert restored.entries[0].volume_ml == 30
    assert restored.total_mg == 63


def test_daily_log_load_ignores_invalid_records() -> None:
    store = InMemoryKeyValueStore()
    repository = StoreDailyLogRepository(store)

    assert repository.load() is None
    store.values[LOG_KEY] = "not json"
    assert repository.load() is None
    store.values[LOG_KEY] = json.dumps({"date": "2024-01-01", "entries": [{}]})
    assert repository.load() is None


def test_daily_log_clear_removes_key() -> None:
    store = InMemoryKeyValueStore()
    repository = StoreDailyLogRepository(store)
    repository.save(_log())

    repository.clear()

    assert LOG_KEY not in store.values


def test_goal_repository_round_trip_and_clear() -> None:
    store = InMemoryKeyValueStore()
    repository = StoreGoalRepository(store)

    repository.save(300)
    assert store.values[GOAL_KEY] == "300"
    assert repository.load() == 300

    repository.clear()
    assert GOAL_KEY not in store.values
    assert repository.load() is None


def test_goal_repository_ignores_invalid_values() -> None:
    store = InMemoryKeyValueStore()
    repository = StoreGoalRepository(store)

    for raw in ("abc", "0", "-10", '"200"', "true", "null"):
        store.values[GOAL_KEY] = raw
        assert repository.load() is None


def test_unit_repository_defaults_and_round_trip() -> None:
    store = InMemoryKeyValueStore()
    repository = StoreUnitPreferenceRepository(store)

    assert repository.load() is None
    repository.save(UnitPreference.FLUID_OUNCES)
    assert store.values[UNIT_KEY] == "fl oz"
    assert repository.load() == UnitPreference.FLUID_OUNCES

    store.values[UNIT_KEY] = "gallons"
    assert repository.load() is None


def test_repositories_degrade_when_store_fails() -> None:
    store = FailingKeyValueStore()
    log_repository = StoreDailyLogRepository(store)
    goal_repository = StoreGoalRepository(store)
    unit_repository = StoreUnitPreferenceRepository(store)

    assert log_repository.load() is None
    assert goal_repository.load() is None
    assert unit_repository.load() is None
    log_repository.save(_log())
    log_repository.clear()
    goal_repository.save(100)
    goal_repository.clear()
    unit_repository.save(UnitPreference.MILLILITERS)


def test_json_file_store_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "store.json"
    store = JsonFileKeyValueStore.create(path)

    assert store.get(UNIT_KEY) is None
    store.set(UNIT_KEY, "fl oz")
    store.set(GOAL_KEY, "200")
    store.remove(GOAL_KEY)
    store.remove("missing")

    reopened = JsonFileKeyValueStore.create(path)
    assert reopened.get(UNIT_KEY) == "fl oz"
    assert reopened.get(GOAL_KEY) is None
    assert json.loads(path.read_text(encoding="utf-8")) == {UNIT_KEY: "fl oz"}
    assert [p.name for p in path.parent.iterdir()] == ["store.json"]


def test_json_file_store_corrupt_file_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("{broken", encoding="utf-8")
    store = JsonFileKeyValueStore.create(path)
    repository = StoreGoalRepository(store)

    assert repository.load() is None
    repository.save(150)
    assert repository.load() == 150
