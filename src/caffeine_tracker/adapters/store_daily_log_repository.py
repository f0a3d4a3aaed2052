"""Daily log repository over a key/value store."""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from caffeine_tracker.adapters.key_value_store import (
    LOG_KEY,
    KeyValueStore,
    safe_get,
    safe_remove,
    safe_set,
)
from caffeine_tracker.domain.logs import DailyLog, LogEntry
from caffeine_tracker.domain.records import DailyLogRecord, LogEntryRecord
from caffeine_tracker.services.daily_log import DailyLogRepository
from caffeine_tracker.services.units import round_half_up

_logger = logging.getLogger(__name__)


@dataclass
class StoreDailyLogRepository(DailyLogRepository):
    """Stores the daily log as a JSON record under a single key."""

    store: KeyValueStore
    key: str = LOG_KEY

    def load(self) -> DailyLog | None:
        """Return the stored log, or None when missing or unreadable."""
        raw = safe_get(self.store, self.key)
        if raw is None:
            return None
        try:
            record = DailyLogRecord.model_validate_json(raw)
        except ValidationError:
            _logger.warning("Ignoring invalid daily log record", exc_info=True)
            return None
        return _to_domain(record)

    def save(self, log: DailyLog) -> None:
        """Write the full log."""
        safe_set(self.store, self.key, _to_record(log).model_dump_json())

    def clear(self) -> None:
        """Remove the stored log."""
        safe_remove(self.store, self.key)


def _to_record(log: DailyLog) -> DailyLogRecord:
    return DailyLogRecord(
        date=log.date,
        entries=[
            LogEntryRecord(
                id=entry.id,
                drink=entry.drink,
                size=int(round_half_up(entry.volume_ml)),
                caffeine=entry.caffeine_mg,
                time=entry.logged_at,
            )
            for entry in log.entries
        ],
    )


def _to_domain(record: DailyLogRecord) -> DailyLog:
    return DailyLog(
        date=record.date,
        entries=tuple(
            LogEntry(
                id=item.id,
                drink=item.drink,
                volume_ml=float(item.size),
                caffeine_mg=item.caffeine,
                logged_at=item.time,
            )
            for item in record.entries
        ),
    )
