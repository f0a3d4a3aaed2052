"""Key/value store abstractions backing persistence."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

_logger = logging.getLogger(__name__)

LOG_KEY = "caffeineLogs"
GOAL_KEY = "caffeineGoal"
UNIT_KEY = "caffeineUnit"


class StorageError(Exception):
    """Raised when the underlying store cannot be read or written."""


class KeyValueStore(Protocol):
    """String store addressed by key."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    def set(self, key: str, value: str) -> None:
        """Store a value under the key."""

    def remove(self, key: str) -> None:
        """Delete the key if present."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Store that keeps values for the lifetime of the process."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        """Return the stored value."""
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        self.values[key] = value

    def remove(self, key: str) -> None:
        """Delete a value."""
        self.values.pop(key, None)


def safe_get(store: KeyValueStore, key: str) -> str | None:
    """Read a key, treating store failures as missing data."""
    try:
        return store.get(key)
    except StorageError:
        _logger.warning("Failed to read %s from store", key, exc_info=True)
        return None


def safe_set(store: KeyValueStore, key: str, value: str) -> None:
    """Write a key, logging store failures instead of raising."""
    try:
        store.set(key, value)
    except StorageError:
        _logger.warning("Failed to write %s to store", key, exc_info=True)


def safe_remove(store: KeyValueStore, key: str) -> None:
    """Remove a key, logging store failures instead of raising."""
    try:
        store.remove(key)
    except StorageError:
        _logger.warning("Failed to remove %s from store", key, exc_info=True)
