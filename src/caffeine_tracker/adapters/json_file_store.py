"""Key/value store persisted as a single JSON file."""

import json
import os
import tempfile
import threading
from dataclasses import dataclass, field
from pathlib import Path

from caffeine_tracker.adapters.key_value_store import KeyValueStore, StorageError


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """File-backed store; every write replaces the file atomically."""

    path: Path
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @classmethod
    def create(cls, path: str | Path) -> "JsonFileKeyValueStore":
        """Create a store at the given path, expanding ``~``."""
        return cls(path=Path(path).expanduser())

    def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        with self._lock:
            value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""
        with self._lock:
            data = self._read(discard_corrupt=True)
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        """Delete a key if present."""
        with self._lock:
            data = self._read(discard_corrupt=True)
            if key not in data:
                return
            del data[key]
            self._write(data)

    def _read(self, *, discard_corrupt: bool = False) -> dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Cannot read {self.path}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            if discard_corrupt:
                return {}
            raise StorageError(f"Corrupt store file {self.path}") from exc
        if not isinstance(data, dict):
            if discard_corrupt:
                return {}
            raise StorageError(f"Unexpected store content in {self.path}")
        return data

    def _write(self, data: dict[str, object]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(data, handle, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Cannot write {self.path}") from exc
