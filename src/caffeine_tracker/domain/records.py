"""Persisted record schemas for the key/value store."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from caffeine_tracker.domain.drinks import DrinkCategory


class LogEntryRecord(BaseModel):
    """Stored form of a log entry."""

    id: UUID
    drink: DrinkCategory
    size: int = Field(ge=0)
    caffeine: int = Field(ge=0)
    time: str


class DailyLogRecord(BaseModel):
    """Stored form of the daily log."""

    date: date
    entries: list[LogEntryRecord] = Field(default_factory=list)
