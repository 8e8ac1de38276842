"""Derived phenology schedule values (never persisted)."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict

from agrotempo.models.enums import StageStatusEnum


class ScheduleEntry(BaseModel):
    """A stage placed on the calendar; ``end_date = start_date + duration_days``."""

    model_config = ConfigDict(frozen=True)

    stage_name: str
    start_date: date
    end_date: date
    duration_days: int
    is_critical: bool


class ScheduleEntryStatus(BaseModel):
    """Read model pairing an entry with its status as of a given day."""

    model_config = ConfigDict(frozen=True)

    entry: ScheduleEntry
    status: StageStatusEnum
