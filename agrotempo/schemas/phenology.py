"""Pydantic response schemas for phenology schedules."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from agrotempo.models.enums import StageStatusEnum
from agrotempo.models.schedule import ScheduleEntryStatus


class ScheduleEntryRead(BaseModel):
	stage_name: str
	start_date: date
	end_date: date
	duration_days: int
	is_critical: bool
	status: StageStatusEnum

	@classmethod
	def from_status(cls, item: ScheduleEntryStatus) -> "ScheduleEntryRead":
		return cls(**item.entry.model_dump(), status=item.status)


class ScheduleResponse(BaseModel):
	species_id: str
	planting_date: date
	as_of: date
	entries: list[ScheduleEntryRead] = Field(default_factory=list)
	current_stage: str | None = None
	critical_stages: list[str] = Field(default_factory=list)
	harvest_date: date | None = None
