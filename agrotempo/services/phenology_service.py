"""Phenology scheduling — planting date to an ordered growth-stage timeline."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta

from agrotempo.catalog import SpeciesCatalog
from agrotempo.models.enums import StageStatusEnum
from agrotempo.models.schedule import ScheduleEntry, ScheduleEntryStatus


def stage_status(entry: ScheduleEntry, as_of: date) -> StageStatusEnum:
	"""Status of a single entry relative to ``as_of`` (both bounds inclusive)."""
	if as_of > entry.end_date:
		return StageStatusEnum.completed
	if entry.start_date <= as_of <= entry.end_date:
		return StageStatusEnum.active
	return StageStatusEnum.pending


def annotate_schedule(schedule: Sequence[ScheduleEntry], as_of: date) -> list[ScheduleEntryStatus]:
	"""Attach read-time statuses, keeping at most one stage active.

	On the hand-off day (one stage's end date is the next one's start date)
	the outgoing stage is reported completed.
	"""
	annotated: list[ScheduleEntryStatus] = []
	for idx, entry in enumerate(schedule):
		status = stage_status(entry, as_of)
		if status is StageStatusEnum.active and as_of == entry.end_date and idx + 1 < len(schedule):
			if schedule[idx + 1].start_date <= as_of:
				status = StageStatusEnum.completed
		annotated.append(ScheduleEntryStatus(entry=entry, status=status))
	return annotated


def current_stage(schedule: Sequence[ScheduleEntry], as_of: date) -> ScheduleEntry | None:
	for item in annotate_schedule(schedule, as_of):
		if item.status is StageStatusEnum.active:
			return item.entry
	return None


def critical_stages(schedule: Sequence[ScheduleEntry]) -> list[str]:
	return [entry.stage_name for entry in schedule if entry.is_critical]


def harvest_date(schedule: Sequence[ScheduleEntry]) -> date | None:
	if not schedule:
		return None
	return schedule[-1].end_date


class PhenologyService:
	"""Builds stage timelines from the injected species catalog."""

	def __init__(self, catalog: SpeciesCatalog):
		self.catalog = catalog

	def build_schedule(self, species_id: str, planting_date: date) -> list[ScheduleEntry]:
		"""Lay the species' stages end to end starting at ``planting_date``.

		Unknown species yield an empty schedule.
		"""
		species = self.catalog.get(species_id)
		if species is None:
			return []

		schedule: list[ScheduleEntry] = []
		cursor = planting_date
		for template in species.phenology_stages:
			end_date = cursor + timedelta(days=template.duration_days)
			schedule.append(
				ScheduleEntry(
					stage_name=template.name,
					start_date=cursor,
					end_date=end_date,
					duration_days=template.duration_days,
					is_critical=template.is_critical,
				)
			)
			cursor = end_date
		return schedule
