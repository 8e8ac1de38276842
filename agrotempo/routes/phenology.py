"""Phenology schedule routes."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query

from agrotempo.dependencies import get_phenology_service
from agrotempo.schemas.phenology import ScheduleEntryRead, ScheduleResponse
from agrotempo.services.phenology_service import (
	PhenologyService,
	annotate_schedule,
	critical_stages,
	current_stage,
	harvest_date,
)

router = APIRouter(prefix="/phenology", tags=["phenology"])


@router.get("/{species_id}/schedule", response_model=ScheduleResponse)
async def get_schedule(
	species_id: str,
	planting_date: date = Query(...),
	as_of: date | None = Query(default=None),
	service: PhenologyService = Depends(get_phenology_service),
) -> ScheduleResponse:
	as_of = as_of or date.today()
	schedule = service.build_schedule(species_id, planting_date)
	active = current_stage(schedule, as_of)

	return ScheduleResponse(
		species_id=species_id,
		planting_date=planting_date,
		as_of=as_of,
		entries=[ScheduleEntryRead.from_status(item) for item in annotate_schedule(schedule, as_of)],
		current_stage=active.stage_name if active is not None else None,
		critical_stages=critical_stages(schedule),
		harvest_date=harvest_date(schedule),
	)
