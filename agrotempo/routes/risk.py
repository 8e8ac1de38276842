"""Crop risk and planting suitability routes."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from agrotempo.dependencies import get_risk_service
from agrotempo.models.weather import RiskAssessment, WeatherSample
from agrotempo.schemas.risk import RiskRequest, RiskResponse, SuitabilityRequest, SuitabilityResponse
from agrotempo.services.forecast_adapter import samples_from_openweather
from agrotempo.services.risk_service import RiskService

router = APIRouter(prefix="/risk", tags=["risk"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="risk evaluation failure")


def _response(species_id: str, samples: list[WeatherSample], assessment: RiskAssessment) -> RiskResponse:
	return RiskResponse(
		species_id=species_id,
		generated_at=datetime.now(UTC),
		sample_count=len(samples),
		level=assessment.level,
		factors=list(assessment.factors),
	)


# Declared before /{species_id} so the literal path wins.
@router.post("/suitability", response_model=SuitabilityResponse)
async def rank_suitability(
	payload: SuitabilityRequest,
	service: RiskService = Depends(get_risk_service),
) -> SuitabilityResponse:
	month = payload.month or date.today().month
	try:
		items = service.rank_suitability(payload.samples, month)
	except Exception as exc:
		raise _map_error(exc) from exc
	return SuitabilityResponse(generated_at=datetime.now(UTC), month=month, items=items)


@router.post("/{species_id}", response_model=RiskResponse)
async def evaluate_risk(
	species_id: str,
	payload: RiskRequest,
	service: RiskService = Depends(get_risk_service),
) -> RiskResponse:
	try:
		assessment = service.evaluate_risk(species_id, payload.samples)
	except Exception as exc:
		raise _map_error(exc) from exc
	return _response(species_id, payload.samples, assessment)


@router.post("/{species_id}/openweather", response_model=RiskResponse)
async def evaluate_openweather_risk(
	species_id: str,
	forecast: dict[str, Any] = Body(...),
	limit: int | None = Query(default=None, ge=1, le=40),
	service: RiskService = Depends(get_risk_service),
) -> RiskResponse:
	try:
		samples = samples_from_openweather(forecast, limit=limit)
		assessment = service.evaluate_risk(species_id, samples)
	except Exception as exc:
		raise _map_error(exc) from exc
	return _response(species_id, samples, assessment)
