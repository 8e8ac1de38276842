"""Pydantic request/response schemas for crop risk and suitability."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from agrotempo.models.enums import RiskLevelEnum
from agrotempo.models.weather import CropSuitability, RiskFactor, WeatherSample


class RiskRequest(BaseModel):
	samples: list[WeatherSample] = Field(default_factory=list)


class RiskResponse(BaseModel):
	species_id: str
	generated_at: datetime
	sample_count: int
	level: RiskLevelEnum
	factors: list[RiskFactor] = Field(default_factory=list)


class SuitabilityRequest(BaseModel):
	samples: list[WeatherSample] = Field(default_factory=list)
	month: int | None = Field(default=None, ge=1, le=12)


class SuitabilityResponse(BaseModel):
	generated_at: datetime
	month: int
	items: list[CropSuitability] = Field(default_factory=list)
