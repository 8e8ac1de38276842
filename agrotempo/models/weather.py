"""Weather forecast samples and the risk verdicts derived from them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agrotempo.models.enums import AptitudeEnum, RiskLevelEnum, SeverityEnum


class WeatherSample(BaseModel):
    """One forecast period (typically 3 hours).

    Every reading is optional: a rule whose input is absent is skipped.
    NaN and infinite readings are rejected.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    temperature: float | None = None
    humidity: float | None = None
    precipitation_probability: float | None = Field(default=None, ge=0.0, le=1.0)
    wind_speed: float | None = None


class RiskFactor(BaseModel):
    model_config = ConfigDict(frozen=True)

    factor_name: str
    description: str
    severity: SeverityEnum


class RiskAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: RiskLevelEnum
    factors: tuple[RiskFactor, ...] = ()


class CropSuitability(BaseModel):
    """Planting aptitude for one species given the month and forecast risk."""

    model_config = ConfigDict(frozen=True)

    species_id: str
    display_name: str
    in_season: bool
    risk_level: RiskLevelEnum
    aptitude: AptitudeEnum
    recommendation: str
