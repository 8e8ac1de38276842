"""Crop species reference models — agronomic knowledge base entries.

A species entry mirrors one row of the static crop table:

    {
        "id": "maize",
        "display_name": "Maize",
        "ideal_season_months": [9, 10, 11, 12],
        "ideal_conditions": {
            "temperature": {"min": 15, "optimal": 25, "max": 35},
            "humidity": {"min": 50, "optimal": 70, "max": 85},
            "seasonal_rainfall": {"min": 500, "optimal": 700, "max": 1200}
        },
        "phenology_stages": [
            {"name": "Emergence", "duration_days": 7, "is_critical": false},
            ...
        ]
    }

Stage order is significant. Integrity rules (positive durations, ordered
ranges, valid months) are enforced by validation so a broken table fails at
load time rather than while a schedule is being built.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

Month = Annotated[int, Field(ge=1, le=12)]


class Range(BaseModel):
    """Numeric envelope ``min ≤ max`` with an optimal point, one unit per field."""

    model_config = ConfigDict(frozen=True)

    min: float
    optimal: float
    max: float

    @model_validator(mode="after")
    def _validate_bounds(self) -> "Range":
        if self.min > self.max:
            raise ValueError(f"range min {self.min} exceeds max {self.max}")
        return self


class IdealConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: Range
    humidity: Range
    seasonal_rainfall: Range


class PhenologyStageTemplate(BaseModel):
    """One developmental period with its expected duration."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    duration_days: PositiveInt
    is_critical: bool = False


class CropSpecies(BaseModel):
    """Immutable agronomic reference for one crop."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, max_length=100)
    display_name: str = Field(min_length=1)
    description: str = ""
    ideal_season_months: frozenset[Month]
    ideal_conditions: IdealConditions
    phenology_stages: tuple[PhenologyStageTemplate, ...]

    def in_season(self, month: int) -> bool:
        return month in self.ideal_season_months

    def __repr__(self) -> str:
        return (
            f"<CropSpecies id={self.id!r} "
            f"stages={len(self.phenology_stages)}>"
        )
