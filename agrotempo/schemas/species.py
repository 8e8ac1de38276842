"""Pydantic response schemas for the species catalog."""

from __future__ import annotations

from pydantic import BaseModel, Field

from agrotempo.models.species import CropSpecies


class SpeciesSummary(BaseModel):
	id: str
	display_name: str
	ideal_season_months: list[int]
	stage_count: int
	total_cycle_days: int

	@classmethod
	def from_species(cls, species: CropSpecies) -> "SpeciesSummary":
		return cls(
			id=species.id,
			display_name=species.display_name,
			ideal_season_months=sorted(species.ideal_season_months),
			stage_count=len(species.phenology_stages),
			total_cycle_days=sum(stage.duration_days for stage in species.phenology_stages),
		)


class SpeciesListRead(BaseModel):
	items: list[SpeciesSummary] = Field(default_factory=list)
