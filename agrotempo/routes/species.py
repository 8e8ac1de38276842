"""Species catalog routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from agrotempo.catalog import SpeciesCatalog
from agrotempo.dependencies import get_catalog
from agrotempo.models.species import CropSpecies
from agrotempo.schemas.species import SpeciesListRead, SpeciesSummary

router = APIRouter(prefix="/species", tags=["species"])


@router.get("", response_model=SpeciesListRead)
async def list_species(catalog: SpeciesCatalog = Depends(get_catalog)) -> SpeciesListRead:
	return SpeciesListRead(items=[SpeciesSummary.from_species(species) for species in catalog.values()])


@router.get("/{species_id}", response_model=CropSpecies)
async def get_species(species_id: str, catalog: SpeciesCatalog = Depends(get_catalog)) -> CropSpecies:
	try:
		return catalog.require(species_id)
	except LookupError as exc:
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
