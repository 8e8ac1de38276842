"""FastAPI dependency providers for the engine services."""

from __future__ import annotations

from fastapi import Depends

from agrotempo.catalog import SpeciesCatalog, get_species_catalog
from agrotempo.services.phenology_service import PhenologyService
from agrotempo.services.reproduction_service import ReproductionService, protocol_timings
from agrotempo.services.risk_service import RiskService


def get_catalog() -> SpeciesCatalog:
	return get_species_catalog()


def get_phenology_service(catalog: SpeciesCatalog = Depends(get_catalog)) -> PhenologyService:
	return PhenologyService(catalog)


def get_risk_service(catalog: SpeciesCatalog = Depends(get_catalog)) -> RiskService:
	return RiskService(catalog)


def get_reproduction_service() -> ReproductionService:
	return ReproductionService(protocol_timings())
