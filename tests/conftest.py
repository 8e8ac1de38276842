"""Shared pytest fixtures — async test client, species catalogs, engine services."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from agrotempo.catalog import DEFAULT_SPECIES, SpeciesCatalog, build_catalog
from agrotempo.dependencies import get_catalog
from agrotempo.main import app
from agrotempo.models.enums import GestationPolicyEnum
from agrotempo.models.reproduction import GestationPolicy, ProtocolTimings
from agrotempo.models.weather import WeatherSample
from agrotempo.services.phenology_service import PhenologyService
from agrotempo.services.reproduction_service import ReproductionService
from agrotempo.services.risk_service import RiskService


def _synthetic_species(**overrides: Any) -> dict[str, Any]:
	species: dict[str, Any] = {
		"id": "testcrop",
		"display_name": "Test crop",
		"ideal_season_months": [1, 2, 3],
		"ideal_conditions": {
			"temperature": {"min": 10, "optimal": 20, "max": 30},
			"humidity": {"min": 40, "optimal": 60, "max": 80},
			"seasonal_rainfall": {"min": 100, "optimal": 200, "max": 300},
		},
		"phenology_stages": [
			{"name": "Sprout", "duration_days": 3, "is_critical": False},
			{"name": "Bloom", "duration_days": 4, "is_critical": True},
			{"name": "Ripen", "duration_days": 5, "is_critical": False},
		],
	}
	species.update(overrides)
	return species


@pytest.fixture
def species_factory() -> Callable[..., dict[str, Any]]:
	"""Raw species entry builder; keyword overrides replace top-level keys."""
	return _synthetic_species


@pytest.fixture
def default_catalog() -> SpeciesCatalog:
	return build_catalog(DEFAULT_SPECIES)


@pytest.fixture
def synthetic_catalog() -> SpeciesCatalog:
	return build_catalog([_synthetic_species()])


@pytest.fixture
def phenology_service(default_catalog: SpeciesCatalog) -> PhenologyService:
	return PhenologyService(default_catalog)


@pytest.fixture
def risk_service(default_catalog: SpeciesCatalog) -> RiskService:
	return RiskService(default_catalog)


@pytest.fixture
def reproduction_service() -> ReproductionService:
	return ReproductionService(ProtocolTimings())


@pytest.fixture
def check_policy() -> GestationPolicy:
	return GestationPolicy(name=GestationPolicyEnum.pregnancy_check, confirmed_pregnancy_days=280)


@pytest.fixture
def registry_policy() -> GestationPolicy:
	return GestationPolicy(
		name=GestationPolicyEnum.service_registry,
		confirmed_pregnancy_days=280,
		service_date_days=283,
	)


@pytest.fixture
def benign_sample() -> WeatherSample:
	"""A period inside every built-in crop's envelope with calm, dry weather."""
	return WeatherSample(temperature=22.0, humidity=65.0, precipitation_probability=0.1, wind_speed=3.0)


@pytest.fixture
async def client(default_catalog: SpeciesCatalog) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and the catalog pinned to the built-in table."""

	app.dependency_overrides[get_catalog] = lambda: default_catalog
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()
