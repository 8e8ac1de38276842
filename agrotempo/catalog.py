"""Species catalog — immutable crop knowledge base, loaded once per process.

The built-in table covers the crops of the planting tool. A JSON file with the
same shape (a list of species objects) can replace it via
``SPECIES_TABLE_PATH``. Every entry is validated on load; a structurally
invalid table raises ``CatalogIntegrityError`` before any request is served.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from agrotempo.config import get_settings
from agrotempo.models.species import CropSpecies

_logger = logging.getLogger("agrotempo.catalog")


class CatalogIntegrityError(ValueError):
	"""Raised when a species table violates its structural invariants."""


def _stage(name: str, days: int, critical: bool = False) -> dict[str, Any]:
	return {"name": name, "duration_days": days, "is_critical": critical}


def _conditions(
	temperature: tuple[float, float, float],
	humidity: tuple[float, float, float],
	rainfall: tuple[float, float, float],
) -> dict[str, Any]:
	def as_range(values: tuple[float, float, float]) -> dict[str, float]:
		low, optimal, high = values
		return {"min": low, "optimal": optimal, "max": high}

	return {
		"temperature": as_range(temperature),
		"humidity": as_range(humidity),
		"seasonal_rainfall": as_range(rainfall),
	}


# Temperatures in °C, humidity in %, rainfall in mm per season.
DEFAULT_SPECIES: tuple[dict[str, Any], ...] = (
	{
		"id": "maize",
		"display_name": "Maize",
		"description": "Needs warm temperatures and high humidity. Sensitive to frost and prolonged drought.",
		"ideal_season_months": [9, 10, 11, 12],
		"ideal_conditions": _conditions((15, 25, 35), (50, 70, 85), (500, 700, 1200)),
		"phenology_stages": [
			_stage("Emergence", 7),
			_stage("Vegetative development", 30),
			_stage("Flowering", 15, True),
			_stage("Grain filling", 35, True),
			_stage("Maturation", 25),
		],
	},
	{
		"id": "wheat",
		"display_name": "Wheat",
		"description": "Cool-season crop. Tolerates low temperatures but suffers from excess rain at maturity.",
		"ideal_season_months": [5, 6, 7, 8],
		"ideal_conditions": _conditions((3, 18, 25), (45, 60, 80), (300, 500, 800)),
		"phenology_stages": [
			_stage("Emergence", 10),
			_stage("Tillering", 25),
			_stage("Stem elongation", 30),
			_stage("Heading", 10, True),
			_stage("Grain filling", 35, True),
			_stage("Maturation", 15),
		],
	},
	{
		"id": "soybean",
		"display_name": "Soybean",
		"description": "Needs good water availability. Sensitive to drought during flowering and grain filling.",
		"ideal_season_months": [10, 11, 12],
		"ideal_conditions": _conditions((15, 22, 30), (50, 70, 85), (450, 600, 900)),
		"phenology_stages": [
			_stage("Emergence", 7),
			_stage("Vegetative development", 35),
			_stage("Flowering", 15, True),
			_stage("Pod formation", 20, True),
			_stage("Grain filling", 25, True),
			_stage("Maturation", 15),
		],
	},
	{
		"id": "sunflower",
		"display_name": "Sunflower",
		"description": "Tolerates moderate drought but needs water during flowering and filling.",
		"ideal_season_months": [9, 10, 11],
		"ideal_conditions": _conditions((13, 23, 32), (40, 60, 80), (300, 500, 700)),
		"phenology_stages": [
			_stage("Emergence", 10),
			_stage("Vegetative development", 30),
			_stage("Bud formation", 15),
			_stage("Flowering", 15, True),
			_stage("Achene filling", 25, True),
			_stage("Maturation", 15),
		],
	},
	{
		"id": "barley",
		"display_name": "Barley",
		"description": "Similar to wheat but more drought tolerant. Sensitive to excess rain at maturity.",
		"ideal_season_months": [5, 6, 7, 8],
		"ideal_conditions": _conditions((5, 15, 25), (45, 60, 80), (250, 450, 650)),
		"phenology_stages": [
			_stage("Emergence", 8),
			_stage("Tillering", 25),
			_stage("Stem elongation", 25),
			_stage("Heading", 10, True),
			_stage("Grain filling", 30, True),
			_stage("Maturation", 15),
		],
	},
	{
		"id": "alfalfa",
		"display_name": "Alfalfa",
		"description": "Perennial forage that needs steady water. Tolerates short dry spells.",
		"ideal_season_months": [3, 4, 8, 9],
		"ideal_conditions": _conditions((10, 20, 30), (50, 65, 80), (400, 600, 900)),
		"phenology_stages": [
			_stage("Emergence", 10),
			_stage("Early development", 20),
			_stage("Vegetative development", 25, True),
			_stage("Pre-flowering", 15, True),
			_stage("Flowering", 20),
		],
	},
	{
		"id": "sorghum",
		"display_name": "Sorghum",
		"description": "Very tolerant of drought and heat. Suited to areas with limited rainfall.",
		"ideal_season_months": [10, 11, 12, 1],
		"ideal_conditions": _conditions((18, 27, 35), (45, 65, 80), (300, 550, 800)),
		"phenology_stages": [
			_stage("Emergence", 7),
			_stage("Vegetative development", 30),
			_stage("Panicle initiation", 15),
			_stage("Flowering", 15, True),
			_stage("Grain filling", 25, True),
			_stage("Maturation", 20),
		],
	},
)


class SpeciesCatalog(Mapping[str, CropSpecies]):
	"""Read-only map from species id to its definition."""

	def __init__(self, species: Iterable[CropSpecies]):
		table: dict[str, CropSpecies] = {}
		for item in species:
			if item.id in table:
				raise CatalogIntegrityError(f"duplicate species id: {item.id}")
			table[item.id] = item
		self._table = MappingProxyType(table)

	def __getitem__(self, species_id: str) -> CropSpecies:
		return self._table[species_id]

	def __iter__(self) -> Iterator[str]:
		return iter(self._table)

	def __len__(self) -> int:
		return len(self._table)

	def require(self, species_id: str) -> CropSpecies:
		species = self._table.get(species_id)
		if species is None:
			raise LookupError(f"Species {species_id} not found")
		return species


def build_catalog(raw: Iterable[Mapping[str, Any]]) -> SpeciesCatalog:
	"""Validate raw species entries and freeze them into a catalog."""
	species: list[CropSpecies] = []
	for idx, item in enumerate(raw):
		try:
			species.append(CropSpecies.model_validate(item))
		except ValidationError as exc:
			label = item.get("id", idx) if isinstance(item, Mapping) else idx
			raise CatalogIntegrityError(f"species entry {label!r} is invalid: {exc}") from exc
	return SpeciesCatalog(species)


def load_catalog(path: str | Path) -> SpeciesCatalog:
	"""Load a species table from a JSON file holding a list of species objects."""
	try:
		payload = json.loads(Path(path).read_text(encoding="utf-8"))
	except (OSError, json.JSONDecodeError) as exc:
		raise CatalogIntegrityError(f"species table {path} could not be read: {exc}") from exc
	if not isinstance(payload, list):
		raise CatalogIntegrityError(f"species table {path} must be a JSON list")
	return build_catalog(payload)


@lru_cache
def get_species_catalog() -> SpeciesCatalog:
	"""Process-wide catalog (cached after first call)."""
	settings = get_settings()
	if settings.species_table_path:
		catalog = load_catalog(settings.species_table_path)
		source = settings.species_table_path
	else:
		catalog = build_catalog(DEFAULT_SPECIES)
		source = "builtin"
	_logger.info("species_catalog_loaded", extra={"source": source, "species_count": len(catalog)})
	return catalog
