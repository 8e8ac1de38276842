from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from agrotempo import catalog as catalog_module
from agrotempo.catalog import (
	CatalogIntegrityError,
	SpeciesCatalog,
	build_catalog,
	get_species_catalog,
	load_catalog,
)
from agrotempo.config import Settings


def test_builtin_catalog_contents(default_catalog: SpeciesCatalog) -> None:
	assert list(default_catalog) == ["maize", "wheat", "soybean", "sunflower", "barley", "alfalfa", "sorghum"]
	maize = default_catalog["maize"]
	assert maize.display_name == "Maize"
	assert maize.ideal_season_months == frozenset({9, 10, 11, 12})
	assert maize.ideal_conditions.temperature.min == 15
	assert sum(stage.duration_days for stage in maize.phenology_stages) == 112
	assert maize.in_season(11) and not maize.in_season(3)


def test_catalog_is_read_only(default_catalog: SpeciesCatalog) -> None:
	with pytest.raises(TypeError):
		default_catalog["maize"] = default_catalog["wheat"]  # type: ignore[index]
	with pytest.raises(ValidationError):
		default_catalog["maize"].display_name = "Corn"  # type: ignore[misc]


def test_require_raises_lookup_error(default_catalog: SpeciesCatalog) -> None:
	assert default_catalog.get("quinoa") is None
	with pytest.raises(LookupError):
		default_catalog.require("quinoa")


def test_non_positive_duration_is_rejected(species_factory: Callable[..., dict[str, Any]]) -> None:
	stages = [{"name": "Sprout", "duration_days": 0, "is_critical": False}]
	with pytest.raises(CatalogIntegrityError):
		build_catalog([species_factory(phenology_stages=stages)])


def test_inverted_range_is_rejected(species_factory: Callable[..., dict[str, Any]]) -> None:
	conditions = species_factory()["ideal_conditions"] | {"humidity": {"min": 90, "optimal": 60, "max": 40}}
	with pytest.raises(CatalogIntegrityError):
		build_catalog([species_factory(ideal_conditions=conditions)])


def test_invalid_month_is_rejected(species_factory: Callable[..., dict[str, Any]]) -> None:
	with pytest.raises(CatalogIntegrityError):
		build_catalog([species_factory(ideal_season_months=[0, 13])])


def test_duplicate_ids_are_rejected(species_factory: Callable[..., dict[str, Any]]) -> None:
	with pytest.raises(CatalogIntegrityError):
		build_catalog([species_factory(), species_factory()])


def test_load_catalog_from_json(tmp_path: Path, species_factory: Callable[..., dict[str, Any]]) -> None:
	path = tmp_path / "species.json"
	path.write_text(json.dumps([species_factory(), species_factory(id="othercrop")]), encoding="utf-8")

	loaded = load_catalog(path)
	assert sorted(loaded) == ["othercrop", "testcrop"]
	assert [stage.name for stage in loaded["testcrop"].phenology_stages] == ["Sprout", "Bloom", "Ripen"]


def test_load_catalog_requires_a_list(tmp_path: Path) -> None:
	path = tmp_path / "species.json"
	path.write_text(json.dumps({"species": []}), encoding="utf-8")
	with pytest.raises(CatalogIntegrityError):
		load_catalog(path)


def test_load_catalog_rejects_invalid_json(tmp_path: Path) -> None:
	path = tmp_path / "species.json"
	path.write_text('[{"id": "maize",', encoding="utf-8")
	with pytest.raises(CatalogIntegrityError):
		load_catalog(path)


def test_load_catalog_rejects_missing_file(tmp_path: Path) -> None:
	with pytest.raises(CatalogIntegrityError):
		load_catalog(tmp_path / "absent.json")


def test_process_catalog_honours_configured_table(
	tmp_path: Path,
	monkeypatch: pytest.MonkeyPatch,
	species_factory: Callable[..., dict[str, Any]],
) -> None:
	path = tmp_path / "species.json"
	path.write_text(json.dumps([species_factory()]), encoding="utf-8")
	monkeypatch.setattr(catalog_module, "get_settings", lambda: Settings(species_table_path=str(path)))

	get_species_catalog.cache_clear()
	try:
		assert list(get_species_catalog()) == ["testcrop"]
	finally:
		get_species_catalog.cache_clear()
