from __future__ import annotations

import math
from typing import Any

from agrotempo.models.enums import RiskLevelEnum
from agrotempo.models.weather import WeatherSample
from agrotempo.services.forecast_adapter import samples_from_openweather
from agrotempo.services.risk_service import RiskService


def _period(temp: float = 24.0, humidity: float = 60.0, pop: Any = 0.1, wind: Any = 4.0) -> dict[str, Any]:
	return {
		"dt": 1726401600,
		"main": {"temp": temp, "feels_like": temp, "humidity": humidity, "pressure": 1012},
		"weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
		"wind": {"speed": wind, "deg": 180},
		"pop": pop,
	}


def test_maps_openweather_fields() -> None:
	samples = samples_from_openweather({"list": [_period(temp=18.5, humidity=77, pop=0.4, wind=6.2)]})

	assert len(samples) == 1
	sample = samples[0]
	assert sample.temperature == 18.5
	assert sample.humidity == 77.0
	assert sample.precipitation_probability == 0.4
	assert sample.wind_speed == 6.2


def test_window_defaults_to_eight_periods() -> None:
	payload = {"list": [_period() for _ in range(12)]}

	assert len(samples_from_openweather(payload)) == 8
	assert len(samples_from_openweather(payload, limit=3)) == 3


def test_missing_and_invalid_fields_become_none() -> None:
	period = _period(pop=1.7)
	del period["wind"]
	period["main"]["humidity"] = True

	sample = samples_from_openweather({"list": [period]})[0]
	assert sample.wind_speed is None
	assert sample.precipitation_probability is None
	assert sample.humidity is None
	assert sample.temperature == 24.0


def test_non_object_periods_are_skipped() -> None:
	samples = samples_from_openweather({"list": ["garbage", None, _period()]})
	assert len(samples) == 1


def test_payload_without_list_yields_no_samples() -> None:
	assert samples_from_openweather({}) == []
	assert samples_from_openweather({"list": "nope"}) == []


def test_adapter_feeds_risk_evaluation(risk_service: RiskService) -> None:
	payload = {"list": [_period(temp=36.0, wind=11.0)] + [_period(temp=37.0) for _ in range(7)]}
	assessment = risk_service.evaluate_risk("maize", samples_from_openweather(payload))

	assert assessment.level is RiskLevelEnum.moderate
	assert [factor.factor_name for factor in assessment.factors] == ["high temperature", "strong wind"]


def test_non_finite_readings_count_as_absent(risk_service: RiskService) -> None:
	payload = {"list": [_period(temp=math.nan, humidity=math.inf, pop=math.nan, wind=-math.inf) for _ in range(8)]}
	samples = samples_from_openweather(payload)

	assert len(samples) == 8
	assert all(sample == WeatherSample() for sample in samples)
	assert risk_service.evaluate_risk("maize", samples).level is RiskLevelEnum.unknown
