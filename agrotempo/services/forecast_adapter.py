"""OpenWeather 5-day / 3-hour forecast payload → ``WeatherSample`` list.

Only the fields the risk evaluator reads are mapped::

    {"list": [{"main": {"temp": 21.3, "humidity": 64}, "pop": 0.2,
               "wind": {"speed": 4.1}}, ...]}

Fetching the payload belongs to the caller; nothing here touches the network.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from agrotempo.config import get_settings
from agrotempo.models.weather import WeatherSample

_logger = logging.getLogger("agrotempo.forecast")


def _number(value: Any) -> float | None:
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		return None
	number = float(value)
	return number if math.isfinite(number) else None


def _probability(value: Any) -> float | None:
	number = _number(value)
	if number is None or not 0.0 <= number <= 1.0:
		return None
	return number


def _section(period: Mapping[str, Any], key: str) -> Mapping[str, Any]:
	section = period.get(key)
	return section if isinstance(section, Mapping) else {}


def samples_from_openweather(payload: Mapping[str, Any], limit: int | None = None) -> list[WeatherSample]:
	"""Map the first ``limit`` forecast periods (default: configured window) to samples."""
	if limit is None:
		limit = get_settings().forecast_window_periods

	periods = payload.get("list")
	if not isinstance(periods, list):
		return []

	samples: list[WeatherSample] = []
	for idx, period in enumerate(periods[:limit]):
		if not isinstance(period, Mapping):
			_logger.warning("forecast_period_skipped", extra={"index": idx, "reason": "not an object"})
			continue
		main = _section(period, "main")
		wind = _section(period, "wind")
		samples.append(
			WeatherSample(
				temperature=_number(main.get("temp")),
				humidity=_number(main.get("humidity")),
				precipitation_probability=_probability(period.get("pop")),
				wind_speed=_number(wind.get("speed")),
			)
		)
	return samples
