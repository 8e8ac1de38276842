"""Crop risk evaluation — forecast samples scored against a crop's ideal envelope."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from agrotempo.catalog import SpeciesCatalog
from agrotempo.models.enums import AptitudeEnum, RiskLevelEnum, SeverityEnum
from agrotempo.models.species import Range
from agrotempo.models.weather import CropSuitability, RiskAssessment, RiskFactor, WeatherSample

_logger = logging.getLogger("agrotempo.risk")

TEMPERATURE_HIGH_MARGIN = 5.0
HUMIDITY_HIGH_MARGIN = 10.0
RAIN_PROBABILITY_THRESHOLD = 0.7
STRONG_WIND_THRESHOLD = 10.0

_LEVEL_RANK: dict[RiskLevelEnum, int] = {
	RiskLevelEnum.low: 0,
	RiskLevelEnum.moderate: 1,
	RiskLevelEnum.high: 2,
}

_APTITUDE_RANK: dict[AptitudeEnum, int] = {
	AptitudeEnum.high: 0,
	AptitudeEnum.medium: 1,
	AptitudeEnum.medium_low: 2,
	AptitudeEnum.low: 3,
}

UNKNOWN_RISK = RiskAssessment(level=RiskLevelEnum.unknown)


def combine_level(current: RiskLevelEnum, severity: SeverityEnum) -> RiskLevelEnum:
	"""Raise ``current`` to ``severity`` if it is higher; never lower it."""
	candidate = RiskLevelEnum(severity.value)
	if _LEVEL_RANK[candidate] > _LEVEL_RANK[current]:
		return candidate
	return current


def _mean(values: Sequence[float]) -> float | None:
	if not values:
		return None
	return sum(values) / len(values)


def _envelope_factor(
	average: float,
	envelope: Range,
	margin: float,
	label: str,
	unit: str,
	crop_name: str,
) -> RiskFactor | None:
	if average < envelope.min:
		severity = SeverityEnum.high if envelope.min - average > margin else SeverityEnum.moderate
		return RiskFactor(
			factor_name=f"low {label}",
			description=(
				f"Average {label} of {round(average)}{unit} is below the ideal minimum "
				f"({envelope.min:g}{unit}) for {crop_name}"
			),
			severity=severity,
		)
	if average > envelope.max:
		severity = SeverityEnum.high if average - envelope.max > margin else SeverityEnum.moderate
		return RiskFactor(
			factor_name=f"high {label}",
			description=(
				f"Average {label} of {round(average)}{unit} is above the ideal maximum "
				f"({envelope.max:g}{unit}) for {crop_name}"
			),
			severity=severity,
		)
	return None


class RiskService:
	"""Scores forecasts against the injected species catalog."""

	def __init__(self, catalog: SpeciesCatalog):
		self.catalog = catalog

	def evaluate_risk(self, species_id: str, samples: Sequence[WeatherSample]) -> RiskAssessment:
		species = self.catalog.get(species_id)
		samples = list(samples)
		if species is None or not samples:
			return UNKNOWN_RISK

		temperatures = [s.temperature for s in samples if s.temperature is not None]
		humidities = [s.humidity for s in samples if s.humidity is not None]
		if not temperatures and not humidities:
			_logger.warning(
				"risk_samples_malformed",
				extra={"species_id": species_id, "sample_count": len(samples)},
			)
			return UNKNOWN_RISK

		ideal = species.ideal_conditions
		factors: list[RiskFactor] = []

		avg_temperature = _mean(temperatures)
		if avg_temperature is not None:
			factor = _envelope_factor(
				avg_temperature, ideal.temperature, TEMPERATURE_HIGH_MARGIN, "temperature", "°C", species.display_name
			)
			if factor is not None:
				factors.append(factor)

		avg_humidity = _mean(humidities)
		if avg_humidity is not None:
			factor = _envelope_factor(
				avg_humidity, ideal.humidity, HUMIDITY_HIGH_MARGIN, "humidity", "%", species.display_name
			)
			if factor is not None:
				factors.append(factor)

		if any(
			s.precipitation_probability is not None and s.precipitation_probability > RAIN_PROBABILITY_THRESHOLD
			for s in samples
		):
			factors.append(
				RiskFactor(
					factor_name="high rain probability",
					description="Significant chance of precipitation over the forecast window",
					severity=SeverityEnum.moderate,
				)
			)

		if any(s.wind_speed is not None and s.wind_speed > STRONG_WIND_THRESHOLD for s in samples):
			factors.append(
				RiskFactor(
					factor_name="strong wind",
					description=(
						f"Winds above {STRONG_WIND_THRESHOLD:g} m/s forecast; "
						"may disrupt pollination or cause mechanical damage"
					),
					severity=SeverityEnum.moderate,
				)
			)

		level = RiskLevelEnum.low
		for factor in factors:
			level = combine_level(level, factor.severity)

		return RiskAssessment(level=level, factors=tuple(factors))

	def assess_suitability(self, species_id: str, samples: Sequence[WeatherSample], month: int) -> CropSuitability:
		"""Planting aptitude from the ideal season and the forecast risk."""
		species = self.catalog.require(species_id)
		in_season = species.in_season(month)
		risk_level = self.evaluate_risk(species_id, samples).level

		if not in_season and risk_level is not RiskLevelEnum.low:
			aptitude, recommendation = AptitudeEnum.low, "Not recommended currently"
		elif not in_season:
			aptitude, recommendation = AptitudeEnum.medium_low, "Outside ideal season"
		elif risk_level is RiskLevelEnum.high:
			aptitude, recommendation = AptitudeEnum.medium_low, "Elevated climate risk"
		elif risk_level is RiskLevelEnum.moderate:
			aptitude, recommendation = AptitudeEnum.medium, "Monitor conditions"
		else:
			aptitude, recommendation = AptitudeEnum.high, "Optimal for planting"

		return CropSuitability(
			species_id=species.id,
			display_name=species.display_name,
			in_season=in_season,
			risk_level=risk_level,
			aptitude=aptitude,
			recommendation=recommendation,
		)

	def rank_suitability(self, samples: Sequence[WeatherSample], month: int) -> list[CropSuitability]:
		"""Every catalog species, best aptitude first (catalog order within a tier)."""
		samples = list(samples)
		results = [self.assess_suitability(species_id, samples, month) for species_id in self.catalog]
		results.sort(key=lambda item: _APTITUDE_RANK[item.aptitude])
		return results
