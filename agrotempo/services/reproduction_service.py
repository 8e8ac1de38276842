"""Reproductive protocol engine — a pure reducer over field-change events.

Each change writes the edited field, then patches the fields causally
downstream of it. Derivation only flows forward: an edit never rewrites a
field upstream of itself, and a derivation whose input is missing is a
silent no-op (the form keeps the trigger disabled until then).

Artificial insemination cascade on an ``open`` check::

    pregnancy_check_date ─► device_placement_date (same day)
                         ─► device_removal_date   (+7)
                         ─► insemination_date     (+2)
                         ─► pregnancy_check_date  (+40, overwritten)

An ``open`` or ``uncertain`` check also clears a previously booked
``expected_delivery_date``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from typing import Any

from agrotempo.config import Settings, get_settings
from agrotempo.models.enums import (
	DestinationEnum,
	GestationPolicyEnum,
	PregnancyResultEnum,
	ProtocolEnum,
	ReproductiveFieldEnum,
	ReproductiveStatusEnum,
)
from agrotempo.models.reproduction import (
	ArtificialInseminationEvent,
	FieldChange,
	GestationPolicy,
	NaturalServiceEvent,
	ProtocolTimings,
	ReproductiveOutcome,
)

_logger = logging.getLogger("agrotempo.reproduction")

AnyReproductiveEvent = NaturalServiceEvent | ArtificialInseminationEvent

_F = ReproductiveFieldEnum

_PROTOCOL_FIELDS: dict[ProtocolEnum, frozenset[ReproductiveFieldEnum]] = {
	ProtocolEnum.natural: frozenset(
		{
			_F.bull_entry_date,
			_F.bull_exit_date,
			_F.pregnancy_check_date,
			_F.pregnancy_result,
			_F.expected_delivery_date,
		}
	),
	ProtocolEnum.artificial: frozenset(
		{
			_F.bull_exit_date,
			_F.pregnancy_check_date,
			_F.pregnancy_result,
			_F.device_placement_date,
			_F.device_removal_date,
			_F.insemination_date,
			_F.expected_delivery_date,
		}
	),
}


# A check with one of these results voids any due date booked earlier.
_NOT_PREGNANT = frozenset({PregnancyResultEnum.open, PregnancyResultEnum.uncertain})


class UnsupportedChangeError(ValueError):
	"""Raised when a change does not belong to the event's protocol or has the wrong value type."""


def protocol_timings(settings: Settings | None = None) -> ProtocolTimings:
	settings = settings or get_settings()
	return ProtocolTimings(
		check_after_bull_exit_days=settings.ai_check_after_bull_exit_days,
		device_days=settings.ai_device_days,
		insemination_after_removal_days=settings.ai_insemination_after_removal_days,
		recheck_after_insemination_days=settings.ai_recheck_after_insemination_days,
	)


def gestation_policy(name: GestationPolicyEnum, settings: Settings | None = None) -> GestationPolicy:
	"""Resolve a named call-site policy from settings.

	The register screen books the due date straight from the service date with
	its own gestation length; the check screen waits for a pregnant result.
	"""
	settings = settings or get_settings()
	if name == GestationPolicyEnum.service_registry:
		return GestationPolicy(
			name=name,
			confirmed_pregnancy_days=settings.gestation_days_confirmed,
			service_date_days=settings.gestation_days_service_registry,
		)
	return GestationPolicy(name=name, confirmed_pregnancy_days=settings.gestation_days_confirmed)


def _plus(value: date, days: int) -> date:
	return value + timedelta(days=days)


def _coerce(field: ReproductiveFieldEnum, value: Any) -> date | PregnancyResultEnum | None:
	if value is None:
		return None
	if field == _F.pregnancy_result:
		if isinstance(value, date):
			raise UnsupportedChangeError(f"{field} expects a pregnancy result, got a date")
		try:
			return PregnancyResultEnum(value)
		except ValueError as exc:
			raise UnsupportedChangeError(f"unknown pregnancy result: {value!r}") from exc
	if isinstance(value, datetime):
		return value.date()
	if not isinstance(value, date):
		raise UnsupportedChangeError(f"{field} expects a date, got {value!r}")
	return value


class ReproductionService:
	"""Applies user edits to reproductive events and derives follow-up dates."""

	def __init__(self, timings: ProtocolTimings | None = None):
		self.timings = timings or ProtocolTimings()

	def apply_change(
		self,
		event: AnyReproductiveEvent,
		change: FieldChange,
		policy: GestationPolicy,
	) -> AnyReproductiveEvent:
		protocol = ProtocolEnum(event.protocol)
		field = change.field
		if field not in _PROTOCOL_FIELDS[protocol]:
			raise UnsupportedChangeError(f"{field} is not a field of the {protocol} protocol")

		updated = event.model_copy(update={field.value: _coerce(field, change.value)})
		if isinstance(updated, NaturalServiceEvent):
			patch = self._derive_natural(updated, field, policy)
		else:
			patch = self._derive_artificial(updated, field, policy)

		if patch:
			updated = updated.model_copy(update=patch)
			_logger.debug(
				"reproductive_fields_derived",
				extra={"protocol": protocol.value, "field": field.value, "derived": sorted(patch)},
			)
		return updated

	def apply(
		self,
		event: AnyReproductiveEvent,
		field: ReproductiveFieldEnum | str,
		value: date | PregnancyResultEnum | str | None,
		policy: GestationPolicy,
	) -> AnyReproductiveEvent:
		return self.apply_change(event, FieldChange(field=field, value=value), policy)

	def replay(
		self,
		event: AnyReproductiveEvent,
		changes: Iterable[FieldChange],
		policy: GestationPolicy,
	) -> AnyReproductiveEvent:
		for change in changes:
			event = self.apply_change(event, change, policy)
		return event

	def _derive_natural(
		self,
		event: NaturalServiceEvent,
		field: ReproductiveFieldEnum,
		policy: GestationPolicy,
	) -> dict[str, date | None]:
		if field == _F.pregnancy_result:
			if event.pregnancy_check_date is None:
				return {}
			if event.pregnancy_result is PregnancyResultEnum.pregnant:
				if event.bull_entry_date is None:
					return {}
				return {"expected_delivery_date": _plus(event.bull_entry_date, policy.confirmed_pregnancy_days)}
			if event.pregnancy_result in _NOT_PREGNANT:
				return {"expected_delivery_date": None}
			return {}

		if field == _F.bull_entry_date and policy.service_date_days and event.bull_entry_date is not None:
			return {"expected_delivery_date": _plus(event.bull_entry_date, policy.service_date_days)}
		return {}

	def _derive_artificial(
		self,
		event: ArtificialInseminationEvent,
		field: ReproductiveFieldEnum,
		policy: GestationPolicy,
	) -> dict[str, date | None]:
		timings = self.timings

		if field == _F.bull_exit_date:
			if event.bull_exit_date is None:
				return {}
			return {"pregnancy_check_date": _plus(event.bull_exit_date, timings.check_after_bull_exit_days)}

		if field == _F.pregnancy_result:
			check_date = event.pregnancy_check_date
			if check_date is None:
				return {}
			if event.pregnancy_result is PregnancyResultEnum.pregnant:
				service_date = event.insemination_date or event.bull_exit_date
				if service_date is None:
					return {}
				return {"expected_delivery_date": _plus(service_date, policy.confirmed_pregnancy_days)}
			if event.pregnancy_result is PregnancyResultEnum.open:
				cycle = self._device_cycle(check_date)
				return {
					"device_placement_date": check_date,
					**cycle,
					"pregnancy_check_date": _plus(cycle["insemination_date"], timings.recheck_after_insemination_days),
					"expected_delivery_date": None,
				}
			if event.pregnancy_result is PregnancyResultEnum.uncertain:
				return {"expected_delivery_date": None}
			return {}

		if field == _F.device_placement_date:
			if event.device_placement_date is None:
				return {}
			return self._device_cycle(event.device_placement_date)

		if field == _F.device_removal_date:
			if event.device_removal_date is None:
				return {}
			return {"insemination_date": _plus(event.device_removal_date, timings.insemination_after_removal_days)}

		if field == _F.insemination_date and policy.service_date_days and event.insemination_date is not None:
			return {"expected_delivery_date": _plus(event.insemination_date, policy.service_date_days)}
		return {}

	def _device_cycle(self, placement_date: date) -> dict[str, date]:
		removal_date = _plus(placement_date, self.timings.device_days)
		return {
			"device_removal_date": removal_date,
			"insemination_date": _plus(removal_date, self.timings.insemination_after_removal_days),
		}


def summarize_outcome(event: AnyReproductiveEvent) -> ReproductiveOutcome:
	"""Status update and paddock routing for the animal once the event is submitted."""
	result = event.pregnancy_result
	status = ReproductiveStatusEnum(result.value) if result is not None else ReproductiveStatusEnum.in_service

	destination: DestinationEnum | None = None
	if isinstance(event, NaturalServiceEvent):
		if result is PregnancyResultEnum.pregnant and event.expected_delivery_date is not None:
			destination = DestinationEnum.wintering_paddock
		elif result in (PregnancyResultEnum.open, PregnancyResultEnum.uncertain):
			destination = DestinationEnum.insemination_area

	return ReproductiveOutcome(
		animal_id=event.animal_id,
		reproductive_status=status,
		last_service_type=event.protocol,
		last_service_date=event.service_date,
		expected_delivery_date=event.expected_delivery_date if result is PregnancyResultEnum.pregnant else None,
		destination=destination,
	)
