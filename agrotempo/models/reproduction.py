"""Reproductive event records and the values the protocol engine works with.

Events are immutable; the engine returns a new event for every change.
Date fields are nullable so a record can be built up one form field at a
time before it is handed to the persistence layer on submit.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from agrotempo.models.enums import (
    DestinationEnum,
    GestationPolicyEnum,
    PregnancyResultEnum,
    ReproductiveFieldEnum,
    ReproductiveStatusEnum,
)


class _ReproductiveEventBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    animal_id: str = Field(min_length=1, max_length=100)
    bull_id: str | None = Field(default=None, max_length=100)
    observations: str | None = None
    pregnancy_check_date: date | None = None
    pregnancy_result: PregnancyResultEnum | None = None
    expected_delivery_date: date | None = None


class NaturalServiceEvent(_ReproductiveEventBase):
    """Natural service: a bull runs with the herd between entry and exit."""

    protocol: Literal["natural"] = "natural"
    bull_entry_date: date | None = None
    bull_exit_date: date | None = None

    @property
    def service_date(self) -> date | None:
        return self.bull_entry_date


class ArtificialInseminationEvent(_ReproductiveEventBase):
    """Hormonal device + timed insemination, opened by the herd-bull withdrawal."""

    protocol: Literal["artificial"] = "artificial"
    bull_exit_date: date | None = None
    device_placement_date: date | None = None
    device_removal_date: date | None = None
    insemination_date: date | None = None

    @property
    def service_date(self) -> date | None:
        return self.insemination_date


ReproductiveEvent = Annotated[
    NaturalServiceEvent | ArtificialInseminationEvent,
    Field(discriminator="protocol"),
]


class FieldChange(BaseModel):
    """A single user edit: set ``field`` to ``value`` (``None`` clears it)."""

    model_config = ConfigDict(frozen=True)

    field: ReproductiveFieldEnum
    value: date | PregnancyResultEnum | None = None


class GestationPolicy(BaseModel):
    """Gestation lengths used by one call site to derive the expected delivery date.

    ``confirmed_pregnancy_days`` applies when a check comes back pregnant;
    ``service_date_days`` (when set) applies as soon as the service date is
    entered, without waiting for a check.
    """

    model_config = ConfigDict(frozen=True)

    name: GestationPolicyEnum
    confirmed_pregnancy_days: PositiveInt
    service_date_days: PositiveInt | None = None


class ProtocolTimings(BaseModel):
    """Day offsets of the artificial insemination protocol."""

    model_config = ConfigDict(frozen=True)

    check_after_bull_exit_days: PositiveInt = 45
    device_days: PositiveInt = 7
    insemination_after_removal_days: PositiveInt = 2
    recheck_after_insemination_days: PositiveInt = 40


class ReproductiveOutcome(BaseModel):
    """Animal-level status update implied by a finalized event."""

    model_config = ConfigDict(frozen=True)

    animal_id: str
    reproductive_status: ReproductiveStatusEnum
    last_service_type: Literal["natural", "artificial"]
    last_service_date: date | None = None
    expected_delivery_date: date | None = None
    destination: DestinationEnum | None = None
