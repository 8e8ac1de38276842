"""Pydantic request/response schemas for the reproductive protocol engine."""

from __future__ import annotations

from pydantic import BaseModel, Field

from agrotempo.models.enums import GestationPolicyEnum
from agrotempo.models.reproduction import FieldChange, GestationPolicy, ReproductiveEvent, ReproductiveOutcome


class ReproductionApplyRequest(BaseModel):
	event: ReproductiveEvent
	changes: list[FieldChange] = Field(default_factory=list, max_length=50)
	policy: GestationPolicyEnum = GestationPolicyEnum.pregnancy_check


class ReproductionApplyResponse(BaseModel):
	event: ReproductiveEvent
	policy: GestationPolicy
	outcome: ReproductiveOutcome
