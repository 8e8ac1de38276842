"""Enum types shared by the domain models and API schemas.

These are separate from the StrEnum in agrotempo/config.py —
config enums validate settings, domain enums type engine values.
"""

from enum import StrEnum

# ── Phenology ───────────────────────────────────────────────────────────────


class StageStatusEnum(StrEnum):
    """Read-time status of a schedule entry relative to an ``as_of`` date."""

    pending = "pending"
    active = "active"
    completed = "completed"


# ── Crop risk ───────────────────────────────────────────────────────────────


class RiskLevelEnum(StrEnum):
    """Overall verdict of a risk assessment."""

    unknown = "unknown"
    low = "low"
    moderate = "moderate"
    high = "high"


class SeverityEnum(StrEnum):
    """Severity of a single risk factor."""

    moderate = "moderate"
    high = "high"


class AptitudeEnum(StrEnum):
    """Planting aptitude of a crop under current season and weather."""

    high = "high"
    medium = "medium"
    medium_low = "medium_low"
    low = "low"


# ── Reproduction ────────────────────────────────────────────────────────────


class ProtocolEnum(StrEnum):
    """Breeding protocol discriminator."""

    natural = "natural"
    artificial = "artificial"


class PregnancyResultEnum(StrEnum):
    """Outcome of a pregnancy check (tacto)."""

    pregnant = "pregnant"
    open = "open"
    uncertain = "uncertain"


class ReproductiveFieldEnum(StrEnum):
    """User-editable fields of a reproductive event."""

    bull_entry_date = "bull_entry_date"
    bull_exit_date = "bull_exit_date"
    pregnancy_check_date = "pregnancy_check_date"
    pregnancy_result = "pregnancy_result"
    device_placement_date = "device_placement_date"
    device_removal_date = "device_removal_date"
    insemination_date = "insemination_date"
    expected_delivery_date = "expected_delivery_date"


class GestationPolicyEnum(StrEnum):
    """Named call sites that compute an expected delivery date."""

    pregnancy_check = "pregnancy_check"
    service_registry = "service_registry"


class ReproductiveStatusEnum(StrEnum):
    """Reproductive status reported for the animal after submit."""

    in_service = "in_service"
    pregnant = "pregnant"
    open = "open"
    uncertain = "uncertain"


class DestinationEnum(StrEnum):
    """Where the animal should be moved after a pregnancy check."""

    wintering_paddock = "wintering_paddock"
    insemination_area = "insemination_area"
