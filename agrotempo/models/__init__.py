"""Domain model registry — application code can do::

    from agrotempo.models import CropSpecies, WeatherSample, ...
"""

# ── Enums ───────────────────────────────────────────────────────────────────
from agrotempo.models.enums import (
    AptitudeEnum,
    DestinationEnum,
    GestationPolicyEnum,
    PregnancyResultEnum,
    ProtocolEnum,
    ReproductiveFieldEnum,
    ReproductiveStatusEnum,
    RiskLevelEnum,
    SeverityEnum,
    StageStatusEnum,
)

# ── Reproduction ────────────────────────────────────────────────────────────
from agrotempo.models.reproduction import (
    ArtificialInseminationEvent,
    FieldChange,
    GestationPolicy,
    NaturalServiceEvent,
    ProtocolTimings,
    ReproductiveEvent,
    ReproductiveOutcome,
)

# ── Phenology ───────────────────────────────────────────────────────────────
from agrotempo.models.schedule import ScheduleEntry, ScheduleEntryStatus
from agrotempo.models.species import CropSpecies, IdealConditions, PhenologyStageTemplate, Range

# ── Weather & risk ──────────────────────────────────────────────────────────
from agrotempo.models.weather import CropSuitability, RiskAssessment, RiskFactor, WeatherSample

__all__ = [
    "AptitudeEnum",
    "ArtificialInseminationEvent",
    "CropSpecies",
    "CropSuitability",
    "DestinationEnum",
    "FieldChange",
    "GestationPolicy",
    "GestationPolicyEnum",
    "IdealConditions",
    "NaturalServiceEvent",
    "PhenologyStageTemplate",
    "PregnancyResultEnum",
    "ProtocolEnum",
    "ProtocolTimings",
    "Range",
    "ReproductiveEvent",
    "ReproductiveFieldEnum",
    "ReproductiveOutcome",
    "ReproductiveStatusEnum",
    "RiskAssessment",
    "RiskFactor",
    "RiskLevelEnum",
    "ScheduleEntry",
    "ScheduleEntryStatus",
    "SeverityEnum",
    "StageStatusEnum",
    "WeatherSample",
]
