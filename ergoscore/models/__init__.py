"""Pydantic models for the ergonomic risk engine."""

# Common Models
from ergoscore.models.common import (
    HealthResponse,
    ErrorResponse,
    FieldSpecResponse,
    MethodResponse,
    EstimateRequest,
)

# Enums
from ergoscore.models.enums import (
    Method,
    Locale,
    Coupling,
    RiskBucket,
    METHOD_BUCKETS,
)

# Observations
from ergoscore.models.observation import (
    ObservationBase,
    RebaObservation,
    RulaObservation,
    OwasObservation,
    NioshObservation,
    Observation,
    OBSERVATION_MODELS,
)

# Results
from ergoscore.models.result import (
    Classification,
    RebaResult,
    RulaResult,
    OwasResult,
    NioshResult,
    ScoreResult,
    Correction,
    Assessment,
)

__all__ = [
    # Common
    "HealthResponse",
    "ErrorResponse",
    "FieldSpecResponse",
    "MethodResponse",
    "EstimateRequest",
    # Enums
    "Method",
    "Locale",
    "Coupling",
    "RiskBucket",
    "METHOD_BUCKETS",
    # Observations
    "ObservationBase",
    "RebaObservation",
    "RulaObservation",
    "OwasObservation",
    "NioshObservation",
    "Observation",
    "OBSERVATION_MODELS",
    # Results
    "Classification",
    "RebaResult",
    "RulaResult",
    "OwasResult",
    "NioshResult",
    "ScoreResult",
    "Correction",
    "Assessment",
]
