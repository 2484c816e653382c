"""Observation Pydantic models, one per assessment method.

Fields accept either the snake_case attribute name or the camelCase name
used by the UI and the image-estimation collaborator (``upperArm``,
``hDist`` ...). Unknown field names are rejected.

Ordinal fields accept real numbers and floor them (2.7 scores as 2). They
are not range-checked here: the scoring functions clamp them at table-index
level, and callers that receive values from outside (see
``ergoscore.scoring.estimates``) clamp them per field.
"""
import math
from decimal import Decimal
from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .enums import Method


def _floor_real(value: Any) -> Any:
    """Floor finite reals to int; anything else goes on to int validation."""
    if isinstance(value, (float, Decimal)):
        if not math.isfinite(value):
            raise ValueError("ordinal score must be a finite number")
        return math.floor(value)
    return value


Ordinal = Annotated[int, BeforeValidator(_floor_real)]


class ObservationBase(BaseModel):
    """Shared configuration for observation records."""
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        frozen=True,
    )

    def to_record(self) -> dict:
        """Plain dict keyed by the camelCase field names."""
        return self.model_dump(by_alias=True)


class RebaObservation(ObservationBase):
    """REBA inputs: Group A (neck, trunk, legs), Group B (arms, wrist), modifiers."""
    neck: Ordinal = Field(default=1, description="Neck score 1-3")
    trunk: Ordinal = Field(default=1, description="Trunk score 1-5")
    legs: Ordinal = Field(default=1, description="Legs score 1-4")
    upper_arm: Ordinal = Field(default=1, alias="upperArm", description="Upper arm score 1-6")
    lower_arm: Ordinal = Field(default=1, alias="lowerArm", description="Lower arm score 1-3")
    wrist: Ordinal = Field(default=1, description="Wrist score 1-3")
    load: Ordinal = Field(default=0, description="Load/force modifier 0-3")
    coupling: Ordinal = Field(default=0, description="Coupling modifier 0-3")
    activity: Ordinal = Field(default=0, description="Activity modifier 0-3")


class RulaObservation(ObservationBase):
    """RULA inputs: arm/wrist group, neck/trunk/legs group, muscle use and force."""
    upper_arm: Ordinal = Field(default=1, alias="upperArm", description="Upper arm score 1-6")
    lower_arm: Ordinal = Field(default=1, alias="lowerArm", description="Lower arm score 1-3")
    wrist: Ordinal = Field(default=1, description="Wrist score 1-4")
    wrist_twist: Ordinal = Field(default=1, alias="wristTwist", description="Wrist twist 1-2")
    neck: Ordinal = Field(default=1, description="Neck score 1-6")
    trunk: Ordinal = Field(default=1, description="Trunk score 1-6")
    legs: Ordinal = Field(default=1, description="Legs score 1-2")
    muscle: Ordinal = Field(default=0, description="Static muscle use 0-1")
    force: Ordinal = Field(default=0, description="Force/load 0-3")


class OwasObservation(ObservationBase):
    """OWAS posture code digits."""
    back: Ordinal = Field(default=1, description="Back posture 1-4")
    arms: Ordinal = Field(default=1, description="Arms posture 1-3")
    legs: Ordinal = Field(default=1, description="Legs posture 1-7")
    load: Ordinal = Field(default=1, description="Load class 1-3")


class NioshObservation(ObservationBase):
    """NIOSH lifting task measurements (kg, cm, degrees)."""
    weight: float = Field(default=0.0, ge=0, description="Load weight in kg")
    h_dist: float = Field(default=25.0, alias="hDist", description="Horizontal hand distance (cm)")
    v_dist: float = Field(default=0.0, alias="vDist", description="Vertical travel distance (cm)")
    v_origin: float = Field(default=75.0, alias="vOrigin", description="Hand height at origin (cm)")
    asymmetry: float = Field(default=0.0, description="Trunk twist angle (degrees)")
    # Accepted for completeness; the frequency multiplier is a constant
    frequency: float = Field(default=1.0, description="Lifts per minute")
    duration: float = Field(default=1.0, description="Task duration (hours)")
    coupling: str = Field(default="good", description="good / fair / poor")


Observation = Union[RebaObservation, RulaObservation, OwasObservation, NioshObservation]

OBSERVATION_MODELS: dict[Method, type[ObservationBase]] = {
    Method.REBA: RebaObservation,
    Method.RULA: RulaObservation,
    Method.OWAS: OwasObservation,
    Method.NIOSH: NioshObservation,
}
