"""Enumeration types for the ergonomic risk engine."""
from enum import Enum

from ergoscore.core.exceptions import UnknownMethodError


class Method(str, Enum):
    """The four supported posture / lifting assessment methods."""
    REBA = "REBA"  # Rapid Entire Body Assessment
    RULA = "RULA"  # Rapid Upper Limb Assessment
    OWAS = "OWAS"  # Ovako Working Posture Analysis
    NIOSH = "NIOSH"  # NIOSH Lifting Equation

    @classmethod
    def parse(cls, value: "str | Method") -> "Method":
        """Resolve a method name case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise UnknownMethodError(str(value)) from None


class Locale(str, Enum):
    """Languages available for classification and correction text."""
    EN = "en"
    FA = "fa"


class Coupling(str, Enum):
    """Hand-to-load grip quality for the NIOSH coupling multiplier."""
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class RiskBucket(str, Enum):
    """Locale-independent risk band a headline score falls in."""
    # REBA
    NEGLIGIBLE = "negligible"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very-high"
    # RULA
    ACCEPTABLE = "acceptable"
    INVESTIGATE_FURTHER = "investigate-further"
    INVESTIGATE_SOON = "investigate-soon"
    INVESTIGATE_IMMEDIATELY = "investigate-immediately"
    # OWAS (shares LOW / MEDIUM / HIGH)
    CRITICAL = "critical"
    # NIOSH
    SAFE = "safe"
    MODERATE = "moderate"
    HIGH_RISK = "high-risk"


# Buckets each method can produce, lowest risk first
METHOD_BUCKETS: dict[Method, list[RiskBucket]] = {
    Method.REBA: [
        RiskBucket.NEGLIGIBLE,
        RiskBucket.LOW,
        RiskBucket.MEDIUM,
        RiskBucket.HIGH,
        RiskBucket.VERY_HIGH,
    ],
    Method.RULA: [
        RiskBucket.ACCEPTABLE,
        RiskBucket.INVESTIGATE_FURTHER,
        RiskBucket.INVESTIGATE_SOON,
        RiskBucket.INVESTIGATE_IMMEDIATELY,
    ],
    Method.OWAS: [
        RiskBucket.LOW,
        RiskBucket.MEDIUM,
        RiskBucket.HIGH,
        RiskBucket.CRITICAL,
    ],
    Method.NIOSH: [
        RiskBucket.SAFE,
        RiskBucket.MODERATE,
        RiskBucket.HIGH_RISK,
    ],
}
