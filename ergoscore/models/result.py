"""Score result Pydantic models."""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import Method, RiskBucket


class ResultBase(BaseModel):
    """Results are derived values and never mutated."""
    model_config = ConfigDict(frozen=True)


class Classification(ResultBase):
    """Risk level, recommended response and severity colour."""
    bucket: RiskBucket = Field(..., description="Locale-independent risk band")
    level: str = Field(..., description="Localised risk level label")
    action: str = Field(..., description="Localised recommended response")
    color: str = Field(..., description="Hex severity colour")


class RebaResult(ResultBase):
    """REBA Group A/B/C scores and final total (1-15)."""
    score_a: int = Field(..., description="Group A score, capped at 12")
    score_b: int = Field(..., description="Group B score, capped at 12")
    score_c: int = Field(..., description="Table C score")
    total: int = Field(..., description="Final REBA score, capped at 15")
    classification: Classification


class RulaResult(ResultBase):
    """RULA wrist/arm score (C), neck/trunk/leg score (D) and grand total (1-8)."""
    score_c: int = Field(..., description="Wrist and arm score, capped at 8")
    score_d: int = Field(..., description="Neck, trunk and leg score, capped at 8")
    total: int = Field(..., description="Grand score, capped at 8")
    classification: Classification


class OwasResult(ResultBase):
    """OWAS action category and diagnostic posture code."""
    category: int = Field(..., ge=1, le=4, description="Action category")
    code: str = Field(..., description="back, arms, legs, load digits concatenated")
    classification: Classification


class NioshResult(ResultBase):
    """Recommended weight limit, lifting index and the multipliers behind them."""
    rwl: float = Field(..., description="Recommended Weight Limit (kg)")
    li: float = Field(..., description="Lifting Index = weight / RWL")
    hm: float = Field(..., description="Horizontal multiplier")
    vm: float = Field(..., description="Vertical multiplier")
    dm: float = Field(..., description="Distance multiplier")
    am: float = Field(..., description="Asymmetric multiplier")
    fm: float = Field(..., description="Frequency multiplier")
    cm: float = Field(..., description="Coupling multiplier")
    classification: Classification


ScoreResult = Union[RebaResult, RulaResult, OwasResult, NioshResult]


class Correction(ResultBase):
    """A remediation suggestion."""
    title: str
    detail: str
    icon: str


class Assessment(ResultBase):
    """Score and corrections for one observation, as rendered by a client."""
    method: Method
    result: Optional[ScoreResult] = None
    corrections: List[Correction] = Field(default_factory=list)
