"""REBA (Rapid Entire Body Assessment) Calculator.

Algorithm
---------
  Group A:  A_raw  = TABLE_A[neck−1][trunk−1][legs−1]
            score_A = min(A_raw + load, 12)
  Group B:  B_raw  = TABLE_B[upper_arm−1][lower_arm−1][wrist−1]   (missing → 0)
            score_B = min(B_raw + coupling, 12)
  Group C:  score_C = TABLE_C[score_A−1][score_B−1]
  Total:    REBA    = min(score_C + activity, 15)

Every table index is floored and clamped to the table's bounds before the
lookup. A malformed table yields ``None`` ("no result") instead of an error.
"""
from typing import Any, Mapping, Optional, Union

import structlog

from ergoscore.models.enums import Locale, Method
from ergoscore.models.observation import RebaObservation
from ergoscore.models.result import RebaResult
from ergoscore.scoring.classification import classify
from ergoscore.scoring.tables import REBA_TABLE_A, REBA_TABLE_B, REBA_TABLE_C, Table2D, Table3D
from ergoscore.scoring.utils import clamp_index, lookup

logger = structlog.get_logger(__name__)

# ── Constants ─────────────────────────────────────────────────────────────────
MAX_GROUP_SCORE: int = 12
MAX_TOTAL: int = 15


class RebaCalculator:
    """Compute REBA scores from a REBA observation.

    Parameters
    ----------
    table_a, table_b, table_c:
        Override the standard REBA tables (for testing or recalibration).
    """

    def __init__(
        self,
        table_a: Table3D = REBA_TABLE_A,
        table_b: Table3D = REBA_TABLE_B,
        table_c: Table2D = REBA_TABLE_C,
    ) -> None:
        self.table_a = table_a
        self.table_b = table_b
        self.table_c = table_c

    def calculate(
        self,
        observation: Union[RebaObservation, Mapping[str, Any], None] = None,
        locale: Union[Locale, str, None] = None,
    ) -> Optional[RebaResult]:
        """Calculate the REBA score.

        Args:
            observation: REBA observation, or a mapping of its fields.
                         Missing fields take their defaults.
            locale: Language for the classification text.

        Returns:
            RebaResult, or None if a table lookup misses.
        """
        obs = _coerce(observation)

        # ── 1. Group A: neck, trunk, legs + load ─────────────────────────────
        neck_idx = clamp_index(obs.neck - 1, 2)
        trunk_idx = clamp_index(obs.trunk - 1, 4)
        legs_idx = clamp_index(obs.legs - 1, 3)
        a_raw = lookup(self.table_a, neck_idx, trunk_idx, legs_idx)
        if a_raw is None:
            logger.warning("reba_lookup_miss", table="A",
                           index=(neck_idx, trunk_idx, legs_idx))
            return None
        score_a = min(a_raw + obs.load, MAX_GROUP_SCORE)

        # ── 2. Group B: upper arm, lower arm, wrist + coupling ───────────────
        upper_idx = clamp_index(obs.upper_arm - 1, 5)
        lower_idx = clamp_index(obs.lower_arm - 1, 2)
        wrist_idx = clamp_index(obs.wrist - 1, 2)
        b_row = lookup(self.table_b, upper_idx, lower_idx)
        if b_row is None:
            logger.warning("reba_lookup_miss", table="B", index=(upper_idx, lower_idx))
            return None
        b_raw = lookup(b_row, wrist_idx) or 0
        score_b = min(b_raw + obs.coupling, MAX_GROUP_SCORE)

        # ── 3. Group C ────────────────────────────────────────────────────────
        c_index = (clamp_index(score_a - 1, 11), clamp_index(score_b - 1, 11))
        score_c = lookup(self.table_c, *c_index)
        if score_c is None:
            logger.warning("reba_lookup_miss", table="C", index=c_index)
            return None

        # ── 4. Activity ───────────────────────────────────────────────────────
        total = min(score_c + obs.activity, MAX_TOTAL)

        result = RebaResult(
            score_a=score_a,
            score_b=score_b,
            score_c=score_c,
            total=total,
            classification=classify(Method.REBA, total, locale),
        )
        logger.info(
            "reba_calculated",
            score_a=score_a,
            score_b=score_b,
            score_c=score_c,
            total=total,
            bucket=result.classification.bucket.value,
        )
        return result


def _coerce(observation: Union[RebaObservation, Mapping[str, Any], None]) -> RebaObservation:
    if observation is None:
        return RebaObservation()
    if isinstance(observation, RebaObservation):
        return observation
    return RebaObservation.model_validate(observation)


_default_calculator = RebaCalculator()


def calculate_reba(
    observation: Union[RebaObservation, Mapping[str, Any], None] = None,
    locale: Union[Locale, str, None] = None,
) -> Optional[RebaResult]:
    """Score a REBA observation with the standard tables."""
    return _default_calculator.calculate(observation, locale)
