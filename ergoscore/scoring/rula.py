"""RULA (Rapid Upper Limb Assessment) Calculator.

Two parallel branches, each capped at 8, combined by taking the maximum:

  Arm/wrist:   A_raw   = TABLE_C[upper_arm + lower_arm − 2][wrist − 1]
               group_A = min(A_raw + wrist_twist − 1, 8)
               score_C = min(group_A + muscle + force, 8)
  Neck/trunk:  group_B = min(TABLE_D[neck + trunk − 2][legs − 1], 8)
               score_D = min(group_B + muscle + force, 8)
  Grand score: RULA    = max(score_C, score_D)
"""
from typing import Any, Mapping, Optional, Union

import structlog

from ergoscore.models.enums import Locale, Method
from ergoscore.models.observation import RulaObservation
from ergoscore.models.result import RulaResult
from ergoscore.scoring.classification import classify
from ergoscore.scoring.tables import RULA_TABLE_C, RULA_TABLE_D, Table2D
from ergoscore.scoring.utils import clamp_index, lookup

logger = structlog.get_logger(__name__)

MAX_SCORE: int = 8


class RulaCalculator:
    """Compute RULA scores from a RULA observation.

    Parameters
    ----------
    table_c, table_d:
        Override the arm/wrist and neck/trunk tables.
    """

    def __init__(
        self,
        table_c: Table2D = RULA_TABLE_C,
        table_d: Table2D = RULA_TABLE_D,
    ) -> None:
        self.table_c = table_c
        self.table_d = table_d

    def calculate(
        self,
        observation: Union[RulaObservation, Mapping[str, Any], None] = None,
        locale: Union[Locale, str, None] = None,
    ) -> Optional[RulaResult]:
        """Calculate the RULA grand score, or None if a table lookup misses."""
        obs = _coerce(observation)
        modifiers = obs.muscle + obs.force

        # ── Arm / wrist branch ────────────────────────────────────────────────
        a_index = (
            clamp_index(obs.upper_arm + obs.lower_arm - 2, 11),
            clamp_index(obs.wrist - 1, 3),
        )
        a_raw = lookup(self.table_c, *a_index)
        if a_raw is None:
            logger.warning("rula_lookup_miss", table="C", index=a_index)
            return None
        group_a = min(a_raw + obs.wrist_twist - 1, MAX_SCORE)
        score_c = min(group_a + modifiers, MAX_SCORE)

        # ── Neck / trunk / legs branch ────────────────────────────────────────
        b_index = (
            clamp_index(obs.neck + obs.trunk - 2, 11),
            clamp_index(obs.legs - 1, 3),
        )
        b_raw = lookup(self.table_d, *b_index)
        if b_raw is None:
            logger.warning("rula_lookup_miss", table="D", index=b_index)
            return None
        group_b = min(b_raw, MAX_SCORE)
        score_d = min(group_b + modifiers, MAX_SCORE)

        total = max(score_c, score_d)

        result = RulaResult(
            score_c=score_c,
            score_d=score_d,
            total=total,
            classification=classify(Method.RULA, total, locale),
        )
        logger.info(
            "rula_calculated",
            group_a=group_a,
            group_b=group_b,
            score_c=score_c,
            score_d=score_d,
            total=total,
        )
        return result


def _coerce(observation: Union[RulaObservation, Mapping[str, Any], None]) -> RulaObservation:
    if observation is None:
        return RulaObservation()
    if isinstance(observation, RulaObservation):
        return observation
    return RulaObservation.model_validate(observation)


_default_calculator = RulaCalculator()


def calculate_rula(
    observation: Union[RulaObservation, Mapping[str, Any], None] = None,
    locale: Union[Locale, str, None] = None,
) -> Optional[RulaResult]:
    """Score a RULA observation with the standard tables."""
    return _default_calculator.calculate(observation, locale)
