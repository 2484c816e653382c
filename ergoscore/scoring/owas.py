"""OWAS (Ovako Working Posture Analysis) Calculator.

Action category from an ordered rule cascade over the back, arms and legs
codes. The first matching rule wins:

  1. back = 1, arms ≤ 2, legs ∈ {1, 2, 3}      → 1
  2. back = 1, arms ≤ 3, legs ∈ {4, 5, 6}      → 2
  3. back = 2, arms ≤ 2, legs ≤ 3              → 2
  4. back ∈ {3, 4} or arms = 3                 → 3
  5. otherwise                                 → 4

The load digit only appears in the four-digit posture code.
"""
from typing import Any, Mapping, Union

import structlog

from ergoscore.models.enums import Locale, Method
from ergoscore.models.observation import OwasObservation
from ergoscore.models.result import OwasResult
from ergoscore.scoring.classification import classify

logger = structlog.get_logger(__name__)


def owas_category(back: int, arms: int, legs: int) -> int:
    """Apply the OWAS rule cascade."""
    if back == 1 and arms <= 2 and legs in (1, 2, 3):
        return 1
    if back == 1 and arms <= 3 and legs in (4, 5, 6):
        return 2
    if back == 2 and arms <= 2 and legs <= 3:
        return 2
    if back in (3, 4) or arms == 3:
        return 3
    return 4


def calculate_owas(
    observation: Union[OwasObservation, Mapping[str, Any], None] = None,
    locale: Union[Locale, str, None] = None,
) -> OwasResult:
    """Classify an OWAS posture into its action category."""
    if observation is None:
        obs = OwasObservation()
    elif isinstance(observation, OwasObservation):
        obs = observation
    else:
        obs = OwasObservation.model_validate(observation)

    category = owas_category(obs.back, obs.arms, obs.legs)
    code = f"{obs.back}{obs.arms}{obs.legs}{obs.load}"

    logger.info("owas_calculated", code=code, category=category)
    return OwasResult(
        category=category,
        code=code,
        classification=classify(Method.OWAS, category, locale),
    )
