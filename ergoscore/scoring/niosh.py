"""NIOSH Revised Lifting Equation.

  RWL = LC × HM × VM × DM × AM × FM × CM
  LI  = weight / RWL

  LC = 23 kg
  HM = min(25 / max(H, 25), 1)
  VM = 1 − 0.003 × |V − 75|
  DM = 0.82 + 4.5 / max(D, 25)
  AM = 1 − 0.0032 × A
  FM = 0.78   (fixed; frequency and duration are not consulted)
  CM = 1.00 good, 0.95 fair, 0.90 poor or anything else

RWL, LI, HM, VM, DM and AM are reported to two decimals. LI is 0 when RWL
rounds to 0 or the quotient is not finite.

Rounding is half-up on the shortest decimal form of the float (see
``utils.round_half_up``), so a value printed as 1.005 reports as 1.01.
Rounding the exact binary value, as ``round(1.005, 2)`` does, gives 1.0
instead; reported values can differ from such tools in the last digit at
these ties.
"""
import math
from typing import Any, Dict, Mapping, Union

import structlog

from ergoscore.models.enums import Coupling, Locale, Method
from ergoscore.models.observation import NioshObservation
from ergoscore.models.result import NioshResult
from ergoscore.scoring.classification import classify
from ergoscore.scoring.utils import round_half_up

logger = structlog.get_logger(__name__)

# ── Constants ─────────────────────────────────────────────────────────────────
LOAD_CONSTANT: float = 23.0         # kg
REFERENCE_H: float = 25.0           # cm, horizontal distance floor
REFERENCE_V: float = 75.0           # cm, knuckle height
MIN_TRAVEL: float = 25.0            # cm, vertical travel floor
FREQUENCY_MULTIPLIER: float = 0.78

COUPLING_MULTIPLIERS: Dict[str, float] = {
    Coupling.GOOD.value: 1.0,
    Coupling.FAIR.value: 0.95,
    Coupling.POOR.value: 0.9,
}
DEFAULT_COUPLING_MULTIPLIER: float = 0.9


def coupling_multiplier(coupling: str) -> float:
    """Coupling multiplier; unknown grip qualities score as poor."""
    key = coupling.value if isinstance(coupling, Coupling) else str(coupling).strip().lower()
    return COUPLING_MULTIPLIERS.get(key, DEFAULT_COUPLING_MULTIPLIER)


def calculate_niosh(
    observation: Union[NioshObservation, Mapping[str, Any], None] = None,
    locale: Union[Locale, str, None] = None,
) -> NioshResult:
    """Compute RWL, LI and the component multipliers for a lifting task."""
    if observation is None:
        obs = NioshObservation()
    elif isinstance(observation, NioshObservation):
        obs = observation
    else:
        obs = NioshObservation.model_validate(observation)

    hm = min(REFERENCE_H / max(obs.h_dist, REFERENCE_H), 1.0)
    vm = 1 - 0.003 * abs(obs.v_origin - REFERENCE_V)
    dm = 0.82 + 4.5 / max(obs.v_dist, MIN_TRAVEL)
    am = 1 - 0.0032 * obs.asymmetry
    fm = FREQUENCY_MULTIPLIER
    cm = coupling_multiplier(obs.coupling)

    rwl = round_half_up(LOAD_CONSTANT * hm * vm * dm * am * fm * cm)
    li = 0.0
    if rwl != 0:
        ratio = obs.weight / rwl
        if math.isfinite(ratio):
            li = round_half_up(ratio)

    result = NioshResult(
        rwl=rwl,
        li=li,
        hm=round_half_up(hm),
        vm=round_half_up(vm),
        dm=round_half_up(dm),
        am=round_half_up(am),
        fm=fm,
        cm=cm,
        classification=classify(Method.NIOSH, li, locale),
    )
    logger.info(
        "niosh_calculated",
        weight=obs.weight,
        rwl=rwl,
        li=li,
        hm=result.hm,
        vm=result.vm,
        dm=result.dm,
        am=result.am,
        cm=cm,
    )
    return result
