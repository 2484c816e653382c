"""Engine facade: dispatch by method name and bundle corrections.

This is the surface the surrounding application calls. It holds no state;
every call scores the observation it is given.
"""
from typing import Any, Callable, Dict, Mapping, Optional, Union

import structlog

from ergoscore.models.enums import Locale, Method
from ergoscore.models.observation import OBSERVATION_MODELS, ObservationBase
from ergoscore.models.result import Assessment, ScoreResult
from ergoscore.scoring.corrections import generate_corrections
from ergoscore.scoring.niosh import calculate_niosh
from ergoscore.scoring.owas import calculate_owas
from ergoscore.scoring.reba import calculate_reba
from ergoscore.scoring.rula import calculate_rula

logger = structlog.get_logger(__name__)

SCORERS: Dict[Method, Callable[..., Optional[ScoreResult]]] = {
    Method.REBA: calculate_reba,
    Method.RULA: calculate_rula,
    Method.OWAS: calculate_owas,
    Method.NIOSH: calculate_niosh,
}


def coerce_observation(
    method: Method,
    observation: Union[ObservationBase, Mapping[str, Any], None],
) -> ObservationBase:
    """Build the method's observation model from a model, mapping or None."""
    model = OBSERVATION_MODELS[method]
    if isinstance(observation, model):
        return observation
    return model.model_validate(observation or {})


def score(
    method: Union[Method, str],
    observation: Union[ObservationBase, Mapping[str, Any], None] = None,
    locale: Union[Locale, str, None] = None,
) -> Optional[ScoreResult]:
    """Score one observation; None means there is not enough data to show a score."""
    method = Method.parse(method)
    obs = coerce_observation(method, observation)
    return SCORERS[method](obs, locale)


def assess(
    method: Union[Method, str],
    observation: Union[ObservationBase, Mapping[str, Any], None] = None,
    locale: Union[Locale, str, None] = None,
) -> Assessment:
    """Score an observation and derive its corrections."""
    method = Method.parse(method)
    obs = coerce_observation(method, observation)
    result = SCORERS[method](obs, locale)
    if result is None:
        logger.warning("assessment_no_result", method=method.value)
    return Assessment(
        method=method,
        result=result,
        corrections=generate_corrections(method, result, obs, locale),
    )
