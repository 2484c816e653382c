"""Merge externally estimated parameters into an observation.

The image-estimation collaborator returns a best-effort partial record:
same field names (camelCase or snake_case), any numeric range. Before
scoring, ordinal values are rounded and clamped to each field's range.
NIOSH measurements are continuous and pass through unchanged.
"""
from decimal import InvalidOperation
from typing import Any, Dict, Mapping, Union

import structlog

from ergoscore.models.enums import Method
from ergoscore.models.observation import OBSERVATION_MODELS, ObservationBase
from ergoscore.scoring.catalogue import default_observation, field_specs
from ergoscore.scoring.utils import to_decimal

logger = structlog.get_logger(__name__)


def _field_names(model: type[ObservationBase]) -> Dict[str, str]:
    """Map every accepted key (attribute name and alias) to the attribute name."""
    names: Dict[str, str] = {}
    for name, info in model.model_fields.items():
        names[name] = name
        if info.alias:
            names[info.alias] = name
    return names


def merge_estimates(
    method: Union[Method, str],
    observation: Union[ObservationBase, Mapping[str, Any], None],
    estimates: Mapping[str, Any],
) -> ObservationBase:
    """Apply estimated values on top of an observation.

    Args:
        method: Method the observation belongs to.
        observation: Current observation; the method default when None.
        estimates: Estimated values keyed by field name. Keys that are not
                   fields of the method are ignored.

    Returns:
        A new observation. The input observation is never modified.
    """
    method = Method.parse(method)
    model = OBSERVATION_MODELS[method]
    if observation is None:
        current = default_observation(method)
    elif isinstance(observation, model):
        current = observation
    else:
        current = model.model_validate(observation)

    names = _field_names(model)
    specs = field_specs(method)
    updates: Dict[str, Any] = {}
    ignored = []

    for key, value in (estimates or {}).items():
        name = names.get(key)
        if name is None or value is None:
            ignored.append(key)
            continue
        spec = specs.get(name)
        if spec is None:
            updates[name] = value
            continue
        try:
            updates[name] = spec.clamp(int(to_decimal(float(value), 0)))
        except (TypeError, ValueError, InvalidOperation):
            ignored.append(key)

    if ignored:
        logger.info("estimates_ignored", method=method.value, keys=ignored)

    merged = model.model_validate({**current.model_dump(), **updates})
    logger.info("estimates_merged", method=method.value, fields=sorted(updates))
    return merged
