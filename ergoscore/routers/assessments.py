"""Assessment endpoints: score an observation, merge estimated parameters."""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException, Query, status
from pydantic import ValidationError

from ergoscore.models import Assessment, ErrorResponse, EstimateRequest
from ergoscore.routers.methods import resolve_method
from ergoscore.scoring.engine import assess
from ergoscore.scoring.estimates import merge_estimates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/assessments", tags=["Assessments"])


def _unprocessable(exc: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=exc.errors(include_url=False, include_context=False),
    )


@router.post(
    "/{method}",
    response_model=Assessment,
    responses={404: {"model": ErrorResponse}},
    summary="Assess Observation",
)
async def create_assessment(
    method: str,
    observation: Optional[Dict[str, Any]] = Body(None),
    locale: Optional[str] = Query(None, description="en or fa"),
):
    """Score an observation and return its classification and corrections.

    Missing fields take their defaults. A ``null`` result means the
    observation could not be scored; corrections are then empty.
    """
    parsed = resolve_method(method)
    try:
        return assess(parsed, observation, locale)
    except ValidationError as exc:
        logger.info(f"Rejected {parsed.value} observation: {exc.error_count()} errors")
        raise _unprocessable(exc)


@router.post(
    "/{method}/estimates",
    responses={404: {"model": ErrorResponse}},
    summary="Merge Estimated Parameters",
)
async def merge_estimated_parameters(method: str, request: EstimateRequest) -> Dict[str, Any]:
    """Clamp estimated parameters into range and merge them into the observation."""
    parsed = resolve_method(method)
    try:
        merged = merge_estimates(parsed, request.observation, request.estimates)
    except ValidationError as exc:
        raise _unprocessable(exc)
    return merged.to_record()
