"""Method catalogue endpoints."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from ergoscore.core.exceptions import UnknownMethodError
from ergoscore.models import ErrorResponse, Method, MethodResponse
from ergoscore.scoring.catalogue import default_observation, describe_method, describe_methods

router = APIRouter(prefix="/api/v1/methods", tags=["Methods"])


def resolve_method(method: str) -> Method:
    """Parse a path method name, mapping unknown names to 404."""
    try:
        return Method.parse(method)
    except UnknownMethodError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )


@router.get(
    "",
    response_model=List[MethodResponse],
    summary="List Assessment Methods",
)
async def list_methods(locale: Optional[str] = Query(None, description="en or fa")):
    """All methods with their metadata and input field descriptors."""
    return describe_methods(locale)


@router.get(
    "/{method}",
    response_model=MethodResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get Assessment Method",
)
async def get_method(method: str, locale: Optional[str] = Query(None)):
    """Metadata and field descriptors for one method."""
    return describe_method(resolve_method(method), locale)


@router.get(
    "/{method}/defaults",
    responses={404: {"model": ErrorResponse}},
    summary="Default Observation",
)
async def get_defaults(method: str) -> Dict[str, Any]:
    """Starting observation for a fresh form, keyed by camelCase field names."""
    return default_observation(resolve_method(method)).to_record()
