"""Common models used across the application."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Overall health status")
    timestamp: str = Field(..., description="ISO timestamp")
    version: str = Field(..., description="Application version")


class ErrorResponse(BaseModel):
    """Standard error response model."""
    detail: str
    error_code: str | None = None
    field: str | None = None


class FieldSpecResponse(BaseModel):
    """One input field of an assessment form."""
    name: str
    label: str
    min: int
    max: int
    descriptions: List[str]
    help: str


class MethodResponse(BaseModel):
    """Catalogue entry for one assessment method."""
    method: str
    name: str
    full_name: str
    icon: str
    description: str
    color: str
    fields: List[FieldSpecResponse] = Field(default_factory=list)


class EstimateRequest(BaseModel):
    """Partial observation proposed by the image-estimation collaborator."""
    observation: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Current observation; method defaults when omitted",
    )
    estimates: Dict[str, Any] = Field(
        default_factory=dict,
        description="Estimated field values, any numeric range",
    )
