"""
Case API: Pydantic Request/Response Schemas
=============================================

What:  Pydantic models defining the JSON contract of the /case endpoints.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation.

Design Decision:
    JSON keys are camelCase (`caseNumber`, `createdDate`) while Python
    attributes stay snake_case. The alias generator bridges the two, and
    `populate_by_name` lets clients send either spelling.

    Required-field checks for creation live in CaseService rather than
    here, so a missing caseNumber or title becomes a 400 validation_error
    instead of FastAPI's field-level 422. The caseNumber range check does
    live here; the app maps its RequestValidationError to 400 as well.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# case_number is a 32-bit INTEGER column
CASE_NUMBER_MIN = -(2 ** 31)
CASE_NUMBER_MAX = 2 ** 31 - 1


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class CaseCreate(_CamelModel):
    """
    Body of POST /case/addCase.

    Every field is optional at the schema level; CaseService rejects a
    missing caseNumber or title. Any `id` sent by the client is ignored.
    """
    case_number: Optional[int] = Field(
        default=None,
        ge=CASE_NUMBER_MIN,
        le=CASE_NUMBER_MAX,
        description="Case number (required)",
    )
    title: Optional[str] = Field(default=None, description="Case title (required)")
    description: Optional[str] = Field(default=None, description="Free-text description")
    created_date: Optional[datetime] = Field(
        default=None,
        description="Creation timestamp; defaults to the current time when omitted",
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CaseResponse(_CamelModel):
    """A stored case as returned by every /case endpoint."""
    id: int = Field(description="Identity assigned on insert")
    case_number: int = Field(description="Case number")
    title: str = Field(description="Case title")
    description: Optional[str] = Field(default=None, description="Free-text description")
    created_date: datetime = Field(description="Creation timestamp")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "title is required",
            "details": {"field": "title"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
