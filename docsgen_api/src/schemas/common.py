from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field


class IDModel(BaseModel):
    """Base schema exposing an integer primary key."""
    id: int = Field(..., description="Unique identifier")


class HealthResponse(BaseModel):
    """Liveness check result."""
    status: str = Field("ok", description="Always 'ok' while the process serves requests")
    version: str = Field(..., description="Application version")
    environment: Optional[str] = Field(default=None, description="Deployment environment label")


class ValidationIssue(BaseModel):
    """One problem found while validating a request."""
    loc: List[Union[str, int]] = Field(..., description="Location of the offending value")
    msg: str = Field(..., description="What is wrong with it")
    type: str = Field(..., description="Pydantic error type")


class ErrorInfo(BaseModel):
    type: str = Field(..., description="Machine-readable error type code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Any] = Field(default=None, description="Entity, field or validation issues involved")


# PUBLIC_INTERFACE
class ErrorResponse(BaseModel):
    """Body of every error response."""
    status: int = Field(..., description="HTTP status code")
    error: ErrorInfo
    correlation_id: Optional[str] = Field(default=None, description="X-Correlation-ID of the request")
    path: str
    method: str
    timestamp: datetime = Field(..., description="When the error was produced (UTC)")
