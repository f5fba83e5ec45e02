from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Administrator credentials."""
    password: str = Field(..., min_length=1, description="Administrator password")


class TokenResponse(BaseModel):
    """Issued access token."""
    token_type: str = Field("bearer", description="Token type, always 'bearer'")
    access_token: str = Field(..., description="JWT access token")
