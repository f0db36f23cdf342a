"""Pydantic models for the guest API payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class VerifyRequest(BaseModel):
    """Access code submitted by a guest."""

    code: str | None = None


class VerifyResponse(BaseModel):
    """Result of an access code check."""

    model_config = ConfigDict(populate_by_name=True)

    valid: bool
    guest_name: str | None = Field(default=None, alias="guestName")
    token: str | None = None
    message: str | None = None


class DetailsResponse(BaseModel):
    """Rendered event details."""

    html: str


class LogoutResponse(BaseModel):
    success: bool = True
    message: str = "Logged out successfully"


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    """Service liveness and session count."""

    model_config = ConfigDict(populate_by_name=True)

    status: str
    timestamp: datetime
    active_sessions: int = Field(alias="activeSessions")
