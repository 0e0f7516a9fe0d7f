"""Pydantic schemas for the FastAPI server.

Request fields are typed ``Any`` on purpose: type coercion follows the diary
and account normalizers, so a wrong type never yields a 422.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StatusResponse(BaseModel):
    """Response for the root liveness probe."""

    ok: bool = True
    message: str = "Server is running"


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str


class SignUpRequest(BaseModel):
    """Request body for local sign-up."""

    email: Any = None
    name: Any = None
    password: Any = None


class SignUpResponse(BaseModel):
    """Created member."""

    memberId: int
    name: str
    email: str


class LoginRequest(BaseModel):
    """Request body for local login."""

    email: Any = None
    password: Any = None


class LoginResponse(BaseModel):
    """Response for a successful local login."""

    message: str
    isLogined: int = 1


class GoogleLoginRequest(BaseModel):
    """Request body carrying the authorization code from the Google consent screen."""

    code: Any = None


class GoogleLoginResponse(LoginResponse):
    """Response for a successful Google login."""

    memberId: int
    email: str


class LogoutRequest(BaseModel):
    """Request body for logout."""

    email: Any = None


class LogoutResponse(BaseModel):
    """Login state after logout, always 0."""

    isLogined: int = 0


class CalendarSummaryResponse(BaseModel):
    """Dates to mark on the calendar."""

    haveContents: List[str] = Field(default_factory=list)
    haveTodos: List[str] = Field(default_factory=list)


class DiaryWriteRequest(BaseModel):
    """Request body for POST/PUT ``/diary/{date}``.

    Omitted keys are absent from ``model_fields_set``, which PUT treats as
    "keep the stored value".
    """

    model_config = ConfigDict(extra="ignore")

    todo: Any = None
    contents: Any = None
    thanks: Any = None


class DiaryFlagsResponse(BaseModel):
    """Presence flags of the written entry."""

    haveContents: bool
    haveTodos: bool


class DiaryEntryResponse(BaseModel):
    """Serialized diary entry."""

    todo: List[str] = Field(default_factory=list)
    contents: str = ""
    thanks: str = ""


class ErrorResponse(BaseModel):
    """Error envelope."""

    error: str
    message: str
    detail: Optional[Any] = None
