"""Liveness probes, logout and the calendar summary."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request

from ..dependencies import get_account_repository, get_diary_repository, serialize_summary
from ..schemas import (
    CalendarSummaryResponse,
    HealthResponse,
    LogoutRequest,
    LogoutResponse,
    StatusResponse,
)

logger = logging.getLogger(__name__)


def register_home_routes(app: FastAPI) -> None:
    """Register root, health and /Home endpoints."""

    @app.get("/", response_model=StatusResponse)
    async def root() -> StatusResponse:
        return StatusResponse()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Simple health check endpoint."""
        return HealthResponse(status="ok")

    @app.post("/Home", response_model=LogoutResponse)
    async def logout(request: Request, payload: Optional[LogoutRequest] = None) -> LogoutResponse:
        """Log the given email out. Unknown or missing emails are not an error."""
        repo = get_account_repository(request)
        email = payload.email if payload else None
        state = repo.logout(email)
        return LogoutResponse(isLogined=int(state))

    @app.get("/Home", response_model=CalendarSummaryResponse)
    async def calendar_summary(request: Request) -> CalendarSummaryResponse:
        """Dates that carry contents and dates that carry todos."""
        repo = get_diary_repository(request)
        return serialize_summary(repo.summarize())
