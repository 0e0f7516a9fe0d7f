"""Sign-up and login endpoints (local password and Google OAuth)."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fastapi import FastAPI, Request

from src.common.exceptions import ValidationError
from src.diary.normalize import is_valid_string

from ..dependencies import get_account_repository, get_google_oauth_client, serialize_member
from ..schemas import (
    ErrorResponse,
    GoogleLoginRequest,
    GoogleLoginResponse,
    LoginRequest,
    LoginResponse,
    SignUpRequest,
    SignUpResponse,
)

logger = logging.getLogger(__name__)


def register_auth_routes(app: FastAPI) -> None:
    """Register account endpoints."""

    @app.post(
        "/SignUp",
        response_model=SignUpResponse,
        responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    )
    async def sign_up(request: Request, payload: Optional[SignUpRequest] = None) -> SignUpResponse:
        """Register a member with a local password."""
        payload = payload or SignUpRequest()
        repo = get_account_repository(request)
        member = repo.register(payload.email, payload.name, payload.password)
        return serialize_member(member)

    @app.post(
        "/Login",
        response_model=LoginResponse,
        responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    )
    async def login(request: Request, payload: Optional[LoginRequest] = None) -> LoginResponse:
        payload = payload or LoginRequest()
        repo = get_account_repository(request)
        member = repo.authenticate(payload.email, payload.password)
        return LoginResponse(message=member.welcome_message, isLogined=1)

    @app.post(
        "/auth/google",
        response_model=GoogleLoginResponse,
        responses={
            400: {"model": ErrorResponse},
            401: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    async def google_login(
        request: Request, payload: Optional[GoogleLoginRequest] = None
    ) -> GoogleLoginResponse:
        """Exchange a Google authorization code, registering the member on first login."""
        code = payload.code if payload else None
        if not is_valid_string(code):
            raise ValidationError("code is required")

        client = get_google_oauth_client(request)
        identity = await asyncio.to_thread(client.verify, code)

        repo = get_account_repository(request)
        member = repo.login_external(identity.email, identity.display_name)
        return GoogleLoginResponse(
            message=member.welcome_message,
            isLogined=1,
            memberId=member.member_id,
            email=member.email,
        )
