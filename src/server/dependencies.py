"""Dependency helpers shared across FastAPI routes.

Stores live on ``app.state``; they are created once by ``create_app`` and
handlers reach them through the request.
"""

from __future__ import annotations

from typing import Callable

from fastapi import Request

from src.account import AccountRecord, AccountRepository
from src.common.config import Config
from src.diary import DiaryEntry, DiaryFlags, DiaryRepository, DiarySummary
from src.google_oauth import GoogleOAuthClient

from .schemas import (
    CalendarSummaryResponse,
    DiaryEntryResponse,
    DiaryFlagsResponse,
    SignUpResponse,
)

GoogleClientFactory = Callable[[], GoogleOAuthClient]


def get_config(request: Request) -> Config:
    return request.app.state.config


def get_diary_repository(request: Request) -> DiaryRepository:
    return request.app.state.diary_repository


def get_account_repository(request: Request) -> AccountRepository:
    return request.app.state.account_repository


def get_google_oauth_client(request: Request) -> GoogleOAuthClient:
    """Build the OAuth client; raises ConfigError when credentials are missing."""
    factory: GoogleClientFactory = request.app.state.google_client_factory
    return factory()


def serialize_member(member: AccountRecord) -> SignUpResponse:
    """Convert AccountRecord to the sign-up response."""
    return SignUpResponse(memberId=member.member_id, name=member.name, email=member.email)


def serialize_entry(entry: DiaryEntry) -> DiaryEntryResponse:
    """Convert domain DiaryEntry to API response."""
    return DiaryEntryResponse(**entry.to_dict())


def serialize_flags(flags: DiaryFlags) -> DiaryFlagsResponse:
    return DiaryFlagsResponse(haveContents=flags.has_contents, haveTodos=flags.has_todos)


def serialize_summary(summary: DiarySummary) -> CalendarSummaryResponse:
    return CalendarSummaryResponse(
        haveContents=summary.have_contents,
        haveTodos=summary.have_todos,
    )
