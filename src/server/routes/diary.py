"""Diary endpoints keyed by ``YYYY-MM-DD`` dates."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request

from src.common.exceptions import ValidationError
from src.diary.normalize import normalize_date

from ..dependencies import get_diary_repository, serialize_entry, serialize_flags
from ..schemas import DiaryEntryResponse, DiaryFlagsResponse, DiaryWriteRequest, ErrorResponse

DIARY_FIELDS = ("todo", "contents", "thanks")

logger = logging.getLogger(__name__)


def _require_date(raw: str) -> str:
    date = normalize_date(raw)
    if date is None:
        raise ValidationError("invalid date format (YYYY-MM-DD)")
    return date


def register_diary_routes(app: FastAPI) -> None:
    """Register diary read/write endpoints."""

    @app.post(
        "/diary/{date}",
        response_model=DiaryFlagsResponse,
        responses={400: {"model": ErrorResponse}},
    )
    async def write_diary(
        date: str, request: Request, payload: Optional[DiaryWriteRequest] = None
    ) -> DiaryFlagsResponse:
        """Store the entry for ``date``, replacing any previous one."""
        date = _require_date(date)
        payload = payload or DiaryWriteRequest()
        repo = get_diary_repository(request)
        flags = repo.replace(date, payload.todo, payload.contents, payload.thanks)
        logger.info("Diary written: %s", date)
        return serialize_flags(flags)

    @app.get(
        "/diary/{date}",
        response_model=DiaryEntryResponse,
        responses={400: {"model": ErrorResponse}},
    )
    async def read_diary(date: str, request: Request) -> DiaryEntryResponse:
        """Return the entry for ``date``, or an empty one."""
        date = _require_date(date)
        repo = get_diary_repository(request)
        return serialize_entry(repo.get(date))

    @app.put(
        "/diary/{date}",
        response_model=DiaryFlagsResponse,
        responses={400: {"model": ErrorResponse}},
    )
    async def update_diary(
        date: str, request: Request, payload: Optional[DiaryWriteRequest] = None
    ) -> DiaryFlagsResponse:
        """Update only the fields present in the body."""
        date = _require_date(date)
        repo = get_diary_repository(request)
        provided = payload.model_fields_set if payload else set()
        changes = {name: getattr(payload, name) for name in DIARY_FIELDS if name in provided}
        flags = repo.merge(date, **changes)
        logger.info("Diary updated: %s (%s)", date, ", ".join(sorted(changes)) or "no fields")
        return serialize_flags(flags)
