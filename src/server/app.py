"""FastAPI application bootstrap."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.account import AccountRepository
from src.common.config import Config
from src.common.exceptions import DiaryBackendError, ValidationError
from src.diary import DiaryRepository
from src.google_oauth import GoogleOAuthClient

from .dependencies import GoogleClientFactory
from .routes import register_auth_routes, register_diary_routes, register_home_routes

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Config] = None,
    diary_repository: Optional[DiaryRepository] = None,
    account_repository: Optional[AccountRepository] = None,
    google_client_factory: Optional[GoogleClientFactory] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Every call gets its own stores unless they are passed in.
    """
    if config is None:
        config = Config.load()

    app = FastAPI(title="Diary Backend API", version="1.0.0")

    app.state.config = config
    app.state.diary_repository = diary_repository or DiaryRepository()
    app.state.account_repository = account_repository or AccountRepository()
    app.state.google_client_factory = google_client_factory or (
        lambda: GoogleOAuthClient.from_config(config.google)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DiaryBackendError)
    async def handle_backend_error(request: Request, exc: DiaryBackendError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = ValidationError("malformed request body", detail=jsonable_errors(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_payload())

    register_home_routes(app)
    register_auth_routes(app)
    register_diary_routes(app)

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


app = create_app()
