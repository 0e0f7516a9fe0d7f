"""Error types shared by the stores, the OAuth client and the HTTP layer.

Each error carries the HTTP status the server responds with, an optional
``detail`` payload and any extra fields merged into the response body.
"""

from __future__ import annotations

from typing import Any, Dict


class DiaryBackendError(Exception):
    """Base error."""

    status_code = 500

    def __init__(self, message: str, detail: Any = None, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.extra = extra

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message, "message": self.message}
        if self.detail is not None:
            payload["detail"] = self.detail
        payload.update(self.extra)
        return payload


class ValidationError(DiaryBackendError):
    """Missing or malformed field or date."""

    status_code = 400


class AuthError(DiaryBackendError):
    """Bad credentials or unusable OAuth result."""

    status_code = 401


class ConflictError(DiaryBackendError):
    """Duplicate account."""

    status_code = 409


class ConfigError(DiaryBackendError):
    """Required server configuration is missing."""

    status_code = 500


class UpstreamError(DiaryBackendError):
    """External provider call failed."""

    status_code = 500
