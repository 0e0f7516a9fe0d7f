"""HTTP client for Google's OAuth 2.0 token and userinfo endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from src.account import DEFAULT_DISPLAY_NAME
from src.common.config import GoogleConfig
from src.common.exceptions import AuthError, ConfigError, UpstreamError
from src.diary.normalize import is_valid_string

from .models import GoogleIdentity

logger = logging.getLogger(__name__)


class GoogleOAuthClient:
    """
    Exchanges an authorization code for an access token and reads the
    signed-in user's email and name.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        token_url: str = "https://oauth2.googleapis.com/token",
        userinfo_url: str = "https://www.googleapis.com/oauth2/v2/userinfo",
        timeout: Optional[float] = 10.0,
    ):
        """
        Args:
            client_id: OAuth client id
            client_secret: OAuth client secret
            redirect_uri: must equal the redirect URI the frontend used to obtain the code
            token_url: token endpoint
            userinfo_url: userinfo endpoint
            timeout: seconds per request
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.token_url = token_url
        self.userinfo_url = userinfo_url
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: GoogleConfig) -> "GoogleOAuthClient":
        if not config.is_complete():
            raise ConfigError(
                "Google env vars missing",
                detail="check GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET / GOOGLE_REDIRECT_URI",
            )
        return cls(
            client_id=config.client_id,
            client_secret=config.client_secret,
            redirect_uri=config.redirect_uri,
            token_url=config.token_url,
            userinfo_url=config.userinfo_url,
            timeout=config.timeout_seconds,
        )

    def exchange_code(self, code: str) -> str:
        """Trade an authorization code for an access token."""
        try:
            response = requests.post(
                self.token_url,
                headers={"Content-Type": "application/json"},
                json={
                    "code": code.strip(),
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                    "redirect_uri": self.redirect_uri,
                    "grant_type": "authorization_code",
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json() or {}
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code in (400, 401):
                raise AuthError(
                    "invalid or expired authorization code",
                    detail=self._error_detail(e),
                ) from e
            raise self._upstream_error("token exchange", e) from e
        except requests.exceptions.RequestException as e:
            raise self._upstream_error("token exchange", e) from e
        except ValueError as e:
            raise UpstreamError("Google OAuth failed", detail=str(e)) from e

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            raise AuthError("no access_token from google", detail=data)
        return access_token

    def fetch_userinfo(self, access_token: str) -> Dict[str, Any]:
        """Read the profile of the user the token belongs to."""
        try:
            response = requests.get(
                self.userinfo_url,
                headers={"Authorization": f"Bearer {access_token}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json() or {}
        except requests.exceptions.RequestException as e:
            raise self._upstream_error("userinfo", e) from e
        except ValueError as e:
            raise UpstreamError("Google OAuth failed", detail=str(e)) from e
        return data if isinstance(data, dict) else {}

    def verify(self, code: str) -> GoogleIdentity:
        """Run the whole code -> token -> userinfo exchange."""
        access_token = self.exchange_code(code)
        userinfo = self.fetch_userinfo(access_token)

        email = userinfo.get("email")
        if not email:
            raise AuthError("email not found from userinfo")

        name = userinfo.get("name")
        display_name = name if is_valid_string(name) else DEFAULT_DISPLAY_NAME
        return GoogleIdentity(email=str(email).strip().lower(), display_name=display_name)

    @staticmethod
    def _error_detail(exc: requests.exceptions.RequestException) -> Any:
        response = getattr(exc, "response", None)
        if response is None:
            return str(exc)
        try:
            return response.json()
        except ValueError:
            return response.text or str(exc)

    @classmethod
    def _upstream_error(cls, step: str, exc: requests.exceptions.RequestException) -> UpstreamError:
        detail = cls._error_detail(exc)
        logger.error("Google OAuth %s failed: %s", step, detail)
        return UpstreamError("Google OAuth failed", detail=detail)
