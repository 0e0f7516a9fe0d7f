"""Google OAuth code exchange."""

from .client import GoogleOAuthClient
from .models import GoogleIdentity

__all__ = ["GoogleOAuthClient", "GoogleIdentity"]
