"""Member registration and login state."""

from .models import AccountRecord, email_key
from .repository import AccountRepository, DEFAULT_DISPLAY_NAME

__all__ = ["AccountRecord", "AccountRepository", "DEFAULT_DISPLAY_NAME", "email_key"]
