from __future__ import annotations

import hmac
import itertools
import logging
import threading
from typing import Any, Dict, Optional

from src.common.exceptions import AuthError, ConflictError, ValidationError
from src.diary.normalize import is_valid_string

from .models import AccountRecord, email_key

DEFAULT_DISPLAY_NAME = "Google User"

logger = logging.getLogger(__name__)


class AccountRepository:
    """In-memory members keyed by email plus a separate login flag per email.

    Passwords are stored and compared as plain text.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._members: Dict[str, AccountRecord] = {}
        self._logged_in: Dict[str, bool] = {}

    def get(self, email: str) -> Optional[AccountRecord]:
        if not is_valid_string(email):
            return None
        with self._lock:
            return self._members.get(email_key(email))

    def is_logged_in(self, email: str) -> bool:
        if not is_valid_string(email):
            return False
        with self._lock:
            return self._logged_in.get(email_key(email), False)

    def register(self, email: Any, name: Any, password: Any) -> AccountRecord:
        if not (is_valid_string(email) and is_valid_string(name) and is_valid_string(password)):
            raise ValidationError("email, name, password are required")

        key = email_key(email)
        with self._lock:
            if key in self._members:
                raise ConflictError("email already exists")
            member = AccountRecord(
                member_id=next(self._ids),
                name=name.strip(),
                email=key,
                password=password,
            )
            self._members[key] = member
            self._logged_in[key] = False
        logger.info("Member registered: id=%s email=%s", member.member_id, key)
        return member

    def authenticate(self, email: Any, password: Any) -> AccountRecord:
        """Check a local password and mark the member as logged in."""
        if not (is_valid_string(email) and is_valid_string(password)):
            raise ValidationError("email and password are required")

        key = email_key(email)
        with self._lock:
            member = self._members.get(key)
            if member is None or not _password_matches(member.password, password):
                logger.info("Login rejected: %s", key)
                raise AuthError("invalid credentials", isLogined=0)
            self._logged_in[key] = True
        logger.info("Member logged in: %s", key)
        return member

    def login_external(self, email: str, display_name: Optional[str] = None) -> AccountRecord:
        """Log in an identity verified by an external provider.

        Unknown emails are registered without a password; a known member
        with a blank name gets ``display_name`` filled in.
        """
        if not is_valid_string(email):
            raise AuthError("email not found from userinfo")
        name = display_name if is_valid_string(display_name) else DEFAULT_DISPLAY_NAME

        key = email_key(email)
        with self._lock:
            member = self._members.get(key)
            if member is None:
                member = AccountRecord(member_id=next(self._ids), name=name, email=key)
                self._members[key] = member
                self._logged_in[key] = False
                logger.info("Member auto-registered: id=%s email=%s", member.member_id, key)
            elif not is_valid_string(member.name):
                member.name = name
            self._logged_in[key] = True
        logger.info("Member logged in via external provider: %s", key)
        return member

    def logout(self, email: Any) -> bool:
        """Clear the login flag if one exists. Always returns the resulting state, False."""
        if is_valid_string(email):
            key = email_key(email)
            with self._lock:
                if key in self._logged_in:
                    self._logged_in[key] = False
                    logger.info("Member logged out: %s", key)
        return False


def _password_matches(stored: Optional[str], given: str) -> bool:
    if stored is None:
        return False
    return hmac.compare_digest(stored.encode("utf-8"), given.encode("utf-8"))
