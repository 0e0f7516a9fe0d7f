from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class AccountRecord:
    """Registered member. ``password`` is None for Google-created accounts."""

    member_id: int
    name: str
    email: str
    password: Optional[str] = None

    @property
    def welcome_message(self) -> str:
        return f"Welcome, {self.name}!"


def email_key(email: str) -> str:
    """Lowercased, trimmed email used as the unique account key."""
    return email.strip().lower()
