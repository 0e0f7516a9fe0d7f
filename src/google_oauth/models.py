from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GoogleIdentity:
    """Email and display name confirmed by Google."""

    email: str
    display_name: str
