"""Loose-input coercion for diary dates, todo lists and free text.

None of these helpers raise: malformed input degrades to ``None`` (dates)
or to empty values.
"""

from __future__ import annotations

import re
from typing import Any, List, Optional

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_valid_string(value: Any) -> bool:
    """True for strings with at least one non-whitespace character."""
    return isinstance(value, str) and len(value.strip()) > 0


def normalize_date(value: Any) -> Optional[str]:
    """Return the trimmed ``YYYY-MM-DD`` string, or None when it does not match.

    Only the digit layout is checked; ``2024-13-99`` is accepted.
    """
    if not is_valid_string(value):
        return None
    candidate = value.strip()
    if DATE_PATTERN.fullmatch(candidate) is None:
        return None
    return candidate


def normalize_todo(value: Any) -> List[str]:
    """Coerce a list or a comma-separated string into trimmed, non-empty items.

    Non-string list elements are dropped; any other input type yields ``[]``.
    """
    if isinstance(value, (list, tuple)):
        pieces = [item.strip() if isinstance(item, str) else "" for item in value]
    elif isinstance(value, str):
        pieces = [piece.strip() for piece in value.split(",")]
    else:
        return []
    return [piece for piece in pieces if piece]


def normalize_text(value: Any) -> str:
    """Trimmed string, or ``""`` for blanks and non-strings."""
    return value.strip() if is_valid_string(value) else ""
