"""Per-date diary entries and the calendar summary."""

from .models import DiaryEntry, DiaryFlags, DiarySummary
from .normalize import is_valid_string, normalize_date, normalize_text, normalize_todo
from .repository import DiaryRepository, UNSET

__all__ = [
    "DiaryEntry",
    "DiaryFlags",
    "DiarySummary",
    "DiaryRepository",
    "UNSET",
    "is_valid_string",
    "normalize_date",
    "normalize_text",
    "normalize_todo",
]
