from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List

from .models import DiaryEntry, DiaryFlags, DiarySummary
from .normalize import normalize_text, normalize_todo

UNSET = object()

logger = logging.getLogger(__name__)


class DiaryRepository:
    """In-memory diary entries keyed by ``YYYY-MM-DD`` date strings.

    Dates passed in must already be normalized with ``normalize_date``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[str, DiaryEntry] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def dates(self) -> List[str]:
        with self._lock:
            return sorted(self._entries)

    def replace(
        self, date: str, todo: Any = None, contents: Any = None, thanks: Any = None
    ) -> DiaryFlags:
        """Normalize all three fields and overwrite whatever is stored for ``date``."""
        entry = DiaryEntry(
            todo_items=normalize_todo(todo),
            contents=normalize_text(contents),
            thanks=normalize_text(thanks),
        )
        with self._lock:
            self._entries[date] = entry
        logger.debug("Diary entry replaced: %s", date)
        return DiaryFlags.of(entry)

    def merge(
        self,
        date: str,
        *,
        todo: Any = UNSET,
        contents: Any = UNSET,
        thanks: Any = UNSET,
    ) -> DiaryFlags:
        """Update only the fields that are not UNSET.

        The base is the stored entry, or an empty entry when the date has none.
        An explicit ``None`` counts as provided and clears the field.
        """
        with self._lock:
            base = self._entries.get(date) or DiaryEntry()
            merged = DiaryEntry(
                todo_items=list(base.todo_items) if todo is UNSET else normalize_todo(todo),
                contents=base.contents if contents is UNSET else normalize_text(contents),
                thanks=base.thanks if thanks is UNSET else normalize_text(thanks),
            )
            self._entries[date] = merged
        logger.debug("Diary entry merged: %s", date)
        return DiaryFlags.of(merged)

    def get(self, date: str) -> DiaryEntry:
        with self._lock:
            entry = self._entries.get(date)
            return entry.copy() if entry else DiaryEntry()

    def summarize(self) -> DiarySummary:
        """Scan every stored entry; both date lists come back sorted ascending."""
        with self._lock:
            items = list(self._entries.items())
        have_contents = sorted(date for date, entry in items if entry.has_contents)
        have_todos = sorted(date for date, entry in items if entry.has_todos)
        return DiarySummary(have_contents=have_contents, have_todos=have_todos)
