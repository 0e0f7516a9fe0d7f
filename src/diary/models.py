from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class DiaryEntry:
    """Todo list, contents and gratitude note stored for one date."""

    todo_items: List[str] = field(default_factory=list)
    contents: str = ""
    thanks: str = ""

    @property
    def has_contents(self) -> bool:
        return bool(self.contents)

    @property
    def has_todos(self) -> bool:
        return bool(self.todo_items)

    def copy(self) -> "DiaryEntry":
        return DiaryEntry(list(self.todo_items), self.contents, self.thanks)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "todo": list(self.todo_items),
            "contents": self.contents,
            "thanks": self.thanks,
        }


@dataclass(slots=True, frozen=True)
class DiaryFlags:
    """Presence flags of a single entry."""

    has_contents: bool
    has_todos: bool

    @classmethod
    def of(cls, entry: DiaryEntry) -> "DiaryFlags":
        return cls(has_contents=entry.has_contents, has_todos=entry.has_todos)


@dataclass(slots=True)
class DiarySummary:
    """Calendar view: dates carrying contents and dates carrying todos, ascending."""

    have_contents: List[str] = field(default_factory=list)
    have_todos: List[str] = field(default_factory=list)
