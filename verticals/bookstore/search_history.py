"""Recent searches for the search screen.

Session-scoped: entries live in memory only and are dropped when the
session ends.
"""
from __future__ import annotations
from pydantic import BaseModel, Field
from datetime import datetime, timezone


class SearchEntry(BaseModel):
    text: str
    searched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class RecentSearches:
    """Most-recent-last list of distinct search strings, capped at ``limit``."""

    def __init__(self, limit: int = 5):
        self.limit = limit
        self._entries: list[SearchEntry] = []

    def record(self, text: str) -> SearchEntry | None:
        """Remember ``text``. Blank text and repeats are ignored.

        A ``limit`` of zero or less keeps no history at all.
        """
        cleaned = text.strip()
        if self.limit <= 0 or not cleaned or cleaned in self.entries():
            return None

        entry = SearchEntry(text=cleaned)
        self._entries.append(entry)

        # Keep only the last `limit` searches
        if len(self._entries) > self.limit:
            self._entries = self._entries[-self.limit:]

        return entry

    def entries(self) -> list[str]:
        return [e.text for e in self._entries]

    def remove(self, text: str):
        self._entries = [e for e in self._entries if e.text != text]

    def clear(self):
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)
