"""Session diary: free-text notes kept in memory only."""

from __future__ import annotations

from datetime import datetime

from clothesline.schemas import DiaryEntry


class Diary:
    """Append-only list of timestamped notes."""

    def __init__(self) -> None:
        self._entries: list[DiaryEntry] = []

    def add(self, text: str, *, at: datetime | None = None) -> DiaryEntry | None:
        """Append ``text``; blank input is ignored and returns None."""
        stripped = text.strip()
        if not stripped:
            return None
        entry = DiaryEntry(text=stripped, created_at=at or datetime.now())
        self._entries.append(entry)
        return entry

    @property
    def entries(self) -> tuple[DiaryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
