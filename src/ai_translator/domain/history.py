from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from datetime import datetime, timezone
from uuid import uuid4

from ai_translator.domain.models import HistoryEntry

TRANSLATION_HISTORY_CAPACITY = 50
OCR_HISTORY_CAPACITY = 20


class BoundedHistory:
    """Newest-first history with a fixed capacity.

    Adding past the capacity evicts the oldest entry. Instances are owned by a
    session and handed to the UI by reference.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self._capacity = capacity
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, entry: HistoryEntry) -> None:
        self._entries.appendleft(entry)

    def record(self, original: str, text: str, **metadata: object) -> HistoryEntry:
        entry = HistoryEntry(
            id=uuid4().hex,
            original=original,
            text=text,
            timestamp=datetime.now(timezone.utc).isoformat(),
            metadata=dict(metadata),
        )
        self.add(entry)
        return entry

    def remove(self, entry_id: str) -> bool:
        for entry in self._entries:
            if entry.id == entry_id:
                self._entries.remove(entry)
                return True
        return False

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def translation_history(capacity: int = TRANSLATION_HISTORY_CAPACITY) -> BoundedHistory:
    return BoundedHistory(capacity)


def ocr_history(capacity: int = OCR_HISTORY_CAPACITY) -> BoundedHistory:
    return BoundedHistory(capacity)
