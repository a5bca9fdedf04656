"""In-memory note storage backing the reference notes server."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)


class NoteNotFoundError(LookupError):
    """Raised when no note exists for an id."""

    def __init__(self, note_id: int):
        super().__init__(f"no note with id {note_id}")
        self.note_id = note_id


@dataclass
class Note:
    """A stored note."""

    title: str
    content: str
    id: int = 0  # 0 until the repository assigns one


class MemoryNoteRepository:
    """Thread-safe note store keyed by id.

    Ids start at 1 and only grow, so a deleted id is never handed out again.
    """

    def __init__(self):
        self._notes: dict[int, Note] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def create(self, note: Note) -> int:
        with self._lock:
            note_id = self._next_id
            self._next_id += 1
            self._notes[note_id] = replace(note, id=note_id)
        logger.debug(f"Stored note {note_id}")
        return note_id

    def get(self, note_id: int) -> Note:
        with self._lock:
            note = self._notes.get(note_id)
            if note is None:
                raise NoteNotFoundError(note_id)
            return replace(note)

    def update(self, note_id: int, note: Note) -> None:
        """Overwrite title and content; empty fields keep their stored value."""
        with self._lock:
            existing = self._notes.get(note_id)
            if existing is None:
                raise NoteNotFoundError(note_id)
            self._notes[note_id] = Note(
                id=note_id,
                title=note.title or existing.title,
                content=note.content or existing.content,
            )

    def delete(self, note_id: int) -> None:
        with self._lock:
            if self._notes.pop(note_id, None) is None:
                raise NoteNotFoundError(note_id)
        logger.debug(f"Deleted note {note_id}")

    def find_like(self, text: str) -> list[Note]:
        """Return notes whose title or content contains text, ordered by id."""
        with self._lock:
            return [
                replace(note)
                for note_id, note in sorted(self._notes.items())
                if text in note.title or text in note.content
            ]
