"""
QuickNotes — Note Store (In-Memory Business Logic)
===================================================

What:  The authoritative ordered sequence of notes plus the next-id counter.
How:   A plain list of frozen Note records. Ids come from a counter that only
       ever increases, so an id is never handed out twice, even after the
       note that carried it has been deleted.
Who:   Owned by the FastAPI application (`app.state.note_store`) and reached
       by route handlers through the `get_note_store` dependency.
When:  Created once per application instance; lives as long as the process.

Concurrency:
    Every operation runs to completion without awaiting anything, so on a
    single event loop two requests can never interleave inside a mutation.
    If an operation ever gains a suspension point (e.g. persisting to disk
    asynchronously), create/update/delete must be wrapped in an asyncio.Lock.
"""

import dataclasses
import logging
from typing import Iterable, List, Optional, Tuple

from quicknotes.exceptions import NotFoundError, ValidationError
from quicknotes.models.note import Note, utc_now

logger = logging.getLogger(__name__)

# Notes every freshly started server shows, in display order
SEED_NOTES: Tuple[Tuple[str, str], ...] = (
    ("Welcome Note", "This is your first note!"),
    (
        "How to use",
        "Add new notes using the form above. Click delete to remove notes.",
    ),
)


def _require_text(title: Optional[str], content: Optional[str]) -> None:
    """Raise ValidationError unless both fields hold non-blank text."""
    for field, value in (("title", title), ("content", content)):
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(field=field)


class NoteStore:
    """
    In-memory note collection with monotonically increasing ids.

    Operations:
        - list():   all notes in insertion order
        - create(): validate, allocate id, append
        - update(): look up, validate, replace at the same index
        - delete(): look up, remove permanently

    Lookups are linear scans; the collection is expected to stay small.
    """

    def __init__(self, seed: Iterable[Tuple[str, str]] = ()):
        self._notes: List[Note] = []
        self._next_id = 1
        for title, content in seed:
            self.create(title, content)

    @classmethod
    def seeded(cls) -> "NoteStore":
        """Store holding the welcome notes (ids 1 and 2, next id 3)."""
        return cls(seed=SEED_NOTES)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._notes)

    def _index_of(self, note_id: int) -> int:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        raise NotFoundError(resource="Note", resource_id=note_id)

    def list(self) -> List[Note]:
        """Return a snapshot of every note in storage order."""
        return list(self._notes)

    def get(self, note_id: int) -> Note:
        return self._notes[self._index_of(note_id)]

    def create(self, title: Optional[str], content: Optional[str]) -> Note:
        """
        Validate and append a new note.

        Raises:
            ValidationError: title or content missing, empty or whitespace-only
        """
        _require_text(title, content)

        note = Note(
            id=self._next_id,
            title=title,
            content=content,
            created_at=utc_now(),
        )
        self._next_id += 1
        self._notes.append(note)
        logger.info("Note %d created", note.id)
        return note

    def update(self, note_id: int, title: Optional[str], content: Optional[str]) -> Note:
        """
        Replace title and content of an existing note.

        The id is resolved before the fields are checked, so an unknown id
        reports NotFoundError even when the body is also invalid.

        Raises:
            NotFoundError:   no note has this id
            ValidationError: title or content missing, empty or whitespace-only
        """
        index = self._index_of(note_id)
        _require_text(title, content)

        updated = dataclasses.replace(
            self._notes[index],
            title=title,
            content=content,
            updated_at=utc_now(),
        )
        self._notes[index] = updated
        logger.info("Note %d updated", note_id)
        return updated

    def delete(self, note_id: int) -> Note:
        """
        Remove a note permanently and return it.

        Raises:
            NotFoundError: no note has this id
        """
        removed = self._notes.pop(self._index_of(note_id))
        logger.info("Note %d deleted", note_id)
        return removed
