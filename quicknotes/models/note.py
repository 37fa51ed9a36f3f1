"""
QuickNotes — Note Record
=========================

What:  The in-memory record for a single note held by the NoteStore.
How:   A frozen dataclass. The store never mutates a record; an update builds
       a new record with `dataclasses.replace` and swaps it in at the same
       index, so a record handed to a caller cannot change underneath it.
Who:   Created and replaced only by NoteStore; serialized by NoteResponse.

Lifecycle:
    1. Created by NoteStore.create() (id + created_at assigned)
    2. Replaced by NoteStore.update() (title, content, updated_at change)
    3. Dropped by NoteStore.delete() (no tombstone)
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Note:
    """A user-authored title/content pair with server-assigned identity."""

    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}', created_at='{self.created_at}')>"
