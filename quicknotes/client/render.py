"""
QuickNotes — Client View Rendering
===================================

What:  Derives the notes view from the client cache.
How:   Pure functions: the same cache always renders to the same view.
       Titles and contents are HTML-escaped before they are placed in a card,
       so note text can never inject markup into the page.

View contents:
    - count label: "0 notes", "1 note", "2 notes", ...
    - empty-state flag when the cache holds nothing
    - one card per note, in cache order (newest-first after local creates)

Cards carry `data-id` / `data-action` attributes instead of inline handlers;
EventBindings maps clicks on them back to the controller.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from typing import Any, Dict, List, Mapping, Optional, Sequence

EMPTY_MESSAGE = "No notes yet. Add your first note above!"

_HTML_ESCAPES: Dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}


def escape_html(text: str) -> str:
    """Replace the five markup-significant characters with entities."""
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text)


def parse_timestamp(value: str) -> datetime:
    """Parse the server's ISO-8601 timestamps, including a trailing 'Z'."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(value: str, tz: Optional[tzinfo] = None) -> str:
    """
    Human-readable en-US timestamp, e.g. "Jan 15, 2024, 02:30 PM".

    Args:
        value: ISO-8601 timestamp as sent by the server
        tz:    Display timezone; the machine's local zone when omitted
    """
    moment = parse_timestamp(value).astimezone(tz)
    return f"{moment:%b} {moment.day}, {moment:%Y, %I:%M %p}"


def count_label(count: int) -> str:
    return f"{count} note{'' if count == 1 else 's'}"


def render_card(note: Mapping[str, Any], tz: Optional[tzinfo] = None) -> str:
    dates = f"Created: {format_date(note['createdAt'], tz)}"
    if note.get("updatedAt"):
        dates += f"<br>Updated: {format_date(note['updatedAt'], tz)}"

    note_id = int(note["id"])
    return (
        f'<div class="note-card" data-id="{note_id}">'
        f'<div class="note-header">'
        f'<h3 class="note-title">{escape_html(note["title"])}</h3>'
        f'<div class="note-actions">'
        f'<button class="btn btn-edit" data-action="edit" data-id="{note_id}">Edit</button>'
        f'<button class="btn btn-danger" data-action="delete" data-id="{note_id}">Delete</button>'
        f"</div>"
        f"</div>"
        f'<div class="note-content">{escape_html(note["content"])}</div>'
        f'<div class="note-date">{dates}</div>'
        f"</div>"
    )


@dataclass
class NotesView:
    """Everything the notes panel shows for one render."""

    count_label: str = "0 notes"
    loading: bool = False
    empty: bool = False
    cards: List[str] = field(default_factory=list)

    @property
    def html(self) -> str:
        return "".join(self.cards)


def loading_view(count: int) -> NotesView:
    return NotesView(count_label=count_label(count), loading=True)


def render_notes(notes: Sequence[Mapping[str, Any]], tz: Optional[tzinfo] = None) -> NotesView:
    if not notes:
        return NotesView(count_label=count_label(0), empty=True)
    return NotesView(
        count_label=count_label(len(notes)),
        cards=[render_card(note, tz) for note in notes],
    )
