"""
QuickNotes — Client State Controller
=====================================

What:  Keeps a local cache of notes in step with the server and re-renders
       the notes view after every change.
How:   The server is the single source of truth. A mutation is sent first;
       only a successful reply touches the cache, and then only at a single
       index (insert at the front, replace by id, filter by id). A failed
       request leaves the cache exactly as it was and raises a notification.
Who:   Driven by EventBindings (user actions) and by the page on start-up.

Concurrency:
    Each API call is an await point. Only the "add note" submit control is
    disabled while its request is pending; other actions (deleting another
    note, say) stay available and are not coordinated with it, so the last
    reply to arrive decides the final cache state.
"""

import asyncio
import logging
from datetime import tzinfo
from typing import Any, Callable, Dict, List, Optional

from quicknotes.client.api import NotesApiClient
from quicknotes.client.render import NotesView, loading_view, render_notes
from quicknotes.client.state import ERROR, SUCCESS, UIState
from quicknotes.config import settings
from quicknotes.exceptions import TransportError

logger = logging.getLogger(__name__)

CONFIRM_DELETE = "Are you sure you want to delete this note?"
MISSING_FIELDS = "Please fill in both title and content"

Listener = Callable[[NotesView], None]


class NotesController:
    """
    Owns the note cache, the derived view and the transient UI state.

    Args:
        api:                  client for the notes REST API
        confirm:              asked before every delete; False cancels it
        notification_timeout: seconds before a notification hides itself
        tz:                   display timezone for card dates (local if None)
    """

    def __init__(
        self,
        api: NotesApiClient,
        confirm: Callable[[str], bool],
        notification_timeout: Optional[float] = None,
        tz: Optional[tzinfo] = None,
    ) -> None:
        self.api = api
        self.notes: List[Dict[str, Any]] = []
        self.ui = UIState()
        self.view = NotesView()
        self._confirm = confirm
        self._tz = tz
        self._timeout = (
            notification_timeout if notification_timeout is not None else settings.notification_timeout
        )
        self._listeners: List[Listener] = []
        self._dismiss_handle: Optional[asyncio.TimerHandle] = None

    # ── Rendering ─────────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> None:
        """Call `listener` with the new view after every render."""
        self._listeners.append(listener)

    def _publish(self) -> None:
        for listener in self._listeners:
            listener(self.view)

    def render(self) -> None:
        self.ui.loading = False
        self.view = render_notes(self.notes, self._tz)
        self._publish()

    def show_loading(self) -> None:
        self.ui.loading = True
        self.view = loading_view(len(self.notes))
        self._publish()

    def hide_loading(self) -> None:
        self.ui.loading = False
        self.view.loading = False
        self._publish()

    # ── Notifications ─────────────────────────────────────────────────────

    def show_notification(self, message: str, kind: str = SUCCESS) -> None:
        """Show a banner and (re)start its auto-dismiss timer."""
        note = self.ui.notification
        note.message = message
        note.kind = kind
        note.visible = True

        if self._dismiss_handle is not None:
            self._dismiss_handle.cancel()
            self._dismiss_handle = None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop outside of an event-driven session; the banner stays up
            return
        self._dismiss_handle = loop.call_later(self._timeout, self.hide_notification)

    def hide_notification(self) -> None:
        self.ui.notification.visible = False
        if self._dismiss_handle is not None:
            self._dismiss_handle.cancel()
            self._dismiss_handle = None

    def _fail(self, action: str, exc: TransportError, message: str) -> None:
        if exc.server_message:
            logger.error("Error %s: %s (%s)", action, exc.message, exc.server_message)
        else:
            logger.error("Error %s: %s", action, exc.message)
        self.show_notification(message, ERROR)

    # ── Server synchronization ────────────────────────────────────────────

    async def load_notes(self) -> None:
        """Replace the cache wholesale with the server's list."""
        self.show_loading()
        try:
            notes = await self.api.list_notes()
        except TransportError as exc:
            self._fail("loading notes", exc, "Failed to load notes")
            self.hide_loading()
            return
        self.notes = list(notes)
        self.render()

    async def submit_note(self, title: str, content: str) -> None:
        """Create a note; on success it goes to the front of the cache."""
        title, content = title.strip(), content.strip()
        if not title or not content:
            self.show_notification(MISSING_FIELDS, ERROR)
            return

        self.ui.form.submitting = True
        try:
            created = await self.api.create_note(title, content)
        except TransportError as exc:
            self._fail("adding note", exc, "Failed to add note")
            return
        finally:
            self.ui.form.submitting = False

        self.notes.insert(0, created)
        self.render()
        self.ui.form.reset()
        self.show_notification("Note added successfully!")

    def open_edit(self, note_id: int) -> None:
        """Open the edit dialog pre-filled from the cached note."""
        note = self._find(note_id)
        if note is None:
            return
        self.ui.modal.open(note_id, note["title"], note["content"])

    def close_edit(self) -> None:
        self.ui.modal.close()

    async def submit_edit(self, title: str, content: str) -> None:
        """Send the dialog's fields for the note being edited."""
        note_id = self.ui.modal.editing_id
        if note_id is None:
            return

        title, content = title.strip(), content.strip()
        if not title or not content:
            self.show_notification(MISSING_FIELDS, ERROR)
            return

        try:
            updated = await self.api.update_note(note_id, title, content)
        except TransportError as exc:
            self._fail("updating note", exc, "Failed to update note")
            return

        for index, note in enumerate(self.notes):
            if note["id"] == note_id:
                self.notes[index] = updated
                break
        self.render()
        # The dialog may have been reopened for another note while we waited
        if self.ui.modal.editing_id == note_id:
            self.close_edit()
        self.show_notification("Note updated successfully!")

    async def delete_note(self, note_id: int) -> None:
        """Delete after confirmation; on success drop the id from the cache."""
        if not self._confirm(CONFIRM_DELETE):
            return

        try:
            await self.api.delete_note(note_id)
        except TransportError as exc:
            self._fail("deleting note", exc, "Failed to delete note")
            return

        self.notes = [note for note in self.notes if note["id"] != note_id]
        self.render()
        self.show_notification("Note deleted successfully!")

    def _find(self, note_id: int) -> Optional[Dict[str, Any]]:
        for note in self.notes:
            if note["id"] == note_id:
                return note
        return None
