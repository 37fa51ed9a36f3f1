"""Transient UI state owned by the notes controller.

None of this is ever sent to the server; it only decides what the page
shows while the note cache is being synchronized.
"""

from dataclasses import dataclass, field
from typing import Optional

SUCCESS = "success"
ERROR = "error"


@dataclass
class NoteForm:
    """The "add note" form and its submit control."""

    title: str = ""
    content: str = ""
    submitting: bool = False

    @property
    def submit_disabled(self) -> bool:
        return self.submitting

    @property
    def spinner_visible(self) -> bool:
        return self.submitting

    def reset(self) -> None:
        self.title = ""
        self.content = ""


@dataclass
class EditModal:
    """The edit dialog. While it is visible the page behind it cannot scroll."""

    visible: bool = False
    editing_id: Optional[int] = None
    title: str = ""
    content: str = ""

    @property
    def scroll_locked(self) -> bool:
        return self.visible

    def open(self, note_id: int, title: str, content: str) -> None:
        self.editing_id = note_id
        self.title = title
        self.content = content
        self.visible = True

    def close(self) -> None:
        self.visible = False
        self.editing_id = None
        self.title = ""
        self.content = ""


@dataclass
class Notification:
    """Dismissible banner; `kind` is SUCCESS or ERROR."""

    message: str = ""
    kind: str = SUCCESS
    visible: bool = False


@dataclass
class UIState:
    loading: bool = False
    form: NoteForm = field(default_factory=NoteForm)
    modal: EditModal = field(default_factory=EditModal)
    notification: Notification = field(default_factory=Notification)
