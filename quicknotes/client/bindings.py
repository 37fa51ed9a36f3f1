"""Event handlers wiring page events to a NotesController.

Each handler is a bound method of an EventBindings instance that holds the
controller, so no global application object is needed to dispatch clicks on
rendered cards (cards only carry `data-action` and `data-id`).
"""

from typing import Optional

from quicknotes.client.controller import NotesController

NOTE_FORM = "note"
EDIT_FORM = "edit"


class EventBindings:
    def __init__(self, controller: NotesController) -> None:
        self.controller = controller

    async def on_page_load(self) -> None:
        await self.controller.load_notes()

    async def on_note_form_submit(self) -> None:
        form = self.controller.ui.form
        if form.submit_disabled:
            return
        await self.controller.submit_note(form.title, form.content)

    async def on_edit_form_submit(self) -> None:
        modal = self.controller.ui.modal
        await self.controller.submit_edit(modal.title, modal.content)

    async def on_card_action(self, action: str, note_id: int) -> None:
        """Click on a card button (`data-action`, `data-id`)."""
        if action == "edit":
            self.controller.open_edit(note_id)
        elif action == "delete":
            await self.controller.delete_note(note_id)
        else:
            raise ValueError(f"Unknown card action '{action}'")

    def on_modal_close(self) -> None:
        self.controller.close_edit()

    def on_modal_background_click(self, clicked_backdrop: bool) -> None:
        # Clicks inside the dialog bubble up too; only the backdrop closes it
        if clicked_backdrop:
            self.controller.close_edit()

    def on_notification_close(self) -> None:
        self.controller.hide_notification()

    async def on_keydown(
        self,
        key: str,
        ctrl: bool = False,
        meta: bool = False,
        active_form: Optional[str] = None,
    ) -> None:
        """
        Keyboard shortcuts:
            Escape            close the edit dialog and the notification
            Ctrl/Cmd + Enter  submit the form holding the focus, if any
        """
        if key == "Escape":
            self.controller.close_edit()
            self.controller.hide_notification()
            return

        if key == "Enter" and (ctrl or meta):
            if active_form == NOTE_FORM:
                await self.on_note_form_submit()
            elif active_form == EDIT_FORM:
                await self.on_edit_form_submit()
