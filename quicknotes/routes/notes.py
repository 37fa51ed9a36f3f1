"""
QuickNotes — Notes Route Handlers
==================================

What:  CRUD endpoints over the note store.
How:   Each handler pulls the store from the application through the
       `get_note_store` dependency, makes exactly one store call, and returns
       a Pydantic response model. Store exceptions propagate to the global
       handlers in main.py (ValidationError → 400, NotFoundError → 404).
Who:   Called by the QuickNotes client (quicknotes.client.api).

Route Inventory:
    GET    /api/notes         → 200, list of notes
    POST   /api/notes         → 201, created note
    PUT    /api/notes/{id}    → 200, updated note
    DELETE /api/notes/{id}    → 200, {message, note}
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from quicknotes.exceptions import NotFoundError
from quicknotes.schemas.note import (
    DeleteResponse,
    ErrorResponse,
    NoteIn,
    NoteResponse,
)
from quicknotes.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


def get_note_store(request: Request) -> NoteStore:
    """Dependency returning the store owned by the running application."""
    return request.app.state.note_store


def _parse_note_id(raw: str) -> int:
    """Path ids that are not integers can never match a note."""
    try:
        # Strict: "3abc" and "1.0" are unknown ids, not 3 and 1
        return int(raw)
    except ValueError:
        logger.debug("Non-integer note id in path: %r", raw)
        raise NotFoundError(resource="Note", resource_id=raw) from None


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    response_model_exclude_none=True,
    summary="List all notes",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[NoteResponse]:
    logger.debug("Listing %d notes", len(store))
    return [NoteResponse.model_validate(note) for note in store.list()]


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    response_model_exclude_none=True,
    responses={400: {"description": "Title or content missing", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    payload: NoteIn,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    note = store.create(payload.title, payload.content)
    return NoteResponse.model_validate(note)


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Title or content missing", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update a note's title and content",
)
async def update_note(
    note_id: str,
    payload: NoteIn,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    note = store.update(_parse_note_id(note_id), payload.title, payload.content)
    return NoteResponse.model_validate(note)


@router.delete(
    "/notes/{note_id}",
    response_model=DeleteResponse,
    response_model_exclude_none=True,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> DeleteResponse:
    removed = store.delete(_parse_note_id(note_id))
    return DeleteResponse(note=NoteResponse.model_validate(removed))
