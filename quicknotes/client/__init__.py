"""
QuickNotes — Client Package
============================

What:  The page-side half of QuickNotes: API calls, note cache, view
       rendering and transient UI state.

Modules:
    - api.py:        NotesApiClient (httpx) for the REST contract
    - controller.py: NotesController, cache synchronization + UI state
    - render.py:     pure view derivation (cards, count label, escaping)
    - state.py:      form / modal / notification state
    - bindings.py:   EventBindings, explicit event handlers
"""

from quicknotes.client.api import NotesApiClient
from quicknotes.client.bindings import EventBindings
from quicknotes.client.controller import NotesController

__all__ = ["EventBindings", "NotesApiClient", "NotesController"]
