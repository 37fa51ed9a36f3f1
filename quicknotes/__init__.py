"""
QuickNotes — Application Package Initializer
=============================================

What: Marks the `quicknotes` directory as a Python package.
Who:  Used by uvicorn (`quicknotes.main:app`), pytest, and the client package.

Architecture Note:
    The server side follows the same layering as the rest of the code base:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Note Store)          │  ← id allocation, validation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note record + Pydantic shapes
    └─────────────────────────────────────┘

    The client side (`quicknotes.client`) talks to the routes over HTTP only:

    ┌──────────────┐   ┌──────────────────┐   ┌──────────────┐
    │ EventBindings│──▶│ NotesController  │──▶│ NotesApiClient│──▶ /api/notes
    └──────────────┘   │ (cache + UI state)│   └──────────────┘
                       └────────┬─────────┘
                                ▼
                          render_notes()
"""

__version__ = "1.0.0"
