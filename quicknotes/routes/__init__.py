# Routes package init
"""
QuickNotes — API Routes Package
================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET/POST /api/notes, PUT/DELETE /api/notes/{id}
    - health.py:  GET /health (liveness probe)

Routes stay thin: extract the body/path, call the note store, pick the
status code. Validation and id allocation live in the store.
"""
