# Middleware package init
"""
QuickNotes — Middleware Package
================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID: correlation id in a ContextVar and the X-Request-ID header
    - Logging: access line with status and duration
"""
