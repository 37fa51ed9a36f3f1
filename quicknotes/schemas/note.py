"""
QuickNotes — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the JSON contract between client and server.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI document. Response fields are camelCase on
       the wire (`createdAt`, `updatedAt`) through an alias generator.
Who:   Used by route handlers; the client parses the same shapes back.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteIn(BaseModel):
    """
    Body of POST /api/notes and PUT /api/notes/{id}.

    Both fields are optional at the schema level so that a missing field
    reaches the store's own check and comes back as a 400, not as FastAPI's
    generic 422.
    """
    title: Optional[str] = Field(default=None, description="Note title (non-blank)")
    content: Optional[str] = Field(default=None, description="Note body (non-blank)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    Wire shape of a note: `{id, title, content, createdAt, updatedAt?}`.

    `updatedAt` is left out entirely (routes use response_model_exclude_none)
    until the note has been updated once.
    """
    id: int = Field(description="Server-assigned, strictly increasing identifier")
    title: str
    content: str
    created_at: datetime = Field(description="Creation time (UTC ISO 8601)")
    updated_at: Optional[datetime] = Field(
        default=None,
        description="Time of the last update (UTC ISO 8601); absent until updated",
    )

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DeleteResponse(BaseModel):
    """Returned by DELETE /api/notes/{id}: confirmation plus the removed note."""
    message: str = Field(default="Note deleted successfully")
    note: NoteResponse


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error payload for every 4xx/5xx reply.

    Example:
        {"error": "Note not found", "request_id": "a1b2c3d4"}
    """
    error: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Liveness probe payload, independent of the note store."""
    status: str = Field(default="OK")
    timestamp: datetime = Field(description="Current server time (UTC)")
