"""
QuickNotes — Health Check Route
================================

What:  Liveness probe for monitoring and container health checks.
How:   Answers without touching the note store; the store is in-memory and
       has no dependency that could be down independently of the process.
Who:   Called by Docker health checks, load balancers, and the client.
"""

from fastapi import APIRouter

from quicknotes.models.note import utc_now
from quicknotes.schemas.note import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service liveness check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="OK", timestamp=utc_now())
