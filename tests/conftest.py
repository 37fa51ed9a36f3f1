"""
QuickNotes — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own NoteStore and its own application instance,
       so no state leaks between tests. HTTP tests run in-process through
       httpx's ASGITransport; no server is started.

Fixture Hierarchy (all function-scoped):
    note_store ─▶ app ─▶ test_client   (raw HTTP)
                     └─▶ api_client ─▶ controller ─▶ bindings
    empty_store (no seed notes)
"""

import os

# Override settings BEFORE any quicknotes import reads them
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_NOTES"] = "true"
os.environ["NOTIFICATION_TIMEOUT"] = "3.0"

from datetime import timezone

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from quicknotes.client.api import NotesApiClient
from quicknotes.client.bindings import EventBindings
from quicknotes.client.controller import NotesController
from quicknotes.main import create_app
from quicknotes.services.note_store import NoteStore

BASE_URL = "http://test"


@pytest.fixture
def note_store():
    """Store with the two welcome notes (ids 1, 2; next id 3)."""
    return NoteStore.seeded()


@pytest.fixture
def empty_store():
    return NoteStore()


@pytest.fixture
def app(note_store):
    return create_app(note_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to the app in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as client:
        yield client


@pytest_asyncio.fixture
async def api_client(app):
    async with NotesApiClient(base_url=BASE_URL, transport=ASGITransport(app=app)) as client:
        yield client


@pytest.fixture
def confirm_answers():
    """Answers handed to the delete confirmation, and the prompts it received."""
    return {"answer": True, "prompts": []}


@pytest.fixture
def controller(api_client, confirm_answers):
    def confirm(prompt):
        confirm_answers["prompts"].append(prompt)
        return confirm_answers["answer"]

    return NotesController(api_client, confirm=confirm, tz=timezone.utc)


@pytest.fixture
def bindings(controller):
    return EventBindings(controller)


@pytest_asyncio.fixture
async def failing_api():
    """API client whose every request fails at the network level."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with NotesApiClient(base_url=BASE_URL, transport=httpx.MockTransport(handler)) as client:
        yield client
