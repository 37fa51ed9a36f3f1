"""Tests for the GET /health liveness probe."""

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

from quicknotes.main import create_app


@pytest.mark.asyncio
async def test_health_ok(test_client):
    response = await test_client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


@pytest.mark.asyncio
async def test_health_does_not_touch_store(empty_store):
    app = create_app(empty_store)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")
    assert response.status_code == 200
    assert len(empty_store) == 0
    assert empty_store.next_id == 1


@pytest.mark.asyncio
async def test_client_reads_health(api_client):
    body = await api_client.get_health()
    assert body["status"] == "OK"
    assert "timestamp" in body
