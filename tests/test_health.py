"""
Health check route tests
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest


@pytest.mark.asyncio
async def test_health_reports_connected_store(api_client):
    db = MagicMock()
    db.command = AsyncMock(return_value={"ok": 1.0})

    with patch("blog_api.api.routes.health.get_database", return_value=db):
        response = await api_client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    db.command.assert_awaited_once_with("ping")


@pytest.mark.asyncio
async def test_health_fails_without_store(api_client):
    with patch("blog_api.api.routes.health.get_database", return_value=None):
        response = await api_client.get("/")

    assert response.status_code == 503
    assert "Database not initialized" in response.json()["message"]
