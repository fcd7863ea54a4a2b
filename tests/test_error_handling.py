"""
Error handling tests: JSON error bodies, trace IDs and log sanitization
"""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient, ASGITransport

from blog_api.app import app
from blog_api.services.base_service import ServiceResult
from blog_api.services.posts_service import BlogPostsService
from blog_api.utils.error_handling import ErrorHandlingConfig


def test_sanitize_redacts_sensitive_fields():
    data = {
        "title": "hello",
        "password": "hunter2",
        "nested": {"api_key": "abc", "content": "ok"},
        "items": [{"token": "t"}]
    }

    sanitized = ErrorHandlingConfig.sanitize_data(data)

    assert sanitized["title"] == "hello"
    assert sanitized["password"] == "***REDACTED***"
    assert sanitized["nested"] == {"api_key": "***REDACTED***", "content": "ok"}
    assert sanitized["items"] == [{"token": "***REDACTED***"}]


def test_sanitize_truncates_long_strings():
    sanitized = ErrorHandlingConfig.sanitize_data("x" * (ErrorHandlingConfig.MAX_BODY_LOG_SIZE + 10))

    assert sanitized.endswith("...[TRUNCATED]")
    assert len(sanitized) == ErrorHandlingConfig.MAX_BODY_LOG_SIZE + len("...[TRUNCATED]")


@pytest.mark.asyncio
async def test_responses_carry_trace_id(api_client):
    response = await api_client.get("/posts")

    assert response.status_code == 200
    assert len(response.headers["X-Trace-ID"]) == 8


@pytest.mark.asyncio
async def test_unknown_route_returns_json_404(api_client):
    response = await api_client.get("/authors")

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "HTTP 404"
    assert body["trace_id"] == response.headers["X-Trace-ID"]
    assert "timestamp" in body


@pytest.mark.asyncio
async def test_validation_error_body(api_client):
    response = await api_client.post("/posts", json={"title": "only a title"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation Error"
    assert body["error_count"] == len(body["detail"]) == 2
    fields = {detail["field"] for detail in body["detail"]}
    assert fields == {"body -> author", "body -> content"}


@pytest.mark.asyncio
async def test_store_failure_surfaces_as_server_error(api_client):
    failure = ServiceResult(success=False, error="Database operation failed", error_type="DATABASE_ERROR")

    with patch.object(BlogPostsService, "find_all", AsyncMock(return_value=failure)):
        response = await api_client.get("/posts")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "HTTP 500"
    assert body["message"] == "Database operation failed"


@pytest.mark.asyncio
async def test_unhandled_exception_returns_safe_500(database):
    transport = ASGITransport(app=app, raise_app_exceptions=False)

    with patch.object(BlogPostsService, "find_all", AsyncMock(side_effect=KeyError("secret-internal-detail"))):
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/posts")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Internal Server Error"
    assert body["message"] == "An unexpected error occurred"
    assert "secret-internal-detail" not in response.text
    assert "X-Trace-ID" in response.headers
    assert body["trace_id"] == response.headers["X-Trace-ID"]
