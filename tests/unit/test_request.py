"""Unit tests for the shared request helper."""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from googleapis_rest.exceptions import APIError
from googleapis_rest.utils.http import api_request, request

URL = "https://example.googleapis.com/v1/things/1"


@pytest.fixture
def credentials():
    client = MagicMock()
    client.get_request_headers = AsyncMock(
        return_value={"Authorization": "Bearer ya29.test-token"}
    )
    return client


@pytest.mark.asyncio
async def test_get_returns_parsed_json(mock_http, credentials):
    http = mock_http(json={"id": "1"})

    result = await request(URL, client=credentials)

    assert result == {"id": "1"}
    sent = http.last
    assert sent.method == "GET"
    assert str(sent.url) == URL
    assert sent.headers["Accept"] == "application/json"
    assert sent.headers["Authorization"] == "Bearer ya29.test-token"
    assert "Content-Type" not in sent.headers


@pytest.mark.asyncio
async def test_body_sent_as_json(mock_http):
    http = mock_http(json={})

    await request(URL, method="post", body=json.dumps({"a": "1"}))

    sent = http.last
    assert sent.method == "POST"
    assert sent.headers["Content-Type"] == "application/json"
    assert json.loads(sent.content) == {"a": "1"}
    assert "Authorization" not in sent.headers


@pytest.mark.asyncio
async def test_empty_body_returns_empty_dict(mock_http):
    mock_http(lambda r: httpx.Response(200, content=b""))

    assert await request(URL, method="DELETE") == {}


@pytest.mark.asyncio
async def test_error_envelope_raises_api_error(mock_http):
    envelope = {
        "error": {
            "code": 404,
            "message": "Advertiser not found.",
            "status": "NOT_FOUND",
        }
    }
    mock_http(lambda r: httpx.Response(404, json=envelope))

    with pytest.raises(APIError) as exc_info:
        await request(URL)

    error = exc_info.value
    assert error.status_code == 404
    assert error.status == "NOT_FOUND"
    assert error.message == "Advertiser not found."
    assert error.to_dict()["error"] == "API_ERROR"


@pytest.mark.asyncio
async def test_error_without_envelope_uses_text(mock_http):
    mock_http(lambda r: httpx.Response(400, text="bad things"))

    with pytest.raises(APIError) as exc_info:
        await request(URL)

    assert exc_info.value.message == "400 Bad Request: bad things"
    assert exc_info.value.response_body == "bad things"


@pytest.mark.asyncio
async def test_get_retried_on_unavailable(mock_http):
    responses = [httpx.Response(503), httpx.Response(200, json={"ok": True})]
    http = mock_http(lambda r: responses.pop(0))

    assert await request(URL) == {"ok": True}
    assert len(http.requests) == 2


@pytest.mark.asyncio
async def test_get_gives_up_after_max_attempts(mock_http, monkeypatch):
    monkeypatch.setenv("HTTP_MAX_ATTEMPTS", "2")
    http = mock_http(lambda r: httpx.Response(503))

    with pytest.raises(APIError) as exc_info:
        await request(URL)

    assert exc_info.value.status_code == 503
    assert len(http.requests) == 2


@pytest.mark.asyncio
async def test_post_not_retried(mock_http):
    http = mock_http(lambda r: httpx.Response(503))

    with pytest.raises(APIError):
        await request(URL, method="POST", body="{}")

    assert len(http.requests) == 1


@pytest.mark.asyncio
async def test_client_errors_not_retried(mock_http):
    http = mock_http(lambda r: httpx.Response(403, json={"error": {"message": "no"}}))

    with pytest.raises(APIError):
        await request(URL)

    assert len(http.requests) == 1


@pytest.mark.asyncio
async def test_transport_error_propagates(mock_http):
    def handler(r):
        raise httpx.ConnectError("refused", request=r)

    http = mock_http(handler)

    with pytest.raises(httpx.ConnectError):
        await request(URL)

    assert len(http.requests) == 3


@pytest.mark.asyncio
async def test_requests_share_one_open_client(mock_http):
    mock_http(json={})

    first = await api_request.get_http_client()
    await request(URL)
    await request(URL, method="POST", body={})

    assert await api_request.get_http_client() is first
    assert not first.is_closed
