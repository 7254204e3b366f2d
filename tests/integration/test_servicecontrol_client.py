"""End-to-end tests of the Service Control client over a mock transport."""

import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from googleapis_rest import ServiceControl
from googleapis_rest.auth import ProviderConfig
from googleapis_rest.auth.providers import AccessTokenProvider
from googleapis_rest.exceptions import APIError
from googleapis_rest.models.servicecontrol import (
    AttributeContext,
    CheckRequest,
    CheckResponse,
    Peer,
    ReportRequest,
    ReportResponse,
    Request,
    Response,
)

BASE = "https://servicecontrol.googleapis.com/"
SERVICE = "pubsub.googleapis.com"


@pytest.fixture
def service_control():
    return ServiceControl(AccessTokenProvider(ProviderConfig(access_token="ya29.sc")))


def test_default_base_url():
    assert ServiceControl().base_url == BASE
    assert ServiceControl(base_url="https://sc.example").base_url == "https://sc.example/"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_check(mock_http, service_control):
    http = mock_http(
        json={"status": {"code": 7, "message": "Permission denied"}, "headers": {"x": "y"}}
    )
    req = CheckRequest(
        service_config_id="2023-05-01r0",
        attributes=AttributeContext(
            origin=Peer(ip="10.0.0.1", port=8443),
            request=Request(
                method="GET",
                size=512,
                time=datetime(2023, 5, 1, 12, tzinfo=timezone.utc),
            ),
        ),
    )

    result = await service_control.services_check(SERVICE, req)

    sent = http.last
    assert sent.method == "POST"
    assert str(sent.url) == f"{BASE}v2/services/{SERVICE}:check"
    assert sent.headers["Authorization"] == "Bearer ya29.sc"
    assert json.loads(sent.content) == {
        "serviceConfigId": "2023-05-01r0",
        "attributes": {
            "origin": {"ip": "10.0.0.1", "port": "8443"},
            "request": {
                "method": "GET",
                "size": "512",
                "time": "2023-05-01T12:00:00.000Z",
            },
        },
    }
    assert isinstance(result, CheckResponse)
    assert result.status.code == 7
    assert result.headers == {"x": "y"}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_report(mock_http, service_control):
    http = mock_http(json={})
    req = {
        "operations": [
            {
                "response": {
                    "code": "200",
                    "size": "1024",
                    "backendLatency": "0.250s",
                }
            }
        ]
    }

    result = await service_control.services_report(SERVICE, req)

    sent = http.last
    assert sent.method == "POST"
    assert str(sent.url) == f"{BASE}v2/services/{SERVICE}:report"
    assert json.loads(sent.content) == req
    assert isinstance(result, ReportResponse)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_report_model_body(mock_http, service_control):
    http = mock_http(json={})
    req = ReportRequest(
        operations=[
            AttributeContext(
                response=Response(code=503, backend_latency=timedelta(seconds=2))
            )
        ]
    )

    await service_control.services_report(SERVICE, req)

    assert json.loads(http.last.content) == {
        "operations": [{"response": {"code": "503", "backendLatency": "2s"}}]
    }


@pytest.mark.integration
@pytest.mark.asyncio
async def test_check_not_retried_on_server_error(mock_http, service_control):
    http = mock_http(lambda r: httpx.Response(503, json={"error": {"message": "down"}}))

    with pytest.raises(APIError) as exc_info:
        await service_control.services_check(SERVICE, CheckRequest())

    assert exc_info.value.message == "down"
    assert len(http.requests) == 1
