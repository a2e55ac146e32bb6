"""SharedHttpClient 오류 변환 테스트 (세션은 Fake로 교체)."""

from __future__ import annotations

import asyncio

import pytest
from curl_cffi.requests.exceptions import ConnectionError as CurlConnectionError
from curl_cffi.requests.exceptions import Timeout as CurlTimeout

from vintage_finder.core.exceptions import NetworkTimeoutException, UpstreamRequestError
from vintage_finder.marketplace.http_client import SharedHttpClient


class FakeResponse:
    def __init__(self, status_code, text):
        self.status_code = status_code
        self.text = text


class FakeSession:
    def __init__(self, result):
        self.result = result
        self.calls = []
        self.closed = False

    async def _respond(self, method, url, kwargs):
        self.calls.append((method, url, kwargs))
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result

    async def get(self, url, **kwargs):
        return await self._respond("GET", url, kwargs)

    async def post(self, url, **kwargs):
        return await self._respond("POST", url, kwargs)

    async def close(self):
        self.closed = True


class SlowTimeoutName(Exception):
    """이름에 timeout이 들어가도 타임아웃으로 취급하지 않아야 함"""


def _client_with(result) -> tuple[SharedHttpClient, FakeSession]:
    client = SharedHttpClient()
    session = FakeSession(result)
    client._session = session
    return client, session


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [CurlTimeout("Operation timed out"), asyncio.TimeoutError()])
async def test_timeouts_become_network_timeout(error):
    client, _ = _client_with(error)

    with pytest.raises(NetworkTimeoutException) as exc_info:
        await client.get("https://api.ebay.com/x", timeout_s=1.5)

    assert exc_info.value.error_code == "NETWORK_TIMEOUT"
    assert exc_info.value.details["timeout_s"] == 1.5


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [CurlConnectionError("Could not resolve host"), SlowTimeoutName("boom")])
async def test_other_transport_errors_become_request_error(error):
    client, _ = _client_with(error)

    with pytest.raises(UpstreamRequestError) as exc_info:
        await client.post_form("https://api.ebay.com/token", data={"a": "b"}, timeout_s=1.0)

    assert exc_info.value.error_code == "UPSTREAM_REQUEST_ERROR"
    assert type(error).__name__ in exc_info.value.message


@pytest.mark.asyncio
async def test_post_form_sets_content_type_and_wraps_response():
    client, session = _client_with(FakeResponse(201, '{"ok": true}'))

    response = await client.post_form(
        "https://api.ebay.com/token",
        data={"grant_type": "client_credentials"},
        headers={"Authorization": "Basic abc"},
        timeout_s=2.0,
    )

    assert response.ok
    assert response.json() == {"ok": True}
    method, _, kwargs = session.calls[0]
    assert method == "POST"
    assert kwargs["headers"]["Content-Type"] == "application/x-www-form-urlencoded"
    assert kwargs["headers"]["Authorization"] == "Basic abc"
    assert kwargs["timeout"] == 2.0


@pytest.mark.asyncio
async def test_close_releases_session():
    client, session = _client_with(FakeResponse(200, ""))

    await client.close()

    assert session.closed
    assert client._session is None
