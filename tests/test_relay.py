import asyncio

import httpx
import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from time_relay import server as relay_server
from time_relay.adapter import fetch_time_text
from time_server.errors import AdapterError

URL = "https://time.example.test/time"


def _transport(handler):
    return httpx.MockTransport(handler)


def _fetch(handler):
    return fetch_time_text(url=URL, timeout_s=1.0, transport=_transport(handler))


def test_fetch_relays_text_verbatim():
    text = "Current time in Argentina: sábado, 17 de octubre de 2026"

    def handler(request):
        assert str(request.url) == URL
        return httpx.Response(
            200, json={"success": True, "data": {"content": [{"type": "text", "text": text}]}}
        )

    assert _fetch(handler) == text


@pytest.mark.parametrize(
    "payload",
    [
        {"success": False, "error": "boom"},
        {"success": True, "data": {"content": []}},
        {"success": True},
        ["not", "a", "dict"],
    ],
)
def test_fetch_rejects_unexpected_shape(payload):
    with pytest.raises(AdapterError) as excinfo:
        _fetch(lambda request: httpx.Response(200, json=payload))
    assert excinfo.value.code == "TIME_INVALID_SHAPE"
    assert excinfo.value.message == "Invalid response format from time server"


def test_fetch_rejects_non_json():
    with pytest.raises(AdapterError) as excinfo:
        _fetch(lambda request: httpx.Response(200, text="<html>oops</html>"))
    assert excinfo.value.code == "TIME_BAD_RESPONSE"


def test_fetch_upstream_5xx():
    with pytest.raises(AdapterError) as excinfo:
        _fetch(lambda request: httpx.Response(503, text="down"))
    assert excinfo.value.code == "TIME_UPSTREAM_5XX"
    assert excinfo.value.details == {"status_code": 503}


def test_fetch_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AdapterError) as excinfo:
        _fetch(handler)
    assert excinfo.value.code == "TIME_UNAVAILABLE"
    assert "connection refused" in excinfo.value.message


def test_relay_tool_success(monkeypatch):
    monkeypatch.setattr(relay_server, "fetch_time_text", lambda **kwargs: "Current time in Argentina: x")
    (content,) = asyncio.run(relay_server.call_tool("get_argentina_time", {}))
    assert content.text == "Current time in Argentina: x"


def test_relay_tool_error(monkeypatch):
    def failing(**kwargs):
        raise AdapterError("TIME_UNAVAILABLE", "connection refused")

    monkeypatch.setattr(relay_server, "fetch_time_text", failing)
    with pytest.raises(relay_server.RelayError, match="Error getting Argentina time: connection refused"):
        asyncio.run(relay_server.call_tool("get_argentina_time", {}))


def test_relay_lists_single_tool():
    (tool,) = asyncio.run(relay_server.list_tools())
    assert tool.name == "get_argentina_time"
    assert tool.inputSchema == {"type": "object", "properties": {}}


def test_relay_unknown_tool():
    with pytest.raises(ValueError, match="Unknown tool"):
        asyncio.run(relay_server.call_tool("get_current_time", {}))


def test_relay_session_flags_fetch_failure_as_error(monkeypatch):
    def failing(**kwargs):
        raise AdapterError("TIME_UNAVAILABLE", "connection refused")

    monkeypatch.setattr(relay_server, "fetch_time_text", failing)

    async def call():
        async with create_connected_server_and_client_session(relay_server.server) as session:
            return await session.call_tool("get_argentina_time", {})

    result = asyncio.run(call())
    assert result.isError is True
    (content,) = result.content
    assert "Error getting Argentina time: connection refused" in content.text
