import json
import logging

from time_server import main as entry
from time_server import stdio
from time_server.logging import JsonFormatter
from time_server.settings import get_settings


def test_stdio_is_default(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("MCP_TIME_HTTP_MODE", raising=False)
    get_settings.cache_clear()
    called = []

    async def fake_run():
        called.append("stdio")

    monkeypatch.setattr(stdio, "run", fake_run)
    monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: called.append("http"))
    entry.main([])
    get_settings.cache_clear()
    assert called == ["stdio"]


def test_http_when_port_set(monkeypatch):
    monkeypatch.setenv("PORT", "4321")
    get_settings.cache_clear()
    captured = {}

    def fake_uvicorn_run(app, **kwargs):
        captured["app"] = app
        captured.update(kwargs)

    monkeypatch.setattr("uvicorn.run", fake_uvicorn_run)
    entry.main([])
    get_settings.cache_clear()
    assert captured["app"] == "time_server.server:app"
    assert captured["port"] == 4321


def test_http_flag_overrides(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    get_settings.cache_clear()
    captured = {}
    monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: captured.update(kwargs))
    entry.main(["--http", "--host", "127.0.0.1", "--port", "9000"])
    get_settings.cache_clear()
    assert captured["host"] == "127.0.0.1"
    assert captured["port"] == 9000


def test_json_formatter_merges_extra_fields():
    record = logging.LogRecord("mcp_time.test", logging.INFO, __file__, 1, "tool_call", None, None)
    record.extra = {"trace_id": "abc", "ok": True}
    payload = json.loads(JsonFormatter().format(record))
    assert payload["event"] == "tool_call"
    assert payload["trace_id"] == "abc"
    assert payload["ok"] is True
