import asyncio

from fastapi.testclient import TestClient

from time_server import stdio
from time_server.server import app
from time_server.tools import list_tool_specs


def test_tool_registry_matches_transports():
    tool_names = {spec.name for spec in list_tool_specs()}
    stdio_names = {tool.name for tool in asyncio.run(stdio.list_tools())}
    http_names = {tool["name"] for tool in TestClient(app).get("/tools").json()}
    assert tool_names == stdio_names == http_names == {"get_current_time"}


def test_input_schema_advertises_formats_and_defaults():
    (tool,) = asyncio.run(stdio.list_tools())
    properties = tool.inputSchema["properties"]
    assert properties["format"]["enum"] == ["iso", "locale", "timestamp"]
    assert properties["format"]["default"] == "locale"
    assert properties["timezone"]["default"] == "America/Argentina/Buenos_Aires"
    assert not tool.inputSchema.get("required")
