"""Stdio tool server that relays the time reported by the online deployment."""

from __future__ import annotations

from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from time_server.errors import AdapterError
from time_server.logging import get_logger

from .adapter import fetch_time_text
from .settings import get_settings

logger = get_logger("relay")

TOOL_NAME = "get_argentina_time"

server = Server("argentina-time-client", version="0.1.0")


class RelayError(RuntimeError):
    pass


@server.list_tools()
async def list_tools() -> list[Tool]:
    return [
        Tool(
            name=TOOL_NAME,
            description="Get the current time in Argentina",
            inputSchema={"type": "object", "properties": {}},
        )
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    if name != TOOL_NAME:
        raise ValueError(f"Unknown tool: {name}")

    settings = get_settings()
    try:
        text = fetch_time_text(url=settings.time_url, timeout_s=settings.request_timeout_s)
    except AdapterError as exc:
        logger.info("relay_error", extra={"extra": {"error_code": exc.code, "error": exc.message}})
        raise RelayError(f"Error getting Argentina time: {exc.message}") from exc
    return [TextContent(type="text", text=text)]


async def run() -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Argentina Time MCP client running")
        await server.run(read_stream, write_stream, server.create_initialization_options())
