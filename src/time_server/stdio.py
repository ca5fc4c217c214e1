"""Stdio tool server for local MCP clients."""

from __future__ import annotations

import uuid
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .logging import get_logger
from .settings import get_settings
from .tools import get_tool_handler, get_tool_spec, list_tool_specs

logger = get_logger("stdio")

server = Server("time-server", version="0.1.0")


@server.list_tools()
async def list_tools() -> list[Tool]:
    return [
        Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema())
        for spec in list_tool_specs()
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    """Run a registered tool.

    Errors propagate so the SDK answers with an ``isError`` result carrying
    the message text.
    """
    spec = get_tool_spec(name)
    handler = get_tool_handler(name)
    if not spec or not handler:
        raise ValueError(f"Unknown tool: {name}")

    trace_id = str(uuid.uuid4())
    input_obj = spec.input_model.model_validate(arguments or {})
    output = handler(input_obj, get_settings(), trace_id)
    logger.info("tool_call", extra={"extra": {"trace_id": trace_id, "tool": name}})
    return [TextContent(type="text", text=output.text)]


async def run() -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Time MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
