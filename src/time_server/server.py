"""FastAPI app for the online deployment of the time tool.

Exposes the tool over plain HTTP (``/time``) plus the structured
``/tools`` envelope used by programmatic callers.
"""

from __future__ import annotations

import time
import uuid
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .errors import FormattingFailure
from .formatter import to_utc_iso, utc_now
from .logging import get_logger
from .schemas import TimeToolInput, ToolError, ToolMeta, ToolResponse
from .settings import get_settings
from .tools import get_current_time, get_tool_handler, get_tool_spec, list_tool_specs

logger = get_logger("time_server")

app = FastAPI(title="MCP Time Server", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.on_event("startup")
def log_startup_config() -> None:
    settings = get_settings()
    logger.info(
        "time_server_config",
        extra={
            "extra": {
                "default_timezone": settings.default_timezone,
                "default_format": settings.default_format,
                "locale": settings.locale,
                "iso_offset_aware": settings.iso_offset_aware,
                "port": settings.port,
            }
        },
    )


@app.exception_handler(404)
async def not_found(request: Request, exc: HTTPException) -> JSONResponse:
    if request.url.path.startswith("/tools/"):
        return JSONResponse(status_code=404, content={"detail": exc.detail})
    return JSONResponse(
        status_code=404,
        content={"success": False, "error": "Endpoint not found. Try /time or /health"},
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {
        "status": "healthy",
        "service": "MCP Time Server",
        "timestamp": to_utc_iso(utc_now()),
    }


@app.get("/")
@app.get("/time")
def current_time() -> dict[str, Any]:
    trace_id = str(uuid.uuid4())
    try:
        output = get_current_time(TimeToolInput(), get_settings(), trace_id)
    except FormattingFailure as exc:
        logger.info(
            "time_error",
            extra={"extra": {"trace_id": trace_id, "error": exc.message}},
        )
        # Failures use the same success/error shape as other failed
        # requests, not a success payload with error-flagged content.
        return {"success": False, "error": exc.message}
    return {
        "success": True,
        "data": {"content": [{"type": "text", "text": output.text}]},
        "timestamp": to_utc_iso(utc_now()),
    }


@app.get("/tools")
def list_tools() -> list[dict[str, Any]]:
    return [
        {
            "name": spec.name,
            "description": spec.description,
            "input_schema": spec.input_schema(),
            "output_schema": spec.output_model.model_json_schema(),
        }
        for spec in list_tool_specs()
    ]


@app.post("/tools/{tool_name}")
async def call_tool(tool_name: str, request: Request) -> ToolResponse:
    # Every tool call gets a trace_id for end-to-end debugging.
    trace_id = request.headers.get("x-trace-id") or str(uuid.uuid4())
    start = time.time()
    settings = get_settings()

    spec = get_tool_spec(tool_name)
    handler = get_tool_handler(tool_name)
    if not spec or not handler:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_name}")

    try:
        payload = await request.json()
        input_obj = spec.input_model.model_validate(payload)
        result = handler(input_obj, settings, trace_id)
    except ValidationError as exc:
        error = ToolError(code="INVALID_ARGUMENT", message=str(exc))
    except FormattingFailure as exc:
        error = ToolError(code=exc.code, message=exc.message)
    except Exception as exc:  # noqa: BLE001
        error = ToolError(code="TOOL_ERROR", message=str(exc))
    else:
        latency_ms = int((time.time() - start) * 1000)
        logger.info(
            "tool_call",
            extra={
                "extra": {
                    "trace_id": trace_id,
                    "tool": tool_name,
                    "latency_ms": latency_ms,
                    "ok": True,
                }
            },
        )
        return ToolResponse(
            ok=True,
            data=result.model_dump(mode="json"),
            error=None,
            meta=ToolMeta(tool_name=tool_name, trace_id=trace_id, latency_ms=latency_ms),
        )

    latency_ms = int((time.time() - start) * 1000)
    logger.info(
        "tool_error",
        extra={
            "extra": {
                "trace_id": trace_id,
                "tool": tool_name,
                "latency_ms": latency_ms,
                "ok": False,
                "error_code": error.code,
            }
        },
    )
    return ToolResponse(
        ok=False,
        data=None,
        error=error,
        meta=ToolMeta(tool_name=tool_name, trace_id=trace_id, latency_ms=latency_ms),
    )
