"""Remote time endpoint adapter.

Encapsulates the upstream HTTP call and normalizes every failure into
``AdapterError``.
"""

from __future__ import annotations

import time

import httpx

from time_server.errors import AdapterError
from time_server.logging import get_logger

logger = get_logger("relay_adapter")


def _extract_text(data: object) -> str:
    # Expected: {"success": true, "data": {"content": [{"text": ...}]}}
    try:
        if data["success"]:
            text = data["data"]["content"][0]["text"]
            if isinstance(text, str):
                return text
    except (KeyError, IndexError, TypeError):
        pass
    raise AdapterError("TIME_INVALID_SHAPE", "Invalid response format from time server")


def fetch_time_text(
    *,
    url: str,
    timeout_s: float,
    transport: httpx.BaseTransport | None = None,
) -> str:
    start = time.time()
    try:
        with httpx.Client(timeout=timeout_s, transport=transport) as client:
            resp = client.get(url)
    except httpx.RequestError as exc:
        logger.info(
            "time_fetch_failed",
            extra={"extra": {"url": url, "error": str(exc)}},
        )
        raise AdapterError("TIME_UNAVAILABLE", str(exc) or exc.__class__.__name__, {"url": url}) from exc

    latency_ms = int((time.time() - start) * 1000)
    if resp.status_code >= 500:
        raise AdapterError(
            "TIME_UPSTREAM_5XX",
            f"Time server error: {resp.status_code}",
            {"status_code": resp.status_code},
        )

    try:
        data = resp.json()
    except ValueError as exc:
        raise AdapterError("TIME_BAD_RESPONSE", str(exc), {"status_code": resp.status_code}) from exc

    logger.info(
        "time_fetch",
        extra={"extra": {"url": url, "latency_ms": latency_ms, "status_code": resp.status_code}},
    )
    return _extract_text(data)
