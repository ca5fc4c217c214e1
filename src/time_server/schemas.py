"""Shared tool schemas (single source of truth).

The HTTP app, the stdio server and the relay all import these models to
avoid drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_TIMEZONE = "America/Argentina/Buenos_Aires"
ADVERTISED_FORMATS = ("iso", "locale", "timestamp")


class TimeFormat(str, Enum):
    """Output representations understood by the formatter."""

    ISO = "iso"
    LOCALE = "locale"
    TIMESTAMP = "timestamp"
    # Numeric fallback for anything unrecognized.
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: str | None) -> "TimeFormat":
        if value is None:
            return cls.LOCALE
        try:
            return cls(value)
        except ValueError:
            return cls.DEFAULT


class TimeRequest(BaseModel):
    """A single formatting request."""
    format: TimeFormat = TimeFormat.LOCALE
    timezone: str


class TimeResult(BaseModel):
    """Formatter outcome; errors are carried here instead of raised."""
    text: str
    is_error: bool = False


class ToolError(BaseModel):
    """Normalized error payload returned by tools."""
    code: str
    message: str
    details: dict[str, Any] | None = None


class ToolMeta(BaseModel):
    """Metadata attached to tool responses for observability."""
    tool_name: str
    trace_id: str
    latency_ms: int | None = None
    source: str | None = None


class ToolResponse(BaseModel):
    """Unified response wrapper for all tools."""
    ok: bool
    data: Any | None = None
    error: ToolError | None = None
    meta: ToolMeta


def _optional_string(**extra: Any):
    # Advertise a plain string property instead of the anyOf[string, null] pydantic emits.
    def update(schema: dict[str, Any]) -> None:
        schema.pop("anyOf", None)
        schema["type"] = "string"
        schema.update(extra)

    return update


class TimeToolInput(BaseModel):
    """Input for the get_current_time tool.

    Both fields are optional; the transport fills in configured defaults.
    """
    format: str | None = Field(
        default=None,
        description="Time format preference (iso, locale, or timestamp)",
        json_schema_extra=_optional_string(enum=list(ADVERTISED_FORMATS), default="locale"),
    )
    timezone: str | None = Field(
        default=None,
        description=(
            "Timezone (e.g., America/Argentina/Buenos_Aires, America/New_York, "
            "Europe/London, UTC)"
        ),
        json_schema_extra=_optional_string(default=DEFAULT_TIMEZONE),
    )


class TimeToolOutput(BaseModel):
    """Output for the get_current_time tool."""
    text: str
    location: str
    timezone: str
    format: TimeFormat


@dataclass(frozen=True)
class ToolSpec:
    """Tool registry metadata shared by the HTTP and stdio transports."""
    name: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()
