"""Current time tool (no external dependency)."""

from __future__ import annotations

from ..errors import FormattingFailure
from ..formatter import TimeFormatter, describe, location_label
from ..schemas import TimeFormat, TimeRequest, TimeToolInput, TimeToolOutput
from ..settings import TimeServerSettings


def get_current_time(payload: TimeToolInput, settings: TimeServerSettings, _trace_id: str) -> TimeToolOutput:
    # Caller-omitted arguments fall back to the configured defaults here,
    # never inside the formatter. Only absent values take the default; an
    # empty string is passed through as caller input.
    tz_name = payload.timezone if payload.timezone is not None else settings.default_timezone
    fmt = TimeFormat.parse(payload.format if payload.format is not None else settings.default_format)

    formatter = TimeFormatter(locale=settings.locale, iso_offset_aware=settings.iso_offset_aware)
    result = formatter.format(TimeRequest(format=fmt, timezone=tz_name))
    if result.is_error:
        raise FormattingFailure(result.text)

    label = location_label(tz_name)
    return TimeToolOutput(
        text=describe(label, result.text),
        location=label,
        timezone=tz_name,
        format=fmt,
    )
