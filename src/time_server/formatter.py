"""Timezone-aware current-time formatting.

``TimeFormatter.format`` never raises: resolution and rendering problems are
folded into an error-flagged ``TimeResult``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable
from zoneinfo import ZoneInfo

from babel.dates import format_datetime, get_timezone_gmt

from .errors import FormattingFailure
from .schemas import TimeFormat, TimeRequest, TimeResult

Clock = Callable[[], datetime]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# CLDR patterns, rendered in the configured locale. The zone suffix is
# appended separately in localized GMT form ("GMT-03:00").
LONG_PATTERN = "EEEE, d 'de' MMMM 'de' y, hh:mm:ss a"
NUMERIC_PATTERN = "dd/MM/y, HH:mm:ss"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def is_utc(tz_name: str) -> bool:
    return tz_name.upper() == "UTC"


def resolve_timezone(tz_name: str) -> tzinfo:
    if is_utc(tz_name):
        return ZoneInfo("UTC")
    return ZoneInfo(tz_name)


def to_utc_iso(value: datetime) -> str:
    """Render ``value`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Naive values are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


def location_label(tz_name: str) -> str:
    """Human label for a timezone id, e.g. ``America/New_York`` -> ``New York``."""
    if "Argentina" in tz_name:
        return "Argentina"
    return tz_name.replace("_", " ").split("/")[-1]


def describe(label: str, text: str) -> str:
    return f"Current time in {label}: {text}"


class TimeFormatter:
    """Renders the current instant for a timezone in one of the ``TimeFormat`` shapes.

    With ``iso_offset_aware`` off, ``iso`` output for non-UTC zones keeps the
    long-standing behaviour of the service: the target zone's wall-clock
    fields are stamped with ``Z`` as if they were UTC, and sub-second digits
    are dropped. Turning it on yields a real offset-aware ISO-8601 string.
    """

    def __init__(
        self,
        locale: str = "es_AR",
        iso_offset_aware: bool = False,
        clock: Clock | None = None,
    ) -> None:
        self._locale = locale
        self._iso_offset_aware = iso_offset_aware
        self._clock = clock or utc_now

    def format(self, request: TimeRequest) -> TimeResult:
        try:
            text = self._render(request.format, request.timezone, self._clock())
        except FormattingFailure as exc:
            return TimeResult(text=f"Error getting time: {exc.message}", is_error=True)
        return TimeResult(text=text)

    def _render(self, fmt: TimeFormat, tz_name: str, now: datetime) -> str:
        if fmt is TimeFormat.TIMESTAMP:
            return str((now - _EPOCH) // timedelta(milliseconds=1))

        try:
            tz = resolve_timezone(tz_name)
            if fmt is TimeFormat.ISO:
                return self._iso(now, tz, tz_name)
            pattern = LONG_PATTERN if fmt is TimeFormat.LOCALE else NUMERIC_PATTERN
            return self._localized(now, tz, pattern)
        except Exception as exc:  # noqa: BLE001
            raise FormattingFailure(_reason(exc)) from exc

    def _localized(self, now: datetime, tz: tzinfo, pattern: str) -> str:
        local = now.astimezone(tz)
        text = format_datetime(local, pattern, tzinfo=tz, locale=self._locale)
        zone = get_timezone_gmt(local, width="long", locale=self._locale)
        return f"{text} {zone}"

    def _iso(self, now: datetime, tz: tzinfo, tz_name: str) -> str:
        if is_utc(tz_name):
            return to_utc_iso(now)
        local = now.astimezone(tz)
        if self._iso_offset_aware:
            return local.isoformat(timespec="milliseconds")
        # Known defect kept for parity: local wall clock labelled as UTC.
        return to_utc_iso(local.replace(microsecond=0, tzinfo=None))


def _reason(exc: Exception) -> str:
    # KeyError subclasses (ZoneInfoNotFoundError) quote their str().
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc) or exc.__class__.__name__
