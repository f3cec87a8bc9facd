from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE

# "2024. 12. 24. 오후 3:04:05" (ko-KR locale) or "2024-12-24 15:04:05"
_KO_TIMESTAMP = re.compile(
    r"^\s*(\d{4})\.\s*(\d{1,2})\.\s*(\d{1,2})\.?"
    r"(?:\s+(오전|오후|AM|PM)?\s*(\d{1,2}):(\d{2})(?::(\d{2}))?)?",
    re.IGNORECASE,
)
_ISO_TIMESTAMP = re.compile(
    r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})(?:[ T](\d{1,2}):(\d{2})(?::(\d{2}))?)?"
)


def now_local(tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Current time in the school timezone.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(ZoneInfo(tz_name))


def format_sheet_timestamp(moment: datetime) -> str:
    """Format like `toLocaleString('ko-KR')`: '2024. 12. 24. 오후 3:04:05'."""
    meridiem = "오전" if moment.hour < 12 else "오후"
    hour12 = moment.hour % 12 or 12
    return (
        f"{format_sheet_date(moment.date())} {meridiem} "
        f"{hour12}:{moment.minute:02d}:{moment.second:02d}"
    )


def format_sheet_date(day: date) -> str:
    return f"{day.year}. {day.month}. {day.day}."


def parse_sheet_timestamp(value: str) -> Optional[datetime]:
    """Parse a timestamp cell written by this app, by hand, or re-rendered by Sheets.

    Returns None when the cell does not start with a recognizable date.
    """
    if not value:
        return None

    m = _KO_TIMESTAMP.match(value)
    if m:
        year, month, day, meridiem, hour, minute, second = m.groups()
        hour_i = int(hour) if hour else 0
        if meridiem and meridiem.upper() in {"오후", "PM"} and hour_i < 12:
            hour_i += 12
        elif meridiem and meridiem.upper() in {"오전", "AM"} and hour_i == 12:
            hour_i = 0
        return _build(year, month, day, hour_i, minute, second)

    m = _ISO_TIMESTAMP.match(value)
    if m:
        year, month, day, hour, minute, second = m.groups()
        return _build(year, month, day, int(hour) if hour else 0, minute, second)

    return None


def parse_sheet_date(value: str) -> Optional[date]:
    parsed = parse_sheet_timestamp(value)
    return parsed.date() if parsed else None


def is_same_day(value: str, day: date) -> bool:
    """True when the timestamp cell falls on `day`."""
    parsed = parse_sheet_date(value)
    if parsed is not None:
        return parsed == day
    return value.startswith(format_sheet_date(day))


def clock_label(value: str) -> str:
    """'HH:MM' of a timestamp cell, or '' when it cannot be parsed."""
    parsed = parse_sheet_timestamp(value)
    return parsed.strftime("%H:%M") if parsed else ""


def _build(year, month, day, hour: int, minute, second) -> Optional[datetime]:
    try:
        return datetime(int(year), int(month), int(day), hour, int(minute or 0), int(second or 0))
    except ValueError:
        return None
