from __future__ import annotations

from datetime import datetime
from typing import NamedTuple, Optional

__all__ = [
    "Duration",
    "clock_time",
    "today_stamp",
    "split_duration",
    "format_breakdown",
    "format_elapsed",
]

STAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Duration(NamedTuple):
    days: int
    hours: int
    minutes: int
    seconds: int


def clock_time(moment: Optional[datetime] = None) -> str:
    """Local wall-clock time as HH:MM:SS."""
    return (moment or datetime.now()).strftime("%H:%M:%S")


def today_stamp(moment: Optional[datetime] = None) -> str:
    """Local calendar date as YYYY-MM-DD."""
    return (moment or datetime.now()).strftime("%Y-%m-%d")


def split_duration(total_seconds: int) -> Duration:
    """Break whole seconds into days/hours/minutes/seconds."""
    rest = max(0, int(total_seconds))
    days, rest = divmod(rest, 24 * 60 * 60)
    hours, rest = divmod(rest, 60 * 60)
    minutes, seconds = divmod(rest, 60)
    return Duration(days, hours, minutes, seconds)


def format_breakdown(d: Duration) -> str:
    """Human readable breakdown, e.g. ``1 Hours 5 Minutes 3 Seconds``.

    Zero days/hours/minutes are left out. Seconds are shown when both hours
    and minutes are zero, or when at least one second remains, so a zero
    duration still reads ``0 Seconds`` while ``2 Minutes`` drops ``0 Seconds``.
    """
    parts = []
    if d.days >= 1:
        parts.append(f"{d.days} Days")
    if d.hours >= 1:
        parts.append(f"{d.hours} Hours")
    if d.minutes >= 1:
        parts.append(f"{d.minutes} Minutes")
    if (d.hours == 0 and d.minutes == 0) or d.seconds >= 1:
        parts.append(f"{d.seconds} Seconds")
    return " ".join(parts)


def format_elapsed(start: datetime, end: datetime) -> str:
    """Multi-line report of the start, end and elapsed time between them."""
    # Half-seconds round up
    total = int((end - start).total_seconds() + 0.5)
    text = f"\n\t  Start Time:   {start.strftime(STAMP_FORMAT)}"
    text += f"\n\t    End Time:   {end.strftime(STAMP_FORMAT)}"
    text += f"\n\tTime Elapsed:   {format_breakdown(split_duration(total))}"
    return text
