from __future__ import annotations

from .paths import log_file_name, log_file_path
from .timefmt import clock_time, format_elapsed, today_stamp

__all__ = [
    "log_file_name",
    "log_file_path",
    "clock_time",
    "format_elapsed",
    "today_stamp",
]
