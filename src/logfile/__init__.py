"""logfile package

Group and color console log messages under a prefix, with timestamps and emoji
markers, and optionally mirror them (ANSI-stripped) into a daily log file.

Public entry points kept minimal. Most users construct a `Logger`; the
`logfile` CLI wraps it for shell use.
"""
from .logger import Logger  # re-export core class
from .schemas import LoggerConfig

__all__ = [
    "Logger",
    "LoggerConfig",
]
