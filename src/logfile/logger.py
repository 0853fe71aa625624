"""Styled console logger with an optional daily log file.

Usage:
    from logfile import Logger
    log = Logger("worker", {"log_file": True})
    log.log("started", 3, "jobs")
    log.warn("slow response")
"""

from __future__ import annotations

import copy
import os
import sys
from datetime import datetime
from typing import Any, Mapping, Optional, TextIO, Union

from .colors import RESET, STYLES, resolve_color, strip_ansi
from .logging import get_logger
from .schemas import LoggerConfig
from .utils.paths import log_file_path
from .utils.timefmt import clock_time, format_elapsed, today_stamp
from .writer import LineWriter, ensure_dir

logger = get_logger(__name__)

WARN_EMOJI = "🟡"
ERROR_EMOJI = "🟥"

ConfigLike = Union[LoggerConfig, Mapping[str, Any], None]


def _as_config(config: ConfigLike) -> LoggerConfig:
    if config is None:
        return LoggerConfig()
    if isinstance(config, LoggerConfig):
        return config
    # None means "use the default", never an invalid value
    return LoggerConfig(**{k: v for k, v in config.items() if v is not None})


class Logger:
    """Group and color console messages under a prefix, optionally mirrored to a file.

    Configuration lives in plain public attributes (``enabled``,
    ``use_timestamp``, ``log_file``, ``prefix``, ``emoji``, ``log_dir``) that
    can be changed between calls.
    """

    def __init__(self, prefix: str = "", config: ConfigLike = None) -> None:
        cfg = _as_config(config)
        self._start_time = datetime.now()
        self.prefix = prefix or ""
        self.enabled = cfg.enabled
        self.prefix_color = ""
        self.log_color = ""
        self.time_color = ""
        self.set_prefix_color(cfg.prefix_color)
        self.set_log_color(cfg.color)
        self.set_timestamp_color(cfg.time_color)
        self.emoji = cfg.emoji
        self.use_timestamp = cfg.use_timestamp
        self.log_file = cfg.log_file
        self.log_dir = cfg.log_dir
        self.log_path: Optional[str] = None
        if self.log_file:
            self.enable_log_file()

    @property
    def start_time(self) -> datetime:
        return self._start_time

    # ----------------------- Console output -----------------------
    def log(self, *args: Any) -> None:
        """Log a styled message to stdout."""
        self._emit(sys.stdout, self.emoji, self.log_color, args)

    def warn(self, *args: Any) -> None:
        """Log a yellow warning to stderr."""
        self._emit(sys.stderr, WARN_EMOJI, STYLES["yellow"], args)

    def error(self, *args: Any) -> None:
        """Log a red error to stderr."""
        self._emit(sys.stderr, ERROR_EMOJI, STYLES["red"], args)

    def _emit(self, stream: TextIO, emoji: str, color: str, args: tuple) -> None:
        if not self.enabled:
            return
        self.log_to_file(emoji, *args)
        print(self.get_prefix(emoji) + color, *args, RESET, file=stream)

    def get_prefix(self, emoji: str = "") -> str:
        """Compose the styled timestamp, emoji and ``[prefix]`` segment."""
        marker = f" {emoji} " if emoji else ""
        time = f"{self.time_color}{self.get_time()} " if self.use_timestamp else ""
        label = STYLES["underscore"] + STYLES["bright"] + self.prefix_color
        if self.prefix:
            label += f"[{self.prefix}]"
        return RESET + time + marker + label + RESET + " "

    # ----------------------- Colors -----------------------
    def set_prefix_color(self, color: str | None) -> None:
        self.prefix_color = self._resolve(color)

    def set_log_color(self, color: str | None) -> None:
        self.log_color = self._resolve(color)

    def set_timestamp_color(self, color: str | None) -> None:
        self.time_color = self._resolve(color)

    @staticmethod
    def _resolve(color: str | None) -> str:
        code = resolve_color(color)
        if color and not code:
            logger.debug(f"unknown color {color!r}, using no styling")
        return code

    # ----------------------- File output -----------------------
    def enable_log_file(self, log_name: str | None = None) -> str:
        """Turn on file logging and point it at ``<log_dir>/<log_name>_<YYYY-MM-DD>.log``.

        ``log_name`` defaults to the current prefix. Calling it again with
        another name (possibly from another logger) just repoints the path.
        """
        name = self.prefix if log_name is None else log_name
        self.log_file = True
        if not os.path.isdir(self.log_dir):
            ensure_dir(self.log_dir)
        self.log_path = log_file_path(self.log_dir, name, today_stamp())
        logger.debug(f"log file: {self.log_path}")
        return self.log_path

    def log_to_file(self, emoji: str, *args: Any) -> None:
        """Append the arguments to the log file only, without console output."""
        if not (self.enabled and self.log_file):
            return
        if self.log_path is None:
            logger.debug("log_file set without a path; enabling with current prefix")
            self.enable_log_file()
        clean = [strip_ansi(a) if isinstance(a, str) else a for a in args]
        text = " ".join(str(a) for a in clean)
        prefix = f"[{self.prefix}]" if self.prefix else ""
        line = f"{self.get_time()} {(emoji or '').strip()} {prefix} {text} \r\n"
        LineWriter(self.log_path).write(line)

    # ----------------------- Time -----------------------
    def get_time(self) -> str:
        """Current local time as HH:MM:SS."""
        return clock_time()

    def elapsed_time(self) -> str:
        """Report the start time, now, and the time elapsed since the logger was created."""
        return format_elapsed(self._start_time, datetime.now())

    def clone(self) -> "Logger":
        """Return an independent copy that can be reconfigured separately."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return f"Logger(prefix={self.prefix!r}, enabled={self.enabled}, log_path={self.log_path!r})"
