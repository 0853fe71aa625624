"""Pydantic model describing logger construction options."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

load_dotenv()

LOG_DIR_ENV = "LOGFILE_DIR"
DEFAULT_EMOJI = "🔵 "


def default_log_dir() -> str:
    return os.getenv(LOG_DIR_ENV) or "logs"


class LoggerConfig(BaseModel):
    """Options accepted under their snake_case names or camelCase aliases (``logFile``, ``logDir``...)."""

    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = True
    use_timestamp: bool = Field(True, alias="useTimestamp", description="Prepend HH:MM:SS to each message")
    log_file: bool = Field(False, alias="logFile", description="Also append messages to the daily log file")
    log_dir: str = Field(default_factory=default_log_dir, alias="logDir")
    prefix_color: str = Field("blue", alias="prefixColor")
    color: str = Field("", description="Style of the logged values")
    time_color: str = Field("green", alias="timeColor")
    emoji: str = DEFAULT_EMOJI

    @field_validator("log_dir")
    @classmethod
    def _dir_norm(cls, v: str) -> str:  # noqa: D401
        return str(Path(v)) if v else default_log_dir()
