"""Shared test fixtures for logfile tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from logfile import Logger
from logfile.utils.timefmt import today_stamp


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep default log directories inside the test's temp dir."""
    monkeypatch.delenv("LOGFILE_DIR", raising=False)
    monkeypatch.delenv("LOGFILE_PREFIX", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Return a not-yet-created log directory."""
    return tmp_path / "logs"


@pytest.fixture
def today() -> str:
    return today_stamp()


@pytest.fixture
def make_logger(log_dir: Path):
    """Build a Logger whose files land under the log_dir fixture."""

    def _make(prefix: str = "test", **options) -> Logger:
        options.setdefault("log_dir", str(log_dir))
        return Logger(prefix, options)

    return _make


@pytest.fixture
def read_log():
    """Read a log file as raw text so CRLF line endings survive."""

    def _read(path: str | Path) -> str:
        return Path(path).read_bytes().decode("utf-8")

    return _read
