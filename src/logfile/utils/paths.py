from __future__ import annotations

import os

__all__ = ["log_file_name", "log_file_path"]


def log_file_name(name: str, day: str) -> str:
    """Build ``<name>_<day>.log``.

    Path separators in ``name`` are replaced so the file never lands in a
    nested directory.
    """
    safe = name.replace("/", "_").replace("\\", "_")
    return f"{safe}_{day}.log"


def log_file_path(log_dir: str, name: str, day: str) -> str:
    return os.path.join(log_dir, log_file_name(name, day))
