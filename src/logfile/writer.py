from __future__ import annotations

import os


class LineWriter:
	"""Append text lines to a single file, opening and closing it per write."""

	def __init__(self, out_path: str) -> None:
		self.out_path = out_path

	def write(self, line: str) -> None:
		with open(self.out_path, "a", encoding="utf-8", newline="") as f:
			f.write(line)


def ensure_dir(path: str) -> str:
	os.makedirs(path or ".", exist_ok=True)
	return path
