from __future__ import annotations

import os
from typing import Optional


class FileSummaryError(Exception):
	def __init__(self, path: str, reason: str):
		super().__init__(reason)
		self.path = path
		self.reason = reason


class FileMissingError(FileSummaryError):
	pass


class FileReadError(FileSummaryError):
	pass


def extension_of(path: str) -> Optional[str]:
	_, ext = os.path.splitext(os.path.basename(path))
	if not ext or ext == ".":
		return None
	return ext[1:]


def read_text(path: str) -> str:
	if not os.path.exists(path):
		raise FileMissingError(path, f"File '{path}' does not exist.")
	try:
		# newline="" keeps "\r\n" intact so character counts match the bytes on disk
		with open(path, "r", encoding="utf-8", newline="") as fh:
			return fh.read()
	except (OSError, UnicodeDecodeError) as e:
		raise FileReadError(path, str(e)) from e
