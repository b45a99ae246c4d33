from __future__ import annotations

from typing import Dict, Optional

from .model import ContentKind


EXTENSION_KIND: Dict[str, ContentKind] = {
	"txt": ContentKind.PLAIN_TEXT,
	"md": ContentKind.MARKDOWN,
	"log": ContentKind.LOG,
	"rs": ContentKind.SOURCE_CODE,
}


def classify(extension: Optional[str]) -> ContentKind:
	# Exact, case-sensitive match: "TXT" is not "txt".
	if extension is None:
		return ContentKind.UNKNOWN
	return EXTENSION_KIND.get(extension, ContentKind.UNKNOWN)


def supported_extensions() -> str:
	return ", ".join(f".{ext}" for ext in EXTENSION_KIND)
