from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class ContentKind(str, Enum):
	PLAIN_TEXT = "plain_text"
	MARKDOWN = "markdown"
	LOG = "log"
	SOURCE_CODE = "source_code"
	UNKNOWN = "unknown"


class WordFrequencyEntry(BaseModel):
	model_config = ConfigDict(frozen=True)

	word: str
	count: int


class Summary(BaseModel):
	model_config = ConfigDict(frozen=True)

	kind: ContentKind
	line_count: int
	word_count: int
	char_count: int
	insights: Tuple[str, ...] = ()
	statistics: Dict[str, str] = {}


class SummarizeRequest(BaseModel):
	content: str
	extension: Optional[str] = None


class SummarizeFileRequest(BaseModel):
	path: str


class SummarizeResponse(BaseModel):
	detected_kind: ContentKind
	summary: Summary
