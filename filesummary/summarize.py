from __future__ import annotations

import logging
from typing import Optional

from .analyzers import ANALYZERS, analyze_text
from .classify import classify
from .model import ContentKind, Summary
from .tokens import split_lines


logger = logging.getLogger(__name__)

UNKNOWN_NOTICE = "Unknown file type, analyzing as plain text..."


def summarize(content: str, extension: Optional[str] = None) -> Summary:
	"""Classify by extension and run the single matching analyzer over the content."""
	kind = classify(extension)
	lines = split_lines(content)
	analyzer = ANALYZERS.get(kind)
	if analyzer is None:
		logger.warning("%s (extension=%r)", UNKNOWN_NOTICE, extension)
		analyzer = analyze_text
	return analyzer(content, lines)
