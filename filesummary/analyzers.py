from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Set, Tuple

from .model import ContentKind, Summary
from .tokens import basic_stats, split_words, trim, word_frequency


logger = logging.getLogger(__name__)

LOG_LEVELS: Tuple[str, ...] = ("ERROR", "WARN", "INFO", "DEBUG", "TRACE")
ERROR_MARKERS: Tuple[str, ...] = ("ERROR", "EXCEPTION", "FAIL")

TOP_WORDS = 5
MAX_HEADERS = 5
MAX_ERROR_SAMPLES = 3
MAX_ERROR_LENGTH = 100
MAX_FUNCTIONS = 5


def _ratio(numerator: float, denominator: int) -> float:
	if denominator <= 0:
		return 0.0
	return numerator / denominator


def analyze_text(content: str, lines: List[str]) -> Summary:
	line_count, word_count, char_count = basic_stats(content, lines)
	insights: List[str] = []

	top_words = [
		f"{entry.word} ({entry.count})" for entry in word_frequency(content) if len(entry.word) > 3
	][:TOP_WORDS]
	if top_words:
		insights.append(f"Most frequent words: {', '.join(top_words)}")

	total_word_chars = sum(len(token) for token in split_words(content))
	statistics: Dict[str, str] = {
		"avg_word_length": f"{_ratio(total_word_chars, word_count):.1f}",
		"avg_line_length": f"{_ratio(char_count, line_count):.1f}",
	}
	logger.debug("text: %d words, %d qualifying top words", word_count, len(top_words))

	return Summary(
		kind=ContentKind.PLAIN_TEXT,
		line_count=line_count,
		word_count=word_count,
		char_count=char_count,
		insights=insights,
		statistics=statistics,
	)


def analyze_markdown(content: str, lines: List[str]) -> Summary:
	line_count, word_count, char_count = basic_stats(content, lines)
	insights: List[str] = []

	headers: List[Tuple[int, str]] = []
	links = 0
	images = 0
	fences = 0
	for line in lines:
		trimmed = trim(line)
		if trimmed.startswith("#"):
			level = len(trimmed) - len(trimmed.lstrip("#"))
			headers.append((level, trim(trimmed.lstrip("#"))))
		# An image like ![alt](src) also contains "](" and counts as a link.
		links += line.count("](")
		images += line.count("![")
		if trimmed.startswith("```"):
			fences += 1

	if headers:
		outline = [f"H{level}: {text}" for level, text in headers[:MAX_HEADERS]]
		insights.append(f"Document structure: {', '.join(outline)}")

	statistics: Dict[str, str] = {
		"headers": str(len(headers)),
		"links": str(links),
		"images": str(images),
		"code_blocks": str(fences // 2),
	}
	logger.debug("markdown: %d headers, %d fence markers", len(headers), fences)

	return Summary(
		kind=ContentKind.MARKDOWN,
		line_count=line_count,
		word_count=word_count,
		char_count=char_count,
		insights=insights,
		statistics=statistics,
	)


def _looks_like_timestamp_line(line: str) -> bool:
	return len(line) > 10 and any(sep in line for sep in (":", "-", "/"))


def analyze_log(content: str, lines: List[str]) -> Summary:
	line_count, word_count, char_count = basic_stats(content, lines)
	insights: List[str] = []

	level_counts: Dict[str, int] = {level: 0 for level in LOG_LEVELS}
	timestamps: List[str] = []
	errors: List[str] = []

	for line in lines:
		upper = line.upper()
		for level in LOG_LEVELS:
			if level in upper:
				level_counts[level] += 1

		if any(marker in upper for marker in ERROR_MARKERS):
			errors.append(line)

		if _looks_like_timestamp_line(line):
			parts = split_words(line)
			if parts and (":" in parts[0] or "-" in parts[0]):
				timestamps.append(parts[0])

	seen_levels = [f"{level}: {count}" for level, count in level_counts.items() if count > 0]
	if seen_levels:
		insights.append(f"Log levels: {', '.join(seen_levels)}")

	if len(timestamps) > 1:
		insights.append(f"Time range: {timestamps[0]} to {timestamps[-1]}")

	if errors:
		insights.append(f"Sample errors found: {len(errors)} total")
		for i, error in enumerate(errors[:MAX_ERROR_SAMPLES], start=1):
			if len(error) > MAX_ERROR_LENGTH:
				insights.append(f"  {i}: {error[:MAX_ERROR_LENGTH]}...")
			else:
				insights.append(f"  {i}: {error}")

	unique_timestamps: Set[str] = set(timestamps)
	statistics: Dict[str, str] = {"unique_timestamps": str(len(unique_timestamps))}
	logger.debug("log: %d error lines, %d timestamp candidates", len(errors), len(timestamps))

	return Summary(
		kind=ContentKind.LOG,
		line_count=line_count,
		word_count=word_count,
		char_count=char_count,
		insights=insights,
		statistics=statistics,
	)


def _function_name(trimmed: str) -> Optional[str]:
	# Text between the first "fn " and the next "(", if there is one.
	start = trimmed.find("fn ")
	if start < 0:
		return None
	rest = trimmed[start + 3:]
	paren = rest.find("(")
	if paren < 0:
		return None
	return trim(rest[:paren])


def _second_token(trimmed: str) -> Optional[str]:
	parts = split_words(trimmed)
	return parts[1] if len(parts) > 1 else None


def analyze_source(content: str, lines: List[str]) -> Summary:
	line_count, word_count, char_count = basic_stats(content, lines)
	insights: List[str] = []

	functions: List[str] = []
	structs: List[str] = []
	enums: List[str] = []
	imports: List[str] = []
	comments = 0
	todos = 0

	for line in lines:
		trimmed = trim(line)
		if trimmed.startswith("fn ") or " fn " in trimmed:
			name = _function_name(trimmed)
			if name is not None:
				functions.append(name)

		if trimmed.startswith("struct "):
			name = _second_token(trimmed)
			if name is not None:
				structs.append(name)
		if trimmed.startswith("enum "):
			name = _second_token(trimmed)
			if name is not None:
				enums.append(name)

		if trimmed.startswith("use "):
			imports.append(trimmed)

		if trimmed.startswith(("//", "/*")):
			comments += 1
		upper = trimmed.upper()
		if "TODO" in upper or "FIXME" in upper:
			todos += 1

	if functions:
		insights.append(f"Functions ({len(functions)}): {', '.join(functions[:MAX_FUNCTIONS])}")
	if structs:
		insights.append(f"Structs: {', '.join(structs)}")
	if enums:
		insights.append(f"Enums: {', '.join(enums)}")
	if todos:
		insights.append(f"TODOs/FIXMEs found: {todos}")

	statistics: Dict[str, str] = {
		"functions": str(len(functions)),
		"structs": str(len(structs)),
		"enums": str(len(enums)),
		"imports": str(len(imports)),
		"comment_ratio": f"{_ratio(comments, line_count) * 100.0:.1f}%",
	}
	logger.debug("source: %d functions, %d comment lines", len(functions), comments)

	return Summary(
		kind=ContentKind.SOURCE_CODE,
		line_count=line_count,
		word_count=word_count,
		char_count=char_count,
		insights=insights,
		statistics=statistics,
	)


Analyzer = Callable[[str, List[str]], Summary]

ANALYZERS: Dict[ContentKind, Analyzer] = {
	ContentKind.PLAIN_TEXT: analyze_text,
	ContentKind.MARKDOWN: analyze_markdown,
	ContentKind.LOG: analyze_log,
	ContentKind.SOURCE_CODE: analyze_source,
}
