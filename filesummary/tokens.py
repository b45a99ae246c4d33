"""Line splitting, basic counts and the word-frequency engine shared by all analyzers.

Whitespace and letters follow the Unicode White_Space and Alphabetic properties,
which differ from str.isspace / str.isalpha (e.g. U+001C is not whitespace, and
combining vowel signs are alphabetic).
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import regex

from .model import WordFrequencyEntry


_WORD_RE = regex.compile(r"[^\p{White_Space}]+")
_EDGE_SPACE_RE = regex.compile(r"\A\p{White_Space}+|\p{White_Space}+\Z")
_NON_ALPHA_RE = regex.compile(r"[^\p{Alphabetic}]")


def split_lines(content: str) -> List[str]:
	"""Split on newlines, dropping "\\n" and a "\\r" directly before it.

	A terminator at the very end does not open a new line, so "a\\nb\\n" has two
	lines and "" has none. Empty lines in between are preserved. A lone "\\r"
	on an unterminated last line is kept.
	"""
	if not content:
		return []
	lines = content.split("\n")
	last = lines.pop()
	lines = [line[:-1] if line.endswith("\r") else line for line in lines]
	if last:
		lines.append(last)
	return lines


def split_words(text: str) -> List[str]:
	return _WORD_RE.findall(text)


def trim(text: str) -> str:
	return _EDGE_SPACE_RE.sub("", text)


def basic_stats(content: str, lines: List[str]) -> Tuple[int, int, int]:
	return len(lines), len(split_words(content)), len(content)


def normalize_word(token: str) -> str:
	return _NON_ALPHA_RE.sub("", token.lower())


def word_frequency(content: str) -> List[WordFrequencyEntry]:
	"""Count normalized words longer than two letters.

	Ordered by count descending; equal counts fall back to alphabetical order.
	"""
	counts: Dict[str, int] = {}
	for token in split_words(content):
		word = normalize_word(token)
		if len(word) <= 2:
			continue
		counts[word] = counts.get(word, 0) + 1

	ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
	return [WordFrequencyEntry(word=word, count=count) for word, count in ranked]
