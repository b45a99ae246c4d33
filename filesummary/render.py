from __future__ import annotations

from typing import Dict, List

from .model import ContentKind, Summary


KIND_LABELS: Dict[ContentKind, str] = {
	ContentKind.PLAIN_TEXT: "Plain Text",
	ContentKind.MARKDOWN: "Markdown",
	ContentKind.LOG: "Log File",
	ContentKind.SOURCE_CODE: "Rust Source Code",
	ContentKind.UNKNOWN: "Unknown",
}


def display_key(key: str) -> str:
	label = key.replace("_", " ").replace("avg", "Average")
	return label[:1].upper() + label[1:]


def render_summary(summary: Summary, filename: str) -> str:
	parts: List[str] = []
	parts.append(f"File Summary: {filename}")
	parts.append(f"Type: {KIND_LABELS[summary.kind]}")

	parts.append("")
	parts.append("Basic Statistics:")
	parts.append(f"Lines: {summary.line_count}")
	parts.append(f"Words: {summary.word_count}")
	parts.append(f"Characters: {summary.char_count}")

	if summary.statistics:
		parts.append("")
		parts.append("Detailed Statistics:")
		for key, value in summary.statistics.items():
			parts.append(f"{display_key(key)}: {value}")

	if summary.insights:
		parts.append("")
		parts.append("Key Insights:")
		for insight in summary.insights:
			parts.append(f"   • {insight}")

	return "\n".join(parts)
