"""Single-file content summarizer.

Modules:
- classify.py: Extension to content-kind mapping.
- tokens.py: Line splitting, basic counts and word frequency.
- analyzers.py: Plain-text, markdown, log and source-code analyzers.
- summarize.py: Dispatches content to one analyzer and returns its Summary.
- model.py: Pydantic data structures for kinds, summaries and API payloads.
- fs_read.py: Reading files from disk and extracting their extension.
- render.py: Human-readable rendering of a Summary.
- settings.py: Environment-driven settings.
"""

__all__ = [
	"classify",
	"tokens",
	"analyzers",
	"summarize",
	"model",
	"fs_read",
	"render",
	"settings",
]
