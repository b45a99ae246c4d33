from filesummary.analyzers import analyze_log, analyze_markdown, analyze_source, analyze_text
from filesummary.model import ContentKind
from filesummary.summarize import summarize
from filesummary.tokens import split_lines


def run(analyzer, content):
	return analyzer(content, split_lines(content))


def test_basic_text_analysis():
	summary = run(analyze_text, "Hello world! This is a test file with some words.")
	assert summary.kind is ContentKind.PLAIN_TEXT
	assert summary.word_count == 10
	assert summary.line_count == 1
	assert list(summary.insights) == [
		"Most frequent words: file (1), hello (1), some (1), test (1), this (1)"
	]
	assert summary.statistics == {"avg_word_length": "4.0", "avg_line_length": "49.0"}


def test_text_top_words_limited_to_five_and_long_words():
	content = "alpha alpha alpha beta beta gamma delta epsilon zeta eta the the the the"
	summary = run(analyze_text, content)
	assert list(summary.insights) == [
		"Most frequent words: alpha (3), beta (2), delta (1), epsilon (1), gamma (1)"
	]


def test_empty_text():
	summary = run(analyze_text, "")
	assert summary.line_count == 0
	assert summary.word_count == 0
	assert summary.char_count == 0
	assert summary.insights == ()
	assert summary.statistics == {"avg_word_length": "0.0", "avg_line_length": "0.0"}


def test_markdown_detection():
	content = "# Header\n\nSome content with [link](url) and ![image](img.jpg)\n\n```code```"
	summary = run(analyze_markdown, content)
	assert summary.kind is ContentKind.MARKDOWN
	assert summary.statistics == {"headers": "1", "links": "2", "images": "1", "code_blocks": "0"}
	assert list(summary.insights) == ["Document structure: H1: Header"]


def test_markdown_headers_and_fences():
	content = "\n".join(
		[
			"# One",
			"  ## Two ##",
			"###",
			"#### Four",
			"##### Five",
			"###### Six",
			"```python",
			"print(1)",
			"```",
			"```",
		]
	)
	summary = run(analyze_markdown, content)
	assert summary.statistics["headers"] == "6"
	assert summary.statistics["code_blocks"] == "1"
	assert list(summary.insights) == ["Document structure: H1: One, H2: Two ##, H3: , H4: Four, H5: Five"]


def test_log_levels_and_errors():
	summary = run(analyze_log, "ERROR something failed\nINFO ok")
	assert summary.kind is ContentKind.LOG
	assert list(summary.insights) == [
		"Log levels: ERROR: 1, INFO: 1",
		"Sample errors found: 1 total",
		"  1: ERROR something failed",
	]
	assert summary.statistics == {"unique_timestamps": "0"}


def test_log_timestamps_and_truncation():
	long_tail = "x" * 120
	content = "\n".join(
		[
			"2024-01-01T10:00:00 info started worker",
			"2024-01-01T10:00:05 warn retrying after exception " + long_tail,
			"2024-01-01T10:00:05 Debug: warn error",
			"2024-01-01T09:59:00 fail fail",
			"12:00 shrt",
			"plain line without markers",
		]
	)
	summary = run(analyze_log, content)
	assert summary.insights[0] == "Log levels: ERROR: 1, WARN: 2, INFO: 1, DEBUG: 1"
	assert summary.insights[1] == "Time range: 2024-01-01T10:00:00 to 2024-01-01T09:59:00"
	assert summary.insights[2] == "Sample errors found: 3 total"
	second = "2024-01-01T10:00:05 warn retrying after exception " + long_tail
	assert summary.insights[3] == f"  1: {second[:100]}..."
	assert summary.insights[4] == "  2: 2024-01-01T10:00:05 Debug: warn error"
	assert summary.insights[5] == "  3: 2024-01-01T09:59:00 fail fail"
	assert summary.statistics == {"unique_timestamps": "3"}


def test_log_single_timestamp_has_no_range():
	summary = run(analyze_log, "2024-01-01 boot sequence")
	assert summary.insights == ()
	assert summary.statistics == {"unique_timestamps": "1"}


def test_source_code_analysis():
	summary = run(analyze_source, "fn foo() {}\nstruct Bar;\n// note\nTODO fix")
	assert summary.kind is ContentKind.SOURCE_CODE
	assert list(summary.insights) == ["Functions (1): foo", "Structs: Bar;", "TODOs/FIXMEs found: 1"]
	assert summary.statistics == {
		"functions": "1",
		"structs": "1",
		"enums": "0",
		"imports": "0",
		"comment_ratio": "25.0%",
	}


def test_source_code_symbols():
	content = "\n".join(
		[
			"use std::io;",
			"use std::fs;",
			"/* block */",
			"pub fn alpha(x: i32) -> i32 {",
			"    fn beta() {}",
			"pub async fn gamma<T>(t: T) {}",
			"fn broken",
			"enum Color { Red }",
			"struct Point {",
			"fn d() {} fn e() {}",
			"fn f() {}",
			"// FIXME later",
		]
	)
	summary = run(analyze_source, content)
	assert list(summary.insights) == [
		"Functions (5): alpha, beta, gamma<T>, d, f",
		"Structs: Point",
		"Enums: Color",
		"TODOs/FIXMEs found: 1",
	]
	assert summary.statistics == {
		"functions": "5",
		"structs": "1",
		"enums": "1",
		"imports": "2",
		"comment_ratio": "16.7%",
	}


def test_line_count_is_independent_of_analyzer():
	content = "# a\nERROR b\nfn c() {}\n\nplain words here\n"
	for extension in ["txt", "md", "log", "rs", None]:
		summary = summarize(content, extension)
		assert summary.line_count == 5
		assert summary.word_count == 10
		assert summary.char_count == len(content)


def test_unknown_falls_back_to_text(caplog):
	with caplog.at_level("WARNING"):
		summary = summarize("words words words", "csv")
	assert summary.kind is ContentKind.PLAIN_TEXT
	assert list(summary.insights) == ["Most frequent words: words (3)"]
	assert "Unknown file type" in caplog.text


def test_information_separator_is_not_whitespace():
	text = run(analyze_text, "alpha\x1cbeta")
	assert text.word_count == 1
	assert text.statistics["avg_word_length"] == "10.0"

	source = run(analyze_source, "\x1cfn foo() {}\n fn bar() {}")
	assert list(source.insights) == ["Functions (1): bar"]
