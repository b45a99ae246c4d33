from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import uvicorn

from filesummary.classify import classify, supported_extensions
from filesummary.fs_read import FileMissingError, FileReadError, extension_of, read_text
from filesummary.model import ContentKind
from filesummary.render import render_summary
from filesummary.settings import get_settings
from filesummary.summarize import UNKNOWN_NOTICE, summarize


def cmd_summarize(args: argparse.Namespace) -> int:
	path = args.path
	try:
		content = read_text(path)
	except FileMissingError:
		print(f"Error: File '{path}' does not exist.", file=sys.stderr)
		return 1
	except FileReadError as e:
		print(f"Error reading file '{path}': {e.reason}", file=sys.stderr)
		return 1

	extension = extension_of(path)
	if classify(extension) is ContentKind.UNKNOWN and not args.json:
		print(UNKNOWN_NOTICE)
	summary = summarize(content, extension)
	if args.json:
		print(json.dumps(summary.model_dump(mode="json"), indent=2))
	else:
		print(render_summary(summary, path))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def main(argv: Optional[List[str]] = None) -> int:
	settings = get_settings()
	logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

	parser = argparse.ArgumentParser(prog="filesummary")
	sub = parser.add_subparsers(dest="cmd", required=True)

	ps = sub.add_parser(
		"summarize",
		help="Summarize a single file",
		description=f"Supported file types: {supported_extensions()}",
	)
	ps.add_argument("path", help="Path to the file")
	ps.add_argument("--json", action="store_true", help="Print the summary as JSON")
	ps.set_defaults(func=cmd_summarize)

	pv = sub.add_parser("serve", help="Run FastAPI server")
	pv.add_argument("--host", default=settings.host)
	pv.add_argument("--port", type=int, default=settings.port)
	pv.add_argument("--reload", action="store_true")
	pv.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
