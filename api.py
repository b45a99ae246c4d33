from __future__ import annotations

import os
from typing import Dict

from fastapi import FastAPI, HTTPException

from filesummary.classify import EXTENSION_KIND, classify
from filesummary.fs_read import FileMissingError, FileReadError, extension_of, read_text
from filesummary.model import ContentKind, SummarizeFileRequest, SummarizeRequest, SummarizeResponse
from filesummary.summarize import summarize


app = FastAPI(title="File Summary")


@app.post("/summarize", response_model=SummarizeResponse)
def summarize_content(req: SummarizeRequest) -> SummarizeResponse:
	return SummarizeResponse(
		detected_kind=classify(req.extension),
		summary=summarize(req.content, req.extension),
	)


@app.post("/summarize/file", response_model=SummarizeResponse)
def summarize_file(req: SummarizeFileRequest) -> SummarizeResponse:
	path = os.path.abspath(req.path)
	try:
		content = read_text(path)
	except FileMissingError as e:
		raise HTTPException(status_code=404, detail=e.reason)
	except FileReadError as e:
		raise HTTPException(status_code=400, detail=f"Error reading file '{path}': {e.reason}")

	extension = extension_of(path)
	return SummarizeResponse(detected_kind=classify(extension), summary=summarize(content, extension))


@app.get("/kinds")
def kinds() -> Dict[str, ContentKind]:
	return dict(EXTENSION_KIND)


def create_app() -> FastAPI:
	return app
