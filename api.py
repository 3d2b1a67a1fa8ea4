from __future__ import annotations

import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from crawler.config import ScanConfig
from crawler.errors import CrawlerError
from crawler.model import AnalysisDocument
from crawler.pipeline import analyze_repository


app = FastAPI(title="Code Crawler")


class AnalyzeRequest(BaseModel):
	root_path: str
	exclude_dirs: Optional[List[str]] = None
	follow_symlinks: bool = False


@app.post("/analyze", response_model=AnalysisDocument)
def analyze(req: AnalyzeRequest) -> AnalysisDocument:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")

	options = {"follow_symlinks": req.follow_symlinks}
	if req.exclude_dirs is not None:
		options["exclude_dirs"] = req.exclude_dirs
	config = ScanConfig(target_path=root, **options)
	try:
		return analyze_repository(config)
	except CrawlerError as exc:
		raise HTTPException(status_code=400, detail=str(exc)) from exc


def create_app() -> FastAPI:
	return app
