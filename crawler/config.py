from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


DEFAULT_EXCLUDE_DIRS: List[str] = [
	".git",
	"node_modules",
	"vendor",
	".dist",
	"build",
	"target",
	".venv",
	"__pycache__",
]

# Sentinel entry in exclude_dirs that excludes every dot-prefixed name.
HIDDEN_SENTINEL = ".hidden"

LARGEST_FILES_LIMIT = 10

ANALYSIS_FILENAME = "analysis.json"


class ScanConfig(BaseModel):
	target_path: str
	output_path: str = ".analysis"
	exclude_dirs: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
	follow_symlinks: bool = False
	verbose: bool = False


def parse_exclude_dirs(text: str) -> List[str]:
	"""Split a comma-separated exclusion list, e.g. ``".git, vendor"``."""
	if not text:
		return []
	return [part.strip() for part in text.split(",")]
