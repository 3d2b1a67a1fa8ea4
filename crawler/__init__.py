"""Crawler package for describing the contents of a source tree.

Modules:
- classify.py: Language labels and text/binary verdicts from file names.
- fs_scan.py: Recursive tree walk producing the file tree and file records.
- summarize.py: Summary and statistics over the collected records.
- manifests.py: Package manifest detection and dependency parsing.
- imports.py: Regex-based import harvesting per language.
- model.py: Data structures of the analysis document.
- pipeline.py: Runs a full scan and saves the result.
"""

from .config import ScanConfig
from .errors import CrawlerError, RootPathError
from .model import AnalysisDocument
from .pipeline import analyze_repository, save_analysis

__version__ = "1.0.0"

__all__ = [
	"AnalysisDocument",
	"CrawlerError",
	"RootPathError",
	"ScanConfig",
	"analyze_repository",
	"save_analysis",
	"__version__",
]
