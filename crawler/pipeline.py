from __future__ import annotations

import logging
import os
from datetime import datetime

from .config import ANALYSIS_FILENAME, LARGEST_FILES_LIMIT, ScanConfig
from .fs_scan import walk_tree
from .imports import analyze_imports
from .manifests import analyze_package_managers
from .model import AnalysisDocument, DependencyAnalysis
from .summarize import build_statistics, build_summary, group_by_language


logger = logging.getLogger(__name__)


def analyze_repository(config: ScanConfig) -> AnalysisDocument:
	"""Scan, aggregate and extract dependencies, strictly in that order.

	Raises ``RootPathError`` when the target path is missing; every other
	failure only shows up as missing data in the returned document.
	"""
	root = os.path.abspath(config.target_path)
	analyzed_at = datetime.now()

	logger.info("Scanning repository structure of %s", root)
	scan = walk_tree(root, config.exclude_dirs, follow_symlinks=config.follow_symlinks)
	files_by_type = group_by_language(scan.files)

	summary = build_summary(scan, files_by_type, LARGEST_FILES_LIMIT)
	statistics = build_statistics(scan, files_by_type)

	logger.info("Analyzing dependencies")
	package_managers, external_deps = analyze_package_managers(files_by_type)
	dependencies = DependencyAnalysis(
		package_managers=package_managers,
		import_graph=analyze_imports(files_by_type),
		external_deps=external_deps,
	)

	logger.info(
		"Found %d files in %d directories, %d package managers",
		summary.total_files, summary.total_dirs, len(dependencies.package_managers),
	)
	return AnalysisDocument(
		repo_path=root,
		analyzed_at=analyzed_at,
		summary=summary,
		file_tree=scan.tree,
		files_by_type=files_by_type,
		dependencies=dependencies,
		statistics=statistics,
	)


def save_analysis(doc: AnalysisDocument, output_dir: str) -> str:
	os.makedirs(output_dir, exist_ok=True)
	path = os.path.join(output_dir, ANALYSIS_FILENAME)
	with open(path, "w", encoding="utf-8") as fh:
		fh.write(doc.model_dump_json(indent=2))
	logger.info("Saved analysis to %s", path)
	return path
