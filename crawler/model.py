from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
	model_config = ConfigDict(frozen=True)


class TreeNode(_Frozen):
	name: str
	path: str
	rel_path: str
	is_dir: bool
	size: int
	children: List[TreeNode] = []


class FileRecord(_Frozen):
	path: str
	rel_path: str
	name: str
	size: int
	extension: str
	language: str
	# Only set for text-like files.
	lines: Optional[int] = None
	blank_lines: Optional[int] = None
	comment_lines: Optional[int] = None


class Summary(_Frozen):
	total_files: int = 0
	total_dirs: int = 0
	total_size: int = 0
	languages: Dict[str, int] = {}
	largest_files: List[FileRecord] = []
	deepest_path: str = ""
	max_depth: int = 0


class Statistics(_Frozen):
	total_lines: int = 0
	code_lines: int = 0
	comment_lines: int = 0
	blank_lines: int = 0
	avg_file_size: int = 0
	files_by_language: Dict[str, int] = {}


class PackageManager(_Frozen):
	name: str
	config_files: List[str] = []
	dependencies: Dict[str, str] = {}
	dev_dependencies: Dict[str, str] = {}

	def merged(self, other: PackageManager) -> PackageManager:
		"""Combine with a later manifest of the same kind; ``other`` wins on equal names."""
		return PackageManager(
			name=self.name,
			config_files=self.config_files + other.config_files,
			dependencies={**self.dependencies, **other.dependencies},
			dev_dependencies={**self.dev_dependencies, **other.dev_dependencies},
		)


class DependencyAnalysis(_Frozen):
	package_managers: Dict[str, PackageManager] = {}
	import_graph: Dict[str, List[str]] = {}
	external_deps: List[str] = []


class AnalysisDocument(_Frozen):
	"""Result of one scan; handed as-is to serializers and report renderers.

	Every model here is frozen once built. Field assignment raises, but the
	dicts and lists they hold are plain containers that nothing mutates after
	the pipeline returns.
	"""

	repo_path: str
	analyzed_at: datetime = Field(default_factory=datetime.now)
	summary: Summary
	file_tree: TreeNode
	files_by_type: Dict[str, List[FileRecord]]
	dependencies: DependencyAnalysis
	statistics: Statistics
