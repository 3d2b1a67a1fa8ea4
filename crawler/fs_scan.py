from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Sequence, Tuple

from .classify import comment_prefixes, detect_language, is_text_file
from .config import HIDDEN_SENTINEL
from .errors import RootPathError
from .model import FileRecord, TreeNode


logger = logging.getLogger(__name__)


class LineCounts(NamedTuple):
	total: int
	blank: int
	comment: int


@dataclass(frozen=True)
class ScanResult:
	tree: TreeNode
	files: List[FileRecord]
	total_dirs: int
	total_files: int
	total_size: int
	max_depth: int
	deepest_path: str


def should_exclude(name: str, exclude_dirs: Iterable[str]) -> bool:
	for excluded in exclude_dirs:
		if name == excluded:
			return True
		if excluded == HIDDEN_SENTINEL and name.startswith("."):
			return True
	return False


def count_lines(path: str, language: str = "") -> LineCounts:
	"""Count newline-delimited lines; a trailing partial line counts as one."""
	prefixes = tuple(p.encode() for p in comment_prefixes(language))
	total = blank = comment = 0
	with open(path, "rb") as fh:
		for raw in fh:
			total += 1
			line = raw.strip()
			if not line:
				blank += 1
			elif prefixes and line.startswith(prefixes):
				comment += 1
	return LineCounts(total, blank, comment)


@dataclass
class _ScanState:
	root: str
	exclude_dirs: Tuple[str, ...]
	follow_symlinks: bool
	files: List[FileRecord] = field(default_factory=list)
	total_dirs: int = 0
	total_files: int = 0
	total_size: int = 0
	max_depth: int = 0
	deepest_path: str = ""

	def visit(self, path: str, info: os.stat_result, depth: int, is_link: bool = False) -> TreeNode:
		if depth > self.max_depth:
			self.max_depth = depth
			self.deepest_path = path
		if stat.S_ISDIR(info.st_mode):
			return self._visit_dir(path, info, depth, descend=self.follow_symlinks or not is_link)
		return self._visit_file(path, info)

	def _node(self, path: str, info: os.stat_result, is_dir: bool, children: List[TreeNode]) -> TreeNode:
		return TreeNode(
			name=os.path.basename(path) or path,
			path=path,
			rel_path=os.path.relpath(path, self.root),
			is_dir=is_dir,
			size=info.st_size,
			children=children,
		)

	def _visit_dir(self, path: str, info: os.stat_result, depth: int, descend: bool) -> TreeNode:
		self.total_dirs += 1
		children: List[TreeNode] = []
		if not descend:
			logger.debug("Not following symlinked directory %s", path)
			return self._node(path, info, True, children)

		try:
			with os.scandir(path) as it:
				entries = sorted(it, key=lambda e: e.name)
		except OSError as exc:
			logger.warning("Cannot list directory %s: %s", path, exc)
			entries = []

		for entry in entries:
			if should_exclude(entry.name, self.exclude_dirs):
				continue
			try:
				child_info = entry.stat()
				child_is_link = entry.is_symlink()
			except OSError as exc:
				logger.debug("Skipping %s: %s", entry.path, exc)
				continue
			children.append(self.visit(entry.path, child_info, depth + 1, child_is_link))

		return self._node(path, info, True, children)

	def _visit_file(self, path: str, info: os.stat_result) -> TreeNode:
		node = self._node(path, info, False, [])
		name = node.name
		extension = os.path.splitext(name)[1]
		language = detect_language(extension, name)

		counts = None
		try:
			if is_text_file(extension):
				counts = count_lines(path, language)
			else:
				# Binary content is never read, only opened.
				with open(path, "rb"):
					pass
		except OSError as exc:
			logger.debug("Skipping unreadable file %s: %s", path, exc)
			return node

		self.files.append(
			FileRecord(
				path=path,
				rel_path=node.rel_path,
				name=name,
				size=info.st_size,
				extension=extension,
				language=language,
				lines=counts.total if counts else None,
				blank_lines=counts.blank if counts else None,
				comment_lines=counts.comment if counts else None,
			)
		)
		self.total_files += 1
		self.total_size += info.st_size
		return node


def walk_tree(root: str, exclude_dirs: Sequence[str] = (), follow_symlinks: bool = False) -> ScanResult:
	"""Walk ``root`` depth-first, building the tree and the flat file records together.

	The root itself is never excluded. Only a missing or unstatable root is fatal;
	unreadable directories become childless nodes and unreadable files are skipped.
	"""
	root = os.path.abspath(root)
	try:
		info = os.stat(root)
	except FileNotFoundError:
		raise RootPathError(root) from None
	except OSError as exc:
		raise RootPathError(root, reason=f"cannot be accessed ({exc.strerror})") from exc

	state = _ScanState(root=root, exclude_dirs=tuple(exclude_dirs), follow_symlinks=follow_symlinks)
	tree = state.visit(root, info, 0)
	logger.debug(
		"Walked %s: %d dirs, %d files, max depth %d",
		root, state.total_dirs, state.total_files, state.max_depth,
	)
	return ScanResult(
		tree=tree,
		files=state.files,
		total_dirs=state.total_dirs,
		total_files=state.total_files,
		total_size=state.total_size,
		max_depth=state.max_depth,
		deepest_path=state.deepest_path,
	)
