from __future__ import annotations

import heapq
from typing import Dict, Iterable, List

from .config import LARGEST_FILES_LIMIT
from .fs_scan import ScanResult
from .model import AnalysisDocument, FileRecord, Statistics, Summary


_SIZE_UNITS = ["KB", "MB", "GB", "TB"]


def group_by_language(records: Iterable[FileRecord]) -> Dict[str, List[FileRecord]]:
	grouped: Dict[str, List[FileRecord]] = {}
	for record in records:
		grouped.setdefault(record.language, []).append(record)
	return grouped


def largest_files(records: Iterable[FileRecord], limit: int = LARGEST_FILES_LIMIT) -> List[FileRecord]:
	# nlargest is stable: equal sizes keep discovery order.
	return heapq.nlargest(limit, records, key=lambda r: r.size)


def build_summary(
	scan: ScanResult,
	files_by_type: Dict[str, List[FileRecord]],
	limit: int = LARGEST_FILES_LIMIT,
) -> Summary:
	return Summary(
		total_files=scan.total_files,
		total_dirs=scan.total_dirs,
		total_size=scan.total_size,
		languages={lang: len(files) for lang, files in files_by_type.items()},
		largest_files=largest_files(scan.files, limit),
		deepest_path=scan.deepest_path,
		max_depth=scan.max_depth,
	)


def build_statistics(scan: ScanResult, files_by_type: Dict[str, List[FileRecord]]) -> Statistics:
	total = blank = comment = 0
	for record in scan.files:
		if record.lines is None:
			continue
		total += record.lines
		blank += record.blank_lines or 0
		comment += record.comment_lines or 0

	avg = scan.total_size // scan.total_files if scan.total_files else 0
	return Statistics(
		total_lines=total,
		code_lines=total - blank - comment,
		comment_lines=comment,
		blank_lines=blank,
		avg_file_size=avg,
		files_by_language={lang: len(files) for lang, files in files_by_type.items()},
	)


def format_bytes(size: int) -> str:
	if size < 1024:
		return f"{size} B"
	div, exp = 1024, 0
	n = size // 1024
	while n >= 1024 and exp < len(_SIZE_UNITS) - 1:
		div *= 1024
		exp += 1
		n //= 1024
	return f"{size / div:.1f} {_SIZE_UNITS[exp]}"


def format_overview(doc: AnalysisDocument) -> str:
	s = doc.summary
	parts: List[str] = []
	parts.append(
		f"Repository at {doc.repo_path}: {s.total_files} files, "
		f"{s.total_dirs} directories, {format_bytes(s.total_size)}"
	)
	if s.languages:
		top = sorted(s.languages.items(), key=lambda kv: (-kv[1], kv[0]))[:10]
		parts.append(f"  Languages: {', '.join(f'{lang} ({n})' for lang, n in top)}")
	parts.append(f"  Lines: {doc.statistics.total_lines} ({doc.statistics.code_lines} code)")
	if s.max_depth:
		parts.append(f"  Max depth: {s.max_depth} ({s.deepest_path})")
	deps = doc.dependencies
	if deps.package_managers:
		parts.append(f"  Package managers: {', '.join(sorted(deps.package_managers))}")
	parts.append(
		f"  External dependencies: {len(deps.external_deps)}, "
		f"files with imports: {len(deps.import_graph)}"
	)
	return "\n".join(parts)
