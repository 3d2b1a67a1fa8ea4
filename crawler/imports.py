from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Pattern

from .model import FileRecord


logger = logging.getLogger(__name__)


_JS_IMPORT = re.compile(
	r"""^(?:import.*from\s+['"]([^'"]+)['"]|require\(['"]([^'"]+)['"]\))""",
	re.MULTILINE,
)

# One pattern per language label; alternatives use separate capture groups.
IMPORT_PATTERNS: Mapping[str, Pattern[str]] = MappingProxyType({
	"Python": re.compile(r"^(?:from\s+([\w\.]+)|import\s+([\w\.]+))", re.MULTILINE),
	"JavaScript": _JS_IMPORT,
	"TypeScript": _JS_IMPORT,
	"Go": re.compile(r"""^import\s+(?:\w+\s+)?["']([^"']+)["']""", re.MULTILINE),
	"Rust": re.compile(r"^use\s+([\w:]+)", re.MULTILINE),
	"Java": re.compile(r"^import\s+([\w\.]+)", re.MULTILINE),
	"C#": re.compile(r"^using\s+([\w\.]+)", re.MULTILINE),
	"Ruby": re.compile(r"""^require\s+['"]([^'"]+)['"]""", re.MULTILINE),
})


def extract_imports(text: str, pattern: Pattern[str]) -> List[str]:
	imports: List[str] = []
	for match in pattern.finditer(text):
		imports.extend(group for group in match.groups() if group)
	return imports


def analyze_imports(files_by_type: Mapping[str, Iterable[FileRecord]]) -> Dict[str, List[str]]:
	"""Map file path to the raw import strings found in it, skipping files with none."""
	graph: Dict[str, List[str]] = {}
	for language, files in files_by_type.items():
		pattern = IMPORT_PATTERNS.get(language)
		if pattern is None:
			continue
		for record in files:
			try:
				with open(record.path, "r", encoding="utf-8", errors="replace") as fh:
					text = fh.read()
			except OSError as exc:
				logger.debug("Skipping unreadable source %s: %s", record.path, exc)
				continue
			imports = extract_imports(text, pattern)
			if imports:
				graph[record.path] = imports
	return graph
