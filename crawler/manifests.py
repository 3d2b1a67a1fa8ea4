"""Package manifest detection and best-effort dependency parsing.

Parsers never raise on malformed content: lines they do not understand are
skipped, and a manifest producing no dependencies at all is dropped.
"""

from __future__ import annotations

import json
import logging
import os
import re
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .model import FileRecord, PackageManager


logger = logging.getLogger(__name__)


MANIFEST_FILES: Mapping[str, str] = MappingProxyType({
	"package.json": "npm",
	"requirements.txt": "pip",
	"Pipfile": "pipenv",
	"poetry.lock": "poetry",
	"go.mod": "go modules",
	"Cargo.toml": "cargo",
	"composer.json": "composer",
	"Gemfile": "bundler",
	"pom.xml": "maven",
	"build.gradle": "gradle",
	"Package.swift": "swift pm",
	"pubspec.yaml": "pub",
})

_REQUIREMENT_RE = re.compile(r"^([a-zA-Z0-9\-_]+)([>=<~!]+.*)?$")


def _expect_object(value: Any) -> Optional[Dict[str, Any]]:
	return value if isinstance(value, dict) else None


def _string_pairs(value: Any) -> Dict[str, str]:
	obj = _expect_object(value)
	if obj is None:
		return {}
	return {name: version for name, version in obj.items() if isinstance(version, str)}


def parse_package_json(text: str, deps: Dict[str, str], dev_deps: Dict[str, str]) -> None:
	try:
		data = json.loads(text)
	except ValueError as exc:
		logger.debug("Invalid JSON manifest: %s", exc)
		return
	doc = _expect_object(data)
	if doc is None:
		return
	deps.update(_string_pairs(doc.get("dependencies")))
	dev_deps.update(_string_pairs(doc.get("devDependencies")))


def parse_requirements(text: str, deps: Dict[str, str], dev_deps: Dict[str, str]) -> None:
	for line in text.splitlines():
		line = line.strip()
		if not line or line.startswith("#"):
			continue
		match = _REQUIREMENT_RE.match(line)
		if match is None:
			continue
		deps[match.group(1)] = match.group(2) or "unspecified"


def parse_go_mod(text: str, deps: Dict[str, str], dev_deps: Dict[str, str]) -> None:
	in_require = False
	for line in text.splitlines():
		line = line.strip()
		if line.startswith("require ("):
			in_require = True
			continue
		if in_require and line == ")":
			in_require = False
			continue
		if not (in_require or line.startswith("require ")):
			continue

		parts = line.split()
		if len(parts) < 2:
			continue
		if parts[0] == "require":
			if len(parts) >= 3:
				deps[parts[1]] = parts[2]
		else:
			deps[parts[0]] = parts[1]


def parse_cargo_toml(text: str, deps: Dict[str, str], dev_deps: Dict[str, str]) -> None:
	in_deps = False
	for line in text.splitlines():
		line = line.strip()
		if line == "[dependencies]":
			in_deps = True
			continue
		if line.startswith("["):
			in_deps = False
		if not in_deps or "=" not in line:
			continue

		# Inline tables keep their raw text as the version: tokio = { version = "1" }
		name, _, version = line.partition("=")
		name = name.strip()
		if name:
			deps[name] = version.strip().strip('"')


def parse_generic(text: str, deps: Dict[str, str], dev_deps: Dict[str, str]) -> None:
	for line in text.splitlines():
		line = line.strip()
		if not line or line.startswith("#") or line.startswith("//"):
			continue
		deps[line] = "unknown"


Parser = Callable[[str, Dict[str, str], Dict[str, str]], None]

PARSERS: Mapping[str, Parser] = MappingProxyType({
	"npm": parse_package_json,
	"pip": parse_requirements,
	"pipenv": parse_requirements,
	"go modules": parse_go_mod,
	"cargo": parse_cargo_toml,
})


def parse_manifest(path: str, manager: str) -> Optional[PackageManager]:
	"""Parse one manifest; None when unreadable or when it declares nothing."""
	try:
		with open(path, "r", encoding="utf-8", errors="replace") as fh:
			text = fh.read()
	except OSError as exc:
		logger.debug("Skipping unreadable manifest %s: %s", path, exc)
		return None

	deps: Dict[str, str] = {}
	dev_deps: Dict[str, str] = {}
	PARSERS.get(manager, parse_generic)(text, deps, dev_deps)
	if not deps and not dev_deps:
		logger.debug("No dependencies found in %s", path)
		return None
	return PackageManager(name=manager, config_files=[path], dependencies=deps, dev_dependencies=dev_deps)


def analyze_package_managers(
	files_by_type: Mapping[str, Iterable[FileRecord]],
) -> Tuple[Dict[str, PackageManager], List[str]]:
	"""Return the package managers by kind and the flat external dependency list.

	Several manifests of one kind (e.g. a package.json per workspace package)
	are merged into a single entry; a later manifest only overrides an earlier
	one on identical dependency names.
	"""
	managers: Dict[str, PackageManager] = {}
	external_deps: List[str] = []
	for files in files_by_type.values():
		for record in files:
			manager = MANIFEST_FILES.get(os.path.basename(record.path))
			if manager is None:
				continue
			pm = parse_manifest(record.path, manager)
			if pm is None:
				continue

			existing = managers.get(manager)
			managers[manager] = pm if existing is None else existing.merged(pm)
			external_deps.extend(pm.dependencies)
			logger.debug("Parsed %s manifest %s: %d dependencies", manager, record.path, len(pm.dependencies))
	return managers, external_deps
