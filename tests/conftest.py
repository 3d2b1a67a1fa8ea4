from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
	"""Create files from a {relative path: content} mapping under tmp_path/repo."""

	def _make(files: Dict[str, str]) -> Path:
		root = tmp_path / "repo"
		root.mkdir(exist_ok=True)
		for rel, content in files.items():
			path = root / rel
			path.parent.mkdir(parents=True, exist_ok=True)
			path.write_bytes(content.encode("utf-8"))
		return root

	return _make
