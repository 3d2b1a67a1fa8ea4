from crawler.fs_scan import walk_tree
from crawler.model import FileRecord
from crawler.summarize import (
	build_statistics,
	build_summary,
	format_bytes,
	group_by_language,
	largest_files,
)


def _record(name, size, language="Text", lines=None):
	return FileRecord(
		path=f"/r/{name}",
		rel_path=name,
		name=name,
		size=size,
		extension=".txt",
		language=language,
		lines=lines,
	)


def test_scenario_go_and_python(make_tree):
	root = make_tree({
		"a.go": ("x" * 19 + "\n") * 5,
		"b.py": ("y" * 19 + "\n") * 10,
	})
	scan = walk_tree(str(root))
	files_by_type = group_by_language(scan.files)
	summary = build_summary(scan, files_by_type)
	stats = build_statistics(scan, files_by_type)

	assert summary.total_files == 2
	assert summary.total_size == 300
	assert summary.languages == {"Go": 1, "Python": 1}
	assert stats.files_by_language == summary.languages
	assert stats.total_lines == 15
	assert stats.avg_file_size == 150
	assert [f.name for f in summary.largest_files] == ["b.py", "a.go"]


def test_largest_files_top_ten_with_stable_ties():
	records = [_record(f"f{i}", size) for i, size in enumerate([5, 50, 5, 7, 50, 1, 2, 3, 4, 6, 8, 9, 5])]
	top = largest_files(records)
	assert len(top) == 10
	sizes = [r.size for r in top]
	assert sizes == sorted(sizes, reverse=True)
	assert [r.name for r in top[:2]] == ["f1", "f4"]
	# the three size-5 files come in discovery order
	assert [r.name for r in top if r.size == 5] == ["f0", "f2", "f12"]


def test_largest_files_fewer_than_limit():
	records = [_record("a", 1), _record("b", 3), _record("c", 2)]
	assert [r.name for r in largest_files(records)] == ["b", "c", "a"]


def test_empty_tree_statistics(tmp_path):
	scan = walk_tree(str(tmp_path))
	stats = build_statistics(scan, {})
	summary = build_summary(scan, {})
	assert stats.avg_file_size == 0
	assert stats.total_lines == 0
	assert summary.total_dirs == 1
	assert summary.largest_files == []


def test_average_truncates(make_tree):
	root = make_tree({"a.bin": "x", "b.bin": "xx", "c.bin": "xxxxx"})
	scan = walk_tree(str(root))
	stats = build_statistics(scan, group_by_language(scan.files))
	assert stats.avg_file_size == 2
	assert abs(stats.avg_file_size * scan.total_files - scan.total_size) < scan.total_files


def test_lines_only_from_text_files(make_tree):
	root = make_tree({"a.py": "# c\n\nx = 1\n", "blob.dat": "1\n2\n3\n"})
	scan = walk_tree(str(root))
	stats = build_statistics(scan, group_by_language(scan.files))
	assert stats.total_lines == 3
	assert stats.blank_lines == 1
	assert stats.comment_lines == 1
	assert stats.code_lines == 1


def test_format_bytes():
	assert format_bytes(512) == "512 B"
	assert format_bytes(1536) == "1.5 KB"
	assert format_bytes(1024 * 1024) == "1.0 MB"
