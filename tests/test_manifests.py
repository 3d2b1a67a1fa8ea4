from textwrap import dedent

from crawler.fs_scan import walk_tree
from crawler.manifests import (
	analyze_package_managers,
	parse_cargo_toml,
	parse_generic,
	parse_go_mod,
	parse_manifest,
	parse_package_json,
	parse_requirements,
)
from crawler.summarize import group_by_language


def _parse(parser, text):
	deps, dev_deps = {}, {}
	parser(text, deps, dev_deps)
	return deps, dev_deps


def _analyze(root):
	scan = walk_tree(str(root))
	return analyze_package_managers(group_by_language(scan.files))


def test_package_json_dependencies(make_tree):
	root = make_tree({"package.json": '{"dependencies":{"left-pad":"1.0.0"}}'})
	managers, external_deps = _analyze(root)
	npm = managers["npm"]
	assert npm.dependencies == {"left-pad": "1.0.0"}
	assert npm.config_files == [str(root / "package.json")]
	assert "left-pad" in external_deps


def test_package_json_skips_non_string_versions():
	deps, dev_deps = _parse(
		parse_package_json,
		'{"dependencies": {"a": "^1", "b": {"version": "2"}}, "devDependencies": {"jest": "29"}}',
	)
	assert deps == {"a": "^1"}
	assert dev_deps == {"jest": "29"}


def test_package_json_malformed_or_not_an_object():
	for text in ("{not json", "[1, 2]", '{"dependencies": ["a"]}'):
		assert _parse(parse_package_json, text) == ({}, {})


def test_requirements_txt(make_tree):
	root = make_tree({"requirements.txt": "flask==2.0\n# comment\n\n"})
	managers, _ = _analyze(root)
	assert managers["pip"].dependencies == {"flask": "==2.0"}


def test_requirements_unspecified_and_bad_lines():
	deps, _ = _parse(parse_requirements, "requests\ndjango>=4,<5\n-e git+https://x\n  numpy~=1.26  \n")
	assert deps == {
		"requests": "unspecified",
		"django": ">=4,<5",
		"numpy": "~=1.26",
	}


def test_go_mod_block_and_single_line():
	deps, _ = _parse(
		parse_go_mod,
		dedent(
			"""
			module example.com/app

			go 1.21

			require github.com/single/dep v0.1.0

			require (
				github.com/pkg/errors v0.9.1
				golang.org/x/sys v0.10.0 // indirect
			)
			"""
		),
	)
	assert deps == {
		"github.com/single/dep": "v0.1.0",
		"github.com/pkg/errors": "v0.9.1",
		"golang.org/x/sys": "v0.10.0",
	}


def test_cargo_dependencies_section_only():
	deps, _ = _parse(
		parse_cargo_toml,
		dedent(
			"""
			[package]
			name = "demo"
			version = "0.1.0"

			[dependencies]
			serde = "1.0"
			tokio = { version = "1", features = ["full"] }

			[dev-dependencies]
			proptest = "1"
			"""
		),
	)
	assert deps == {
		"serde": "1.0",
		"tokio": '{ version = "1", features = ["full"] }',
	}


def test_cargo_splits_on_first_equals_only():
	deps, _ = _parse(parse_cargo_toml, '[dependencies]\ntokio = { version = "1" }\nserde = "1.0"\n')
	assert set(deps) == {"tokio", "serde"}
	assert deps["tokio"] == '{ version = "1" }'


def test_generic_parser():
	deps, _ = _parse(parse_generic, "source 'https://rubygems.org'\n# comment\n// other\n\ngem 'rails'\n")
	assert deps == {
		"source 'https://rubygems.org'": "unknown",
		"gem 'rails'": "unknown",
	}


def test_empty_manifest_is_discarded(make_tree):
	root = make_tree({"requirements.txt": "# nothing\n", "package.json": "{}"})
	assert _analyze(root) == ({}, [])


def test_unreadable_manifest_returns_none(tmp_path):
	assert parse_manifest(str(tmp_path / "missing" / "go.mod"), "go modules") is None


def test_same_kind_manifests_are_merged(make_tree):
	root = make_tree({
		"web/package.json": '{"dependencies":{"react":"18","lodash":"4"}}',
		"api/package.json": '{"dependencies":{"express":"4","lodash":"4.17"}}',
	})
	managers, external_deps = _analyze(root)
	npm = managers["npm"]
	assert set(npm.dependencies) == {"react", "lodash", "express"}
	# api/ is visited before web/
	assert npm.dependencies["lodash"] == "4"
	assert len(npm.config_files) == 2
	assert sorted(external_deps) == ["express", "lodash", "lodash", "react"]
