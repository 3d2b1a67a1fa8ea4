from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

import uvicorn

from crawler import __version__
from crawler.config import DEFAULT_EXCLUDE_DIRS, ScanConfig, parse_exclude_dirs
from crawler.errors import CrawlerError
from crawler.pipeline import analyze_repository, save_analysis
from crawler.summarize import format_overview


logger = logging.getLogger("crawler")


def _configure_logging(verbose: bool) -> None:
	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.INFO,
		format="%(levelname)s | %(message)s",
	)


def cmd_analyze(args: argparse.Namespace) -> int:
	_configure_logging(args.verbose)
	config = ScanConfig(
		target_path=os.path.abspath(args.path),
		output_path=args.output,
		exclude_dirs=parse_exclude_dirs(args.exclude),
		follow_symlinks=args.follow_symlinks,
		verbose=args.verbose,
	)
	try:
		doc = analyze_repository(config)
	except CrawlerError as exc:
		logger.error("Scan failed: %s", exc)
		return 1

	if args.stdout:
		print(doc.model_dump_json(indent=2))
		return 0

	try:
		save_analysis(doc, config.output_path)
	except OSError as exc:
		logger.error("Failed to save data: %s", exc)
		return 1
	print(format_overview(doc))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="crawler")
	parser.add_argument("--version", action="version", version=f"Code Crawler v{__version__}")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Analyze a repository and save the analysis JSON")
	pa.add_argument("path", nargs="?", default=".", help="Path to repository root")
	pa.add_argument("--output", default=".analysis", help="Output directory for analysis files")
	pa.add_argument(
		"--exclude",
		default=",".join(DEFAULT_EXCLUDE_DIRS),
		help="Comma-separated names to exclude ('.hidden' excludes dot-files)",
	)
	pa.add_argument("--follow-symlinks", action="store_true")
	pa.add_argument("--stdout", action="store_true", help="Print the JSON instead of saving it")
	pa.add_argument("--verbose", action="store_true")
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
