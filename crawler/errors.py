from __future__ import annotations


class CrawlerError(Exception):
	"""Base class for errors that abort a scan."""


class RootPathError(CrawlerError):
	"""The scan root does not exist or cannot be stat'ed."""

	def __init__(self, path: str, reason: str = "does not exist"):
		super().__init__(f"Path {reason}: {path}")
		self.path = path
		self.reason = reason
