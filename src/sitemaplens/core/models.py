# SitemapLens — Result records
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .errors import SitemapError


@dataclass(frozen=True)
class SitemapEntry:
	"""A discovered page location and its optional lastmod text."""

	location: str
	last_modified: str = ""

	def to_dict(self) -> Dict[str, Any]:
		return {"location": self.location, "last_modified": self.last_modified}


@dataclass(frozen=True)
class SitemapFailure:
	"""A child sitemap that failed while resolving in collect mode."""

	source: str
	error: SitemapError
	trail: List[str] = field(default_factory=list)


class ResolutionReport:
	def __init__(self) -> None:
		self.entries: List[SitemapEntry] = []
		self.failures: List[SitemapFailure] = []
		self.skipped: List[str] = []
		self.visited: List[str] = []

	@property
	def ok(self) -> bool:
		return not self.failures
