# SitemapLens — Error kinds raised while resolving sitemaps
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import List, Optional


class SitemapError(Exception):
	"""Base error. Carries the failing source and the chain of parent sitemaps.

	``trail`` lists the enclosing sources from the nearest parent up to the
	top-level source. It stays empty when the failure happened at the top.
	"""

	def __init__(self, message: str, source: Optional[str] = None) -> None:
		super().__init__(message)
		self.message = message
		self.source = source
		self.trail: List[str] = []

	def within(self, parent: str) -> "SitemapError":
		self.trail.append(parent)
		return self

	def describe(self) -> str:
		parts = [self.message]
		if self.source:
			parts.append(f"source: {self.source}")
		if self.trail:
			parts.append("via: " + " <- ".join(self.trail))
		return "; ".join(parts)

	def __str__(self) -> str:
		if not self.trail:
			return self.message
		return f"{self.message} (source: {self.source}, via: {' <- '.join(self.trail)})"


class NotFound(SitemapError):
	pass


class FetchError(SitemapError):
	pass


class UnsupportedFormat(SitemapError):
	pass


class ParseError(SitemapError):
	pass


class ResolutionCancelled(SitemapError):
	pass


__all__ = [
	"SitemapError",
	"NotFound",
	"FetchError",
	"UnsupportedFormat",
	"ParseError",
	"ResolutionCancelled",
]
