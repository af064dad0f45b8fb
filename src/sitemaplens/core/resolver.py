# SitemapLens — Recursive sitemap resolution (index expansion, revisit guard)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Dict, List, Optional, Set

from .document import DocumentNode, EmptyNode, IndexNode, UrlsetNode, parse_document
from .errors import ResolutionCancelled, SitemapError
from .models import ResolutionReport, SitemapEntry, SitemapFailure
from .source import SourceReader
from ..utils.urls import is_xml_source


logger = logging.getLogger(__name__)

ON_ERROR_MODES = ("raise", "collect")


class ResolveOptions:
	def __init__(
		self,
		on_error: str = "raise",
		skip_revisits: bool = True,
		max_depth: Optional[int] = None,
		max_workers: int = 1,
	):
		if on_error not in ON_ERROR_MODES:
			raise ValueError(f"on_error must be one of {ON_ERROR_MODES}, got {on_error!r}")
		self.on_error = on_error
		self.skip_revisits = skip_revisits
		self.max_depth = None if max_depth is None else max(0, int(max_depth))
		self.max_workers = max(1, int(max_workers))


class _Session:
	"""State of one top-level resolution. Never shared between calls."""

	def __init__(self, options: ResolveOptions, stop_flag: Optional[Callable[[], bool]]) -> None:
		self.options = options
		self.stop_flag = stop_flag
		self.report = ResolutionReport()
		self.seen: Set[str] = set()
		self.inflight: Dict[str, Future] = {}
		self.executor: Optional[ThreadPoolExecutor] = None
		if options.max_workers > 1:
			self.executor = ThreadPoolExecutor(max_workers=options.max_workers, thread_name_prefix="sitemaplens")

	def check_cancelled(self, source: str) -> None:
		if self.stop_flag and self.stop_flag():
			raise ResolutionCancelled("Resolution cancelled", source=source)

	def close(self) -> None:
		for f in self.inflight.values():
			f.cancel()
		self.inflight.clear()
		if self.executor is not None:
			self.executor.shutdown(wait=True, cancel_futures=True)


class SitemapResolver:
	"""Resolve a sitemap index or urlset into a flat list of page entries.

	Index children whose location ends in ``.xml`` are resolved depth-first;
	every other child becomes a leaf entry. Result order is document order.
	With ``max_workers > 1`` sibling child sitemaps are fetched concurrently
	but still merged in document order.
	"""

	def __init__(self, reader: Optional[SourceReader] = None, options: Optional[ResolveOptions] = None) -> None:
		self.reader = reader if reader is not None else SourceReader()
		self.options = options if options is not None else ResolveOptions()

	@classmethod
	def from_settings(cls, cfg) -> "SitemapResolver":
		reader = SourceReader(timeout=cfg.timeout, user_agent=cfg.user_agent)
		options = ResolveOptions(
			on_error=cfg.on_error,
			skip_revisits=cfg.skip_revisits,
			max_depth=cfg.max_depth,
			max_workers=cfg.max_workers,
		)
		return cls(reader=reader, options=options)

	def resolve(self, source: str, stop_flag: Optional[Callable[[], bool]] = None) -> List[SitemapEntry]:
		return self.resolve_report(source, stop_flag=stop_flag).entries

	def resolve_report(self, source: str, stop_flag: Optional[Callable[[], bool]] = None) -> ResolutionReport:
		session = _Session(self.options, stop_flag)
		logger.info("Resolving sitemap %s", source)
		try:
			self._resolve(session, source, depth=0, ancestors=[])
		finally:
			session.close()
		report = session.report
		logger.info(
			"Resolved %s: %d entries from %d sitemaps (%d failed, %d skipped)",
			source,
			len(report.entries),
			len(report.visited),
			len(report.failures),
			len(report.skipped),
		)
		return report

	def _load(self, session: _Session, source: str) -> DocumentNode:
		data = self.reader.read(source, stop_flag=session.stop_flag)
		return parse_document(data, source=source)

	def _resolve(
		self,
		session: _Session,
		source: str,
		depth: int,
		ancestors: List[str],
		pending: Optional[Future] = None,
	) -> None:
		session.seen.add(source)
		session.report.visited.append(source)
		node = pending.result() if pending is not None else self._load(session, source)

		if isinstance(node, EmptyNode):
			logger.debug("No locations in %s", source)
		elif isinstance(node, UrlsetNode):
			logger.debug("Urlset %s: %d urls", source, len(node.children))
			for ref in node.children:
				if not ref.loc:
					logger.warning("Skipping <url> without <loc> in %s", source)
					continue
				session.report.entries.append(SitemapEntry(ref.loc, ref.lastmod))
		elif isinstance(node, IndexNode):
			logger.debug("Sitemap index %s: %d sitemaps", source, len(node.children))
			self._expand_index(session, source, node, depth, ancestors)
		else:
			raise TypeError(f"Unexpected document node {type(node).__name__}")

	def _should_follow(self, session: _Session, loc: str, depth: int) -> bool:
		if session.options.skip_revisits and loc in session.seen:
			return False
		max_depth = session.options.max_depth
		return max_depth is None or depth + 1 <= max_depth

	def _prefetch(self, session: _Session, node: IndexNode, depth: int) -> None:
		"""Start loads for the children of one index; each loc is loaded at most once per session."""
		if session.executor is None:
			return
		for ref in node.children:
			loc = ref.loc
			if loc and loc not in session.inflight and is_xml_source(loc) and self._should_follow(session, loc, depth):
				session.inflight[loc] = session.executor.submit(self._load, session, loc)

	def _expand_index(self, session: _Session, source: str, node: IndexNode, depth: int, ancestors: List[str]) -> None:
		report = session.report
		self._prefetch(session, node, depth)
		for ref in node.children:
			session.check_cancelled(source)
			loc = ref.loc
			if not loc:
				logger.warning("Skipping <sitemap> without <loc> in %s", source)
				continue
			if not is_xml_source(loc):
				# non-.xml index locations are leaf entries, never fetched
				logger.warning("Sitemap location %s in %s is not .xml; recording it as an entry", loc, source)
				report.entries.append(SitemapEntry(loc, ref.lastmod))
				continue
			if not self._should_follow(session, loc, depth):
				logger.warning("Not following %s from %s (already visited or too deep)", loc, source)
				report.skipped.append(loc)
				continue
			try:
				self._resolve(session, loc, depth + 1, [source] + ancestors, pending=session.inflight.pop(loc, None))
			except ResolutionCancelled as e:
				raise e.within(source)
			except SitemapError as e:
				e.within(source)
				if session.options.on_error != "collect":
					raise
				e.trail.extend(ancestors)
				logger.warning("Failed child sitemap %s: %s", e.source or loc, e.message)
				report.failures.append(SitemapFailure(source=e.source or loc, error=e, trail=list(e.trail)))
