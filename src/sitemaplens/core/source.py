# SitemapLens — Source reader: URL or local path to raw bytes
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import os
from typing import Callable, Optional

import requests

from .errors import FetchError, NotFound, ResolutionCancelled, UnsupportedFormat
from ..utils.net import build_session
from ..utils.urls import is_absolute_url, is_xml_source


logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Sitemap file does not exist"


class SourceReader:
	"""Reads a sitemap source into bytes with exactly one fetch or file read.

	Only ``.xml`` sources are accepted. URLs are fetched with redirects
	followed; any final status of 300 or above is a failure.
	"""

	def __init__(
		self,
		session: Optional[requests.Session] = None,
		timeout: float = 30.0,
		user_agent: str = "SitemapLens/0.1 (+https://example.com)",
	) -> None:
		self.session = session if session is not None else build_session(user_agent=user_agent)
		self.timeout = timeout

	def read(self, source: str, stop_flag: Optional[Callable[[], bool]] = None) -> bytes:
		if stop_flag and stop_flag():
			raise ResolutionCancelled("Resolution cancelled", source=source)
		if not is_xml_source(source):
			raise UnsupportedFormat(f"Unsupported sitemap format (expected .xml): {source}", source=source)
		if is_absolute_url(source):
			return self._fetch_url(source)
		return self._read_file(source)

	def _fetch_url(self, url: str) -> bytes:
		try:
			r = self.session.get(url, timeout=self.timeout, allow_redirects=True)
		except requests.Timeout as e:
			raise FetchError(f"Timed out after {self.timeout}s fetching {url}: {e}", source=url) from e
		except requests.RequestException as e:
			raise FetchError(f"Error fetching {url}: {e}", source=url) from e
		if r.status_code >= 300:
			raise FetchError(f"HTTP {r.status_code} fetching {url}", source=url)
		logger.debug("Fetched %s (%d bytes)", url, len(r.content))
		return r.content

	def _read_file(self, path: str) -> bytes:
		if not os.path.exists(path):
			raise NotFound(NOT_FOUND_MESSAGE, source=path)
		try:
			with open(path, "rb") as f:
				data = f.read()
		except OSError as e:
			raise FetchError(f"Error reading {path}: {e}", source=path) from e
		logger.debug("Read %s (%d bytes)", path, len(data))
		return data
