# SitemapLens — URL utilities: absolute URL checks and extension sniffing
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os
from urllib.parse import urlparse


ALLOWED_SCHEMES = {"http", "https"}


def is_absolute_url(value: str) -> bool:
	"""True for http(s) URLs with a host. Anything else is treated as a path."""
	try:
		p = urlparse(value)
	except ValueError:
		return False
	return p.scheme.lower() in ALLOWED_SCHEMES and bool(p.netloc)


def source_extension(source: str) -> str:
	"""Return the extension of a URL path or filesystem path, including the dot.

	Query strings and fragments of URLs are ignored.
	"""
	if is_absolute_url(source):
		path = urlparse(source).path
	else:
		path = source
	return os.path.splitext(path)[1]


def is_xml_source(source: str) -> bool:
	return source_extension(source) == ".xml"


__all__ = [
	"is_absolute_url",
	"source_extension",
	"is_xml_source",
]
