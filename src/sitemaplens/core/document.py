# SitemapLens — Sitemap documents: XML bytes to typed nodes
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from dataclasses import dataclass, field
import re
from typing import List, Optional, Union
import xml.etree.ElementTree as ET

from .errors import ParseError


@dataclass(frozen=True)
class SitemapRef:
	"""A <sitemap> child of a sitemap index."""

	loc: str
	lastmod: str = ""


@dataclass(frozen=True)
class UrlRef:
	"""A <url> child of a urlset."""

	loc: str
	lastmod: str = ""


@dataclass(frozen=True)
class IndexNode:
	children: List[SitemapRef] = field(default_factory=list)


@dataclass(frozen=True)
class UrlsetNode:
	children: List[UrlRef] = field(default_factory=list)


@dataclass(frozen=True)
class EmptyNode:
	pass


DocumentNode = Union[IndexNode, UrlsetNode, EmptyNode]


def local_name(tag: str) -> str:
	"""Strip an ElementTree ``{namespace}`` prefix from a tag."""
	if isinstance(tag, str) and tag.startswith("{"):
		return tag.rsplit("}", 1)[1]
	return tag if isinstance(tag, str) else ""


def _children(el: ET.Element, name: str) -> List[ET.Element]:
	return [c for c in el if local_name(c.tag) == name]


def _child_text(el: ET.Element, name: str) -> str:
	found: Optional[ET.Element] = next(iter(_children(el, name)), None)
	if found is None:
		return ""
	return (found.text or "").strip()


XML_DECLARATION = re.compile(rb"""^\s*<\?xml[^>]*?encoding\s*=\s*["']([A-Za-z0-9._-]+)["'][^>]*\?>""")
TEXT_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


def _decode_declared(content: bytes) -> Optional[str]:
	"""Decode with the codec named in the XML declaration and drop the declaration.

	expat only handles single-byte declared encodings itself, so Shift_JIS,
	EUC-JP, GB2312 and similar documents are decoded up front.
	"""
	m = XML_DECLARATION.match(content)
	if not m:
		return None
	try:
		text = content.decode(m.group(1).decode("ascii"))
	except (LookupError, UnicodeDecodeError):
		return None
	return TEXT_DECLARATION.sub("", text, count=1)


def _parse_root(content: bytes, source: Optional[str]) -> ET.Element:
	try:
		return ET.fromstring(content)
	except ET.ParseError as e:
		raise ParseError(f"Error parsing sitemap XML: {e}", source=source) from e
	except ValueError as e:
		text = _decode_declared(content)
		if text is None:
			raise ParseError(f"Error parsing sitemap XML: {e}", source=source) from e
	try:
		return ET.fromstring(text)
	except ET.ParseError as e:
		raise ParseError(f"Error parsing sitemap XML: {e}", source=source) from e


def parse_document(content: bytes, source: Optional[str] = None) -> DocumentNode:
	"""Parse sitemap XML and classify the root by its direct children.

	Any ``<sitemap>`` child makes an index; otherwise any ``<url>`` child makes
	a urlset; otherwise the document is empty. Namespaces are ignored.
	"""
	root = _parse_root(content, source)

	sitemaps = _children(root, "sitemap")
	if sitemaps:
		return IndexNode([SitemapRef(_child_text(s, "loc"), _child_text(s, "lastmod")) for s in sitemaps])
	urls = _children(root, "url")
	if urls:
		return UrlsetNode([UrlRef(_child_text(u, "loc"), _child_text(u, "lastmod")) for u in urls])
	return EmptyNode()
