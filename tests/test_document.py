import pytest
from sitemaplens.core.document import (
	EmptyNode,
	IndexNode,
	SitemapRef,
	UrlRef,
	UrlsetNode,
	local_name,
	parse_document,
)
from sitemaplens.core.errors import ParseError


def test_local_name():
	assert local_name("{http://www.sitemaps.org/schemas/sitemap/0.9}url") == "url"
	assert local_name("url") == "url"


def test_parse_urlset_with_namespace():
	xml = b"""<?xml version="1.0" encoding="UTF-8"?>
	<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
		<url><loc> https://example.com/a </loc><lastmod>2024-01-01</lastmod></url>
		<url><loc>https://example.com/b</loc></url>
	</urlset>
	"""
	node = parse_document(xml)
	assert node == UrlsetNode([
		UrlRef("https://example.com/a", "2024-01-01"),
		UrlRef("https://example.com/b", ""),
	])


def test_parse_index_without_namespace():
	xml = b"<sitemapindex><sitemap><loc>https://example.com/sub.xml</loc><lastmod>2024-02-02</lastmod></sitemap></sitemapindex>"
	node = parse_document(xml)
	assert isinstance(node, IndexNode)
	assert node.children == [SitemapRef("https://example.com/sub.xml", "2024-02-02")]


def test_sitemap_children_win_over_url_children():
	xml = b"<root><url><loc>https://example.com/a</loc></url><sitemap><loc>https://example.com/s.xml</loc></sitemap></root>"
	node = parse_document(xml)
	assert isinstance(node, IndexNode)
	assert [c.loc for c in node.children] == ["https://example.com/s.xml"]


def test_only_direct_children_are_classified():
	xml = b"<urlset><group><url><loc>https://example.com/a</loc></url></group></urlset>"
	assert parse_document(xml) == EmptyNode()


def test_empty_urlset():
	assert parse_document(b'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"/>') == EmptyNode()


def test_missing_loc_gives_empty_text():
	node = parse_document(b"<urlset><url><lastmod>2024-01-01</lastmod></url></urlset>")
	assert node.children == [UrlRef("", "2024-01-01")]


def test_malformed_xml_raises_parse_error():
	with pytest.raises(ParseError) as exc:
		parse_document(b"<urlset><url></urlset>", source="broken.xml")
	assert exc.value.source == "broken.xml"
	assert "mismatched tag" in exc.value.message


def test_multibyte_declared_encoding_is_decoded():
	xml = (
		'<?xml version="1.0" encoding="Shift_JIS"?>'
		"<urlset><url><loc>https://example.jp/ニュース</loc><lastmod>2024-01-01</lastmod></url></urlset>"
	).encode("shift_jis")
	assert parse_document(xml) == UrlsetNode([UrlRef("https://example.jp/ニュース", "2024-01-01")])


def test_euc_jp_index_is_decoded():
	xml = (
		"<?xml version='1.0' encoding='EUC-JP'?>"
		"<sitemapindex><sitemap><loc>https://example.jp/地図.xml</loc></sitemap></sitemapindex>"
	).encode("euc_jp")
	assert parse_document(xml) == IndexNode([SitemapRef("https://example.jp/地図.xml", "")])


def test_undecodable_multibyte_document_raises_parse_error():
	xml = b'<?xml version="1.0" encoding="GB2312"?><urlset><url><loc>\xff\xff</loc></url></urlset>'
	with pytest.raises(ParseError) as exc:
		parse_document(xml, source="gb.xml")
	assert exc.value.source == "gb.xml"
