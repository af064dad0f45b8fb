import pytest
from sitemaplens.utils.urls import is_absolute_url, source_extension, is_xml_source


def test_is_absolute_url():
	assert is_absolute_url("https://example.com/sitemap.xml")
	assert is_absolute_url("HTTP://Example.com/a.xml")
	assert not is_absolute_url("ftp://example.com/sitemap.xml")
	assert not is_absolute_url("/var/www/sitemap.xml")
	assert not is_absolute_url("https:///nohost.xml")


@pytest.mark.parametrize(
	"source, ext",
	[
		("https://example.com/sitemap.xml", ".xml"),
		("https://example.com/sitemap.xml?page=2", ".xml"),
		("https://example.com/sitemap.php?type=xml", ".php"),
		("https://example.com/", ""),
		("fixtures/sitemap.xml", ".xml"),
		("fixtures/sitemap.xml.gz", ".gz"),
	],
)
def test_source_extension(source, ext):
	assert source_extension(source) == ext


def test_is_xml_source_is_case_sensitive():
	assert is_xml_source("sitemap.xml")
	assert not is_xml_source("SITEMAP.XML")
