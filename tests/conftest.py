import requests


class MockResponse:
	def __init__(self, content, status_code=200):
		self.content = content.encode("utf-8") if isinstance(content, str) else content
		self.status_code = status_code


class MockSession:
	"""Maps URLs to XML bodies, (status, body) tuples, or exceptions."""

	def __init__(self, mapping):
		self.mapping = mapping
		self.calls = []
		self.kwargs = []

	def get(self, url, timeout=None, allow_redirects=True):
		self.calls.append(url)
		self.kwargs.append({"timeout": timeout, "allow_redirects": allow_redirects})
		value = self.mapping.get(url)
		if value is None:
			raise requests.ConnectionError(f"no route to {url}")
		if isinstance(value, Exception):
			raise value
		if isinstance(value, tuple):
			return MockResponse(value[1], status_code=value[0])
		return MockResponse(value)


def urlset(*pairs):
	body = "".join(
		f"<url><loc>{loc}</loc>" + (f"<lastmod>{mod}</lastmod>" if mod else "") + "</url>"
		for loc, mod in pairs
	)
	return f'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{body}</urlset>'


def sitemapindex(*locs):
	body = "".join(f"<sitemap><loc>{loc}</loc></sitemap>" for loc in locs)
	return f'<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{body}</sitemapindex>'
