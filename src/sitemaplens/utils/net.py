# SitemapLens — Networking utilities (requests session)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import requests
from requests.adapters import HTTPAdapter


def build_session(user_agent: str) -> requests.Session:
	"""Build a requests Session for sitemap fetches.

	Retries are disabled so each read is exactly one request.
	"""
	s = requests.Session()
	s.headers.update(
		{
			"User-Agent": user_agent,
			"Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8",
		}
	)
	adapter = HTTPAdapter(max_retries=0)
	s.mount("http://", adapter)
	s.mount("https://", adapter)
	return s
