# RoboLens — Networking utilities (requests session with retries)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


def build_session(user_agent: str, retries: int = 3, backoff: float = 0.5, max_redirects: int = 5) -> requests.Session:
	"""Build a requests Session for robots.txt retrieval.

	Retries cover connection errors and 429/5xx answers. Once retries are
	exhausted the final response is returned as-is so the status code can be
	mapped to an access result. Redirects are capped at ``max_redirects`` hops.
	"""
	s = requests.Session()
	s.headers.update(
		{
			"User-Agent": user_agent,
			"Accept": "text/plain,*/*;q=0.8",
		}
	)
	s.max_redirects = max_redirects
	retry = Retry(
		total=retries,
		backoff_factor=backoff,
		status_forcelist=(429, 500, 502, 503, 504),
		allowed_methods=frozenset({"GET", "HEAD"}),
		raise_on_status=False,
	)
	adapter = HTTPAdapter(max_retries=retry)
	s.mount("http://", adapter)
	s.mount("https://", adapter)
	return s
