from datetime import timedelta

import requests

from robolens.core.directive import BYTES_LIMIT
from robolens.core.fetch import access_for_status, fetch_robots, fetch_robots_for
from robolens.core.robots import AccessKind
from robolens.utils.net import build_session


class MockResponse:
	def __init__(self, status_code=200, chunks=()):
		self.status_code = status_code
		self.chunks = list(chunks)
		self.closed = False

	def iter_content(self, chunk_size=1):
		for c in self.chunks:
			yield c

	def __enter__(self):
		return self

	def __exit__(self, *exc):
		self.closed = True
		return False


class MockSession:
	def __init__(self, mapping):
		self.mapping = mapping
		self.requested = []

	def get(self, url, timeout=10, stream=False):
		self.requested.append(url)
		outcome = self.mapping[url]
		if isinstance(outcome, Exception):
			raise outcome
		return outcome


ROBOTS = "https://example.com/robots.txt"


def test_successful_fetch_targets_robots_txt():
	s = MockSession({ROBOTS: MockResponse(200, [b"User-agent: *\n", b"Disallow: /x\n"])})
	access = fetch_robots(s, "https://Example.com/some/page?q=1")
	assert s.requested == [ROBOTS]
	assert access.kind is AccessKind.SUCCESSFUL
	assert access.body == b"User-agent: *\nDisallow: /x\n"


def test_body_is_capped():
	chunk = b"#" * 100_000
	s = MockSession({ROBOTS: MockResponse(200, [chunk] * 10)})
	access = fetch_robots(s, "https://example.com/")
	assert len(access.body) == BYTES_LIMIT


def test_status_mapping():
	assert access_for_status(404).kind is AccessKind.UNAVAILABLE
	assert access_for_status(403).kind is AccessKind.UNAVAILABLE
	assert access_for_status(429).kind is AccessKind.UNREACHABLE
	assert access_for_status(503).kind is AccessKind.UNREACHABLE
	for status, kind in [(404, AccessKind.UNAVAILABLE), (500, AccessKind.UNREACHABLE)]:
		response = MockResponse(status)
		access = fetch_robots(MockSession({ROBOTS: response}), "https://example.com/")
		assert access.kind is kind
		assert response.closed


def test_network_errors_are_unreachable():
	s = MockSession({ROBOTS: requests.ConnectionError("refused")})
	assert fetch_robots(s, "https://example.com/").kind is AccessKind.UNREACHABLE
	s = MockSession({ROBOTS: requests.Timeout("slow")})
	assert fetch_robots(s, "https://example.com/").kind is AccessKind.UNREACHABLE


def test_too_many_redirects():
	s = MockSession({ROBOTS: requests.TooManyRedirects("loop")})
	assert fetch_robots(s, "https://example.com/").kind is AccessKind.REDIRECT


def test_fetch_robots_for_builds_decisions():
	body = [b"User-agent: bot\nDisallow: /private\nCrawl-delay: 2\n"]
	s = MockSession({ROBOTS: MockResponse(200, body)})
	r = fetch_robots_for(s, "https://example.com/", "bot")
	assert not r.is_allowed("/private")
	assert r.crawl_delay() == timedelta(seconds=2)

	s = MockSession({ROBOTS: MockResponse(503)})
	assert not fetch_robots_for(s, "https://example.com/", "bot").is_allowed("/")
	s = MockSession({ROBOTS: MockResponse(404)})
	assert fetch_robots_for(s, "https://example.com/", "bot").is_allowed("/private")


def test_build_session_defaults():
	s = build_session("TestBot/1.0", retries=1, backoff=0, max_redirects=3)
	assert s.headers["User-Agent"] == "TestBot/1.0"
	assert s.max_redirects == 3
	adapter = s.get_adapter("https://example.com/")
	assert adapter.max_retries.total == 1
	assert 503 in adapter.max_retries.status_forcelist
