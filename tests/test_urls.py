from robolens.utils.urls import parse_sitemap, relative_path, robots_url


def test_robots_url():
	assert robots_url("HTTP://Example.COM:80/a/b?x=1#frag") == "http://example.com/robots.txt"
	assert robots_url("https://example.com:443/") == "https://example.com/robots.txt"
	assert robots_url("https://example.com:8443/x") == "https://example.com:8443/robots.txt"
	assert robots_url("example.com/page") == "https://example.com/robots.txt"


def test_relative_path():
	assert relative_path("https://example.com/a/b?x=1#frag") == "/a/b?x=1"
	assert relative_path("https://example.com") == "/"
	assert relative_path("/already/relative") == "/already/relative"


def test_parse_sitemap():
	assert parse_sitemap(" https://example.com/s.xml ") == "https://example.com/s.xml"
	assert parse_sitemap("/s.xml") is None
	assert parse_sitemap("sitemap.xml") is None
	assert parse_sitemap("") is None


def test_parse_sitemap_rejects_malformed_hosts():
	assert parse_sitemap("https://exa mple.com/s.xml") is None
	assert parse_sitemap("https://example.com:99999/s.xml") is None
	assert parse_sitemap("https://example.com:http/s.xml") is None
	assert parse_sitemap("https://:80/s.xml") is None
	assert parse_sitemap("https://example.com:8080/s.xml") == "https://example.com:8080/s.xml"
