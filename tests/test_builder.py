import io

import pytest

from robolens.core.builder import Group, RobotsBuilder
from robolens.core.robots import Robots


def test_build_layout():
	text = (
		RobotsBuilder()
		.header("Generated file\ndo not edit")
		.group(Group("*").disallow("/private").allow("/private/public").crawl_delay(2))
		.group(Group("badbot", "worsebot").disallow("/"))
		.sitemap("https://example.com/sitemap.xml")
		.footer("end")
		.build()
	)
	assert text == (
		"# Generated file\n"
		"# do not edit\n"
		"\n"
		"User-agent: *\n"
		"Crawl-delay: 2\n"
		"Disallow: /private\n"
		"Allow: /private/public\n"
		"\n"
		"User-agent: badbot\n"
		"User-agent: worsebot\n"
		"Disallow: /\n"
		"\n"
		"Sitemap: https://example.com/sitemap.xml\n"
		"\n"
		"# end\n"
	)


def test_built_file_parses_back():
	text = (
		RobotsBuilder()
		.group(Group("*").disallow("/tmp").crawl_delay(0.5))
		.group(Group("badbot", "worsebot").disallow("/"))
		.sitemap("https://example.com/sitemap.xml")
		.build()
	)
	r = Robots.from_string(text, "worsebot")
	assert not r.is_allowed("/page")
	r = Robots.from_string(text, "friend")
	assert not r.is_allowed("/tmp/x")
	assert r.is_allowed("/page")
	assert r.crawl_delay().total_seconds() == 0.5
	assert r.sitemaps() == ["https://example.com/sitemap.xml"]


def test_write_to_stream_and_empty_builder():
	buf = io.StringIO()
	RobotsBuilder().write(buf)
	assert buf.getvalue() == ""


def test_invalid_values_are_rejected():
	with pytest.raises(ValueError):
		Group()
	with pytest.raises(ValueError):
		Group("*").disallow("/a\nAllow: /")
	with pytest.raises(ValueError):
		Group("*").crawl_delay(-1)
	with pytest.raises(ValueError):
		RobotsBuilder().sitemap("https://example.com/#frag")
