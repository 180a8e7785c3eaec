# RoboLens — Directive scanner (bytes to typed robots.txt lines)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import enum
import re
from typing import Dict, List, NamedTuple, Tuple


# Google enforces a robots.txt size limit of 500 KiB.
BYTES_LIMIT = 512_000

UTF8_BOM = b"\xef\xbb\xbf"


class DirectiveKind(enum.Enum):
	USER_AGENT = "user-agent"
	ALLOW = "allow"
	DISALLOW = "disallow"
	CRAWL_DELAY = "crawl-delay"
	SITEMAP = "sitemap"
	UNKNOWN = "unknown"


# Observed spellings per keyword, tried in this order.
SPELLINGS: Tuple[Tuple[DirectiveKind, Tuple[bytes, ...]], ...] = (
	(DirectiveKind.USER_AGENT, (b"user-agent", b"user agent", b"useragent")),
	(DirectiveKind.ALLOW, (b"allow", b"alow", b"allaw")),
	(
		DirectiveKind.DISALLOW,
		(b"disallow", b"dissallow", b"dissalow", b"disalow", b"diasllow", b"disallaw"),
	),
	(DirectiveKind.CRAWL_DELAY, (b"crawl-delay", b"crawl delay", b"crawldelay")),
	(DirectiveKind.SITEMAP, (b"sitemap", b"site-map", b"site map")),
)


def _keyword_regex(spellings: Tuple[bytes, ...]) -> re.Pattern:
	alternatives = b"|".join(re.escape(s) for s in spellings)
	return re.compile(
		rb"[ \t]*(?:" + alternatives + rb")(?:[ \t]*:|[ \t]+)(?P<value>[^#]*)",
		re.IGNORECASE,
	)


_MATCHERS: Dict[DirectiveKind, re.Pattern] = {
	kind: _keyword_regex(spellings) for kind, spellings in SPELLINGS
}

# \n, \r\n, or a run of \r optionally followed by \n
_LINE_BREAK = re.compile(rb"\r+\n?|\n")


class Directive(NamedTuple):
	"""One robots.txt line: its kind and the raw, unvalidated value bytes."""

	kind: DirectiveKind
	value: bytes = b""


def prepare(data: bytes) -> bytes:
	"""Truncate to BYTES_LIMIT, drop a leading UTF-8 BOM and turn NUL bytes into line breaks."""
	data = bytes(data[:BYTES_LIMIT])
	if data.startswith(UTF8_BOM):
		data = data[len(UTF8_BOM):]
	return data.replace(b"\x00", b"\n")


def scan_line(line: bytes) -> Directive:
	"""Classify a single line without its line break."""
	for kind, matcher in _MATCHERS.items():
		m = matcher.match(line)
		if m is None:
			continue
		value = m.group("value").strip()
		# An empty Disallow allows everything.
		if kind is DirectiveKind.DISALLOW and not value:
			return Directive(DirectiveKind.ALLOW, b"/")
		return Directive(kind, value)
	return Directive(DirectiveKind.UNKNOWN, line)


def scan(data: bytes) -> List[Directive]:
	"""Split prepared bytes into directives, one per line.

	Never fails: anything unrecognised becomes an UNKNOWN directive. The empty
	remainder after a final line break does not count as a line.
	"""
	lines = _LINE_BREAK.split(data)
	if lines and not lines[-1]:
		lines.pop()
	return [scan_line(line) for line in lines]


def into_directives(data: bytes) -> List[Directive]:
	"""Prepare raw robots.txt bytes and scan them."""
	return scan(prepare(data))
