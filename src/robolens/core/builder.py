# RoboLens — robots.txt writer (groups, sitemaps, comments)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import io
from typing import List, Optional, TextIO


def _comment_lines(text: str) -> List[str]:
	return [("# " + line).rstrip() for line in text.splitlines()] or ["#"]


def _format_delay(seconds: float) -> str:
	if float(seconds).is_integer():
		return str(int(seconds))
	return repr(float(seconds))


def _single_line(value: str, what: str) -> str:
	value = value.strip()
	if any(c in value for c in "\r\n#"):
		raise ValueError(f"{what} must be a single line without comments: {value!r}")
	return value


class Group:
	"""One user-agent group: aliases, rules in insertion order, optional crawl-delay."""

	def __init__(self, *user_agents: str) -> None:
		if not user_agents:
			raise ValueError("a group needs at least one user-agent")
		self.user_agents = [_single_line(ua, "user-agent") for ua in user_agents]
		self.rules: List[tuple] = []
		self.delay: Optional[float] = None

	def allow(self, path: str) -> "Group":
		self.rules.append(("Allow", _single_line(path, "path")))
		return self

	def disallow(self, path: str) -> "Group":
		self.rules.append(("Disallow", _single_line(path, "path")))
		return self

	def crawl_delay(self, seconds: float) -> "Group":
		if seconds < 0:
			raise ValueError("crawl-delay must not be negative")
		self.delay = seconds
		return self

	def lines(self) -> List[str]:
		out = [f"User-agent: {ua}" for ua in self.user_agents]
		if self.delay is not None:
			out.append(f"Crawl-delay: {_format_delay(self.delay)}")
		out.extend(f"{key}: {path}" for key, path in self.rules)
		return out


class RobotsBuilder:
	"""Assemble a robots.txt document.

	>>> RobotsBuilder().group(Group("*").disallow("/private")).build()
	'User-agent: *\\nDisallow: /private\\n'
	"""

	def __init__(self) -> None:
		self._header: Optional[str] = None
		self._footer: Optional[str] = None
		self._groups: List[Group] = []
		self._sitemaps: List[str] = []

	def header(self, text: str) -> "RobotsBuilder":
		self._header = text
		return self

	def footer(self, text: str) -> "RobotsBuilder":
		self._footer = text
		return self

	def group(self, group: Group) -> "RobotsBuilder":
		self._groups.append(group)
		return self

	def sitemap(self, url: str) -> "RobotsBuilder":
		self._sitemaps.append(_single_line(url, "sitemap"))
		return self

	def write(self, stream: TextIO) -> None:
		blocks: List[List[str]] = []
		if self._header is not None:
			blocks.append(_comment_lines(self._header))
		blocks.extend(g.lines() for g in self._groups)
		if self._sitemaps:
			blocks.append([f"Sitemap: {url}" for url in self._sitemaps])
		if self._footer is not None:
			blocks.append(_comment_lines(self._footer))
		stream.write("\n\n".join("\n".join(b) for b in blocks))
		if blocks:
			stream.write("\n")

	def build(self) -> str:
		buf = io.StringIO()
		self.write(buf)
		return buf.getvalue()
