# RoboLens — Path patterns: normalization and wildcard matchers
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import enum
import re
from typing import Optional
from urllib.parse import quote

from ..errors import WildcardError


# Upper bound on the translated expression, in characters.
REGEX_SIZE_LIMIT = 42 * 1024

# Printable ASCII minus the characters that must be percent-encoded.
_PATH_SAFE = "".join(chr(c) for c in range(0x21, 0x7F) if chr(c) not in '"<>')

_STARS = re.compile(r"\*+")


class MatcherKind(enum.Enum):
	LITERAL = "literal"
	COMPILED = "compiled"


def normalize_path(path: str) -> str:
	"""Percent-encode controls, space, quotes and angle brackets; ensure a leading slash.

	Non-ASCII characters are encoded as UTF-8 and lone surrogates from
	surrogateescape decoding go back to their raw bytes. Existing escapes are kept as-is.
	"""
	path = quote(path, safe=_PATH_SAFE, errors="surrogateescape")
	if not path.startswith("/"):
		path = "/" + path
	return path


def _escape(segment: str) -> str:
	# '$' anywhere in a segment anchors the end of the path
	return r"\Z".join(re.escape(part) for part in segment.split("$"))


def translate(pattern: str) -> str:
	"""Translate a robots.txt pattern into a start-anchored regular expression.

	Every segment between two stars is wrapped in an atomic group and found
	lazily, so each star is placed at its leftmost viable position and never
	revisited. Only the final segment backtracks, which keeps matching linear
	in the path length for every segment.
	"""
	head, *rest = _STARS.sub("*", pattern).split("*")
	parts = ["^", _escape(head)]
	if rest:
		*middle, tail = rest
		for segment in middle:
			parts.append("(?>.*?" + _escape(segment) + ")")
		if tail:
			parts.append(".*" + _escape(tail))
	return "".join(parts)


class Wildcard:
	"""Matcher for a single normalized pattern.

	``MatcherKind.LITERAL`` matchers compare prefixes, ``MatcherKind.COMPILED``
	matchers run a bounded regular expression.
	"""

	__slots__ = ("pattern", "kind", "_regex")

	def __init__(self, pattern: str, kind: MatcherKind, regex: Optional[re.Pattern] = None) -> None:
		self.pattern = pattern
		self.kind = kind
		self._regex = regex

	@classmethod
	def new(cls, pattern: str) -> "Wildcard":
		if "*" not in pattern and "$" not in pattern:
			return cls(pattern, MatcherKind.LITERAL)
		expr = translate(pattern)
		if len(expr) > REGEX_SIZE_LIMIT:
			raise WildcardError(pattern, f"expression exceeds {REGEX_SIZE_LIMIT} characters")
		try:
			regex = re.compile(expr, re.DOTALL)
		except re.error as exc:
			raise WildcardError(pattern, str(exc)) from exc
		return cls(pattern, MatcherKind.COMPILED, regex)

	def is_match(self, path: str) -> bool:
		"""Return True if the normalized path matches this pattern."""
		if self._regex is None:
			return path.startswith(self.pattern)
		return self._regex.match(path) is not None

	def __repr__(self) -> str:
		return f"Wildcard({self.pattern!r}, {self.kind.name})"


def compile_pattern(pattern: str) -> Wildcard:
	"""Normalize and compile a robots.txt path pattern.

	Raises WildcardError when the translated expression is over the size bound.
	"""
	return Wildcard.new(normalize_path(pattern))
