# RoboLens — Robots decision object and whole-file view
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import enum
import logging
from datetime import timedelta
from typing import BinaryIO, Dict, List, Optional, Sequence, Tuple

from .agent import normalize_agent, resolve, try_agent
from .directive import BYTES_LIMIT, Directive, DirectiveKind, into_directives
from .rules import RuleSet


logger = logging.getLogger(__name__)


class AccessKind(enum.Enum):
	# robots.txt was served and can be parsed
	SUCCESSFUL = "successful"
	# gave up after too many redirect hops, treated as unavailable
	REDIRECT = "redirect"
	# no valid robots.txt exists, the site is fully allowed
	UNAVAILABLE = "unavailable"
	# robots.txt could not be served, the site is fully disallowed
	UNREACHABLE = "unreachable"


class AccessResult:
	"""Outcome of a robots.txt retrieval attempt. See Robots.from_access."""

	__slots__ = ("kind", "body")

	def __init__(self, kind: AccessKind, body: bytes = b"") -> None:
		self.kind = kind
		self.body = body

	@classmethod
	def successful(cls, body: bytes) -> "AccessResult":
		return cls(AccessKind.SUCCESSFUL, body)

	@classmethod
	def redirect(cls) -> "AccessResult":
		return cls(AccessKind.REDIRECT)

	@classmethod
	def unavailable(cls) -> "AccessResult":
		return cls(AccessKind.UNAVAILABLE)

	@classmethod
	def unreachable(cls) -> "AccessResult":
		return cls(AccessKind.UNREACHABLE)

	def __repr__(self) -> str:
		if self.kind is AccessKind.SUCCESSFUL:
			return f"AccessResult({self.kind.name}, {len(self.body)} bytes)"
		return f"AccessResult({self.kind.name})"


def read_limited(reader: BinaryIO, limit: int = BYTES_LIMIT) -> bytes:
	"""Read at most ``limit`` bytes; I/O errors propagate."""
	chunks: List[bytes] = []
	remaining = limit
	while remaining > 0:
		chunk = reader.read(remaining)
		if not chunk:
			break
		if isinstance(chunk, str):
			chunk = chunk.encode("utf-8")
		chunks.append(chunk)
		remaining -= len(chunk)
	return b"".join(chunks)[:limit]


class Robots:
	"""The robots.txt directives that apply to one user-agent.

	Immutable once built and safe to share between threads. Paths passed to
	``is_allowed`` are relative (``/path?query``).
	"""

	__slots__ = ("_user_agent", "_always", "_rules", "_sitemaps")

	def __init__(
		self,
		user_agent: str,
		rules: RuleSet,
		sitemaps: Sequence[str] = (),
		always: Optional[bool] = None,
	) -> None:
		self._user_agent = user_agent
		self._rules = rules
		self._sitemaps: Tuple[str, ...] = tuple(sitemaps)
		self._always = always

	@classmethod
	def from_directives(cls, directives: Sequence[Directive], user_agent: str) -> "Robots":
		resolved, rules, sitemaps = resolve(directives, user_agent)
		return cls(resolved, rules, sitemaps)

	@classmethod
	def from_bytes(cls, data: bytes, user_agent: str) -> "Robots":
		"""Parse robots.txt bytes. Never raises; input over BYTES_LIMIT is truncated."""
		if len(data) > BYTES_LIMIT:
			logger.info("robots.txt is %d bytes, truncating to %d", len(data), BYTES_LIMIT)
		return cls.from_directives(into_directives(data), user_agent)

	@classmethod
	def from_string(cls, text: str, user_agent: str) -> "Robots":
		return cls.from_bytes(text.encode("utf-8", "surrogateescape"), user_agent)

	@classmethod
	def from_reader(cls, reader: BinaryIO, user_agent: str) -> "Robots":
		"""Read up to BYTES_LIMIT bytes from a binary stream and parse them."""
		return cls.from_bytes(read_limited(reader), user_agent)

	@classmethod
	def from_always(cls, always: bool, user_agent: str) -> "Robots":
		return cls(normalize_agent(user_agent), RuleSet(), always=bool(always))

	@classmethod
	def from_access(cls, access: AccessResult, user_agent: str) -> "Robots":
		"""Map a retrieval outcome to a Robots object.

		Redirect and unavailable results allow everything, unreachable
		results disallow everything.
		"""
		if access.kind is AccessKind.SUCCESSFUL:
			return cls.from_bytes(access.body, user_agent)
		if access.kind in (AccessKind.REDIRECT, AccessKind.UNAVAILABLE):
			return cls.from_always(True, user_agent)
		return cls.from_always(False, user_agent)

	def user_agent(self) -> str:
		"""Return the resolved group name used for matching."""
		return self._user_agent

	def is_allowed(self, path: str) -> bool:
		if self._always is not None:
			return self._always
		return self._rules.is_allowed(path)

	def is_always(self) -> Optional[bool]:
		"""Return the verdict if the site is fully allowed or disallowed, else None."""
		if self._always is not None:
			return self._always
		if self._rules.is_empty():
			return True
		return None

	def crawl_delay(self) -> Optional[timedelta]:
		if self._always is not None:
			return None
		return self._rules.delay()

	def rules(self) -> RuleSet:
		return self._rules

	def sitemaps(self) -> List[str]:
		return list(self._sitemaps)

	def __repr__(self) -> str:
		return (
			f"Robots(user_agent={self._user_agent!r}, always={self._always!r}, "
			f"rules={len(self._rules)}, sitemaps={len(self._sitemaps)})"
		)


class RobotsFile:
	"""A scanned robots.txt file that answers for any user-agent."""

	__slots__ = ("_directives",)

	def __init__(self, directives: Sequence[Directive]) -> None:
		self._directives: Tuple[Directive, ...] = tuple(directives)

	@classmethod
	def from_bytes(cls, data: bytes) -> "RobotsFile":
		return cls(into_directives(data))

	@classmethod
	def from_string(cls, text: str) -> "RobotsFile":
		return cls.from_bytes(text.encode("utf-8", "surrogateescape"))

	@classmethod
	def from_reader(cls, reader: BinaryIO) -> "RobotsFile":
		return cls.from_bytes(read_limited(reader))

	def robots(self, user_agent: str) -> Robots:
		return Robots.from_directives(self._directives, user_agent)

	def is_allowed(self, user_agent: str, path: str) -> bool:
		return self.robots(user_agent).is_allowed(path)

	def crawl_delay(self, user_agent: str) -> Optional[timedelta]:
		return self.robots(user_agent).crawl_delay()

	def sitemaps(self) -> List[str]:
		return self.robots("*").sitemaps()

	def user_agents(self) -> List[str]:
		"""Declared user-agent names in file order, normalized and deduplicated."""
		seen: Dict[str, None] = {}
		for d in self._directives:
			if d.kind is DirectiveKind.USER_AGENT:
				agent = try_agent(d.value)
				if agent:
					seen.setdefault(agent, None)
		return list(seen)
