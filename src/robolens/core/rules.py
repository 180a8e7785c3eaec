# RoboLens — Rules and rule sets (precedence and crawl-delay)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from datetime import timedelta
from typing import Iterable, Iterator, Optional, Tuple

from .pattern import Wildcard, compile_pattern, normalize_path


ROBOTS_PATH = "/robots.txt"


class Rule:
	"""A compiled Allow or Disallow pattern.

	Rules order by precedence: the longer normalized pattern comes first and,
	for equal lengths, allow comes before disallow.
	"""

	__slots__ = ("_wildcard", "_allow")

	def __init__(self, pattern: str, allow: bool) -> None:
		self._wildcard: Wildcard = compile_pattern(pattern)
		self._allow = bool(allow)

	@property
	def pattern(self) -> str:
		return self._wildcard.pattern

	@property
	def allow(self) -> bool:
		return self._allow

	def is_match(self, path: str) -> bool:
		"""Expects a normalized relative path."""
		return self._wildcard.is_match(path)

	def sort_key(self) -> Tuple[int, bool]:
		return (-len(self.pattern), not self._allow)

	def __lt__(self, other: "Rule") -> bool:
		return self.sort_key() < other.sort_key()

	def __repr__(self) -> str:
		verb = "Allow" if self._allow else "Disallow"
		return f"Rule({verb}: {self.pattern})"


class RuleSet:
	"""Precedence-ordered rules for one user-agent group plus its crawl-delay."""

	__slots__ = ("_rules", "_delay")

	def __init__(self, rules: Iterable[Rule] = (), delay: Optional[timedelta] = None) -> None:
		# sorted() is stable, identical keys keep file order
		self._rules: Tuple[Rule, ...] = tuple(sorted(rules))
		self._delay = delay

	def is_allowed(self, path: str) -> bool:
		path = normalize_path(path)
		if path == ROBOTS_PATH:
			return True
		for rule in self._rules:
			if rule.is_match(path):
				return rule.allow
		return True

	def matching_rule(self, path: str) -> Optional[Rule]:
		"""Return the rule that decides the path, or None when no rule matches."""
		path = normalize_path(path)
		for rule in self._rules:
			if rule.is_match(path):
				return rule
		return None

	def delay(self) -> Optional[timedelta]:
		return self._delay

	def is_empty(self) -> bool:
		return not self._rules

	def __iter__(self) -> Iterator[Rule]:
		return iter(self._rules)

	def __len__(self) -> int:
		return len(self._rules)

	def __repr__(self) -> str:
		return f"RuleSet(rules={list(self._rules)!r}, delay={self._delay!r})"
