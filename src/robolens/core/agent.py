# RoboLens — User-agent resolution and group collection
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import math
import re
from datetime import timedelta
from typing import List, Optional, Sequence, Tuple

from .directive import Directive, DirectiveKind
from .rules import Rule, RuleSet
from ..errors import WildcardError
from ..utils.urls import parse_sitemap


logger = logging.getLogger(__name__)

DEFAULT_AGENT = "*"

_RULE_KINDS = (DirectiveKind.ALLOW, DirectiveKind.DISALLOW, DirectiveKind.CRAWL_DELAY)

# ASCII decimal or exponent notation; float() alone also takes "1_0" and non-ASCII digits
_DELAY_NUMBER = re.compile(r"\+?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def normalize_agent(agent: str) -> str:
	return agent.strip().lower()


def _decode(value: bytes) -> Optional[str]:
	try:
		return value.decode("utf-8")
	except UnicodeDecodeError:
		logger.debug("Dropping undecodable value %r", value)
		return None


def try_agent(value: bytes) -> Optional[str]:
	text = _decode(value)
	if text is None:
		return None
	return normalize_agent(text)


def try_rule(value: bytes, allow: bool) -> Optional[Rule]:
	text = _decode(value)
	if text is None:
		return None
	try:
		return Rule(text, allow)
	except WildcardError as exc:
		logger.debug("Dropping rule: %s", exc)
		return None


def try_delay(value: bytes) -> Optional[timedelta]:
	text = _decode(value)
	if text is None:
		return None
	if _DELAY_NUMBER.fullmatch(text.strip()) is None:
		logger.debug("Dropping non-numeric crawl-delay %r", text)
		return None
	try:
		seconds = float(text)
	except ValueError:
		logger.debug("Dropping non-numeric crawl-delay %r", text)
		return None
	if not math.isfinite(seconds) or seconds < 0:
		logger.debug("Dropping out-of-range crawl-delay %r", text)
		return None
	try:
		return timedelta(seconds=seconds)
	except OverflowError:
		logger.debug("Dropping out-of-range crawl-delay %r", text)
		return None


def try_sitemap(value: bytes) -> Optional[str]:
	text = _decode(value)
	if text is None:
		return None
	url = parse_sitemap(text)
	if url is None:
		logger.debug("Dropping invalid sitemap %r", text)
	return url


def find_agent(directives: Sequence[Directive], user_agent: str) -> str:
	"""Return the longest declared user-agent that prefixes ``user_agent``, or ``*``.

	Comparison is case-insensitive on stripped names; empty declarations are ignored.
	"""
	requested = normalize_agent(user_agent)
	best = DEFAULT_AGENT
	found = False
	for d in directives:
		if d.kind is not DirectiveKind.USER_AGENT:
			continue
		agent = try_agent(d.value)
		if not agent or not requested.startswith(agent):
			continue
		if not found or len(agent) > len(best):
			best = agent
			found = True
	return best


def collect(directives: Sequence[Directive], resolved: str) -> Tuple[RuleSet, List[str]]:
	"""Gather the rules and crawl-delay of the ``resolved`` group plus every sitemap.

	A run of consecutive User-agent lines forms one group header; the group
	captures if any alias in the run equals ``resolved``. Rules ahead of the
	first header belong to the wildcard group. Only Allow, Disallow and
	Crawl-delay lines close a header run; Sitemap and unknown lines are inert.
	"""
	capturing = resolved == DEFAULT_AGENT
	in_header = False

	rules: List[Rule] = []
	delay: Optional[timedelta] = None
	sitemaps: List[str] = []

	for d in directives:
		if d.kind is DirectiveKind.USER_AGENT:
			if not in_header or not capturing:
				capturing = try_agent(d.value) == resolved
			in_header = True
			continue

		if d.kind is DirectiveKind.SITEMAP:
			url = try_sitemap(d.value)
			if url is not None:
				sitemaps.append(url)
			continue

		if d.kind not in _RULE_KINDS:
			continue

		in_header = False
		if not capturing:
			continue

		if d.kind is DirectiveKind.CRAWL_DELAY:
			value = try_delay(d.value)
			if value is not None:
				delay = value if delay is None else min(delay, value)
		else:
			rule = try_rule(d.value, d.kind is DirectiveKind.ALLOW)
			if rule is not None:
				rules.append(rule)

	return RuleSet(rules, delay), sitemaps


def resolve(directives: Sequence[Directive], user_agent: str) -> Tuple[str, RuleSet, List[str]]:
	"""Resolve the group for ``user_agent`` and build its rule set.

	Returns ``(resolved_name, rule_set, sitemaps)``.
	"""
	resolved = find_agent(directives, user_agent)
	rule_set, sitemaps = collect(directives, resolved)
	logger.debug(
		"Resolved %r to group %r with %d rule(s), %d sitemap(s)",
		user_agent, resolved, len(rule_set), len(sitemaps),
	)
	return resolved, rule_set, sitemaps
