# RoboLens — robots.txt retrieval policy (HTTP outcome to access result)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging

import requests

from .directive import BYTES_LIMIT
from .robots import AccessResult, Robots
from ..utils.urls import robots_url


logger = logging.getLogger(__name__)

CHUNK_SIZE = 16 * 1024


def _read_body(response: requests.Response, limit: int = BYTES_LIMIT) -> bytes:
	buf = bytearray()
	for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
		buf.extend(chunk)
		if len(buf) >= limit:
			break
	return bytes(buf[:limit])


def access_for_status(status: int) -> AccessResult:
	"""Map a non-2xx status code to an access result."""
	if status == 429 or status >= 500:
		return AccessResult.unreachable()
	return AccessResult.unavailable()


def fetch_robots(session: requests.Session, url: str, timeout: float = 10.0) -> AccessResult:
	"""Fetch robots.txt for the host of ``url`` and classify the outcome.

	Never raises for network problems: they map to UNREACHABLE, too many
	redirects to REDIRECT, 4xx to UNAVAILABLE and 429/5xx to UNREACHABLE.
	"""
	target = robots_url(url)
	try:
		r = session.get(target, timeout=timeout, stream=True)
	except requests.TooManyRedirects:
		logger.warning("Too many redirects for %s", target)
		return AccessResult.redirect()
	except requests.RequestException as exc:
		logger.warning("Could not reach %s: %s", target, exc)
		return AccessResult.unreachable()

	with r:
		if not 200 <= r.status_code < 300:
			access = access_for_status(r.status_code)
			logger.info("%s answered %d: %s", target, r.status_code, access.kind.name)
			return access
		try:
			body = _read_body(r)
		except requests.RequestException as exc:
			logger.warning("Reading %s failed: %s", target, exc)
			return AccessResult.unreachable()

	logger.info("Fetched %s (%d bytes)", target, len(body))
	return AccessResult.successful(body)


def fetch_robots_for(session: requests.Session, url: str, user_agent: str, timeout: float = 10.0) -> Robots:
	return Robots.from_access(fetch_robots(session, url, timeout=timeout), user_agent)
