# RoboLens — URL utilities: robots.txt location, relative paths, sitemap values
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional
from urllib.parse import urlparse, urlunparse


def robots_url(url: str) -> str:
	"""Return the robots.txt URL for the host of ``url``.

	Scheme and host are lowercased, default ports dropped. A URL without a
	scheme is treated as https.
	"""
	p = urlparse(url if "://" in url else "https://" + url)
	scheme = (p.scheme or "https").lower()
	netloc = p.netloc.lower()
	if netloc.endswith(":80") and scheme == "http":
		netloc = netloc[:-3]
	if netloc.endswith(":443") and scheme == "https":
		netloc = netloc[:-4]
	return urlunparse((scheme, netloc, "/robots.txt", "", "", ""))


def relative_path(url: str) -> str:
	"""Return path and query of an absolute URL; relative input is returned unchanged."""
	p = urlparse(url)
	if not (p.scheme and p.netloc):
		return url
	path = p.path or "/"
	if p.query:
		path += "?" + p.query
	return path


def parse_sitemap(value: str) -> Optional[str]:
	"""Return the sitemap URL if it is absolute (scheme and host), else None.

	URLs with inner whitespace or an out-of-range port are rejected.
	"""
	value = value.strip()
	if any(c.isspace() for c in value):
		return None
	try:
		p = urlparse(value)
		# .port raises ValueError for non-numeric or out-of-range ports
		p.port
	except ValueError:
		return None
	if not p.scheme or not p.hostname:
		return None
	return value


__all__ = [
	"robots_url",
	"relative_path",
	"parse_sitemap",
]
