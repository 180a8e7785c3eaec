# RoboLens — Exception types
# Author: Sachin Chhetri
# Year: 2025
# License: MIT


class RobotsError(Exception):
	"""Base class for every error raised by RoboLens."""


class WildcardError(RobotsError, ValueError):
	"""A path pattern could not be compiled into a matcher."""

	def __init__(self, pattern: str, reason: str) -> None:
		super().__init__(f"cannot compile pattern {pattern!r}: {reason}")
		self.pattern = pattern
		self.reason = reason


class FetchError(RobotsError):
	"""A robots.txt source could not be opened."""
