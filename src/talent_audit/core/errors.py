"""
Errors raised by the query surfaces and round stores.
"""

from __future__ import annotations


class RoundQueryError(Exception):
	"""Base class for errors reported to callers of a query surface."""


class MissingRoundIdError(RoundQueryError, ValueError):
	"""A required round identifier was not supplied."""


class RoundNotFoundError(RoundQueryError, LookupError):
	"""One or more requested rounds do not exist in the store."""

	def __init__(self, round_ids: list[str]):
		self.round_ids = round_ids
		super().__init__(f"round(s) not found: {', '.join(round_ids)}")


class RaterNotFoundError(LookupError):
	"""No audit leader holds the given token."""


class RaterAlreadyCompletedError(ValueError):
	"""The audit leader has already submitted their ratings."""


__all__ = [
    "RoundQueryError",
    "MissingRoundIdError",
    "RoundNotFoundError",
    "RaterNotFoundError",
    "RaterAlreadyCompletedError",
]
