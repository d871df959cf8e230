"""
Protocol definitions for dependency injection.

Defines the narrow read interface the report services need from a
round store, so tests can supply in-memory fixtures.
"""

from __future__ import annotations

from typing import Protocol

from talent_audit.models.round import Round


class RoundStoreProtocol(Protocol):
	"""
	Protocol for round snapshot stores.

	Implementations return complete, immutable-by-convention snapshots;
	a round that is still being created must not be returned.
	"""

	def fetch_round(self, round_id: str) -> Round | None:
		"""Return the snapshot for round_id, or None if unknown."""
		...

	def fetch_rounds(self, current_id: str,
	                 previous_id: str) -> tuple[Round | None, Round | None]:
		"""Return the snapshots for two rounds."""
		...


__all__ = ["RoundStoreProtocol"]
