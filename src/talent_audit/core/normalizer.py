"""
Rank to percentile normalization.

Each audit leader ranks their own group of employees 1..N (1 = best).
Ranks are converted to a 0-100 percentile so that positions from groups
of different sizes can be compared and averaged:

    converted_rank = N - rank + 1
    percentile     = (converted_rank - 1) / (N - 1) * 100

N is the leader's full assigned group size, including employees they
have not yet rated. A group of one is pinned to the 100th percentile.
"""

from __future__ import annotations

from typing import Iterator

from talent_audit.models.ratings import NormalizedRating
from talent_audit.models.round import Round


def converted_rank(rank: int, total: int) -> int:
	"""Flip a rank so that 1 is the worst and ``total`` the best."""
	return total - rank + 1


def percentile(rank: int, total: int) -> float:
	"""Return the percentile of ``rank`` within a group of ``total``.

	Rank 1 maps to 100 and rank ``total`` to 0. Ranks outside
	``[1, total]`` are a caller error and are not checked here.
	"""
	if total > 1:
		return (converted_rank(rank, total) - 1) / (total - 1) * 100
	return 100.0


def normalize_round(audit: Round) -> Iterator[NormalizedRating]:
	"""Yield normalized ratings for every eligible judgment.

	Only leaders flagged as completed contribute; judgments with an
	unset stage or rank are skipped.

	Parameters:
		audit: Round snapshot.

	Yields:
		NormalizedRating in leader order, then judgment order.
	"""
	subjects = audit.subject_index()
	for rater in audit.completed_raters:
		total = rater.assigned_count
		for judgment in rater.judgments:
			if not judgment.eligible:
				continue
			yield NormalizedRating(
			    rater_name=rater.name,
			    subject=subjects[judgment.subject_id],
			    stage=judgment.stage,
			    rank=judgment.rank,
			    converted_rank=converted_rank(judgment.rank, total),
			    percentile=percentile(judgment.rank, total),
			    total_in_group=total,
			)


__all__ = ["converted_rank", "percentile", "normalize_round"]
