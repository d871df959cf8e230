"""
Stage aggregation and cross-leader deduplication.

Groups normalized ratings by stage for the distribution and
performance-by-stage views, and folds ratings of the same employee
from several leaders into one record per employee for comparison and
quadrant classification.
"""

from __future__ import annotations

from typing import Iterable

from talent_audit.core.identity import IdentityResolver, best_effort_identity
from talent_audit.models.config import CombineMode
from talent_audit.models.ratings import NormalizedRating, SubjectRecord
from talent_audit.models.report import StageAverage, StageCount
from talent_audit.models.round import STAGES
from talent_audit.utils.logging import get_logger
from talent_audit.utils.numbers import round_half_up

logger = get_logger(__name__)


def stage_counts(ratings: Iterable[NormalizedRating]) -> list[StageCount]:
	"""Count ratings per stage, always covering stages 1-4."""
	counts = dict.fromkeys(STAGES, 0)
	for r in ratings:
		if r.stage in counts:
			counts[r.stage] += 1
	return [StageCount(stage=s, count=c) for s, c in counts.items()]


def stage_averages(
        ratings: Iterable[NormalizedRating]) -> list[StageAverage]:
	"""Average percentile per stage; empty stages average to 0."""
	totals = dict.fromkeys(STAGES, 0.0)
	counts = dict.fromkeys(STAGES, 0)
	for r in ratings:
		if r.stage in totals:
			totals[r.stage] += r.percentile
			counts[r.stage] += 1
	return [
	    StageAverage(stage=s,
	                 average=totals[s] / counts[s] if counts[s] else 0.0)
	    for s in STAGES
	]


def _new_record(key: str, rating: NormalizedRating) -> SubjectRecord:
	subject = rating.subject
	return SubjectRecord(
	    key=key,
	    subject_id=subject.id,
	    name=subject.name,
	    email=subject.unique_id or subject.email or "",
	    title=subject.title,
	    business_unit=subject.business_unit,
	    stage=rating.stage,
	    percentile=rating.percentile,
	    rating_count=1,
	    stage_total=rating.stage,
	    percentile_total=rating.percentile,
	)


def _fold(record: SubjectRecord, rating: NormalizedRating,
          mode: CombineMode) -> None:
	record.rating_count += 1
	record.stage_total += rating.stage
	record.percentile_total += rating.percentile
	if mode == CombineMode.MEAN:
		record.stage = round_half_up(record.stage_total / record.rating_count)
		record.percentile = record.percentile_total / record.rating_count
	else:
		# Pairwise running average: order dependent for 3+ leaders.
		record.stage = round_half_up((record.stage + rating.stage) / 2)
		record.percentile = (record.percentile + rating.percentile) / 2


def combine_by_subject(
    ratings: Iterable[NormalizedRating],
    identity: IdentityResolver = best_effort_identity,
    mode: CombineMode = CombineMode.LEGACY,
) -> dict[str, SubjectRecord]:
	"""Fold ratings into one record per employee.

	Parameters:
		ratings: Normalized ratings of one round, in leader order.
		identity: Resolver mapping an employee to its matching key.
		mode: Combination rule for employees rated by several leaders.

	Returns:
		Records keyed by identity, in first-seen order. Employees the
		resolver cannot identify are left out.
	"""
	records: dict[str, SubjectRecord] = {}
	skipped: set[str] = set()
	for rating in ratings:
		key = identity(rating.subject)
		if key is None:
			skipped.add(rating.subject.id)
			continue
		existing = records.get(key)
		if existing is None:
			records[key] = _new_record(key, rating)
		else:
			_fold(existing, rating, mode)
	if skipped:
		logger.warning(
		    "excluded %d employee(s) without a stable identifier",
		    len(skipped))
	return records


__all__ = ["stage_counts", "stage_averages", "combine_by_subject"]
