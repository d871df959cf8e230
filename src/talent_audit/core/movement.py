"""
Movement classification.

Tallies promotions, demotions, hires, departures and performance
changes from comparison records, and builds the stage transition
histogram used for flow visualization.
"""

from __future__ import annotations

from typing import Iterable

from talent_audit.core.policy import PERFORMANCE_NOISE_BAND
from talent_audit.models.comparison import (
    ComparisonRecord,
    MovementPatterns,
    MovementSummary,
    Presence,
    StageChangeBuckets,
    Transition,
)


def tally_movements(records: Iterable[ComparisonRecord]) -> MovementSummary:
	"""Count stage and performance movements.

	Stage and performance buckets only count employees present in both
	rounds; new hires and departures are counted on their own.
	"""
	summary = MovementSummary()
	for rec in records:
		if rec.presence == Presence.NEW_HIRE:
			summary.new_hires += 1
			continue
		if rec.presence == Presence.DEPARTURE:
			summary.departures += 1
			continue

		if rec.stage_change > 0:
			summary.promoted += 1
		elif rec.stage_change < 0:
			summary.demoted += 1
		else:
			summary.maintained += 1

		if rec.performance_change > PERFORMANCE_NOISE_BAND:
			summary.performance_improved += 1
		elif rec.performance_change < -PERFORMANCE_NOISE_BAND:
			summary.performance_declined += 1
		else:
			summary.performance_maintained += 1
	return summary


def transition_label(stage: int) -> str:
	return f"Stage {stage}"


def build_transitions(records: Iterable[ComparisonRecord]) -> list[Transition]:
	"""Histogram of ``Stage p -> Stage c`` for employees in both rounds."""
	counts: dict[tuple[int, int], int] = {}
	for rec in records:
		if rec.previous_stage is None or rec.current_stage is None:
			continue
		edge = (rec.previous_stage, rec.current_stage)
		counts[edge] = counts.get(edge, 0) + 1
	return [
	    Transition(from_stage=transition_label(p),
	               to_stage=transition_label(c), value=n)
	    for (p, c), n in counts.items()
	]


def bucket_by_stage_change(
        records: Iterable[ComparisonRecord]) -> StageChangeBuckets:
	"""Split employees in both rounds by the sign of their stage change."""
	buckets = StageChangeBuckets()
	for rec in records:
		if rec.previous_stage is None or rec.current_stage is None:
			continue
		if rec.stage_change > 0:
			buckets.promoted.append(rec)
		elif rec.stage_change < 0:
			buckets.demoted.append(rec)
		else:
			buckets.maintained.append(rec)
	return buckets


def movement_patterns(records: list[ComparisonRecord]) -> MovementPatterns:
	return MovementPatterns(
	    transitions=build_transitions(records),
	    by_stage_change=bucket_by_stage_change(records),
	)


__all__ = [
    "tally_movements",
    "transition_label",
    "build_transitions",
    "bucket_by_stage_change",
    "movement_patterns",
]
