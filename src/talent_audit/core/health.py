"""
Talent health score and ROI metrics.

The health score starts from a neutral 50, adds or subtracts a fixed
weight per movement event, scales by population size and is clamped
to [0, 100]. It is a heuristic composite, not a calibrated index.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from talent_audit.core import policy
from talent_audit.models.comparison import (
    ComparisonRecord,
    MovementSummary,
    RoiMetrics,
    SuccessionReadiness,
)
from talent_audit.models.ratings import SubjectRecord
from talent_audit.utils.numbers import clamp, round_half_up


def talent_health_score(movements: MovementSummary, total_records: int) -> int:
	"""Fold a movement tally into a bounded composite score.

	Parameters:
		movements: Tally from tally_movements().
		total_records: Number of comparison records (all presences).

	Returns:
		Integer score in [0, 100]; the neutral baseline when there is
		nothing to compare.
	"""
	if total_records <= 0:
		return policy.HEALTH_BASELINE
	score = float(policy.HEALTH_BASELINE)
	score += movements.promoted * policy.WEIGHT_PROMOTED
	score += movements.performance_improved * policy.WEIGHT_PERFORMANCE_IMPROVED
	score += movements.new_hires * policy.WEIGHT_NEW_HIRE
	score -= movements.demoted * policy.WEIGHT_DEMOTED
	score -= movements.performance_declined * policy.WEIGHT_PERFORMANCE_DECLINED
	score -= movements.departures * policy.WEIGHT_DEPARTURE

	score *= 100 / max(1, total_records)
	return clamp(round_half_up(score), policy.HEALTH_SCORE_MIN,
	             policy.HEALTH_SCORE_MAX)


def _is_high_potential_advanced(rec: ComparisonRecord) -> bool:
	return (rec.previous_stage is not None
	        and rec.previous_stage <= max(policy.EARLY_STAGES)
	        and rec.previous_performance is not None
	        and rec.previous_performance > policy.HIGH_POTENTIAL_MIN_PERFORMANCE
	        and rec.stage_change is not None and rec.stage_change > 0)


def _is_at_risk_improved(rec: ComparisonRecord) -> bool:
	# A previous percentile of exactly 0 counts as at risk.
	return (rec.previous_stage is not None
	        and rec.previous_stage >= policy.SENIOR_STAGE_MIN
	        and rec.previous_performance is not None
	        and rec.previous_performance < policy.AT_RISK_MAX_PERFORMANCE
	        and rec.performance_change is not None
	        and rec.performance_change > policy.AT_RISK_IMPROVEMENT)


def succession_ready(records: Iterable[SubjectRecord]) -> int:
	"""Count employees at a senior stage."""
	return sum(1 for r in records if r.stage >= policy.SENIOR_STAGE_MIN)


def roi_metrics(
    comparisons: list[ComparisonRecord],
    movements: MovementSummary,
    current: Mapping[str, SubjectRecord],
    previous: Mapping[str, SubjectRecord],
) -> RoiMetrics:
	"""Build the ROI block of a comparison report."""
	return RoiMetrics(
	    high_potential_advanced=sum(
	        1 for c in comparisons if _is_high_potential_advanced(c)),
	    at_risk_improved=sum(1 for c in comparisons
	                         if _is_at_risk_improved(c)),
	    talent_health_score=talent_health_score(movements, len(comparisons)),
	    succession_readiness=SuccessionReadiness(
	        previous_ready=succession_ready(previous.values()),
	        current_ready=succession_ready(current.values()),
	    ),
	)


__all__ = ["talent_health_score", "succession_ready", "roi_metrics"]
