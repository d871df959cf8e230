"""
Executive interpretation of a single-round report.

Reads two signals off the stage distribution and performance-by-stage
aggregates:

- stage distribution: share of ratings at stages 1-2;
- performance gradient: stage 4 average minus the mean of the stage 1
  and stage 2 averages.

Each is categorized as critical, needs attention or optimized, and the
stage distribution category selects a fixed set of recommendations.
"""

from __future__ import annotations

from talent_audit.core import policy
from talent_audit.models.interpretation import (
    ExecutiveSummary,
    HealthCategory,
    Interpretation,
    Recommendation,
)
from talent_audit.models.report import RoundReport

_STAGE_HEADLINES = {
    HealthCategory.CRITICAL:
        "Leadership readiness crisis - immediate development required",
    HealthCategory.NEEDS_ATTENTION:
        "Leadership development gaps - acceleration needed",
    HealthCategory.OPTIMIZED:
        "Strong leadership maturity - ready to scale",
}

_GRADIENT_HEADLINES = {
    HealthCategory.CRITICAL:
        "Performance inversion - senior leaders outperformed",
    HealthCategory.NEEDS_ATTENTION:
        "Limited performance progression across stages",
    HealthCategory.OPTIMIZED:
        "Strong performance maturation",
}

_RECOMMENDATIONS: dict[HealthCategory, list[tuple[str, str]]] = {
    HealthCategory.CRITICAL: [
        ("Establish business case",
         "Document the cost of underdeveloped leaders on growth, strategy "
         "and customer satisfaction"),
        ("Deploy rapid assessment",
         "Run individual assessments for every stage 1-2 leader"),
        ("Intensive development",
         "Pair stage 1-2 leaders with stage 4 mentors"),
        ("90-day acceleration plans",
         "Set clear milestones for stage progression"),
        ("External talent acquisition",
         "Bring in experienced leaders for critical stage 3-4 positions"),
    ],
    HealthCategory.NEEDS_ATTENTION: [
        ("Refine competency model",
         "Clarify foundational and differentiating competencies"),
        ("Structured assessment",
         "Use aggregated 360 assessments to locate capability gaps"),
        ("Focused development",
         "Create stretch assignments and cross-functional projects"),
        ("Measure progress quarterly",
         "Track stage progression with follow-up audits"),
        ("Performance management",
         "Make stage progression a key performance indicator"),
    ],
    HealthCategory.OPTIMIZED: [
        ("Document best practices",
         "Capture what works in the current development approach"),
        ("Stage 3 to 4 progression",
         "Run advanced programs for senior leader development"),
        ("Advanced development",
         "Offer global rotations and board-level exposure"),
        ("Measure business impact",
         "Track leadership capability against business metrics"),
        ("Manage reputation",
         "Report leadership strength in annual communications"),
    ],
}


def early_stage_share(report: RoundReport) -> float:
	"""Percentage of counted ratings at stage 1 or 2 (0 when empty)."""
	total = sum(s.count for s in report.stage_counts)
	if total == 0:
		return 0.0
	early = sum(report.count_for(s) for s in policy.EARLY_STAGES)
	return early / total * 100


def performance_gradient(report: RoundReport) -> float:
	"""Stage 4 average minus the mean of stage 1 and stage 2 averages."""
	early_avg = (report.average_for(1) + report.average_for(2)) / 2
	return report.average_for(4) - early_avg


def interpret_stage_distribution(report: RoundReport) -> Interpretation:
	share = early_stage_share(report)
	if share >= policy.EARLY_SHARE_CRITICAL:
		category = HealthCategory.CRITICAL
	elif share >= policy.EARLY_SHARE_ATTENTION:
		category = HealthCategory.NEEDS_ATTENTION
	else:
		category = HealthCategory.OPTIMIZED
	return Interpretation(category=category,
	                      headline=_STAGE_HEADLINES[category], metric=share)


def interpret_performance_gradient(report: RoundReport) -> Interpretation:
	gradient = performance_gradient(report)
	if gradient < policy.GRADIENT_CRITICAL:
		category = HealthCategory.CRITICAL
	elif gradient <= policy.GRADIENT_ATTENTION:
		category = HealthCategory.NEEDS_ATTENTION
	else:
		category = HealthCategory.OPTIMIZED
	return Interpretation(category=category,
	                      headline=_GRADIENT_HEADLINES[category],
	                      metric=gradient)


def overall_status(*readings: Interpretation) -> HealthCategory:
	"""Worst category among the readings."""
	categories = {r.category for r in readings}
	if HealthCategory.CRITICAL in categories:
		return HealthCategory.CRITICAL
	if HealthCategory.NEEDS_ATTENTION in categories:
		return HealthCategory.NEEDS_ATTENTION
	return HealthCategory.OPTIMIZED


def summarize(report: RoundReport) -> ExecutiveSummary | None:
	"""Interpret a round report; None when it holds no ratings.

	Parameters:
		report: Single-round report from build_round_report().

	Returns:
		ExecutiveSummary, or None for an empty report.
	"""
	if not any(s.count for s in report.stage_counts):
		return None
	stage = interpret_stage_distribution(report)
	gradient = interpret_performance_gradient(report)
	return ExecutiveSummary(
	    stage_distribution=stage,
	    performance_gradient=gradient,
	    overall_status=overall_status(stage, gradient),
	    recommendations=[
	        Recommendation(title=t, description=d)
	        for t, d in _RECOMMENDATIONS[stage.category]
	    ],
	)


__all__ = [
    "early_stage_share",
    "performance_gradient",
    "interpret_stage_distribution",
    "interpret_performance_gradient",
    "overall_status",
    "summarize",
]
