"""
Single-round quadrant classification.

Partitions employees by stage bracket (early 1-2, senior 3-4) and
percentile bracket (higher > 50, lower <= 50), and flags priority
actions at the extremes.
"""

from __future__ import annotations

from typing import Iterable

from talent_audit.core import policy
from talent_audit.models.quadrant import (
    PriorityAction,
    PriorityKind,
    Quadrant,
    QuadrantEntry,
    QuadrantReport,
)
from talent_audit.models.ratings import SubjectRecord


def classify_quadrant(stage: int, percentile: float) -> Quadrant | None:
	"""Return the quadrant for a stage/percentile pair.

	Returns None for a stage outside 1-4.
	"""
	higher = percentile > policy.QUADRANT_SPLIT
	if stage in policy.EARLY_STAGES:
		return Quadrant.HIGH_POTENTIAL if higher else Quadrant.DEVELOPING
	if stage in policy.SENIOR_STAGES:
		return Quadrant.TOP_PERFORMER if higher else Quadrant.AT_RISK
	return None


def priority_action(record: SubjectRecord) -> PriorityAction | None:
	"""Flag early-stage stars and struggling senior employees."""
	kind = None
	if (record.stage in policy.EARLY_STAGES
	    and record.percentile > policy.ADVANCEMENT_PERCENTILE):
		kind = PriorityKind.ADVANCEMENT_CANDIDATE
	elif (record.stage in policy.SENIOR_STAGES
	      and record.percentile < policy.DEVELOPMENT_RISK_PERCENTILE):
		kind = PriorityKind.DEVELOPMENT_RISK
	if kind is None:
		return None
	return PriorityAction(name=record.name, stage=record.stage,
	                      percentile=record.percentile, kind=kind)


def classify_quadrants(records: Iterable[SubjectRecord],
                       audit_name: str = "") -> QuadrantReport:
	"""Bucket combined employee records into quadrants.

	Parameters:
		records: One record per employee for a single round.
		audit_name: Name of the round, carried into the report.

	Returns:
		QuadrantReport with every quadrant present (possibly empty).
	"""
	report = QuadrantReport(audit_name=audit_name)
	for rec in records:
		quadrant = classify_quadrant(rec.stage, rec.percentile)
		if quadrant is None:
			continue
		report.quadrants[quadrant].append(
		    QuadrantEntry(
		        name=rec.name,
		        title=rec.title,
		        business_unit=rec.business_unit,
		        stage=rec.stage,
		        percentile=rec.percentile,
		        quadrant=quadrant,
		    ))
		action = priority_action(rec)
		if action:
			report.priority_actions.append(action)
	return report


__all__ = ["classify_quadrant", "priority_action", "classify_quadrants"]
