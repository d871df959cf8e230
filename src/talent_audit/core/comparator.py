"""
Cross-round comparison.

Matches employees between a current and a previous round by their
identity key and computes stage and performance deltas.
"""

from __future__ import annotations

from typing import Mapping

from talent_audit.models.comparison import ComparisonRecord, Presence
from talent_audit.models.ratings import SubjectRecord
from talent_audit.utils.numbers import round_half_up


def _base_fields(record: SubjectRecord) -> dict:
	return {
	    "employee_id": record.subject_id,
	    "name": record.name,
	    "email": record.email,
	    "title": record.title,
	    "business_unit": record.business_unit,
	}


def compare_rounds(
    current: Mapping[str, SubjectRecord],
    previous: Mapping[str, SubjectRecord],
) -> list[ComparisonRecord]:
	"""Compare two rounds reduced to one record per employee.

	Employees of the current round come first, in current order, as
	either matched (``both``) or ``new_hire`` records; employees only in
	the previous round follow as ``departure`` records.

	Parameters:
		current: Current round records keyed by identity.
		previous: Previous round records keyed by identity.

	Returns:
		One ComparisonRecord per distinct identity across both rounds.
	"""
	comparisons: list[ComparisonRecord] = []
	for key, cur in current.items():
		prev = previous.get(key)
		if prev is None:
			comparisons.append(
			    ComparisonRecord(
			        **_base_fields(cur),
			        presence=Presence.NEW_HIRE,
			        current_stage=cur.stage,
			        current_performance=round_half_up(cur.percentile),
			    ))
			continue
		comparisons.append(
		    ComparisonRecord(
		        **_base_fields(cur),
		        presence=Presence.BOTH,
		        previous_stage=prev.stage,
		        previous_performance=round_half_up(prev.percentile),
		        current_stage=cur.stage,
		        current_performance=round_half_up(cur.percentile),
		        stage_change=cur.stage - prev.stage,
		        performance_change=round_half_up(cur.percentile -
		                                         prev.percentile),
		    ))

	for key, prev in previous.items():
		if key in current:
			continue
		comparisons.append(
		    ComparisonRecord(
		        **_base_fields(prev),
		        presence=Presence.DEPARTURE,
		        previous_stage=prev.stage,
		        previous_performance=round_half_up(prev.percentile),
		    ))
	return comparisons


__all__ = ["compare_rounds"]
