"""
Normalized rating models.

Defines the per-judgment normalized rating and the per-employee record
produced by combining ratings from several leaders.
"""

from __future__ import annotations

from pydantic import BaseModel

from .round import Subject


class NormalizedRating(BaseModel):
	"""An eligible judgment with its rank converted to a percentile."""

	rater_name: str
	subject: Subject
	stage: int
	rank: int
	converted_rank: int
	percentile: float
	total_in_group: int


class SubjectRecord(BaseModel):
	"""One employee's combined stage and percentile within a round.

	``stage_total`` and ``percentile_total`` accumulate raw observations
	so the arithmetic mean can be taken when the combine mode asks for it.
	"""

	key: str
	subject_id: str
	name: str
	email: str = ""
	title: str = ""
	business_unit: str = ""
	stage: int
	percentile: float
	rating_count: int = 1
	stage_total: int = 0
	percentile_total: float = 0.0


__all__ = ["NormalizedRating", "SubjectRecord"]
