"""
Round snapshot models.

A Round is one audit cycle: the employees being evaluated (subjects),
the audit leaders rating them (raters) and each leader's stage/rank
judgments. Snapshots are fetched from a store once per query and never
mutated by the analytics core.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator, model_validator

from .base import CamelModel

UNSET_STAGE = 0
UNSET_RANK = 999
STAGES = (1, 2, 3, 4)


class Subject(CamelModel):
	"""An employee being evaluated."""

	id: str
	name: str
	unique_id: str | None = Field(
	    default=None,
	    description="Stable external identifier, usually an email",
	)
	email: str = ""
	title: str = ""
	business_unit: str = ""


class Judgment(CamelModel):
	"""One leader's stage and rank for one employee."""

	subject_id: str
	stage: int = UNSET_STAGE
	rank: int = UNSET_RANK

	@field_validator("stage")
	@classmethod
	def validate_stage(cls, v: int) -> int:
		if v != UNSET_STAGE and v not in STAGES:
			raise ValueError("stage must be 0 (unset) or 1-4")
		return v

	@field_validator("rank")
	@classmethod
	def validate_rank(cls, v: int) -> int:
		if v < 1:
			raise ValueError("rank must be >= 1")
		return v

	@property
	def eligible(self) -> bool:
		"""True once both stage and rank have been submitted."""
		return self.stage > UNSET_STAGE and self.rank < UNSET_RANK


class Rater(CamelModel):
	"""An audit leader and the judgments assigned to them."""

	id: str
	token: str
	name: str
	email: str = ""
	completed: bool = False
	judgments: list[Judgment] = Field(default_factory=list)

	@property
	def assigned_count(self) -> int:
		"""Number of employees assigned to this leader, rated or not."""
		return len(self.judgments)


class Round(CamelModel):
	"""A complete audit cycle snapshot."""

	id: str
	name: str
	round: int = 1
	created_at: datetime | None = None
	previous_round_id: str | None = None
	organization_name: str = ""
	subjects: list[Subject] = Field(default_factory=list)
	raters: list[Rater] = Field(default_factory=list)

	@model_validator(mode="after")
	def check_references(self) -> "Round":
		known = {s.id for s in self.subjects}
		for rater in self.raters:
			for judgment in rater.judgments:
				if judgment.subject_id not in known:
					raise ValueError(
					    f"rater {rater.id} references unknown subject "
					    f"{judgment.subject_id}")
		return self

	def subject_index(self) -> dict[str, Subject]:
		"""Return subjects keyed by store id."""
		return {s.id: s for s in self.subjects}

	@property
	def completed_raters(self) -> list[Rater]:
		return [r for r in self.raters if r.completed]


__all__ = [
    "Subject",
    "Judgment",
    "Rater",
    "Round",
    "UNSET_STAGE",
    "UNSET_RANK",
    "STAGES",
]
