"""
Round setup and rating submission models.

Inputs accepted by a round store when a new audit is created and when
a leader submits their stage/rank judgments.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import CamelModel
from .round import STAGES


class SubjectInput(CamelModel):
	"""An employee to include in a new round."""

	name: str
	email: str = ""
	unique_id: str | None = None
	title: str = ""
	business_unit: str = ""

	@property
	def tracking_id(self) -> str | None:
		"""External id used to follow the employee across rounds."""
		return self.unique_id or self.email or None


class RaterInput(CamelModel):
	"""An audit leader and the names of the employees they rate."""

	name: str
	email: str = ""
	employees: list[str] = Field(default_factory=list)


class RoundSetup(CamelModel):
	name: str
	round: int = 1
	previous_round_id: str | None = None
	organization_name: str = "Unspecified"
	employees: list[SubjectInput] = Field(default_factory=list)
	audit_leaders: list[RaterInput] = Field(default_factory=list)

	@field_validator("round")
	@classmethod
	def validate_round(cls, v: int) -> int:
		if v <= 0:
			raise ValueError("round must be > 0")
		return v


class RaterLink(CamelModel):
	"""Per-leader access token returned after a round is created."""

	name: str
	email: str = ""
	token: str
	employees: list[str] = Field(default_factory=list)


class RoundCreated(CamelModel):
	audit_id: str
	audit_name: str
	organization_name: str
	round: int
	links: list[RaterLink] = Field(default_factory=list)


class RatingSubmission(CamelModel):
	"""One submitted stage/rank for an assigned employee."""

	subject_id: str
	stage: int
	rank: int

	@field_validator("stage")
	@classmethod
	def validate_stage(cls, v: int) -> int:
		if v not in STAGES:
			raise ValueError("stage must be 1-4")
		return v


__all__ = [
    "SubjectInput",
    "RaterInput",
    "RoundSetup",
    "RaterLink",
    "RoundCreated",
    "RatingSubmission",
]
