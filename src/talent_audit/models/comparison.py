"""
Cross-round comparison models.

Defines the per-employee comparison record, the movement tally, the
stage transition histogram and the ROI block returned by the two-round
comparison surface.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from .base import CamelModel


class Presence(str, Enum):
	"""Which of the two rounds an employee appears in."""

	BOTH = "both"
	NEW_HIRE = "new_hire"
	DEPARTURE = "departure"


class RoundSummary(CamelModel):
	id: str
	name: str
	round: int
	date: datetime | None = None


class ComparisonRecord(CamelModel):
	"""One employee's stage and performance across two rounds.

	Only the current-side fields are set for new hires and only the
	previous-side fields for departures.
	"""

	employee_id: str
	name: str
	email: str = ""
	title: str = ""
	business_unit: str = ""
	presence: Presence
	previous_stage: int | None = None
	previous_performance: int | None = None
	current_stage: int | None = None
	current_performance: int | None = None
	stage_change: int | None = None
	performance_change: int | None = None


class MovementSummary(CamelModel):
	promoted: int = 0
	maintained: int = 0
	demoted: int = 0
	new_hires: int = 0
	departures: int = 0
	performance_improved: int = 0
	performance_maintained: int = 0
	performance_declined: int = 0


class Transition(CamelModel):
	"""One edge of the stage flow histogram."""

	from_stage: str = Field(alias="from")
	to_stage: str = Field(alias="to")
	value: int


class StageChangeBuckets(CamelModel):
	promoted: list[ComparisonRecord] = Field(default_factory=list)
	maintained: list[ComparisonRecord] = Field(default_factory=list)
	demoted: list[ComparisonRecord] = Field(default_factory=list)


class MovementPatterns(CamelModel):
	transitions: list[Transition] = Field(default_factory=list)
	by_stage_change: StageChangeBuckets = Field(
	    default_factory=StageChangeBuckets)


class SuccessionReadiness(CamelModel):
	"""Employees at a senior stage before and after."""

	previous_ready: int = 0
	current_ready: int = 0


class RoiMetrics(CamelModel):
	high_potential_advanced: int = 0
	at_risk_improved: int = 0
	talent_health_score: int = 50
	succession_readiness: SuccessionReadiness = Field(
	    default_factory=SuccessionReadiness)


class ComparisonReport(CamelModel):
	"""Full two-round comparison."""

	current_audit: RoundSummary
	previous_audit: RoundSummary
	comparisons: list[ComparisonRecord] = Field(default_factory=list)
	movements: MovementSummary = Field(default_factory=MovementSummary)
	movement_patterns: MovementPatterns = Field(
	    default_factory=MovementPatterns)
	roi_metrics: RoiMetrics = Field(default_factory=RoiMetrics)


__all__ = [
    "Presence",
    "RoundSummary",
    "ComparisonRecord",
    "MovementSummary",
    "Transition",
    "StageChangeBuckets",
    "MovementPatterns",
    "SuccessionReadiness",
    "RoiMetrics",
    "ComparisonReport",
]
