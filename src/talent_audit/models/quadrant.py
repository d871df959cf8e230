"""
Quadrant classification models.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import CamelModel


class Quadrant(str, Enum):
	"""Stage bracket x percentile bracket."""

	HIGH_POTENTIAL = "high_potential"  # early stage, higher percentile
	TOP_PERFORMER = "top_performer"  # senior stage, higher percentile
	DEVELOPING = "developing"  # early stage, lower percentile
	AT_RISK = "at_risk"  # senior stage, lower percentile


class PriorityKind(str, Enum):
	ADVANCEMENT_CANDIDATE = "advancement_candidate"
	DEVELOPMENT_RISK = "development_risk"


class QuadrantEntry(CamelModel):
	name: str
	title: str = ""
	business_unit: str = ""
	stage: int
	percentile: float
	quadrant: Quadrant


class PriorityAction(CamelModel):
	name: str
	stage: int
	percentile: float
	kind: PriorityKind


class QuadrantReport(CamelModel):
	"""Quadrant buckets and priority actions for one round."""

	audit_name: str = ""
	quadrants: dict[Quadrant, list[QuadrantEntry]] = Field(
	    default_factory=lambda: {q: [] for q in Quadrant})
	priority_actions: list[PriorityAction] = Field(default_factory=list)

	def count(self, quadrant: Quadrant) -> int:
		return len(self.quadrants.get(quadrant, []))


__all__ = [
    "Quadrant",
    "PriorityKind",
    "QuadrantEntry",
    "PriorityAction",
    "QuadrantReport",
]
