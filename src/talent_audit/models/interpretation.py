"""
Executive interpretation models for a single-round report.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import CamelModel


class HealthCategory(str, Enum):
	CRITICAL = "CRITICAL"
	NEEDS_ATTENTION = "NEEDS ATTENTION"
	OPTIMIZED = "OPTIMIZED"


class Interpretation(CamelModel):
	"""A categorized reading of one report metric."""

	category: HealthCategory
	headline: str
	metric: float = Field(description="Value the category was derived from")


class Recommendation(CamelModel):
	title: str
	description: str


class ExecutiveSummary(CamelModel):
	"""Stage distribution and performance gradient readings combined."""

	stage_distribution: Interpretation
	performance_gradient: Interpretation
	overall_status: HealthCategory
	recommendations: list[Recommendation] = Field(default_factory=list)


__all__ = [
    "HealthCategory",
    "Interpretation",
    "Recommendation",
    "ExecutiveSummary",
]
