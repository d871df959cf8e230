"""
Single-round report models.

Defines the shape returned by the single-round query surface. An
unknown round yields the same shape with every collection empty.
"""

from __future__ import annotations

from pydantic import Field

from .base import CamelModel

CALCULATION_NOTE = ("Performance percentile calculated as: "
                    "((TotalPeople - Rank + 1) - 1) / (TotalPeople - 1) * 100")


class CompletionEntry(CamelModel):
	"""Completion state of one audit leader."""

	name: str
	email: str = ""
	completed: bool


class StageCount(CamelModel):
	stage: int
	count: int


class StageAverage(CamelModel):
	stage: int
	average: float


class RawDataRow(CamelModel):
	"""One eligible judgment from a completed leader."""

	leader: str
	employee: str
	title: str = ""
	business_unit: str = ""
	stage: int
	rank: int
	percentile: float


class RoundReport(CamelModel):
	"""Per-stage distribution and performance for one round."""

	audit_name: str = ""
	total_leaders: int = 0
	completed_leaders: int = 0
	completion_status: list[CompletionEntry] = Field(default_factory=list)
	stage_counts: list[StageCount] = Field(default_factory=list)
	average_performance: list[StageAverage] = Field(default_factory=list)
	raw_data: list[RawDataRow] = Field(default_factory=list)
	calculation_note: str = ""

	@classmethod
	def empty(cls) -> "RoundReport":
		"""Return the empty-but-valid report used for missing rounds."""
		return cls()

	@property
	def is_empty(self) -> bool:
		return not self.audit_name and not self.completion_status

	def count_for(self, stage: int) -> int:
		return next((s.count for s in self.stage_counts if s.stage == stage),
		            0)

	def average_for(self, stage: int) -> float:
		return next(
		    (s.average for s in self.average_performance if s.stage == stage),
		    0.0)


__all__ = [
    "CompletionEntry",
    "StageCount",
    "StageAverage",
    "RawDataRow",
    "RoundReport",
    "CALCULATION_NOTE",
]
