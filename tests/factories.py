"""Builders for round snapshots and ratings used across tests."""

from __future__ import annotations

from talent_audit.models.ratings import NormalizedRating, SubjectRecord
from talent_audit.models.round import Judgment, Rater, Round, Subject


def make_subject(name: str, round_id: str = "r", email: str | None = None,
                 unique_id: str | None = None, title: str = "",
                 business_unit: str = "") -> Subject:
	return Subject(
	    id=f"{round_id}-{name}",
	    name=name,
	    email=f"{name.lower()}@example.com" if email is None else email,
	    unique_id=unique_id,
	    title=title,
	    business_unit=business_unit,
	)


def make_round(round_id: str, leaders: list, *, name: str | None = None,
               number: int = 1,
               subjects: list[Subject] | None = None) -> Round:
	"""Build a Round from compact leader specs.

	leaders: list of (leader_name, completed, [(employee, stage, rank)]).
	Employees not supplied in ``subjects`` are created on first mention
	with an ``<name>@example.com`` email.
	"""
	by_name = {s.name: s for s in subjects or []}
	for _, _, ratings in leaders:
		for employee, _, _ in ratings:
			if employee not in by_name:
				by_name[employee] = make_subject(employee, round_id)
	raters = [
	    Rater(
	        id=f"{round_id}-L{i}",
	        token=f"tok-{round_id}-{i}",
	        name=leader,
	        email=f"{leader.lower()}@example.com",
	        completed=completed,
	        judgments=[
	            Judgment(subject_id=by_name[e].id, stage=s, rank=r)
	            for e, s, r in ratings
	        ],
	    ) for i, (leader, completed, ratings) in enumerate(leaders)
	]
	return Round(id=round_id, name=name or f"Audit {round_id}",
	             round=number, subjects=list(by_name.values()),
	             raters=raters)


def make_rating(name: str, stage: int, percentile: float,
                rater: str = "Lead", email: str | None = None,
                unique_id: str | None = None) -> NormalizedRating:
	return NormalizedRating(
	    rater_name=rater,
	    subject=make_subject(name, email=email, unique_id=unique_id),
	    stage=stage,
	    rank=1,
	    converted_rank=1,
	    percentile=percentile,
	    total_in_group=1,
	)


def make_record(key: str, stage: int, percentile: float) -> SubjectRecord:
	return SubjectRecord(key=key, subject_id=f"id-{key}", name=key,
	                     email=key, stage=stage, percentile=percentile)
