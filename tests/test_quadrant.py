"""Tests for quadrant classification and priority actions."""

import pytest

from talent_audit.core.quadrant import (
    classify_quadrant,
    classify_quadrants,
    priority_action,
)
from talent_audit.models.quadrant import PriorityKind, Quadrant

from factories import make_record


@pytest.mark.parametrize("stage,pct,expected", [
    (1, 90, Quadrant.HIGH_POTENTIAL),
    (2, 51, Quadrant.HIGH_POTENTIAL),
    (2, 50, Quadrant.DEVELOPING),
    (1, 0, Quadrant.DEVELOPING),
    (3, 50.1, Quadrant.TOP_PERFORMER),
    (4, 100, Quadrant.TOP_PERFORMER),
    (3, 50, Quadrant.AT_RISK),
    (4, 10, Quadrant.AT_RISK),
])
def test_classify_quadrant(stage, pct, expected):
	assert classify_quadrant(stage, pct) == expected


def test_unknown_stage_has_no_quadrant():
	assert classify_quadrant(0, 80) is None


def test_priority_actions_at_the_extremes():
	star = priority_action(make_record("star", 2, 76))
	assert star.kind == PriorityKind.ADVANCEMENT_CANDIDATE
	risk = priority_action(make_record("risk", 4, 24))
	assert risk.kind == PriorityKind.DEVELOPMENT_RISK
	assert priority_action(make_record("edge", 1, 75)) is None
	assert priority_action(make_record("edge", 3, 25)) is None


def test_classify_quadrants_partitions_records():
	records = [
	    make_record("a", 1, 90),
	    make_record("b", 2, 30),
	    make_record("c", 3, 70),
	    make_record("d", 4, 10),
	    make_record("e", 4, 60),
	]
	report = classify_quadrants(records, audit_name="Q1")
	assert report.audit_name == "Q1"
	assert report.count(Quadrant.HIGH_POTENTIAL) == 1
	assert report.count(Quadrant.DEVELOPING) == 1
	assert report.count(Quadrant.TOP_PERFORMER) == 2
	assert report.count(Quadrant.AT_RISK) == 1
	assert sum(report.count(q) for q in Quadrant) == len(records)
	kinds = {a.name: a.kind for a in report.priority_actions}
	assert kinds == {
	    "a": PriorityKind.ADVANCEMENT_CANDIDATE,
	    "d": PriorityKind.DEVELOPMENT_RISK,
	}


def test_empty_input_keeps_every_quadrant():
	report = classify_quadrants([])
	assert set(report.quadrants) == set(Quadrant)
	assert all(report.count(q) == 0 for q in Quadrant)
	assert report.priority_actions == []


def test_quadrant_report_serializes_with_camel_case_keys():
	report = classify_quadrants([make_record("a", 1, 90)], audit_name="Q1")
	data = report.to_api()
	assert data["auditName"] == "Q1"
	assert data["quadrants"]["high_potential"][0]["businessUnit"] == ""
	assert data["priorityActions"][0]["kind"] == "advancement_candidate"
