from talent_audit.core.interpretation import summarize
from talent_audit.core.reports import compare, round_report
from talent_audit.models.report import RoundReport
from talent_audit.ui.reporting import (
    render_comparison_md,
    render_round_md,
    save_report_md,
)

from factories import make_round


def _rounds():
	previous = make_round("p", [
	    ("Lead", True, [("Ann", 2, 2), ("Dana", 2, 1)]),
	], name="Q1", number=1)
	current = make_round("c", [
	    ("Lead", True, [("Ann", 3, 1), ("Eve", 1, 2)]),
	], name="Q2", number=2)
	return current, previous


def test_render_round_md():
	current, _ = _rounds()
	report = round_report(current)
	md = render_round_md(report, summarize(report))
	assert "Talent Audit Report: Q2" in md
	assert "| 3 | 1 | 100.0 |" in md
	assert "## Executive Summary" in md
	assert "### Recommendations" in md
	assert report.calculation_note in md


def test_render_empty_round_md():
	md = render_round_md(RoundReport.empty())
	assert "(unknown round)" in md
	assert "Executive Summary" not in md


def test_render_comparison_md():
	current, previous = _rounds()
	md = render_comparison_md(compare(current, previous))
	assert "Q2 vs Q1" in md
	assert "Round 1 -> Round 2" in md
	assert "| Stage 2 | Stage 3 | 1 |" in md
	assert "| Departures            | 1" in md
	assert "| Talent health score     | 100" in md


def test_save_report_md_creates_parents(tmp_path):
	path = tmp_path / "out" / "nested" / "report.md"
	save_report_md(path, "# hi\n")
	assert path.read_text() == "# hi\n"
