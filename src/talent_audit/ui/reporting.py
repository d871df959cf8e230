"""
Report rendering and persistence utilities.

Provides functions for rendering round and comparison reports to
markdown and saving report content to disk.
"""

from __future__ import annotations

from pathlib import Path
from string import Template

from talent_audit.models.comparison import ComparisonReport
from talent_audit.models.interpretation import ExecutiveSummary
from talent_audit.models.report import RoundReport

ROUND_TEMPLATE = Template("""# Talent Audit Report: ${audit_name}

## Completion

| Item              | Value                |
| ----------------- | -------------------- |
| Leaders           | ${total_leaders}     |
| Completed         | ${completed_leaders} |
| Ratings counted   | ${rating_count}      |

## Leaders by Stage

| Stage | Count | Average Percentile |
| ----- | ----- | ------------------ |
${stage_rows}

${interpretation}
> ${calculation_note}
""")

COMPARISON_TEMPLATE = Template("""# Talent Audit Comparison: ${current_name} vs ${previous_name}

Round ${previous_round} -> Round ${current_round}

## Movements

| Movement              | Count                      |
| --------------------- | -------------------------- |
| Promoted              | ${promoted}                |
| Maintained            | ${maintained}              |
| Demoted               | ${demoted}                 |
| New hires             | ${new_hires}               |
| Departures            | ${departures}              |
| Performance improved  | ${performance_improved}    |
| Performance maintained| ${performance_maintained}  |
| Performance declined  | ${performance_declined}    |

## Stage Transitions

| From | To | Employees |
| ---- | -- | --------- |
${transition_rows}

## ROI

| Metric                  | Value                      |
| ----------------------- | -------------------------- |
| Talent health score     | ${talent_health_score}     |
| High potential advanced | ${high_potential_advanced} |
| At risk improved        | ${at_risk_improved}        |
| Succession ready        | ${previous_ready} -> ${current_ready} |
""")


def _render_interpretation(summary: ExecutiveSummary | None) -> str:
	if summary is None:
		return ""
	lines = [
	    f"## Executive Summary: {summary.overall_status.value}",
	    "",
	    f"- Stage distribution ({summary.stage_distribution.metric:.0f}% "
	    f"in stages 1-2): {summary.stage_distribution.headline}",
	    f"- Performance gradient ({summary.performance_gradient.metric:+.0f}"
	    f"): {summary.performance_gradient.headline}",
	    "",
	    "### Recommendations",
	    "",
	]
	lines += [f"- **{r.title}**: {r.description}"
	          for r in summary.recommendations]
	return "\n".join(lines) + "\n"


def render_round_md(report: RoundReport,
                    summary: ExecutiveSummary | None = None) -> str:
	"""
	Render a markdown report from a RoundReport.

	Parameters:
		report: Single-round report.
		summary: Optional interpretation to include.

	Returns:
		Rendered markdown string.
	"""
	averages = {a.stage: a.average for a in report.average_performance}
	stage_rows = "\n".join(
	    f"| {s.stage} | {s.count} | {averages.get(s.stage, 0.0):.1f} |"
	    for s in report.stage_counts)
	return ROUND_TEMPLATE.safe_substitute(
	    audit_name=report.audit_name or "(unknown round)",
	    total_leaders=report.total_leaders,
	    completed_leaders=report.completed_leaders,
	    rating_count=len(report.raw_data),
	    stage_rows=stage_rows,
	    interpretation=_render_interpretation(summary),
	    calculation_note=report.calculation_note,
	)


def render_comparison_md(report: ComparisonReport) -> str:
	"""Render a markdown report from a ComparisonReport."""
	transition_rows = "\n".join(
	    f"| {t.from_stage} | {t.to_stage} | {t.value} |"
	    for t in report.movement_patterns.transitions)
	roi = report.roi_metrics
	return COMPARISON_TEMPLATE.safe_substitute(
	    current_name=report.current_audit.name,
	    previous_name=report.previous_audit.name,
	    current_round=report.current_audit.round,
	    previous_round=report.previous_audit.round,
	    transition_rows=transition_rows,
	    talent_health_score=roi.talent_health_score,
	    high_potential_advanced=roi.high_potential_advanced,
	    at_risk_improved=roi.at_risk_improved,
	    previous_ready=roi.succession_readiness.previous_ready,
	    current_ready=roi.succession_readiness.current_ready,
	    **report.movements.model_dump(),
	)


def save_report_md(path: Path | str, content: str) -> None:
	"""
	Persist markdown content to disk, ensuring parent directories.

	Parameters:
		path: Destination file path.
		content: Markdown content to write.
	"""
	Path(path).parent.mkdir(parents=True, exist_ok=True)
	Path(path).write_text(content, encoding="utf-8")


__all__ = ["render_round_md", "render_comparison_md", "save_report_md"]
