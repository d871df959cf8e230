"""
Terminal rendering for reports.

Builds Rich tables for the single-round, comparison and quadrant
reports. Table builders are pure so they can be inspected in tests;
ReportView prints them to a console.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from talent_audit.models.comparison import ComparisonReport, Presence
from talent_audit.models.interpretation import (
    ExecutiveSummary,
    HealthCategory,
)
from talent_audit.models.quadrant import PriorityKind, QuadrantReport
from talent_audit.models.report import RoundReport
from talent_audit.models.round import Round

_CATEGORY_STYLES = {
    HealthCategory.CRITICAL: "red",
    HealthCategory.NEEDS_ATTENTION: "yellow",
    HealthCategory.OPTIMIZED: "green",
}


def _change_text(value: int | None) -> Text:
	if value is None:
		return Text("-", style="dim")
	style = "green" if value > 0 else ("red" if value < 0 else "white")
	return Text(f"{value:+d}" if value else "0", style=style)


def stage_table(report: RoundReport) -> Table:
	"""Stage distribution and average percentile per stage."""
	table = Table(title="Leaders by Stage", box=box.ROUNDED, expand=True,
	              title_style="bold cyan")
	table.add_column("Stage")
	table.add_column("Count", justify="right")
	table.add_column("Average Percentile", justify="right")
	for count in report.stage_counts:
		table.add_row(f"Stage {count.stage}", str(count.count),
		              f"{report.average_for(count.stage):.1f}")
	return table


def completion_table(report: RoundReport) -> Table:
	table = Table(title="Leader Completion", box=box.ROUNDED, expand=True,
	              title_style="bold cyan")
	table.add_column("Leader")
	table.add_column("Email")
	table.add_column("Status")
	for entry in report.completion_status:
		status = (Text("completed", style="green")
		          if entry.completed else Text("pending", style="yellow"))
		table.add_row(entry.name, entry.email, status)
	return table


def summary_table(summary: ExecutiveSummary) -> Table:
	table = Table(title="Executive Summary", box=box.ROUNDED,
	              show_header=False, expand=True, title_style="bold yellow")
	table.add_column("Field", style="bold")
	table.add_column("Value")
	status = summary.overall_status
	table.add_row("Overall", Text(status.value,
	                              style=_CATEGORY_STYLES[status]))
	for label, reading in (("Stage distribution", summary.stage_distribution),
	                       ("Performance gradient",
	                        summary.performance_gradient)):
		table.add_row(
		    label,
		    Text(f"{reading.headline} ({reading.metric:.0f})",
		         style=_CATEGORY_STYLES[reading.category]))
	for rec in summary.recommendations:
		table.add_row("Recommendation", f"{rec.title}: {rec.description}")
	return table


def comparison_table(report: ComparisonReport) -> Table:
	"""Per-employee stage and performance changes."""
	table = Table(title="Employee Movement", box=box.ROUNDED, expand=True,
	              title_style="bold cyan")
	table.add_column("Employee")
	table.add_column("Business Unit")
	table.add_column("Prev Stage", justify="right")
	table.add_column("Curr Stage", justify="right")
	table.add_column("Stage Δ", justify="right")
	table.add_column("Prev Perf", justify="right")
	table.add_column("Curr Perf", justify="right")
	table.add_column("Perf Δ", justify="right")
	table.add_column("Status")

	def fmt(v: int | None) -> str:
		return "-" if v is None else str(v)

	for rec in report.comparisons:
		status_style = {
		    Presence.BOTH: "white",
		    Presence.NEW_HIRE: "cyan",
		    Presence.DEPARTURE: "magenta",
		}[rec.presence]
		table.add_row(
		    rec.name,
		    rec.business_unit,
		    fmt(rec.previous_stage),
		    fmt(rec.current_stage),
		    _change_text(rec.stage_change),
		    fmt(rec.previous_performance),
		    fmt(rec.current_performance),
		    _change_text(rec.performance_change),
		    Text(rec.presence.value, style=status_style),
		)
	return table


def movement_table(report: ComparisonReport) -> Table:
	table = Table(title="Movements", box=box.ROUNDED, show_header=False,
	              expand=True, title_style="bold cyan")
	table.add_column("Movement", style="bold")
	table.add_column("Count", justify="right")
	for name, value in report.movements.model_dump().items():
		table.add_row(name.replace("_", " ").capitalize(), str(value))
	return table


def roi_table(report: ComparisonReport) -> Table:
	roi = report.roi_metrics
	score = roi.talent_health_score
	score_style = "green" if score >= 70 else ("yellow"
	                                           if score >= 40 else "red")
	table = Table(title="ROI", box=box.ROUNDED, show_header=False,
	              expand=True, title_style="bold yellow")
	table.add_column("Metric", style="bold")
	table.add_column("Value")
	table.add_row("Talent health score", Text(str(score), style=score_style))
	table.add_row("High potential advanced", str(roi.high_potential_advanced))
	table.add_row("At risk improved", str(roi.at_risk_improved))
	table.add_row(
	    "Succession ready", f"{roi.succession_readiness.previous_ready} -> "
	    f"{roi.succession_readiness.current_ready}")
	for t in report.movement_patterns.transitions:
		table.add_row(f"{t.from_stage} → {t.to_stage}", str(t.value))
	return table


def quadrant_table(report: QuadrantReport) -> Table:
	table = Table(title=f"Quadrants: {report.audit_name}", box=box.ROUNDED,
	              expand=True, title_style="bold cyan")
	table.add_column("Quadrant")
	table.add_column("Count", justify="right")
	table.add_column("Employees")
	for quadrant, entries in report.quadrants.items():
		names = ", ".join(e.name for e in entries) or "-"
		table.add_row(quadrant.value.replace("_", " "), str(len(entries)),
		              names)
	return table


def priority_table(report: QuadrantReport) -> Table:
	table = Table(title="Priority Actions", box=box.ROUNDED, expand=True,
	              title_style="bold yellow")
	table.add_column("Employee")
	table.add_column("Stage", justify="right")
	table.add_column("Percentile", justify="right")
	table.add_column("Action")
	for action in report.priority_actions:
		style = ("green" if action.kind == PriorityKind.ADVANCEMENT_CANDIDATE
		         else "red")
		table.add_row(action.name, str(action.stage),
		              f"{action.percentile:.0f}",
		              Text(action.kind.value.replace("_", " "), style=style))
	return table


def rounds_table(rounds: list[Round]) -> Table:
	table = Table(title="Rounds", box=box.ROUNDED, expand=True,
	              title_style="bold cyan")
	table.add_column("Id")
	table.add_column("Name")
	table.add_column("Round", justify="right")
	table.add_column("Previous")
	table.add_column("Leaders", justify="right")
	for audit in rounds:
		done = len(audit.completed_raters)
		table.add_row(audit.id, audit.name, str(audit.round),
		              audit.previous_round_id or "-",
		              f"{done}/{len(audit.raters)}")
	return table


class ReportView:
	"""Prints report tables to a Rich console."""

	def __init__(self, console: Console | None = None):
		self.console = console or Console()

	def print_round(self, report: RoundReport,
	                summary: ExecutiveSummary | None = None) -> None:
		if report.is_empty:
			self.console.print("[yellow]No data for this round.[/yellow]")
			return
		self.console.print(f"[bold]{report.audit_name}[/bold] "
		                   f"({report.completed_leaders}/"
		                   f"{report.total_leaders} leaders completed)")
		self.console.print(completion_table(report))
		self.console.print(stage_table(report))
		if summary:
			self.console.print(summary_table(summary))
		self.console.print(f"[dim]{report.calculation_note}[/dim]")

	def print_comparison(self, report: ComparisonReport) -> None:
		self.console.print(
		    f"[bold]{report.current_audit.name}[/bold] (round "
		    f"{report.current_audit.round}) vs "
		    f"[bold]{report.previous_audit.name}[/bold] (round "
		    f"{report.previous_audit.round})")
		self.console.print(comparison_table(report))
		self.console.print(movement_table(report))
		self.console.print(roi_table(report))

	def print_quadrants(self, report: QuadrantReport) -> None:
		self.console.print(quadrant_table(report))
		if report.priority_actions:
			self.console.print(priority_table(report))

	def print_rounds(self, rounds: list[Round]) -> None:
		self.console.print(rounds_table(rounds))


__all__ = [
    "ReportView",
    "stage_table",
    "completion_table",
    "summary_table",
    "comparison_table",
    "movement_table",
    "roi_table",
    "quadrant_table",
    "priority_table",
    "rounds_table",
]
