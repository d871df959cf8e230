"""
Report query surfaces.

Composes normalization, aggregation, comparison, movement and scoring
over snapshots fetched once per call from a round store.

The single-round and quadrant surfaces degrade to an empty report when
the round id is missing or unknown. The comparison surface raises
MissingRoundIdError / RoundNotFoundError instead.
"""

from __future__ import annotations

from talent_audit.core.aggregator import (
    combine_by_subject,
    stage_averages,
    stage_counts,
)
from talent_audit.core.comparator import compare_rounds
from talent_audit.core.errors import MissingRoundIdError, RoundNotFoundError
from talent_audit.core.health import roi_metrics
from talent_audit.core.identity import IdentityResolver, best_effort_identity
from talent_audit.core.movement import movement_patterns, tally_movements
from talent_audit.core.normalizer import normalize_round
from talent_audit.core.quadrant import classify_quadrants
from talent_audit.models.comparison import ComparisonReport, RoundSummary
from talent_audit.models.config import CombineMode
from talent_audit.models.quadrant import QuadrantReport
from talent_audit.models.ratings import SubjectRecord
from talent_audit.models.report import (
    CALCULATION_NOTE,
    CompletionEntry,
    RawDataRow,
    RoundReport,
)
from talent_audit.models.round import Round
from talent_audit.utils.logging import get_logger
from talent_audit.utils.numbers import round_half_up
from talent_audit.utils.protocols import RoundStoreProtocol

logger = get_logger(__name__)


def round_report(audit: Round) -> RoundReport:
	"""Build the single-round report from a snapshot."""
	ratings = list(normalize_round(audit))
	return RoundReport(
	    audit_name=audit.name,
	    total_leaders=len(audit.raters),
	    completed_leaders=len(audit.completed_raters),
	    completion_status=[
	        CompletionEntry(name=r.name, email=r.email, completed=r.completed)
	        for r in audit.raters
	    ],
	    stage_counts=stage_counts(ratings),
	    average_performance=stage_averages(ratings),
	    raw_data=[
	        RawDataRow(
	            leader=r.rater_name,
	            employee=r.subject.name,
	            title=r.subject.title,
	            business_unit=r.subject.business_unit,
	            stage=r.stage,
	            rank=r.rank,
	            percentile=round_half_up(r.percentile * 10) / 10,
	        ) for r in ratings
	    ],
	    calculation_note=CALCULATION_NOTE,
	)


def build_round_report(store: RoundStoreProtocol,
                       round_id: str | None) -> RoundReport:
	"""
	Single-round report surface.

	Parameters:
		store: Round store to read from.
		round_id: Round identifier.

	Returns:
		RoundReport; empty when round_id is missing or unknown.
	"""
	if not round_id:
		logger.warning("round report requested without a round id")
		return RoundReport.empty()
	audit = store.fetch_round(round_id)
	if audit is None:
		logger.warning("round %s not found, returning empty report",
		               round_id)
		return RoundReport.empty()
	report = round_report(audit)
	logger.info("round report %s: %d/%d leaders completed, %d ratings",
	            round_id, report.completed_leaders, report.total_leaders,
	            len(report.raw_data))
	return report


def subject_records(
    audit: Round,
    identity: IdentityResolver = best_effort_identity,
    mode: CombineMode = CombineMode.LEGACY,
) -> dict[str, SubjectRecord]:
	"""Reduce a round to one combined record per employee."""
	return combine_by_subject(normalize_round(audit), identity=identity,
	                          mode=mode)


def _summary(audit: Round) -> RoundSummary:
	return RoundSummary(id=audit.id, name=audit.name, round=audit.round,
	                    date=audit.created_at)


def compare(
    current_audit: Round,
    previous_audit: Round,
    identity: IdentityResolver = best_effort_identity,
    mode: CombineMode = CombineMode.LEGACY,
) -> ComparisonReport:
	"""Build the comparison report from two snapshots."""
	current = subject_records(current_audit, identity, mode)
	previous = subject_records(previous_audit, identity, mode)
	comparisons = compare_rounds(current, previous)
	movements = tally_movements(comparisons)
	return ComparisonReport(
	    current_audit=_summary(current_audit),
	    previous_audit=_summary(previous_audit),
	    comparisons=comparisons,
	    movements=movements,
	    movement_patterns=movement_patterns(comparisons),
	    roi_metrics=roi_metrics(comparisons, movements, current, previous),
	)


def build_comparison_report(
    store: RoundStoreProtocol,
    current_id: str | None,
    previous_id: str | None,
    identity: IdentityResolver = best_effort_identity,
    mode: CombineMode = CombineMode.LEGACY,
) -> ComparisonReport:
	"""
	Two-round comparison surface.

	Parameters:
		store: Round store to read from.
		current_id: Current round identifier.
		previous_id: Previous round identifier.
		identity: Resolver used to match employees across rounds.
		mode: Combination rule for employees rated by several leaders.

	Returns:
		ComparisonReport.

	Raises:
		MissingRoundIdError: If either id is missing.
		RoundNotFoundError: If either round is unknown.
	"""
	if not current_id or not previous_id:
		raise MissingRoundIdError(
		    "Both current and previous round ids are required")
	current_audit, previous_audit = store.fetch_rounds(current_id,
	                                                   previous_id)
	missing = [
	    rid for rid, audit in ((current_id, current_audit),
	                           (previous_id, previous_audit)) if audit is None
	]
	if missing:
		raise RoundNotFoundError(missing)

	report = compare(current_audit, previous_audit, identity, mode)
	logger.info(
	    "compared round %s with %s: %d employees, health score %d",
	    current_id, previous_id, len(report.comparisons),
	    report.roi_metrics.talent_health_score)
	return report


def build_quadrant_report(
    store: RoundStoreProtocol,
    round_id: str | None,
    identity: IdentityResolver = best_effort_identity,
    mode: CombineMode = CombineMode.LEGACY,
) -> QuadrantReport:
	"""
	Quadrant surface for one round; empty when the round is unknown.
	"""
	audit = store.fetch_round(round_id) if round_id else None
	if audit is None:
		logger.warning("round %s not found, returning empty quadrants",
		               round_id)
		return QuadrantReport()
	records = subject_records(audit, identity, mode)
	return classify_quadrants(records.values(), audit_name=audit.name)


__all__ = [
    "round_report",
    "build_round_report",
    "subject_records",
    "compare",
    "build_comparison_report",
    "build_quadrant_report",
]
