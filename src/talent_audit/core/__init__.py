"""Core analytics for talent audits.

This subpackage contains the pure scoring pipeline and the report
query surfaces built on it.

Key modules:
    - normalizer: Rank to percentile conversion
    - aggregator: Per-stage aggregates and cross-leader deduplication
    - comparator: Cross-round employee matching
    - movement: Movement tally and stage transitions
    - health: Talent health score and ROI metrics
    - quadrant: Single-round quadrant classification
    - interpretation: Executive reading of a round report
    - reports: Query surfaces over a round store
"""

from talent_audit.core.normalizer import percentile, normalize_round
from talent_audit.core.aggregator import (
    stage_counts,
    stage_averages,
    combine_by_subject,
)
from talent_audit.core.comparator import compare_rounds
from talent_audit.core.movement import (
    tally_movements,
    build_transitions,
    bucket_by_stage_change,
)
from talent_audit.core.health import talent_health_score, roi_metrics
from talent_audit.core.quadrant import classify_quadrant, classify_quadrants
from talent_audit.core.interpretation import summarize
from talent_audit.core.reports import (
    build_round_report,
    build_comparison_report,
    build_quadrant_report,
)

__all__ = [
    # normalizer
    "percentile",
    "normalize_round",
    # aggregator
    "stage_counts",
    "stage_averages",
    "combine_by_subject",
    # comparator
    "compare_rounds",
    # movement
    "tally_movements",
    "build_transitions",
    "bucket_by_stage_change",
    # health
    "talent_health_score",
    "roi_metrics",
    # quadrant
    "classify_quadrant",
    "classify_quadrants",
    # interpretation
    "summarize",
    # reports
    "build_round_report",
    "build_comparison_report",
    "build_quadrant_report",
]
