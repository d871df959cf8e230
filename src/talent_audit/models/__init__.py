"""
Talent Audit models.

This subpackage contains Pydantic models for configuration, round
snapshots, normalized ratings and the report shapes returned by the
query surfaces.

Key models:
    - Config: Application configuration loaded from environment
    - Round, Rater, Subject, Judgment: Round snapshot
    - RoundReport: Single-round report
    - ComparisonReport: Two-round comparison
    - QuadrantReport: Single-round quadrant classification
"""

from .config import Config, CombineMode, IdentityMode, load_env
from .query_params import QueryParams
from .round import Subject, Judgment, Rater, Round, UNSET_RANK, UNSET_STAGE
from .ratings import NormalizedRating, SubjectRecord
from .report import (
    CompletionEntry,
    StageCount,
    StageAverage,
    RawDataRow,
    RoundReport,
)
from .comparison import (
    Presence,
    RoundSummary,
    ComparisonRecord,
    MovementSummary,
    Transition,
    StageChangeBuckets,
    MovementPatterns,
    SuccessionReadiness,
    RoiMetrics,
    ComparisonReport,
)
from .quadrant import (
    Quadrant,
    PriorityKind,
    QuadrantEntry,
    PriorityAction,
    QuadrantReport,
)
from .interpretation import (
    HealthCategory,
    Interpretation,
    Recommendation,
    ExecutiveSummary,
)
from .setup import (
    SubjectInput,
    RaterInput,
    RoundSetup,
    RaterLink,
    RoundCreated,
    RatingSubmission,
)

__all__ = [
    "Config",
    "CombineMode",
    "IdentityMode",
    "load_env",
    "QueryParams",
    "Subject",
    "Judgment",
    "Rater",
    "Round",
    "UNSET_RANK",
    "UNSET_STAGE",
    "NormalizedRating",
    "SubjectRecord",
    "CompletionEntry",
    "StageCount",
    "StageAverage",
    "RawDataRow",
    "RoundReport",
    "Presence",
    "RoundSummary",
    "ComparisonRecord",
    "MovementSummary",
    "Transition",
    "StageChangeBuckets",
    "MovementPatterns",
    "SuccessionReadiness",
    "RoiMetrics",
    "ComparisonReport",
    "Quadrant",
    "PriorityKind",
    "QuadrantEntry",
    "PriorityAction",
    "QuadrantReport",
    "HealthCategory",
    "Interpretation",
    "Recommendation",
    "ExecutiveSummary",
    "SubjectInput",
    "RaterInput",
    "RoundSetup",
    "RaterLink",
    "RoundCreated",
    "RatingSubmission",
]
