"""
Fixed scoring policy.

Thresholds and weights used by movement classification, the talent
health score, quadrant classification and report interpretation.
These are heuristic policy values, not statistically derived.
"""

from __future__ import annotations

# --- Movement classification ---
# Performance changes within +/- this many points count as maintained.
PERFORMANCE_NOISE_BAND = 5

# --- Talent health score ---
HEALTH_BASELINE = 50
HEALTH_SCORE_MIN, HEALTH_SCORE_MAX = 0, 100
WEIGHT_PROMOTED = 5
WEIGHT_PERFORMANCE_IMPROVED = 3
WEIGHT_NEW_HIRE = 2
WEIGHT_DEMOTED = 5
WEIGHT_PERFORMANCE_DECLINED = 3
WEIGHT_DEPARTURE = 4

# --- Stage brackets ---
EARLY_STAGES = frozenset({1, 2})
SENIOR_STAGES = frozenset({3, 4})
SENIOR_STAGE_MIN = 3

# --- Percentile cut points ---
QUADRANT_SPLIT = 50  # > split is "higher", <= split is "lower"
ADVANCEMENT_PERCENTILE = 75  # early stage above this: advancement candidate
DEVELOPMENT_RISK_PERCENTILE = 25  # senior stage below this: development risk

# --- ROI metrics ---
HIGH_POTENTIAL_MIN_PERFORMANCE = 75
AT_RISK_MAX_PERFORMANCE = 25
AT_RISK_IMPROVEMENT = 10

# --- Report interpretation ---
EARLY_SHARE_CRITICAL = 40.0
EARLY_SHARE_ATTENTION = 20.0
GRADIENT_CRITICAL = 0.0  # gradient below this is critical
GRADIENT_ATTENTION = 20.0  # gradient at or below this needs attention
