"""
Talent Audit - rating normalization and cross-round talent analytics.

This package turns audit leaders' stage/rank judgments about employees
into percentile scores, per-stage aggregates, cross-round movement
comparisons and a composite talent health score.

Main entry points:
    - talent_audit.main: CLI entrypoint
    - talent_audit.core.reports: build_round_report() and
      build_comparison_report() query surfaces
    - talent_audit.models.config: Config and load_env()
"""
