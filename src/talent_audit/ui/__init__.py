"""User interface components.

This subpackage provides terminal and markdown rendering of reports.

Key modules:
    - tables: Rich tables for terminal output
    - reporting: Markdown rendering and persistence
"""

from talent_audit.ui.tables import ReportView
from talent_audit.ui.reporting import (
    render_round_md,
    render_comparison_md,
    save_report_md,
)

__all__ = [
    "ReportView",
    "render_round_md",
    "render_comparison_md",
    "save_report_md",
]
