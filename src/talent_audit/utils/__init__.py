"""Shared utility functions.

This subpackage provides common utility functions used across
the application.

Key modules:
    - numbers: Half-up rounding and clamping
    - paths: Path safety utilities
    - logging: Logging configuration
    - protocols: Protocol definitions for dependency injection
"""

from .numbers import round_half_up, clamp
from .paths import ensure_within
from .logging import configure_logging, get_logger

__all__ = [
    # numbers
    "round_half_up",
    "clamp",
    # paths
    "ensure_within",
    # logging
    "configure_logging",
    "get_logger",
]
