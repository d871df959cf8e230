"""
Numeric helpers shared by the scoring stages.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
	"""Round to the nearest integer, ties toward positive infinity.

	Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
	stage averages and performance deltas are expected to round ``.5`` up
	(``2.5 -> 3``, ``-2.5 -> -2``).
	"""
	return int(math.floor(value + 0.5))


def clamp(value: int, lower: int, upper: int) -> int:
	"""Constrain value to the inclusive range [lower, upper]."""
	return max(lower, min(upper, value))


__all__ = ["round_half_up", "clamp"]
