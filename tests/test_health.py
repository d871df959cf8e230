"""Tests for the talent health score and ROI metrics."""

import pytest

from talent_audit.core.comparator import compare_rounds
from talent_audit.core.health import roi_metrics, talent_health_score
from talent_audit.core.movement import tally_movements
from talent_audit.models.comparison import MovementSummary
from talent_audit.utils.numbers import clamp, round_half_up

from factories import make_record


def test_no_records_is_neutral():
	assert talent_health_score(MovementSummary(), 0) == 50


def test_scaled_by_population():
	assert talent_health_score(MovementSummary(maintained=200), 200) == 25


def test_departures_weighted_and_rounded():
	# (50 - 4 * 12) * 100 / 12 = 16.67
	assert talent_health_score(MovementSummary(departures=12), 12) == 17


def test_clamped_to_upper_bound():
	assert talent_health_score(MovementSummary(promoted=1), 1) == 100


def test_clamped_to_lower_bound():
	assert talent_health_score(MovementSummary(demoted=20), 20) == 0


@pytest.mark.parametrize("movements,total", [
    (MovementSummary(promoted=3, performance_improved=2, new_hires=1), 7),
    (MovementSummary(demoted=9, performance_declined=9, departures=4), 13),
    (MovementSummary(maintained=1000), 1000),
    (MovementSummary(new_hires=3), 3),
])
def test_always_integer_in_range(movements, total):
	score = talent_health_score(movements, total)
	assert isinstance(score, int)
	assert 0 <= score <= 100


def test_round_half_up():
	assert round_half_up(2.5) == 3
	assert round_half_up(3.5) == 4
	assert round_half_up(-2.5) == -2
	assert round_half_up(0.49) == 0


def test_clamp():
	assert clamp(120, 0, 100) == 100
	assert clamp(-3, 0, 100) == 0
	assert clamp(42, 0, 100) == 42


def _roi(current, previous):
	comparisons = compare_rounds(current, previous)
	return roi_metrics(comparisons, tally_movements(comparisons), current,
	                   previous)


def test_high_potential_advanced():
	previous = {
	    "star": make_record("star", 2, 80),
	    "slow": make_record("slow", 2, 80),
	    "mid": make_record("mid", 1, 70),
	}
	current = {
	    "star": make_record("star", 3, 80),
	    "slow": make_record("slow", 2, 90),
	    "mid": make_record("mid", 2, 70),
	}
	assert _roi(current, previous).high_potential_advanced == 1


def test_at_risk_improved():
	previous = {
	    "back": make_record("back", 4, 10),
	    "bit": make_record("bit", 3, 10),
	    "zero": make_record("zero", 3, 0),
	}
	current = {
	    "back": make_record("back", 4, 40),
	    "bit": make_record("bit", 3, 20),
	    "zero": make_record("zero", 3, 30),
	}
	assert _roi(current, previous).at_risk_improved == 2


def test_succession_readiness_counts_senior_stages():
	previous = {
	    "a": make_record("a", 2, 50),
	    "b": make_record("b", 3, 50),
	}
	current = {
	    "a": make_record("a", 3, 50),
	    "b": make_record("b", 4, 50),
	    "c": make_record("c", 1, 50),
	}
	readiness = _roi(current, previous).succession_readiness
	assert readiness.previous_ready == 1
	assert readiness.current_ready == 2


def test_roi_health_score_matches_tally():
	previous = {"a": make_record("a", 2, 50)}
	current = {"a": make_record("a", 2, 50)}
	assert _roi(current, previous).talent_health_score == 100
