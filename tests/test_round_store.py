"""Tests for round creation, leader submissions and snapshot stores."""

import json

import pytest
import yaml

from talent_audit.core.errors import (
    RaterAlreadyCompletedError,
    RaterNotFoundError,
)
from talent_audit.integrations.round_store import (
    DirectoryRoundStore,
    InMemoryRoundStore,
    build_round,
)
from talent_audit.loaders.rounds import dump_round
from talent_audit.models.round import UNSET_RANK, UNSET_STAGE
from talent_audit.models.setup import RatingSubmission, RoundSetup

from factories import make_round


def _setup(**overrides) -> RoundSetup:
	data = {
	    "name": "Q1 audit",
	    "organizationName": "Acme",
	    "employees": [
	        {"name": "Ann", "email": "ann@example.com", "title": "Manager"},
	        {"name": "Bob", "uniqueId": "E-2"},
	        {"name": "Cid"},
	    ],
	    "auditLeaders": [
	        {"name": "Lead", "email": "lead@example.com",
	         "employees": ["Ann", "Bob", "Ghost"]},
	        {"name": "Other", "employees": ["Cid"]},
	    ],
	}
	data.update(overrides)
	return RoundSetup.model_validate(data)


def test_build_round_creates_placeholder_judgments():
	audit, links = build_round(_setup(), round_id="q1")
	assert audit.id == "q1"
	assert audit.organization_name == "Acme"
	assert audit.created_at is not None
	assert [s.name for s in audit.subjects] == ["Ann", "Bob", "Cid"]
	lead = audit.raters[0]
	# unknown names are ignored
	assert lead.assigned_count == 2
	assert all(j.stage == UNSET_STAGE and j.rank == UNSET_RANK
	           for j in lead.judgments)
	assert not any(j.eligible for j in lead.judgments)
	assert [link.token for link in links] == [r.token for r in audit.raters]


def test_build_round_tracking_ids():
	audit, _ = build_round(_setup())
	ids = {s.name: s.unique_id for s in audit.subjects}
	assert ids == {"Ann": "ann@example.com", "Bob": "E-2", "Cid": None}


def test_round_setup_rejects_non_positive_round():
	with pytest.raises(ValueError):
		_setup(round=0)


def test_create_round_publishes_snapshot():
	store = InMemoryRoundStore()
	created = store.create_round(_setup(), round_id="q1")
	assert created.audit_id == "q1"
	assert created.to_api()["auditName"] == "Q1 audit"
	audit = store.fetch_round("q1")
	assert len(audit.raters) == 2
	assert not audit.completed_raters


def test_add_round_rejects_duplicate_id():
	store = InMemoryRoundStore([make_round("r", [])])
	with pytest.raises(ValueError):
		store.add_round(make_round("r", []))


def _lead(store, round_id="q1"):
	audit = store.fetch_round(round_id)
	return audit, audit.raters[0]


def test_submit_ratings_marks_leader_completed():
	store = InMemoryRoundStore()
	store.create_round(_setup(), round_id="q1")
	audit, lead = _lead(store)
	ann, bob = (j.subject_id for j in lead.judgments)
	store.submit_ratings(lead.token, [
	    RatingSubmission(subject_id=ann, stage=2, rank=2),
	    RatingSubmission(subject_id=bob, stage=3, rank=1),
	])
	_, lead = _lead(store)
	assert lead.completed
	assert [(j.stage, j.rank) for j in lead.judgments] == [(2, 2), (3, 1)]


def test_submit_twice_is_rejected():
	store = InMemoryRoundStore()
	store.create_round(_setup(), round_id="q1")
	_, lead = _lead(store)
	ann = lead.judgments[0].subject_id
	store.submit_ratings(lead.token,
	                     [RatingSubmission(subject_id=ann, stage=1, rank=1)])
	with pytest.raises(RaterAlreadyCompletedError):
		store.submit_ratings(
		    lead.token, [RatingSubmission(subject_id=ann, stage=2, rank=1)])


def test_submit_unknown_token():
	store = InMemoryRoundStore()
	store.create_round(_setup(), round_id="q1")
	with pytest.raises(RaterNotFoundError):
		store.submit_ratings("nope", [])


@pytest.mark.parametrize("ranks", [(1, 1), (1, 3), (0, 1)])
def test_submit_rejects_bad_ranks(ranks):
	store = InMemoryRoundStore()
	store.create_round(_setup(), round_id="q1")
	_, lead = _lead(store)
	subs = [
	    RatingSubmission(subject_id=j.subject_id, stage=2, rank=r)
	    for j, r in zip(lead.judgments, ranks)
	]
	with pytest.raises(ValueError):
		store.submit_ratings(lead.token, subs)
	_, lead = _lead(store)
	assert not lead.completed


def test_submit_rejects_repeated_employee():
	store = InMemoryRoundStore()
	store.create_round(_setup(), round_id="q1")
	_, lead = _lead(store)
	ann = lead.judgments[0].subject_id
	with pytest.raises(ValueError, match="more than once"):
		store.submit_ratings(lead.token, [
		    RatingSubmission(subject_id=ann, stage=2, rank=1),
		    RatingSubmission(subject_id=ann, stage=3, rank=2),
		])
	_, lead = _lead(store)
	assert not lead.completed
	assert lead.judgments[0].rank == UNSET_RANK


def test_submit_rejects_unassigned_employee():
	store = InMemoryRoundStore()
	store.create_round(_setup(), round_id="q1")
	audit, lead = _lead(store)
	cid = next(s.id for s in audit.subjects if s.name == "Cid")
	with pytest.raises(ValueError):
		store.submit_ratings(
		    lead.token, [RatingSubmission(subject_id=cid, stage=2, rank=1)])


def test_rating_submission_rejects_unset_stage():
	with pytest.raises(ValueError):
		RatingSubmission(subject_id="x", stage=0, rank=1)


def test_fetched_snapshots_are_isolated():
	store = InMemoryRoundStore([make_round("r", [("Lead", True,
	                                              [("Ann", 2, 1)])])])
	audit = store.fetch_round("r")
	audit.raters[0].completed = False
	assert store.fetch_round("r").raters[0].completed


def test_list_rounds_orders_by_round_number():
	store = InMemoryRoundStore([
	    make_round("b", [], name="Later", number=2),
	    make_round("a", [], name="First", number=1),
	])
	assert [a.id for a in store.list_rounds()] == ["a", "b"]
	assert store.fetch_rounds("a", "zz")[1] is None


def test_directory_store_reads_json_and_yaml(tmp_path):
	audit = make_round("q1", [("Lead", True, [("Ann", 2, 1)])], number=1)
	dump_round(audit, tmp_path / "q1.json")
	data = json.loads((tmp_path / "q1.json").read_text())
	data["id"] = "q2"
	data["round"] = 2
	(tmp_path / "q2.yaml").write_text(yaml.safe_dump(data))

	store = DirectoryRoundStore(tmp_path)
	current, previous = store.fetch_rounds("q2", "q1")
	assert current.round == 2
	assert previous.raters[0].judgments[0].stage == 2
	assert [a.id for a in store.list_rounds()] == ["q1", "q2"]


def test_directory_store_unknown_round(tmp_path):
	assert DirectoryRoundStore(tmp_path).fetch_round("missing") is None


def test_directory_store_missing_directory(tmp_path):
	assert DirectoryRoundStore(tmp_path / "nope").list_rounds() == []


@pytest.mark.parametrize("round_id", ["../evil", "a/b", ".."])
def test_directory_store_unsafe_ids_are_unknown(tmp_path, round_id):
	base = tmp_path / "rounds"
	base.mkdir()
	(tmp_path / "evil.json").write_text("{}")
	assert DirectoryRoundStore(base).fetch_round(round_id) is None
