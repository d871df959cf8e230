import pytest

from talent_audit.loaders.rounds import dump_round, load_round, parse_round

from factories import make_round

SNAPSHOT_YAML = """
id: q1
name: Q1 audit
round: 1
organizationName: Acme
subjects:
  - id: s1
    name: Ann
    uniqueId: E-1
    businessUnit: Sales
  - id: s2
    name: Bob
raters:
  - id: l1
    token: tok-1
    name: Lead
    completed: true
    judgments:
      - subjectId: s1
        stage: 2
        rank: 1
      - subjectId: s2
"""


def test_load_yaml_snapshot(tmp_path):
	path = tmp_path / "q1.yaml"
	path.write_text(SNAPSHOT_YAML)
	audit = load_round(path)
	assert audit.organization_name == "Acme"
	assert audit.subjects[0].business_unit == "Sales"
	first, second = audit.raters[0].judgments
	assert (first.stage, first.rank) == (2, 1)
	assert not second.eligible


def test_dump_then_load_preserves_snapshot(tmp_path):
	audit = make_round("q1", [("Lead", True, [("Ann", 2, 1), ("Bob", 3, 2)])])
	path = dump_round(audit, tmp_path / "nested" / "q1.json")
	assert '"subjectId"' in path.read_text()
	assert load_round(path) == audit


def test_parse_round_accepts_snake_case():
	audit = parse_round({
	    "id": "q1",
	    "name": "Q1",
	    "organization_name": "Acme",
	})
	assert audit.organization_name == "Acme"


def test_parse_round_rejects_non_mapping():
	with pytest.raises(ValueError, match="must be a mapping"):
		parse_round(["q1"], source="q1.json")


def test_parse_round_rejects_unknown_subject_reference():
	data = {
	    "id": "q1",
	    "name": "Q1",
	    "subjects": [],
	    "raters": [{
	        "id": "l1",
	        "token": "t",
	        "name": "Lead",
	        "judgments": [{"subjectId": "ghost"}],
	    }],
	}
	with pytest.raises(ValueError, match="invalid round snapshot"):
		parse_round(data)


def test_parse_round_rejects_bad_stage():
	data = {
	    "id": "q1",
	    "name": "Q1",
	    "subjects": [{"id": "s1", "name": "Ann"}],
	    "raters": [{
	        "id": "l1",
	        "token": "t",
	        "name": "Lead",
	        "judgments": [{"subjectId": "s1", "stage": 5, "rank": 1}],
	    }],
	}
	with pytest.raises(ValueError):
		parse_round(data)


def test_load_round_rejects_malformed_yaml(tmp_path):
	path = tmp_path / "bad.yaml"
	path.write_text("id: [unclosed")
	with pytest.raises(ValueError, match="cannot parse snapshot"):
		load_round(path)
