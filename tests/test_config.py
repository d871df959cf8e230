import pytest

from talent_audit.models.config import CombineMode, Config, IdentityMode


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
	for name in ("ROUND_STORE_DIR", "OUTPUT_DIR", "LOG_LEVEL",
	             "COMBINE_MODE", "IDENTITY_MODE"):
		monkeypatch.delenv(name, raising=False)


def test_defaults():
	cfg = Config()
	assert cfg.store_dir == "rounds"
	assert cfg.output_dir == "reports"
	assert cfg.log_level == "info"
	assert cfg.combine_mode == CombineMode.LEGACY
	assert cfg.identity_mode == IdentityMode.BEST_EFFORT


def test_store_dir_from_env(monkeypatch, tmp_path):
	monkeypatch.setenv("ROUND_STORE_DIR", str(tmp_path))
	cfg = Config()
	assert cfg.store_path == tmp_path


def test_modes_from_env(monkeypatch):
	monkeypatch.setenv("COMBINE_MODE", "MEAN")
	monkeypatch.setenv("IDENTITY_MODE", "Strict")
	cfg = Config()
	assert cfg.combine_mode == CombineMode.MEAN
	assert cfg.identity_mode == IdentityMode.STRICT


def test_mode_accepts_dashes():
	cfg = Config(IDENTITY_MODE="best-effort")
	assert cfg.identity_mode == IdentityMode.BEST_EFFORT


def test_unknown_mode_rejected():
	with pytest.raises(ValueError):
		Config(COMBINE_MODE="median")


def test_log_level_normalized():
	cfg = Config(LOG_LEVEL=" DEBUG ")
	assert cfg.log_level == "debug"


# ── apply_overrides ──────────────────────────────────────────────────


def test_apply_overrides_all_fields(tmp_path):
	"""apply_overrides sets every overridable field from QueryParams."""
	from talent_audit.models.query_params import QueryParams

	cfg = Config()
	qp = QueryParams(
	    round_id="q1",
	    store_dir=str(tmp_path),
	    combine_mode="mean",
	    identity_mode="strict",
	)
	cfg.apply_overrides(qp)
	assert cfg.store_path == tmp_path
	assert cfg.combine_mode == CombineMode.MEAN
	assert cfg.identity_mode == IdentityMode.STRICT


def test_apply_overrides_none_preserves_env(monkeypatch):
	"""apply_overrides skips None fields, keeping env/default values."""
	from talent_audit.models.query_params import QueryParams

	monkeypatch.setenv("COMBINE_MODE", "mean")
	cfg = Config()
	cfg.apply_overrides(QueryParams(round_id="q1"))
	assert cfg.combine_mode == CombineMode.MEAN
	assert cfg.store_dir == "rounds"
