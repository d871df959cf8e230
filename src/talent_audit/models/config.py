from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, TYPE_CHECKING

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

if TYPE_CHECKING:
	from .query_params import QueryParams


class CombineMode(str, Enum):
	"""How ratings from several leaders for one employee are combined.

	``legacy`` folds each new rating into the running record as a
	pairwise average, which over-weights the most recent leader once
	three or more have rated the same employee. ``mean`` keeps running
	sums and reports the arithmetic mean.
	"""

	LEGACY = "legacy"
	MEAN = "mean"


class IdentityMode(str, Enum):
	"""How employees are matched across rounds."""

	BEST_EFFORT = "best_effort"
	STRICT = "strict"


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	store_dir: str = Field(
	    "rounds",
	    alias="ROUND_STORE_DIR",
	    description="Directory holding one snapshot file per round",
	)
	output_dir: str = Field(
	    "reports",
	    alias="OUTPUT_DIR",
	    description="Base directory for exported markdown reports",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level")
	combine_mode: CombineMode = Field(
	    CombineMode.LEGACY,
	    alias="COMBINE_MODE",
	    description="legacy (pairwise running average) or mean",
	)
	identity_mode: IdentityMode = Field(
	    IdentityMode.BEST_EFFORT,
	    alias="IDENTITY_MODE",
	    description="best_effort (id, email, then name) or strict",
	)

	@field_validator("combine_mode", "identity_mode", mode="before")
	@classmethod
	def normalize_mode(cls, v: Any) -> Any:
		"""Accept modes in any case and with dashes."""
		if isinstance(v, str):
			return v.strip().lower().replace("-", "_")
		return v

	@field_validator("log_level")
	@classmethod
	def normalize_log_level(cls, v: str) -> str:
		return v.strip().lower()

	@property
	def store_path(self) -> Path:
		"""Return store_dir as Path."""
		return Path(self.store_dir)

	@property
	def output_path(self) -> Path:
		"""Return output_dir as Path."""
		return Path(self.output_dir)

	def apply_overrides(self, params: "QueryParams") -> None:
		"""Apply CLI overrides from QueryParams onto this config.

		Only non-None fields in params are applied, preserving
		environment-based defaults for anything the user didn't set.

		Parameters:
			params: Validated query parameters with optional overrides.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
		    ("store_dir", "store_dir"),
		    ("combine_mode", "combine_mode"),
		    ("identity_mode", "identity_mode"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(params, param_field)
			if value is not None:
				setattr(self, config_field, value)


__all__ = ["Config", "CombineMode", "IdentityMode", "load_env"]
