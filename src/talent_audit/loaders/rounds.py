"""
Round snapshot loader.

Loads a Round from a JSON or YAML file. YAML is a superset of JSON, so
both formats go through ``yaml.safe_load``. Keys may be camelCase (as
exported by the reporting UI) or snake_case.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from talent_audit.models.round import Round

SNAPSHOT_SUFFIXES = (".json", ".yaml", ".yml")


def parse_round(data: Any, source: str = "<data>") -> Round:
	"""
	Validate raw snapshot data into a Round.

	Parameters:
		data: Mapping produced by a JSON/YAML parser.
		source: Label used in error messages.

	Returns:
		Validated Round.

	Raises:
		ValueError: If the data is not a mapping or fails validation.
	"""
	if not isinstance(data, dict):
		raise ValueError(f"{source}: round snapshot must be a mapping")
	try:
		return Round.model_validate(data)
	except ValidationError as exc:
		raise ValueError(f"{source}: invalid round snapshot: {exc}") from exc


def load_round(path: str | Path) -> Round:
	"""
	Load a round snapshot file.

	Parameters:
		path: Path to a .json, .yaml or .yml file.

	Returns:
		Validated Round.

	Raises:
		ValueError: If the file cannot be parsed or validated.
	"""
	path = Path(path)
	raw = path.read_text(encoding="utf-8")
	try:
		data = yaml.safe_load(raw)
	except yaml.YAMLError as exc:
		raise ValueError(f"{path}: cannot parse snapshot: {exc}") from exc
	return parse_round(data, source=str(path))


def dump_round(audit: Round, path: str | Path) -> Path:
	"""Write a round snapshot as JSON (camelCase keys)."""
	path = Path(path)
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(audit.model_dump_json(by_alias=True, indent=2),
	                encoding="utf-8")
	return path


__all__ = ["load_round", "parse_round", "dump_round", "SNAPSHOT_SUFFIXES"]
