"""
Query parameters model.

Validated parameters for CLI invocations of the report surfaces.
Round ids double as snapshot file names, so they are restricted to
filesystem-safe characters.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .config import CombineMode, IdentityMode

ROUND_ID_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def is_valid_round_id(value: str) -> bool:
	return bool(ROUND_ID_RE.match(value)) and value not in {".", ".."}


class QueryParams(BaseModel):
	"""Validated parameters for a report or comparison query."""

	round_id: Optional[str] = Field(default=None,
	                                description="Current round id")
	previous_round_id: Optional[str] = Field(
	    default=None, description="Previous round id (comparison only)")
	store_dir: Optional[str] = Field(default=None,
	                                 description="Override store directory")
	combine_mode: Optional[CombineMode] = Field(
	    default=None, description="Override combine mode")
	identity_mode: Optional[IdentityMode] = Field(
	    default=None, description="Override identity mode")

	@field_validator("round_id", "previous_round_id")
	@classmethod
	def validate_round_id(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		if not is_valid_round_id(v):
			raise ValueError("round id must be alnum/_.- only")
		return v


__all__ = ["QueryParams", "ROUND_ID_RE", "is_valid_round_id"]
