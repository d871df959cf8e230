"""
Shared model base.

Report models serialize with the camelCase keys consumed by the
reporting UI (``stageCounts``, ``businessUnit``...) while keeping
snake_case attribute names in Python.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
	"""BaseModel that dumps camelCase aliases and accepts either form."""

	model_config = ConfigDict(alias_generator=to_camel,
	                          populate_by_name=True)

	def to_api(self) -> dict:
		"""Return the JSON-compatible, camelCase representation."""
		return self.model_dump(mode="json", by_alias=True)


__all__ = ["CamelModel"]
