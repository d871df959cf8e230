"""
Identity resolution for matching employees across rounds.

An identity resolver maps a Subject to the key used to deduplicate
ratings within a round and to match employees between rounds. Two
employees that resolve to the same key are treated as one person.

The best-effort resolver falls back to the display name when no
external id is recorded, so two different people sharing a name are
merged and a renamed person is split. This is an accepted limitation;
use the strict resolver to exclude name-only employees instead.
"""

from __future__ import annotations

from typing import Callable, Optional

from talent_audit.models.config import IdentityMode
from talent_audit.models.round import Subject

IdentityResolver = Callable[[Subject], Optional[str]]


def best_effort_identity(subject: Subject) -> str | None:
	"""Return the external id, then email, then name."""
	return subject.unique_id or subject.email or subject.name or None


def strict_identity(subject: Subject) -> str | None:
	"""Return the external id or email; None when only a name exists."""
	return subject.unique_id or subject.email or None


def resolver_for(mode: IdentityMode) -> IdentityResolver:
	"""Return the resolver for a configured identity mode."""
	if mode == IdentityMode.STRICT:
		return strict_identity
	return best_effort_identity


__all__ = [
    "IdentityResolver",
    "best_effort_identity",
    "strict_identity",
    "resolver_for",
]
