"""
Round store implementations.

The analytics core only reads complete round snapshots through
RoundStoreProtocol. Two stores are provided:

- InMemoryRoundStore: creates rounds, accepts leader submissions and
  serves deep-copied snapshots. New rounds are assembled in full
  (employees, then leaders, then one placeholder judgment per assigned
  employee) before being published, so readers never observe a
  partially created round.
- DirectoryRoundStore: reads one snapshot file per round from a
  directory (``<round_id>.json|.yaml|.yml``).
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path

from talent_audit.core.errors import (
    RaterAlreadyCompletedError,
    RaterNotFoundError,
)
from talent_audit.loaders.rounds import SNAPSHOT_SUFFIXES, load_round
from talent_audit.models.query_params import is_valid_round_id
from talent_audit.models.round import Judgment, Rater, Round, Subject
from talent_audit.models.setup import (
    RaterLink,
    RatingSubmission,
    RoundCreated,
    RoundSetup,
)
from talent_audit.utils.logging import get_logger
from talent_audit.utils.paths import ensure_within

logger = get_logger(__name__)


def _new_id() -> str:
	return str(uuid.uuid4())


def build_round(setup: RoundSetup,
                round_id: str | None = None) -> tuple[Round, list[RaterLink]]:
	"""
	Assemble a new round from setup input without publishing it.

	Employees are created first, then leaders, then an unset judgment
	(stage 0, rank 999) for every employee a leader is assigned by
	name. Unknown names in a leader's list are ignored.

	Parameters:
		setup: Round definition.
		round_id: Optional explicit id; a UUID is generated otherwise.

	Returns:
		Tuple of (Round, per-leader links).
	"""
	subjects = [
	    Subject(
	        id=_new_id(),
	        name=emp.name,
	        unique_id=emp.tracking_id,
	        email=emp.email,
	        title=emp.title,
	        business_unit=emp.business_unit,
	    ) for emp in setup.employees
	]

	raters: list[Rater] = []
	links: list[RaterLink] = []
	for leader in setup.audit_leaders:
		assigned = set(leader.employees)
		judgments = [
		    Judgment(subject_id=s.id) for s in subjects if s.name in assigned
		]
		rater = Rater(id=_new_id(), token=_new_id(), name=leader.name,
		              email=leader.email, judgments=judgments)
		logger.debug("assigning %d employees to %s", len(judgments),
		             leader.name)
		raters.append(rater)
		links.append(
		    RaterLink(name=leader.name, email=leader.email,
		              token=rater.token, employees=list(leader.employees)))

	audit = Round(
	    id=round_id or _new_id(),
	    name=setup.name,
	    round=setup.round,
	    created_at=datetime.now(timezone.utc),
	    previous_round_id=setup.previous_round_id,
	    organization_name=setup.organization_name,
	    subjects=subjects,
	    raters=raters,
	)
	return audit, links


def _validate_submission(rater: Rater,
                         submissions: list[RatingSubmission]) -> None:
	assigned = {j.subject_id for j in rater.judgments}
	total = len(assigned)
	seen_ranks: set[int] = set()
	seen_subjects: set[str] = set()
	for sub in submissions:
		if sub.subject_id not in assigned:
			raise ValueError(
			    f"employee {sub.subject_id} is not assigned to this leader")
		if sub.subject_id in seen_subjects:
			raise ValueError(
			    f"employee {sub.subject_id} submitted more than once")
		seen_subjects.add(sub.subject_id)
		if not 1 <= sub.rank <= total:
			raise ValueError(f"rank {sub.rank} outside 1..{total}")
		if sub.rank in seen_ranks:
			raise ValueError(f"rank {sub.rank} submitted more than once")
		seen_ranks.add(sub.rank)


class InMemoryRoundStore:
	"""Thread-safe in-memory store of round snapshots."""

	def __init__(self, rounds: list[Round] | None = None):
		self._rounds: dict[str, Round] = {}
		self._lock = threading.Lock()
		for audit in rounds or []:
			self.add_round(audit)

	def add_round(self, audit: Round) -> None:
		"""Publish a complete round snapshot."""
		with self._lock:
			if audit.id in self._rounds:
				raise ValueError(f"round {audit.id} already exists")
			self._rounds[audit.id] = audit.model_copy(deep=True)

	def create_round(self, setup: RoundSetup,
	                 round_id: str | None = None) -> RoundCreated:
		"""Create and publish a new round in one step."""
		audit, links = build_round(setup, round_id=round_id)
		self.add_round(audit)
		logger.info("created round %s (%s) with %d employees, %d leaders",
		            audit.id, audit.name, len(audit.subjects),
		            len(audit.raters))
		return RoundCreated(
		    audit_id=audit.id,
		    audit_name=audit.name,
		    organization_name=audit.organization_name,
		    round=audit.round,
		    links=links,
		)

	def submit_ratings(self, token: str,
	                   submissions: list[RatingSubmission]) -> None:
		"""
		Record a leader's judgments and mark the leader completed.

		Raises:
			RaterNotFoundError: If no leader holds the token.
			RaterAlreadyCompletedError: If the leader already submitted.
			ValueError: If a submission is not assigned to the leader,
				lists an employee twice, or a rank is out of range or
				repeated.
		"""
		with self._lock:
			for audit in self._rounds.values():
				rater = next((r for r in audit.raters if r.token == token),
				             None)
				if rater is not None:
					break
			else:
				raise RaterNotFoundError("invalid audit link")
			if rater.completed:
				raise RaterAlreadyCompletedError("audit already completed")
			_validate_submission(rater, submissions)

			by_subject = {s.subject_id: s for s in submissions}
			for judgment in rater.judgments:
				sub = by_subject.get(judgment.subject_id)
				if sub is not None:
					judgment.stage = sub.stage
					judgment.rank = sub.rank
			rater.completed = True
		logger.info("leader %s submitted %d ratings", rater.name,
		            len(submissions))

	def fetch_round(self, round_id: str) -> Round | None:
		with self._lock:
			audit = self._rounds.get(round_id)
			return audit.model_copy(deep=True) if audit else None

	def fetch_rounds(self, current_id: str,
	                 previous_id: str) -> tuple[Round | None, Round | None]:
		return self.fetch_round(current_id), self.fetch_round(previous_id)

	def list_rounds(self) -> list[Round]:
		"""Return snapshots ordered by round number, then name."""
		with self._lock:
			rounds = [a.model_copy(deep=True) for a in self._rounds.values()]
		return sorted(rounds, key=lambda a: (a.round, a.name))


class DirectoryRoundStore:
	"""Read-only store backed by one snapshot file per round."""

	def __init__(self, base_dir: str | Path):
		self.base_dir = Path(base_dir)

	def _path_for(self, round_id: str) -> Path | None:
		"""Return the snapshot file for round_id; None if it cannot exist."""
		if not is_valid_round_id(round_id):
			logger.warning("round id %r cannot name a snapshot file",
			               round_id)
			return None
		for suffix in SNAPSHOT_SUFFIXES:
			path = ensure_within(self.base_dir,
			                     self.base_dir / f"{round_id}{suffix}")
			if path.is_file():
				return path
		return None

	def fetch_round(self, round_id: str) -> Round | None:
		path = self._path_for(round_id)
		if path is None:
			logger.debug("no snapshot for round %s in %s", round_id,
			             self.base_dir)
			return None
		return load_round(path)

	def fetch_rounds(self, current_id: str,
	                 previous_id: str) -> tuple[Round | None, Round | None]:
		return self.fetch_round(current_id), self.fetch_round(previous_id)

	def list_rounds(self) -> list[Round]:
		"""Load every snapshot in the directory, by round number."""
		if not self.base_dir.is_dir():
			return []
		rounds = [
		    load_round(p) for p in sorted(self.base_dir.iterdir())
		    if p.is_file() and p.suffix in SNAPSHOT_SUFFIXES
		]
		return sorted(rounds, key=lambda a: (a.round, a.name))


__all__ = ["InMemoryRoundStore", "DirectoryRoundStore", "build_round"]
