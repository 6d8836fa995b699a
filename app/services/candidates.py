"""Candidate registry.

Holds the two coupled tables behind every candidate operation:

* ``_candidates`` -- candidate id -> ``Candidate`` (insertion ordered)
* ``_owner_index`` -- owner principal -> candidate id

Each owner has at most one record.  Both tables, and the id counter, are
only touched while ``_lock`` is held, so every public method runs as one
atomic unit.  Ids start at ``FIRST_CANDIDATE_ID`` and are never reused, even
after deletion.

Authorization is not checked here; see ``app.services.tracker``.
"""

from __future__ import annotations

import logging
import threading

from app.core.constants import (
    FIRST_CANDIDATE_ID,
    MSG_CANDIDATE_NOT_FOUND,
    MSG_INDEX_INCONSISTENT,
    MSG_NO_CANDIDATE_USE_UPSERT,
)
from app.core.errors import DataInconsistency, NotFound
from app.models.candidate import Candidate, CandidateInput, CandidateUpdate
from app.models.enums import PipelineStage
from app.services.pipeline import INITIAL_STAGE, validate_stage_transition

logger = logging.getLogger(__name__)


class CandidateRegistry:
    """Owner-indexed store of candidate records."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._candidates: dict[int, Candidate] = {}
        self._owner_index: dict[str, int] = {}
        self._next_id: int = FIRST_CANDIDATE_ID

    # ------------------------------------------------------------------
    # Helpers (caller must hold ``_lock``)
    # ------------------------------------------------------------------

    def _owned_record(self, owner: str) -> Candidate | None:
        """Return ``owner``'s record, or None when the owner has none.

        A dangling index entry is dropped before ``DataInconsistency`` is
        raised, so a retry sees a clean miss.
        """
        candidate_id = self._owner_index.get(owner)
        if candidate_id is None:
            return None

        candidate = self._candidates.get(candidate_id)
        if candidate is None:
            del self._owner_index[owner]
            logger.warning(
                "candidate_index_repaired",
                extra={"owner": owner, "candidate_id": candidate_id},
            )
            raise DataInconsistency(MSG_INDEX_INCONSISTENT)
        return candidate

    def _allocate_id(self) -> int:
        candidate_id = self._next_id
        self._next_id += 1
        return candidate_id

    # ------------------------------------------------------------------
    # Applicant operations
    # ------------------------------------------------------------------

    def upsert(self, owner: str, data: CandidateInput) -> int:
        """Create ``owner``'s record or overwrite its editable fields.

        Returns the record id.  Stage and owner of an existing record are
        left unchanged.
        """
        with self._lock:
            existing = self._owned_record(owner)
            if existing is not None:
                self._candidates[existing.id] = existing.model_copy(
                    update=data.model_dump()
                )
                logger.info(
                    "candidate_updated",
                    extra={"candidate_id": existing.id, "owner": owner},
                )
                return existing.id

            candidate_id = self._allocate_id()
            self._candidates[candidate_id] = Candidate(
                id=candidate_id,
                stage=INITIAL_STAGE,
                owner=owner,
                **data.model_dump(),
            )
            self._owner_index[owner] = candidate_id

        logger.info(
            "candidate_created",
            extra={"candidate_id": candidate_id, "owner": owner},
        )
        return candidate_id

    def update(self, owner: str, data: CandidateUpdate) -> None:
        """Overwrite the editable fields of ``owner``'s existing record.

        Raises
        ------
        NotFound
            If ``owner`` has no record.
        DataInconsistency
            If the owner-index entry was dangling (it is cleared).
        """
        with self._lock:
            existing = self._owned_record(owner)
            if existing is None:
                raise NotFound(MSG_NO_CANDIDATE_USE_UPSERT)
            self._candidates[existing.id] = existing.model_copy(
                update=data.model_dump()
            )

        logger.info(
            "candidate_updated",
            extra={"candidate_id": existing.id, "owner": owner},
        )

    def get_by_owner(self, owner: str) -> Candidate | None:
        with self._lock:
            candidate_id = self._owner_index.get(owner)
            if candidate_id is None:
                return None
            return self._candidates.get(candidate_id)

    def delete(self, owner: str) -> None:
        """Remove ``owner``'s record together with its index entry."""
        with self._lock:
            existing = self._owned_record(owner)
            if existing is None:
                raise NotFound(MSG_CANDIDATE_NOT_FOUND)
            del self._candidates[existing.id]
            del self._owner_index[owner]

        logger.info(
            "candidate_deleted",
            extra={"candidate_id": existing.id, "owner": owner},
        )

    # ------------------------------------------------------------------
    # Recruiter operations
    # ------------------------------------------------------------------

    def list_all(self) -> list[Candidate]:
        """All records in insertion order."""
        with self._lock:
            return list(self._candidates.values())

    def list_by_stage(self, stage: PipelineStage) -> list[Candidate]:
        with self._lock:
            return [c for c in self._candidates.values() if c.stage is stage]

    def update_stage(self, candidate_id: int, new_stage: PipelineStage) -> Candidate:
        """Move a candidate to ``new_stage`` after validating the transition.

        Only ``stage`` changes; the updated record is returned.

        Raises
        ------
        NotFound
            If no record has ``candidate_id``.
        InvalidTransition
            If the move is from a terminal stage or to the current stage.
        """
        with self._lock:
            candidate = self._candidates.get(candidate_id)
            if candidate is None:
                raise NotFound(MSG_CANDIDATE_NOT_FOUND)
            validate_stage_transition(candidate.stage, new_stage)
            updated = candidate.model_copy(update={"stage": new_stage})
            self._candidates[candidate_id] = updated

        logger.info(
            "stage_updated",
            extra={
                "candidate_id": candidate_id,
                "from_stage": candidate.stage.value,
                "to_stage": new_stage.value,
            },
        )
        return updated

    def count(self) -> int:
        with self._lock:
            return len(self._candidates)
