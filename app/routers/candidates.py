"""Candidate endpoints.

Applicant side (role >= user), all addressing the caller's own record:
    PUT    /me  -- create or overwrite, returns the record id
    PATCH  /me  -- update an existing record (404 when none)
    GET    /me  -- the caller's record, or null
    DELETE /me  -- remove the record

Recruiter side (admin):
    GET /              -- every record, optionally filtered by ``stage``
    GET /stages        -- allowed transitions per stage (no principal needed)
    PUT /{id}/stage    -- move a candidate through the pipeline
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.core.security import get_principal
from app.db.state import get_tracker
from app.models.candidate import (
    Candidate,
    CandidateCreated,
    CandidateInput,
    CandidateUpdate,
    StageUpdate,
)
from app.models.enums import PipelineStage
from app.services.pipeline import allowed_transitions
from app.services.tracker import ApplicantTracker

router = APIRouter()


# ---------------------------------------------------------------------------
# Applicant side
# ---------------------------------------------------------------------------


@router.put("/me", response_model=CandidateCreated)
async def upsert_candidate(
    body: CandidateInput,
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> CandidateCreated:
    """Create the caller's application, or overwrite its fields.

    The response id is stable across repeated calls by the same caller.
    """
    return CandidateCreated(id=tracker.upsert_candidate(caller, body))


@router.patch("/me", status_code=204)
async def update_candidate(
    body: CandidateUpdate,
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> None:
    tracker.update_candidate(caller, body)


@router.get("/me", response_model=Candidate | None)
async def get_my_candidate(
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> Candidate | None:
    return tracker.get_my_candidate(caller)


@router.delete("/me", status_code=204)
async def delete_candidate(
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> None:
    tracker.delete_candidate(caller)


# ---------------------------------------------------------------------------
# Recruiter side
# ---------------------------------------------------------------------------


@router.get("", response_model=list[Candidate])
async def list_candidates(
    stage: PipelineStage | None = Query(
        default=None,
        description="Only return candidates in this stage (omit for all)",
    ),
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> list[Candidate]:
    """Return candidates in registry insertion order."""
    if stage is None:
        return tracker.get_all_candidates(caller)
    return tracker.get_candidates_by_stage(caller, stage)


@router.put("/{candidate_id}/stage", response_model=Candidate)
async def update_candidate_stage(
    candidate_id: int,
    body: StageUpdate,
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> Candidate:
    return tracker.update_candidate_stage(caller, candidate_id, body.stage)


@router.get("/stages", response_model=dict[PipelineStage, list[PipelineStage]])
async def list_stage_transitions() -> dict[PipelineStage, list[PipelineStage]]:
    """Map each pipeline stage to the stages an admin may move it to."""
    return {stage: allowed_transitions(stage) for stage in PipelineStage}
