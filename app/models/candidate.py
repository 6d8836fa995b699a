"""Pydantic models for candidate records.

``CandidateInput`` and ``CandidateUpdate`` carry the applicant-editable
fields.  ``id``, ``stage`` and ``owner`` are managed by the registry and are
never accepted from callers.
"""

from pydantic import BaseModel, ConfigDict

from app.models.enums import PipelineStage


class CandidateInput(BaseModel):
    """Payload for creating or replacing the caller's application."""
    name: str
    email: str
    role: str
    resume: str


class CandidateUpdate(BaseModel):
    """Payload for updating an existing application."""
    name: str
    email: str
    role: str
    resume: str


class Candidate(BaseModel):
    """Full candidate record as held by the registry."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    role: str
    resume: str
    stage: PipelineStage = PipelineStage.applied
    owner: str


class StageUpdate(BaseModel):
    """Request body for moving a candidate to another stage."""
    stage: PipelineStage


class CandidateCreated(BaseModel):
    """Response for upsert: the id of the caller's record."""
    id: int
