"""Applicant tracker service: the externally callable operations.

Each method takes the authenticated caller principal explicitly, checks it
against ``AccessControl`` and then delegates to the candidate registry or
the profile store.  A failed check raises ``Unauthorized`` before anything
is touched.
"""

from __future__ import annotations

from app.models.candidate import Candidate, CandidateInput, CandidateUpdate
from app.models.enums import PipelineStage, Role
from app.models.profile import UserProfile
from app.services.access_control import AccessControl
from app.services.candidates import CandidateRegistry
from app.services.profiles import UserProfileStore


class ApplicantTracker:
    """Role-gated facade over access control, profiles and candidates."""

    def __init__(self, admins: list[str] | None = None) -> None:
        self.access = AccessControl(admins=admins)
        self.profiles = UserProfileStore(self.access)
        self.candidates = CandidateRegistry()

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def ensure_user_access(self, caller: str) -> None:
        self.access.ensure_user_access(caller)

    def get_caller_user_role(self, caller: str) -> Role:
        return self.access.get_role(caller)

    def is_caller_admin(self, caller: str) -> bool:
        return self.access.is_admin(caller)

    def assign_role(self, caller: str, target: str, role: Role) -> None:
        self.access.assign_role(caller, target, role)

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    def get_caller_user_profile(self, caller: str) -> UserProfile | None:
        return self.profiles.get(caller, caller)

    def get_user_profile(self, caller: str, principal: str) -> UserProfile | None:
        return self.profiles.get(caller, principal)

    def save_caller_user_profile(self, caller: str, profile: UserProfile) -> None:
        self.profiles.save(caller, profile)

    # ------------------------------------------------------------------
    # Candidates (applicant side)
    # ------------------------------------------------------------------

    def upsert_candidate(self, caller: str, data: CandidateInput) -> int:
        self.access.require(caller, Role.user)
        return self.candidates.upsert(caller, data)

    def update_candidate(self, caller: str, data: CandidateUpdate) -> None:
        self.access.require(caller, Role.user)
        self.candidates.update(caller, data)

    def get_my_candidate(self, caller: str) -> Candidate | None:
        self.access.require(caller, Role.user)
        return self.candidates.get_by_owner(caller)

    def delete_candidate(self, caller: str) -> None:
        self.access.require(caller, Role.user)
        self.candidates.delete(caller)

    # ------------------------------------------------------------------
    # Candidates (recruiter side)
    # ------------------------------------------------------------------

    def get_all_candidates(self, caller: str) -> list[Candidate]:
        self.access.require(caller, Role.admin)
        return self.candidates.list_all()

    def get_candidates_by_stage(
        self, caller: str, stage: PipelineStage
    ) -> list[Candidate]:
        self.access.require(caller, Role.admin)
        return self.candidates.list_by_stage(stage)

    def update_candidate_stage(
        self, caller: str, candidate_id: int, new_stage: PipelineStage
    ) -> Candidate:
        self.access.require(caller, Role.admin)
        return self.candidates.update_stage(candidate_id, new_stage)
