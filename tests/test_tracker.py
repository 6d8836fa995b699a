"""Unit tests for the role-gated tracker operations.

Walks through the applicant and recruiter scenarios end to end at the
service level.
"""

from __future__ import annotations

import pytest

from app.core.errors import InvalidTransition, NotFound, Unauthorized
from app.models.candidate import CandidateInput, CandidateUpdate
from app.models.enums import PipelineStage, Role
from app.models.profile import UserProfile
from app.services.tracker import ApplicantTracker

ADMIN = "admin-principal"
ALICE = "alice-principal"
BOB = "bob-principal"
GUEST = "guest-principal"


def _input(name: str = "A", email: str = "a@x.com") -> CandidateInput:
    return CandidateInput(name=name, email=email, role="Eng", resume="...")


class TestGuestToUserScenario:
    def test_guest_upsert_denied_then_allowed(self, tracker: ApplicantTracker) -> None:
        with pytest.raises(Unauthorized):
            tracker.upsert_candidate(ALICE, _input())
        assert tracker.candidates.count() == 0

        tracker.ensure_user_access(ALICE)
        assert tracker.get_caller_user_role(ALICE) is Role.user

        assert tracker.upsert_candidate(ALICE, _input()) == 0
        assert tracker.upsert_candidate(ALICE, _input(name="Z", email="z@x.com")) == 0

        mine = tracker.get_my_candidate(ALICE)
        assert mine.name == "Z"
        assert mine.email == "z@x.com"
        assert mine.stage is PipelineStage.applied

    def test_ensure_user_access_idempotent(self, tracker: ApplicantTracker) -> None:
        assert tracker.get_caller_user_role(ALICE) is Role.guest
        tracker.ensure_user_access(ALICE)
        tracker.ensure_user_access(ALICE)
        assert tracker.get_caller_user_role(ALICE) is Role.user
        assert not tracker.is_caller_admin(ALICE)


class TestApplicantOperations:
    @pytest.fixture(autouse=True)
    def _users(self, tracker: ApplicantTracker) -> None:
        tracker.ensure_user_access(ALICE)
        tracker.ensure_user_access(BOB)

    def test_get_my_candidate_absent(self, tracker: ApplicantTracker) -> None:
        assert tracker.get_my_candidate(ALICE) is None

    def test_delete_then_update_is_not_found(self, tracker: ApplicantTracker) -> None:
        tracker.upsert_candidate(ALICE, _input())
        tracker.delete_candidate(ALICE)

        with pytest.raises(NotFound):
            tracker.update_candidate(
                ALICE,
                CandidateUpdate(name="A", email="a@x.com", role="Eng", resume="..."),
            )
        assert tracker.get_my_candidate(ALICE) is None

    def test_delete_without_record(self, tracker: ApplicantTracker) -> None:
        with pytest.raises(NotFound):
            tracker.delete_candidate(ALICE)

    def test_users_only_see_their_own(self, tracker: ApplicantTracker) -> None:
        tracker.upsert_candidate(ALICE, _input(name="Alice"))
        tracker.upsert_candidate(BOB, _input(name="Bob"))
        assert tracker.get_my_candidate(ALICE).name == "Alice"
        assert tracker.get_my_candidate(BOB).name == "Bob"

    @pytest.mark.parametrize(
        "operation",
        ["upsert", "update", "get", "delete"],
    )
    def test_guest_denied(self, tracker: ApplicantTracker, operation: str) -> None:
        calls = {
            "upsert": lambda: tracker.upsert_candidate(GUEST, _input()),
            "update": lambda: tracker.update_candidate(
                GUEST, CandidateUpdate(name="A", email="a", role="r", resume="r")
            ),
            "get": lambda: tracker.get_my_candidate(GUEST),
            "delete": lambda: tracker.delete_candidate(GUEST),
        }
        with pytest.raises(Unauthorized):
            calls[operation]()


class TestRecruiterOperations:
    @pytest.fixture(autouse=True)
    def _candidates(self, tracker: ApplicantTracker) -> None:
        tracker.ensure_user_access(ALICE)
        tracker.ensure_user_access(BOB)
        tracker.upsert_candidate(ALICE, _input(name="Alice"))
        tracker.upsert_candidate(BOB, _input(name="Bob"))

    def test_two_users_listed_by_admin(self, tracker: ApplicantTracker) -> None:
        listed = tracker.get_all_candidates(ADMIN)
        assert [c.id for c in listed] == [0, 1]
        assert [c.owner for c in listed] == [ALICE, BOB]

    def test_stage_update_and_noop(self, tracker: ApplicantTracker) -> None:
        updated = tracker.update_candidate_stage(ADMIN, 0, PipelineStage.screening)
        assert updated.stage is PipelineStage.screening
        assert tracker.get_my_candidate(ALICE).stage is PipelineStage.screening

        with pytest.raises(InvalidTransition):
            tracker.update_candidate_stage(ADMIN, 0, PipelineStage.screening)

    def test_filter_by_stage(self, tracker: ApplicantTracker) -> None:
        tracker.update_candidate_stage(ADMIN, 1, PipelineStage.rejected)
        assert [c.id for c in tracker.get_candidates_by_stage(ADMIN, PipelineStage.rejected)] == [1]
        assert [c.id for c in tracker.get_candidates_by_stage(ADMIN, PipelineStage.applied)] == [0]

    def test_stage_update_unknown_id(self, tracker: ApplicantTracker) -> None:
        with pytest.raises(NotFound):
            tracker.update_candidate_stage(ADMIN, 99, PipelineStage.screening)

    @pytest.mark.parametrize("caller", [ALICE, GUEST])
    def test_non_admin_denied(self, tracker: ApplicantTracker, caller: str) -> None:
        with pytest.raises(Unauthorized):
            tracker.get_all_candidates(caller)
        with pytest.raises(Unauthorized):
            tracker.get_candidates_by_stage(caller, PipelineStage.applied)
        with pytest.raises(Unauthorized):
            tracker.update_candidate_stage(caller, 0, PipelineStage.screening)
        assert tracker.get_my_candidate(ALICE).stage is PipelineStage.applied

    def test_unauthorized_checked_before_lookup(self, tracker: ApplicantTracker) -> None:
        """A non-admin gets Unauthorized even for an id that does not exist."""
        with pytest.raises(Unauthorized):
            tracker.update_candidate_stage(ALICE, 99, PipelineStage.screening)

    def test_promoted_admin_can_manage(self, tracker: ApplicantTracker) -> None:
        tracker.assign_role(ADMIN, BOB, Role.admin)
        assert len(tracker.get_all_candidates(BOB)) == 2


class TestProfiles:
    def test_caller_profile_round_trip(self, tracker: ApplicantTracker) -> None:
        tracker.ensure_user_access(ALICE)
        assert tracker.get_caller_user_profile(ALICE) is None
        tracker.save_caller_user_profile(ALICE, UserProfile(name="Alice"))
        assert tracker.get_caller_user_profile(ALICE).name == "Alice"
        assert tracker.get_user_profile(ALICE, ALICE).name == "Alice"
        assert tracker.get_user_profile(ADMIN, ALICE).name == "Alice"

    def test_other_profile_denied(self, tracker: ApplicantTracker) -> None:
        tracker.ensure_user_access(ALICE)
        tracker.ensure_user_access(BOB)
        with pytest.raises(Unauthorized):
            tracker.get_user_profile(BOB, ALICE)

    def test_guest_cannot_save(self, tracker: ApplicantTracker) -> None:
        with pytest.raises(Unauthorized):
            tracker.save_caller_user_profile(GUEST, UserProfile(name="G"))
