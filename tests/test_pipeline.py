"""Unit tests for the hiring pipeline state machine."""

from __future__ import annotations

import pytest

from app.core.errors import InvalidTransition
from app.models.enums import PipelineStage, compare_stages
from app.services.pipeline import (
    INITIAL_STAGE,
    allowed_transitions,
    validate_stage_transition,
)

NON_TERMINAL = [
    PipelineStage.applied,
    PipelineStage.screening,
    PipelineStage.interview,
]
TERMINAL = [PipelineStage.hired, PipelineStage.rejected]


class TestStageOrder:
    def test_positions(self) -> None:
        assert [s.position for s in PipelineStage] == [0, 1, 2, 3, 4]
        assert PipelineStage.applied.position == 0
        assert PipelineStage.rejected.position == 4

    def test_compare_stages(self) -> None:
        assert compare_stages(PipelineStage.applied, PipelineStage.interview) < 0
        assert compare_stages(PipelineStage.hired, PipelineStage.screening) > 0
        assert compare_stages(PipelineStage.hired, PipelineStage.hired) == 0

    def test_terminal_flags(self) -> None:
        assert [s for s in PipelineStage if s.is_terminal] == TERMINAL

    def test_initial_stage(self) -> None:
        assert INITIAL_STAGE is PipelineStage.applied


class TestValidateStageTransition:
    @pytest.mark.parametrize("target", list(PipelineStage))
    def test_from_hired_always_fails(self, target: PipelineStage) -> None:
        with pytest.raises(InvalidTransition, match="already hired"):
            validate_stage_transition(PipelineStage.hired, target)

    @pytest.mark.parametrize("target", list(PipelineStage))
    def test_from_rejected_always_fails(self, target: PipelineStage) -> None:
        with pytest.raises(InvalidTransition, match="already rejected"):
            validate_stage_transition(PipelineStage.rejected, target)

    @pytest.mark.parametrize("stage", NON_TERMINAL)
    def test_noop_fails(self, stage: PipelineStage) -> None:
        with pytest.raises(InvalidTransition, match="no-op"):
            validate_stage_transition(stage, stage)

    @pytest.mark.parametrize("current", NON_TERMINAL)
    def test_any_other_move_succeeds(self, current: PipelineStage) -> None:
        for target in PipelineStage:
            if target is not current:
                validate_stage_transition(current, target)

    def test_backward_move_is_allowed(self) -> None:
        validate_stage_transition(PipelineStage.interview, PipelineStage.applied)


class TestAllowedTransitions:
    def test_terminal_has_none(self) -> None:
        for stage in TERMINAL:
            assert allowed_transitions(stage) == []

    def test_screening(self) -> None:
        assert allowed_transitions(PipelineStage.screening) == [
            PipelineStage.applied,
            PipelineStage.interview,
            PipelineStage.hired,
            PipelineStage.rejected,
        ]
