"""Hiring pipeline state machine.

Candidates start in ``applied``.  ``hired`` and ``rejected`` are terminal.
From any non-terminal stage every *other* stage is reachable, including
earlier ones (e.g. interview -> applied); only staying put is refused.
"""

from __future__ import annotations

from functools import cmp_to_key

from app.core.constants import (
    MSG_ALREADY_HIRED,
    MSG_ALREADY_REJECTED,
    MSG_NOOP_TRANSITION,
)
from app.core.errors import InvalidTransition
from app.models.enums import PipelineStage, compare_stages

INITIAL_STAGE: PipelineStage = PipelineStage.applied


def validate_stage_transition(
    current: PipelineStage,
    new_stage: PipelineStage,
) -> None:
    """Check that a candidate may move from ``current`` to ``new_stage``.

    Raises
    ------
    InvalidTransition
        When ``current`` is terminal, or ``new_stage`` equals ``current``.
    """
    if current is PipelineStage.hired:
        raise InvalidTransition(MSG_ALREADY_HIRED)
    if current is PipelineStage.rejected:
        raise InvalidTransition(MSG_ALREADY_REJECTED)
    if new_stage is current:
        raise InvalidTransition(MSG_NOOP_TRANSITION)


def allowed_transitions(current: PipelineStage) -> list[PipelineStage]:
    """Return the stages reachable from ``current``, in stage order."""
    if current.is_terminal:
        return []
    reachable = [stage for stage in PipelineStage if stage is not current]
    return sorted(reachable, key=cmp_to_key(compare_stages))
