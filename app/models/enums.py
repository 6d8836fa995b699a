"""Enum types for access roles and hiring pipeline stages."""

from enum import Enum


class Role(str, Enum):
    """Access level of a principal, lowest to highest privilege."""
    guest = "guest"
    user = "user"
    admin = "admin"

    @property
    def rank(self) -> int:
        return _ROLE_ORDER.index(self)

    def at_least(self, other: "Role") -> bool:
        """True when this role carries at least the privilege of ``other``."""
        return self.rank >= other.rank


class PipelineStage(str, Enum):
    """Hiring pipeline stage; declaration order is the stage order."""
    applied = "applied"
    screening = "screening"
    interview = "interview"
    hired = "hired"
    rejected = "rejected"

    @property
    def position(self) -> int:
        return _STAGE_ORDER.index(self)

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineStage.hired, PipelineStage.rejected)


_ROLE_ORDER: list[Role] = list(Role)
_STAGE_ORDER: list[PipelineStage] = list(PipelineStage)


def compare_stages(left: PipelineStage, right: PipelineStage) -> int:
    """Total order over stages by position: negative, zero or positive.

    Usable as a ``functools.cmp_to_key`` comparator; the pipeline service
    orders reachable stages with it.
    """
    return left.position - right.position
