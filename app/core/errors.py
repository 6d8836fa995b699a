"""Error taxonomy for tracker operations.

Every failed operation raises one of the ``TrackerError`` subclasses below.
The HTTP layer maps them to status codes through ``status_code``.
"""

from __future__ import annotations


class TrackerError(Exception):
    """Base class for all errors raised by tracker operations."""

    status_code: int = 400
    kind: str = "tracker_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Unauthorized(TrackerError):
    """Caller role is insufficient or the resource belongs to someone else."""

    status_code = 403
    kind = "unauthorized"


class NotFound(TrackerError):
    """The addressed candidate record does not exist."""

    status_code = 404
    kind = "not_found"


class DataInconsistency(TrackerError):
    """Owner-index pointed at a missing record; the index entry was cleared."""

    status_code = 409
    kind = "data_inconsistency"


class InvalidTransition(TrackerError):
    """Stage change violates the terminal-state or no-op rule."""

    status_code = 422
    kind = "invalid_transition"
