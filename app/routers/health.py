"""Health check endpoint.

Returns service status along with the size of the candidate and role
tables.
"""

from typing import Any

from fastapi import APIRouter, Depends

from app.db.state import get_tracker
from app.services.tracker import ApplicantTracker

router = APIRouter()


@router.get("/health")
async def health_check(
    tracker: ApplicantTracker = Depends(get_tracker),
) -> dict[str, Any]:
    """Return health status and store counts; no principal required."""
    return {
        "status": "ok",
        "candidates": tracker.candidates.count(),
        "assigned_roles": tracker.access.count(),
    }
