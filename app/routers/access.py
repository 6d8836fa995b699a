"""Access endpoints.

POST /ensure-user      -- promotes a guest caller to user (idempotent).
GET  /me               -- caller role and admin flag.
PUT  /roles/{principal} -- assigns a role (admins; or guest -> user on self).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.security import get_principal
from app.db.state import get_tracker
from app.models.profile import AccessInfo, RoleAssignment
from app.services.tracker import ApplicantTracker

router = APIRouter()


@router.post("/ensure-user", response_model=AccessInfo)
async def ensure_user_access(
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> AccessInfo:
    """Grant the caller the user role if it is still a guest."""
    tracker.ensure_user_access(caller)
    return _access_info(tracker, caller)


@router.get("/me", response_model=AccessInfo)
async def get_caller_access(
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> AccessInfo:
    return _access_info(tracker, caller)


@router.put("/roles/{principal}", response_model=AccessInfo)
async def assign_role(
    principal: str,
    body: RoleAssignment,
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> AccessInfo:
    tracker.assign_role(caller, principal, body.role)
    return _access_info(tracker, principal)


def _access_info(tracker: ApplicantTracker, principal: str) -> AccessInfo:
    return AccessInfo(
        principal=principal,
        role=tracker.get_caller_user_role(principal),
        is_admin=tracker.is_caller_admin(principal),
    )
