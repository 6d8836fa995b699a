"""User profile endpoints.

GET /me           -- caller's own profile (null when never saved).
PUT /me           -- replace the caller's profile.
GET /{principal}  -- any profile for admins; own profile for users.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.security import get_principal
from app.db.state import get_tracker
from app.models.profile import UserProfile
from app.services.tracker import ApplicantTracker

router = APIRouter()


@router.get("/me", response_model=UserProfile | None)
async def get_caller_user_profile(
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> UserProfile | None:
    return tracker.get_caller_user_profile(caller)


@router.put("/me", status_code=204)
async def save_caller_user_profile(
    profile: UserProfile,
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> None:
    tracker.save_caller_user_profile(caller, profile)


@router.get("/{principal}", response_model=UserProfile | None)
async def get_user_profile(
    principal: str,
    caller: str = Depends(get_principal),
    tracker: ApplicantTracker = Depends(get_tracker),
) -> UserProfile | None:
    return tracker.get_user_profile(caller, principal)
