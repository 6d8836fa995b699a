"""User profile store.

Profiles are keyed by principal and replaced wholesale on save.
"""

from __future__ import annotations

import logging
import threading

from app.core.constants import MSG_PROFILE_DENIED
from app.core.errors import Unauthorized
from app.models.enums import Role
from app.models.profile import UserProfile
from app.services.access_control import AccessControl

logger = logging.getLogger(__name__)


class UserProfileStore:
    """Principal -> profile table guarded by ``AccessControl``."""

    def __init__(self, access: AccessControl) -> None:
        self._access = access
        self._lock = threading.Lock()
        self._profiles: dict[str, UserProfile] = {}

    def get(self, caller: str, principal: str) -> UserProfile | None:
        """Return ``principal``'s profile, or None if never saved.

        Users may read their own profile; admins may read anyone's.
        """
        if caller != principal and not self._access.is_admin(caller):
            logger.info(
                "profile_read_denied",
                extra={"caller": caller, "principal": principal},
            )
            raise Unauthorized(MSG_PROFILE_DENIED)
        self._access.require(caller, Role.user)
        with self._lock:
            return self._profiles.get(principal)

    def save(self, caller: str, profile: UserProfile) -> None:
        self._access.require(caller, Role.user)
        with self._lock:
            self._profiles[caller] = profile.model_copy()
        logger.info("profile_saved", extra={"principal": caller})
