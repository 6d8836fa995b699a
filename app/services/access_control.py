"""Role-based access control.

Keeps the principal -> role table.  Principals never assigned a role are
guests.  Roles only move up: an admin may assign any role to anyone, and a
guest may promote itself to user.  Nothing exposed revokes a role.
"""

from __future__ import annotations

import logging
import threading

from app.core.constants import (
    MSG_ADMIN_REQUIRED,
    MSG_ASSIGN_ROLE_DENIED,
    MSG_ROLE_DOWNGRADE_DENIED,
    MSG_USER_REQUIRED,
)
from app.core.errors import Unauthorized
from app.models.enums import Role

logger = logging.getLogger(__name__)


class AccessControl:
    """Principal -> role table with privilege checks."""

    def __init__(self, admins: list[str] | None = None) -> None:
        self._lock = threading.Lock()
        self._roles: dict[str, Role] = {}
        for principal in admins or []:
            self._roles[principal] = Role.admin
            logger.info("bootstrap_admin_assigned", extra={"principal": principal})

    def get_role(self, principal: str) -> Role:
        with self._lock:
            return self._roles.get(principal, Role.guest)

    def has_permission(self, principal: str, min_role: Role) -> bool:
        return self.get_role(principal).at_least(min_role)

    def is_admin(self, principal: str) -> bool:
        return self.has_permission(principal, Role.admin)

    def assign_role(self, assigner: str, target: str, role: Role) -> None:
        """Assign ``role`` to ``target`` on behalf of ``assigner``.

        Admins may raise anyone to any role.  Otherwise the only accepted
        call is a guest promoting itself to user.  No assigner may lower a
        role.

        Raises
        ------
        Unauthorized
            For every other combination.
        """
        with self._lock:
            assigner_role = self._roles.get(assigner, Role.guest)
            current = self._roles.get(target, Role.guest)
            if role.rank < current.rank:
                logger.info(
                    "role_downgrade_denied",
                    extra={
                        "assigner": assigner,
                        "target": target,
                        "role": role.value,
                    },
                )
                raise Unauthorized(MSG_ROLE_DOWNGRADE_DENIED)
            if assigner_role is not Role.admin:
                self_promotion = (
                    assigner == target
                    and current is Role.guest
                    and role is Role.user
                )
                if not self_promotion:
                    logger.info(
                        "assign_role_denied",
                        extra={
                            "assigner": assigner,
                            "target": target,
                            "role": role.value,
                        },
                    )
                    raise Unauthorized(MSG_ASSIGN_ROLE_DENIED)
            self._roles[target] = role

        logger.info(
            "role_assigned",
            extra={"assigner": assigner, "target": target, "role": role.value},
        )

    def ensure_user_access(self, principal: str) -> None:
        """Promote a guest to user; no-op for users and admins."""
        with self._lock:
            if self._roles.get(principal, Role.guest) is not Role.guest:
                return
            self._roles[principal] = Role.user
        logger.info("user_access_granted", extra={"principal": principal})

    def require(self, principal: str, min_role: Role) -> None:
        """Raise ``Unauthorized`` unless ``principal`` holds ``min_role``."""
        if not self.has_permission(principal, min_role):
            logger.info(
                "access_denied",
                extra={"principal": principal, "min_role": min_role.value},
            )
            message = MSG_ADMIN_REQUIRED if min_role is Role.admin else MSG_USER_REQUIRED
            raise Unauthorized(message)

    def count(self) -> int:
        """Number of principals with an explicitly assigned role."""
        with self._lock:
            return len(self._roles)
