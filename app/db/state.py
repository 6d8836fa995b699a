"""Process-wide tracker singleton.

Provides ``get_tracker()`` which returns a lazily-initialized
``ApplicantTracker`` whose admins are seeded from ``settings``.
"""

from app.core.config import settings
from app.services.tracker import ApplicantTracker

_tracker: ApplicantTracker | None = None


def get_tracker() -> ApplicantTracker:
    """Return the singleton tracker, creating it on first call."""
    global _tracker
    if _tracker is None:
        _tracker = ApplicantTracker(admins=settings.bootstrap_admins())
    return _tracker
