"""Shared test fixtures.

Provides a fresh ``ApplicantTracker`` per test and a FastAPI ``TestClient``
wired to it through dependency overrides.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from app.services.tracker import ApplicantTracker

ADMIN = "admin-principal"


@pytest.fixture()
def tracker() -> ApplicantTracker:
    """Tracker with ``ADMIN`` bootstrapped as the only admin."""
    return ApplicantTracker(admins=[ADMIN])


@pytest.fixture()
def test_client(tracker: ApplicantTracker) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient backed by the ``tracker`` fixture."""
    from app.db.state import get_tracker
    from app.main import app

    app.dependency_overrides[get_tracker] = lambda: tracker
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()

