"""Caller identity extraction.

The authenticated principal is set by the fronting gateway in the header
named by ``settings.PRINCIPAL_HEADER``.  The value is opaque and compared
exactly; it is never trimmed or case-folded.
"""

from fastapi import HTTPException, Request

from app.core.config import settings


def get_principal(request: Request) -> str:
    """FastAPI dependency returning the caller principal, or 401."""
    principal = request.headers.get(settings.PRINCIPAL_HEADER)
    if not principal:
        raise HTTPException(
            status_code=401,
            detail=f"Missing {settings.PRINCIPAL_HEADER} header",
        )
    return principal
