"""Pydantic models for user profiles and access information."""

from pydantic import BaseModel

from app.models.enums import Role


class UserProfile(BaseModel):
    """Profile stored per principal; saved as a whole, never merged."""
    name: str


class AccessInfo(BaseModel):
    """Role summary for the calling principal."""
    principal: str
    role: Role
    is_admin: bool


class RoleAssignment(BaseModel):
    """Request body for assigning a role to a principal."""
    role: Role
