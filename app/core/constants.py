"""Application constants.

Error messages surfaced to callers and the first id handed out by the
candidate registry.
"""

# ---------------------------------------------------------------------------
# Candidate registry
# ---------------------------------------------------------------------------
FIRST_CANDIDATE_ID: int = 0

MSG_CANDIDATE_NOT_FOUND: str = "Candidate not found"
MSG_NO_CANDIDATE_USE_UPSERT: str = "No candidate record found for caller; use upsert to create one"
MSG_INDEX_INCONSISTENT: str = "Candidate index was inconsistent and has been repaired; please retry"

# ---------------------------------------------------------------------------
# Pipeline transitions
# ---------------------------------------------------------------------------
MSG_ALREADY_HIRED: str = "Candidate already hired"
MSG_ALREADY_REJECTED: str = "Candidate already rejected"
MSG_NOOP_TRANSITION: str = "Candidate is already in that stage; no-op not allowed"

# ---------------------------------------------------------------------------
# Access control
# ---------------------------------------------------------------------------
MSG_USER_REQUIRED: str = "Only users can perform this action"
MSG_ADMIN_REQUIRED: str = "Only admins can perform this action"
MSG_ASSIGN_ROLE_DENIED: str = "Only admins can assign roles"
MSG_ROLE_DOWNGRADE_DENIED: str = "Roles cannot be lowered once assigned"
MSG_PROFILE_DENIED: str = "Can only view your own profile"
