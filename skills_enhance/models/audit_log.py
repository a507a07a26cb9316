"""Audit log model — append-only."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from skills_enhance.models.role import utcnow


class AuditLog(BaseModel):
    """Immutable audit trail entry for a store mutation.

    Entries are APPEND-ONLY: nothing updates or removes them once written.
    """

    id: int
    actor_id: Optional[str] = None
    actor_email: Optional[str] = None
    action: str  # e.g. "role.created"
    resource_type: str  # role, user, navbar
    resource_id: Optional[str] = None
    old_value: Optional[Any] = None
    new_value: Optional[Any] = None
    created_at: datetime = Field(default_factory=utcnow)
