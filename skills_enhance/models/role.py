"""Role model for RBAC."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from skills_enhance.models.permission import PermissionSet

# Hierarchy key for roles without a parent
ROOT_ROLE_KEY = "root"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Role(BaseModel):
    """Named bundle of permissions.

    ``parent_role_id`` only groups roles for display; a child does not
    inherit its parent's permissions.
    """

    id: str
    name: str
    description: Optional[str] = None
    permissions: PermissionSet
    is_predefined: bool = False
    parent_role_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
