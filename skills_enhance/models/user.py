"""User model."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from skills_enhance.models.permission import PermissionSet
from skills_enhance.models.role import utcnow


class User(BaseModel):
    """Directory user holding one or more roles.

    ``permissions`` is a snapshot copied from the active role when it was
    last set; it is not recomputed when the role changes.
    """

    id: str
    name: str
    email: str
    roles: List[str]
    active_role: str
    permissions: PermissionSet
    avatar: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    is_active: bool = True


def initials(name: str) -> str:
    """Avatar text: first letter of up to two words, upper-cased."""
    return "".join(part[0] for part in name.split() if part).upper()[:2]
