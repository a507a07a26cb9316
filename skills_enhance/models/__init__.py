"""Models package — in-memory domain records."""

from skills_enhance.models.permission import PermissionSet
from skills_enhance.models.role import Role
from skills_enhance.models.user import User
from skills_enhance.models.navbar import NavbarConfig, PagesEnabled
from skills_enhance.models.audit_log import AuditLog

__all__ = [
    "PermissionSet", "Role", "User",
    "NavbarConfig", "PagesEnabled", "AuditLog",
]
