"""Seed the predefined roles."""

from typing import Dict, List

from skills_enhance.models.permission import PermissionSet
from skills_enhance.models.role import Role

ALL = dict(
    create=True, read=True, update=True, delete=True, publish=True, approve=True,
    manage_users=True, manage_roles=True, view_analytics=True, support_chat=True,
)

PREDEFINED_PERMISSIONS: Dict[str, dict] = {
    "admin": ALL,
    "writer": dict(
        create=True, read=True, update=True, delete=True, publish=True,
        support_chat=True,
    ),
    "approval": dict(read=True, approve=True, support_chat=True),
    "support": dict(read=True, support_chat=True),
    "user": dict(read=True, support_chat=True),
}

ROLES_DATA = [
    {
        "id": "admin",
        "name": "Admin",
        "description": "Full access to all features and management",
    },
    {
        "id": "writer",
        "name": "Writer",
        "description": "Can create, edit, and publish content",
    },
    {
        "id": "approval",
        "name": "Approval",
        "description": "Can approve or reject content",
    },
    {
        "id": "support",
        "name": "Support",
        "description": "Can provide support and chat",
    },
    {
        "id": "user",
        "name": "User",
        "description": "Basic read-only access",
    },
]


def predefined_permissions(role_id: str) -> PermissionSet:
    return PermissionSet(**PREDEFINED_PERMISSIONS[role_id])


def seed_roles() -> List[Role]:
    """Build fresh copies of the five built-in roles, in display order."""
    return [
        Role(
            **role_data,
            permissions=predefined_permissions(role_data["id"]),
            is_predefined=True,
        )
        for role_data in ROLES_DATA
    ]
