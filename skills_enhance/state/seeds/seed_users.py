"""Seed the demo user directory."""

from datetime import datetime, timezone
from typing import List

from skills_enhance.models.user import User
from skills_enhance.state.seeds.seed_roles import predefined_permissions

USERS_DATA = [
    {
        "id": "1",
        "name": "Karan Jain",
        "email": "karan@skillsenhance.com",
        "roles": ["admin", "writer"],
        "active_role": "admin",
        "avatar": "KJ",
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    },
    {
        "id": "2",
        "name": "Sarah Writer",
        "email": "sarah@skillsenhance.com",
        "roles": ["writer"],
        "active_role": "writer",
        "avatar": "SW",
        "created_at": datetime(2024, 1, 15, tzinfo=timezone.utc),
    },
    {
        "id": "3",
        "name": "John Approver",
        "email": "john@skillsenhance.com",
        "roles": ["approval", "support"],
        "active_role": "approval",
        "avatar": "JA",
        "created_at": datetime(2024, 1, 20, tzinfo=timezone.utc),
    },
    {
        "id": "4",
        "name": "Mike Support",
        "email": "mike@skillsenhance.com",
        "roles": ["support"],
        "active_role": "support",
        "avatar": "MS",
        "created_at": datetime(2024, 2, 1, tzinfo=timezone.utc),
    },
    {
        "id": "5",
        "name": "Alice User",
        "email": "alice@skillsenhance.com",
        "roles": ["user"],
        "active_role": "user",
        "avatar": "AU",
        "created_at": datetime(2024, 2, 10, tzinfo=timezone.utc),
    },
]


def seed_users() -> List[User]:
    """Build the demo users with permissions snapshotted from their active role."""
    return [
        User(
            **{**user_data, "roles": list(user_data["roles"])},
            permissions=predefined_permissions(user_data["active_role"]),
        )
        for user_data in USERS_DATA
    ]
