"""Permission evaluator — read-only queries against the current actor."""

from typing import Any, Dict, List

from skills_enhance.models.user import User
from skills_enhance.services.user_directory import UserDirectory

BASE_NAV_ITEMS = [
    {"label": "Home", "path": "/"},
    {"label": "Guided Labs", "path": "/labs"},
    {"label": "Certifications", "path": "/certifications"},
    {"label": "About", "path": "/about"},
    {"label": "Contact", "path": "/contact"},
]

# (label, path, permission, role that also unlocks the item)
ROLE_NAV_ITEMS = [
    ("Admin", "/admin", "manage_users", "admin"),
    ("Content", "/content", "create", "writer"),
    ("Approval", "/approval", "approve", "approval"),
    ("Support", "/support", "support_chat", "support"),
]


class PermissionEvaluator:
    """Stateless checks; every call reads the directory afresh."""

    def __init__(self, directory: UserDirectory):
        self.directory = directory

    def has_permission(self, key: str) -> bool:
        """True iff there is a current actor whose snapshot grants ``key``.

        Raises:
            ValidationError: If ``key`` is not one of the ten permissions.
        """
        user = self.directory.current_user
        if user is None:
            return False
        return user.permissions.allows(key)

    def can_create_content(self) -> bool:
        return self.has_permission("create")

    def can_approve_content(self) -> bool:
        return self.has_permission("approve")

    def can_manage_users(self) -> bool:
        return self.has_permission("manageUsers")

    def can_see_analytics(self) -> bool:
        return self.has_permission("viewAnalytics")

    def get_users_by_role(self, role_id: str) -> List[User]:
        return self.directory.users_holding(role_id)

    def capabilities(self) -> Dict[str, Any]:
        user = self.directory.current_user
        return {
            "can_create_content": self.can_create_content(),
            "can_approve_content": self.can_approve_content(),
            "can_manage_users": self.can_manage_users(),
            "can_see_analytics": self.can_see_analytics(),
            "permissions": user.permissions.to_public() if user else None,
        }

    def navigation(self) -> List[Dict[str, str]]:
        """Header links for the current actor.

        A gated item shows when the snapshot grants its permission or when the
        actor holds the matching predefined role, whichever role is active.
        """
        items = [dict(item) for item in BASE_NAV_ITEMS]
        user = self.directory.current_user
        if user is None:
            return items

        items.append({"label": "Dashboard", "path": "/dashboard"})
        for label, path, permission, role_id in ROLE_NAV_ITEMS:
            if user.permissions.allows(permission) or role_id in user.roles:
                items.append({"label": label, "path": path})
        return items
