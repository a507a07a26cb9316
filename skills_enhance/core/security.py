"""Current-actor and permission guard dependencies."""

from fastapi import Depends

from skills_enhance.core.exceptions import forbidden, unauthorized
from skills_enhance.models.permission import resolve_permission_key
from skills_enhance.models.user import User
from skills_enhance.services.auth_store import AuthStore
from skills_enhance.state.session import get_store


async def get_current_actor(store: AuthStore = Depends(get_store)) -> User:
    """Return the logged-in user or fail with 401."""
    user = store.current_user
    if user is None:
        raise unauthorized()
    return user


class RequirePermission:
    """Dependency that checks the current actor's permission snapshot."""

    def __init__(self, permission: str):
        resolve_permission_key(permission)
        self.permission = permission

    async def __call__(self, store: AuthStore = Depends(get_store)) -> User:
        user = store.current_user
        if user is None:
            raise unauthorized()
        if not store.has_permission(self.permission):
            raise forbidden(f"Missing permission '{self.permission}'")
        return user


# Convenience dependency factories
require_manage_users = RequirePermission("manageUsers")
require_manage_roles = RequirePermission("manageRoles")
require_view_analytics = RequirePermission("viewAnalytics")
