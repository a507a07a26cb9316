"""Authorization state store — the single object handlers read and mutate.

Wraps the role registry, the user directory and the permission evaluator,
runs the cross-collection rules (role edits refreshing user snapshots,
deletes blocked while a role is held) and writes an audit entry for every
mutation, attributed to the current actor.
"""

import logging
from typing import Dict, List, Optional

from skills_enhance.core.exceptions import RoleInUseError
from skills_enhance.models.permission import PermissionSet
from skills_enhance.models.role import Role
from skills_enhance.models.user import User
from skills_enhance.services.audit_service import AuditService
from skills_enhance.services.permission_evaluator import PermissionEvaluator
from skills_enhance.services.role_registry import RoleRegistry
from skills_enhance.services.user_directory import UserDirectory

logger = logging.getLogger("skills_enhance")


def _user_state(user: User) -> dict:
    return {
        "roles": list(user.roles),
        "active_role": user.active_role,
        "permissions": user.permissions.to_public(),
    }


def _role_state(role: Role) -> dict:
    return {
        "name": role.name,
        "description": role.description,
        "permissions": role.permissions.to_public(),
        "parent_role_id": role.parent_role_id,
    }


class AuthStore:
    """Roles, users, the current actor and derived permission checks."""

    def __init__(
        self,
        roles: RoleRegistry,
        users: UserDirectory,
        audit: Optional[AuditService] = None,
    ):
        self.roles = roles
        self.users = users
        self.evaluator = PermissionEvaluator(users)
        self.audit = audit or AuditService()

    # ---- Read surface ----
    @property
    def current_user(self) -> Optional[User]:
        return self.users.current_user

    @property
    def all_users(self) -> List[User]:
        return self.users.list_users()

    @property
    def custom_roles(self) -> List[Role]:
        """Every registered role, predefined ones first."""
        return self.roles.list_roles()

    def get_permissions_for_role(self, role_id: str) -> PermissionSet:
        return self.roles.get_permissions_for_role(role_id)

    def get_role_details(self, role_id: str) -> Optional[Role]:
        return self.roles.get_role_details(role_id)

    def get_role_hierarchy(self) -> Dict[str, List[Role]]:
        return self.roles.get_role_hierarchy()

    def get_users_by_role(self, role_id: str) -> List[User]:
        return self.evaluator.get_users_by_role(role_id)

    def has_permission(self, key: str) -> bool:
        return self.evaluator.has_permission(key)

    def can_create_content(self) -> bool:
        return self.evaluator.can_create_content()

    def can_approve_content(self) -> bool:
        return self.evaluator.can_approve_content()

    def can_manage_users(self) -> bool:
        return self.evaluator.can_manage_users()

    def can_see_analytics(self) -> bool:
        return self.evaluator.can_see_analytics()

    # ---- Session ----
    def signup(self, name: str, email: str, password: str) -> User:
        user = self.users.signup(name, email, password)
        self.audit.log(user, "user.signup", "user", user.id, new_value=_user_state(user))
        return user

    def login(self, email: str, password: str) -> User:
        user = self.users.login(email, password)
        self.audit.log(user, "user.login", "user", user.id)
        return user

    def logout(self) -> None:
        actor = self.current_user
        self.users.logout()
        if actor is not None:
            self.audit.log(actor, "user.logout", "user", actor.id)

    # ---- Roles ----
    def add_custom_role(
        self,
        name: str,
        description: Optional[str],
        permissions: PermissionSet,
        parent_role_id: Optional[str] = None,
    ) -> Role:
        role = self.roles.add_custom_role(name, description, permissions, parent_role_id)
        self.audit.log(
            self.current_user, "role.created", "role", role.id, new_value=_role_state(role)
        )
        return role

    def edit_custom_role(
        self,
        role_id: str,
        name: str,
        description: Optional[str],
        permissions: PermissionSet,
        parent_role_id: Optional[str] = None,
    ) -> Role:
        """Edit a custom role and re-snapshot users currently active on it."""
        before = self.roles.get_role(role_id)
        old_value = _role_state(before)
        role = self.roles.edit_custom_role(
            role_id, name, description, permissions, parent_role_id
        )
        refreshed = self.users.refresh_active_snapshots(role.id, role.permissions)
        if refreshed:
            logger.info("Refreshed permissions of %d user(s) active on %s", refreshed, role.id)
        self.audit.log(
            self.current_user, "role.updated", "role", role.id,
            old_value=old_value, new_value=_role_state(role),
        )
        return role

    def delete_custom_role(self, role_id: str) -> Role:
        """Delete a custom role that no user holds.

        Raises:
            RoleNotFoundError: Unknown id.
            PredefinedRoleError: One of the five built-in roles.
            RoleInUseError: At least one user still holds the role.
        """
        role = self.roles.get_role(role_id)
        holders = self.get_users_by_role(role_id)
        if holders and not role.is_predefined:
            logger.warning("Refused delete of role %s held by %d user(s)", role_id, len(holders))
            raise RoleInUseError(
                f"Role '{role_id}' is held by {len(holders)} user(s): "
                + ", ".join(u.id for u in holders)
            )
        self.roles.delete_custom_role(role_id)
        self.audit.log(
            self.current_user, "role.deleted", "role", role_id, old_value=_role_state(role)
        )
        return role

    # ---- User roles ----
    def _mutate_user(self, action: str, user_id: str, operation, *args) -> User:
        old_value = _user_state(self.users.get_user(user_id))
        user = operation(user_id, *args)
        self.audit.log(
            self.current_user, action, "user", user_id,
            old_value=old_value, new_value=_user_state(user),
        )
        return user

    def update_user_role(self, user_id: str, new_role: str) -> User:
        return self._mutate_user("user.role_replaced", user_id, self.users.update_user_role, new_role)

    def add_role_to_user(self, user_id: str, role_id: str) -> User:
        return self._mutate_user("user.role_added", user_id, self.users.add_role_to_user, role_id)

    def remove_role_from_user(self, user_id: str, role_id: str) -> User:
        return self._mutate_user(
            "user.role_removed", user_id, self.users.remove_role_from_user, role_id
        )

    def switch_active_role(self, user_id: str, role_id: str) -> User:
        return self._mutate_user(
            "user.role_switched", user_id, self.users.switch_active_role, role_id
        )

    def update_user_permissions(self, user_id: str, permissions: PermissionSet) -> User:
        return self._mutate_user(
            "user.permissions_overridden", user_id, self.users.update_user_permissions, permissions
        )

    def set_user_active(self, user_id: str, is_active: bool) -> User:
        actor = self.current_user
        user = self.users.set_user_active(user_id, is_active)
        self.audit.log(
            actor, "user.activated" if is_active else "user.deactivated", "user", user_id
        )
        return user

    # ---- Stats ----
    def stats(self) -> dict:
        return {
            "total_users": len(self.users),
            "active_users": sum(1 for u in self.all_users if u.is_active),
            "total_roles": len(self.roles),
            "custom_roles": len(self.roles.custom_roles()),
            "users_per_role": {
                role.id: len(self.get_users_by_role(role.id)) for role in self.roles.list_roles()
            },
        }
