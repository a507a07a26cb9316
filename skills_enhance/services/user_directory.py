"""User directory — users, role assignment and the current actor."""

import logging
import uuid
from typing import Dict, List, Optional

from skills_enhance.core.exceptions import (
    AuthenticationError,
    LastRoleError,
    RoleNotAssignedError,
    UserNotFoundError,
)
from skills_enhance.models.permission import PermissionSet
from skills_enhance.models.user import User, initials
from skills_enhance.services.role_registry import RoleRegistry

logger = logging.getLogger("skills_enhance")

SIGNUP_ROLE = "user"


class UserDirectory:
    """Owns the user collection and the nullable current-actor slot.

    The current actor is stored as a user id, so the record returned by
    ``current_user`` is always the directory's own record.
    """

    def __init__(self, registry: RoleRegistry, users: Optional[List[User]] = None):
        self.registry = registry
        self._users: Dict[str, User] = {}
        self._current_user_id: Optional[str] = None
        for user in users or []:
            self._users[user.id] = user

    def __len__(self) -> int:
        return len(self._users)

    # ---- Lookup ----
    def list_users(self) -> List[User]:
        return list(self._users.values())

    def get_user(self, user_id: str) -> User:
        """Get a user by id.

        Raises:
            UserNotFoundError: If the id is not in the directory.
        """
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def users_holding(self, role_id: str) -> List[User]:
        return [u for u in self._users.values() if role_id in u.roles]

    # ---- Session ----
    @property
    def current_user(self) -> Optional[User]:
        if self._current_user_id is None:
            return None
        return self._users.get(self._current_user_id)

    def set_current_user(self, user_id: Optional[str]) -> Optional[User]:
        if user_id is None:
            self._current_user_id = None
            return None
        user = self.get_user(user_id)
        self._current_user_id = user.id
        return user

    def signup(self, name: str, email: str, password: str) -> User:
        """Create a basic user and make them the current actor.

        The password is accepted for interface parity but never stored.
        """
        user = User(
            id=f"user-{uuid.uuid4().hex[:12]}",
            name=name,
            email=email,
            roles=[SIGNUP_ROLE],
            active_role=SIGNUP_ROLE,
            permissions=self.registry.get_permissions_for_role(SIGNUP_ROLE),
            avatar=initials(name),
            is_active=True,
        )
        self._users[user.id] = user
        self._current_user_id = user.id
        logger.info("User signed up: %s <%s>", user.id, user.email)
        return user

    def login(self, email: str, password: str) -> User:
        """Make the user with this exact email the current actor.

        Matching is on email only; the password is ignored.

        Raises:
            AuthenticationError: Unknown email or deactivated account. The
                current actor is left unchanged.
        """
        user = self.find_by_email(email)
        if user is None:
            logger.warning("Login failed for unknown email %s", email)
            raise AuthenticationError("Invalid email or password")
        if not user.is_active:
            logger.warning("Login refused for deactivated user %s", user.id)
            raise AuthenticationError("Account is deactivated")

        self._current_user_id = user.id
        logger.info("User logged in: %s <%s>", user.id, user.email)
        return user

    def logout(self) -> None:
        self._current_user_id = None

    # ---- Role assignment ----
    def update_user_role(self, user_id: str, new_role: str) -> User:
        """Replace all of the user's roles with ``new_role``."""
        user = self.get_user(user_id)
        self.registry.get_role(new_role)

        user.roles = [new_role]
        user.active_role = new_role
        user.permissions = self.registry.get_permissions_for_role(new_role)
        logger.info("User %s role reset to %s", user_id, new_role)
        return user

    def add_role_to_user(self, user_id: str, role_id: str) -> User:
        """Grant an extra role. Active role and permissions stay as they are."""
        user = self.get_user(user_id)
        self.registry.get_role(role_id)

        if role_id in user.roles:
            return user
        user.roles.append(role_id)
        logger.info("User %s granted role %s", user_id, role_id)
        return user

    def remove_role_from_user(self, user_id: str, role_id: str) -> User:
        """Revoke a role.

        When the revoked role was active, the first remaining role becomes
        active but the permission snapshot is left as it was until the next
        ``switch_active_role``.
        """
        user = self.get_user(user_id)
        if role_id not in user.roles:
            raise RoleNotAssignedError(
                f"User {user_id} does not hold role '{self.registry.role_display_name(role_id)}'"
            )
        if len(user.roles) == 1:
            raise LastRoleError(f"Cannot remove the only role of user {user_id}")

        user.roles = [r for r in user.roles if r != role_id]
        if user.active_role == role_id:
            user.active_role = user.roles[0]
        logger.info("User %s revoked role %s", user_id, role_id)
        return user

    def switch_active_role(self, user_id: str, role_id: str) -> User:
        """Activate one of the user's held roles and re-snapshot permissions."""
        user = self.get_user(user_id)
        if role_id not in user.roles:
            raise RoleNotAssignedError(
                f"User {user_id} does not hold role '{self.registry.role_display_name(role_id)}'"
            )

        if role_id not in self.registry:
            logger.warning("Role %s is no longer registered; using default permissions", role_id)
        user.active_role = role_id
        user.permissions = self.registry.get_permissions_for_role(role_id)
        logger.info("User %s switched active role to %s", user_id, role_id)
        return user

    def update_user_permissions(self, user_id: str, permissions: PermissionSet) -> User:
        """Overwrite the user's snapshot directly, bypassing the registry."""
        user = self.get_user(user_id)
        user.permissions = permissions.model_copy()
        logger.info("User %s permissions overridden", user_id)
        return user

    def set_user_active(self, user_id: str, is_active: bool) -> User:
        """Activate or deactivate an account; deactivating the actor logs out."""
        user = self.get_user(user_id)
        user.is_active = is_active
        if not is_active and self._current_user_id == user.id:
            self._current_user_id = None
        logger.info("User %s is_active=%s", user_id, is_active)
        return user

    def refresh_active_snapshots(self, role_id: str, permissions: PermissionSet) -> int:
        """Copy ``permissions`` into every user whose active role is ``role_id``.

        Users holding the role without it being active keep their snapshot.
        """
        refreshed = 0
        for user in self._users.values():
            if user.active_role == role_id:
                user.permissions = permissions.model_copy()
                refreshed += 1
        return refreshed
