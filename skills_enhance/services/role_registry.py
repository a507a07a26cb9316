"""Role registry — predefined and custom roles with their permission sets."""

import logging
import uuid
from typing import Dict, List, Optional

from skills_enhance.core.exceptions import (
    PredefinedRoleError,
    RoleNotFoundError,
    ValidationError,
)
from skills_enhance.models.permission import PermissionSet, default_permissions
from skills_enhance.models.role import ROOT_ROLE_KEY, Role

logger = logging.getLogger("skills_enhance")


class RoleRegistry:
    """Owns the ordered collection of roles and answers permission lookups."""

    def __init__(self, roles: Optional[List[Role]] = None):
        self._roles: Dict[str, Role] = {}
        for role in roles or []:
            self._roles[role.id] = role

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, role_id: str) -> bool:
        return role_id in self._roles

    def list_roles(self) -> List[Role]:
        return list(self._roles.values())

    def custom_roles(self) -> List[Role]:
        return [r for r in self._roles.values() if not r.is_predefined]

    def get_role_details(self, role_id: str) -> Optional[Role]:
        return self._roles.get(role_id)

    def get_role(self, role_id: str) -> Role:
        """Get a role by id.

        Raises:
            RoleNotFoundError: If the id is not registered.
        """
        role = self._roles.get(role_id)
        if role is None:
            raise RoleNotFoundError(f"Role '{role_id}' not found")
        return role

    def get_permissions_for_role(self, role_id: str) -> PermissionSet:
        """Return a copy of the role's permissions, or the fallback set.

        Never fails: unknown ids (including deleted roles still referenced by
        a user) get read + support chat only.
        """
        role = self._roles.get(role_id)
        if role is not None:
            return role.permissions.model_copy()
        return default_permissions()

    def role_display_name(self, role_id: str) -> str:
        role = self._roles.get(role_id)
        return role.name if role else role_id[:1].upper() + role_id[1:]

    def add_custom_role(
        self,
        name: str,
        description: Optional[str],
        permissions: PermissionSet,
        parent_role_id: Optional[str] = None,
    ) -> Role:
        """Register a new custom role under a freshly generated id."""
        name = self._clean_name(name)
        role_id = f"custom-{uuid.uuid4().hex[:12]}"
        self._check_parent(role_id, parent_role_id)

        role = Role(
            id=role_id,
            name=name,
            description=description,
            permissions=permissions.model_copy(),
            is_predefined=False,
            parent_role_id=parent_role_id,
        )
        self._roles[role.id] = role
        logger.info("Role created: %s (%s)", role.id, role.name)
        return role

    def edit_custom_role(
        self,
        role_id: str,
        name: str,
        description: Optional[str],
        permissions: PermissionSet,
        parent_role_id: Optional[str] = None,
    ) -> Role:
        """Replace the mutable fields of a custom role.

        Users are not touched here; refreshing the snapshots of users active
        on the role is the caller's job (see ``AuthStore.edit_custom_role``).
        """
        role = self.get_role(role_id)
        if role.is_predefined:
            logger.warning("Refused edit of predefined role %s", role_id)
            raise PredefinedRoleError(f"Role '{role_id}' is predefined and cannot be edited")
        name = self._clean_name(name)
        self._check_parent(role_id, parent_role_id)

        role.name = name
        role.description = description
        role.permissions = permissions.model_copy()
        role.parent_role_id = parent_role_id
        logger.info("Role updated: %s (%s)", role.id, role.name)
        return role

    def delete_custom_role(self, role_id: str) -> Role:
        """Remove a custom role.

        Children of the removed role move up to its parent so no hierarchy
        link dangles.
        """
        role = self.get_role(role_id)
        if role.is_predefined:
            logger.warning("Refused delete of predefined role %s", role_id)
            raise PredefinedRoleError(f"Role '{role_id}' is predefined and cannot be deleted")

        del self._roles[role_id]
        for child in self._roles.values():
            if child.parent_role_id == role_id:
                child.parent_role_id = role.parent_role_id
        logger.info("Role deleted: %s (%s)", role.id, role.name)
        return role

    def get_role_hierarchy(self) -> Dict[str, List[Role]]:
        """Group roles by parent id; parentless roles sit under ``"root"``."""
        hierarchy: Dict[str, List[Role]] = {}
        for role in self._roles.values():
            hierarchy.setdefault(role.parent_role_id or ROOT_ROLE_KEY, []).append(role)
        return hierarchy

    @staticmethod
    def _clean_name(name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Role name must not be blank")
        return name

    def _check_parent(self, role_id: str, parent_role_id: Optional[str]) -> None:
        if parent_role_id is None:
            return
        if parent_role_id not in self._roles:
            raise RoleNotFoundError(f"Parent role '{parent_role_id}' not found")

        seen = set()
        current: Optional[str] = parent_role_id
        while current is not None and current not in seen:
            if current == role_id:
                raise ValidationError(
                    f"Role '{role_id}' cannot be nested under its own descendant"
                )
            seen.add(current)
            parent = self._roles.get(current)
            current = parent.parent_role_id if parent else None
