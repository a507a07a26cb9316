# tests/test_role_registry.py

"""
Tests for the role registry: predefined roles, custom role CRUD, hierarchy.
"""

import pytest

from skills_enhance.core.exceptions import (
    PredefinedRoleError,
    RoleNotFoundError,
    ValidationError,
)
from skills_enhance.models.permission import PermissionSet
from skills_enhance.services.role_registry import RoleRegistry
from skills_enhance.state.seeds.seed_roles import seed_roles

EXPECTED_TABLE = {
    "admin": {
        "create": True, "read": True, "update": True, "delete": True,
        "publish": True, "approve": True, "manageUsers": True,
        "manageRoles": True, "viewAnalytics": True, "supportChat": True,
    },
    "writer": {
        "create": True, "read": True, "update": True, "delete": True,
        "publish": True, "approve": False, "manageUsers": False,
        "manageRoles": False, "viewAnalytics": False, "supportChat": True,
    },
    "approval": {
        "create": False, "read": True, "update": False, "delete": False,
        "publish": False, "approve": True, "manageUsers": False,
        "manageRoles": False, "viewAnalytics": False, "supportChat": True,
    },
    "support": {
        "create": False, "read": True, "update": False, "delete": False,
        "publish": False, "approve": False, "manageUsers": False,
        "manageRoles": False, "viewAnalytics": False, "supportChat": True,
    },
    "user": {
        "create": False, "read": True, "update": False, "delete": False,
        "publish": False, "approve": False, "manageUsers": False,
        "manageRoles": False, "viewAnalytics": False, "supportChat": True,
    },
}


@pytest.fixture
def registry() -> RoleRegistry:
    return RoleRegistry(seed_roles())


@pytest.mark.parametrize("role_id", list(EXPECTED_TABLE))
def test_predefined_permission_table(registry, role_id):
    """Each built-in role carries its fixed permission table."""
    assert registry.get_permissions_for_role(role_id).to_public() == EXPECTED_TABLE[role_id]
    assert registry.get_role(role_id).is_predefined is True


def test_predefined_roles_in_display_order(registry):
    assert [r.id for r in registry.list_roles()] == [
        "admin", "writer", "approval", "support", "user",
    ]
    assert registry.custom_roles() == []


def test_unknown_role_falls_back_to_default_permissions(registry):
    """Unknown ids get read + supportChat only, never an error."""
    permissions = registry.get_permissions_for_role("does-not-exist").to_public()
    assert permissions["read"] is True
    assert permissions["supportChat"] is True
    assert [k for k, v in permissions.items() if v] == ["read", "supportChat"]


def test_get_permissions_returns_a_copy(registry):
    permissions = registry.get_permissions_for_role("user")
    permissions.manage_users = True
    assert registry.get_role("user").permissions.manage_users is False


def test_add_custom_role(registry, reviewer_permissions):
    role = registry.add_custom_role("Reviewer", "Reviews content", reviewer_permissions)

    assert role.id.startswith("custom-")
    assert role.is_predefined is False
    assert role.parent_role_id is None
    assert registry.list_roles()[-1] is role
    assert len(registry) == 6
    assert registry.get_permissions_for_role(role.id) == reviewer_permissions


def test_add_custom_role_ids_are_unique(registry, reviewer_permissions):
    first = registry.add_custom_role("A", None, reviewer_permissions)
    second = registry.add_custom_role("A", None, reviewer_permissions)
    assert first.id != second.id


def test_add_custom_role_rejects_blank_name(registry, reviewer_permissions):
    with pytest.raises(ValidationError):
        registry.add_custom_role("   ", None, reviewer_permissions)
    assert len(registry) == 5


def test_add_custom_role_with_unknown_parent(registry, reviewer_permissions):
    with pytest.raises(RoleNotFoundError):
        registry.add_custom_role("Child", None, reviewer_permissions, parent_role_id="ghost")
    assert len(registry) == 5


def test_edit_custom_role_round_trip(registry, reviewer_permissions):
    """Create then edit; details reflect the edit."""
    role = registry.add_custom_role("Reviewer", "desc", reviewer_permissions)
    new_permissions = PermissionSet(read=True, publish=True)

    registry.edit_custom_role(role.id, "Reviewer2", "desc2", new_permissions)

    details = registry.get_role_details(role.id)
    assert details.name == "Reviewer2"
    assert details.description == "desc2"
    assert details.permissions == new_permissions


def test_edit_unknown_role(registry, reviewer_permissions):
    with pytest.raises(RoleNotFoundError):
        registry.edit_custom_role("ghost", "X", None, reviewer_permissions)


def test_edit_predefined_role_is_refused(registry, reviewer_permissions):
    with pytest.raises(PredefinedRoleError):
        registry.edit_custom_role("writer", "Author", None, reviewer_permissions)

    writer = registry.get_role("writer")
    assert writer.name == "Writer"
    assert writer.permissions.create is True


def test_edit_rejects_parent_cycle(registry, reviewer_permissions):
    parent = registry.add_custom_role("Parent", None, reviewer_permissions)
    child = registry.add_custom_role("Child", None, reviewer_permissions, parent.id)

    with pytest.raises(ValidationError):
        registry.edit_custom_role(parent.id, "Parent", None, reviewer_permissions, child.id)
    with pytest.raises(ValidationError):
        registry.edit_custom_role(parent.id, "Parent", None, reviewer_permissions, parent.id)
    assert registry.get_role(parent.id).parent_role_id is None


def test_delete_predefined_role_is_refused(registry):
    """Registry size unchanged and the role is still there."""
    with pytest.raises(PredefinedRoleError):
        registry.delete_custom_role("admin")

    assert len(registry) == 5
    assert registry.get_role("admin").is_predefined is True


def test_delete_unknown_role(registry):
    with pytest.raises(RoleNotFoundError):
        registry.delete_custom_role("ghost")


def test_delete_custom_role_moves_children_up(registry, reviewer_permissions):
    parent = registry.add_custom_role("Parent", None, reviewer_permissions, "writer")
    child = registry.add_custom_role("Child", None, reviewer_permissions, parent.id)

    registry.delete_custom_role(parent.id)

    assert parent.id not in registry
    assert registry.get_role(child.id).parent_role_id == "writer"


def test_role_hierarchy_groups_by_parent(registry, reviewer_permissions):
    child = registry.add_custom_role("Senior Writer", None, reviewer_permissions, "writer")
    orphan = registry.add_custom_role("Loose", None, reviewer_permissions)

    hierarchy = registry.get_role_hierarchy()

    assert [r.id for r in hierarchy["root"]] == [
        "admin", "writer", "approval", "support", "user", orphan.id,
    ]
    assert hierarchy["writer"] == [child]
    # display grouping only: no inheritance from the parent
    assert registry.get_permissions_for_role(child.id).create is False


def test_role_display_name(registry):
    assert registry.role_display_name("approval") == "Approval"
    assert registry.role_display_name("moderator") == "Moderator"
