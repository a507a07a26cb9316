# tests/test_permissions.py

"""
Tests for permission checks against the current actor.
"""

import pytest

from skills_enhance.core.exceptions import ValidationError
from skills_enhance.models.permission import (
    PERMISSION_KEYS,
    PermissionSet,
    resolve_permission_key,
)

BASE_PATHS = ["/", "/labs", "/certifications", "/about", "/contact"]


@pytest.mark.parametrize("key", list(PERMISSION_KEYS))
def test_no_actor_has_no_permission(logged_out_store, key):
    assert logged_out_store.has_permission(key) is False


def test_admin_has_manage_users(store):
    assert store.has_permission("manageUsers") is True
    assert store.has_permission("manage_users") is True


def test_basic_user_lacks_manage_users(store):
    store.login("alice@skillsenhance.com", "")
    assert store.has_permission("manageUsers") is False
    assert store.has_permission("read") is True
    assert store.has_permission("supportChat") is True


def test_unknown_permission_key(store):
    with pytest.raises(ValidationError):
        store.has_permission("teleport")


def test_resolve_permission_key():
    assert resolve_permission_key("viewAnalytics") == "view_analytics"
    assert resolve_permission_key("view_analytics") == "view_analytics"
    assert resolve_permission_key("approve") == "approve"


def test_convenience_predicates_for_writer(store):
    store.login("sarah@skillsenhance.com", "")
    assert store.can_create_content() is True
    assert store.can_approve_content() is False
    assert store.can_manage_users() is False
    assert store.can_see_analytics() is False


def test_convenience_predicates_logged_out(logged_out_store):
    assert logged_out_store.can_create_content() is False
    assert logged_out_store.can_manage_users() is False


def test_permission_follows_snapshot_not_role_membership(store):
    """Karan holds admin; after switching to writer the snapshot governs."""
    store.switch_active_role("1", "writer")
    assert store.can_manage_users() is False
    assert store.can_create_content() is True


def test_get_users_by_role(store):
    assert [u.id for u in store.get_users_by_role("writer")] == ["1", "2"]
    assert [u.id for u in store.get_users_by_role("support")] == ["3", "4"]
    assert store.get_users_by_role("ghost") == []


def test_capabilities(store):
    caps = store.evaluator.capabilities()
    assert caps["can_manage_users"] is True
    assert caps["permissions"]["manageRoles"] is True


def test_capabilities_logged_out(logged_out_store):
    caps = logged_out_store.evaluator.capabilities()
    assert caps["permissions"] is None
    assert caps["can_create_content"] is False


def test_navigation_logged_out(logged_out_store):
    items = logged_out_store.evaluator.navigation()
    assert [i["path"] for i in items] == BASE_PATHS


def test_navigation_admin(store):
    paths = [i["path"] for i in store.evaluator.navigation()]
    assert paths == BASE_PATHS + ["/dashboard", "/admin", "/content", "/approval", "/support"]


def test_navigation_approver_with_support_role(store):
    store.login("john@skillsenhance.com", "")
    paths = [i["path"] for i in store.evaluator.navigation()]
    assert paths == BASE_PATHS + ["/dashboard", "/approval", "/support"]


def test_navigation_held_role_unlocks_item(store):
    """Holding the writer role shows Content even while active as admin-less user."""
    store.add_role_to_user("5", "writer")
    store.login("alice@skillsenhance.com", "")
    paths = [i["path"] for i in store.evaluator.navigation()]
    assert "/content" in paths
    assert "/admin" not in paths


def test_navigation_basic_user_sees_support(store):
    """Support chat permission alone shows the Support link."""
    store.login("alice@skillsenhance.com", "")
    paths = [i["path"] for i in store.evaluator.navigation()]
    assert paths == BASE_PATHS + ["/dashboard", "/support"]


def test_navigation_writer(store):
    store.login("sarah@skillsenhance.com", "")
    paths = [i["path"] for i in store.evaluator.navigation()]
    assert paths == BASE_PATHS + ["/dashboard", "/content", "/support"]


def test_navigation_follows_permission_override(store):
    store.update_user_permissions("5", PermissionSet(read=True, manage_users=True, create=True))
    store.login("alice@skillsenhance.com", "")
    paths = [i["path"] for i in store.evaluator.navigation()]
    assert paths == BASE_PATHS + ["/dashboard", "/admin", "/content"]
