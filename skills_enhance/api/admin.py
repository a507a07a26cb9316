"""Admin API router — user role management, stats and audit."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from skills_enhance.core.security import require_manage_users, require_view_analytics
from skills_enhance.models.permission import PermissionSet
from skills_enhance.models.user import User
from skills_enhance.schemas.schemas import (
    ActiveRoleRequest, AuditLogOut, UserOut, UserRoleRequest, UserStatusRequest,
)
from skills_enhance.services.auth_store import AuthStore
from skills_enhance.state.session import get_store

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=List[UserOut])
async def admin_list_users(
    store: AuthStore = Depends(get_store),
    actor: User = Depends(require_manage_users),
):
    """List all users (manageUsers only)."""
    return store.all_users


@router.get("/users/{user_id}", response_model=UserOut)
async def admin_get_user(
    user_id: str,
    store: AuthStore = Depends(get_store),
    actor: User = Depends(require_manage_users),
):
    return store.users.get_user(user_id)


@router.put("/users/{user_id}/role", response_model=UserOut)
async def admin_replace_role(
    user_id: str,
    body: UserRoleRequest,
    store: AuthStore = Depends(get_store),
    actor: User = Depends(require_manage_users),
):
    """Replace every role the user holds with a single one."""
    return store.update_user_role(user_id, body.role_id)


@router.post("/users/{user_id}/roles", response_model=UserOut)
async def admin_add_role(
    user_id: str,
    body: UserRoleRequest,
    store: AuthStore = Depends(get_store),
    actor: User = Depends(require_manage_users),
):
    return store.add_role_to_user(user_id, body.role_id)


@router.delete("/users/{user_id}/roles/{role_id}", response_model=UserOut)
async def admin_remove_role(
    user_id: str,
    role_id: str,
    store: AuthStore = Depends(get_store),
    actor: User = Depends(require_manage_users),
):
    return store.remove_role_from_user(user_id, role_id)


@router.put("/users/{user_id}/active-role", response_model=UserOut)
async def admin_switch_role(
    user_id: str,
    body: ActiveRoleRequest,
    store: AuthStore = Depends(get_store),
    actor: User = Depends(require_manage_users),
):
    return store.switch_active_role(user_id, body.role_id)


@router.put("/users/{user_id}/permissions", response_model=UserOut)
async def admin_override_permissions(
    user_id: str,
    body: PermissionSet,
    store: AuthStore = Depends(get_store),
    actor: User = Depends(require_manage_users),
):
    """Overwrite a user's permission snapshot, bypassing their role."""
    return store.update_user_permissions(user_id, body)


@router.put("/users/{user_id}/status", response_model=UserOut)
async def admin_set_status(
    user_id: str,
    body: UserStatusRequest,
    store: AuthStore = Depends(get_store),
    actor: User = Depends(require_manage_users),
):
    return store.set_user_active(user_id, body.is_active)


@router.get("/stats")
async def system_stats(
    store: AuthStore = Depends(get_store),
    actor: User = Depends(require_view_analytics),
):
    """User and role counts for the dashboard."""
    return store.stats()


@router.get("/audit")
async def get_audit_logs(
    action: Optional[str] = Query(None),
    resource_type: Optional[str] = Query(None),
    actor_id: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
    store: AuthStore = Depends(get_store),
    actor: User = Depends(require_manage_users),
):
    """Query the audit trail (manageUsers only)."""
    result = store.audit.query_logs(actor_id, action, resource_type, page, page_size)
    return {
        "logs": [AuditLogOut.model_validate(log) for log in result["logs"]],
        "total": result["total"],
        "page": result["page"],
    }
