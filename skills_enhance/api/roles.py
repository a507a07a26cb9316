"""Roles API router — registry reads and custom role management."""

from typing import Dict, List

from fastapi import APIRouter, Depends

from skills_enhance.core.exceptions import not_found
from skills_enhance.core.security import get_current_actor, require_manage_roles
from skills_enhance.models.user import User
from skills_enhance.schemas.schemas import (
    MessageResponse, RoleCreate, RoleOut, RoleUpdate, UserOut,
)
from skills_enhance.services.auth_store import AuthStore
from skills_enhance.state.session import get_store

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get("/", response_model=List[RoleOut])
async def list_roles(
    store: AuthStore = Depends(get_store),
    user: User = Depends(get_current_actor),
):
    """List predefined and custom roles in registry order."""
    return store.custom_roles


@router.get("/hierarchy", response_model=Dict[str, List[RoleOut]])
async def role_hierarchy(
    store: AuthStore = Depends(get_store),
    user: User = Depends(get_current_actor),
):
    """Roles grouped by parent id ("root" for top-level roles)."""
    return store.get_role_hierarchy()


@router.get("/{role_id}", response_model=RoleOut)
async def get_role(
    role_id: str,
    store: AuthStore = Depends(get_store),
    user: User = Depends(get_current_actor),
):
    role = store.get_role_details(role_id)
    if role is None:
        raise not_found(f"Role '{role_id}' not found")
    return role


@router.get("/{role_id}/users", response_model=List[UserOut])
async def users_by_role(
    role_id: str,
    store: AuthStore = Depends(get_store),
    user: User = Depends(get_current_actor),
):
    return store.get_users_by_role(role_id)


@router.post("/", response_model=RoleOut, status_code=201)
async def create_role(
    body: RoleCreate,
    store: AuthStore = Depends(get_store),
    user: User = Depends(require_manage_roles),
):
    """Create a custom role."""
    return store.add_custom_role(
        body.name, body.description, body.permissions, body.parent_role_id
    )


@router.put("/{role_id}", response_model=RoleOut)
async def update_role(
    role_id: str,
    body: RoleUpdate,
    store: AuthStore = Depends(get_store),
    user: User = Depends(require_manage_roles),
):
    """Edit a custom role; users active on it get the new permissions."""
    return store.edit_custom_role(
        role_id, body.name, body.description, body.permissions, body.parent_role_id
    )


@router.delete("/{role_id}", response_model=MessageResponse)
async def delete_role(
    role_id: str,
    store: AuthStore = Depends(get_store),
    user: User = Depends(require_manage_roles),
):
    """Delete a custom role nobody holds."""
    role = store.delete_custom_role(role_id)
    return MessageResponse(message=f"Role '{role.name}' deleted")
