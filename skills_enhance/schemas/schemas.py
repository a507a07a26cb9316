"""Pydantic schemas for API request/response serialization."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from skills_enhance.models.permission import PermissionSet


# ---- Auth ----
class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = ""

class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = ""

class ActiveRoleRequest(BaseModel):
    role_id: str = Field(..., min_length=1)


# ---- Role ----
class RoleCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    permissions: PermissionSet
    parent_role_id: Optional[str] = None

class RoleUpdate(RoleCreate):
    pass

class RoleOut(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    permissions: PermissionSet
    is_predefined: bool
    parent_role_id: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ---- User ----
class UserOut(BaseModel):
    id: str
    name: str
    email: str
    roles: List[str]
    active_role: str
    permissions: PermissionSet
    avatar: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class UserRoleRequest(BaseModel):
    role_id: str = Field(..., min_length=1)

class UserStatusRequest(BaseModel):
    is_active: bool


# ---- Current actor ----
class CapabilitiesOut(BaseModel):
    can_create_content: bool
    can_approve_content: bool
    can_manage_users: bool
    can_see_analytics: bool
    permissions: Optional[Dict[str, bool]] = None

class NavItem(BaseModel):
    label: str
    path: str


# ---- Navbar ----
class NavbarConfigUpdate(BaseModel):
    position: Optional[Any] = None
    visible: Optional[bool] = None
    pagesEnabled: Optional[Dict[str, bool]] = None
    logoText: Optional[str] = None
    logoUrl: Optional[str] = None


# ---- Audit ----
class AuditLogOut(BaseModel):
    id: int
    actor_id: Optional[str] = None
    actor_email: Optional[str] = None
    action: str
    resource_type: str
    resource_id: Optional[str] = None
    old_value: Optional[Any] = None
    new_value: Optional[Any] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ---- Generic ----
class MessageResponse(BaseModel):
    message: str
    detail: Optional[Any] = None
