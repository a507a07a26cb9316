"""Auth API router — login, signup, logout, and the current actor."""

from typing import List

from fastapi import APIRouter, Depends

from skills_enhance.core.security import get_current_actor
from skills_enhance.models.user import User
from skills_enhance.schemas.schemas import (
    ActiveRoleRequest, CapabilitiesOut, LoginRequest, MessageResponse,
    NavItem, SignupRequest, UserOut,
)
from skills_enhance.services.auth_store import AuthStore
from skills_enhance.state.session import get_store

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=UserOut)
async def login(body: LoginRequest, store: AuthStore = Depends(get_store)):
    """Make the user with this email the current actor."""
    return store.login(body.email, body.password)


@router.post("/signup", response_model=UserOut, status_code=201)
async def signup(body: SignupRequest, store: AuthStore = Depends(get_store)):
    """Register a basic user and log them in."""
    return store.signup(body.name, body.email, body.password)


@router.post("/logout", response_model=MessageResponse)
async def logout(store: AuthStore = Depends(get_store)):
    store.logout()
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserOut)
async def get_me(user: User = Depends(get_current_actor)):
    """Get the current actor."""
    return user


@router.put("/me/active-role", response_model=UserOut)
async def switch_my_role(
    body: ActiveRoleRequest,
    store: AuthStore = Depends(get_store),
    user: User = Depends(get_current_actor),
):
    """Switch the current actor to another role they hold."""
    return store.switch_active_role(user.id, body.role_id)


@router.get("/me/capabilities", response_model=CapabilitiesOut)
async def get_capabilities(
    store: AuthStore = Depends(get_store),
    user: User = Depends(get_current_actor),
):
    return store.evaluator.capabilities()


@router.get("/me/navigation", response_model=List[NavItem])
async def get_navigation(store: AuthStore = Depends(get_store)):
    """Header links for whoever is logged in (public links when nobody is)."""
    return store.evaluator.navigation()
