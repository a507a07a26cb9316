"""In-memory store factory and FastAPI dependency injection."""

import logging
from typing import Optional

from fastapi import Request

from skills_enhance.core.config import Settings, settings as default_settings
from skills_enhance.services.audit_service import AuditService
from skills_enhance.services.auth_store import AuthStore
from skills_enhance.services.navbar_service import NavbarConfigStore
from skills_enhance.services.role_registry import RoleRegistry
from skills_enhance.services.user_directory import UserDirectory
from skills_enhance.state.seeds.seed_roles import seed_roles
from skills_enhance.state.seeds.seed_users import seed_users

logger = logging.getLogger("skills_enhance")


def build_store(settings: Optional[Settings] = None) -> AuthStore:
    """Build a fresh store: predefined roles, optional demo users and actor."""
    settings = settings or default_settings
    registry = RoleRegistry(seed_roles())
    directory = UserDirectory(registry, seed_users() if settings.SEED_DEMO_USERS else [])

    if settings.DEFAULT_ACTOR_EMAIL:
        actor = directory.find_by_email(settings.DEFAULT_ACTOR_EMAIL)
        if actor is not None:
            directory.set_current_user(actor.id)
        else:
            logger.warning("Default actor %s not in directory", settings.DEFAULT_ACTOR_EMAIL)

    return AuthStore(registry, directory, AuditService())


def get_store(request: Request) -> AuthStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store


def get_navbar_store(request: Request) -> NavbarConfigStore:
    return request.app.state.navbar
