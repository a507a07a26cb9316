"""FastAPI main application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from skills_enhance.core.config import Settings, settings as default_settings
from skills_enhance.core.exceptions import SkillsEnhanceError
from skills_enhance.core.middleware import setup_middleware
from skills_enhance.services.navbar_service import NavbarConfigStore
from skills_enhance.state.session import build_store

from skills_enhance.api.auth import router as auth_router
from skills_enhance.api.roles import router as roles_router
from skills_enhance.api.admin import router as admin_router
from skills_enhance.api.navbar import router as navbar_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else default_settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("skills_enhance")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    store = app.state.store
    logger.info(
        "Starting %s with %d roles and %d users",
        app.title, len(store.roles), len(store.users),
    )
    actor = store.current_user
    logger.info("Current actor: %s", actor.email if actor else "none")

    yield

    store.logout()
    logger.info("Shutting down %s", app.title)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own, freshly seeded state."""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.APP_NAME,
        description="Role and permission service for the Skills Enhance platform",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.store = build_store(settings)
    app.state.navbar = NavbarConfigStore()

    setup_middleware(app, settings.CORS_ORIGINS)

    @app.exception_handler(SkillsEnhanceError)
    async def skills_exception_handler(request: Request, exc: SkillsEnhanceError):
        if exc.status_code >= 403:
            logger.warning("%s at %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
        )

    app.include_router(auth_router, prefix="/api")
    app.include_router(roles_router, prefix="/api")
    app.include_router(admin_router, prefix="/api")
    app.include_router(navbar_router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "name": settings.APP_NAME,
            "version": "0.1.0",
            "docs": "/docs",
        }

    @app.get("/api/health")
    async def health():
        """Quick health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
