"""Navbar config API router."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from skills_enhance.core.exceptions import ValidationError
from skills_enhance.models.navbar import NavbarConfig
from skills_enhance.schemas.schemas import NavbarConfigUpdate
from skills_enhance.services.auth_store import AuthStore
from skills_enhance.services.navbar_service import NavbarConfigStore
from skills_enhance.state.session import get_navbar_store, get_store

router = APIRouter(prefix="/navbar-config", tags=["navbar"])


@router.get("", response_model=NavbarConfig, response_model_exclude_none=True)
async def get_navbar_config(navbar: NavbarConfigStore = Depends(get_navbar_store)):
    """Retrieve the current navbar configuration."""
    return navbar.get()


@router.put("")
async def update_navbar_config(
    body: NavbarConfigUpdate,
    navbar: NavbarConfigStore = Depends(get_navbar_store),
    store: AuthStore = Depends(get_store),
):
    """Partially update the navbar configuration."""
    old_value = navbar.get().model_dump(exclude_none=True)
    try:
        config = navbar.update(
            position=body.position,
            visible=body.visible,
            pages_enabled=body.pagesEnabled,
            logo_text=body.logoText,
            logo_url=body.logoUrl,
            set_logo_url="logoUrl" in body.model_fields_set,
        )
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": e.message})

    new_value = config.model_dump(exclude_none=True)
    store.audit.log(
        store.current_user, "navbar.updated", "navbar",
        old_value=old_value, new_value=new_value,
    )
    return {"success": True, "config": new_value}
