"""Navbar configuration service — one process-wide, in-memory config."""

import logging
from typing import Any, Dict, Optional

from skills_enhance.core.exceptions import ValidationError
from skills_enhance.models.navbar import NAVBAR_POSITIONS, NavbarConfig, PagesEnabled

logger = logging.getLogger("skills_enhance")


class NavbarConfigStore:
    """Holds the current navbar config; updates replace it in place."""

    def __init__(self, config: Optional[NavbarConfig] = None):
        self._config = config or NavbarConfig()

    def get(self) -> NavbarConfig:
        return self._config

    def update(
        self,
        position: Optional[Any] = None,
        visible: Optional[bool] = None,
        pages_enabled: Optional[Dict[str, bool]] = None,
        logo_text: Optional[str] = None,
        logo_url: Optional[str] = None,
        set_logo_url: bool = False,
    ) -> NavbarConfig:
        """Apply a partial update.

        ``pages_enabled`` is merged key by key. ``logo_text`` is only applied
        when non-empty. ``logo_url`` is applied, including ``None`` to clear
        it, when ``set_logo_url`` is true.

        Raises:
            ValidationError: Bad position or unknown page key; nothing is
                changed in that case.
        """
        if position is not None and position not in NAVBAR_POSITIONS:
            raise ValidationError("Invalid position value")
        pages = self._config.pagesEnabled.model_dump()
        for key, enabled in (pages_enabled or {}).items():
            if key not in PagesEnabled.model_fields:
                raise ValidationError(f"Unknown page '{key}'")
            pages[key] = enabled

        config = self._config.model_copy(deep=True)
        if position is not None:
            config.position = position
        if visible is not None:
            config.visible = visible
        config.pagesEnabled = PagesEnabled(**pages)
        if logo_text:
            config.logoText = logo_text
        if set_logo_url:
            config.logoUrl = logo_url

        self._config = config
        logger.info("Navbar config updated: position=%s visible=%s", config.position, config.visible)
        return config
