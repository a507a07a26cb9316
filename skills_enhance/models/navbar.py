"""Navbar configuration model."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

NAVBAR_POSITIONS = ("top", "side")


class PagesEnabled(BaseModel):
    """Which optional marketing pages the navbar links to."""

    freWebinars: bool = True
    liveEvents: bool = True
    instructorResources: bool = True
    instructorLedTraining: bool = True
    onDemandVideo: bool = True
    careerAssistance: bool = True
    examVoucher: bool = True


class NavbarConfig(BaseModel):
    position: Literal["top", "side"] = "top"
    visible: bool = True
    pagesEnabled: PagesEnabled = Field(default_factory=PagesEnabled)
    logoText: str = "Skills Enhance"
    logoUrl: Optional[str] = None
