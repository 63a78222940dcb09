"""
Store data schemas: every admin-editable field of the storefront.
Wire names are camelCase; Python attributes are snake_case.
"""
from typing import Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt
from pydantic.alias_generators import to_camel

OfferType = Literal["none", "2x1_milky", "2x1_water", "2x1_all"]
SectionOrder = Literal["milky-first", "water-first"]


class CamelModel(BaseModel):
    """Base schema serialised with camelCase aliases"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoreSettings(CamelModel):
    """Store hours and delivery options"""
    is_open: bool = True
    delivery_available: bool = True
    pickup_available: bool = True


class SocialLinks(CamelModel):
    instagram: str = ""
    tiktok: str = ""
    whatsapp: str = "5491155146230"


class CustomColors(CamelModel):
    """Legacy single-theme palette, still stored and returned for older clients"""
    primary: str = "#78716C"
    secondary: str = "#EC4899"
    background: str = "#F5F5F4"
    card_bg: str = "#FFFFFF"
    text: str = "#1C1917"
    accent: str = "#F97316"


class ElementColors(CamelModel):
    """Colors for one theme"""
    navbar_color: str
    navbar_opacity: float = Field(..., ge=0, le=1)
    background: str
    card_bg: str
    text: str
    accent: str


def _default_light() -> ElementColors:
    return ElementColors(
        navbar_color="#FFB9D2",
        navbar_opacity=0.80,
        background="#F5F5F7",
        card_bg="#FFFFFF",
        text="#1C1917",
        accent="#25D366",
    )


def _default_dark() -> ElementColors:
    return ElementColors(
        navbar_color="#580C28",
        navbar_opacity=0.85,
        background="#1C1917",
        card_bg="#292524",
        text="#FAFAF9",
        accent="#25D366",
    )


class ThemeColors(CamelModel):
    light: ElementColors = Field(default_factory=_default_light)
    dark: ElementColors = Field(default_factory=_default_dark)


class StoreData(CamelModel):
    """
    Full admin-editable aggregate.

    Missing fields fall back to the storefront defaults, so a partially
    populated store always validates into a complete StoreData.
    """
    stock: Dict[str, bool] = Field(default_factory=dict)
    prices: Dict[str, NonNegativeInt] = Field(default_factory=dict)
    settings: StoreSettings = Field(default_factory=StoreSettings)
    offer: OfferType = "none"
    section_order: SectionOrder = "milky-first"
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    custom_colors: CustomColors = Field(default_factory=CustomColors)
    theme_colors: ThemeColors = Field(default_factory=ThemeColors)


class StoreDataUpdate(CamelModel):
    """Partial or full save request. Only the fields sent are written."""
    stock: Optional[Dict[str, bool]] = None
    prices: Optional[Dict[str, NonNegativeInt]] = None
    settings: Optional[StoreSettings] = None
    offer: Optional[OfferType] = None
    section_order: Optional[SectionOrder] = None
    social_links: Optional[SocialLinks] = None
    custom_colors: Optional[CustomColors] = None
    theme_colors: Optional[ThemeColors] = None


class SaveResponse(BaseModel):
    success: Optional[bool] = None
    error: Optional[str] = None
