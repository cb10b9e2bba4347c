"""
Pydantic models for business listings.

``BusinessBase`` holds the fields a listing owner supplies;
``BusinessCreate`` validates them for new listings (the same checks the
mobile "add business" form ran) and ``Business`` is the stored record
returned by the services and the API.  ``distance`` is transient: it is
filled in by the directory service once a user location is known and is
never written to the database.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.localization import DEFAULT_LANGUAGE, Language, localize


class BusinessCategory(str, Enum):
    food = "food"
    retail = "retail"
    services = "services"
    entertainment = "entertainment"
    other = "other"

    @classmethod
    def parse(cls, value: Optional[str]) -> "BusinessCategory":
        """Total conversion from a stored string; unknown values become ``other``."""
        try:
            return cls(value)
        except ValueError:
            return cls.other

    @property
    def icon(self) -> str:
        return CATEGORY_ICONS[self]

    def localized_name(self, language: Language = DEFAULT_LANGUAGE) -> str:
        return localize(f"category_{self.value}", language)


CATEGORY_ICONS: Dict[BusinessCategory, str] = {
    BusinessCategory.food: "fork.knife",
    BusinessCategory.retail: "cart",
    BusinessCategory.services: "wrench.and.screwdriver",
    BusinessCategory.entertainment: "star",
    BusinessCategory.other: "ellipsis",
}

# Image substituted when a listing is saved without any images.
DEFAULT_IMAGES: Dict[BusinessCategory, str] = {
    BusinessCategory.food: "comidas2",
    BusinessCategory.retail: "tiendita1",
    BusinessCategory.services: "tacos1",
    BusinessCategory.entertainment: "iguana1",
    BusinessCategory.other: "antojitos1",
}


def default_image_for(category: BusinessCategory) -> str:
    """Return the default image name for ``category``."""
    return DEFAULT_IMAGES[category]


class BusinessFilter(str, Enum):
    """Sort orders offered on the explore screen."""

    nearest = "nearest"
    top_rated = "top_rated"
    newest = "newest"

    @property
    def icon(self) -> str:
        return {
            BusinessFilter.nearest: "location.fill",
            BusinessFilter.top_rated: "star.fill",
            BusinessFilter.newest: "clock.fill",
        }[self]

    def title(self, language: Language = DEFAULT_LANGUAGE) -> str:
        return localize(f"filter_{self.value}", language)


class Coordinate(BaseModel):
    latitude: float = Field(..., ge=-90, le=90, examples=[25.6674])
    longitude: float = Field(..., ge=-180, le=180, examples=[-100.3089])


class BusinessBase(BaseModel):
    name: str = Field(..., examples=["El Rey del Cabrito"])
    description: str = Field("", examples=["Restaurante tradicional regiomontano"])
    category: BusinessCategory = Field(BusinessCategory.other, examples=["food"])
    location: Coordinate
    address: str = Field("", examples=["José María Morelos 937, Centro, Monterrey"])
    phone: Optional[str] = Field(None, examples=["81 8343 3074"])
    email: Optional[str] = Field(None, examples=["contacto@reydelcabrito.com"])
    website: Optional[str] = Field(None, examples=["www.reydelcabrito.com"])
    social_media: Dict[str, str] = Field(default_factory=dict, examples=[{"instagram": "@reydelcabrito"}])
    images: List[str] = Field(default_factory=list, examples=[["cabrito1", "cabrito2"]])


class BusinessCreate(BusinessBase):
    """Schema for creating (or fully replacing) a listing.

    Name, description and phone are required and may not be blank.
    Blank e-mail and website values are stored as missing.
    """

    phone: str = Field(..., examples=["81 8343 3074"])

    @field_validator("name", "description", "phone")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError(localize("empty_fields", Language.english))
        return v

    @field_validator("email", "website")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


class BusinessUpdate(BusinessCreate):
    """Schema for replacing a listing; every field is rewritten."""


class Business(BusinessBase):
    """A stored listing."""

    id: str
    owner_id: str = ""
    rating: float = 0.0
    review_count: int = Field(0, ge=0)
    created_at: datetime
    updated_at: datetime
    distance: Optional[float] = Field(None, description="Meters from the last known user location")

    model_config = {
        "from_attributes": True,
    }

    @property
    def formatted_distance(self) -> str:
        from ..core.geo import format_distance

        return format_distance(self.distance)
