"""Catalog schemas - restaurants and menu items derived from upstream."""

from pydantic import BaseModel, Field

from foodcourt_schemas.base import CamelModel


class Coordinates(BaseModel):
    """A geographic point used to localize upstream queries."""

    lat: float
    lng: float


# Fixed reference point used when a caller gives no coordinates (Delhi)
DEFAULT_COORDINATES = Coordinates(lat=28.7040592, lng=77.10249019999999)


class Restaurant(CamelModel):
    """
    A restaurant in a listing.

    Transient: built per request from the upstream payload, never stored.
    """

    id: str
    name: str = ""
    avg_rating: float = 0.0
    cuisines: list[str] = Field(default_factory=list)
    area_name: str = ""
    cost_for_two: str = Field(default="", description='e.g. "₹400 for two"')
    sla_string: str = Field(default="", description='e.g. "30-35 mins"')
    cloudinary_image_id: str = ""
    veg: bool = False


class MenuItem(CamelModel):
    """A dish on a restaurant menu, priced in major currency units."""

    id: str = ""
    name: str = ""
    description: str = ""
    price: float = 0.0
    is_veg: bool = False
