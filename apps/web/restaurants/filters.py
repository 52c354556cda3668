"""
Server-side restaurant filtering.

The listing endpoint narrows the upstream result with three conjunctive
filters. Secondary filters and sorting (veg-only, favorites-only, rating,
delivery time, cost) stay on the client so this contract stays small.
"""

import math
from collections.abc import Iterable, Mapping

from pydantic import BaseModel

from foodcourt_schemas import Restaurant


def parse_float(value: str | None) -> float | None:
    """Parse a query-string number; anything unparseable is None."""
    if value is None or not value.strip():
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


class RestaurantQuery(BaseModel):
    """Query parameters of GET /api/restaurants."""

    search: str = ""
    min_rating: float = 0.0
    cuisine: str = ""
    lat: float | None = None
    lng: float | None = None

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "RestaurantQuery":
        """Build from request.GET; bad numbers fall back to their defaults."""
        return cls(
            search=params.get("search", "").strip(),
            min_rating=parse_float(params.get("minRating")) or 0.0,
            cuisine=params.get("cuisine", "").strip(),
            lat=parse_float(params.get("lat")),
            lng=parse_float(params.get("lng")),
        )


def matches_search(restaurant: Restaurant, search: str) -> bool:
    """Case-insensitive substring of name or any cuisine; empty matches all."""
    if not search:
        return True
    needle = search.lower()
    return needle in restaurant.name.lower() or any(
        needle in cuisine.lower() for cuisine in restaurant.cuisines
    )


def matches_rating(restaurant: Restaurant, min_rating: float) -> bool:
    return restaurant.avg_rating >= min_rating


def matches_cuisine(restaurant: Restaurant, cuisine: str) -> bool:
    """Case-insensitive exact cuisine match; empty matches all."""
    if not cuisine:
        return True
    wanted = cuisine.lower()
    return any(c.lower() == wanted for c in restaurant.cuisines)


def filter_restaurants(
    restaurants: Iterable[Restaurant], query: RestaurantQuery
) -> list[Restaurant]:
    """Apply search, then rating threshold, then cuisine. Order is preserved."""
    return [
        r
        for r in restaurants
        if matches_search(r, query.search)
        and matches_rating(r, query.min_rating)
        and matches_cuisine(r, query.cuisine)
    ]
