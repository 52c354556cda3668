"""
Extraction of restaurants and menu items from upstream JSON.

The upstream payloads nest their results at depths that differ between
response variants. Each lookup here is an ordered list of strategies; the
first one that matches wins and exhausting them yields an empty result.
Everything is a pure function over the decoded JSON document, so shape
drift degrades to fewer results and never raises.
"""

import math
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from foodcourt_schemas import MenuItem, Restaurant

Strategy = Callable[[Any], Any | None]

# Per-card locations of the restaurant list in a listing response
RESTAURANT_LIST_PATHS: tuple[tuple[str, ...], ...] = (
    ("card", "card", "gridElements", "infoWithStyle", "restaurants"),
    ("card", "gridElements", "infoWithStyle", "restaurants"),
)

# Location of the item-bearing cards in a menu response
REGULAR_GROUP_PATH = ("groupedCard", "cardGroupMap", "REGULAR", "cards")

# Per-card locations of the card body holding itemCards
MENU_CARD_PATHS: tuple[tuple[str, ...], ...] = (
    ("card", "card"),
    ("card",),
)

VEG_CLASSIFIER = "VEG"


# =============================================================================
# Generic helpers
# =============================================================================


def dig(node: Any, *path: str) -> Any | None:
    """Walk nested dicts along `path`; None as soon as a step is missing."""
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
        if node is None:
            return None
    return node


def at_path(*path: str, expect: type = object) -> Strategy:
    """Strategy that matches the value at `path` when it has type `expect`."""

    def strategy(node: Any) -> Any | None:
        found = dig(node, *path)
        return found if isinstance(found, expect) else None

    return strategy


def first_match(node: Any, strategies: Iterable[Strategy]) -> Any | None:
    """Try strategies in order; return the first non-None result."""
    for strategy in strategies:
        found = strategy(node)
        if found is not None:
            return found
    return None


def as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def to_number(value: Any, default: float = 0.0) -> float:
    """Coerce numbers and numeric strings; anything else is `default`."""
    if isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


# =============================================================================
# Restaurants
# =============================================================================

_restaurant_list_strategies: Sequence[Strategy] = tuple(
    at_path(*path, expect=list) for path in RESTAURANT_LIST_PATHS
)


def extract_restaurants(payload: Any) -> list[Restaurant]:
    """
    Flatten a listing response into Restaurant records.

    Every card of `data.cards` is probed; results of all cards are
    concatenated in order.
    """
    restaurants: list[Restaurant] = []
    for card in as_list(dig(payload, "data", "cards")):
        entries = first_match(card, _restaurant_list_strategies) or []
        for entry in entries:
            restaurant = parse_restaurant(entry)
            if restaurant is not None:
                restaurants.append(restaurant)
    return restaurants


def parse_restaurant(entry: Any) -> Restaurant | None:
    """Convert one listing entry; entries without an info object are skipped."""
    info = dig(entry, "info")
    if not isinstance(info, dict):
        return None

    cuisines = [to_text(c) for c in as_list(info.get("cuisines"))]

    return Restaurant(
        id=to_text(info.get("id")),
        name=to_text(info.get("name")),
        avg_rating=to_number(info.get("avgRating")),
        cuisines=cuisines,
        area_name=to_text(info.get("areaName")),
        cost_for_two=to_text(info.get("costForTwo")),
        sla_string=to_text(dig(info, "sla", "slaString")),
        cloudinary_image_id=to_text(info.get("cloudinaryImageId")),
        veg=info.get("veg") is True,
    )


# =============================================================================
# Menus
# =============================================================================

_menu_card_strategies: Sequence[Strategy] = tuple(
    at_path(*path, expect=dict) for path in MENU_CARD_PATHS
)


def find_regular_cards(payload: Any) -> list[Any]:
    """Locate the REGULAR card group of a menu response, or []."""
    for card in as_list(dig(payload, "data", "cards")):
        if isinstance(card, dict) and card.get("groupedCard"):
            return as_list(dig(card, *REGULAR_GROUP_PATH))
    return []


def extract_menu_items(payload: Any) -> list[MenuItem]:
    """Flatten every item card beneath the REGULAR group into MenuItems."""
    items: list[MenuItem] = []
    for group_card in find_regular_cards(payload):
        body = first_match(group_card, _menu_card_strategies) or {}
        for item_card in as_list(body.get("itemCards")):
            info = dig(item_card, "card", "info")
            if isinstance(info, dict) and info:
                items.append(parse_menu_item(info))
    return items


def parse_menu_item(info: dict[str, Any]) -> MenuItem:
    """Convert one item info object; prices arrive in minor currency units."""
    raw_price = info.get("price")
    if raw_price is None:
        raw_price = info.get("defaultPrice")

    return MenuItem(
        id=to_text(info.get("id")),
        name=to_text(info.get("name")),
        description=to_text(info.get("description")),
        price=to_number(raw_price) / 100,
        is_veg=is_vegetarian(info),
    )


def is_vegetarian(info: dict[str, Any]) -> bool:
    """Any of the three upstream veg signals marks the item vegetarian."""
    return (
        info.get("isVeg") == 1
        or dig(info, "itemAttribute", "vegClassifier") == VEG_CLASSIFIER
        or info.get("veg") is True
    )
