"""
Client-side listing logic for restaurant results.

The server filters by search text, rating and cuisine. Everything here runs
on the result set it returned: de-duplication, the secondary filters that
need client state (vegetarian only, favorites only), sorting and the
incremental reveal used for infinite scroll.
"""

import re
from collections.abc import Iterable, Sequence
from enum import Enum

from foodcourt_schemas import Restaurant

PAGE_SIZE = 12

# Sort keys for restaurants with no usable value
UNKNOWN_DELIVERY_MINUTES = 999
UNKNOWN_COST = 0

_FIRST_NUMBER = re.compile(r"\d+")
_NON_DIGITS = re.compile(r"[^0-9]")


class SortOption(str, Enum):
    RELEVANCE = "relevance"
    RATING = "rating"
    DELIVERY = "delivery"
    COST_LOW_HIGH = "costLowHigh"
    COST_HIGH_LOW = "costHighLow"


def dedupe_by_id(restaurants: Iterable[Restaurant]) -> list[Restaurant]:
    """
    Drop repeated ids.

    A repeated id keeps its first position but takes the last entry seen.
    """
    by_id: dict[str, Restaurant] = {}
    for restaurant in restaurants:
        by_id[restaurant.id] = restaurant
    return list(by_id.values())


def parse_delivery_time(sla_string: str) -> int:
    """Minutes from "30-35 mins" (the first number); unknown sorts last."""
    match = _FIRST_NUMBER.search(sla_string or "")
    if not match:
        return UNKNOWN_DELIVERY_MINUTES
    return int(match.group()) or UNKNOWN_DELIVERY_MINUTES


def parse_cost_for_two(cost_for_two: str) -> int:
    """Amount from "₹400 for two" (all digits joined); unknown is 0."""
    digits = _NON_DIGITS.sub("", cost_for_two or "")
    return int(digits) if digits else UNKNOWN_COST


def apply_client_filters(
    restaurants: Iterable[Restaurant],
    only_veg: bool = False,
    favorites_only: bool = False,
    favorite_ids: Iterable[str] = (),
) -> list[Restaurant]:
    favorites = set(favorite_ids)
    return [
        r
        for r in restaurants
        if (not only_veg or r.veg) and (not favorites_only or r.id in favorites)
    ]


def sort_restaurants(
    restaurants: Iterable[Restaurant], sort_by: SortOption | str
) -> list[Restaurant]:
    """
    Order restaurants by a sort option.

    All sorts are stable. Relevance keeps the server's order; an unknown
    option behaves like relevance.
    """
    try:
        option = SortOption(sort_by)
    except ValueError:
        option = SortOption.RELEVANCE

    items = list(restaurants)
    if option is SortOption.RATING:
        return sorted(items, key=lambda r: r.avg_rating or 0, reverse=True)
    if option is SortOption.DELIVERY:
        return sorted(items, key=lambda r: parse_delivery_time(r.sla_string))
    if option is SortOption.COST_LOW_HIGH:
        return sorted(items, key=lambda r: parse_cost_for_two(r.cost_for_two))
    if option is SortOption.COST_HIGH_LOW:
        return sorted(
            items, key=lambda r: parse_cost_for_two(r.cost_for_two), reverse=True
        )
    return items


class RevealPager:
    """
    Incremental reveal for infinite scroll.

    Shows one page at first and one more page each time the scroll
    sentinel becomes visible, capped at the result count. A new result set
    starts over at one page.
    """

    def __init__(self, page_size: int = PAGE_SIZE) -> None:
        self.page_size = page_size
        self.visible_count = page_size
        self.total = 0
        self.shown_from = 0

    def reset(self, total: int) -> None:
        self.total = total
        self.shown_from = total
        self.visible_count = self.page_size

    def sentinel_visible(self) -> None:
        self.visible_count = min(self.visible_count + self.page_size, self.total)

    @property
    def has_more(self) -> bool:
        """Whether the last sequence passed to visible() has hidden entries."""
        return self.visible_count < self.shown_from

    def visible(self, items: Sequence[Restaurant]) -> list[Restaurant]:
        self.shown_from = len(items)
        return list(items[: self.visible_count])
