"""Swiggy adapter - restaurant listings and menus from the third-party API."""

import logging
from typing import Any

import httpx
from foodcourt_schemas import DEFAULT_COORDINATES, MenuItem, Restaurant

from apps.web.upstream.exceptions import UpstreamError
from apps.web.upstream.extractors import (
    dig,
    extract_menu_items,
    extract_restaurants,
    find_regular_cards,
)

logger = logging.getLogger(__name__)


class SwiggyAdapter:
    """
    Adapter for the public Swiggy listing and menu endpoints.

    Provides:
    - Restaurant listings near a point
    - Flattened menus for one restaurant

    The source is outside our control, so malformed or drifted payloads
    degrade to empty results. Transport failures, non-2xx statuses and
    undecodable bodies raise UpstreamError. There is no retry.
    """

    BASE_URL = "https://www.swiggy.com/dapi"

    # The API serves browsers only
    USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 Chrome/120 Safari/537.36"
    )

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            base_url: Override for the API root (settings.UPSTREAM_BASE_URL).
            http_client: Optional HTTP client for dependency injection (testing).
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=30.0)
        self._owns_client = http_client is None

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            await self._client.aclose()

    @property
    def restaurants_url(self) -> str:
        return f"{self.base_url}/restaurants/list/v5"

    @property
    def menu_url(self) -> str:
        return f"{self.base_url}/menu/pl"

    # =========================================================================
    # HTTP Helpers
    # =========================================================================

    async def _get_json(self, url: str, params: dict[str, Any]) -> Any:
        """
        GET a URL and decode its JSON body.

        Raises:
            UpstreamError: On transport errors, error statuses or bad JSON.
        """
        try:
            response = await self._client.get(
                url, params=params, headers={"User-Agent": self.USER_AGENT}
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"Upstream returned {e.response.status_code} for {url}",
                status_code=e.response.status_code,
                response_body=e.response.text[:500],
            ) from e
        except httpx.RequestError as e:
            raise UpstreamError(f"Upstream request failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"Upstream sent an undecodable body for {url}",
                status_code=response.status_code,
                response_body=response.text[:500],
            ) from e

    # =========================================================================
    # Restaurants
    # =========================================================================

    async def get_restaurants(
        self, lat: float | None = None, lng: float | None = None
    ) -> list[Restaurant]:
        """
        List restaurants near a point.

        Args:
            lat: Latitude (defaults to the reference point).
            lng: Longitude (defaults to the reference point).

        Returns:
            Flat list of restaurants, possibly empty.

        Raises:
            UpstreamError: If the request itself fails.
        """
        lat = DEFAULT_COORDINATES.lat if lat is None else lat
        lng = DEFAULT_COORDINATES.lng if lng is None else lng

        payload = await self._get_json(
            self.restaurants_url,
            {"lat": lat, "lng": lng, "is-seo-homepage-enabled": "true"},
        )

        if not isinstance(dig(payload, "data", "cards"), list):
            logger.warning("Restaurant listing has no cards (lat=%s, lng=%s)", lat, lng)
            return []

        return extract_restaurants(payload)

    # =========================================================================
    # Menus
    # =========================================================================

    async def get_menu(
        self, restaurant_id: str, lat: float | None = None, lng: float | None = None
    ) -> list[MenuItem]:
        """
        Get the flattened menu of one restaurant.

        Args:
            restaurant_id: Upstream restaurant ID.
            lat: Latitude (defaults to the reference point).
            lng: Longitude (defaults to the reference point).

        Returns:
            Flat list of menu items; empty when the REGULAR group is missing,
            in which case callers show sample dishes instead.

        Raises:
            UpstreamError: If the request itself fails.
        """
        lat = DEFAULT_COORDINATES.lat if lat is None else lat
        lng = DEFAULT_COORDINATES.lng if lng is None else lng

        payload = await self._get_json(
            self.menu_url,
            {
                "page-type": "REGULAR_MENU",
                "complete-menu": "true",
                "lat": lat,
                "lng": lng,
                "restaurantId": restaurant_id,
                "catalog_qa": "undefined",
                "submitAction": "ENTER",
            },
        )

        if not find_regular_cards(payload):
            logger.warning("Menu for restaurant %s has no REGULAR group", restaurant_id)
            return []

        items = extract_menu_items(payload)
        logger.info("Menu for restaurant %s: %d items", restaurant_id, len(items))
        return items
