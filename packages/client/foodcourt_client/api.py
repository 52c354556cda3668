"""
Foodcourt API client - one method per backend route.

Usage:
    api = FoodcourtAPI("http://localhost:4000/api", token_provider=lambda: token)
    restaurants = api.get_restaurants(search="pizza", lat=19.07, lng=72.87)
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx
from foodcourt_schemas import (
    AuthResponse,
    Favorite,
    LineItem,
    MenuItem,
    Order,
    Restaurant,
)

from foodcourt_client.exceptions import APIRequestError

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], str | None]


class FoodcourtAPI:
    """
    Synchronous client for the Foodcourt HTTP API.

    A session token is attached as `Authorization: Bearer <token>` whenever
    the token provider yields one. Transport failures and non-2xx answers
    raise APIRequestError carrying the server's message when it sent one.
    """

    DEFAULT_BASE_URL = "http://localhost:4000/api"

    def __init__(
        self,
        base_url: str | None = None,
        token_provider: TokenProvider | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. "https://foodcourt.example.com/api"
            token_provider: Returns the current session token, or None
            http_client: Optional HTTP client for dependency injection (testing)
        """
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.token_provider = token_provider
        self._client = http_client or httpx.Client(timeout=30.0)
        self._owns_client = http_client is None

    def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            self._client.close()

    # =========================================================================
    # HTTP Helpers
    # =========================================================================

    def _headers(self) -> dict[str, str]:
        token = self.token_provider() if self.token_provider else None
        return {"Authorization": f"Bearer {token}"} if token else {}

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send a request and decode the JSON answer.

        Raises:
            APIRequestError: On transport errors or error statuses.
        """
        url = f"{self.base_url}{path}"
        try:
            response = self._client.request(
                method, url, headers=self._headers(), **kwargs
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise APIRequestError(
                _error_message(e.response), status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            raise APIRequestError(f"Request to {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise APIRequestError(
                f"Undecodable response from {url}", status_code=response.status_code
            ) from e

    # =========================================================================
    # Auth
    # =========================================================================

    def register(self, name: str, email: str, password: str) -> AuthResponse:
        data = self._request(
            "POST",
            "/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        return AuthResponse.model_validate(data)

    def login(self, email: str, password: str) -> AuthResponse:
        data = self._request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        return AuthResponse.model_validate(data)

    # =========================================================================
    # Catalog
    # =========================================================================

    def get_restaurants(
        self,
        search: str = "",
        min_rating: float = 0,
        cuisine: str = "",
        lat: float | None = None,
        lng: float | None = None,
    ) -> list[Restaurant]:
        params: dict[str, Any] = {
            "search": search,
            "minRating": min_rating,
            "cuisine": cuisine,
        }
        if lat is not None and lng is not None:
            params.update(lat=lat, lng=lng)

        data = self._request("GET", "/restaurants", params=params)
        return [Restaurant.model_validate(r) for r in data.get("data") or []]

    def get_menu(
        self, restaurant_id: str, lat: float | None = None, lng: float | None = None
    ) -> list[MenuItem]:
        params = {} if lat is None or lng is None else {"lat": lat, "lng": lng}
        data = self._request(
            "GET", f"/restaurants/{restaurant_id}/menu", params=params
        )
        return [MenuItem.model_validate(m) for m in data.get("data") or []]

    # =========================================================================
    # Cart
    # =========================================================================

    def get_cart(self) -> list[LineItem]:
        data = self._request("GET", "/cart")
        return [LineItem.model_validate(i) for i in data.get("items") or []]

    def save_cart(self, items: list[LineItem]) -> list[LineItem]:
        data = self._request("PUT", "/cart", json={"items": _dump_items(items)})
        return [LineItem.model_validate(i) for i in data.get("items") or []]

    # =========================================================================
    # Favorites
    # =========================================================================

    def get_favorites(self) -> list[Favorite]:
        """The caller's favorites; signed-out callers simply have none."""
        try:
            data = self._request("GET", "/favorites")
        except APIRequestError as e:
            if e.status_code == 401:
                return []
            raise
        return [Favorite.model_validate(f) for f in data]

    def add_favorite(self, restaurant: Restaurant) -> Favorite:
        data = self._request(
            "POST",
            "/favorites",
            json={
                "restaurantId": restaurant.id,
                "name": restaurant.name,
                "avgRating": restaurant.avg_rating,
            },
        )
        return Favorite.model_validate(data)

    def remove_favorite(self, restaurant_id: str) -> None:
        self._request("DELETE", f"/favorites/{restaurant_id}")

    def toggle_favorite(self, restaurant: Restaurant) -> list[Favorite]:
        """
        Flip a restaurant's favorite state.

        Returns:
            The refreshed list of favorites.
        """
        current = self.get_favorites()
        if any(f.restaurant_id == restaurant.id for f in current):
            self.remove_favorite(restaurant.id)
        else:
            self.add_favorite(restaurant)
        return self.get_favorites()

    # =========================================================================
    # Orders
    # =========================================================================

    def create_order(
        self, items: list[LineItem], total: float | None = None
    ) -> Order:
        body: dict[str, Any] = {"items": _dump_items(items)}
        if total is not None:
            body["total"] = total
        return Order.model_validate(self._request("POST", "/orders", json=body))

    def get_orders(self) -> list[Order]:
        return [Order.model_validate(o) for o in self._request("GET", "/orders")]


def _dump_items(items: list[LineItem]) -> list[dict[str, Any]]:
    return [item.model_dump(mode="json", by_alias=True) for item in items]


def _error_message(response: httpx.Response) -> str:
    """The server's {"message": ...} if present, else a generic line."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return f"Request failed with status {response.status_code}"
