"""
FoodcourtApp - the client's dependency container.

Builds storage, the API client and the three state objects, wires the save
effects, and exposes the page-level flows (browse, menu, favorites, checkout)
on top of them.

Usage:
    app = FoodcourtApp.create("~/.foodcourt/state.json")
    app.start()
    app.auth.login("asha@example.com", "s3cret")
    restaurants = app.browse(search="pizza")
"""

import logging
from collections.abc import Callable
from pathlib import Path

from foodcourt_schemas import Favorite, MenuItem, Order, Restaurant

from foodcourt_client.api import FoodcourtAPI
from foodcourt_client.effects import wire_effects
from foodcourt_client.exceptions import APIRequestError
from foodcourt_client.listing import (
    RevealPager,
    SortOption,
    apply_client_filters,
    dedupe_by_id,
    sort_restaurants,
)
from foodcourt_client.menu import with_fallback
from foodcourt_client.state import AuthState, CartState, LocationState
from foodcourt_client.storage import JsonFileStorage

logger = logging.getLogger(__name__)


class FoodcourtApp:
    """
    Typed container for client state and services.

    Pass instances around explicitly instead of reaching for globals.
    """

    def __init__(self, storage: JsonFileStorage, api: FoodcourtAPI) -> None:
        self.storage = storage
        self.api = api
        self.auth = AuthState(api, storage)
        self.cart = CartState(api, storage, self.auth)
        self.location = LocationState(storage)
        self.pager = RevealPager()
        self.restaurants: list[Restaurant] = []
        self.favorite_ids: list[str] = []

        # The API reads the live session token on every call
        api.token_provider = lambda: self.auth.token
        self._unsubscribe: list[Callable[[], None]] = wire_effects(
            storage, api, self.auth, self.cart, self.location
        )

    @classmethod
    def create(
        cls, storage_path: str | Path, base_url: str | None = None
    ) -> "FoodcourtApp":
        storage = JsonFileStorage(Path(storage_path).expanduser())
        return cls(storage, FoodcourtAPI(base_url))

    def start(self) -> None:
        """Restore the stored session and location, then load the cart."""
        self.auth.restore()
        self.location.restore()
        self.cart.load()

    def close(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self.api.close()

    # =========================================================================
    # Browse
    # =========================================================================

    def browse(
        self, search: str = "", min_rating: float = 0, cuisine: str = ""
    ) -> list[Restaurant]:
        """
        Fetch restaurants near the current location.

        Starts a new result set: duplicates are dropped and the pager goes
        back to its first page.
        """
        here = self.location.location
        results = self.api.get_restaurants(
            search=search,
            min_rating=min_rating,
            cuisine=cuisine,
            lat=here.lat,
            lng=here.lng,
        )
        self.restaurants = dedupe_by_id(results)
        self.pager.reset(len(self.restaurants))
        return self.restaurants

    def visible_restaurants(
        self,
        sort_by: SortOption | str = SortOption.RELEVANCE,
        only_veg: bool = False,
        favorites_only: bool = False,
    ) -> list[Restaurant]:
        """The current results after client filters, sorting and paging."""
        filtered = apply_client_filters(
            self.restaurants,
            only_veg=only_veg,
            favorites_only=favorites_only,
            favorite_ids=self.favorite_ids,
        )
        return self.pager.visible(sort_restaurants(filtered, sort_by))

    # =========================================================================
    # Favorites
    # =========================================================================

    def refresh_favorites(self) -> list[Favorite]:
        favorites = self.api.get_favorites()
        self.favorite_ids = [f.restaurant_id for f in favorites]
        return favorites

    def toggle_favorite(self, restaurant: Restaurant) -> list[Favorite]:
        favorites = self.api.toggle_favorite(restaurant)
        self.favorite_ids = [f.restaurant_id for f in favorites]
        return favorites

    # =========================================================================
    # Menu
    # =========================================================================

    def menu(self, restaurant_id: str) -> tuple[list[MenuItem], bool]:
        """
        The menu to show for a restaurant.

        Returns:
            (items, is_fallback): the sample menu stands in when the fetch
            fails or yields nothing.
        """
        here = self.location.location
        try:
            items = self.api.get_menu(restaurant_id, lat=here.lat, lng=here.lng)
        except APIRequestError as e:
            logger.warning("Menu fetch for %s failed: %s", restaurant_id, e.message)
            items = []
        return with_fallback(items)

    # =========================================================================
    # Checkout
    # =========================================================================

    def place_order(self) -> Order:
        """
        Order the current cart and empty it.

        Raises:
            APIRequestError: If the server rejects the order; the cart is
                left untouched.
        """
        order = self.api.create_order(self.cart.line_items, self.cart.total)
        self.cart.clear()
        return order

    def orders(self) -> list[Order]:
        return self.api.get_orders()
