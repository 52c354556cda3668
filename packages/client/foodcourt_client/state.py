"""
Client application state - session, cart and delivery location.

Each state object holds plain data plus the operations that change it, and
notifies subscribers after every change. Persistence and server sync are
not done here; they are wired as subscribers (see effects.py).
"""

import logging
from collections.abc import Callable
from typing import Any

from foodcourt_schemas import AuthResponse, AuthUser, LineItem, MenuItem
from pydantic import ValidationError

from foodcourt_client.api import FoodcourtAPI
from foodcourt_client.exceptions import APIRequestError
from foodcourt_client.locations import (
    DEFAULT_LOCATION,
    Location,
    find_nearest_city,
    match_location_name,
)
from foodcourt_client.storage import JsonFileStorage

logger = logging.getLogger(__name__)

# Storage keys
USER_KEY = "auth_user"
TOKEN_KEY = "token"
CART_KEY = "foodcourt_cart"
LOCATION_KEY = "foodcourt_location_v1"

Listener = Callable[[Any], None]


class Observable:
    """Minimal subscribe/emit support for state objects."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call `listener(self)` after every change.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self)


# =============================================================================
# Session
# =============================================================================


class AuthState(Observable):
    """The signed-in user and their session token."""

    def __init__(self, api: FoodcourtAPI, storage: JsonFileStorage) -> None:
        super().__init__()
        self.api = api
        self.storage = storage
        self.user: AuthUser | None = None
        self.token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def restore(self) -> None:
        """Restore a stored session; a partial or corrupt one is ignored."""
        raw_user = self.storage.get(USER_KEY)
        token = self.storage.get(TOKEN_KEY)
        if not raw_user or not token:
            return
        try:
            self.user = AuthUser.model_validate(raw_user)
        except ValidationError:
            logger.warning("Discarding unreadable stored session")
            return
        self.token = token
        self._emit()

    def login(self, email: str, password: str) -> AuthUser:
        return self._start_session(self.api.login(email, password))

    def register(self, name: str, email: str, password: str) -> AuthUser:
        return self._start_session(self.api.register(name, email, password))

    def logout(self) -> None:
        self.user = None
        self.token = None
        self.storage.remove(USER_KEY)
        self.storage.remove(TOKEN_KEY)
        self._emit()

    def _start_session(self, response: AuthResponse) -> AuthUser:
        self.user = response.user
        self.token = response.token
        self.storage.set(USER_KEY, response.user.model_dump(mode="json"))
        self.storage.set(TOKEN_KEY, response.token)
        self._emit()
        return response.user


# =============================================================================
# Cart
# =============================================================================


class CartItem(MenuItem):
    """A menu item in the cart with its quantity."""

    quantity: int = 1

    def to_line_item(self) -> LineItem:
        return LineItem(
            item_id=self.id, name=self.name, price=self.price, quantity=self.quantity
        )

    @classmethod
    def from_line_item(cls, line: LineItem) -> "CartItem":
        return cls(
            id=line.item_id, name=line.name, price=line.price, quantity=line.quantity
        )


class CartState(Observable):
    """
    The cart being built.

    Items are unique by id; adding an item already present increments its
    quantity instead.
    """

    def __init__(
        self, api: FoodcourtAPI, storage: JsonFileStorage, auth: AuthState
    ) -> None:
        super().__init__()
        self.api = api
        self.storage = storage
        self.auth = auth
        self.items: list[CartItem] = []
        self.loaded = False

    @property
    def total(self) -> float:
        return sum(item.price * item.quantity for item in self.items)

    @property
    def line_items(self) -> list[LineItem]:
        return [item.to_line_item() for item in self.items]

    def load(self) -> None:
        """
        Load the initial cart.

        A non-empty server cart wins when a session exists; otherwise the
        locally stored cart is used.
        """
        items: list[CartItem] = []
        if self.auth.is_authenticated:
            try:
                items = [CartItem.from_line_item(i) for i in self.api.get_cart()]
            except APIRequestError as e:
                logger.warning("Could not load server cart: %s", e.message)

        self.items = items or self._stored_items()
        self.loaded = True
        self._emit()

    def _stored_items(self) -> list[CartItem]:
        try:
            return [CartItem.model_validate(i) for i in self.storage.get(CART_KEY, [])]
        except (TypeError, ValidationError):
            logger.warning("Discarding unreadable stored cart")
            return []

    def add(self, item: MenuItem) -> None:
        for existing in self.items:
            if existing.id == item.id:
                existing.quantity += 1
                break
        else:
            self.items.append(
                CartItem.model_validate({**item.model_dump(), "quantity": 1})
            )
        self._emit()

    def remove(self, item_id: str) -> None:
        self.items = [item for item in self.items if item.id != item_id]
        self._emit()

    def change_quantity(self, item_id: str, quantity: int) -> None:
        """Set an item's quantity; zero or less removes it."""
        if quantity <= 0:
            self.remove(item_id)
            return
        for item in self.items:
            if item.id == item_id:
                item.quantity = quantity
        self._emit()

    def clear(self) -> None:
        self.items = []
        self._emit()


# =============================================================================
# Delivery location
# =============================================================================


class LocationState(Observable):
    """The delivery point used to localize listings and menus."""

    def __init__(self, storage: JsonFileStorage) -> None:
        super().__init__()
        self.storage = storage
        self.location: Location = DEFAULT_LOCATION

    def restore(self) -> None:
        """Restore a stored location when it is complete."""
        raw = self.storage.get(LOCATION_KEY)
        if not isinstance(raw, dict):
            return
        try:
            location = Location.model_validate(raw)
        except ValidationError:
            return
        if location.name and location.lat and location.lng:
            self.location = location

    def set_name(self, name: str) -> None:
        self.location = match_location_name(name, self.location)
        self._emit()

    def set_coords(self, lat: float, lng: float) -> None:
        self.location = find_nearest_city(lat, lng)
        self._emit()
