"""
Save effects - subscribers that persist and sync state after each change.

FoodcourtApp wires these once at startup; the state objects themselves
never touch storage or the network on change.
"""

import logging
from collections.abc import Callable

from foodcourt_client.api import FoodcourtAPI
from foodcourt_client.exceptions import APIRequestError
from foodcourt_client.state import (
    CART_KEY,
    LOCATION_KEY,
    AuthState,
    CartState,
    LocationState,
)
from foodcourt_client.storage import JsonFileStorage

logger = logging.getLogger(__name__)


def persist_cart(storage: JsonFileStorage) -> Callable[[CartState], None]:
    """Back the cart up to local storage on every change."""

    def effect(cart: CartState) -> None:
        if not cart.loaded:
            return
        storage.set(CART_KEY, [item.model_dump(mode="json") for item in cart.items])

    return effect


def sync_cart(api: FoodcourtAPI, auth: AuthState) -> Callable[[CartState], None]:
    """
    Push the cart to the server on every change while signed in.

    Failures are logged and dropped; the local copy stays authoritative
    until the next successful sync.
    """

    def effect(cart: CartState) -> None:
        if not cart.loaded or not auth.is_authenticated:
            return
        try:
            api.save_cart(cart.line_items)
        except APIRequestError as e:
            logger.warning(
                "Cart sync failed (status %s): %s", e.status_code, e.message
            )

    return effect


def persist_location(storage: JsonFileStorage) -> Callable[[LocationState], None]:
    """Store the delivery location on every change."""

    def effect(state: LocationState) -> None:
        storage.set(LOCATION_KEY, state.location.model_dump(mode="json"))

    return effect


def wire_effects(
    storage: JsonFileStorage,
    api: FoodcourtAPI,
    auth: AuthState,
    cart: CartState,
    location: LocationState,
) -> list[Callable[[], None]]:
    """
    Subscribe every save effect.

    Returns:
        Unsubscribe functions, in wiring order.
    """
    return [
        cart.subscribe(persist_cart(storage)),
        cart.subscribe(sync_cart(api, auth)),
        location.subscribe(persist_location(storage)),
    ]
