"""Foodcourt client - API client and application state for frontends."""

from foodcourt_client.api import FoodcourtAPI
from foodcourt_client.app import FoodcourtApp
from foodcourt_client.exceptions import APIRequestError
from foodcourt_client.locations import CITY_PRESETS, DEFAULT_LOCATION, Location
from foodcourt_client.state import AuthState, CartItem, CartState, LocationState
from foodcourt_client.storage import JsonFileStorage

__all__ = [
    "APIRequestError",
    "AuthState",
    "CITY_PRESETS",
    "CartItem",
    "CartState",
    "DEFAULT_LOCATION",
    "FoodcourtAPI",
    "FoodcourtApp",
    "JsonFileStorage",
    "Location",
    "LocationState",
]
