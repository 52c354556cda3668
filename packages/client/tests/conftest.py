"""Shared fixtures for client tests."""

from unittest.mock import MagicMock

import pytest
from foodcourt_schemas import AuthResponse, AuthUser, MenuItem, Restaurant

from foodcourt_client.api import FoodcourtAPI
from foodcourt_client.state import AuthState, CartState, LocationState
from foodcourt_client.storage import JsonFileStorage

BASE_URL = "https://foodcourt.test/api"


@pytest.fixture
def storage(tmp_path) -> JsonFileStorage:
    return JsonFileStorage(tmp_path / "state.json")


@pytest.fixture
def api() -> MagicMock:
    """A FoodcourtAPI stand-in; every call returns a MagicMock unless set."""
    fake = MagicMock(spec=FoodcourtAPI)
    fake.get_cart.return_value = []
    return fake


@pytest.fixture
def auth(api, storage) -> AuthState:
    return AuthState(api, storage)


@pytest.fixture
def cart(api, storage, auth) -> CartState:
    return CartState(api, storage, auth)


@pytest.fixture
def location(storage) -> LocationState:
    return LocationState(storage)


@pytest.fixture
def auth_response() -> AuthResponse:
    return AuthResponse(
        token="signed-token",
        user=AuthUser(id="1", name="Asha", email="asha@example.com"),
    )


@pytest.fixture
def margherita() -> MenuItem:
    return MenuItem(id="9001", name="Margherita", price=250.0, is_veg=True)


@pytest.fixture
def garlic_bread() -> MenuItem:
    return MenuItem(id="9003", name="Garlic Bread", price=99.5, is_veg=True)


def make_restaurant(rid: str, **fields) -> Restaurant:
    return Restaurant(id=rid, name=fields.pop("name", f"R{rid}"), **fields)
