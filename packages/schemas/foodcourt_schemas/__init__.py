"""Foodcourt Schemas - Pydantic models for data contracts."""

from foodcourt_schemas.auth import AuthResponse, AuthUser
from foodcourt_schemas.base import CamelModel
from foodcourt_schemas.catalog import (
    DEFAULT_COORDINATES,
    Coordinates,
    MenuItem,
    Restaurant,
)
from foodcourt_schemas.shop import Favorite, LineItem, Order, OrderStatus

__all__ = [
    # Base
    "CamelModel",
    # Auth
    "AuthResponse",
    "AuthUser",
    # Catalog
    "DEFAULT_COORDINATES",
    "Coordinates",
    "MenuItem",
    "Restaurant",
    # Shop
    "Favorite",
    "LineItem",
    "Order",
    "OrderStatus",
]
