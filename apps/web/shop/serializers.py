"""
Pydantic schemas for shop request bodies.

Line items reuse the shared LineItem contract so carts and orders accept the
same camelCase shape the client sends. An explicit null counts the same as a
missing field.
"""

from typing import Any

from foodcourt_schemas import CamelModel, LineItem
from pydantic import ConfigDict, field_validator


class CartUpdateRequest(CamelModel):
    """Request body for PUT /api/cart. Missing items means an empty cart."""

    items: list[LineItem] = []

    @field_validator("items", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class FavoriteCreateRequest(CamelModel):
    """Request body for POST /api/favorites."""

    # Upstream ids are numeric-looking and often sent as JSON numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    restaurant_id: str = ""
    name: str = ""
    avg_rating: float = 0.0

    @field_validator("restaurant_id", "name", mode="before")
    @classmethod
    def none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("avg_rating", mode="before")
    @classmethod
    def none_as_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class OrderCreateRequest(CamelModel):
    """Request body for POST /api/orders."""

    items: list[LineItem] = []
    total: float | None = None

    @field_validator("items", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def resolved_total(self) -> float:
        """The submitted total, or the sum of the line totals when omitted."""
        if self.total is not None:
            return self.total
        return sum(item.line_total for item in self.items)
