"""Shop schemas - carts, favorites and orders."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from foodcourt_schemas.base import CamelModel


class OrderStatus(str, Enum):
    """Order lifecycle status."""

    PLACED = "PLACED"


class LineItem(CamelModel):
    """A dish and quantity in a cart or an order."""

    # Upstream item ids are numeric-looking and often sent as JSON numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    item_id: str = Field(min_length=1)
    name: str = ""
    price: float = Field(default=0.0, ge=0)
    quantity: int = Field(default=1, ge=1)

    @field_validator("name", mode="before")
    @classmethod
    def none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class Favorite(CamelModel):
    """A restaurant bookmarked by a user."""

    id: str
    user_id: str
    restaurant_id: str
    name: str = ""
    avg_rating: float = 0.0


class Order(CamelModel):
    """A placed order. Immutable once created."""

    id: str
    user_id: str
    items: list[LineItem]
    total: float
    status: OrderStatus = OrderStatus.PLACED
    created_at: datetime
