"""
Shop models - carts, favorite restaurants and orders.

All models follow the per-user pattern with UserScopedModel. Line items are
stored as JSON documents ({itemId, name, price, quantity}) because they
snapshot upstream dishes that are never stored on their own.
"""

from django.db import models

from apps.web.core.models import UserScopedModel


class OrderStatus(models.TextChoices):
    """Order lifecycle status."""

    PLACED = "PLACED", "Placed"


class Cart(UserScopedModel):
    """
    A user's cart.

    One per user (enforced by unique constraint). Replaced wholesale on
    save and emptied when an order is placed.
    """

    items = models.JSONField(
        default=list,
        blank=True,
        help_text="List of {itemId, name, price, quantity}",
    )

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["user"],
                name="unique_cart_per_user",
            ),
        ]

    def __str__(self) -> str:
        return f"Cart for {self.user} ({len(self.items)} items)"


class FavoriteRestaurant(UserScopedModel):
    """
    A restaurant bookmarked by a user.

    Keyed by (user, restaurant_id); upserted on toggle-on and deleted on
    toggle-off. Name and rating are a snapshot taken when bookmarked.
    """

    restaurant_id = models.CharField(
        max_length=255,
        help_text="Restaurant ID in the upstream source",
    )
    name = models.CharField(max_length=200, blank=True)
    avg_rating = models.FloatField(default=0)

    class Meta:
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "restaurant_id"],
                name="unique_favorite_per_user_restaurant",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user} ♥ {self.name or self.restaurant_id}"


class Order(UserScopedModel):
    """
    A placed order.

    Append-only history: never updated after creation.
    """

    items = models.JSONField(
        default=list,
        help_text="Snapshot of {itemId, name, price, quantity} at order time",
    )
    total = models.FloatField(default=0)
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PLACED,
    )

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(
                fields=["user", "-created_at"], name="shop_order_user_created_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"Order #{self.pk} ({self.status})"
