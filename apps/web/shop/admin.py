"""Admin registration for shop models."""

from django.contrib import admin

from apps.web.shop.models import Cart, FavoriteRestaurant, Order


@admin.register(Cart)
class CartAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["user", "item_count", "updated_at"]
    search_fields = ["user__email"]
    readonly_fields = ["created_at", "updated_at"]

    @admin.display(description="Items")
    def item_count(self, obj: Cart) -> int:
        return len(obj.items)


@admin.register(FavoriteRestaurant)
class FavoriteRestaurantAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["user", "restaurant_id", "name", "avg_rating", "created_at"]
    search_fields = ["user__email", "restaurant_id", "name"]
    readonly_fields = ["created_at", "updated_at"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["id", "user", "total", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["user__email"]
    readonly_fields = ["user", "items", "total", "status", "created_at", "updated_at"]
