"""
URL routing for per-user shop endpoints.

All endpoints require `Authorization: Bearer <token>`.
"""

from django.urls import path

from apps.web.shop import views

app_name = "shop"

urlpatterns = [
    path("cart", views.cart, name="cart"),
    path("favorites", views.favorites, name="favorites"),
    path(
        "favorites/<str:restaurant_id>",
        views.favorite_delete,
        name="favorite-delete",
    ),
    path("orders", views.orders, name="orders"),
]
