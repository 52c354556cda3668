"""
URL routing for restaurant API endpoints.

Both endpoints are public (no auth required).
"""

from django.urls import path

from apps.web.restaurants import views

app_name = "restaurants"

urlpatterns = [
    path("restaurants", views.restaurant_list, name="list"),
    path(
        "restaurants/<str:restaurant_id>/menu",
        views.restaurant_menu,
        name="menu",
    ),
]
