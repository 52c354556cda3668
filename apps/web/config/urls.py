"""
URL configuration for Foodcourt.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    # Public API endpoints
    path("api/auth/", include("apps.web.accounts.urls")),
    path("api/", include("apps.web.restaurants.urls")),
    # Per-user endpoints (Authorization: Bearer <token>)
    path("api/", include("apps.web.shop.urls")),
]
