"""Django app configuration for shop module."""

from django.apps import AppConfig


class ShopConfig(AppConfig):
    """Shop app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.shop"
    label = "shop"
    verbose_name = "Shop"
