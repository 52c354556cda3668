"""
Core models - Accounts and per-user scoping.

All user-owned models inherit from UserScopedModel.
"""

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models

from .managers import UserManager, UserScopedManager


class User(AbstractBaseUser, PermissionsMixin):
    """
    Customer account.

    Email is the login identifier. The password column holds a salted hash
    (Django's configured hasher), never the raw password.
    """

    name = models.CharField(max_length=200)
    email = models.EmailField(unique=True)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False, help_text="Can use the admin")
    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        ordering = ["email"]

    def __str__(self) -> str:
        return self.email


class UserScopedModel(models.Model):
    """
    Abstract base for all per-user documents.

    Provides:
    - Automatic user FK
    - UserScopedManager for filtered queries and upserts
    - Created/updated timestamps
    """

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="%(class)ss",  # e.g., user.carts, user.orders
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserScopedManager()

    class Meta:
        abstract = True
