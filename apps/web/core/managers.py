"""
Custom managers for accounts and per-user data.

UserScopedManager filters queries by the authenticated user.
"""

from typing import TYPE_CHECKING, Any, TypeVar

from django.contrib.auth.base_user import BaseUserManager
from django.db import models

if TYPE_CHECKING:
    from django.http import HttpRequest

    from .models import User, UserScopedModel

_T = TypeVar("_T", bound="UserScopedModel")


class UserManager(BaseUserManager["User"]):
    """Manager for the email-keyed User model."""

    use_in_migrations = True

    def create_user(
        self, email: str, name: str, password: str | None = None, **extra: Any
    ) -> "User":
        """Create a user, storing a salted hash of the password."""
        if not email:
            msg = "Users must have an email address"
            raise ValueError(msg)
        user = self.model(email=self.normalize_email(email), name=name, **extra)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(
        self, email: str, name: str, password: str | None = None, **extra: Any
    ) -> "User":
        extra.setdefault("is_staff", True)
        extra.setdefault("is_superuser", True)
        return self.create_user(email, name, password, **extra)


class UserScopedManager(models.Manager[_T]):
    """
    Manager that filters by user.

    Usage in views:
        # Automatically scoped to request.user_id
        orders = Order.objects.for_user(request).all()

    SECURITY: Always use for_user() in views, never raw querysets.
    """

    def for_user(self, request: "HttpRequest") -> models.QuerySet[_T]:
        """
        Filter queryset by the user attached to the request.

        Args:
            request: HttpRequest with .user_id attribute (set by token_required)

        Returns:
            QuerySet filtered to the request's user

        Raises:
            ValueError: If request has no user attached
        """
        user_id: Any = getattr(request, "user_id", None)
        if user_id is None:
            msg = "Request has no user attached. Is the view token_required?"
            raise ValueError(msg)
        return self.filter(user_id=user_id)

    def upsert_for_user(
        self, user_id: int, defaults: dict[str, Any], **key: Any
    ) -> _T:
        """
        Read-modify-write with create-if-absent.

        The document key is (user_id, *key). Concurrent writers race at the
        database; the last write wins.

        Args:
            user_id: Owner of the document
            defaults: Fields to overwrite (or to create with)
            **key: Remaining key fields, e.g. restaurant_id for favorites

        Returns:
            The stored document
        """
        obj, _created = self.update_or_create(
            user_id=user_id, defaults=defaults, **key
        )
        return obj
