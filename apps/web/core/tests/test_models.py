"""Tests for the account model and manager."""

import pytest

from apps.web.core.models import User


@pytest.mark.django_db
class TestUserManager:
    """Tests for UserManager."""

    def test_create_user_hashes_password(self):
        user = User.objects.create_user(
            email="asha@EXAMPLE.com", name="Asha", password="s3cret"
        )

        assert user.email == "asha@example.com"
        assert user.password != "s3cret"
        assert user.check_password("s3cret")
        assert user.is_active
        assert not user.is_staff

    def test_create_user_requires_email(self):
        with pytest.raises(ValueError, match="email"):
            User.objects.create_user(email="", name="Asha", password="x")

    def test_create_superuser(self):
        admin = User.objects.create_superuser(
            email="admin@example.com", name="Admin", password="x"
        )

        assert admin.is_staff
        assert admin.is_superuser

    def test_str(self, user):
        assert str(user) == "asha@example.com"
