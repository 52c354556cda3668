"""Tests for shop models and the per-user managers."""

from django.db import IntegrityError
from django.test import RequestFactory

import pytest

from apps.web.shop.models import Cart, FavoriteRestaurant, Order

from .factories import (
    CartFactory,
    FavoriteRestaurantFactory,
    OrderFactory,
    UserFactory,
)


@pytest.mark.django_db
class TestCart:
    """Tests for Cart model."""

    def test_one_cart_per_user(self):
        cart = CartFactory()

        with pytest.raises(IntegrityError):
            Cart.objects.create(user=cart.user, items=[])

    def test_upsert_creates_then_replaces(self):
        user = UserFactory()

        first = Cart.objects.upsert_for_user(user.pk, defaults={"items": []})
        second = Cart.objects.upsert_for_user(
            user.pk, defaults={"items": [{"itemId": "1", "quantity": 3}]}
        )

        assert first.pk == second.pk
        assert Cart.objects.get(user=user).items == [{"itemId": "1", "quantity": 3}]


@pytest.mark.django_db
class TestFavoriteRestaurant:
    """Tests for FavoriteRestaurant model."""

    def test_unique_per_user_and_restaurant(self):
        favorite = FavoriteRestaurantFactory(restaurant_id="101")

        with pytest.raises(IntegrityError):
            FavoriteRestaurant.objects.create(user=favorite.user, restaurant_id="101")

    def test_same_restaurant_for_two_users(self):
        FavoriteRestaurantFactory(restaurant_id="101")
        FavoriteRestaurantFactory(restaurant_id="101")

        assert FavoriteRestaurant.objects.filter(restaurant_id="101").count() == 2

    def test_upsert_keyed_by_restaurant(self):
        user = UserFactory()

        FavoriteRestaurant.objects.upsert_for_user(
            user.pk, defaults={"name": "Old", "avg_rating": 3.5}, restaurant_id="7"
        )
        FavoriteRestaurant.objects.upsert_for_user(
            user.pk, defaults={"name": "New", "avg_rating": 4.5}, restaurant_id="7"
        )

        favorite = FavoriteRestaurant.objects.get(user=user)
        assert (favorite.name, favorite.avg_rating) == ("New", 4.5)


@pytest.mark.django_db
class TestOrder:
    """Tests for Order model."""

    def test_default_status_is_placed(self):
        order = Order.objects.create(user=UserFactory(), items=[], total=0)

        assert order.status == "PLACED"

    def test_default_ordering_newest_first(self):
        user = UserFactory()
        older = OrderFactory(user=user)
        newer = OrderFactory(user=user)

        assert list(Order.objects.filter(user=user)) == [newer, older]


@pytest.mark.django_db
class TestUserScopedManager:
    """Tests for for_user() scoping."""

    def test_for_user_filters_by_request_user(self):
        mine = OrderFactory()
        OrderFactory()
        request = RequestFactory().get("/api/orders")
        request.user_id = mine.user_id

        assert list(Order.objects.for_user(request)) == [mine]

    def test_for_user_without_user_raises(self):
        request = RequestFactory().get("/api/orders")

        with pytest.raises(ValueError, match="no user attached"):
            Order.objects.for_user(request)
