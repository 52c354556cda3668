"""
Shop API views - cart, favorites and orders.

Every endpoint requires a session token and only ever touches documents of
the user the token resolves to (request.user_id). Identifiers in the body
never select the user.
"""

import logging
from typing import Any

from django.db import transaction
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from foodcourt_schemas import Favorite as FavoriteSchema
from foodcourt_schemas import LineItem
from foodcourt_schemas import Order as OrderSchema
from foodcourt_schemas import OrderStatus as OrderStatusSchema

from apps.web.core.decorators import handles_errors, token_required
from apps.web.core.exceptions import ValidationError
from apps.web.core.responses import dump, json_response, parse_body
from apps.web.shop.models import Cart, FavoriteRestaurant, Order, OrderStatus
from apps.web.shop.serializers import (
    CartUpdateRequest,
    FavoriteCreateRequest,
    OrderCreateRequest,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Serialization Helpers
# =============================================================================


def _store_items(items: list[LineItem]) -> list[dict[str, Any]]:
    """Line items as stored in the JSON columns (camelCase documents)."""
    return [dump(item) for item in items]


def _serialize_favorite(favorite: FavoriteRestaurant) -> FavoriteSchema:
    return FavoriteSchema(
        id=str(favorite.pk),
        user_id=str(favorite.user_id),
        restaurant_id=favorite.restaurant_id,
        name=favorite.name,
        avg_rating=favorite.avg_rating,
    )


def _serialize_order(order: Order) -> OrderSchema:
    return OrderSchema(
        id=str(order.pk),
        user_id=str(order.user_id),
        items=[LineItem.model_validate(item) for item in order.items],
        total=order.total,
        status=OrderStatusSchema(order.status),
        created_at=order.created_at,
    )


# =============================================================================
# Cart
# =============================================================================


@csrf_exempt
@require_http_methods(["GET", "PUT"])
def cart(request: HttpRequest) -> JsonResponse:
    """
    GET /api/cart - the caller's cart, {items: []} when none exists
    PUT /api/cart - replace the caller's cart
    """
    if request.method == "PUT":
        return _save_cart(request)
    return _load_cart(request)


@handles_errors("Failed to load cart")
@token_required
def _load_cart(request: HttpRequest) -> JsonResponse:
    stored = Cart.objects.for_user(request).first()
    return json_response({"items": stored.items if stored else []})


@handles_errors("Failed to save cart")
@token_required
def _save_cart(request: HttpRequest) -> JsonResponse:
    """
    Request body: {items: [{itemId, name, price, quantity}]}
    Response: {items} as stored
    """
    body = parse_body(request, CartUpdateRequest)

    stored = Cart.objects.upsert_for_user(
        request.user_id,  # type: ignore[attr-defined]
        defaults={"items": _store_items(body.items)},
    )
    return json_response({"items": stored.items})


# =============================================================================
# Favorites
# =============================================================================


@csrf_exempt
@require_http_methods(["GET", "POST"])
def favorites(request: HttpRequest) -> JsonResponse:
    """
    GET /api/favorites - the caller's favorite restaurants
    POST /api/favorites - bookmark (or refresh) a restaurant
    """
    if request.method == "POST":
        return _save_favorite(request)
    return _list_favorites(request)


@handles_errors("Failed to load favourites")
@token_required
def _list_favorites(request: HttpRequest) -> JsonResponse:
    favorites = FavoriteRestaurant.objects.for_user(request)
    return json_response([dump(_serialize_favorite(f)) for f in favorites])


@handles_errors("Failed to save favorite")
@token_required
def _save_favorite(request: HttpRequest) -> JsonResponse:
    """
    Request body: {restaurantId, name, avgRating}
    Response: the stored Favorite

    Keyed by (user, restaurantId), so posting twice keeps a single entry
    with the latest name and rating.
    """
    body = parse_body(request, FavoriteCreateRequest)
    restaurant_id = body.restaurant_id.strip()
    if not restaurant_id:
        raise ValidationError("restaurantId is required")

    favorite = FavoriteRestaurant.objects.upsert_for_user(
        request.user_id,  # type: ignore[attr-defined]
        defaults={"name": body.name, "avg_rating": body.avg_rating},
        restaurant_id=restaurant_id,
    )
    return json_response(dump(_serialize_favorite(favorite)))


@csrf_exempt
@require_http_methods(["DELETE"])
@handles_errors("Failed to remove favorite")
@token_required
def favorite_delete(request: HttpRequest, restaurant_id: str) -> JsonResponse:
    """
    DELETE /api/favorites/{restaurantId}

    Succeeds whether or not the favorite existed.
    """
    deleted, _ = (
        FavoriteRestaurant.objects.for_user(request)
        .filter(restaurant_id=restaurant_id)
        .delete()
    )
    logger.debug(
        "Removed %d favorite(s) for restaurant %s", deleted, restaurant_id
    )
    return json_response({"success": True})


# =============================================================================
# Orders
# =============================================================================


@csrf_exempt
@require_http_methods(["GET", "POST"])
def orders(request: HttpRequest) -> JsonResponse:
    """
    GET /api/orders - the caller's order history, newest first
    POST /api/orders - place an order from the submitted items
    """
    if request.method == "POST":
        return _place_order(request)
    return _list_orders(request)


@handles_errors("Failed to load orders")
@token_required
def _list_orders(request: HttpRequest) -> JsonResponse:
    history = Order.objects.for_user(request).order_by("-created_at", "-id")
    return json_response([dump(_serialize_order(o)) for o in history])


@handles_errors("Failed to place order")
@token_required
def _place_order(request: HttpRequest) -> JsonResponse:
    """
    Request body: {items: [...], total?}
    Response: the created Order

    The order is stored and the caller's cart emptied in one transaction,
    so a failure leaves neither change behind.
    """
    body = parse_body(request, OrderCreateRequest)
    if not body.items:
        raise ValidationError("No items to order")

    user_id = request.user_id  # type: ignore[attr-defined]
    with transaction.atomic():
        order = Order.objects.create(
            user_id=user_id,
            items=_store_items(body.items),
            total=body.resolved_total(),
            status=OrderStatus.PLACED,
        )
        Cart.objects.upsert_for_user(user_id, defaults={"items": []})

    logger.info(
        "Order %s placed by user %s (%d items, total %.2f)",
        order.pk,
        user_id,
        len(body.items),
        order.total,
    )
    return json_response(dump(_serialize_order(order)))
