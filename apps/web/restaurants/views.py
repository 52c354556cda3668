"""
Restaurant API views - public listing and menu endpoints.

Both endpoints proxy the upstream source on every request; nothing is
cached or stored.
"""

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from apps.web.core.decorators import handles_errors
from apps.web.core.responses import dump, json_response
from apps.web.restaurants.filters import (
    RestaurantQuery,
    filter_restaurants,
    parse_float,
)
from apps.web.upstream.services import fetch_menu, fetch_restaurants


@require_GET
@handles_errors("Failed to fetch restaurants")
def restaurant_list(request: HttpRequest) -> JsonResponse:
    """
    GET /api/restaurants?search=&minRating=&cuisine=&lat=&lng=

    Fetches restaurants near (lat, lng) and narrows them by search text,
    minimum rating and cuisine.
    """
    query = RestaurantQuery.from_params(request.GET)

    restaurants = fetch_restaurants(query.lat, query.lng)
    restaurants = filter_restaurants(restaurants, query)

    return json_response({"data": [dump(r) for r in restaurants]})


@require_GET
@handles_errors("Failed to fetch menu")
def restaurant_menu(request: HttpRequest, restaurant_id: str) -> JsonResponse:
    """
    GET /api/restaurants/{id}/menu?lat=&lng=

    Returns the flattened upstream menu as-is. An empty list means the
    upstream had no menu for this restaurant.
    """
    items = fetch_menu(
        restaurant_id,
        parse_float(request.GET.get("lat")),
        parse_float(request.GET.get("lng")),
    )
    return json_response({"data": [dump(item) for item in items]})
