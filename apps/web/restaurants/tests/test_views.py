"""
Integration tests for restaurant API views.
"""

from unittest.mock import patch

from django.test import Client as DjangoClient

import httpx
import pytest
import respx
from foodcourt_schemas import MenuItem, Restaurant

from apps.web.upstream.exceptions import UpstreamError

UPSTREAM_LIST_URL = "https://upstream.test/dapi/restaurants/list/v5"
UPSTREAM_MENU_URL = "https://upstream.test/dapi/menu/pl"


@pytest.fixture
def upstream_restaurants() -> list[Restaurant]:
    return [
        Restaurant(
            id="1",
            name="Pizza Hut",
            cuisines=["Italian"],
            avg_rating=4.2,
            cost_for_two="₹350 for two",
            sla_string="30-35 mins",
        ),
        Restaurant(id="2", name="Spice", cuisines=["Indian"], avg_rating=3.0),
    ]


class TestRestaurantListView:
    """Tests for GET /api/restaurants."""

    def test_returns_all_with_camel_case_fields(
        self, api_client: DjangoClient, upstream_restaurants
    ):
        with patch(
            "apps.web.restaurants.views.fetch_restaurants",
            return_value=upstream_restaurants,
        ):
            response = api_client.get("/api/restaurants")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [r["name"] for r in data] == ["Pizza Hut", "Spice"]
        assert data[0]["avgRating"] == 4.2
        assert data[0]["costForTwo"] == "₹350 for two"
        assert data[0]["slaString"] == "30-35 mins"
        assert "avg_rating" not in data[0]

    @pytest.mark.parametrize(
        ("params", "expected"),
        [
            ("minRating=4", ["Pizza Hut"]),
            ("cuisine=italian", ["Pizza Hut"]),
            ("cuisine=ITALIAN", ["Pizza Hut"]),
            ("search=spice", ["Spice"]),
            ("search=pizza&cuisine=indian", []),
        ],
    )
    def test_filters(
        self, api_client: DjangoClient, upstream_restaurants, params, expected
    ):
        with patch(
            "apps.web.restaurants.views.fetch_restaurants",
            return_value=upstream_restaurants,
        ):
            response = api_client.get(f"/api/restaurants?{params}")

        assert [r["name"] for r in response.json()["data"]] == expected

    def test_passes_coordinates(self, api_client: DjangoClient):
        with patch(
            "apps.web.restaurants.views.fetch_restaurants", return_value=[]
        ) as fetch:
            api_client.get("/api/restaurants?lat=19.076&lng=72.8777")

        fetch.assert_called_once_with(19.076, 72.8777)

    def test_unparseable_coordinates_are_absent(self, api_client: DjangoClient):
        with patch(
            "apps.web.restaurants.views.fetch_restaurants", return_value=[]
        ) as fetch:
            api_client.get("/api/restaurants?lat=abc&lng=")

        fetch.assert_called_once_with(None, None)

    def test_upstream_failure_is_generic_500(self, api_client: DjangoClient):
        with patch(
            "apps.web.restaurants.views.fetch_restaurants",
            side_effect=UpstreamError("Upstream returned 503", status_code=503),
        ):
            response = api_client.get("/api/restaurants")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch restaurants"}

    def test_rejects_post(self, api_client: DjangoClient):
        response = api_client.post("/api/restaurants")

        assert response.status_code == 405

    def test_has_cors_headers(self, api_client: DjangoClient):
        with patch("apps.web.restaurants.views.fetch_restaurants", return_value=[]):
            response = api_client.get("/api/restaurants")

        assert response["Access-Control-Allow-Origin"] == "*"

    @respx.mock
    def test_end_to_end_through_adapter(self, api_client: DjangoClient):
        """The real adapter runs against a mocked upstream."""
        respx.get(UPSTREAM_LIST_URL).mock(
            return_value=httpx.Response(
                200,
                json={
                    "data": {
                        "cards": [
                            {
                                "card": {
                                    "gridElements": {
                                        "infoWithStyle": {
                                            "restaurants": [
                                                {
                                                    "info": {
                                                        "id": "55",
                                                        "name": "Dosa Point",
                                                        "avgRating": "4.5",
                                                        "cuisines": ["South Indian"],
                                                    }
                                                }
                                            ]
                                        }
                                    }
                                }
                            }
                        ]
                    }
                },
            )
        )

        response = api_client.get("/api/restaurants?search=dosa")

        assert response.status_code == 200
        assert response.json()["data"] == [
            {
                "id": "55",
                "name": "Dosa Point",
                "avgRating": 4.5,
                "cuisines": ["South Indian"],
                "areaName": "",
                "costForTwo": "",
                "slaString": "",
                "cloudinaryImageId": "",
                "veg": False,
            }
        ]


class TestRestaurantMenuView:
    """Tests for GET /api/restaurants/{id}/menu."""

    def test_returns_adapter_result_verbatim(self, api_client: DjangoClient):
        items = [
            MenuItem(id="9001", name="Margherita", price=250.0, is_veg=True),
            MenuItem(id="9002", name="Chicken Supreme", price=450.5),
        ]
        with patch(
            "apps.web.restaurants.views.fetch_menu", return_value=items
        ) as fetch:
            response = api_client.get("/api/restaurants/101/menu?lat=12.97&lng=77.59")

        fetch.assert_called_once_with("101", 12.97, 77.59)
        assert response.status_code == 200
        assert response.json() == {
            "data": [
                {
                    "id": "9001",
                    "name": "Margherita",
                    "description": "",
                    "price": 250.0,
                    "isVeg": True,
                },
                {
                    "id": "9002",
                    "name": "Chicken Supreme",
                    "description": "",
                    "price": 450.5,
                    "isVeg": False,
                },
            ]
        }

    def test_empty_menu_is_empty_list(self, api_client: DjangoClient):
        with patch("apps.web.restaurants.views.fetch_menu", return_value=[]):
            response = api_client.get("/api/restaurants/101/menu")

        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_upstream_failure_is_generic_500(self, api_client: DjangoClient):
        with patch(
            "apps.web.restaurants.views.fetch_menu",
            side_effect=UpstreamError("Upstream request failed"),
        ):
            response = api_client.get("/api/restaurants/101/menu")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch menu"}

    @respx.mock
    def test_price_normalized_end_to_end(self, api_client: DjangoClient):
        respx.get(UPSTREAM_MENU_URL).mock(
            return_value=httpx.Response(
                200,
                json={
                    "data": {
                        "cards": [
                            {
                                "groupedCard": {
                                    "cardGroupMap": {
                                        "REGULAR": {
                                            "cards": [
                                                {
                                                    "card": {
                                                        "card": {
                                                            "itemCards": [
                                                                {
                                                                    "card": {
                                                                        "info": {
                                                                            "id": "1",
                                                                            "name": "Thali",
                                                                            "price": 25000,
                                                                        }
                                                                    }
                                                                }
                                                            ]
                                                        }
                                                    }
                                                }
                                            ]
                                        }
                                    }
                                }
                            }
                        ]
                    }
                },
            )
        )

        response = api_client.get("/api/restaurants/101/menu")

        assert response.json()["data"][0]["price"] == 250.0
