"""Tests for server-side restaurant filtering."""

import pytest
from foodcourt_schemas import Restaurant

from apps.web.restaurants.filters import (
    RestaurantQuery,
    filter_restaurants,
    parse_float,
)


@pytest.fixture
def restaurants() -> list[Restaurant]:
    return [
        Restaurant(id="1", name="Pizza Hut", cuisines=["Italian"], avg_rating=4.2),
        Restaurant(id="2", name="Spice", cuisines=["Indian"], avg_rating=3.0),
    ]


def _names(restaurants: list[Restaurant]) -> list[str]:
    return [r.name for r in restaurants]


class TestFilterRestaurants:
    """Tests for the three conjunctive filters."""

    def test_no_filters_returns_everything_in_order(self, restaurants):
        result = filter_restaurants(restaurants, RestaurantQuery())

        assert _names(result) == ["Pizza Hut", "Spice"]

    def test_min_rating_is_inclusive(self, restaurants):
        assert _names(
            filter_restaurants(restaurants, RestaurantQuery(min_rating=4))
        ) == ["Pizza Hut"]
        assert _names(
            filter_restaurants(restaurants, RestaurantQuery(min_rating=3.0))
        ) == ["Pizza Hut", "Spice"]

    @pytest.mark.parametrize("cuisine", ["italian", "ITALIAN", "Italian"])
    def test_cuisine_is_case_insensitive_exact(self, restaurants, cuisine):
        result = filter_restaurants(restaurants, RestaurantQuery(cuisine=cuisine))

        assert _names(result) == ["Pizza Hut"]

    def test_cuisine_does_not_match_substring(self, restaurants):
        result = filter_restaurants(restaurants, RestaurantQuery(cuisine="ital"))

        assert result == []

    def test_search_matches_name(self, restaurants):
        result = filter_restaurants(restaurants, RestaurantQuery(search="spice"))

        assert _names(result) == ["Spice"]

    def test_search_matches_cuisine_substring(self, restaurants):
        result = filter_restaurants(restaurants, RestaurantQuery(search="ind"))

        assert _names(result) == ["Spice"]

    def test_filters_are_conjunctive(self, restaurants):
        query = RestaurantQuery(search="pizza", min_rating=4.5)

        assert filter_restaurants(restaurants, query) == []


class TestRestaurantQuery:
    """Tests for query-string parsing."""

    def test_parses_all_params(self):
        query = RestaurantQuery.from_params(
            {
                "search": " pizza ",
                "minRating": "4",
                "cuisine": "Italian",
                "lat": "19.076",
                "lng": "72.8777",
            }
        )

        assert query.search == "pizza"
        assert query.min_rating == 4.0
        assert query.cuisine == "Italian"
        assert query.lat == 19.076
        assert query.lng == 72.8777

    def test_bad_numbers_fall_back(self):
        query = RestaurantQuery.from_params(
            {"minRating": "high", "lat": "north", "lng": ""}
        )

        assert query.min_rating == 0.0
        assert query.lat is None
        assert query.lng is None

    @pytest.mark.parametrize("value", [None, "", "  ", "abc", "nan", "inf"])
    def test_parse_float_rejects(self, value):
        assert parse_float(value) is None
