"""Sample upstream payloads shared by the adapter and view tests."""

import pytest


def restaurant_entry(
    restaurant_id: str,
    name: str,
    avg_rating: object = 4.0,
    cuisines: list[str] | None = None,
    **extra: object,
) -> dict:
    """One restaurant entry as it appears in a listing card."""
    return {
        "info": {
            "id": restaurant_id,
            "name": name,
            "avgRating": avg_rating,
            "cuisines": cuisines if cuisines is not None else ["North Indian"],
            "areaName": "Rohini",
            "costForTwo": "₹300 for two",
            "sla": {"slaString": "25-30 mins"},
            "cloudinaryImageId": f"img-{restaurant_id}",
            **extra,
        }
    }


@pytest.fixture
def listing_payload() -> dict:
    """Listing response mixing both card nestings plus unrelated cards."""
    return {
        "data": {
            "cards": [
                {"card": {"card": {"header": {"title": "What's on your mind?"}}}},
                {
                    "card": {
                        "card": {
                            "gridElements": {
                                "infoWithStyle": {
                                    "restaurants": [
                                        restaurant_entry(
                                            "101",
                                            "Pizza Hut",
                                            avg_rating=4.2,
                                            cuisines=["Italian", "Pizzas"],
                                        ),
                                        restaurant_entry("102", "Spice", "3.0"),
                                    ]
                                }
                            }
                        }
                    }
                },
                {
                    "card": {
                        "gridElements": {
                            "infoWithStyle": {
                                "restaurants": [
                                    restaurant_entry(
                                        "103", "Green Bowl", avg_rating="NEW", veg=True
                                    ),
                                ]
                            }
                        }
                    }
                },
            ]
        }
    }


@pytest.fixture
def menu_payload() -> dict:
    """Menu response with item cards at both card depths."""
    return {
        "data": {
            "cards": [
                {"card": {"card": {"info": {"name": "Pizza Hut"}}}},
                {
                    "groupedCard": {
                        "cardGroupMap": {
                            "REGULAR": {
                                "cards": [
                                    {"card": {"card": {"title": "Recommended"}}},
                                    {
                                        "card": {
                                            "card": {
                                                "itemCards": [
                                                    {
                                                        "card": {
                                                            "info": {
                                                                "id": 9001,
                                                                "name": "Margherita",
                                                                "description": "Classic",
                                                                "price": 25000,
                                                                "isVeg": 1,
                                                            }
                                                        }
                                                    },
                                                    {
                                                        "card": {
                                                            "info": {
                                                                "id": "9002",
                                                                "name": "Chicken Supreme",
                                                                "defaultPrice": 45050,
                                                            }
                                                        }
                                                    },
                                                ]
                                            }
                                        }
                                    },
                                    {
                                        "card": {
                                            "itemCards": [
                                                {
                                                    "card": {
                                                        "info": {
                                                            "id": "9003",
                                                            "name": "Garlic Bread",
                                                            "itemAttribute": {
                                                                "vegClassifier": "VEG"
                                                            },
                                                        }
                                                    }
                                                },
                                            ]
                                        }
                                    },
                                ]
                            }
                        }
                    }
                },
            ]
        }
    }
