"""
Delivery location presets and name/coordinate resolution.

Restaurant listings are localized by coordinates, so every location the user
picks has to resolve to a (lat, lng) pair. Typed names resolve against a
small set of preset cities; device coordinates are labelled with the
nearest preset.
"""

from pydantic import BaseModel


class Location(BaseModel):
    """A labelled delivery point."""

    name: str
    lat: float
    lng: float


DEFAULT_LOCATION = Location(name="Delhi, India", lat=28.7040592, lng=77.1024902)

CITY_PRESETS: tuple[Location, ...] = (
    DEFAULT_LOCATION,
    Location(name="Mumbai, Maharashtra", lat=19.076, lng=72.8777),
    Location(name="Pune, Maharashtra", lat=18.5204, lng=73.8567),
    Location(name="Bengaluru, Karnataka", lat=12.9716, lng=77.5946),
    Location(name="Hyderabad, Telangana", lat=17.385, lng=78.4867),
    Location(name="Kolkata, West Bengal", lat=22.5726, lng=88.3639),
)


def match_location_name(name: str, current: Location | None = None) -> Location:
    """
    Resolve a typed location name.

    Resolution order:
    1. Blank input keeps the current location (or the default).
    2. Case-insensitive exact match on a preset returns the preset.
    3. The first preset whose name contains the input supplies coordinates;
       the typed label is kept.
    4. Anything else keeps the current coordinates under the new label.
    """
    typed = name.strip()
    if not typed:
        return current or DEFAULT_LOCATION

    needle = typed.lower()
    for city in CITY_PRESETS:
        if city.name.lower() == needle:
            return city

    for city in CITY_PRESETS:
        if needle in city.name.lower():
            return city.model_copy(update={"name": typed})

    base = current or DEFAULT_LOCATION
    return base.model_copy(update={"name": typed})


def find_nearest_city(lat: float, lng: float) -> Location:
    """
    Label raw coordinates with the nearest preset city.

    Distance is squared Euclidean in degrees, which is fine for choosing
    between a handful of far-apart cities. The real coordinates are kept.
    """
    nearest = min(
        CITY_PRESETS,
        key=lambda city: (city.lat - lat) ** 2 + (city.lng - lng) ** 2,
    )
    return Location(name=nearest.name, lat=lat, lng=lng)
