"""
Menu helpers - sample fallback menu and image URLs.
"""

from foodcourt_schemas import MenuItem

# Image CDN roots for cloudinaryImageId
MENU_IMAGE_CDN_URL = (
    "https://media-assets.swiggy.com/swiggy/image/upload/"
    "fl_lossy,f_auto,q_auto,w_660/"
)
CARD_IMAGE_CDN_URL = (
    "https://media-assets.swiggy.com/swiggy/image/upload/"
    "fl_lossy,f_auto,q_auto,w_508,h_320,c_fill/"
)

# Shown when the upstream has no menu for a restaurant
FALLBACK_MENU: tuple[MenuItem, ...] = (
    MenuItem(
        id="sample-1",
        name="Paneer Butter Masala",
        description="Cottage cheese cooked in rich, creamy tomato gravy.",
        price=249,
        is_veg=True,
    ),
    MenuItem(
        id="sample-2",
        name="Chicken Biryani",
        description="Fragrant basmati rice cooked with spiced chicken pieces.",
        price=299,
        is_veg=False,
    ),
    MenuItem(
        id="sample-3",
        name="Veg Hakka Noodles",
        description="Stir-fried noodles with veggies in Indo-Chinese style.",
        price=199,
        is_veg=True,
    ),
    MenuItem(
        id="sample-4",
        name="Cheese Burger",
        description="Grilled patty with cheese, lettuce & special sauce.",
        price=179,
        is_veg=False,
    ),
)


def image_url(cloudinary_image_id: str, card: bool = False) -> str | None:
    """CDN URL for an image id, or None when the restaurant has no image."""
    if not cloudinary_image_id:
        return None
    root = CARD_IMAGE_CDN_URL if card else MENU_IMAGE_CDN_URL
    return root + cloudinary_image_id


def with_fallback(items: list[MenuItem]) -> tuple[list[MenuItem], bool]:
    """
    The items to display.

    Returns:
        (items, is_fallback): the sample menu and True when `items` is empty.
    """
    if items:
        return items, False
    return list(FALLBACK_MENU), True
