"""Menu item descriptors and normalization."""
from typing import Any, List

from pydantic import BaseModel

from tableorder.core.errors import ValidationError
from tableorder.services.coercion import coerce_price, coerce_text

DEFAULT_CATEGORY = "General"


class MenuItemData(BaseModel):
    """Normalized menu item, ready to be stored."""

    name: str
    price: float = 0.0
    category: str = DEFAULT_CATEGORY
    is_available: bool = True


def normalize_menu_item(raw: Any) -> MenuItemData:
    """Normalize one client or seed-file descriptor.

    Availability stays true unless the descriptor explicitly says false.
    """
    if not isinstance(raw, dict):
        raise ValidationError("menu items must be objects")
    available = raw.get("isAvailable", raw.get("is_available", True))
    return MenuItemData(
        name=coerce_text(raw.get("name")),
        price=coerce_price(raw.get("price")),
        category=coerce_text(raw.get("category"), DEFAULT_CATEGORY),
        is_available=available is not False,
    )


def normalize_menu_items(raw_items: Any) -> List[MenuItemData]:
    """Normalize a non-empty sequence of descriptors; every item needs a name."""
    if not isinstance(raw_items, list) or not raw_items:
        raise ValidationError("items required")
    items = [normalize_menu_item(raw) for raw in raw_items]
    if any(not item.name for item in items):
        raise ValidationError("every menu item needs a name")
    return items
