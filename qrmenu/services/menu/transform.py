"""Conversion of wire-form menu items into display items."""
from typing import Iterable, List

from qrmenu.services.menu.base import (
    DisplayMenuGroups,
    DisplayMenuItem,
    MenuGroups,
    MenuItem,
)
from qrmenu.services.menu.categories import default_image, to_display_category


def transform_menu_item(item: MenuItem) -> DisplayMenuItem:
    """Convert one item, regardless of whether it is active."""
    image = (item.image or "").strip()
    return DisplayMenuItem(
        id=item.id,
        name=item.name,
        size=item.size,
        price=item.price,
        image=image or default_image(item.category),
        category=to_display_category(item.category),
        description=item.description,
        is_active=item.is_active,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


def transform_menu_items(items: Iterable[MenuItem]) -> List[DisplayMenuItem]:
    """Convert the active items, keeping their relative order."""
    return [transform_menu_item(item) for item in items if item.is_active]


def transform_menu_groups(groups: MenuGroups) -> DisplayMenuGroups:
    """Convert each bucket of a separated menu."""
    return DisplayMenuGroups(
        drinks=transform_menu_items(groups.drinks),
        foods=transform_menu_items(groups.foods),
        food_sets=transform_menu_items(groups.food_sets),
    )
