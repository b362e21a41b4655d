"""Category normalization between wire and display form."""
from typing import Dict, Union

from qrmenu.core.config import settings
from qrmenu.core.errors import InvalidCategoryError
from qrmenu.services.menu.base import Category, DisplayCategory


_WIRE_TO_DISPLAY: Dict[Category, DisplayCategory] = {
    Category.DRINK: DisplayCategory.DRINK,
    Category.FOOD: DisplayCategory.FOOD,
    Category.FOOD_SET: DisplayCategory.FOOD_SET,
}

_DISPLAY_TO_WIRE: Dict[DisplayCategory, Category] = {
    display: wire for wire, display in _WIRE_TO_DISPLAY.items()
}

_LABELS: Dict[Category, str] = {
    Category.DRINK: "Drink",
    Category.FOOD: "Food",
    Category.FOOD_SET: "Food Set",
}


def parse_category(value: Union[str, Category, None]) -> Category:
    """Parse a wire-form category token, e.g. ``"FOOD_SET"``.

    Surrounding whitespace is ignored; case is not.
    """
    if isinstance(value, Category):
        return value
    if not isinstance(value, str):
        raise InvalidCategoryError(value)
    try:
        return Category(value.strip())
    except ValueError:
        raise InvalidCategoryError(value) from None


def parse_display_category(value: Union[str, DisplayCategory, None]) -> DisplayCategory:
    """Parse a display-form category token, e.g. ``"food_set"``."""
    if isinstance(value, DisplayCategory):
        return value
    if not isinstance(value, str):
        raise InvalidCategoryError(value)
    try:
        return DisplayCategory(value.strip())
    except ValueError:
        raise InvalidCategoryError(value) from None


def to_display_category(category: Union[str, Category]) -> DisplayCategory:
    """Map ``DRINK``/``FOOD``/``FOOD_SET`` to ``drink``/``food``/``food_set``."""
    return _WIRE_TO_DISPLAY[parse_category(category)]


def to_wire_category(category: Union[str, DisplayCategory]) -> Category:
    """Map ``drink``/``food``/``food_set`` to ``DRINK``/``FOOD``/``FOOD_SET``."""
    return _DISPLAY_TO_WIRE[parse_display_category(category)]


def default_image(category: Union[str, Category]) -> str:
    """Placeholder image URL for items without an image."""
    wire = parse_category(category)
    if wire is Category.DRINK:
        return settings.default_drink_image
    if wire is Category.FOOD:
        return settings.default_food_image
    return settings.default_food_set_image


def category_label(category: Union[str, Category]) -> str:
    """Human-readable category name."""
    return _LABELS[parse_category(category)]
