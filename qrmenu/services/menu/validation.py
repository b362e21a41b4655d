"""Menu item request validation."""
from typing import Dict, Optional

from qrmenu.core.errors import MenuValidationError
from qrmenu.services.menu.base import MenuItemData, MenuItemRequest
from qrmenu.services.menu.categories import default_image, parse_category


MISSING_FIELDS_MESSAGE = (
    "Missing required fields. Name, size, price, and category are required."
)

REQUIRED_FIELDS = ("name", "size", "price", "category")


def _clean(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ""


def validate_item_request(request: MenuItemRequest) -> MenuItemData:
    """
    Validate an admin request and return the normalized item fields.

    Text fields are trimmed, a blank description is dropped and a blank
    image is replaced by the category default.

    Raises:
        MenuValidationError: a required field is missing or blank
        InvalidCategoryError: category is not a known wire value
    """
    errors: Dict[str, str] = {}
    for field in REQUIRED_FIELDS:
        if not _clean(getattr(request, field)):
            errors[field] = f"{field.capitalize()} is required"
    if errors:
        raise MenuValidationError(MISSING_FIELDS_MESSAGE, errors=errors)

    category = parse_category(request.category)
    description = _clean(request.description) or None

    return MenuItemData(
        name=_clean(request.name),
        size=_clean(request.size),
        price=_clean(request.price),
        image=_clean(request.image) or default_image(category),
        category=category,
        description=description,
        is_active=True if request.is_active is None else request.is_active,
    )
