"""Menu repository."""
import logging
from typing import Dict, List, Optional, Union

from qrmenu.core.errors import MenuItemNotFoundError
from qrmenu.services.menu.base import (
    Category,
    MenuGroups,
    MenuItem,
    MenuItemRequest,
    MenuProvider,
)
from qrmenu.services.menu.categories import category_label, parse_category
from qrmenu.services.menu.validation import validate_item_request


logger = logging.getLogger(__name__)


class MenuRepository:
    """Repository for menu operations.

    Validates admin input and delegates storage to a ``MenuProvider``.
    """

    def __init__(self, provider: MenuProvider):
        self.provider = provider

    async def list_items(
        self, category: Optional[Union[str, Category]] = None
    ) -> List[MenuItem]:
        """Get all items, or only those in ``category``."""
        items = await self.provider.list_items()
        if category is None:
            return items
        wanted = parse_category(category)
        return [item for item in items if item.category == wanted]

    async def list_by_category_groups(self) -> MenuGroups:
        """Get all items partitioned into drinks, foods and food sets."""
        buckets: Dict[Category, List[MenuItem]] = {
            category: [] for category in Category
        }
        for item in await self.provider.list_items():
            buckets[item.category].append(item)
        return MenuGroups(
            drinks=buckets[Category.DRINK],
            foods=buckets[Category.FOOD],
            food_sets=buckets[Category.FOOD_SET],
        )

    async def get_item(self, item_id: int) -> MenuItem:
        """Get an item by id."""
        item = await self.provider.get_item(item_id)
        if item is None:
            raise MenuItemNotFoundError(item_id)
        return item

    async def create_item(self, request: MenuItemRequest) -> MenuItem:
        """Validate and add a new item."""
        data = validate_item_request(request)
        item = await self.provider.add_item(data)
        logger.info(
            f"[MENU] Item created - id: {item.id}, name: {item.name}, "
            f"category: {category_label(item.category)}"
        )
        return item

    async def update_item(self, item_id: int, request: MenuItemRequest) -> MenuItem:
        """Replace all editable fields of an existing item."""
        if await self.provider.get_item(item_id) is None:
            raise MenuItemNotFoundError(item_id)
        data = validate_item_request(request)
        item = await self.provider.replace_item(item_id, data)
        if item is None:
            raise MenuItemNotFoundError(item_id)
        logger.info(f"[MENU] Item updated - id: {item.id}, name: {item.name}")
        return item

    async def delete_item(self, item_id: int) -> MenuItem:
        """Remove an item and return it."""
        item = await self.provider.remove_item(item_id)
        if item is None:
            raise MenuItemNotFoundError(item_id)
        logger.info(f"[MENU] Item deleted - id: {item.id}, name: {item.name}")
        return item
