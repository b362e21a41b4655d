"""In-memory menu provider."""
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import yaml

from qrmenu.services.menu.base import MenuItem, MenuItemData, MenuProvider


logger = logging.getLogger(__name__)


class InMemoryMenuProvider(MenuProvider):
    """In-memory menu provider seeded from a YAML file.

    Items live for the lifetime of the process; restarting resets the menu
    to the seed file's contents.
    """

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional seed file path."""
        if menu_file is None:
            menu_file = Path(__file__).parent / "data" / "menu.yaml"
        self.menu_file = Path(menu_file)
        self._items: Optional[List[MenuItem]] = None

    def _load_items(self) -> List[MenuItem]:
        """Load seed items from YAML on first access."""
        if self._items is None:
            if not self.menu_file.exists():
                logger.warning(
                    f"[MENU] Seed file not found, starting empty - {self.menu_file}"
                )
                self._items = []
            else:
                with open(self.menu_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                items: List[MenuItem] = []
                seen_ids = set()
                for raw in data.get("items", []):
                    raw.setdefault("id", self._next_id(items))
                    item = MenuItem.model_validate(raw)
                    if item.id in seen_ids:
                        raise ValueError(
                            f"Duplicate menu item id {item.id} in {self.menu_file}"
                        )
                    seen_ids.add(item.id)
                    items.append(item)
                self._items = items
                logger.info(
                    f"[MENU] Seeded {len(items)} items from {self.menu_file.name}"
                )
        return self._items

    @staticmethod
    def _next_id(items: List[MenuItem]) -> int:
        return max((item.id for item in items), default=0) + 1

    def _index_of(self, item_id: int) -> Optional[int]:
        for index, item in enumerate(self._load_items()):
            if item.id == item_id:
                return index
        return None

    async def list_items(self) -> List[MenuItem]:
        """Get all items in insertion order."""
        return list(self._load_items())

    async def get_item(self, item_id: int) -> Optional[MenuItem]:
        """Get an item by id."""
        index = self._index_of(item_id)
        return None if index is None else self._load_items()[index]

    async def add_item(self, data: MenuItemData) -> MenuItem:
        """Append a new item with the next free id."""
        items = self._load_items()
        now = datetime.now(timezone.utc).isoformat()
        item = MenuItem(
            **data.model_dump(),
            id=self._next_id(items),
            created_at=now,
            updated_at=now,
        )
        items.append(item)
        return item

    async def replace_item(
        self, item_id: int, data: MenuItemData
    ) -> Optional[MenuItem]:
        """Replace an item's fields, keeping its id, position and creation time."""
        index = self._index_of(item_id)
        if index is None:
            return None
        items = self._load_items()
        item = MenuItem(
            **data.model_dump(),
            id=item_id,
            created_at=items[index].created_at,
            updated_at=datetime.now(timezone.utc).isoformat(),
        )
        items[index] = item
        return item

    async def remove_item(self, item_id: int) -> Optional[MenuItem]:
        """Remove an item by id."""
        index = self._index_of(item_id)
        if index is None:
            return None
        return self._load_items().pop(index)
