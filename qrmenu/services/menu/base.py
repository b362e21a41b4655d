"""Menu models and the menu provider interface."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Menu category as stored and sent over the wire."""

    DRINK = "DRINK"
    FOOD = "FOOD"
    FOOD_SET = "FOOD_SET"


class DisplayCategory(str, Enum):
    """Menu category as shown to end users."""

    DRINK = "drink"
    FOOD = "food"
    FOOD_SET = "food_set"


class MenuItemRequest(BaseModel):
    """Admin request body for creating or replacing a menu item.

    Every field is optional here; required fields are enforced by
    ``validate_item_request`` so that blank and missing values are reported
    the same way.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    size: Optional[str] = None
    price: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = Field(default=None, alias="isActive")


class MenuItemData(BaseModel):
    """Validated, editable fields of a menu item."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    size: str
    price: str
    image: Optional[str] = None
    category: Category
    description: Optional[str] = None
    is_active: bool = Field(default=True, alias="isActive")


class MenuItem(MenuItemData):
    """Menu item in wire/storage form."""

    id: int
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class DisplayMenuItem(BaseModel):
    """Menu item ready for display: lowercase category, image always set."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    size: str
    price: str
    image: str
    category: DisplayCategory
    description: Optional[str] = None
    is_active: bool = Field(default=True, alias="isActive")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class Menu(BaseModel):
    """Menu model."""

    items: List[MenuItem]


class MenuGroups(BaseModel):
    """Menu partitioned by category."""

    model_config = ConfigDict(populate_by_name=True)

    drinks: List[MenuItem] = []
    foods: List[MenuItem] = []
    food_sets: List[MenuItem] = Field(default=[], alias="foodSets")


class DisplayMenuGroups(BaseModel):
    """Display-ready menu partitioned by category."""

    model_config = ConfigDict(populate_by_name=True)

    drinks: List[DisplayMenuItem] = []
    foods: List[DisplayMenuItem] = []
    food_sets: List[DisplayMenuItem] = Field(default=[], alias="foodSets")


class MenuProvider(ABC):
    """Abstract base class for menu storage backends."""

    @abstractmethod
    async def list_items(self) -> List[MenuItem]:
        """Get all items in insertion order."""
        pass

    @abstractmethod
    async def get_item(self, item_id: int) -> Optional[MenuItem]:
        """Get an item by id."""
        pass

    @abstractmethod
    async def add_item(self, data: MenuItemData) -> MenuItem:
        """Store a new item and assign its id."""
        pass

    @abstractmethod
    async def replace_item(
        self, item_id: int, data: MenuItemData
    ) -> Optional[MenuItem]:
        """Replace an item's fields in place. Returns None if absent."""
        pass

    @abstractmethod
    async def remove_item(self, item_id: int) -> Optional[MenuItem]:
        """Remove an item. Returns None if absent."""
        pass
