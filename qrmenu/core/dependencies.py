"""FastAPI dependencies."""
from typing import Optional

from qrmenu.core.config import settings
from qrmenu.services.menu.repository import MenuRepository
from qrmenu.services.menu.in_memory_menu import InMemoryMenuProvider


# Process-wide store; lives until the process exits
_menu_repository: Optional[MenuRepository] = None


def get_menu_repository() -> MenuRepository:
    """Get menu repository instance."""
    global _menu_repository
    if _menu_repository is None:
        _menu_repository = MenuRepository(
            provider=InMemoryMenuProvider(menu_file=settings.menu_seed_file)
        )
    return _menu_repository
