"""Menu API endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from qrmenu.core.dependencies import get_menu_repository
from qrmenu.core.errors import MenuItemNotFoundError, MenuValidationError
from qrmenu.services.menu.base import Menu, MenuGroups, MenuItem, MenuItemRequest
from qrmenu.services.menu.envelope import ApiResponse, wrap
from qrmenu.services.menu.repository import MenuRepository


router = APIRouter()
logger = logging.getLogger(__name__)


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.get("/api/menu", response_model=ApiResponse[Menu])
async def get_menu(
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get the full menu."""
    logger.info(f"[MENU] Request received - Client: {_client_host(request)}")

    try:
        items = await menu_repository.list_items()
        logger.info(f"[MENU] Menu loaded - {len(items)} items")
        return wrap(Menu(items=items), "Menu retrieved successfully")

    except Exception as e:
        logger.error(
            f"[MENU] Error fetching menu - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail="Failed to fetch menu items")


@router.get("/api/menu/{category}", response_model=ApiResponse[Menu])
async def get_menu_by_category(
    category: str,
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get menu items in one category (DRINK, FOOD or FOOD_SET)."""
    logger.info(
        f"[MENU] Category request received - category: {category}, "
        f"Client: {_client_host(request)}"
    )

    try:
        items = await menu_repository.list_items(category)
        logger.info(f"[MENU] Category {category} loaded - {len(items)} items")
        return wrap(Menu(items=items), "Menu retrieved successfully")

    except MenuValidationError as e:
        logger.warning(f"[MENU] Invalid category requested - {category}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(
            f"[MENU] Error fetching menu by category - category: {category}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail="Failed to fetch menu items")


@router.get("/api/menu-separated", response_model=ApiResponse[MenuGroups])
async def get_menu_separated(
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get drinks, foods and food sets as separate lists."""
    logger.info(f"[MENU] Separated menu requested - Client: {_client_host(request)}")

    try:
        groups = await menu_repository.list_by_category_groups()
        logger.info(
            f"[MENU] Separated menu loaded - drinks: {len(groups.drinks)}, "
            f"foods: {len(groups.foods)}, food sets: {len(groups.food_sets)}"
        )
        return wrap(groups, "Menu retrieved successfully")

    except Exception as e:
        logger.error(
            f"[MENU] Error fetching separated menu - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail="Failed to fetch menu items")


@router.post("/api/items", status_code=201, response_model=ApiResponse[MenuItem])
async def create_item(
    item_request: MenuItemRequest,
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Add a new menu item."""
    logger.info(
        f"[ITEMS] Create requested - name: {item_request.name}, "
        f"category: {item_request.category}, Client: {_client_host(request)}"
    )

    try:
        item = await menu_repository.create_item(item_request)
        return wrap(item, "Menu item created successfully")

    except MenuValidationError as e:
        logger.warning(f"[ITEMS] Create rejected - {e.message} {e.errors}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(
            f"[ITEMS] Error adding menu item - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail="Failed to add menu item")


@router.put("/api/items/{item_id}", response_model=ApiResponse[MenuItem])
async def update_item(
    item_id: int,
    item_request: MenuItemRequest,
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Replace all editable fields of a menu item."""
    logger.info(
        f"[ITEMS] Update requested - id: {item_id}, Client: {_client_host(request)}"
    )

    try:
        item = await menu_repository.update_item(item_id, item_request)
        return wrap(item, "Menu item updated successfully")

    except MenuItemNotFoundError as e:
        logger.warning(f"[ITEMS] Update target not found - id: {item_id}")
        raise HTTPException(status_code=404, detail=str(e))
    except MenuValidationError as e:
        logger.warning(f"[ITEMS] Update rejected - id: {item_id}, {e.message} {e.errors}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(
            f"[ITEMS] Error updating menu item - id: {item_id}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail="Failed to update menu item")


@router.delete("/api/items/{item_id}", response_model=ApiResponse[MenuItem])
async def delete_item(
    item_id: int,
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Remove a menu item."""
    logger.info(
        f"[ITEMS] Delete requested - id: {item_id}, Client: {_client_host(request)}"
    )

    try:
        item = await menu_repository.delete_item(item_id)
        return wrap(item, "Menu item deleted successfully")

    except MenuItemNotFoundError as e:
        logger.warning(f"[ITEMS] Delete target not found - id: {item_id}")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(
            f"[ITEMS] Error deleting menu item - id: {item_id}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail="Failed to delete menu item")
