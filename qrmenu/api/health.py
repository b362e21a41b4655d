"""Health check and diagnostic endpoints."""
import logging
from fastapi import APIRouter, Request

from qrmenu.services.menu.envelope import utc_timestamp, wrap

router = APIRouter()
logger = logging.getLogger(__name__)

MENU_ENDPOINTS = [
    "/api/menu",
    "/api/menu/{category}",
    "/api/menu-separated",
    "/api/items",
    "/api/items/{item_id}",
]


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {"status": "healthy"}


@router.get("/api/test")
async def api_test(request: Request):
    """Report that the API is up and list the menu endpoints."""
    logger.debug(
        f"[TEST] Diagnostic requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return wrap(
        {
            "message": "API is working!",
            "timestamp": utc_timestamp(),
            "endpoints": MENU_ENDPOINTS,
        },
        "API is working!",
    )
