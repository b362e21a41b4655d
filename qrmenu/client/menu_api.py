"""Client for the menu API."""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from qrmenu.core.config import settings
from qrmenu.core.errors import (
    InvalidCategoryError,
    MenuItemNotFoundError,
    MenuValidationError,
    NetworkError,
    RequestTimeoutError,
    UnexpectedApiError,
)
from qrmenu.services.menu.base import (
    Category,
    DisplayCategory,
    DisplayMenuGroups,
    DisplayMenuItem,
    Menu,
    MenuGroups,
    MenuItem,
    MenuItemRequest,
)
from qrmenu.services.menu.categories import parse_category, to_wire_category
from qrmenu.services.menu.envelope import unwrap
from qrmenu.services.menu.transform import (
    transform_menu_groups,
    transform_menu_item,
    transform_menu_items,
)
from qrmenu.services.menu.validation import validate_item_request

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class MenuApiClient:
    """HTTP client for the menu endpoints.

    Every call unwraps the response envelope and converts items to their
    display form. Failures surface as ``MenuError`` subclasses:
    ``MenuValidationError`` (400), ``MenuItemNotFoundError`` (404),
    ``RequestTimeoutError`` / ``NetworkError`` for transport problems, and
    ``UnexpectedApiError`` for everything else.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. "http://localhost:8000". Defaults to settings.
            timeout: Seconds before a call is cancelled. Defaults to settings.
            transport: Optional httpx transport, e.g. to call an app in-process.
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = settings.request_timeout if timeout is None else timeout
        self._transport = transport

    async def _request(
        self,
        method: str,
        endpoint: str,
        json: Optional[Dict[str, Any]] = None,
        model: Optional[Type[ModelT]] = None,
    ) -> Any:
        """Send a request and return the unwrapped payload.

        When ``model`` is given the payload is validated into it. The whole
        call, connect through body read, shares one ``timeout`` deadline.
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"Requesting {method} {url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await asyncio.wait_for(
                    client.request(method, url, json=json), timeout=self.timeout
                )
        except asyncio.TimeoutError as e:
            logger.error(f"Request to {url} exceeded {self.timeout}s deadline")
            raise RequestTimeoutError() from e
        except httpx.TimeoutException as e:
            logger.error(f"Request to {url} timed out after {self.timeout}s: {e}")
            raise RequestTimeoutError() from e
        except httpx.RequestError as e:
            logger.error(f"Network error calling {url}: {e}")
            raise NetworkError(f"Network error: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.is_success:
            message = f"HTTP error! status: {response.status_code}"
            if isinstance(body, dict) and body.get("message"):
                message = body["message"]
            logger.error(f"API response not OK: {response.status_code} {message}")
            if response.status_code == 400:
                raise MenuValidationError(message)
            if response.status_code == 404:
                raise MenuItemNotFoundError(message=message)
            if response.status_code == 408:
                raise RequestTimeoutError(message)
            raise UnexpectedApiError(response.status_code, message)

        if not isinstance(body, dict):
            raise UnexpectedApiError(
                response.status_code, f"Unexpected response body from {endpoint}"
            )
        data = unwrap(body)
        if model is None:
            return data

        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Malformed payload from {endpoint}: {e}")
            raise UnexpectedApiError(
                response.status_code, f"Malformed response payload from {endpoint}"
            ) from e

    @staticmethod
    def _wire_category(category: Union[str, DisplayCategory, Category]) -> Category:
        """Accept a wire (``FOOD_SET``) or display (``food_set``) category."""
        try:
            return parse_category(category)
        except InvalidCategoryError:
            return to_wire_category(category)

    @classmethod
    def _prepare(cls, request: MenuItemRequest) -> Dict[str, Any]:
        """Check an item request locally and build the JSON body.

        A display-form category (``food_set``) is converted to wire form.
        """
        if request.category:
            try:
                wire = cls._wire_category(request.category)
            except InvalidCategoryError:
                pass
            else:
                request = request.model_copy(update={"category": wire.value})
        validate_item_request(request)
        return request.model_dump(by_alias=True, exclude_none=True)

    async def test(self) -> Dict[str, Any]:
        """Call the diagnostic endpoint."""
        return await self._request("GET", "/api/test")

    async def get_menu(self) -> List[DisplayMenuItem]:
        """Get all active items."""
        menu = await self._request("GET", "/api/menu", model=Menu)
        return transform_menu_items(menu.items)

    async def get_menu_by_category(
        self, category: Union[str, DisplayCategory, Category]
    ) -> List[DisplayMenuItem]:
        """Get active items in one category, given in wire or display form."""
        wire = self._wire_category(category)
        menu = await self._request("GET", f"/api/menu/{wire.value}", model=Menu)
        return transform_menu_items(menu.items)

    async def get_menu_separated(self) -> DisplayMenuGroups:
        """Get active items split into drinks, foods and food sets."""
        groups = await self._request("GET", "/api/menu-separated", model=MenuGroups)
        return transform_menu_groups(groups)

    async def create_item(self, request: MenuItemRequest) -> DisplayMenuItem:
        """Add a menu item."""
        body = self._prepare(request)
        item = await self._request("POST", "/api/items", json=body, model=MenuItem)
        return transform_menu_item(item)

    async def update_item(
        self, item_id: int, request: MenuItemRequest
    ) -> DisplayMenuItem:
        """Replace all editable fields of a menu item."""
        body = self._prepare(request)
        item = await self._request(
            "PUT", f"/api/items/{item_id}", json=body, model=MenuItem
        )
        return transform_menu_item(item)

    async def delete_item(self, item_id: int) -> MenuItem:
        """Remove a menu item and return it as it was stored."""
        return await self._request("DELETE", f"/api/items/{item_id}", model=MenuItem)
