"""Menu error types shared by the server and the client."""
from typing import Dict, Optional


class MenuError(Exception):
    """Base class for all menu errors."""


class MenuValidationError(MenuError):
    """A request is missing required fields or carries invalid values.

    ``errors`` maps field names to a user-facing message so a form can show
    each problem next to its input.
    """

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


class InvalidCategoryError(MenuValidationError):
    """Category is not one of DRINK, FOOD or FOOD_SET."""

    def __init__(self, category: object):
        message = 'Invalid category. Must be "DRINK", "FOOD" or "FOOD_SET"'
        super().__init__(message, errors={"category": message})
        self.category = category


class MenuItemNotFoundError(MenuError):
    """No menu item has the requested id."""

    def __init__(self, item_id: Optional[int] = None, message: Optional[str] = None):
        super().__init__(message or "Menu item not found")
        self.item_id = item_id


class ApiError(MenuError):
    """A client call failed. ``status`` is 0 when no response was received."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class ApiRequestFailedError(ApiError):
    """The response envelope reported ``success: false``."""

    def __init__(self, message: str, status: int = 200):
        super().__init__(status, message)


class NetworkError(ApiError):
    """The request never produced a response."""

    def __init__(self, message: str, status: int = 0):
        super().__init__(status, message)


class RequestTimeoutError(NetworkError):
    """The request was cancelled after the client timeout elapsed."""

    def __init__(self, message: str = "Request timeout"):
        super().__init__(message, status=408)


class UnexpectedApiError(ApiError):
    """Any other failure: 5xx, unknown status codes, unparseable bodies."""
