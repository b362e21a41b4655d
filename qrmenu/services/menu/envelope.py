"""Success/failure response envelope."""
from datetime import datetime, timezone
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from pydantic import BaseModel

from qrmenu.core.errors import ApiRequestFailedError


T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapped around every API payload."""

    success: bool
    data: Optional[T] = None
    message: str = ""
    timestamp: str = ""


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def wrap(data: T, message: str = "OK") -> ApiResponse[T]:
    """Build a success envelope around ``data``."""
    return ApiResponse(
        success=True,
        data=data,
        message=message,
        timestamp=utc_timestamp(),
    )


def error_body(message: str) -> Dict[str, Any]:
    """Build a failure envelope body."""
    return {
        "success": False,
        "message": message,
        "timestamp": utc_timestamp(),
    }


def unwrap(envelope: Union[ApiResponse, Dict[str, Any]]) -> Any:
    """Return the envelope's payload, or raise if it reports failure."""
    if isinstance(envelope, dict):
        success = envelope.get("success") is True
        data = envelope.get("data")
        message = envelope.get("message")
    else:
        success = envelope.success
        data = envelope.data
        message = envelope.message

    if not success:
        raise ApiRequestFailedError(message or "API request failed")
    return data
