"""
Base class for API service façades.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..client import XRPLSaleClient


class BaseService:
    """Holds the client that service methods delegate to."""

    def __init__(self, client: "XRPLSaleClient"):
        self._client = client

    @property
    def client(self) -> "XRPLSaleClient":
        return self._client


def unwrap(response: Any) -> Any:
    """Return the ``data`` section of an enveloped response, if present."""
    if isinstance(response, dict) and isinstance(response.get("data"), dict):
        return response["data"]
    return response
