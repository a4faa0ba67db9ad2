"""
Service for managing webhook endpoints registered with the platform.
"""

from typing import Any, Dict, List, Optional

from ..models.projects import PaginatedResponse
from .base import BaseService


class Webhooks(BaseService):
    """CRUD and delivery history for webhook subscriptions."""

    async def list(self) -> Any:
        return await self._client.get("/webhooks")

    async def get(self, webhook_id: str) -> Dict[str, Any]:
        return await self._client.get(f"/webhooks/{webhook_id}")

    async def create(
        self,
        url: str,
        events: List[str],
        secret: Optional[str] = None,
        active: bool = True,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"url": url, "events": events, "active": active}
        if secret:
            payload["secret"] = secret
        return await self._client.post("/webhooks", payload)

    async def update(self, webhook_id: str, **attributes: Any) -> Dict[str, Any]:
        return await self._client.patch(f"/webhooks/{webhook_id}", attributes)

    async def delete(self, webhook_id: str) -> Any:
        return await self._client.delete(f"/webhooks/{webhook_id}")

    async def test(self, webhook_id: str) -> Dict[str, Any]:
        """Ask the platform to send a test event to the endpoint."""
        return await self._client.post(f"/webhooks/{webhook_id}/test")

    async def deliveries(
        self, webhook_id: str, page: int = 1, limit: int = 10
    ) -> PaginatedResponse[Dict[str, Any]]:
        response = await self._client.get(
            f"/webhooks/{webhook_id}/deliveries", {"page": page, "limit": limit}
        )
        return PaginatedResponse.from_dict(response)
