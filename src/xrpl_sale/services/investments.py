"""
Service for creating and tracking investments in token sales.
"""

from typing import Any, Dict, Optional

from ..models.projects import PaginatedResponse
from .base import BaseService


class Investments(BaseService):
    """Investment creation, lookup and simulation."""

    async def list(
        self,
        project_id: Optional[str] = None,
        investor_address: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> PaginatedResponse[Dict[str, Any]]:
        response = await self._client.get("/investments", {
            "project_id": project_id,
            "investor_address": investor_address,
            "status": status,
            "page": page,
            "limit": limit,
        })
        return PaginatedResponse.from_dict(response)

    async def get(self, investment_id: str) -> Dict[str, Any]:
        return await self._client.get(f"/investments/{investment_id}")

    async def create(
        self,
        project_id: str,
        amount_xrp: str,
        **attributes: Any,
    ) -> Dict[str, Any]:
        """
        Create an investment.

        Amounts are strings so XRP values keep their exact decimal form.
        Note that a retried POST can be submitted twice if the first
        attempt reached the server.
        """
        payload = {"project_id": project_id, "amount_xrp": str(amount_xrp)}
        payload.update(attributes)
        return await self._client.post("/investments", payload)

    async def by_project(
        self, project_id: str, page: int = 1, limit: int = 10
    ) -> PaginatedResponse[Dict[str, Any]]:
        response = await self._client.get(
            f"/projects/{project_id}/investments", {"page": page, "limit": limit}
        )
        return PaginatedResponse.from_dict(response)

    async def by_investor(
        self, investor_address: str, page: int = 1, limit: int = 10
    ) -> PaginatedResponse[Dict[str, Any]]:
        response = await self._client.get(
            f"/investors/{investor_address}/investments", {"page": page, "limit": limit}
        )
        return PaginatedResponse.from_dict(response)

    async def simulate(self, project_id: str, amount_xrp: str) -> Dict[str, Any]:
        """Preview the tokens an investment would receive without creating it."""
        return await self._client.post("/investments/simulate", {
            "project_id": project_id,
            "amount_xrp": str(amount_xrp),
        })
