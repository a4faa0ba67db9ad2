"""
Service for platform, project and investor analytics.
"""

from typing import Any, Dict, Optional

from .base import BaseService


class Analytics(BaseService):

    async def platform(self) -> Dict[str, Any]:
        return await self._client.get("/analytics/platform")

    async def project(self, project_id: str, period: str = "30d") -> Dict[str, Any]:
        return await self._client.get(
            f"/analytics/projects/{project_id}", {"period": period}
        )

    async def investor(self, investor_address: str) -> Dict[str, Any]:
        return await self._client.get(f"/analytics/investors/{investor_address}")

    async def market_trends(self, period: str = "30d") -> Dict[str, Any]:
        return await self._client.get("/analytics/market-trends", {"period": period})

    async def export(
        self,
        data_type: str,
        format: str = "csv",
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Request an analytics export.

        Args:
            data_type: What to export ("investments", "projects", ...)
            format: "csv" or "json"
            start_date: Range start (ISO 8601)
            end_date: Range end (ISO 8601)
            project_id: Restrict the export to one project
        """
        payload = {"type": data_type, "format": format}
        if start_date:
            payload["start_date"] = start_date
        if end_date:
            payload["end_date"] = end_date
        if project_id:
            payload["project_id"] = project_id
        return await self._client.post("/analytics/export", payload)
