"""
Service for managing token sale projects.

Example:
    projects = await client.projects.list(status="active", page=1, limit=10)
    project = await client.projects.get("proj_123")
    project = await client.projects.create(
        name="My DeFi Protocol",
        token_symbol="MDP",
        total_supply="100000000",
    )
"""

from typing import Any, Dict, List, Optional

from ..http_client import ApiError
from ..models.projects import PaginatedResponse, Project
from .base import BaseService, unwrap


class Projects(BaseService):
    """Create, update, launch and inspect token sale projects."""

    async def list(
        self,
        status: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> PaginatedResponse[Project]:
        """
        List projects with optional filtering and pagination.

        Args:
            status: Filter by project status
            page: Page number (1-based)
            limit: Number of items per page
            sort_by: Field to sort by
            sort_order: Sort order ("asc" or "desc")
        """
        response = await self._client.get("/projects", {
            "status": status,
            "page": page,
            "limit": limit,
            "sort_by": sort_by,
            "sort_order": sort_order,
        })
        return PaginatedResponse.from_dict(response, Project.from_dict)

    async def active(self, page: int = 1, limit: int = 10) -> PaginatedResponse[Project]:
        return await self.list(status="active", page=page, limit=limit)

    async def upcoming(self, page: int = 1, limit: int = 10) -> PaginatedResponse[Project]:
        return await self.list(status="upcoming", page=page, limit=limit)

    async def completed(self, page: int = 1, limit: int = 10) -> PaginatedResponse[Project]:
        return await self.list(status="completed", page=page, limit=limit)

    async def get(self, project_id: str) -> Project:
        """Get a project by ID. Raises NotFoundError if it doesn't exist."""
        response = await self._client.get(f"/projects/{project_id}")
        return _project(response)

    async def create(self, **attributes: Any) -> Project:
        """
        Create a new project.

        Common attributes: name, description, token_symbol, total_supply,
        tiers, sale_start_date and sale_end_date (ISO 8601).
        Raises ValidationError if the platform rejects them.
        """
        response = await self._client.post("/projects", attributes)
        return _project(response)

    async def update(self, project_id: str, **attributes: Any) -> Project:
        response = await self._client.patch(f"/projects/{project_id}", attributes)
        return _project(response)

    async def launch(self, project_id: str) -> Project:
        """Launch a project (make it active)."""
        return await self._transition(project_id, "launch")

    async def pause(self, project_id: str) -> Project:
        return await self._transition(project_id, "pause")

    async def resume(self, project_id: str) -> Project:
        return await self._transition(project_id, "resume")

    async def cancel(self, project_id: str) -> Project:
        return await self._transition(project_id, "cancel")

    async def stats(self, project_id: str) -> Dict[str, Any]:
        return await self._client.get(f"/projects/{project_id}/stats")

    async def investors(
        self, project_id: str, page: int = 1, limit: int = 10
    ) -> PaginatedResponse[Dict[str, Any]]:
        response = await self._client.get(
            f"/projects/{project_id}/investors", {"page": page, "limit": limit}
        )
        return PaginatedResponse.from_dict(response)

    async def tiers(self, project_id: str) -> Any:
        return await self._client.get(f"/projects/{project_id}/tiers")

    async def update_tiers(self, project_id: str, tiers: List[Dict[str, Any]]) -> Any:
        """Replace the tier configuration of a project."""
        return await self._client.put(f"/projects/{project_id}/tiers", {"tiers": tiers})

    async def search(
        self,
        query: str,
        status: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> PaginatedResponse[Project]:
        response = await self._client.get("/projects/search", {
            "q": query,
            "status": status,
            "page": page,
            "limit": limit,
        })
        return PaginatedResponse.from_dict(response, Project.from_dict)

    async def featured(self, limit: int = 5) -> List[Project]:
        response = await self._client.get("/projects/featured", {"limit": limit})
        return [Project.from_dict(item) for item in _data_list(response)]

    async def trending(self, period: str = "24h", limit: int = 10) -> List[Project]:
        """Trending projects for a period ("24h", "7d" or "30d")."""
        response = await self._client.get(
            "/projects/trending", {"period": period, "limit": limit}
        )
        return [Project.from_dict(item) for item in _data_list(response)]

    async def _transition(self, project_id: str, action: str) -> Project:
        response = await self._client.post(f"/projects/{project_id}/{action}")
        return _project(response)


def _project(response: Any) -> Project:
    data = unwrap(response)
    if not isinstance(data, dict):
        raise ApiError(
            f"Unexpected project response: expected an object, got {type(data).__name__}",
            details=data,
        )
    return Project.from_dict(data)


def _data_list(response: Any) -> List[Dict[str, Any]]:
    items = response.get("data") if isinstance(response, dict) else response
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]
