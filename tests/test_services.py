# -*- coding: utf-8 -*-
"""
Tests for the API service façades.
"""

from unittest.mock import AsyncMock, patch

import pytest

from xrpl_sale.http_client import ApiError
from xrpl_sale.models import HttpMethod, PaginatedResponse, Project


@pytest.fixture
def mock_request(client):
    """Patch the client's request pipeline; tests set the return value."""
    with patch.object(client, "request", new=AsyncMock(return_value={})) as request:
        yield request


def last_spec(mock_request):
    return mock_request.await_args.args[0]


class TestProjects:

    @pytest.mark.asyncio
    async def test_list_returns_typed_page(self, client, mock_request, projects_page_data):
        mock_request.return_value = projects_page_data

        page = await client.projects.list(status="active", page=1, limit=2)

        spec = last_spec(mock_request)
        assert spec.method is HttpMethod.GET
        assert spec.path == "/projects"
        assert spec.query["status"] == "active"
        assert isinstance(page, PaginatedResponse)
        assert [p.id for p in page.data] == ["proj_123", "proj_456"]
        assert page.total == 5
        assert page.has_more is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("shortcut,status", [
        ("active", "active"),
        ("upcoming", "upcoming"),
        ("completed", "completed"),
    ])
    async def test_status_shortcuts(self, client, mock_request, shortcut, status):
        mock_request.return_value = {"data": []}

        page = await getattr(client.projects, shortcut)()

        assert last_spec(mock_request).query == {
            "status": status, "page": 1, "limit": 10,
            "sort_by": None, "sort_order": None,
        }
        assert page.data == []
        assert page.has_more is False

    @pytest.mark.asyncio
    async def test_get_returns_project(self, client, mock_request, project_data):
        mock_request.return_value = project_data

        project = await client.projects.get("proj_123")

        assert last_spec(mock_request).path == "/projects/proj_123"
        assert isinstance(project, Project)
        assert project.token_symbol == "MDP"
        assert project.raw["raised_xrp"] == "25000"

    @pytest.mark.asyncio
    async def test_get_unwraps_data_envelope(self, client, mock_request, project_data):
        mock_request.return_value = {"data": project_data}

        project = await client.projects.get("proj_123")

        assert project.id == "proj_123"

    @pytest.mark.asyncio
    async def test_create_and_update(self, client, mock_request, project_data):
        mock_request.return_value = project_data

        await client.projects.create(name="My DeFi Protocol", token_symbol="MDP")
        create_spec = last_spec(mock_request)
        await client.projects.update("proj_123", description="Updated")
        update_spec = last_spec(mock_request)

        assert create_spec.method is HttpMethod.POST
        assert create_spec.body == {"name": "My DeFi Protocol", "token_symbol": "MDP"}
        assert update_spec.method is HttpMethod.PATCH
        assert update_spec.path == "/projects/proj_123"
        assert update_spec.body == {"description": "Updated"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["launch", "pause", "resume", "cancel"])
    async def test_lifecycle_actions(self, client, mock_request, project_data, action):
        mock_request.return_value = project_data

        await getattr(client.projects, action)("proj_123")

        spec = last_spec(mock_request)
        assert spec.method is HttpMethod.POST
        assert spec.path == f"/projects/proj_123/{action}"
        assert spec.body == {}

    @pytest.mark.asyncio
    async def test_update_tiers_uses_put(self, client, mock_request):
        tiers = [{"tier": 1, "price_per_token": "0.001"}]

        await client.projects.update_tiers("proj_123", tiers)

        spec = last_spec(mock_request)
        assert spec.method is HttpMethod.PUT
        assert spec.path == "/projects/proj_123/tiers"
        assert spec.body == {"tiers": tiers}

    @pytest.mark.asyncio
    async def test_search(self, client, mock_request):
        mock_request.return_value = {"data": []}

        await client.projects.search("defi", status="active")

        spec = last_spec(mock_request)
        assert spec.path == "/projects/search"
        assert spec.query["q"] == "defi"
        assert spec.query["status"] == "active"

    @pytest.mark.asyncio
    async def test_featured_and_trending_return_lists(self, client, mock_request, project_data):
        mock_request.return_value = {"data": [project_data]}

        featured = await client.projects.featured()
        trending = await client.projects.trending(period="7d")

        assert [p.id for p in featured] == ["proj_123"]
        assert last_spec(mock_request).query == {"period": "7d", "limit": 10}
        assert len(trending) == 1

    @pytest.mark.asyncio
    async def test_featured_without_data_is_empty(self, client, mock_request):
        mock_request.return_value = {}

        assert await client.projects.featured() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [[{"id": "proj_123"}], "created", None])
    async def test_get_with_non_object_response_is_api_error(self, client, mock_request, response):
        mock_request.return_value = response

        with pytest.raises(ApiError, match="expected an object"):
            await client.projects.get("proj_123")

    @pytest.mark.asyncio
    async def test_list_tolerates_malformed_pagination(self, client, mock_request, project_data):
        mock_request.return_value = {
            "data": [project_data, "junk"],
            "pagination": {"page": None, "limit": "many", "total": None},
        }

        page = await client.projects.list()

        assert [p.id for p in page.data] == ["proj_123"]
        assert page.page == 1
        assert page.limit == 1
        assert page.total == 1
        assert page.has_more is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", ["unexpected", 42, {"data": "nope", "pagination": []}])
    async def test_list_with_unexpected_shape_is_empty_page(self, client, mock_request, response):
        mock_request.return_value = response

        page = await client.projects.list()

        assert page.data == []
        assert page.has_more is False

    @pytest.mark.asyncio
    async def test_trending_accepts_bare_list(self, client, mock_request, project_data):
        mock_request.return_value = [project_data, None]

        trending = await client.projects.trending()

        assert [p.id for p in trending] == ["proj_123"]

    @pytest.mark.asyncio
    async def test_investors_page(self, client, mock_request):
        mock_request.return_value = {
            "data": [{"address": "rInvestor1"}],
            "pagination": {"page": 2, "limit": 1, "total": 2},
        }

        page = await client.projects.investors("proj_123", page=2, limit=1)

        assert last_spec(mock_request).path == "/projects/proj_123/investors"
        assert page.data == [{"address": "rInvestor1"}]
        assert page.has_more is False


class TestInvestments:

    @pytest.mark.asyncio
    async def test_create_stringifies_amount(self, client, mock_request):
        await client.investments.create("proj_123", "100", investor_account="rWallet")

        spec = last_spec(mock_request)
        assert spec.method is HttpMethod.POST
        assert spec.path == "/investments"
        assert spec.body == {
            "project_id": "proj_123",
            "amount_xrp": "100",
            "investor_account": "rWallet",
        }

    @pytest.mark.asyncio
    async def test_by_project_and_investor(self, client, mock_request):
        mock_request.return_value = {"data": []}

        await client.investments.by_project("proj_123")
        assert last_spec(mock_request).path == "/projects/proj_123/investments"

        await client.investments.by_investor("rWallet")
        assert last_spec(mock_request).path == "/investors/rWallet/investments"

    @pytest.mark.asyncio
    async def test_simulate(self, client, mock_request):
        await client.investments.simulate("proj_123", "50")

        assert last_spec(mock_request).path == "/investments/simulate"


class TestAnalyticsAndWebhooks:

    @pytest.mark.asyncio
    async def test_analytics_export_payload(self, client, mock_request):
        await client.analytics.export("investments", start_date="2025-01-01")

        spec = last_spec(mock_request)
        assert spec.path == "/analytics/export"
        assert spec.body == {"type": "investments", "format": "csv", "start_date": "2025-01-01"}

    @pytest.mark.asyncio
    async def test_analytics_project_period(self, client, mock_request):
        await client.analytics.project("proj_123", period="7d")

        spec = last_spec(mock_request)
        assert spec.path == "/analytics/projects/proj_123"
        assert spec.query == {"period": "7d"}

    @pytest.mark.asyncio
    async def test_webhook_management(self, client, mock_request):
        await client.webhooks.create("https://example.com/hook", ["investment.created"])
        create_spec = last_spec(mock_request)
        await client.webhooks.delete("wh_1")
        delete_spec = last_spec(mock_request)

        assert create_spec.body == {
            "url": "https://example.com/hook",
            "events": ["investment.created"],
            "active": True,
        }
        assert delete_spec.method is HttpMethod.DELETE
        assert delete_spec.path == "/webhooks/wh_1"
