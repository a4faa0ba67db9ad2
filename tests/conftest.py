# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing XRPL.Sale client.
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from xrpl_sale.client import XRPLSaleClient
from xrpl_sale.http_client import HttpClient
from xrpl_sale.models import ClientConfig


TEST_BASE_URL = "https://api.example.com/v1"
TEST_API_KEY = "test-api-key-1234567890"
TEST_WEBHOOK_SECRET = "whsec_test_secret"


def _make_response(
    status: int = 200,
    body: Any = "",
    headers: Optional[Dict[str, str]] = None,
) -> Mock:
    """Mock aiohttp response; dict/list bodies are JSON-encoded, bytes are sent raw."""
    response = Mock()
    response.status = status
    if isinstance(body, bytes):
        raw = body
    else:
        raw = (body if isinstance(body, str) else json.dumps(body)).encode("utf-8")
    response.read = AsyncMock(return_value=raw)
    response.headers = headers or {}
    return response


def _make_session(*outcomes) -> MagicMock:
    """
    Mock aiohttp ClientSession whose request() yields the given outcomes in order.

    Each outcome is either a mock response or an exception raised by the call.
    """
    session = MagicMock()
    side_effects = []
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            side_effects.append(outcome)
            continue
        context = MagicMock()
        context.__aenter__.return_value = outcome
        context.__aexit__.return_value = False
        side_effects.append(context)
    session.request.side_effect = side_effects
    return session


@pytest.fixture
def client_config() -> ClientConfig:
    """Config with an API key pointing at a test host."""
    return ClientConfig(
        api_key=TEST_API_KEY,
        base_url=TEST_BASE_URL,
        max_retries=3,
        retry_delay=1.0,
        webhook_secret=TEST_WEBHOOK_SECRET,
    )


@pytest.fixture
def http_client(client_config) -> HttpClient:
    return HttpClient(client_config)


@pytest.fixture
def client(client_config) -> XRPLSaleClient:
    """Client whose requests are intercepted by patching ``request``."""
    return XRPLSaleClient(client_config)


@pytest.fixture
def project_data() -> Dict[str, Any]:
    """Mock project response data."""
    return {
        "id": "proj_123",
        "name": "My DeFi Protocol",
        "status": "active",
        "token_symbol": "MDP",
        "total_supply": "100000000",
        "description": "Revolutionary DeFi protocol on XRPL",
        "sale_start_date": "2025-01-01T00:00:00Z",
        "sale_end_date": "2025-02-01T00:00:00Z",
        "raised_xrp": "25000",
    }


@pytest.fixture
def projects_page_data(project_data) -> Dict[str, Any]:
    """Mock paginated projects response."""
    return {
        "data": [project_data, dict(project_data, id="proj_456", name="Second")],
        "pagination": {"page": 1, "limit": 2, "total": 5},
    }


@pytest.fixture
def webhook_payload() -> str:
    """Raw investment.created webhook body."""
    return json.dumps({
        "id": "evt_001",
        "type": "investment.created",
        "timestamp": "2025-01-15T12:00:00Z",
        "data": {
            "investment_id": "inv_789",
            "project_id": "proj_123",
            "amount_xrp": "100",
        },
    })


@pytest.fixture
def make_response():
    """Factory for mock aiohttp responses."""
    return _make_response


@pytest.fixture
def make_session():
    """Factory for mock sessions replaying responses and errors."""
    return _make_session
