"""
XRPL.Sale Client - Python client for the XRPL.Sale token sale platform.

This package provides an asyncio client for the XRPL.Sale REST API
(projects, investments, analytics, webhooks, authentication) plus
webhook signature verification and aiohttp integration.

Example:
    from xrpl_sale import ClientConfig, XRPLSaleClient

    async with XRPLSaleClient(ClientConfig(api_key="your-api-key")) as client:
        projects = await client.projects.list(status="active")
"""

from .client import XRPLSaleClient, create_client
from .constants import PRODUCTION_URL, SIGNATURE_HEADER, TESTNET_URL, VERSION
from .http_client import (
    ApiError,
    AuthenticationError,
    ErrorKind,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from .middleware import DISPATCHER_KEY, WebhookDispatcher, setup_webhooks, webhook_middleware
from .models import (
    ClientConfig,
    Environment,
    HttpMethod,
    PaginatedResponse,
    Project,
    RequestSpec,
    RetryConfig,
    WebhookEvent,
)
from .webhooks import (
    WebhookError,
    WebhookParseError,
    WebhookVerificationError,
    parse_event,
    sign_payload,
    verify_signature,
)

__version__ = VERSION

# Module-level names matching the client methods
verify_webhook_signature = verify_signature
parse_webhook_event = parse_event

__all__ = [
    # Main Client
    "XRPLSaleClient",
    "create_client",
    # Configuration
    "ClientConfig",
    "Environment",
    "RetryConfig",
    "PRODUCTION_URL",
    "TESTNET_URL",
    # Requests and results
    "HttpMethod",
    "RequestSpec",
    "PaginatedResponse",
    "Project",
    # Errors
    "ApiError",
    "AuthenticationError",
    "ErrorKind",
    "NotFoundError",
    "RateLimitError",
    "ValidationError",
    # Webhooks
    "SIGNATURE_HEADER",
    "WebhookEvent",
    "WebhookError",
    "WebhookParseError",
    "WebhookVerificationError",
    "parse_event",
    "parse_webhook_event",
    "sign_payload",
    "verify_signature",
    "verify_webhook_signature",
    # aiohttp integration
    "DISPATCHER_KEY",
    "WebhookDispatcher",
    "setup_webhooks",
    "webhook_middleware",
]
