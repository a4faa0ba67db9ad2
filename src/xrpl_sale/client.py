"""
XRPL.Sale Client - Main orchestration module.

The client follows state-first design with clean separation of concerns:
- Data models are immutable structures in models/
- HTTP operations are handled by http_client.py
- Session management is handled by session_manager.py
- API areas are implemented as services in services/
- Webhook verification and parsing live in webhooks.py

Example:
    async with XRPLSaleClient(ClientConfig(api_key="your-api-key")) as client:
        projects = await client.projects.list(status="active")
        investment = await client.investments.create(
            project_id="proj_123", amount_xrp="100"
        )
"""

import asyncio
import dataclasses
import logging
from typing import Any, Dict, Optional

from .constants import (
    DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAY, DEFAULT_TIMEOUT,
    ERROR_STATUS_CODE, SUCCESS_STATUS_CODE,
)
from .http_client import HttpClient
from .models import ClientConfig, Environment, HttpMethod, RequestSpec, RetryConfig, WebhookEvent
from .monitoring import PerformanceMonitor, Statistics
from .services import Analytics, Auth, Investments, Projects, Webhooks
from .session_manager import SessionManager
from .webhooks import Payload, parse_event, verify_signature

logger = logging.getLogger(__name__)


class XRPLSaleClient:
    """
    Main XRPL.Sale client orchestrator.

    Gives access to every platform service and to the raw HTTP verbs.
    One instance can be shared by concurrent tasks; the only mutable
    state is ``auth_token``.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        retry_config: Optional[RetryConfig] = None,
        **overrides: Any,
    ):
        """
        Initialize client with configuration.

        Args:
            config: Client configuration; built from ``overrides`` if omitted
            retry_config: Retry policy; derived from config if omitted
            **overrides: ClientConfig fields replacing values in ``config``
        """
        if config is None:
            config = ClientConfig(**overrides)
        elif overrides:
            config = dataclasses.replace(config, **overrides)

        self._config = config
        self._session_manager = SessionManager(config)
        self._http_client = HttpClient(config, retry_config)
        self._monitor = PerformanceMonitor()
        self._services: Dict[str, Any] = {}
        self._closed = False

        logger.info(
            f"XRPL.Sale client initialized for {config.environment.value} "
            f"({config.resolved_base_url})"
        )

    @classmethod
    def from_env(cls) -> "XRPLSaleClient":
        """Create client from XRPL_SALE_* environment variables."""
        return cls(ClientConfig.from_env())

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def auth_token(self) -> Optional[str]:
        """Bearer token used instead of the API key once set."""
        return self._http_client.auth_token

    @auth_token.setter
    def auth_token(self, token: Optional[str]) -> None:
        self._http_client.auth_token = token

    # Services
    @property
    def projects(self) -> Projects:
        return self._service("projects", Projects)

    @property
    def investments(self) -> Investments:
        return self._service("investments", Investments)

    @property
    def analytics(self) -> Analytics:
        return self._service("analytics", Analytics)

    @property
    def webhooks(self) -> Webhooks:
        return self._service("webhooks", Webhooks)

    @property
    def auth(self) -> Auth:
        return self._service("auth", Auth)

    def _service(self, name: str, service_cls):
        if name not in self._services:
            self._services[name] = service_cls(self)
        return self._services[name]

    # HTTP verbs
    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make a GET request; None-valued params are not sent."""
        return await self.request(RequestSpec(HttpMethod.GET, path, query=params))

    async def post(self, path: str, data: Any = None) -> Any:
        return await self.request(RequestSpec(HttpMethod.POST, path, body=_body(data)))

    async def put(self, path: str, data: Any = None) -> Any:
        return await self.request(RequestSpec(HttpMethod.PUT, path, body=_body(data)))

    async def patch(self, path: str, data: Any = None) -> Any:
        return await self.request(RequestSpec(HttpMethod.PATCH, path, body=_body(data)))

    async def delete(self, path: str) -> Any:
        return await self.request(RequestSpec(HttpMethod.DELETE, path))

    async def request(self, spec: RequestSpec) -> Any:
        """Execute a request with performance monitoring."""
        if self._closed:
            raise RuntimeError("Client is closed")

        start_time = asyncio.get_running_loop().time()
        session = await self._session_manager.create_session()

        try:
            result = await self._http_client.execute(session, spec)
        except Exception as e:
            status_code = getattr(e, "status_code", None) or ERROR_STATUS_CODE
            self._record(spec, status_code, start_time)
            raise

        self._record(spec, SUCCESS_STATUS_CODE, start_time)
        return result

    def _record(self, spec: RequestSpec, status_code: int, start_time: float) -> None:
        duration_ms = (asyncio.get_running_loop().time() - start_time) * 1000
        self._monitor.record_request(spec.path, spec.method.value, status_code, duration_ms)

    # Webhooks
    def verify_webhook_signature(
        self,
        payload: Payload,
        signature: Optional[str],
        secret: Optional[str] = None,
    ) -> bool:
        """Verify a webhook signature, defaulting to the configured secret."""
        return verify_signature(
            payload, signature, secret if secret is not None else self._config.webhook_secret
        )

    def parse_webhook_event(self, payload: Payload) -> WebhookEvent:
        """Parse a webhook payload. Verify it first if it is untrusted."""
        return parse_event(payload)

    # Monitoring and lifecycle
    def get_statistics(self) -> Statistics:
        return self._monitor.statistics

    @property
    def monitor(self) -> PerformanceMonitor:
        return self._monitor

    async def close(self) -> None:
        """Close client and cleanup resources."""
        if not self._closed:
            await self._session_manager.close_session()
            self._closed = True
            logger.info("XRPL.Sale client closed")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def _body(data: Any) -> Any:
    # Write verbs always send a JSON body, "{}" when there is no payload
    return {} if data is None else data


def create_client(
    api_key: Optional[str] = None,
    environment: Environment = Environment.PRODUCTION,
    base_url: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_retries: int = DEFAULT_MAX_RETRIES,
    retry_delay: float = DEFAULT_RETRY_DELAY,
    webhook_secret: Optional[str] = None,
    debug: bool = False,
) -> XRPLSaleClient:
    """
    Factory function to create a client with common configuration.

    Args:
        api_key: API key for authentication
        environment: "production" or "testnet"
        base_url: Custom base URL (overrides environment)
        timeout: Request timeout in seconds
        max_retries: Maximum number of retry attempts
        retry_delay: Initial delay between retries in seconds
        webhook_secret: Secret for webhook signature verification
        debug: Log requests and responses at DEBUG level

    Returns:
        Configured XRPLSaleClient instance
    """
    config = ClientConfig(
        api_key=api_key,
        environment=environment,
        base_url=base_url,
        timeout=timeout,
        max_retries=max_retries,
        retry_delay=retry_delay,
        webhook_secret=webhook_secret,
        debug=debug,
    )
    return XRPLSaleClient(config)
