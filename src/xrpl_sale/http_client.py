"""
HTTP client for XRPL.Sale API.

Handles request execution, retry logic, authentication, and response processing.
Follows pure core/impure edges principle with clean separation of concerns.
"""

import asyncio
import json
import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

import aiohttp
from aiohttp import ClientSession

from .constants import API_KEY_HEADER, USER_AGENT
from .models.config import ClientConfig, RetryConfig
from .models.request import RequestSpec
from .utils import encode_query, redact

logger = logging.getLogger(__name__)


class HttpClient:
    """HTTP client specialized for XRPL.Sale API interactions."""

    def __init__(
        self,
        config: ClientConfig,
        retry_config: Optional[RetryConfig] = None,
    ):
        """Initialize HTTP client with configuration."""
        self._config = config
        self._retry_config = retry_config or config.retry_config
        self._base_url = config.resolved_base_url
        # Bearer token from wallet authentication; overrides the API key once set
        self.auth_token: Optional[str] = None

    async def execute(self, session: ClientSession, spec: RequestSpec) -> Any:
        """Execute a request with retry logic and authentication."""
        url = f"{self._base_url}{spec.path}"
        headers = self._prepare_headers(spec)
        params = encode_query(spec.query)
        payload = json.dumps(spec.body).encode("utf-8") if spec.has_body else None

        if self._config.debug:
            self._log_request(spec, url, params, headers)

        return await self._execute_with_retry(
            session, spec.method.value, url, params, payload, headers
        )

    def _prepare_headers(self, spec: RequestSpec) -> Dict[str, str]:
        """Prepare request headers, including exactly one credential."""
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        if spec.has_body:
            headers["Content-Type"] = "application/json"

        token = self.auth_token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        elif self._config.api_key:
            headers[API_KEY_HEADER] = self._config.api_key

        return headers

    async def _execute_with_retry(
        self,
        session: ClientSession,
        method: str,
        url: str,
        params: Dict[str, str],
        payload: Optional[bytes],
        headers: Dict[str, str],
    ) -> Any:
        """Execute request, retrying transport failures and retryable statuses."""
        max_retries = self._retry_config.max_retries

        for attempt in range(max_retries + 1):
            try:
                status, body, response_headers = await self._send(
                    session, method, url, params, payload, headers
                )
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                if attempt == max_retries:
                    reason = str(e) or type(e).__name__
                    raise ApiError(f"Request failed: {reason}") from e
                await self._backoff(attempt, method, url, type(e).__name__)
                continue

            if self._config.debug:
                logger.debug(
                    f"<-- {status} {method} {url}: "
                    f"{body[:1000].decode('utf-8', errors='replace')}"
                )

            if status in self._retry_config.retry_on_status and attempt < max_retries:
                await self._backoff(attempt, method, url, f"HTTP {status}")
                continue

            return self._handle_response(status, body, response_headers)

        # Loop always returns or raises; kept for type checkers
        raise ApiError("Request failed after all retries")

    async def _send(
        self,
        session: ClientSession,
        method: str,
        url: str,
        params: Dict[str, str],
        payload: Optional[bytes],
        headers: Dict[str, str],
    ) -> Tuple[int, bytes, Mapping[str, str]]:
        """Issue a single HTTP request and read the whole raw body."""
        request_kwargs: Dict[str, Any] = {
            "method": method,
            "url": url,
            "headers": headers,
        }
        if params:
            request_kwargs["params"] = params
        if payload is not None:
            request_kwargs["data"] = payload

        async with session.request(**request_kwargs) as response:
            body = await response.read()
            return response.status, body, response.headers

    async def _backoff(self, attempt: int, method: str, url: str, reason: str) -> None:
        """Sleep before the next attempt with exponential backoff."""
        delay = self._retry_config.delay_for(attempt)
        logger.warning(
            f"{method} {url} failed ({reason}), retrying in {delay:.2f}s "
            f"(attempt {attempt + 1}/{self._retry_config.max_retries})"
        )
        await asyncio.sleep(delay)

    def _handle_response(
        self, status: int, body: bytes, headers: Mapping[str, str]
    ) -> Any:
        """Classify a terminal response into a result or a typed error."""
        if 200 <= status < 300:
            return self._parse_body(status, body)

        data = self._parse_error_body(body)
        message = _error_message(status, data)

        if status == 400:
            raise ValidationError(message, status_code=status, details=data)
        if status == 401:
            raise AuthenticationError(message, status_code=status, details=data)
        if status == 404:
            raise NotFoundError(message, status_code=status, details=data)
        if status == 429:
            raise RateLimitError(
                message,
                status_code=status,
                details=data,
                retry_after=_parse_retry_after(headers),
            )
        raise ApiError(message, status_code=status, details=data)

    def _parse_body(self, status: int, body: bytes) -> Any:
        """Decode a success body; empty bodies decode to an empty mapping."""
        if not body or not body.strip():
            return {}

        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ApiError(
                f"Invalid JSON response (Status {status}): {e}",
                status_code=status,
                details=body[:200].decode("utf-8", errors="replace"),
            ) from e

    def _parse_error_body(self, body: bytes) -> Any:
        """Decode an error body if it is JSON; keep it as text otherwise."""
        if not body or not body.strip():
            return None
        text = body.decode("utf-8", errors="replace")
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text[:200]

    def _log_request(
        self,
        spec: RequestSpec,
        url: str,
        params: Dict[str, str],
        headers: Dict[str, str],
    ) -> None:
        shown = dict(headers)
        if API_KEY_HEADER in shown:
            shown[API_KEY_HEADER] = redact(shown[API_KEY_HEADER])
        if "Authorization" in shown:
            shown["Authorization"] = "Bearer " + redact(self.auth_token)
        logger.debug(
            f"--> {spec.method.value} {url} params={params} headers={shown} "
            f"body={_redact_body(spec.body)!r}"
        )


def _error_message(status: int, data: Any) -> str:
    """Extract a human-readable message from an error body."""
    message = None
    if isinstance(data, dict):
        message = data.get("message")
        error = data.get("error")
        if not message and isinstance(error, dict):
            message = error.get("message")
        elif not message and isinstance(error, str):
            message = error
    return message or f"HTTP {status}"


_CREDENTIAL_KEYS = frozenset({"token", "signature", "secret"})


def _redact_body(body: Any) -> Any:
    """Copy of a request body with credential values masked for logging."""
    if isinstance(body, dict):
        return {
            key: redact(str(value)) if key in _CREDENTIAL_KEYS and value else _redact_body(value)
            for key, value in body.items()
        }
    if isinstance(body, list):
        return [_redact_body(item) for item in body]
    return body


def _parse_retry_after(headers: Mapping[str, str]) -> Optional[int]:
    """Read Retry-After in seconds; HTTP-date values are not interpreted."""
    value = headers.get("Retry-After") if headers else None
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class ErrorKind(Enum):
    """Classification of API failures."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    GENERIC = "generic"


class ApiError(Exception):
    """Base exception for XRPL.Sale API errors."""

    kind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"status_code={self.status_code!r}, message={self.message!r})"
        )


class ValidationError(ApiError):
    """Exception for rejected request payloads (400)."""
    kind = ErrorKind.VALIDATION


class AuthenticationError(ApiError):
    """Exception for missing or invalid credentials (401)."""
    kind = ErrorKind.AUTHENTICATION


class NotFoundError(ApiError):
    """Exception for absent resources (404)."""
    kind = ErrorKind.NOT_FOUND


class RateLimitError(ApiError):
    """Exception for throttled requests (429)."""
    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = 429,
        details: Any = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)
        self.retry_after = retry_after
