"""
Session management for XRPL.Sale client.

One aiohttp session is shared by every request a client makes. It is
opened lazily on first use and reopened if a caller closed it.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from .constants import CONNECTION_LIMIT, CONNECTION_LIMIT_PER_HOST, DNS_CACHE_TTL
from .models.config import ClientConfig

logger = logging.getLogger(__name__)


class SessionManager:
    """Owns the aiohttp session behind an XRPLSaleClient."""

    def __init__(self, config: ClientConfig):
        self._config = config
        self._session: Optional[aiohttp.ClientSession] = None
        self._lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._session is not None and not self._session.closed

    async def create_session(self) -> aiohttp.ClientSession:
        """
        Return the shared session, opening it on first use.

        Concurrent first requests get the same session.
        """
        if self.is_open:
            return self._session

        async with self._lock:
            if not self.is_open:
                self._session = self._open()
        return self._session

    def _open(self) -> aiohttp.ClientSession:
        connector = aiohttp.TCPConnector(
            limit=CONNECTION_LIMIT,
            limit_per_host=CONNECTION_LIMIT_PER_HOST,
            ttl_dns_cache=DNS_CACHE_TTL,
        )
        # Credentials and content headers are set per request by HttpClient
        session = aiohttp.ClientSession(
            connector=connector,
            timeout=aiohttp.ClientTimeout(total=self._config.timeout),
        )
        logger.debug(
            f"Opened HTTP session for {self._config.resolved_base_url} "
            f"(timeout={self._config.timeout}s)"
        )
        return session

    async def close_session(self) -> None:
        """Close the session if one is open; safe to call repeatedly."""
        session, self._session = self._session, None
        if session is not None and not session.closed:
            await session.close()
            logger.debug("Closed HTTP session")
