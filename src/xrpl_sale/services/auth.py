"""
Service for wallet-signature authentication.

The service never stores the returned token. Callers opt in to bearer
auth explicitly:

    challenge = await client.auth.challenge(address)
    result = await client.auth.authenticate(address, signed, challenge["timestamp"])
    client.auth_token = result["token"]
"""

from typing import Any, Dict, Union

from .base import BaseService


class Auth(BaseService):

    async def challenge(self, wallet_address: str) -> Dict[str, Any]:
        """Get a message for the wallet to sign."""
        return await self._client.post("/auth/challenge", {"wallet_address": wallet_address})

    async def authenticate(
        self,
        wallet_address: str,
        signature: str,
        timestamp: Union[int, str],
    ) -> Dict[str, Any]:
        """Exchange a signed challenge for a bearer token."""
        return await self._client.post("/auth/authenticate", {
            "wallet_address": wallet_address,
            "signature": signature,
            "timestamp": timestamp,
        })

    async def refresh(self, token: str) -> Dict[str, Any]:
        return await self._client.post("/auth/refresh", {"token": token})

    async def logout(self) -> Any:
        return await self._client.post("/auth/logout")
