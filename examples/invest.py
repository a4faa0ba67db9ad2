#!/usr/bin/env python3
"""
Example: Authenticate with a wallet signature and invest in a project.

This example demonstrates how to:
1. Request an authentication challenge for an XRPL wallet
2. Exchange the signed challenge for a bearer token
3. Simulate an investment before submitting it
4. Handle typed API errors

The challenge must be signed by the wallet outside this script; pass the
signature on the command line.

Usage:
    python examples/invest.py <project_id> <amount_xrp> <wallet_address> <signature> <timestamp>
"""

import asyncio
import logging
import sys

from xrpl_sale import (
    AuthenticationError,
    RateLimitError,
    ValidationError,
    XRPLSaleClient,
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def main(project_id: str, amount_xrp: str, wallet: str, signature: str, timestamp: str):
    async with XRPLSaleClient.from_env() as client:
        try:
            session = await client.auth.authenticate(wallet, signature, timestamp)
        except AuthenticationError as e:
            logger.error(f"Wallet authentication failed: {e}")
            return

        client.auth_token = session["token"]
        logger.info(f"Authenticated as {wallet}")

        preview = await client.investments.simulate(project_id, amount_xrp)
        logger.info(f"Simulation: {preview}")

        try:
            investment = await client.investments.create(
                project_id, amount_xrp, investor_account=wallet
            )
        except ValidationError as e:
            logger.error(f"Investment rejected: {e} {e.details}")
            return
        except RateLimitError as e:
            logger.error(f"Rate limited, retry after {e.retry_after}s")
            return

        logger.info(f"Investment created: {investment}")


if __name__ == "__main__":
    if len(sys.argv) != 6:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(*sys.argv[1:]))
