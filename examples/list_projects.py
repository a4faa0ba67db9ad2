#!/usr/bin/env python3
"""
Example: List active token sale projects and their statistics.

This example demonstrates how to:
1. Create a client from XRPL_SALE_* environment variables
2. Page through active projects
3. Fetch statistics for each project
4. Inspect client request statistics

Prerequisites:
- Set XRPL_SALE_API_KEY (and optionally XRPL_SALE_ENVIRONMENT=testnet)
- Install the package in development mode: pip install -e .

Usage:
    python examples/list_projects.py

Environment Variables:
    XRPL_SALE_API_KEY=your_api_key_here
    XRPL_SALE_ENVIRONMENT=testnet
"""

import asyncio
import logging

from xrpl_sale import ApiError, NotFoundError, XRPLSaleClient

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def print_section_header(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f" {title.upper()} ".center(70, "="))
    print("=" * 70)


def print_projects(projects):
    print(f"{'ID':<16} {'Name':<28} {'Symbol':<8} {'Status':<10} {'Supply':>14}")
    print("-" * 80)
    for project in projects:
        print(f"{project.id[:15]:<16} {project.name[:27]:<28} "
              f"{(project.token_symbol or '')[:7]:<8} {project.status[:9]:<10} "
              f"{project.total_supply or 'N/A':>14}")


async def main():
    async with XRPLSaleClient.from_env() as client:
        print_section_header("Active Projects")

        page_number = 1
        projects = []
        while True:
            page = await client.projects.active(page=page_number, limit=10)
            projects.extend(page.data)
            if not page.has_more:
                break
            page_number += 1

        if not projects:
            print("No active projects found.")
            return
        print_projects(projects)

        print_section_header("Project Statistics")
        for project in projects[:5]:
            try:
                stats = await client.projects.stats(project.id)
            except NotFoundError:
                logger.warning(f"No statistics for {project.id}")
                continue
            print(f"{project.name}: {stats}")

        stats = client.get_statistics()
        print_section_header("Client Statistics")
        print(f"Requests:     {stats.total_requests}")
        print(f"Failed:       {stats.failed_requests}")
        print(f"Avg latency:  {stats.avg_duration_ms:.1f} ms")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except ApiError as e:
        logger.error(f"API error ({e.kind.value}): {e}")
