"""Example usage of the async Quay API client."""

import asyncio
import logging
import os
import sys

# Add parent directory to path
sys.path.insert(0, "src")

from quay_api_client import QuayClient, QuayError, list_repositories

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

QUAY_URL = "https://quay.io/api/v1"
ORGANIZATION = "mycompany"


async def main(token: str):
    """List repositories and robot accounts of an organization."""
    try:
        logger.info("Listing repositories...")
        repos = await list_repositories(QUAY_URL, token, ORGANIZATION)
        logger.info(f"Found {len(repos)} repositories")
        for repo in repos[:5]:
            logger.info(f"  {repo.full_name} (last modified: {repo.last_modified})")

    except QuayError as e:
        logger.error(f"Quay error: {e}")


async def cleanup(token: str, prefix: str = "test-"):
    """Delete repositories and robots whose names start with ``prefix``.

    Runs the deletions concurrently over one shared client.
    """
    async with QuayClient(QUAY_URL, token) as client:
        try:
            repos, robots = await asyncio.gather(
                client.list_repositories(ORGANIZATION),
                client.list_robot_accounts(ORGANIZATION),
            )
        except QuayError as e:
            logger.error(f"Quay error: {e}")
            return

        tasks = [
            client.delete_repository(ORGANIZATION, repo.name)
            for repo in repos
            if repo.name.startswith(prefix)
        ]
        tasks += [
            client.delete_robot_account(ORGANIZATION, robot.short_name)
            for robot in robots
            if robot.short_name.startswith(prefix)
        ]

        results = await asyncio.gather(*tasks, return_exceptions=True)
        deleted = sum(1 for r in results if r is True)
        failed = [r for r in results if isinstance(r, Exception)]
        logger.info(f"Deleted {deleted} of {len(tasks)} resources")
        for error in failed:
            logger.error(f"  {error!r}")


if __name__ == "__main__":
    # We want to explode if the token isn't set.
    quay_token = os.environ["QUAY_TOKEN"]

    print("=== List Repositories ===")
    asyncio.run(main(quay_token))

    print("\n=== Cleanup Test Resources ===")
    asyncio.run(cleanup(quay_token))
